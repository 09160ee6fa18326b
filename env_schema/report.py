"""
ABOUTME: Startup helpers that print configuration errors and stop the process
ABOUTME: Renders each diagnostic on a rich console and exits with a non-zero status
"""

import sys
from collections.abc import Mapping
from typing import Optional

from rich.console import Console

from .config import EnvConfig, parse_env
from .exceptions import ConfigError
from .options import Option


def print_config_error(error: ConfigError, console: Optional[Console] = None) -> None:
    """
    Print every diagnostic carried by ``error`` as a bullet list.

    Parameters:
        error (ConfigError): The aggregate error raised by ``parse_env``.
        console (Console, optional): Console to write to. Defaults to a stderr console.
    """
    if console is None:
        console = Console(stderr=True)
    console.print(f"❌ Configuration error ({len(error.errors)} problem(s)):")
    for message in error.errors:
        console.print(f"  • {message}", markup=False, highlight=False)


def load_or_exit(
    schema: Mapping[str, Option],
    env: Optional[Mapping[str, str]] = None,
    console: Optional[Console] = None,
) -> EnvConfig:
    """Load configuration, or print the errors and exit with status 1."""
    try:
        return parse_env(schema, env)
    except ConfigError as e:
        print_config_error(e, console)
        sys.exit(1)
