"""
ABOUTME: Declarative environment variable configuration loader
ABOUTME: Parses process environment state against a typed schema and reports every error at once
"""

from .config import EnvConfig, parse_env
from .exceptions import ConfigError, ParseError
from .options import MISSING, Option
from .parsers import Env
from .report import load_or_exit, print_config_error
from .result import Err, Ok, ParseResult

__version__ = "0.1.0"
__all__ = [
    "parse_env",
    "load_or_exit",
    "print_config_error",
    "EnvConfig",
    "Env",
    "Option",
    "MISSING",
    "ConfigError",
    "ParseError",
    "Ok",
    "Err",
    "ParseResult",
]
