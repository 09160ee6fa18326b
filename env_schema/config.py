"""
ABOUTME: Schema-driven loading of configuration from environment variables
ABOUTME: Parses every variable, collects all failures and raises them together
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Dict, Optional

from .exceptions import ConfigError
from .options import Option


class EnvConfig(Mapping):
    """
    Read-only view over parsed configuration values.

    Values are reachable as items (``cfg["PORT"]``) or attributes
    (``cfg.PORT``). Keys that collide with mapping methods such as ``get``,
    ``keys``, ``items``, ``values`` or ``to_dict`` are only reachable as items.
    """

    def __init__(self, values: Dict[str, Any]):
        self._values = dict(values)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails
        try:
            return self.__dict__["_values"][name]
        except KeyError:
            raise AttributeError(f"No configuration value named '{name}'") from None

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dict copy of the values."""
        return dict(self._values)

    def __repr__(self) -> str:
        return f"EnvConfig({self._values!r})"


def parse_env(
    schema: Mapping[str, Option], env: Optional[Mapping[str, str]] = None
) -> EnvConfig:
    """
    Parse and validate environment variables described by ``schema``.

    Each key is looked up in ``env``. A present, non-blank value goes through
    the option's parser; an absent or blank value falls back to the option's
    default. Every failure is collected before anything is raised, so one
    call reports all misconfigured variables.

    Parameters:
        schema (Mapping[str, Option]): Variable names mapped to their option descriptors.
        env (Mapping[str, str], optional): Source of raw values. Defaults to ``os.environ``, read one key at a time with no snapshot across keys.

    Returns:
        EnvConfig: Parsed values keyed like ``schema``.

    Raises:
        ConfigError: If any variable is missing or fails to parse.
        TypeError: If a schema entry is not an Option.
    """
    if env is None:
        env = os.environ

    values: Dict[str, Any] = {}
    errors = []

    for key, option in schema.items():
        if not isinstance(option, Option):
            raise TypeError(
                f"Schema entry for '{key}' must be an Option, got {type(option).__name__}"
            )

        raw = env.get(key)
        if raw is not None and raw.strip() != "":
            result = option.try_parse(raw)
            if result.ok:
                values[key] = result.value
            else:
                errors.append(
                    f'failed to parse environment variable {key}: "{result.reason}"'
                )
        elif option.has_default:
            logging.debug(f"Using default for {key}")
            values[key] = option.default
        else:
            errors.append(f"Environment variable {key} is missing")

    if errors:
        logging.warning(f"Configuration failed with {len(errors)} error(s)")
        raise ConfigError(errors)

    logging.debug(f"Loaded {len(values)} configuration value(s)")
    return EnvConfig(values)
