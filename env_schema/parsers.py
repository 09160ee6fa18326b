"""
ABOUTME: Factories producing option descriptors for common value types
ABOUTME: Covers strings, numbers, booleans, enums, guarded JSON, arrays and nullable wrappers
"""

import json as jsonlib
import logging
import math
from typing import Any, Callable, Optional, Sequence

from .options import MISSING, Option
from .result import Err, Ok, ParseResult

Guard = Callable[[Any], bool]


def string(default: Any = MISSING) -> Option:
    """Plain string option; never fails."""

    def parse_string(val: str) -> ParseResult:
        return Ok(val)

    return Option(parse_string, default)


def number(
    min: Optional[float] = None,
    max: Optional[float] = None,
    default: Any = MISSING,
) -> Option:
    """
    Float option with optional inclusive bounds.

    Parameters:
        min (float, optional): Smallest accepted value.
        max (float, optional): Largest accepted value.
        default (float, optional): Value used when the variable is absent or blank.

    Returns:
        Option: Descriptor whose parser yields a float.
    """

    def parse_number(val: str) -> ParseResult:
        try:
            f = float(val)
        except ValueError:
            return Err(f"Value is not a number: {val}")
        if math.isnan(f):
            return Err(f"Value is not a number: {val}")
        if min is not None and f < min:
            return Err(f"Value is less than minimum value: {min}")
        if max is not None and f > max:
            return Err(f"Value is more than maximum value: {max}")
        return Ok(f)

    return Option(parse_number, default)


def integer(
    min: Optional[int] = None,
    max: Optional[int] = None,
    default: Any = MISSING,
) -> Option:
    """Base-10 integer option with optional inclusive bounds."""

    def parse_integer(val: str) -> ParseResult:
        try:
            i = int(val)
        except ValueError:
            return Err(f"Value is not an integer: {val}")
        if min is not None and i < min:
            return Err(f"Value is less than minimum value: {min}")
        if max is not None and i > max:
            return Err(f"Value is more than maximum value: {max}")
        return Ok(i)

    return Option(parse_integer, default)


def boolean(default: Any = MISSING) -> Option:
    """
    Boolean option.

    Accepts "true" or "1" for True and "false" or "0" for False. The words are
    matched case-insensitively.
    """

    def parse_boolean(val: str) -> ParseResult:
        if val.lower() == "true" or val == "1":
            return Ok(True)
        if val.lower() == "false" or val == "0":
            return Ok(False)
        return Err(f"Value is not a boolean: {val}")

    return Option(parse_boolean, default)


def enum(values: Sequence[str], default: Any = MISSING) -> Option:
    """
    Option restricted to a fixed set of strings.

    Matching is case-insensitive and the canonical spelling from ``values`` is
    returned.

    Parameters:
        values (Sequence[str]): Allowed values, in order. Must not be empty.
        default (str, optional): Value used when the variable is absent or blank.

    Raises:
        ValueError: If ``values`` is empty.
    """
    allowed = list(values)
    if not allowed:
        raise ValueError("enum option requires at least one allowed value")

    def parse_enum(val: str) -> ParseResult:
        lower = val.lower()
        for original in allowed:
            if original.lower() == lower:
                return Ok(original)
        return Err(f"Value does not belong to any of the following: {','.join(allowed)}")

    return Option(parse_enum, default)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _load_json(val: str) -> ParseResult:
    """Decode strict JSON; NaN and Infinity literals are rejected."""
    try:
        return Ok(jsonlib.loads(val, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as e:
        return Err(f"Value is not valid JSON: {e}")


def _passes(guard: Guard, obj: Any) -> bool:
    try:
        return bool(guard(obj))
    except Exception as e:
        logging.debug(f"Type guard raised {e.__class__.__name__}: {e}")
        return False


def json(guard: Guard, default: Any = MISSING) -> Option:
    """
    JSON option checked by a caller-supplied type guard.

    A guard that raises is treated as rejecting the value.

    Parameters:
        guard (Callable[[Any], bool]): Predicate the decoded value must satisfy.
        default (Any, optional): Value used when the variable is absent or blank.
    """

    def parse_json(val: str) -> ParseResult:
        decoded = _load_json(val)
        if not decoded.ok:
            return decoded
        if _passes(guard, decoded.value):
            return decoded
        return Err("Value did not parse properly.")

    return Option(parse_json, default)


def array(guard: Guard, default: Any = MISSING) -> Option:
    """JSON array option whose every element must satisfy ``guard``."""

    def parse_array(val: str) -> ParseResult:
        decoded = _load_json(val)
        if not decoded.ok:
            return decoded
        if not isinstance(decoded.value, list):
            return Err("Array did not parse properly: value is not an array.")
        for index, item in enumerate(decoded.value):
            if not _passes(guard, item):
                return Err(
                    f"Array did not parse properly: element {index} has the wrong type."
                )
        return decoded

    return Option(parse_array, default)


def _is_str(obj: Any) -> bool:
    return isinstance(obj, str)


def string_array(default: Any = MISSING) -> Option:
    """JSON array of strings."""
    return array(_is_str, default)


def nullable(inner: Option) -> Option:
    """
    Wrap ``inner`` so that an absent variable resolves to None.

    The default is always None, whatever default ``inner`` carries. Present
    values are delegated to the inner parser and its failures pass through
    unchanged.
    """

    def parse_nullable(val: Optional[str]) -> ParseResult:
        if val is None:
            return Ok(None)
        return inner.try_parse(val)

    return Option(parse_nullable, None)


def custom(func: Callable[[str], Any], default: Any = MISSING) -> Option:
    """
    Option built from a plain conversion function.

    ``func`` signals a bad value by raising ValueError or TypeError; the
    exception message becomes the failure reason.
    """

    def parse_custom(val: str) -> ParseResult:
        try:
            return Ok(func(val))
        except (ValueError, TypeError) as e:
            return Err(str(e) or e.__class__.__name__)

    parse_custom.__name__ = getattr(func, "__name__", parse_custom.__name__)
    return Option(parse_custom, default)


class Env:
    """Namespace grouping the option factories."""

    string = staticmethod(string)
    number = staticmethod(number)
    integer = staticmethod(integer)
    boolean = staticmethod(boolean)
    enum = staticmethod(enum)
    json = staticmethod(json)
    array = staticmethod(array)
    string_array = staticmethod(string_array)
    nullable = staticmethod(nullable)
    custom = staticmethod(custom)
