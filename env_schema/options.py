"""
ABOUTME: Option descriptor describing how one environment variable is parsed
ABOUTME: Pairs an optional parser with an optional default value
"""

from typing import Any, Callable, Optional

from .exceptions import ParseError
from .result import Err, Ok, ParseResult


class _Missing:
    """Marker type for an option without a default."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class Option:
    """Schema entry for a single environment variable."""

    def __init__(
        self,
        parser: Optional[Callable[[Any], ParseResult]] = None,
        default: Any = MISSING,
    ):
        """
        Initialize the option.

        Parameters:
            parser (Callable, optional): Function turning the raw string into a ParseResult. Without one the raw string is used as is.
            default (Any, optional): Value used when the variable is absent or blank. None is a valid default; leave it unset to make the variable required.
        """
        self.parser = parser
        self.default = default

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def try_parse(self, raw) -> ParseResult:
        """
        Parse ``raw`` and return the outcome without raising.

        An exception escaping a hand-written parser becomes an Err carrying
        its message, so one bad variable never aborts a whole load.
        """
        if self.parser is None:
            return Ok(raw)
        try:
            return self.parser(raw)
        except Exception as e:
            return Err(str(e) or e.__class__.__name__)

    def parse(self, raw):
        """
        Parse ``raw`` and return the typed value.

        Raises:
            ParseError: If the parser rejects the value.
        """
        result = self.try_parse(raw)
        if not result.ok:
            raise ParseError(result.reason)
        return result.value

    def __repr__(self) -> str:
        parser_name = getattr(self.parser, "__name__", None) if self.parser else None
        return f"Option(parser={parser_name}, default={self.default!r})"
