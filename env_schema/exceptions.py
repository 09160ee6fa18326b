"""
ABOUTME: Custom exception classes for environment schema loading
ABOUTME: Provides the aggregate configuration error and the single-value parse error
"""


class ConfigError(Exception):
    """Aggregate configuration error listing every failing variable."""

    def __init__(self, errors=None):
        """
        Initialize the error from an ordered list of per-variable diagnostics.

        Parameters:
            errors (list[str], optional): Diagnostics in the order the schema keys were processed.
        """
        self.errors = list(errors or [])
        super().__init__("\n".join(self.errors))


class ParseError(ValueError):
    """A single raw value could not be parsed."""

    pass
