"""
Exception types for dataparser.

Every failure raised by a parser funnels through these classes so callers can
catch a single base type.
"""

from typing import Iterable, Optional


class DataParserError(Exception):
    """Base exception for all dataparser errors."""

    def __init__(self, message: str, path: Optional[Iterable[str]] = None):
        self.base_message = message
        self.path: tuple[str, ...] = tuple(path) if path is not None else ()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Append each path fragment, innermost first."""
        return self.base_message + "".join(f" in {fragment}" for fragment in self.path)

    @property
    def message(self) -> str:
        """Full message including the location path."""
        return str(self)


class ParsingError(DataParserError):
    """Raised when a value does not match the shape a parser expects."""


class SecurityError(DataParserError):
    """Raised when input exceeds the configured structural limits."""
