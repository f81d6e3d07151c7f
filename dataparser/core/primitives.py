"""
Primitive parsers: leaf conversions from untyped values to concrete types.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar
from urllib.parse import SplitResult, urlsplit

from . import constants
from .context import ParsingCtx, error
from .parser_base import Parser

U = TypeVar("U")


def _parse_string(value: Any, ctx: ParsingCtx) -> str:
    if isinstance(value, str):
        return value
    raise error(constants.NOT_A_STRING.format(value=value), ctx)


def _parse_number(value: Any, ctx: ParsingCtx) -> float:
    # bool is an int subclass but never a number here
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    raise error(constants.NOT_A_NUMBER.format(value=value), ctx)


def _parse_boolean(value: Any, ctx: ParsingCtx) -> bool:
    if isinstance(value, bool):
        return value
    raise error(constants.NOT_A_BOOLEAN.format(value=value), ctx)


def _parse_identity(value: Any, _ctx: ParsingCtx) -> Any:
    return value


def _parse_iso_datetime(text: str) -> datetime:
    """Parse an ISO-8601 string, accepting a trailing ``Z`` for UTC."""
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _parse_date_time(value: Any, ctx: ParsingCtx) -> datetime:
    text = _parse_string(value, ctx)
    try:
        parsed = _parse_iso_datetime(text)
    except ValueError:
        parsed = None
    if parsed is not None:
        comparable = parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
        if comparable > constants.ZERO_DATE:
            return parsed
    raise error(constants.NOT_A_DATE_TIME.format(value=value), ctx)


def _parse_record(value: Any, ctx: ParsingCtx) -> Mapping:
    if isinstance(value, Mapping):
        return value
    raise error(constants.NOT_AN_OBJECT.format(value=value), ctx)


def _special_url_host(parts: SplitResult) -> Optional[str]:
    """Host of a special-scheme URL, also read from ``https:host/path`` forms."""
    if parts.netloc:
        return parts.hostname
    # Special schemes take the authority from the path when slashes are missing
    authority = parts.path.lstrip("/\\").split("/", 1)[0].split("\\", 1)[0]
    if not authority:
        return None
    reparsed = urlsplit(f"//{authority}")
    _ = reparsed.port
    return reparsed.hostname


def _is_valid_url(text: str) -> bool:
    """Check that ``text`` is an absolute URL with a usable scheme."""
    try:
        parts = urlsplit(text)
        # Accessing the port validates it
        _ = parts.port
        if not parts.scheme:
            return False
        if parts.scheme.lower() in constants.SPECIAL_URL_SCHEMES:
            return bool(_special_url_host(parts))
    except ValueError:
        return False
    return True


def _parse_url(value: Any, ctx: ParsingCtx) -> str:
    text = _parse_string(value, ctx)
    if not _is_valid_url(text):
        raise error(constants.INVALID_URL.format(value=text), ctx)
    return text


string: Parser[Any, str] = Parser(_parse_string, "string")
number: Parser[Any, float] = Parser(_parse_number, "number")
boolean: Parser[Any, bool] = Parser(_parse_boolean, "boolean")
date_time: Parser[Any, datetime] = Parser(_parse_date_time, "date_time")
identity: Parser[Any, Any] = Parser(_parse_identity, "identity")
unknown: Parser[Any, Any] = Parser(_parse_identity, "unknown")
record: Parser[Any, Mapping] = Parser(_parse_record, "record")
url: Parser[Any, str] = Parser(_parse_url, "url")


def constant(x: U) -> Parser[Any, U]:
    """Parser that ignores its input and always returns ``x``."""

    def _constant(_value: Any, _ctx: ParsingCtx) -> U:
        return x

    return Parser(_constant, f"constant({x!r})")
