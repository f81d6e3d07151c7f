"""
Combinators for building parsers out of other parsers.

Covers transformation (map_, lift, compose), optionality (optional, nullable,
with_default), validation (pre_condition, post_condition), and alternation
(alt) plus explicit failure (fail, fail_with).
"""

from typing import Any, Callable, Optional, TypeVar, Union

from ..security.exceptions import ParsingError
from . import constants
from .context import ParsingCtx, error
from .parser_base import Parser, ParserLike, as_parser, parser_name

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Predicate = Callable[[Any], Optional[str]]


def map_(parser: ParserLike, f: Callable[[U], V]) -> Parser[Any, V]:
    """Apply ``parser``, then the total function ``f`` to its result."""
    inner = as_parser(parser)

    def _map(value: Any, ctx: ParsingCtx) -> V:
        return f(inner(value, ctx))

    return Parser(_map, f"map({parser_name(inner)})")


def lift(f: Callable[[T], U]) -> Parser[T, U]:
    """Wrap a plain total function as a parser that ignores the context."""

    def _lift(value: T, _ctx: ParsingCtx) -> U:
        return f(value)

    return Parser(_lift, f"lift({getattr(f, '__name__', 'function')})")


def compose(first: ParserLike, *rest: ParserLike) -> Parser[Any, Any]:
    """
    Chain parsers so that each one's output feeds the next.

    The same context is threaded through every stage.
    """
    stages = [as_parser(first), *(as_parser(p) for p in rest)]

    def _compose(value: Any, ctx: ParsingCtx) -> Any:
        for stage in stages:
            value = stage(value, ctx)
        return value

    return Parser(_compose, " >> ".join(parser_name(s) for s in stages))


def optional(parser: ParserLike) -> Parser[Any, Any]:
    """Return ``ABSENT`` for absent input, otherwise delegate to ``parser``."""
    inner = as_parser(parser)

    def _optional(value: Any, ctx: ParsingCtx) -> Any:
        if value is constants.ABSENT:
            return constants.ABSENT
        return inner(value, ctx)

    return Parser(_optional, f"optional({parser_name(inner)})")


def nullable(parser: ParserLike) -> Parser[Any, Any]:
    """Return ``None`` for null input, otherwise delegate to ``parser``."""
    inner = as_parser(parser)

    def _nullable(value: Any, ctx: ParsingCtx) -> Any:
        if value is None:
            return None
        return inner(value, ctx)

    return Parser(_nullable, f"nullable({parser_name(inner)})")


def with_default(parser: ParserLike, default: Union[U, Callable[[], U]]) -> Parser[Any, U]:
    """
    Replace an absent or null result with ``default``.

    A callable ``default`` is treated as a zero-argument supplier and called
    each time a default is needed.
    """
    inner = as_parser(parser)

    def _with_default(value: Any, ctx: ParsingCtx) -> U:
        result = inner(value, ctx)
        if result is None or result is constants.ABSENT:
            return default() if callable(default) else default
        return result

    return Parser(_with_default, f"with_default({parser_name(inner)})")


def pre_condition(parser: ParserLike, pred: Predicate) -> Parser[Any, Any]:
    """Check ``pred`` against the input before running ``parser``.

    ``pred`` returns ``None`` to accept the input or a failure message.
    """
    inner = as_parser(parser)

    def _pre_condition(value: Any, ctx: ParsingCtx) -> Any:
        message = pred(value)
        if message is not None:
            raise error(message, ctx)
        return inner(value, ctx)

    return Parser(_pre_condition, f"pre_condition({parser_name(inner)})")


def post_condition(parser: ParserLike, pred: Predicate) -> Parser[Any, Any]:
    """Check ``pred`` against the result of ``parser``.

    ``pred`` returns ``None`` to accept the result or a failure message.
    """
    inner = as_parser(parser)

    def _post_condition(value: Any, ctx: ParsingCtx) -> Any:
        result = inner(value, ctx)
        message = pred(result)
        if message is not None:
            raise error(message, ctx)
        return result

    return Parser(_post_condition, f"post_condition({parser_name(inner)})")


def fail(message: Union[str, Callable[[Any], str]]) -> Parser[Any, Any]:
    """Parser that always fails, with a fixed message or one computed from the input."""
    if callable(message):
        return fail_with(message)

    def _fail(_value: Any, ctx: ParsingCtx) -> Any:
        raise error(message, ctx)

    return Parser(_fail, "fail")


def fail_with(f: Callable[[Any], str]) -> Parser[Any, Any]:
    """Parser that always fails with the message ``f(value)``."""

    def _fail_with(value: Any, ctx: ParsingCtx) -> Any:
        raise error(f(value), ctx)

    return Parser(_fail_with, "fail_with")


def alt(*parsers: ParserLike) -> Parser[Any, Any]:
    """
    Try each parser in order and return the first success.

    Every alternative sees the original input and context. When all of them
    fail, the last ParsingError is raised; with no alternatives at all the parse
    fails with "Unexpected data". Errors other than ParsingError propagate
    immediately.
    """
    options = [as_parser(p) for p in parsers]

    def _alt(value: Any, ctx: ParsingCtx) -> Any:
        log = ctx.config.get_logger(__name__)
        last_error: Optional[ParsingError] = None
        for option in options:
            try:
                return option(value, ctx)
            except ParsingError as e:
                log.debug("Alternative %s rejected input: %s", option.name, e)
                last_error = e
        if last_error is not None:
            raise last_error
        raise error(constants.UNEXPECTED_DATA, ctx)

    return Parser(_alt, f"alt({', '.join(parser_name(o) for o in options)})")
