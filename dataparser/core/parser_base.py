"""
Base parser object shared by every primitive and combinator.
"""

from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar, Union

from .context import ParsingCtx

if TYPE_CHECKING:
    from ..utils.config import ParseConfig

T = TypeVar("T")
U = TypeVar("U")

ParseFn = Callable[[T, ParsingCtx], U]


class Parser(Generic[T, U]):
    """
    Immutable, stateless transformation from an input value to a typed result.

    A parser wraps a function ``fn(value, ctx)`` that either returns the
    converted value or raises ``ParsingError``. Parsers hold no per-parse state
    and can be shared freely between parses and threads.
    """

    __slots__ = ("_fn", "name")

    def __init__(self, fn: ParseFn, name: Optional[str] = None):
        object.__setattr__(self, "_fn", fn)
        object.__setattr__(self, "name", name or getattr(fn, "__name__", "parser"))

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __call__(self, value: T, ctx: ParsingCtx) -> U:
        return self._fn(value, ctx)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def run(self, value: T, config: Optional["ParseConfig"] = None) -> U:
        """Parse ``value`` from a fresh context."""
        # Import here to avoid circular imports
        from .engine import run_parser  # pylint: disable=import-outside-toplevel

        return run_parser(self, value, config)


ParserLike = Union[Parser[T, U], ParseFn]


def as_parser(parser: ParserLike) -> Parser:
    """Wrap a plain ``(value, ctx)`` callable as a Parser."""
    if isinstance(parser, Parser):
        return parser
    if not callable(parser):
        raise TypeError(f"Expected a parser, got {parser!r}")
    return Parser(parser)


def parser_name(parser: ParserLike) -> str:
    """Readable name of a parser or parse function, used in reprs."""
    return getattr(parser, "name", None) or getattr(parser, "__name__", "parser")
