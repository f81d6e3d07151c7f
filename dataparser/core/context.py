"""
Parsing context: the path of descents taken to reach the value being parsed.

A context is a persistent linked list. Pushing a fragment returns a new
context that points at its parent, so sibling descents can start from the same
parent without seeing each other's fragments.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..security.exceptions import ParsingError
from ..utils.config import ParseConfig


@dataclass(frozen=True)
class ParsingCtx:
    """Immutable chain of location fragments, innermost first."""

    fragment: Optional[str] = None
    parent: Optional["ParsingCtx"] = field(default=None, repr=False)
    depth: int = 0
    config: ParseConfig = field(default_factory=ParseConfig, repr=False, compare=False)

    def __iter__(self) -> Iterator[str]:
        ctx: Optional[ParsingCtx] = self
        while ctx is not None and ctx.depth > 0:
            yield ctx.fragment  # type: ignore[misc]
            ctx = ctx.parent

    def __call__(self) -> list[str]:
        return self.fragments()

    def fragments(self) -> list[str]:
        """Return the fragments, most recently pushed first."""
        return list(self)

    def push(self, fragment: str) -> "ParsingCtx":
        """Return a new context with ``fragment`` prepended."""
        return ParsingCtx(
            fragment=fragment, parent=self, depth=self.depth + 1, config=self.config
        )


def new_parsing_ctx(config: Optional[ParseConfig] = None) -> ParsingCtx:
    """Create an empty context for a new top-level parse."""
    return ParsingCtx(config=config or ParseConfig())


def push_to_ctx(ctx: ParsingCtx, fragment: str) -> ParsingCtx:
    """Derive a context with ``fragment`` added; ``ctx`` is left untouched."""
    return ctx.push(fragment)


def error(message: str, ctx: Optional[ParsingCtx]) -> ParsingError:
    """Build a ParsingError annotated with the location path in ``ctx``."""
    return ParsingError(message, ctx.fragments() if ctx is not None else ())
