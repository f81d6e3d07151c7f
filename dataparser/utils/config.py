"""
Configuration and limits for dataparser.

This module defines structural limits and the options that apply to a single
call of ``run_parser``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class StructureLimits:
    """Structure complexity limits for parsed input."""
    max_nesting_depth: int = 100
    max_array_items: int = 100000


_STRUCTURE_LIMIT_ARGS = ("max_nesting_depth", "max_array_items")


class ParseLimits:
    """Limits applied while descending into nested input."""

    def __init__(
        self,
        *,
        structure_limits: Optional[StructureLimits] = None,
        **flat_args: Any,
    ):
        unknown = set(flat_args) - set(_STRUCTURE_LIMIT_ARGS)
        if unknown:
            raise TypeError(f"Unknown limit arguments: {', '.join(sorted(unknown))}")

        if structure_limits is not None:
            self.structure_limits = structure_limits
        elif flat_args:
            self.structure_limits = StructureLimits(**flat_args)
        else:
            self.structure_limits = StructureLimits()

        for name in _STRUCTURE_LIMIT_ARGS:
            if getattr(self.structure_limits, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @property
    def max_nesting_depth(self) -> int:
        """Maximum number of nested object/array descents."""
        return self.structure_limits.max_nesting_depth

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an input sequence."""
        return self.structure_limits.max_array_items

    def __repr__(self) -> str:
        return f"ParseLimits(structure_limits={self.structure_limits!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseLimits):
            return NotImplemented
        return self.structure_limits == other.structure_limits

    def __hash__(self) -> int:
        return hash(self.structure_limits)


@dataclass(frozen=True)
class ParseConfig:
    """
    Options for a single parse.

    Args:
        limits: Structural limits to enforce, or ``None`` to disable them.
        logger: Logger used for diagnostics instead of the module loggers.
    """

    limits: Optional[ParseLimits] = None
    logger: Optional[logging.Logger] = field(default=None, compare=False)

    @classmethod
    def default(cls) -> "ParseConfig":
        """Configuration used by ``run_parser`` when none is given; no limits."""
        return cls(limits=None)

    @classmethod
    def unlimited(cls) -> "ParseConfig":
        """Configuration with every structural limit disabled."""
        return cls(limits=None)

    @classmethod
    def limited(cls, **limit_args: Any) -> "ParseConfig":
        """Configuration enforcing ``ParseLimits(**limit_args)``."""
        return cls(limits=ParseLimits(**limit_args))

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger, falling back to the named module logger."""
        return self.logger or logging.getLogger(name)
