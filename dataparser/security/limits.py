"""
Structural limits for dataparser.
This module rejects input that would nest or fan out beyond the configured limits.
"""

import logging
from typing import Iterable, Optional

from ..utils.config import ParseLimits
from .exceptions import SecurityError

logger = logging.getLogger(__name__)


class LimitValidator:
    """
    Validates structural limits against a parsing context.

    The validator holds no per-parse state: nesting depth comes from the
    context, so one instance can be shared across concurrent parses. The
    ``path`` arguments are only iterated when a limit is exceeded.
    """

    def __init__(self, limits: ParseLimits, log: Optional[logging.Logger] = None):
        self.limits = limits
        self.logger = log or logger

    def _reject(self, message: str, path: Iterable[str]) -> SecurityError:
        err = SecurityError(message, path)
        self.logger.warning("Structural limit exceeded: %s", err)
        return err

    def validate_depth(self, depth: int, path: Iterable[str] = ()) -> None:
        """Validate that a descent to ``depth`` is within limits."""
        if depth > self.limits.max_nesting_depth:
            raise self._reject(
                f"Nesting depth {depth} exceeds limit {self.limits.max_nesting_depth}",
                path,
            )

    def validate_array_items(self, item_count: int, path: Iterable[str] = ()) -> None:
        """Validate that array item count is within limits."""
        if item_count > self.limits.max_array_items:
            raise self._reject(
                f"Array item count {item_count} exceeds limit "
                f"{self.limits.max_array_items}",
                path,
            )
