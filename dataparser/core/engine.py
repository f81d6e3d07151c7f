"""
Entry point for running a parser against an untyped value.
"""

import logging
from typing import Optional, TypeVar

from ..security.exceptions import DataParserError
from ..utils.config import ParseConfig
from .context import new_parsing_ctx
from .parser_base import ParserLike, as_parser

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def run_parser(parser: ParserLike, value: T, config: Optional[ParseConfig] = None) -> U:
    """
    Parse ``value`` with ``parser`` starting from a fresh, empty context.

    Args:
        parser: The parser to run.
        value: Untyped input, e.g. the result of ``json.loads``.
        config: Parse options; defaults to ``ParseConfig.default()``, which
            enforces no structural limits.

    Returns:
        The parsed value.

    Raises:
        ParsingError: If the value does not match the parser.
        SecurityError: If ``config`` sets limits and the value exceeds them.
    """
    config = config or ParseConfig.default()
    ctx = new_parsing_ctx(config)
    try:
        return as_parser(parser)(value, ctx)
    except DataParserError as e:
        config.get_logger(__name__).debug("Parse failed: %s", e)
        raise
