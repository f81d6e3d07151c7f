"""
dataparser Core Parsing Engine.

This module provides the parser object, the parsing context, the primitive
parsers and the combinators.
"""

from .combinators import (
    alt, compose, fail, fail_with, lift, map_, nullable, optional,
    post_condition, pre_condition, with_default,
)
from .constants import ABSENT, Absent, is_absent
from .context import ParsingCtx, error, new_parsing_ctx, push_to_ctx
from .engine import run_parser
from .parser_base import Parser, as_parser
from .primitives import (
    boolean, constant, date_time, identity, number, record, string, unknown, url,
)
from .structures import array, object_

__all__ = [
    'run_parser', 'Parser', 'as_parser',
    'ParsingCtx', 'new_parsing_ctx', 'push_to_ctx', 'error',
    'ABSENT', 'Absent', 'is_absent',
    'string', 'number', 'boolean', 'date_time', 'identity', 'unknown',
    'record', 'url', 'constant',
    'object_', 'array',
    'map_', 'lift', 'compose', 'optional', 'nullable', 'with_default',
    'pre_condition', 'post_condition', 'fail', 'fail_with', 'alt',
]
