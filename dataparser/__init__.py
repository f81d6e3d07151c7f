"""
dataparser - Composable parsers that turn untyped data into validated values.

dataparser converts arbitrary untyped input (the result of ``json.loads``, form
data, or any other externally supplied value) into typed values, and raises
errors that say exactly where in the input a mismatch was found.

Key Features:
- Primitive parsers: string, number, boolean, date_time, record, url, ...
- Structural combinators for objects and arrays
- Transformation, optionality, validation and alternation combinators
- Error messages annotated with the path to the failing value
- Opt-in structural limits to reject adversarially deep or wide input

Quick Start:
    import dataparser as dp

    user = dp.object({
        "name": dp.string,
        "age": dp.optional(dp.number),
        "tags": dp.with_default(dp.optional(dp.array(dp.string)), list),
    })
    dp.run_parser(user, {"name": "Ada", "tags": ["admin"]})
    # {'name': 'Ada', 'tags': ['admin']}

    dp.run_parser(user, {"name": "Ada", "tags": ["admin", 7]})
    # ParsingError: Value 7 is not a string in array at index 1
    #               in object property tags
"""

from .core.combinators import (
    alt, compose, fail, fail_with, lift, map_, nullable, optional,
    post_condition, pre_condition, with_default,
)
from .core.constants import ABSENT, Absent, is_absent
from .core.context import ParsingCtx, error, new_parsing_ctx, push_to_ctx
from .core.engine import run_parser
from .core.parser_base import Parser, as_parser
from .core.primitives import (
    boolean, constant, date_time, identity, number, record, string, unknown, url,
)
from .core.structures import array, object_
from .security.exceptions import DataParserError, ParsingError, SecurityError
from .utils.config import ParseConfig, ParseLimits, StructureLimits

# Spec-style names that shadow builtins; reachable as dataparser.object / dataparser.map
object = object_  # pylint: disable=redefined-builtin
map = map_  # pylint: disable=redefined-builtin

__version__ = "0.1.0"
__author__ = "dataparser contributors"

__all__ = [
    # Entry point
    "run_parser",
    # Parser object and context
    "Parser", "as_parser", "ParsingCtx", "new_parsing_ctx", "push_to_ctx", "error",
    "ABSENT", "Absent", "is_absent",
    # Primitives
    "string", "number", "boolean", "date_time", "identity", "unknown",
    "record", "url", "constant",
    # Structural combinators
    "object_", "array",
    # Combinators
    "map_", "lift", "compose", "optional", "nullable", "with_default",
    "pre_condition", "post_condition", "fail", "fail_with", "alt",
    # Configuration classes
    "ParseConfig", "ParseLimits", "StructureLimits",
    # Exception classes
    "DataParserError", "ParsingError", "SecurityError",
]
