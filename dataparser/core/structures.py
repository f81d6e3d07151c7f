"""
Structural combinators: parsers for objects and arrays built from field and
item parsers.
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..security.limits import LimitValidator
from . import constants
from .context import ParsingCtx, error
from .parser_base import Parser, ParserLike, as_parser, parser_name


def _validator_for(ctx: ParsingCtx) -> Optional[LimitValidator]:
    """Limit validator for the context's config, or None when limits are off."""
    config = ctx.config
    if config.limits is None:
        return None
    return LimitValidator(config.limits, config.get_logger(__name__))


def _descend(ctx: ParsingCtx, fragment: str, validator: Optional[LimitValidator]) -> ParsingCtx:
    child = ctx.push(fragment)
    if validator:
        validator.validate_depth(child.depth, child)
    return child


def object_(props: Mapping[str, ParserLike]) -> Parser[Any, dict[str, Any]]:
    """
    Parser for a mapping with the given named fields.

    Each field parser runs under an ``object property <name>`` fragment. Missing
    keys are passed to the field parser as ``ABSENT`` so that wrappers such as
    ``optional`` can decide how to handle them; fields whose result is
    ``ABSENT`` are left out of the output.

    Args:
        props: Field name to parser, in the order fields should be parsed.

    Returns:
        A parser producing a new ``dict``.
    """
    fields = [(name, as_parser(parser)) for name, parser in props.items()]

    def _parse_object(value: Any, ctx: ParsingCtx) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise error(constants.NOT_AN_OBJECT.format(value=value), ctx)

        validator = _validator_for(ctx)
        result: dict[str, Any] = {}
        for name, field_parser in fields:
            field_ctx = _descend(
                ctx, constants.OBJECT_PROPERTY_FRAGMENT.format(name=name), validator
            )
            raw = value[name] if name in value else constants.ABSENT
            parsed = field_parser(raw, field_ctx)
            if parsed is not constants.ABSENT:
                result[name] = parsed
        return result

    names = ", ".join(f"{name}: {parser_name(p)}" for name, p in fields)
    return Parser(_parse_object, f"object({{{names}}})")


def array(item: ParserLike) -> Parser[Any, list[Any]]:
    """
    Parser for a list or tuple whose elements all match ``item``.

    The first failing element aborts the parse, annotated with
    ``array at index <i>``.
    """
    item_parser = as_parser(item)

    def _parse_array(value: Any, ctx: ParsingCtx) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise error(constants.NOT_AN_ARRAY.format(value=value), ctx)

        validator = _validator_for(ctx)
        if validator:
            validator.validate_array_items(len(value), ctx)

        return [
            item_parser(
                element,
                _descend(ctx, constants.ARRAY_INDEX_FRAGMENT.format(index=index), validator),
            )
            for index, element in enumerate(value)
        ]

    return Parser(_parse_array, f"array({parser_name(item_parser)})")
