"""
Rendering of intrinsics into `figma.*` expressions.

This module is the single place where the syntax of a props expression is
decided. Both the auto-mapping and the explicit-mapping generators build
intrinsic models and hand them to `render_intrinsic`.
"""
import json
import logging
import math
from typing import Any, Dict, Iterable, Iterator, Optional, Set

from ..config import settings
from ..errors import UnsupportedIntrinsicError, UnsupportedValueMappingError
from ..models.schemas import (
    BooleanIntrinsic,
    ChildrenIntrinsic,
    ClassNameIntrinsic,
    EnumIntrinsic,
    InstanceIntrinsic,
    Intrinsic,
    NestedPropsIntrinsic,
    StringIntrinsic,
    TextContentIntrinsic,
)

logger = logging.getLogger(settings.SERVICE_NAME + ".intrinsics")

INTRINSIC_TYPES = (
    StringIntrinsic,
    BooleanIntrinsic,
    EnumIntrinsic,
    InstanceIntrinsic,
    ChildrenIntrinsic,
    TextContentIntrinsic,
    NestedPropsIntrinsic,
    ClassNameIntrinsic,
)


def quote(value: str) -> str:
    """Double-quoted string literal with quotes and backslashes escaped."""
    return json.dumps(value, ensure_ascii=False)


def indent_continuation(text: str, prefix: str = "  ") -> str:
    lines = text.split("\n")
    return "\n".join([lines[0]] + [prefix + line for line in lines[1:]])


def render_value_mapping_kind(value: Any) -> str:
    """
    Render one value mapping target.

    Nested intrinsics are rendered recursively, strings are quoted and the
    remaining literals use their JavaScript spelling. Anything else raises
    UnsupportedValueMappingError.
    """
    if isinstance(value, INTRINSIC_TYPES):
        return render_intrinsic(value)
    if isinstance(value, str):
        return quote(value)
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return repr(value)
    raise UnsupportedValueMappingError(value)


def render_value_mapping(value_mapping: Dict[str, Any]) -> str:
    """Object literal for a value mapping, one `"designValue": target` entry per line."""
    if not value_mapping:
        return "{}"
    entries = [
        f"  {quote(key)}: {indent_continuation(render_value_mapping_kind(value))}"
        for key, value in value_mapping.items()
    ]
    return "{\n" + ",\n".join(entries) + "\n}"


def _render_with_mapping(function: str, figma_prop_name: str, value_mapping: Optional[Dict[str, Any]]) -> str:
    if value_mapping:
        return f"figma.{function}({quote(figma_prop_name)}, {render_value_mapping(value_mapping)})"
    return f"figma.{function}({quote(figma_prop_name)})"


def render_intrinsic(intrinsic: Intrinsic) -> str:
    """
    Render an intrinsic as a `figma.*` expression.

    Only the kinds that prop mapping generation produces are supported;
    any other kind raises UnsupportedIntrinsicError.
    """
    if isinstance(intrinsic, StringIntrinsic):
        return f"figma.string({quote(intrinsic.args.figma_prop_name)})"
    if isinstance(intrinsic, BooleanIntrinsic):
        return _render_with_mapping("boolean", intrinsic.args.figma_prop_name, intrinsic.args.value_mapping)
    if isinstance(intrinsic, EnumIntrinsic):
        return _render_with_mapping("enum", intrinsic.args.figma_prop_name, intrinsic.args.value_mapping)
    if isinstance(intrinsic, InstanceIntrinsic):
        return f"figma.instance({quote(intrinsic.args.figma_prop_name)})"
    if isinstance(intrinsic, ChildrenIntrinsic):
        layers = intrinsic.args.layers
        if len(layers) == 1:
            return f"figma.children({quote(layers[0])})"
        return f"figma.children([{', '.join(quote(layer) for layer in layers)}])"
    if isinstance(intrinsic, TextContentIntrinsic):
        return f"figma.textContent({quote(intrinsic.args.layer)})"

    kind = getattr(intrinsic, "kind", type(intrinsic).__name__)
    logger.error(f"Cannot render intrinsic of kind '{kind}'")
    raise UnsupportedIntrinsicError(kind)


def _find_figma_prop_names(node: Any) -> Iterator[str]:
    # Free-form args of kinds without a typed model
    if isinstance(node, dict):
        for key, value in node.items():
            if key in ("figmaPropName", "figma_prop_name") and isinstance(value, str):
                yield value
            else:
                yield from _find_figma_prop_names(value)
    elif isinstance(node, list):
        for item in node:
            yield from _find_figma_prop_names(item)


def iter_referenced_props(intrinsic: Intrinsic) -> Iterator[str]:
    """Yield every design property name an intrinsic reads, including nested ones."""
    if isinstance(intrinsic, (StringIntrinsic, InstanceIntrinsic)):
        yield intrinsic.args.figma_prop_name
    elif isinstance(intrinsic, (BooleanIntrinsic, EnumIntrinsic)):
        yield intrinsic.args.figma_prop_name
        for value in (intrinsic.args.value_mapping or {}).values():
            if isinstance(value, INTRINSIC_TYPES):
                yield from iter_referenced_props(value)
    elif isinstance(intrinsic, (ChildrenIntrinsic, TextContentIntrinsic)):
        # Bound to layers, not to properties
        return
    elif isinstance(intrinsic, (NestedPropsIntrinsic, ClassNameIntrinsic)):
        yield from _find_figma_prop_names(intrinsic.args)
    else:
        raise UnsupportedIntrinsicError(getattr(intrinsic, "kind", type(intrinsic).__name__))


def collect_referenced_props(intrinsics: Iterable[Intrinsic]) -> Set[str]:
    """Set of design property names referenced anywhere in the given intrinsics."""
    used: Set[str] = set()
    for intrinsic in intrinsics:
        used.update(iter_referenced_props(intrinsic))
    return used
