import logging
from typing import List, Optional

from ..config import settings
from ..models.schemas import (
    BooleanIntrinsic,
    Component,
    ComponentPropertyDefinition,
    EnumIntrinsic,
    FigmaPropArgs,
    InstanceIntrinsic,
    Intrinsic,
    PropMapping,
    PropertyType,
    StringIntrinsic,
    ValueMappedArgs,
)
from .intrinsics import indent_continuation, collect_referenced_props, quote, render_intrinsic
from .names import (
    is_binary_boolean_variant,
    normalize_property_name,
    to_code_property_name,
    to_value_slug,
)

logger = logging.getLogger(settings.SERVICE_NAME + ".props")

MAPPED_PROPS_COMMENT = "// These props were automatically mapped based on your linked code:"
UNMAPPED_PROPS_COMMENT = "// No matching props could be found for these Figma properties:"


def infer_intrinsic(prop_name: str, definition: ComponentPropertyDefinition) -> Optional[Intrinsic]:
    """
    Pick an intrinsic for a design property from its declared type alone.

    Returns None for property types that have no figma.* counterpart.
    """
    figma_prop_name = normalize_property_name(prop_name)

    if definition.type == PropertyType.BOOLEAN:
        return BooleanIntrinsic(args=ValueMappedArgs(figma_prop_name=figma_prop_name))
    if definition.type == PropertyType.TEXT:
        return StringIntrinsic(args=FigmaPropArgs(figma_prop_name=figma_prop_name))
    if definition.type == PropertyType.VARIANT:
        options = definition.variant_options or []
        if is_binary_boolean_variant(options):
            return BooleanIntrinsic(args=ValueMappedArgs(figma_prop_name=figma_prop_name))
        return EnumIntrinsic(
            args=ValueMappedArgs(
                figma_prop_name=figma_prop_name,
                value_mapping={option: to_value_slug(option) for option in options},
            )
        )
    if definition.type == PropertyType.INSTANCE_SWAP:
        return InstanceIntrinsic(args=FigmaPropArgs(figma_prop_name=figma_prop_name))

    logger.debug(f"Skipping property '{prop_name}' of unsupported type {definition.type}")
    return None


def _declaration(code_prop_name: str, intrinsic: Intrinsic) -> str:
    return f"{quote(code_prop_name)}: {render_intrinsic(intrinsic)}"


def infer_declaration(prop_name: str, definition: ComponentPropertyDefinition) -> Optional[str]:
    """`"codeName": figma.*(...)` for one design property, or None if its type is unsupported."""
    intrinsic = infer_intrinsic(prop_name, definition)
    if intrinsic is None:
        return None
    return _declaration(to_code_property_name(prop_name), intrinsic)


def _entry(declaration: str) -> str:
    return "  " + indent_continuation(declaration) + ","


def _commented_entry(declaration: str) -> str:
    # Every line is commented so suggestions can be uncommented selectively
    lines = (declaration + ",").split("\n")
    return "\n".join(f"  // {line}" for line in lines)


def generate_props(component: Component) -> str:
    """Props object for a component with no explicit mapping, inferred from property types."""
    declarations: List[str] = []
    for prop_name, definition in component.component_property_definitions.items():
        declaration = infer_declaration(prop_name, definition)
        if declaration:
            declarations.append(declaration)

    if not declarations:
        return "{}"
    return "{\n" + "\n".join(_entry(declaration) for declaration in declarations) + "\n}"


def find_unmapped_props(component: Component, prop_mapping: PropMapping) -> List[str]:
    """Design properties, in input order, not referenced by any intrinsic in the mapping."""
    used = collect_referenced_props(prop_mapping.values())
    return [
        prop_name
        for prop_name in component.component_property_definitions
        if prop_name not in used
    ]


def generate_props_from_mapping(component: Component, prop_mapping: PropMapping) -> str:
    """
    Props object for an explicit mapping.

    Mapped props are emitted as active entries keyed by the caller's prop name.
    Design properties the mapping does not reference are appended as
    commented-out suggestions.
    """
    mapped = [
        _declaration(code_prop_name, intrinsic)
        for code_prop_name, intrinsic in prop_mapping.items()
    ]

    unmapped: List[str] = []
    for prop_name in find_unmapped_props(component, prop_mapping):
        declaration = infer_declaration(prop_name, component.component_property_definitions[prop_name])
        if declaration:
            unmapped.append(declaration)

    logger.debug(f"{len(mapped)} mapped props, {len(unmapped)} suggested props")

    lines = ["{", f"  {MAPPED_PROPS_COMMENT}"]
    lines.extend(_entry(declaration) for declaration in mapped)
    if unmapped:
        lines.append(f"  {UNMAPPED_PROPS_COMMENT}")
        lines.extend(_commented_entry(declaration) for declaration in unmapped)
    lines.append("}")
    return "\n".join(lines)
