from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AppBaseModel(BaseModel):
    """Base Pydantic model with common configuration.

    Wire payloads use camelCase keys (as produced by the design tool plugin);
    Python code uses the snake_case attribute names.
    """

    model_config = ConfigDict(
        frozen=False,
        extra="forbid",  # Forbid extra fields not defined in the model
        populate_by_name=True,  # Allow both alias and field names on input
        alias_generator=to_camel,
    )


# --- Design Tool Component Models ---

class PropertyType:
    """Known values of ComponentPropertyDefinition.type."""
    BOOLEAN = "BOOLEAN"
    TEXT = "TEXT"
    VARIANT = "VARIANT"
    INSTANCE_SWAP = "INSTANCE_SWAP"


class ComponentPropertyDefinition(AppBaseModel):
    """One property of a design component, as reported by the design tool."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = Field(description="BOOLEAN, TEXT, VARIANT, INSTANCE_SWAP or any other (unsupported) type.")
    variant_options: Optional[List[str]] = Field(
        default=None,
        description="Ordered option values. Only present when type is VARIANT."
    )
    default_value: Optional[Union[str, bool]] = Field(
        default=None,
        description="Default value in the design tool. Carried through but not used by generation."
    )


class Component(AppBaseModel):
    """The design artifact being connected to code."""

    model_config = ConfigDict(extra="ignore")

    normalized_name: str = Field(description="Code identifier used when no source export is known.")
    figma_node_url: str = Field(description="URL of the design node, embedded verbatim in the output.")
    component_property_definitions: Dict[str, ComponentPropertyDefinition] = Field(
        default_factory=dict,
        description="Raw design property name to definition."
    )


# --- Intrinsics ---
# Each intrinsic describes how one code prop pulls its value from the design.
# The "kind" field is the discriminator, matching the wire shape {"kind", "args"}.

class FigmaPropArgs(AppBaseModel):
    figma_prop_name: str


class ValueMappedArgs(AppBaseModel):
    figma_prop_name: str
    value_mapping: Optional[Dict[str, "ValueMappingKind"]] = None


class ChildrenArgs(AppBaseModel):
    layers: List[str] = Field(min_length=1)


class TextContentArgs(AppBaseModel):
    layer: str


class StringIntrinsic(AppBaseModel):
    kind: Literal["string"] = "string"
    args: FigmaPropArgs


class BooleanIntrinsic(AppBaseModel):
    kind: Literal["boolean"] = "boolean"
    args: ValueMappedArgs


class EnumIntrinsic(AppBaseModel):
    kind: Literal["enum"] = "enum"
    args: ValueMappedArgs


class InstanceIntrinsic(AppBaseModel):
    kind: Literal["instance"] = "instance"
    args: FigmaPropArgs


class ChildrenIntrinsic(AppBaseModel):
    kind: Literal["children"] = "children"
    args: ChildrenArgs


class TextContentIntrinsic(AppBaseModel):
    kind: Literal["text-content"] = "text-content"
    args: TextContentArgs


class NestedPropsIntrinsic(AppBaseModel):
    """Accepted on input, but not supported for file generation."""
    kind: Literal["nested-props"] = "nested-props"
    args: Dict[str, Any] = Field(default_factory=dict)


class ClassNameIntrinsic(AppBaseModel):
    """Accepted on input, but not supported for file generation."""
    kind: Literal["className"] = "className"
    args: Dict[str, Any] = Field(default_factory=dict)


Intrinsic = Annotated[
    Union[
        StringIntrinsic,
        BooleanIntrinsic,
        EnumIntrinsic,
        InstanceIntrinsic,
        ChildrenIntrinsic,
        TextContentIntrinsic,
        NestedPropsIntrinsic,
        ClassNameIntrinsic,
    ],
    Field(discriminator="kind"),
]

# A value-mapping target is either a literal or a nested intrinsic.
# bool is listed before int so that True/False are never coerced to 1/0.
ValueMappingKind = Union[Intrinsic, bool, int, float, str, None]

ValueMappedArgs.model_rebuild()
BooleanIntrinsic.model_rebuild()
EnumIntrinsic.model_rebuild()

PropMapping = Dict[str, Intrinsic]


# --- Request / Response Payloads ---

class CreateRequestPayload(AppBaseModel):
    """Input for generating one Code Connect file."""

    model_config = ConfigDict(extra="ignore")

    component: Component
    destination_file: Optional[str] = Field(
        default=None,
        description="Exact output path. Takes precedence over destination_dir."
    )
    destination_dir: Optional[str] = Field(
        default=None,
        description="Output directory. Defaults to the current working directory."
    )
    source_filepath: Optional[str] = Field(
        default=None,
        description="Path of the code component being connected."
    )
    source_export: Optional[str] = Field(
        default=None,
        description="Export of the code component: 'default' or a named export."
    )
    prop_mapping: Optional[PropMapping] = Field(
        default=None,
        description="Code prop name to intrinsic. When absent, props are inferred from the design."
    )


class CreatedFile(AppBaseModel):
    file_path: str


class ResponseMessage(AppBaseModel):
    message: str
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class CreateResponsePayload(AppBaseModel):
    """Result of a create request: the files written and any messages for the user."""
    created_files: List[CreatedFile] = Field(default_factory=list)
    messages: List[ResponseMessage] = Field(default_factory=list)
