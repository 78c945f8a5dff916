import logging
from pathlib import Path
from typing import List, Optional

from ..config import settings
from ..models.schemas import AppBaseModel, CreatedFile, CreateRequestPayload, CreateResponsePayload, ResponseMessage
from ..utils.formatter import SourceFormatter, get_formatter
from ..utils.paths import get_import_path, get_out_file_name, get_source_filename
from .intrinsics import indent_continuation, quote
from .names import normalize_component_name
from .props import generate_props, generate_props_from_mapping

logger = logging.getLogger(settings.SERVICE_NAME + ".create")

MAPPED_DOC_COMMENT = """/**
 * -- This file was auto-generated by Code Connect --
 * `props` includes a mapping from your code props to Figma properties.
 * You should check this is correct, and update the `example` function
 * to return the code example you'd like to see in Figma
 */"""

SUGGESTED_DOC_COMMENT = """/**
 * -- This file was auto-generated by Code Connect --
 * `props` includes a mapping from Figma properties and variants to
 * suggested values. You should update this to match the props of your
 * code component, and update the `example` function to return the
 * code example you'd like to see in Figma
 */"""


class CodeConnectTemplate(AppBaseModel):
    """
    Slots of a generated Code Connect file.

    `render` is the only place the full source text is put together.
    """
    imports: List[str]
    doc_comment: str
    import_name: str
    figma_node_url: str
    props: str
    example: str

    def render(self) -> str:
        return "\n".join(
            [
                *self.imports,
                "",
                self.doc_comment,
                "",
                f"figma.connect({self.import_name}, {quote(self.figma_node_url)}, {{",
                f"  props: {indent_continuation(self.props)},",
                f"  example: {self.example},",
                "})",
                "",
            ]
        )


def resolve_import_name(payload: CreateRequestPayload, source_filename: str) -> str:
    """Identifier the code component is imported as."""
    if payload.source_filepath and payload.source_export:
        if payload.source_export == "default":
            return normalize_component_name(source_filename)
        return payload.source_export
    return payload.component.normalized_name


def build_imports(import_name: str, import_path: str, default_export: bool) -> List[str]:
    import_clause = import_name if default_export else f"{{ {import_name} }}"
    return [
        'import React from "react"',
        f"import {import_clause} from {quote(import_path)}",
        'import figma from "@figma/code-connect"',
    ]


def build_template(payload: CreateRequestPayload, file_path: Path, source_filename: str) -> CodeConnectTemplate:
    component = payload.component
    import_name = resolve_import_name(payload, source_filename)
    import_path = get_import_path(file_path, payload.source_filepath, component.normalized_name)

    if payload.prop_mapping:
        doc_comment = MAPPED_DOC_COMMENT
        props = generate_props_from_mapping(component, payload.prop_mapping)
    else:
        doc_comment = SUGGESTED_DOC_COMMENT
        props = generate_props(component)

    return CodeConnectTemplate(
        imports=build_imports(import_name, import_path, payload.source_export == "default"),
        doc_comment=doc_comment,
        import_name=import_name,
        figma_node_url=component.figma_node_url,
        props=props,
        example=f"(props) => <{import_name} />",
    )


def create_code_connect(
    payload: CreateRequestPayload,
    formatter: Optional[SourceFormatter] = None,
) -> CreateResponsePayload:
    """
    Generate, format and write a Code Connect file for one component.

    An existing file at the destination is never overwritten; the response
    then carries an ERROR message and no created files. Generation and
    formatter failures propagate as CodeConnectError subclasses.
    """
    component = payload.component
    source_filename = get_source_filename(payload.source_filepath, component.normalized_name)
    file_path = get_out_file_name(payload.destination_file, payload.destination_dir, source_filename)

    logger.info(
        f"Generating Code Connect file for {component.normalized_name} at {file_path} "
        f"({'explicit' if payload.prop_mapping else 'inferred'} prop mapping)"
    )

    source = build_template(payload, file_path, source_filename).render()
    formatted = (formatter or get_formatter()).format(source)

    if file_path.exists():
        logger.warning(f"File {file_path} already exists, skipping creation")
        return CreateResponsePayload(
            messages=[
                ResponseMessage(message=f"File {file_path} already exists, skipping creation", level="ERROR")
            ]
        )

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(formatted, encoding="utf-8")
    logger.info(f"Created {file_path}")

    return CreateResponsePayload(created_files=[CreatedFile(file_path=str(file_path))])
