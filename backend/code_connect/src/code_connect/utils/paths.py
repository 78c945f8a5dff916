import os
from pathlib import Path
from typing import Optional

import regex as re

from ..config import settings

# Extensions dropped from import paths (no ESM-style explicit extensions)
SCRIPT_EXTENSION_PATTERN = re.compile(r"\.(jsx|tsx|js|ts)$")


def get_source_filename(source_filepath: Optional[str], fallback: str) -> str:
    """Base file name up to the first '.', e.g. "src/Button.stories.tsx" -> "Button"."""
    if not source_filepath:
        return fallback
    return Path(source_filepath).name.split(".")[0]


def get_out_file_name(
    out_file: Optional[str],
    out_dir: Optional[str],
    source_filename: str,
    extension: Optional[str] = None,
) -> Path:
    """
    Path of the Code Connect file to write.

    An explicit out_file wins. Otherwise the file is named
    <source_filename>.figma.<extension> inside out_dir (or the current directory).
    """
    if out_file:
        return Path(out_file)
    extension = extension or settings.OUTPUT_EXTENSION
    directory = Path(out_dir) if out_dir else Path.cwd()
    return directory / f"{source_filename}.figma.{extension}"


def format_import_path(system_path: str) -> str:
    """ES-style import path from a relative filesystem path."""
    import_path = system_path.replace(os.sep, "/")
    if not import_path.startswith("."):
        import_path = f"./{import_path}"
    return SCRIPT_EXTENSION_PATTERN.sub("", import_path)


def get_import_path(code_connect_file: Path, source_filepath: Optional[str], normalized_name: str) -> str:
    """Import path of the code component, relative to the Code Connect file."""
    if not source_filepath:
        return f"./{normalized_name}"
    code_connect_dir = os.path.dirname(os.path.abspath(code_connect_file))
    relative = os.path.relpath(os.path.abspath(source_filepath), code_connect_dir)
    return format_import_path(relative)
