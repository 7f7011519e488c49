"""
Input/Output Helpers
Decodes raw inputs, locates and reads OBJ/MTL file pairs, and writes parsed
records as JSON. The parsing core never touches the filesystem; this module
is the thin layer around it.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from objparser.config import DEFAULT_ENCODING
from objparser.model.text import decode_text

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def find_material_library(obj_path: PathLike, obj_text: Optional[str] = None) -> Optional[Path]:
    """
    Locate the MTL file that belongs to an OBJ file.

    The first `mtllib` reference that exists (relative to the OBJ's directory)
    wins. Without one, `<stem>.mtl` next to the OBJ is tried.

    Args:
        obj_path: Path of the OBJ file.
        obj_text: Already-read OBJ text, to avoid reading the file twice.

    Returns:
        Path of the MTL file, or None if nothing was found.
    """
    obj_path = Path(obj_path)
    if obj_text is None:
        obj_text = obj_path.read_text(encoding=DEFAULT_ENCODING, errors="ignore")

    for line in obj_text.splitlines():
        parts = line.strip().split(maxsplit=1)
        if len(parts) == 2 and parts[0].lower() == "mtllib":
            candidate = obj_path.parent / parts[1].strip()
            if candidate.is_file():
                logger.debug(f"Resolved mtllib reference: {candidate}")
                return candidate
            logger.warning(f"mtllib reference not found: {candidate}")

    guess = obj_path.with_suffix(".mtl")
    if guess.is_file():
        logger.debug(f"Using material library beside the OBJ: {guess}")
        return guess
    return None


def read_asset_pair(obj_path: PathLike, mtl_path: Optional[PathLike] = None) -> tuple[bytes, bytes]:
    """
    Read an OBJ file and its MTL file as raw bytes.

    Raises:
        FileNotFoundError: If either file is missing or no MTL can be resolved.
    """
    obj_path = Path(obj_path)
    if not obj_path.is_file():
        raise FileNotFoundError(f"OBJ file not found: {obj_path}")
    obj_data = obj_path.read_bytes()

    if mtl_path is None:
        mtl_path = find_material_library(obj_path, obj_data.decode(DEFAULT_ENCODING, errors="ignore"))
        if mtl_path is None:
            raise FileNotFoundError(f"No material library found for: {obj_path}")
    mtl_path = Path(mtl_path)
    if not mtl_path.is_file():
        raise FileNotFoundError(f"MTL file not found: {mtl_path}")

    logger.info(f"Reading {obj_path.name} with materials from {mtl_path.name}")
    return obj_data, mtl_path.read_bytes()


def write_record(record: Dict[str, Any], path: Optional[PathLike] = None, indent: Optional[int] = None) -> str:
    """
    Serialize a parsed record to JSON.

    NaN values are written as the bare `NaN` literal, as the `json` module
    does by default.

    Args:
        record: The mapping returned by `objparser.parse`.
        path: Optional output file; the parent directory must exist.
        indent: JSON indentation, compact when None.

    Returns:
        The JSON text.
    """
    text = json.dumps(record, indent=indent)
    if path is not None:
        Path(path).write_text(text, encoding="utf-8")
        logger.info(f"Wrote record to: {path}")
    return text
