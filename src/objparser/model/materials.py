"""
Material Parsing
================
Resolves the material an OBJ document uses and reads that material's shading
attributes out of the companion MTL document.

Classes:
    MaterialProperties: Optional shading attributes of one material.

Functions:
    parse_material_name: Name from the first `usemtl` line of an OBJ.
    split_material_blocks: Map of material name to its MTL block.
    parse_mtl: Attributes of a named material.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from objparser.errors import MaterialBlockNotFound
from objparser.model.text import decode_text
from objparser.model.numbers import parse_float, parse_floats

logger = logging.getLogger(__name__)

Color = Tuple[float, ...]

BLOCK_KEYWORD = "newmtl"


@dataclass
class MaterialProperties:
    """
    Shading attributes of a single material.

    Every field is optional; a field stays None when its source line never
    appears in the material's block.
    """
    specular_power: Optional[float] = None  # Ns
    ambient: Optional[Color] = None  # Ka
    diffuse: Optional[Color] = None  # Kd
    specular: Optional[Color] = None  # Ks
    alpha: Optional[float] = None  # d / Tr
    emissive: Optional[float] = None  # Tf, first component only

    # Output names used by the renderer
    OUTPUT_KEYS = {
        "specular_power": "specularPower",
        "ambient": "ambient",
        "diffuse": "diffuse",
        "specular": "specular",
        "alpha": "alpha",
        "emissive": "emissive",
    }

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        """Present attributes only, keyed by their output names."""
        return {
            self.OUTPUT_KEYS[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def parse_material_name(obj: Union[str, bytes, bytearray]) -> Optional[str]:
    """
    Return the material named by the first line containing `usemtl`.

    Later `usemtl` lines are ignored. Returns None when there is no such line
    or it carries no name.
    """
    text = decode_text(obj)
    for line in text.split("\n"):
        if "usemtl" in line:
            tokens = line.split()
            if len(tokens) < 2:
                logger.warning(f"'usemtl' line without a material name: {line.strip()!r}")
                return None
            return tokens[1]
    return None




def _collect_blocks(text: str) -> Dict[str, Tuple[int, List[str]]]:
    # name -> (1-based line number of the `newmtl` line, block lines)
    blocks: Dict[str, Tuple[int, List[str]]] = {}
    current: Optional[List[str]] = None

    for line_number, line in enumerate(text.split("\n"), start=1):
        split = line.split()
        if split and split[0].lower() == BLOCK_KEYWORD:
            name = split[1] if len(split) > 1 else ""
            if name in blocks:
                logger.warning(f"Duplicate material '{name}' at line {line_number} ignored, keeping the first definition.")
                current = None
            else:
                current = []
                blocks[name] = (line_number, current)
        if current is not None:
            current.append(line)

    return blocks


def split_material_blocks(mtl: Union[str, bytes, bytearray]) -> Dict[str, str]:
    """
    Split MTL text into blocks keyed by material name.

    A block runs from a `newmtl` line (keyword matched case-insensitively) up
    to the next one or the end of the text. Text before the first `newmtl` is
    dropped. The key is the first token after `newmtl`, read the same way
    `parse_material_name` reads `usemtl`. When a name is declared twice, the
    first block is kept.
    """
    blocks = _collect_blocks(decode_text(mtl))
    return {name: "\n".join(lines) for name, (_, lines) in blocks.items()}


def parse_mtl(
    mtl: Union[str, bytes, bytearray],
    material_name: Optional[str],
    strict: bool = False,
) -> MaterialProperties:
    """
    Read the shading attributes of one material.

    Args:
        mtl: Full MTL text, or a UTF-8 byte buffer.
        material_name: Exact name of the material. None yields an empty
            result, matching an OBJ without a `usemtl` line.
        strict: Raise `MalformedNumber` for unparsable values instead of
            storing NaN.

    Raises:
        MaterialBlockNotFound: If no block declares `material_name`.
        MalformedNumber: For a bad value when `strict` is set.

    Returns:
        The parsed `MaterialProperties`.
    """
    material = MaterialProperties()
    if material_name is None:
        return material

    blocks = _collect_blocks(decode_text(mtl))
    if material_name not in blocks:
        raise MaterialBlockNotFound(material_name, blocks.keys())

    start, lines = blocks[material_name]
    for line_number, line in enumerate(lines, start=start):
        split = line.split()
        if not split:
            continue
        keyword = split[0]
        first = split[1] if len(split) > 1 else None

        if keyword == "Ns":
            material.specular_power = parse_float(first, strict, line_number)
        elif keyword == "Ka":
            material.ambient = parse_floats(split[1:], strict, line_number)
        elif keyword == "Kd":
            material.diffuse = parse_floats(split[1:], strict, line_number)
        elif keyword == "Ks":
            material.specular = parse_floats(split[1:], strict, line_number)
        elif keyword in ("d", "Tr"):
            material.alpha = parse_float(first, strict, line_number)
        elif keyword == "Tf":
            material.emissive = parse_float(first, strict, line_number)

    logger.debug(f"Parsed material '{material_name}': {sorted(material.to_dict())}")
    return material
