"""
Record Assembly
===============
Entry point that turns an OBJ/MTL pair into the single flat record consumed
by the renderer.

The record holds the geometry keys (`vertices`, `faces`, `normals`, `uvs`)
followed by whichever material keys are present (`specularPower`, `ambient`,
`diffuse`, `specular`, `alpha`, `emissive`).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from objparser.config import DEFAULT_OPTIONS, MissingMaterialPolicy, ParseOptions
from objparser.errors import MaterialBlockNotFound, MaterialNameMissing
from objparser.model.text import decode_text
from objparser.model.geometry import parse_obj
from objparser.model.materials import MaterialProperties, parse_material_name, parse_mtl

logger = logging.getLogger(__name__)


def parse(
    obj: Union[str, bytes, bytearray],
    mtl: Union[str, bytes, bytearray],
    options: Optional[ParseOptions] = None,
) -> Dict[str, Any]:
    """
    Parse an OBJ document and its MTL document into one record.

    Args:
        obj: OBJ text or UTF-8 bytes.
        mtl: MTL text or UTF-8 bytes.
        options: Strictness and recovery switches, `DEFAULT_OPTIONS` if None.

    Raises:
        InputDecodeError: If either byte input cannot be decoded.
        MaterialNameMissing: If the OBJ names no material and
            `options.require_material` is set.
        MaterialBlockNotFound: If the named material is not in the MTL and
            `options.missing_material` is `MissingMaterialPolicy.ERROR`.
        UnsupportedFaceArity: For a face with fewer than three vertices.
        MalformedNumber: For a bad face index, or any bad number when
            `options.strict_numbers` is set.

    Returns:
        Flat mapping of geometry keys followed by present material keys.
    """
    options = options or DEFAULT_OPTIONS
    obj_text = decode_text(obj, options.encoding)
    mtl_text = decode_text(mtl, options.encoding)

    geometry = parse_obj(obj_text, strict=options.strict_numbers)
    material_name = parse_material_name(obj_text)

    if material_name is None:
        if options.require_material:
            raise MaterialNameMissing()
        logger.warning("Geometry names no material, record will carry no material keys.")
        material = MaterialProperties()
    else:
        try:
            material = parse_mtl(mtl_text, material_name, strict=options.strict_numbers)
        except MaterialBlockNotFound as e:
            if options.missing_material == MissingMaterialPolicy.ERROR:
                raise
            logger.warning(f"{e} Continuing without material keys.")
            material = MaterialProperties()

    data: Dict[str, Any] = {}
    # Geometry first, material second; later keys overwrite
    for part in (geometry.to_dict(), material.to_dict()):
        data.update(part)

    logger.info(
        f"Parsed record: {len(geometry.vertices)} vertices, {len(geometry.faces)} triangles, "
        f"material '{material_name}'"
    )
    return data
