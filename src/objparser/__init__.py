"""
objparser
=========
Converts a Wavefront OBJ document and its companion MTL document into one
flat record of vertex, face, normal and UV sequences plus the active
material's shading attributes.

    >>> from objparser import parse
    >>> record = parse(obj_text, mtl_text)
    >>> record["faces"][:2]
    [(0, 1, 2), (0, 2, 3)]
"""
from objparser.config import DEFAULT_OPTIONS, MissingMaterialPolicy, ParseOptions
from objparser.errors import (
    InputDecodeError,
    MalformedNumber,
    MaterialBlockNotFound,
    MaterialNameMissing,
    ObjParserError,
    UnsupportedFaceArity,
)
from objparser.model.geometry import Geometry, parse_obj, triangulate_fan
from objparser.model.materials import MaterialProperties, parse_material_name, parse_mtl, split_material_blocks
from objparser.parser import parse

__all__ = [
    "DEFAULT_OPTIONS",
    "Geometry",
    "InputDecodeError",
    "MalformedNumber",
    "MaterialBlockNotFound",
    "MaterialNameMissing",
    "MaterialProperties",
    "MissingMaterialPolicy",
    "ObjParserError",
    "ParseOptions",
    "UnsupportedFaceArity",
    "parse",
    "parse_material_name",
    "parse_mtl",
    "parse_obj",
    "split_material_blocks",
    "triangulate_fan",
]
