"""
Configuration & Parse Options
=============================
Central registry for the parser's global constants and the options object
passed into `objparser.parse`.

Exports:
    MissingMaterialPolicy (StrEnum): What to do when the MTL has no block for
        the material named by the OBJ.
    ParseOptions (dataclass): Per-call switches for strictness and recovery.
    DEFAULT_OPTIONS (ParseOptions): The options used when none are given.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_ENCODING: str = "utf-8"

# Output keys of the geometry part of a record, in emission order.
GEOMETRY_KEYS: tuple[str, ...] = ("vertices", "faces", "normals", "uvs")

# Each `vn` line is emitted this many times, one copy per triangle of a quad.
NORMAL_COPIES: int = 2

# Smallest face that can be triangulated.
MIN_FACE_ARITY: int = 3


class MissingMaterialPolicy(StrEnum):
    ERROR = "error"
    EMPTY = "empty"


@dataclass(frozen=True)
class ParseOptions:
    """
    Switches for a single `parse` call.

    Attributes:
        strict_numbers: Raise `MalformedNumber` instead of storing NaN for
            float tokens that do not parse.
        require_material: Raise `MaterialNameMissing` when the OBJ names no
            material, instead of returning a record without material keys.
        missing_material: Policy for a material name with no matching block.
        encoding: Encoding used to decode byte inputs.
    """
    strict_numbers: bool = False
    require_material: bool = False
    missing_material: MissingMaterialPolicy = MissingMaterialPolicy.ERROR
    encoding: str = DEFAULT_ENCODING


DEFAULT_OPTIONS = ParseOptions()
