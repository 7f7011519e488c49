"""
Geometry Parsing
================
Reads the vertex, normal, UV and face records of an OBJ document into flat
sequences ready for a renderer.

Classes:
    Geometry: Container for the four parsed sequences.

Functions:
    parse_obj: Parse OBJ text into a `Geometry`.
    triangulate_fan: Split a polygon's index list into triangles.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, List, Sequence, Tuple, Union, TYPE_CHECKING

import numpy as np

from objparser.config import MIN_FACE_ARITY, NORMAL_COPIES
from objparser.errors import UnsupportedFaceArity
from objparser.model.text import decode_text
from objparser.model.numbers import parse_floats, parse_index

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Vector = Tuple[float, ...]
Triangle = Tuple[int, int, int]


@dataclass
class Geometry:
    """
    Parsed OBJ geometry.

    `normals` holds two copies of every `vn` record so that the two triangles
    cut from a quad each get their own normal slot.
    """
    vertices: List[Vector] = field(default_factory=list)
    faces: List[Triangle] = field(default_factory=list)
    normals: List[Vector] = field(default_factory=list)
    uvs: List[Vector] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertices={len(self.vertices)}, faces={len(self.faces)}, "
            f"normals={len(self.normals)}, uvs={len(self.uvs)})"
        )

    def to_dict(self) -> Dict[str, list]:
        return {
            "vertices": list(self.vertices),
            "faces": list(self.faces),
            "normals": list(self.normals),
            "uvs": list(self.uvs),
        }

    def to_arrays(self) -> Dict[str, npt.NDArray]:
        """
        Pack the sequences into contiguous numpy buffers.

        Returns:
            A dict with `vertices` (N, 3), `normals` (M, 3) and `uvs` (K, 2)
            as float32 and `faces` (T, 3) as int64. Empty sequences give
            arrays with zero rows and the same column count.
        """
        return {
            "vertices": _as_array(self.vertices, 3, np.float32),
            "faces": _as_array(self.faces, 3, np.int64),
            "normals": _as_array(self.normals, 3, np.float32),
            "uvs": _as_array(self.uvs, 2, np.float32),
        }


def _as_array(rows: Sequence[Sequence[float]], width: int, dtype) -> npt.NDArray:
    if not rows:
        return np.empty((0, width), dtype=dtype)
    return np.asarray(rows, dtype=dtype)


def triangulate_fan(indices: Sequence[int]) -> List[Triangle]:
    """
    Split a polygon into triangles sharing its first vertex.

    A quad [a, b, c, d] gives [(a, b, c), (a, c, d)].

    Raises:
        UnsupportedFaceArity: If fewer than three indices are given.
    """
    if len(indices) < MIN_FACE_ARITY:
        raise UnsupportedFaceArity(len(indices))
    anchor = indices[0]
    return [(anchor, indices[i], indices[i + 1]) for i in range(1, len(indices) - 1)]


def _face_indices(tokens: Sequence[str], line_number: int) -> List[int]:
    # Only the vertex part of "v/vt/vn" is used
    return [parse_index(token.split("/")[0], line_number) for token in tokens if token]


def parse_obj(obj: Union[str, bytes, bytearray], strict: bool = False) -> Geometry:
    """
    Parse the geometry records of an OBJ document.

    Args:
        obj: Full OBJ text, or a UTF-8 byte buffer.
        strict: Raise `MalformedNumber` for unparsable float tokens instead
            of storing NaN.

    Raises:
        UnsupportedFaceArity: For a face line with fewer than 3 vertices.
        MalformedNumber: For a non-integer face index, or any bad float when
            `strict` is set.

    Returns:
        The parsed `Geometry`.
    """
    text = decode_text(obj)
    geometry = Geometry()

    for line_number, line in enumerate(text.split("\n"), start=1):
        split = line.rstrip().split(" ")
        keyword, values = split[0], split[1:]

        if keyword == "v":
            geometry.vertices.append(parse_floats(values, strict, line_number))

        elif keyword == "vn":
            normal = parse_floats(values, strict, line_number)
            geometry.normals.extend([normal] * NORMAL_COPIES)

        elif keyword == "vt":
            geometry.uvs.append(parse_floats(values, strict, line_number))

        elif keyword == "f":
            indices = _face_indices(values, line_number)
            try:
                geometry.faces.extend(triangulate_fan(indices))
            except UnsupportedFaceArity as e:
                raise UnsupportedFaceArity(e.arity, line_number) from None

    logger.debug(f"Parsed geometry: {geometry!r}")
    return geometry
