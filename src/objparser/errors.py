"""
Error Taxonomy
==============
Every failure raised by the parser derives from `ObjParserError`, which is a
`ValueError` so callers that already guard against bad input keep working.

Classes:
    MalformedNumber: A numeric token could not be parsed.
    MaterialNameMissing: The OBJ text has no `usemtl` line.
    MaterialBlockNotFound: The MTL text has no block for the requested name.
    UnsupportedFaceArity: A face line references fewer than three vertices.
    InputDecodeError: An input byte buffer is not valid text.
"""
from __future__ import annotations

from typing import Iterable, Optional


class ObjParserError(ValueError):
    """Base class for all parser errors."""


def _at_line(line_number: Optional[int]) -> str:
    return f" (line {line_number})" if line_number is not None else ""


class MalformedNumber(ObjParserError):
    def __init__(self, token: str, line_number: Optional[int] = None) -> None:
        self.token = token
        self.line_number = line_number
        super().__init__(f"Malformed numeric token {token!r}{_at_line(line_number)}.")


class MaterialNameMissing(ObjParserError):
    def __init__(self) -> None:
        super().__init__("No 'usemtl' line found in the geometry text.")


class MaterialBlockNotFound(ObjParserError):
    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = list(available)
        known = ", ".join(repr(n) for n in self.available) or "none"
        super().__init__(f"Material '{name}' not found in the material text (defined: {known}).")


class UnsupportedFaceArity(ObjParserError):
    def __init__(self, arity: int, line_number: Optional[int] = None) -> None:
        self.arity = arity
        self.line_number = line_number
        super().__init__(
            f"Face with {arity} vertex token(s){_at_line(line_number)}; "
            f"at least 3 are required."
        )


class InputDecodeError(ObjParserError):
    def __init__(self, encoding: str, reason: str) -> None:
        self.encoding = encoding
        super().__init__(f"Input is not valid {encoding} text: {reason}")
