"""
Numeric token parsing.

All float and index conversion goes through here so that the lenient/strict
decision for malformed tokens is made in one place.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from objparser.errors import MalformedNumber

logger = logging.getLogger(__name__)


def parse_float(token: Optional[str], strict: bool = False, line_number: Optional[int] = None) -> float:
    """
    Parse a single float token.

    Args:
        token: Text to parse. `None` stands for a missing token.
        strict: Raise instead of returning NaN for unparsable text.
        line_number: 1-based source line, used in messages.

    Raises:
        MalformedNumber: If `strict` is set and the token is not a number.

    Returns:
        The parsed value, or NaN for a malformed token in lenient mode.
    """
    try:
        return float(token)
    except (TypeError, ValueError):
        if strict:
            raise MalformedNumber("" if token is None else token, line_number) from None
        where = f" at line {line_number}" if line_number is not None else ""
        logger.warning(f"Malformed number {token!r}{where}, storing NaN.")
        return float(np.nan)


def parse_floats(tokens: Sequence[str], strict: bool = False, line_number: Optional[int] = None) -> tuple[float, ...]:
    """Parse every token of a record into a tuple of floats."""
    return tuple(parse_float(token, strict, line_number) for token in tokens)


def parse_index(token: str, line_number: Optional[int] = None) -> int:
    """
    Parse a 1-based OBJ index and return it zero-based.

    The range is not validated. Indices must always be integers, so a bad
    token raises regardless of the strictness setting.
    """
    try:
        return int(token) - 1
    except ValueError:
        raise MalformedNumber(token, line_number) from None
