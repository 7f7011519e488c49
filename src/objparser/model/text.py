"""
Input decoding.

Byte buffers are turned into text once, here; every parser entry point
accepts either form.
"""
from __future__ import annotations

from typing import Union

from objparser.config import DEFAULT_ENCODING
from objparser.errors import InputDecodeError

BYTE_ORDER_MARK = "\ufeff"


def decode_text(data: Union[str, bytes, bytearray], encoding: str = DEFAULT_ENCODING) -> str:
    """
    Return `data` as text, decoding byte buffers once.

    A leading byte-order mark is dropped so the first record's keyword
    compares equal.

    Raises:
        InputDecodeError: If a byte buffer is not valid in `encoding`.
        TypeError: If `data` is neither text nor bytes.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode(encoding)
        except UnicodeDecodeError as e:
            raise InputDecodeError(encoding, str(e)) from e
    elif not isinstance(data, str):
        raise TypeError(f"Expected str or bytes, got {type(data).__name__}.")
    return data.removeprefix(BYTE_ORDER_MARK)
