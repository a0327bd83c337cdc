"""Compact binary encoding of fixed numbers with variable-length integers.

Unsigned integers below 251 take one byte; larger ones are a marker byte
(251, 252 or 253) followed by a little-endian 16, 32 or 64 bit value.
Signed integers are zigzag-mapped first. Byte strings and text carry
their length as an unsigned integer before the bytes.
"""

from __future__ import annotations

from typednum.num import Num

_U64_LIMIT = 2**64
_MARKER_U16 = 251
_MARKER_U32 = 252
_MARKER_U64 = 253
_MARKER_U128 = 254
_WIDTHS = {_MARKER_U16: 2, _MARKER_U32: 4, _MARKER_U64: 8}


class DecodeError(ValueError):
    """Raised when bytes cannot be decoded into the expected value."""


def _take(data: bytes, offset: int, size: int) -> tuple[bytes, int]:
    end = offset + size
    if offset < 0 or end > len(data):
        raise DecodeError(f"unexpected end of data: needed {size} more bytes")
    return bytes(data[offset:end]), end


def encode_varint(value: int) -> bytes:
    """Encode an unsigned 64-bit integer."""
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"{value} is outside the unsigned 64-bit range")
    if value < _MARKER_U16:
        return bytes([value])
    if value < 2**16:
        return bytes([_MARKER_U16]) + value.to_bytes(2, "little")
    if value < 2**32:
        return bytes([_MARKER_U32]) + value.to_bytes(4, "little")
    return bytes([_MARKER_U64]) + value.to_bytes(8, "little")


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 64-bit integer; return it and the next offset."""
    head, offset = _take(data, offset, 1)
    marker = head[0]
    if marker < _MARKER_U16:
        return marker, offset
    width = _WIDTHS.get(marker)
    if width is None:
        if marker == _MARKER_U128:
            raise DecodeError("invalid integer type: found 128-bit, expected 64-bit")
        raise DecodeError(f"invalid integer marker {marker}")
    raw, offset = _take(data, offset, width)
    return int.from_bytes(raw, "little"), offset


def encode_i64(value: int) -> bytes:
    """Encode a signed 64-bit integer."""
    if not -(2**63) <= value < 2**63:
        raise ValueError(f"{value} is outside the signed 64-bit range")
    zigzag = ((-value - 1) << 1) | 1 if value < 0 else value << 1
    return encode_varint(zigzag)


def decode_i64(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a signed 64-bit integer; return it and the next offset."""
    zigzag, offset = decode_varint(data, offset)
    if zigzag & 1:
        return -(zigzag >> 1) - 1, offset
    return zigzag >> 1, offset


def encode_bytes(value: bytes) -> bytes:
    """Encode a byte string with its length in front."""
    return encode_varint(len(value)) + bytes(value)


def decode_bytes(data: bytes, offset: int = 0) -> tuple[bytes, int]:
    """Decode a length-prefixed byte string; return it and the next offset."""
    length, offset = decode_varint(data, offset)
    return _take(data, offset, length)


def encode_str(value: str) -> bytes:
    """Encode text as length-prefixed UTF-8."""
    return encode_bytes(value.encode("utf-8"))


def decode_str(data: bytes, offset: int = 0) -> tuple[str, int]:
    """Decode length-prefixed UTF-8 text; return it and the next offset."""
    raw, offset = decode_bytes(data, offset)
    try:
        return raw.decode("utf-8"), offset
    except UnicodeDecodeError as exc:
        raise DecodeError(f"invalid UTF-8: {exc}") from exc


def encode(num: Num) -> bytes:
    """Encode the fixed number as a signed 64-bit integer."""
    return encode_i64(num.value)


def decode(num: Num, data: bytes, offset: int = 0) -> tuple[Num, int]:
    """Read a signed integer and return ``num`` with the next offset.

    Raises DecodeError with the message ``not N`` when the integer read
    is a different number.
    """
    value, offset = decode_i64(data, offset)
    if value != num.value:
        raise DecodeError(f"not {num.value}")
    return num, offset