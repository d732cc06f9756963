"""Conversion between raw octets and two-byte UTF-8 sequences."""

from __future__ import annotations

from typing import Optional, Union


class Utf8Error(ValueError):
    """Raised when data cannot be converted."""


def _check_limit(max_len: Optional[int]) -> None:
    if max_len is not None and max_len < 0:
        raise ValueError("max_len must not be negative")


def utf8_length(data: bytes) -> int:
    """Return the number of bytes ``data`` occupies when encoded as UTF-8."""
    return len(data) + sum(1 for octet in data if octet > 127)


def bytes_to_utf8(data: bytes, max_len: Optional[int] = None) -> bytes:
    """Encode each octet of ``data`` as a UTF-8 character.

    Output stops silently once ``max_len`` bytes have been produced; a
    character that would be split at that limit raises Utf8Error.
    """
    _check_limit(max_len)
    out = bytearray()
    for octet in data:
        if max_len is not None and len(out) >= max_len:
            break
        if octet <= 127:
            out.append(octet)
        else:
            if max_len is not None and len(out) + 2 > max_len:
                raise Utf8Error("output too small for two-byte sequence")
            out.append(0xC0 + (octet >> 6))
            out.append(0x80 + (octet & 0x3F))
    return bytes(out)


def utf8_to_bytes(text: Union[bytes, str], max_len: Optional[int] = None) -> bytes:
    """Decode UTF-8 ``text`` whose characters all fit into one octet.

    Output stops silently once ``max_len`` bytes have been produced.
    Truncated or invalid sequences and characters wider than eight bits
    raise Utf8Error.
    """
    _check_limit(max_len)
    src = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    out = bytearray()
    it = iter(src)
    for lead in it:
        if max_len is not None and len(out) >= max_len:
            break
        if lead <= 127:
            out.append(lead)
        elif lead <= 195:
            follow = next(it, None)
            if follow is None:
                raise Utf8Error("truncated UTF-8 sequence")
            if follow >> 6 != 2:
                raise Utf8Error("invalid UTF-8 continuation byte")
            out.append(((lead << 6) + (follow & 0x3F)) & 0xFF)
        else:
            raise Utf8Error("characters wider than 8 bits are not supported")
    return bytes(out)