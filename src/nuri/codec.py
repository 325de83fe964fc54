"""nuri.codec
Percent-encoding (RFC 3986 section 2.1) against the unreserved set of section 2.3.
"""

import re

_UNRESERVED_CHARS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"

# Indexed by octet value: the character itself if unreserved, otherwise its uppercase triplet.
_ENCODE_TABLE: tuple[str, ...] = tuple(
    chr(octet) if chr(octet) in _UNRESERVED_CHARS else f"%{octet:02X}" for octet in range(256)
)

# A "%" with its two hex digits, or a stray "%" that has none.
_PERCENT: re.Pattern[str] = re.compile(r"%([0-9A-Fa-f]{2})?")


def encode(data: bytes) -> str:
    """Percent-encode every octet of data that is not unreserved.
    e.g. encode(b"a b") == "a%20b"
    """
    return "".join(map(_ENCODE_TABLE.__getitem__, data))


def decode(data: str) -> bytes:
    """Replace each percent-triplet in data with the octet it encodes.
    Lenient: a "%" that is not followed by two hex digits is dropped and the characters after it
    are kept as ordinary text, so decode("100%") == b"100". Everything else is passed through as UTF-8
    (lone surrogates included, as with the "surrogatepass" error handler).
    """
    result: bytearray = bytearray()
    position: int = 0
    for m in _PERCENT.finditer(data):
        result += data[position : m.start()].encode("utf-8", "surrogatepass")
        if m[1] is not None:
            result.append(int(m[1], 16))
        position = m.end()
    result += data[position:].encode("utf-8", "surrogatepass")
    return bytes(result)


def quote(text: str, encoding: str = "utf-8") -> str:
    """Percent-encode everything but the unreserved characters. Unlike urllib.parse.quote, nothing else is safe."""
    return encode(text.encode(encoding))


def unquote(text: str, encoding: str = "utf-8", errors: str = "replace") -> str:
    return decode(text).decode(encoding, errors)


def encode_non_ascii(text: str) -> str:
    """Percent-encode only the non-ASCII characters of text, as UTF-8.
    ASCII characters are left for the grammar to judge.
    """
    if text.isascii():
        return text
    return "".join(c if c.isascii() else encode(c.encode("utf-8")) for c in text)
