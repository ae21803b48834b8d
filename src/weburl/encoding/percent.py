"""src/weburl/encoding/percent.py

UTF-8 aware percent-encoding and decoding.

Encoding works over code points and a predicate telling which of them must be
escaped. The predicates below are the WHATWG percent-encode sets, each one
built on top of a smaller one.
"""

from typing import Callable, Iterator, Tuple

__all__ = [
    "iter_code_points",
    "percent_decode",
    "percent_encode",
    "utf8_encode",
    "in_c0_control_set",
    "in_fragment_set",
    "in_query_set",
    "in_special_query_set",
    "in_path_set",
    "in_userinfo_set",
]

REPLACEMENT_CHARACTER = 0xFFFD

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_FRAGMENT_EXTRA = frozenset((0x20, 0x22, 0x3C, 0x3E, 0x60))
_QUERY_EXTRA = frozenset((0x20, 0x22, 0x23, 0x3C, 0x3E))
_PATH_EXTRA = frozenset((0x3F, 0x60, 0x7B, 0x7D, 0x5E))
_USERINFO_EXTRA = frozenset((0x2F, 0x3A, 0x3B, 0x3D, 0x40, 0x5B, 0x5C, 0x5D, 0x7C))


def _is_percent_triplet(value: str, index: int) -> bool:
    return (
        value[index] == "%"
        and index + 2 < len(value)
        and value[index + 1] in _HEX_DIGITS
        and value[index + 2] in _HEX_DIGITS
    )


def _code_point_at(value: str, index: int) -> Tuple[int, int]:
    """
    Read one code point, merging a UTF-16 surrogate pair.

    Returns:
        Tuple of (code_point, characters_consumed). Lone surrogates come back
        as U+FFFD.
    """
    code = ord(value[index])
    if 0xD800 <= code <= 0xDBFF and index + 1 < len(value):
        low = ord(value[index + 1])
        if 0xDC00 <= low <= 0xDFFF:
            return 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00), 2
    if 0xD800 <= code <= 0xDFFF:
        return REPLACEMENT_CHARACTER, 1
    return code, 1


def iter_code_points(value: str) -> Iterator[int]:
    """Yield the code points of a string, with surrogates sanitized."""
    index = 0
    while index < len(value):
        code_point, width = _code_point_at(value, index)
        yield code_point
        index += width


def utf8_encode(code_point: int) -> bytes:
    """UTF-8 bytes for a single (non-surrogate) code point."""
    return chr(code_point).encode("utf-8")


def percent_decode(value: str, plus_as_space: bool = False) -> str:
    """
    Decode ``%XX`` triplets and return the UTF-8 decoded text.

    Characters that are not part of a valid triplet are kept as their UTF-8
    bytes, so mixed input round-trips. Malformed byte sequences decode to
    U+FFFD. Never raises.

    Args:
        value: Percent-encoded text.
        plus_as_space: Treat ``+`` as an encoded space (form encoding).

    Returns:
        Decoded string.
    """
    out = bytearray()
    index = 0
    while index < len(value):
        char = value[index]
        if plus_as_space and char == "+":
            out.append(0x20)
            index += 1
            continue
        if _is_percent_triplet(value, index):
            out.append(int(value[index + 1 : index + 3], 16))
            index += 3
            continue
        code_point, width = _code_point_at(value, index)
        out += utf8_encode(code_point)
        index += width
    return out.decode("utf-8", errors="replace")


def percent_encode(value: str, should_encode: Callable[[int], bool]) -> str:
    """
    Percent-encode every code point selected by ``should_encode``.

    Valid ``%XX`` triplets already present in the input are copied through
    unchanged.

    Args:
        value: Text to encode.
        should_encode: Encode-set predicate taking a code point.

    Returns:
        Encoded string with uppercase hex digits.
    """
    parts = []
    index = 0
    while index < len(value):
        if _is_percent_triplet(value, index):
            parts.append(value[index : index + 3])
            index += 3
            continue
        code_point, width = _code_point_at(value, index)
        index += width
        if not should_encode(code_point):
            parts.append(chr(code_point))
            continue
        parts.append("".join(f"%{byte:02X}" for byte in utf8_encode(code_point)))
    return "".join(parts)


def in_c0_control_set(code_point: int) -> bool:
    """C0 controls and everything above U+007E."""
    return code_point <= 0x1F or code_point > 0x7E


def in_fragment_set(code_point: int) -> bool:
    """C0 control set plus space, ``"``, ``<``, ``>`` and backtick."""
    return in_c0_control_set(code_point) or code_point in _FRAGMENT_EXTRA


def in_query_set(code_point: int) -> bool:
    """C0 control set plus space, ``"``, ``#``, ``<`` and ``>``."""
    return in_c0_control_set(code_point) or code_point in _QUERY_EXTRA


def in_special_query_set(code_point: int) -> bool:
    """Query set plus ``'``, used by special schemes."""
    return in_query_set(code_point) or code_point == 0x27


def in_path_set(code_point: int) -> bool:
    """Query set plus ``?``, backtick, ``{``, ``}`` and ``^``."""
    return in_query_set(code_point) or code_point in _PATH_EXTRA


def in_userinfo_set(code_point: int) -> bool:
    """Path set plus ``/ : ; = @ [ \\ ] |``."""
    return in_path_set(code_point) or code_point in _USERINFO_EXTRA
