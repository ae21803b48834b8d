"""src/weburl/encoding/form.py

application/x-www-form-urlencoded serializer and parser.
"""

from typing import Iterable, List, Tuple

from weburl.encoding.percent import iter_code_points, percent_decode, utf8_encode

__all__ = ["encode_component", "decode_component", "serialize", "parse"]

_SAFE = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789*-._"
)


def encode_component(value: str) -> str:
    """
    Form-encode a name or a value.

    Space becomes ``+``, alphanumerics and ``* - . _`` are kept, everything
    else is UTF-8 encoded and percent-escaped.
    """
    parts = []
    for code_point in iter_code_points(value):
        char = chr(code_point)
        if char == " ":
            parts.append("+")
        elif char in _SAFE:
            parts.append(char)
        else:
            parts.append("".join(f"%{byte:02X}" for byte in utf8_encode(code_point)))
    return "".join(parts)


def decode_component(value: str) -> str:
    """Decode a form-encoded name or value (``+`` is a space)."""
    return percent_decode(value, plus_as_space=True)


def serialize(pairs: Iterable[Tuple[str, str]]) -> str:
    """Join name/value pairs into a query string, without a leading ``?``."""
    return "&".join(
        f"{encode_component(name)}={encode_component(value)}" for name, value in pairs
    )


def parse(query: str) -> List[Tuple[str, str]]:
    """
    Split a query string into decoded name/value pairs.

    A single leading ``?`` is ignored, empty pieces between ``&`` are
    skipped and a piece without ``=`` gets an empty value.

    Args:
        query: Raw query string.

    Returns:
        Pairs in input order.
    """
    if query.startswith("?"):
        query = query[1:]
    pairs: List[Tuple[str, str]] = []
    for piece in query.split("&"):
        if not piece:
            continue
        name, _, value = piece.partition("=")
        pairs.append((decode_component(name), decode_component(value)))
    return pairs
