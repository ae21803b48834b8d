"""src/weburl/parsing/__init__.py

Parsing layer for WebURL.

This module turns URL strings into canonical records and back: host
processing, dot-segment removal, the parser itself and the serializer.
"""

from .host import (
    Authority,
    canonicalize_special_host,
    domain_to_ascii,
    ends_in_number,
    parse_authority,
    parse_ipv4,
    parse_ipv4_number,
)
from .parser import parse_url, query_encode_set, resolve_host
from .path import normalize_path
from .record import URLRecord
from .serializer import serialize_host, serialize_origin, serialize_url

__all__ = [
    "Authority",
    "URLRecord",
    "canonicalize_special_host",
    "domain_to_ascii",
    "ends_in_number",
    "normalize_path",
    "parse_authority",
    "parse_ipv4",
    "parse_ipv4_number",
    "parse_url",
    "query_encode_set",
    "resolve_host",
    "serialize_host",
    "serialize_origin",
    "serialize_url",
]
