"""src/weburl/encoding/__init__.py

Encoding layer for WebURL.

Percent-encoding with the WHATWG encode sets, Punycode for internationalized
domain labels and the application/x-www-form-urlencoded codec.
"""

from . import form
from .percent import (
    in_c0_control_set,
    in_fragment_set,
    in_path_set,
    in_query_set,
    in_special_query_set,
    in_userinfo_set,
    percent_decode,
    percent_encode,
)
from .punycode import encode_label

__all__ = [
    "form",
    "encode_label",
    "percent_decode",
    "percent_encode",
    "in_c0_control_set",
    "in_fragment_set",
    "in_query_set",
    "in_special_query_set",
    "in_path_set",
    "in_userinfo_set",
]
