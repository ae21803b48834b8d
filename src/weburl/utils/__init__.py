"""src/weburl/utils/__init__.py"""

from .schemes import SPECIAL_SCHEMES, SchemeInfo, default_port, is_special_scheme
from .validators import is_valid_port, is_valid_scheme, normalize_port, split_scheme

__all__ = [
    "SchemeInfo",
    "SPECIAL_SCHEMES",
    "default_port",
    "is_special_scheme",
    "split_scheme",
    "is_valid_port",
    "normalize_port",
    "is_valid_scheme",
]
