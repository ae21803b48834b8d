"""utils/validators.py

Validation utilities for WebURL.
"""

import re
from typing import Optional, Tuple

_SCHEME_RE = re.compile(r"[a-z][a-z0-9+.\-]*")
_SCHEME_PREFIX_RE = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*):")
_PORT_RE = re.compile(r"[0-9]+")

MAX_PORT = 65535


def is_valid_scheme(scheme: str) -> bool:
    """Check that a lowercase scheme name matches ``[a-z][a-z0-9+.-]*``."""
    return _SCHEME_RE.fullmatch(scheme) is not None


def split_scheme(value: str) -> Optional[Tuple[str, str]]:
    """
    Split a leading ``scheme:`` off the input.

    Args:
        value: Cleaned URL input.

    Returns:
        ``(scheme, rest)`` with the scheme lowercased and the colon dropped,
        or None if the input does not start with a scheme.
    """
    match = _SCHEME_PREFIX_RE.match(value)
    if match is None:
        return None
    return match.group(1).lower(), value[match.end() :]


def normalize_port(port: str) -> str:
    """Drop leading zeros from a digit string, keeping a lone ``0``."""
    return port.lstrip("0") or "0"


def is_valid_port(port: str) -> bool:
    """Digits only (any zero padding) and no greater than 65535."""
    if _PORT_RE.fullmatch(port) is None:
        return False
    digits = normalize_port(port)
    return len(digits) <= len(str(MAX_PORT)) and int(digits) <= MAX_PORT
