"""src/weburl/utils/schemes.py

Scheme registry.
"""

from dataclasses import dataclass
from typing import Dict, Optional

__all__ = ["SchemeInfo", "SPECIAL_SCHEMES", "is_special_scheme", "default_port"]


@dataclass(frozen=True)
class SchemeInfo:
    """
    Static properties of a special scheme.

    Attributes:
        name: Lowercase scheme name, without the trailing colon.
        default_port: Registered default port as a decimal string, or None
            when the scheme has no network port (``file``).
    """

    name: str
    default_port: Optional[str] = None


SPECIAL_SCHEMES: Dict[str, SchemeInfo] = {
    info.name: info
    for info in (
        SchemeInfo("http", "80"),
        SchemeInfo("https", "443"),
        SchemeInfo("ws", "80"),
        SchemeInfo("wss", "443"),
        SchemeInfo("ftp", "21"),
        SchemeInfo("file"),
    )
}


def is_special_scheme(scheme: str) -> bool:
    """Return True for http, https, ws, wss, ftp and file."""
    return scheme in SPECIAL_SCHEMES


def default_port(scheme: str) -> str:
    """
    Get the registered default port of a scheme.

    Args:
        scheme: Lowercase scheme name.

    Returns:
        Default port as a decimal string, or "" if the scheme has none.
    """
    info = SPECIAL_SCHEMES.get(scheme)
    if info is None or info.default_port is None:
        return ""
    return info.default_port
