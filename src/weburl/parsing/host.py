"""src/weburl/parsing/host.py

Host processing: domain to ASCII, IPv4 detection and canonicalization, and
authority splitting.
"""

import re
from typing import List, NamedTuple, Optional, Tuple

from weburl.encoding.percent import (
    in_c0_control_set,
    in_userinfo_set,
    percent_decode,
    percent_encode,
)
from weburl.encoding.punycode import encode_label
from weburl.exceptions import InvalidURLError
from weburl.utils.validators import is_valid_port, normalize_port

__all__ = [
    "Authority",
    "domain_to_ascii",
    "ends_in_number",
    "parse_ipv4_number",
    "parse_ipv4",
    "canonicalize_special_host",
    "parse_authority",
]

ACE_PREFIX = "xn--"

_DECIMAL_LABEL = re.compile(r"[0-9]+")
_HEX_LABEL = re.compile(r"0[xX][0-9A-Fa-f]+")
_WHITESPACE = re.compile(r"\s")

# Forbidden domain code points for special-scheme hosts.
_FORBIDDEN_DOMAIN_CHARS = frozenset("\x00\t\n\r #/:<>?@[\\]^|")


class Authority(NamedTuple):
    """Pieces of a ``userinfo@host:port`` authority string."""

    username: str
    password: str
    host: str
    port: str


def _is_ipv6_literal(hostname: str) -> bool:
    return hostname.startswith("[") and hostname.endswith("]")


def domain_to_ascii(hostname: str) -> str:
    """
    Lowercase a domain and Punycode-encode its non-ASCII labels.

    Bracketed IPv6 literals and the empty host are returned unchanged.

    Args:
        hostname: Domain as typed by the user.

    Returns:
        ASCII domain; non-ASCII labels are prefixed with ``xn--``.
    """
    if not hostname or _is_ipv6_literal(hostname):
        return hostname

    labels: List[str] = []
    for label in hostname.split("."):
        lower = label.lower()
        if lower.isascii():
            labels.append(lower)
        else:
            labels.append(ACE_PREFIX + encode_label(lower))
    return ".".join(labels)


def ends_in_number(hostname: str) -> bool:
    """
    Check whether the last label looks like an IPv4 number.

    Only plain decimal digits and ``0x`` hex count. A trailing empty label
    does not.
    """
    if not hostname:
        return False
    last = hostname.split(".")[-1]
    if not last:
        return False
    return bool(_DECIMAL_LABEL.fullmatch(last) or _HEX_LABEL.fullmatch(last))


def parse_ipv4_number(part: str) -> Optional[int]:
    """
    Parse one IPv4 part as decimal, ``0``-prefixed octal or ``0x`` hex.

    Returns:
        The value, or None when the part is empty or has a digit outside
        its base.
    """
    if not part:
        return None

    base = 10
    digits = part
    if len(part) > 2 and part[:2] in ("0x", "0X"):
        base = 16
        digits = part[2:]
    elif len(part) > 1 and part[0] == "0":
        base = 8

    value = 0
    for char in digits:
        digit = int(char, 16) if char in "0123456789abcdefABCDEF" else -1
        if digit < 0 or digit >= base:
            return None
        value = value * base + digit
    return value


def parse_ipv4(hostname: str) -> Optional[str]:
    """
    Parse an IPv4 host into canonical dotted-decimal form.

    Accepts one to four parts. Every part but the last must fit in a byte
    and the last one fills the remaining bytes.

    Args:
        hostname: Host with no trailing dot.

    Returns:
        ``a.b.c.d`` string, or None if the host is not a valid IPv4 address.
    """
    if not hostname:
        return None

    parts = hostname.split(".")
    if len(parts) > 4 or not parts[-1]:
        return None

    numbers: List[int] = []
    for part in parts:
        number = parse_ipv4_number(part)
        if number is None:
            return None
        numbers.append(number)

    if any(number > 255 for number in numbers[:-1]):
        return None

    address = 0
    for number in numbers[:-1]:
        address = address * 256 + number

    factor = 256 ** (5 - len(numbers))
    if numbers[-1] >= factor:
        return None
    address = address * factor + numbers[-1]
    if address > 0xFFFFFFFF:
        return None

    return ".".join(str((address >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def canonicalize_special_host(hostname: str) -> str:
    """
    Canonicalize an already ASCII special-scheme host.

    Hosts whose last label is numeric must be valid IPv4 addresses and are
    rewritten in dotted-decimal form. Other hosts are returned unchanged.

    Raises:
        InvalidURLError: If the host ends in a number but is not valid IPv4.
    """
    if _is_ipv6_literal(hostname):
        return hostname

    check = hostname[:-1] if hostname.endswith(".") else hostname
    if not ends_in_number(check):
        return hostname

    address = parse_ipv4(check)
    if address is None:
        raise InvalidURLError(f"Invalid IPv4 host: {hostname!r}")
    return address


def _split_host_port(hostport: str) -> Tuple[str, str]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise InvalidURLError("Invalid IPv6 address: missing ']'")
        rest = hostport[end + 1 :]
        if rest and not rest.startswith(":"):
            raise InvalidURLError(f"Invalid IPv6 address: {hostport!r}")
        return hostport[: end + 1], rest[1:]

    # Only a single colon separates host and port.
    if hostport.count(":") == 1:
        host, _, port = hostport.partition(":")
        return host, port
    return hostport, ""


def parse_authority(authority: str, special: bool = True) -> Authority:
    """
    Split and normalize an authority string.

    Userinfo runs up to the last ``@`` and is re-encoded with the userinfo
    set. Special hosts go through :func:`domain_to_ascii` and the forbidden
    code point check; other hosts are only C0-percent-encoded. IPv4 handling
    is left to :func:`canonicalize_special_host`.

    Args:
        authority: Text between ``//`` and the next ``/``, ``?`` or ``#``.
        special: Whether the owning scheme is special.

    Returns:
        Authority tuple with a normalized port (leading zeros removed).

    Raises:
        InvalidURLError: On an unterminated IPv6 literal, whitespace or a
            forbidden character in the host, or an invalid port.
    """
    username = password = ""
    hostport = authority

    userinfo, at, rest = authority.rpartition("@")
    if at:
        hostport = rest
        username, _, password = userinfo.partition(":")
        username = percent_encode(percent_decode(username), in_userinfo_set)
        password = percent_encode(percent_decode(password), in_userinfo_set)

    host, port = _split_host_port(hostport)
    host = host.strip()

    if _WHITESPACE.search(host):
        raise InvalidURLError(f"Invalid host: {host!r}")
    if special:
        host = domain_to_ascii(host)
        if not _is_ipv6_literal(host) and _FORBIDDEN_DOMAIN_CHARS.intersection(host):
            raise InvalidURLError(f"Invalid host: {host!r}")
    elif not _is_ipv6_literal(host):
        host = percent_encode(host, in_c0_control_set)

    if port:
        if not is_valid_port(port):
            raise InvalidURLError(f"Invalid port: {port!r}")
        port = normalize_port(port)

    return Authority(username, password, host, port)
