"""src/weburl/parsing/parser.py

URL string parser.

Builds a :class:`URLRecord` from an absolute URL string, or from a relative
one resolved against a base record. Special schemes (http, https, ws, wss,
ftp, file) always get an authority; other schemes only when the input has
``//`` after the colon.
"""

# pylint: disable=too-many-branches

import re
from typing import Callable, Optional, Tuple

from weburl.encoding.percent import (
    in_fragment_set,
    in_path_set,
    in_query_set,
    in_special_query_set,
    percent_encode,
)
from weburl.exceptions import InvalidURLError
from weburl.parsing.host import Authority, canonicalize_special_host, parse_authority
from weburl.parsing.path import normalize_path
from weburl.parsing.record import URLRecord
from weburl.utils.schemes import default_port, is_special_scheme
from weburl.utils.validators import split_scheme

__all__ = ["parse_url", "resolve_host", "query_encode_set"]

_AUTHORITY_END = re.compile(r"[/?#]")
_OUTER_C0_OR_SPACE = re.compile(r"^[\x00-\x20]+|[\x00-\x20]+$")
_TAB_OR_NEWLINE = re.compile(r"[\t\n\r]")


def query_encode_set(scheme: str) -> Callable[[int], bool]:
    """Query encode set for a scheme (special schemes also escape ``'``)."""
    return in_special_query_set if is_special_scheme(scheme) else in_query_set


def resolve_host(scheme: str, host: str) -> str:
    """
    Apply the scheme's host rules to an already split host.

    ``file`` maps ``localhost`` to the empty host; other special schemes
    require a host. Special hosts are IPv4-canonicalized.

    Raises:
        InvalidURLError: If the host is empty where one is required, or is
            not a valid IPv4 address while looking like one.
    """
    if scheme == "file":
        if not host or host == "localhost":
            return ""
        return canonicalize_special_host(host)
    if is_special_scheme(scheme):
        if not host:
            raise InvalidURLError("Invalid URL: empty host")
        return canonicalize_special_host(host)
    return host


def _clean_input(value: str) -> str:
    value = _OUTER_C0_OR_SPACE.sub("", value)
    return _TAB_OR_NEWLINE.sub("", value)


def _split_authority(rest: str) -> Tuple[str, str]:
    match = _AUTHORITY_END.search(rest)
    if match is None:
        return rest, ""
    return rest[: match.start()], rest[match.start() :]


def _assign_authority(record: URLRecord, authority: Authority) -> None:
    if record.scheme == "file" and (
        authority.username or authority.password or authority.port
    ):
        raise InvalidURLError("Invalid URL: file URLs cannot have credentials or a port")

    record.host = resolve_host(record.scheme, authority.host)
    if record.scheme == "file":
        record.username = record.password = record.port = ""
    else:
        record.username = authority.username
        record.password = authority.password
        port = authority.port
        record.port = "" if port == default_port(record.scheme) else port
    record.has_authority = True


def _take_fragment_and_query(record: URLRecord, rest: str) -> str:
    """Move ``#fragment`` and ``?query`` from ``rest`` into the record."""
    rest, hash_sign, fragment = rest.partition("#")
    if hash_sign:
        record.fragment = percent_encode(fragment, in_fragment_set)
    rest, question_mark, query = rest.partition("?")
    if question_mark:
        record.query = percent_encode(query, query_encode_set(record.scheme))
    return rest


def _parse_absolute(scheme: str, rest: str) -> URLRecord:
    record = URLRecord(scheme=scheme)

    if record.is_special:
        rest = rest.replace("\\", "/")
        record.has_authority = True
        if scheme == "file":
            if rest.startswith("//"):
                authority, rest = _split_authority(rest[2:])
                _assign_authority(record, parse_authority(authority))
        else:
            authority, rest = _split_authority(rest.lstrip("/"))
            if not authority:
                raise InvalidURLError("Invalid URL: empty authority")
            _assign_authority(record, parse_authority(authority))
    elif rest.startswith("//"):
        authority, rest = _split_authority(rest[2:])
        _assign_authority(record, parse_authority(authority, special=False))

    rest = _take_fragment_and_query(record, rest)
    encoded = percent_encode(rest, in_path_set)
    if record.is_special:
        record.pathname = normalize_path(encoded)
    elif record.has_authority:
        # Non-special authorities allow an empty path.
        record.pathname = normalize_path(encoded) if encoded else ""
    elif encoded.startswith("/"):
        record.pathname = normalize_path(encoded)
    else:
        record.pathname = encoded
    return record


def _parse_relative(value: str, base: URLRecord) -> URLRecord:
    record = base.copy()
    record.fragment = ""
    if not value:
        return record

    if record.is_special:
        value = value.replace("\\", "/")

    if value.startswith("//"):
        authority, value = _split_authority(value[2:])
        _assign_authority(record, parse_authority(authority, special=record.is_special))
        record.pathname = "/" if record.is_special else ""
        record.query = ""
        if not value:
            return record

    if value.startswith("#"):
        record.fragment = percent_encode(value[1:], in_fragment_set)
        return record

    if value.startswith("?"):
        record.query = ""
        _take_fragment_and_query(record, value)
        return record

    record.query = ""
    value = _take_fragment_and_query(record, value)
    if value.startswith("/"):
        record.pathname = normalize_path(percent_encode(value, in_path_set))
        return record

    base_path = record.pathname or "/"
    slash = base_path.rfind("/")
    directory = base_path[: slash + 1] if slash >= 0 else "/"
    record.pathname = normalize_path(percent_encode(directory + value, in_path_set))
    return record


def parse_url(value: str, base: Optional[URLRecord] = None) -> URLRecord:
    """
    Parse a URL string into a new record.

    Leading and trailing C0 controls and spaces are stripped, and tabs and
    newlines anywhere in the input are dropped first.

    Args:
        value: Absolute URL, or a relative reference when ``base`` is given.
        base: Record to resolve relative references against. It is copied,
            never modified.

    Returns:
        A fresh record with no search params bound.

    Raises:
        InvalidURLError: If the input is relative and there is no base, or
            if the authority, host or port is invalid.
    """
    value = _clean_input(value)
    split = split_scheme(value)
    if split is not None:
        return _parse_absolute(*split)
    if base is None:
        raise InvalidURLError(f"Invalid URL: {value!r} has no scheme and no base")
    return _parse_relative(value, base)
