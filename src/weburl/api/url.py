"""src/weburl/api/url.py

Mutable URL value type.

Construction and ``href`` assignment parse the whole string and raise
:class:`InvalidURLError` on failure. Component setters validate the new value
against the current scheme and silently ignore anything they cannot apply.
"""

# pylint: disable=protected-access,too-many-public-methods

import logging
from typing import Optional, Union

from weburl.api.search_params import URLSearchParams
from weburl.encoding.percent import (
    in_fragment_set,
    in_path_set,
    in_userinfo_set,
    percent_decode,
    percent_encode,
)
from weburl.exceptions import InvalidURLError
from weburl.parsing.host import parse_authority
from weburl.parsing.parser import parse_url, query_encode_set, resolve_host
from weburl.parsing.path import normalize_path
from weburl.parsing.record import URLRecord
from weburl.parsing.serializer import serialize_host, serialize_origin, serialize_url
from weburl.utils.schemes import default_port, is_special_scheme
from weburl.utils.validators import is_valid_port, is_valid_scheme, normalize_port

__all__ = ["URL"]

logger = logging.getLogger(__name__)

BaseURL = Union["URL", str, None]


def _record_for_base(base: BaseURL) -> Optional[URLRecord]:
    if base is None:
        return None
    if isinstance(base, URL):
        return base._record
    return parse_url(str(base))


class URL:
    """
    Parsed URL with per-component getters and setters.

    Attributes are properties over a private :class:`URLRecord`. Example::

        url = URL("/search?q=1", "https://example.com/docs/")
        url.search_params.append("page", "2")
        str(url)  # 'https://example.com/search?q=1&page=2'
    """

    __slots__ = ("_record",)

    def __init__(self, url: str, base: BaseURL = None):
        """
        Parse ``url``, resolving it against ``base`` when it is relative.

        Args:
            url: Absolute URL or relative reference.
            base: URL instance or string used to resolve relative input.

        Raises:
            InvalidURLError: If ``url`` (or a string ``base``) cannot be
                parsed.
        """
        self._record: URLRecord = parse_url(str(url), _record_for_base(base))

    @staticmethod
    def parse(url: str, base: BaseURL = None) -> Optional["URL"]:
        """Like the constructor, but return None instead of raising."""
        try:
            return URL(url, base)
        except InvalidURLError as exc:
            logger.debug("Rejected URL %r (base %r): %s", url, base, exc)
            return None

    @staticmethod
    def can_parse(url: str, base: BaseURL = None) -> bool:
        """Whether the constructor would accept these arguments."""
        return URL.parse(url, base) is not None

    def _ignored(self, component: str, value: str) -> None:
        logger.debug("Ignoring %s=%r for %s", component, value, self.href)

    def _sync_query_from_params(self) -> None:
        """Update callback installed on the bound URLSearchParams."""
        record = self._record
        if record.updating_search_params or record.search_params is None:
            return
        record.query = str(record.search_params)

    def _sync_params_from_query(self) -> None:
        record = self._record
        if record.search_params is None or record.updating_search_params:
            return
        record.updating_search_params = True
        try:
            record.search_params._reset(record.query)
        finally:
            record.updating_search_params = False

    @property
    def href(self) -> str:
        """Serialized URL."""
        return serialize_url(self._record)

    @href.setter
    def href(self, value: str) -> None:
        record = parse_url(str(value))
        record.search_params = self._record.search_params
        self._record = record
        self._sync_params_from_query()

    @property
    def origin(self) -> str:
        """``scheme://host[:port]`` for http(s)/ws(s)/ftp, otherwise ``"null"``."""
        return serialize_origin(self._record)

    @property
    def protocol(self) -> str:
        """Scheme followed by ``:``."""
        return f"{self._record.scheme}:"

    @protocol.setter
    def protocol(self, value: str) -> None:
        record = self._record
        value = str(value)
        scheme = value.partition(":")[0].lower()
        if (
            record.has_opaque_path
            or not is_valid_scheme(scheme)
            or record.is_special != is_special_scheme(scheme)
        ):
            self._ignored("protocol", value)
            return

        if is_special_scheme(scheme):
            if not record.has_authority or not record.host:
                self._ignored("protocol", value)
                return
            if scheme == "file":
                if record.has_credentials or record.port:
                    self._ignored("protocol", value)
                    return
                if record.host == "localhost":
                    record.host = ""
            if record.port == default_port(scheme):
                record.port = ""
            if not record.pathname:
                record.pathname = "/"
        record.scheme = scheme

    def _can_have_credentials_or_port(self) -> bool:
        record = self._record
        return (
            not record.has_opaque_path
            and record.has_authority
            and bool(record.host)
            and record.scheme != "file"
        )

    @property
    def username(self) -> str:
        """Percent-decoded username."""
        return percent_decode(self._record.username)

    @username.setter
    def username(self, value: str) -> None:
        if not self._can_have_credentials_or_port():
            self._ignored("username", value)
            return
        self._record.username = percent_encode(str(value), in_userinfo_set)

    @property
    def password(self) -> str:
        """Percent-decoded password."""
        return percent_decode(self._record.password)

    @password.setter
    def password(self, value: str) -> None:
        if not self._can_have_credentials_or_port():
            self._ignored("password", value)
            return
        self._record.password = percent_encode(str(value), in_userinfo_set)

    @property
    def host(self) -> str:
        """Host with ``:port`` when a non-default port is set."""
        return serialize_host(self._record)

    @host.setter
    def host(self, value: str) -> None:
        self._set_host(str(value), with_port=True)

    @property
    def hostname(self) -> str:
        """Host without the port."""
        return self._record.host

    @hostname.setter
    def hostname(self, value: str) -> None:
        self._set_host(str(value), with_port=False)

    def _set_host(self, value: str, with_port: bool) -> None:
        record = self._record
        component = "host" if with_port else "hostname"
        if record.has_opaque_path:
            self._ignored(component, value)
            return
        try:
            authority = parse_authority(value, special=record.is_special)
            if record.scheme == "file" and authority.port:
                raise InvalidURLError("file URLs cannot have a port")
            host = resolve_host(record.scheme, authority.host)
        except InvalidURLError as exc:
            logger.debug("Invalid %s %r: %s", component, value, exc)
            return
        if authority.username or authority.password or (authority.port and not with_port):
            self._ignored(component, value)
            return

        if record.scheme == "file":
            record.username = record.password = record.port = ""
        elif authority.port:
            port = authority.port
            record.port = "" if port == default_port(record.scheme) else port
        record.host = host
        record.has_authority = True
        if record.is_special and not record.pathname:
            record.pathname = "/"

    @property
    def port(self) -> str:
        """Decimal port, or "" when the scheme default applies."""
        return self._record.port

    @port.setter
    def port(self, value: str) -> None:
        record = self._record
        port = str(value)
        if not self._can_have_credentials_or_port():
            self._ignored("port", port)
            return
        if port == "":
            record.port = ""
            return
        if not is_valid_port(port):
            self._ignored("port", port)
            return
        normalized = normalize_port(port)
        record.port = "" if normalized == default_port(record.scheme) else normalized

    @property
    def pathname(self) -> str:
        """Path, ``/`` at least for special schemes."""
        record = self._record
        if not record.pathname and record.is_special:
            return "/"
        return record.pathname

    @pathname.setter
    def pathname(self, value: str) -> None:
        record = self._record
        if record.has_opaque_path:
            self._ignored("pathname", value)
            return
        encoded = percent_encode(str(value), in_path_set)
        if not encoded:
            empty_allowed = record.has_authority and not record.is_special
            record.pathname = "" if empty_allowed else "/"
            return
        record.pathname = normalize_path(encoded)

    @property
    def search(self) -> str:
        """``?query``, or "" when the query is empty."""
        query = self._record.query
        return f"?{query}" if query else ""

    @search.setter
    def search(self, value: str) -> None:
        record = self._record
        query = str(value)
        if query.startswith("?"):
            query = query[1:]
        record.query = percent_encode(query, query_encode_set(record.scheme))
        self._sync_params_from_query()

    @property
    def search_params(self) -> URLSearchParams:
        """URLSearchParams bound to this URL's query, created on first access."""
        record = self._record
        if record.search_params is None:
            params = URLSearchParams(record.query)
            params._bind(self._sync_query_from_params)
            record.search_params = params
        return record.search_params

    @property
    def hash(self) -> str:
        """``#fragment``, or "" when the fragment is empty."""
        fragment = self._record.fragment
        return f"#{fragment}" if fragment else ""

    @hash.setter
    def hash(self, value: str) -> None:
        fragment = str(value)
        if fragment.startswith("#"):
            fragment = fragment[1:]
        self._record.fragment = percent_encode(fragment, in_fragment_set)

    def to_json(self) -> str:
        """Same as :attr:`href`."""
        return self.href

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"URL({self.href!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return self.href == other.href
