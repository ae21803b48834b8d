"""src/weburl/parsing/record.py

Canonical URL record.
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from weburl.utils.schemes import is_special_scheme

if TYPE_CHECKING:  # pragma: no cover
    from weburl.api.search_params import URLSearchParams

__all__ = ["URLRecord"]


@dataclass
class URLRecord:
    """
    Parsed and normalized URL components.

    Every string field is stored in its serialized (percent-encoded) form.
    Records are created by the parser and owned by a single URL object.

    Attributes:
        scheme: Lowercase scheme without the colon.
        username: Userinfo-encoded username.
        password: Userinfo-encoded password.
        host: Empty, dotted-decimal IPv4, bracketed IPv6 or ASCII domain.
        port: Empty (scheme default) or a decimal port, never the default.
        pathname: Normalized hierarchical path or an opaque path.
        query: Encoded query without the ``?``.
        fragment: Encoded fragment without the ``#``.
        has_authority: Whether ``//authority`` is serialized.
        search_params: URLSearchParams bound to this record, if any.
        updating_search_params: Set while the record writes into the bound
            params, so their update callback does not write back.
    """

    # pylint: disable=too-many-instance-attributes
    scheme: str = ""
    username: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    pathname: str = ""
    query: str = ""
    fragment: str = ""
    has_authority: bool = False
    search_params: Optional["URLSearchParams"] = None
    updating_search_params: bool = False

    @property
    def is_special(self) -> bool:
        """Whether the scheme is one of the special schemes."""
        return is_special_scheme(self.scheme)

    @property
    def has_opaque_path(self) -> bool:
        """Non-special, authority-less record whose path does not start with ``/``."""
        if self.is_special or self.has_authority:
            return False
        return not self.pathname.startswith("/")

    @property
    def has_credentials(self) -> bool:
        """Whether a username or a password is set."""
        return bool(self.username or self.password)

    def copy(self) -> "URLRecord":
        """Copy the URL components, without the search params binding."""
        return replace(self, search_params=None, updating_search_params=False)
