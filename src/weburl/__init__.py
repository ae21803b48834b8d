"""src/weburl/__init__.py

WebURL - WHATWG-style URL parsing for Python.

WebURL parses absolute and relative URL strings into a canonical form,
serializes them back, lets you edit single components and keeps a live
URLSearchParams view of the query. It does no network I/O.

Key Features:
    - Special-scheme rules for http, https, ws, wss, ftp and file
    - IPv4 host canonicalization (decimal, octal and hex parts)
    - Punycode encoding of internationalized domain labels
    - Dot-segment removal and context-aware percent-encoding
    - URLSearchParams bound live to its URL
    - Zero external dependencies

Example:
    Parsing and resolving::

        from weburl import URL

        url = URL("rel?x=1", "https://example.com/base/dir/")
        print(url.href)      # https://example.com/base/dir/rel?x=1
        print(url.origin)    # https://example.com

    Editing the query::

        url = URL("http://h/")
        url.search_params.append("x", "1")
        print(url)           # http://h/?x=1

    Handling invalid input::

        from weburl import URL, InvalidURLError

        URL.can_parse("http://ex ample.com/")   # False
        try:
            URL("not a url")
        except InvalidURLError:
            ...
"""

import logging

from weburl.api.search_params import URLSearchParams
from weburl.api.url import URL
from weburl.exceptions import InvalidURLError, WebURLError
from weburl.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "URL",
    "URLSearchParams",
    "InvalidURLError",
    "WebURLError",
    "__version__",
]
