import logging

import pytest

from weburl import URL


@pytest.fixture
def base_url():
    """Fixture providing a directory-style https base URL."""
    return URL("https://example.com/base/dir/")


@pytest.fixture
def bound_url():
    """Fixture providing a URL whose search params are already bound."""
    url = URL("http://h/path?a=1&b=2")
    _ = url.search_params
    return url


@pytest.fixture
def weburl_debug_logs(caplog):
    """Fixture capturing DEBUG records from the weburl package."""
    caplog.set_level(logging.DEBUG, logger="weburl")
    return caplog
