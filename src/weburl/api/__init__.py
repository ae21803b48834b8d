"""src/weburl/api/__init__.py"""

from .search_params import URLSearchParams
from .url import URL

__all__ = ["URL", "URLSearchParams"]
