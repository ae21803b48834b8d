"""src/weburl/exceptions.py

WebURL Exceptions hierarchy.
"""


class WebURLError(Exception):
    """Base exception for all WebURL errors."""


class InvalidURLError(WebURLError):
    """
    Input could not be parsed as an absolute URL, or could not be
    resolved against its base.

    Raised by the URL constructor, the ``href`` setter and the parser.
    Component setters never raise it.
    """

    def __init__(self, message: str = "Invalid URL"):
        super().__init__(message)
