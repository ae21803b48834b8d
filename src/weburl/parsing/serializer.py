"""src/weburl/parsing/serializer.py

URL record serialization.
"""

from weburl.parsing.record import URLRecord
from weburl.utils.schemes import default_port

__all__ = ["serialize_url", "serialize_origin", "serialize_host"]


def serialize_host(record: URLRecord) -> str:
    """``host`` or ``host:port`` when the port is not the default."""
    if record.port and record.port != default_port(record.scheme):
        return f"{record.host}:{record.port}"
    return record.host


def serialize_url(record: URLRecord) -> str:
    """
    Build the href string of a record.

    Special schemes always serialize at least ``/`` as their path. Empty
    query and fragment are omitted with their delimiter.
    """
    parts = [record.scheme, ":"]
    if record.has_authority:
        parts.append("//")
        if record.has_credentials:
            parts.append(record.username)
            if record.password:
                parts.append(f":{record.password}")
            parts.append("@")
        parts.append(serialize_host(record))

    if record.is_special:
        parts.append(record.pathname or "/")
    else:
        parts.append(record.pathname)

    if record.query:
        parts.append(f"?{record.query}")
    if record.fragment:
        parts.append(f"#{record.fragment}")
    return "".join(parts)


def serialize_origin(record: URLRecord) -> str:
    """
    ASCII origin of a record.

    Only special, non-file schemes with an authority have a tuple origin;
    everything else is ``"null"``.
    """
    if not record.has_authority or not record.is_special or record.scheme == "file":
        return "null"
    return f"{record.scheme}://{serialize_host(record)}"
