"""Resource path construction.

Every caller-supplied path segment (vhost, queue, exchange, user, binding
properties key, ...) is percent-encoded so that everything outside the
RFC 3986 unreserved set is escaped. ``/`` must be escaped because the
default vhost is literally named ``/``, and spaces must be escaped because
a raw space is not a valid request path character.
"""

from urllib.parse import quote


def encode_segment(value) -> str:
    """Percent-encode one path segment.

    Only ``A-Z a-z 0-9 - . _ ~`` survive unescaped; text is UTF-8 encoded
    first.

    :param value: Segment value; non-strings are converted with ``str``
    :return: Encoded segment

    Examples:
        >>> encode_segment("/")
        '%2F'
        >>> encode_segment("my queue")
        'my%20queue'
    """
    return quote(str(value), safe="")


def build_path(resource: str, *segments) -> str:
    """Join a literal resource prefix with encoded dynamic segments.

    :param resource: Literal path prefix, such as ``"queues"`` or
        ``"bindings"``; it is not encoded
    :param segments: Dynamic segments, each encoded with :func:`encode_segment`
    :return: Relative request path

    Examples:
        >>> build_path("queues", "/", "orders")
        'queues/%2F/orders'
    """
    return "/".join([resource, *(encode_segment(s) for s in segments)])
