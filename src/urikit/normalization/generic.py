"""Flag-driven URI normalization.

Each flag enables one normalization; ``PRESERVING_NORMALIZATIONS`` combines
those that never change the semantics of a URI (RFC 3986 section 6.2.2).
All flags fit in the low byte, leaving higher bits for extensions.
"""

import re

from rfc3986 import normalizers

from ..logging_config import get_logger
from ..uri import Uri

logger = get_logger("normalization.generic")

# %XX escapes to upper case, e.g. %3a -> %3A
CAPITALIZE_PERCENT_ENCODING = 0x01

# %XX escapes of unreserved characters to the characters, e.g. %7E -> ~
DECODE_UNRESERVED_CHARACTERS = 0x02

# Empty path to "/" for http and https
CONVERT_EMPTY_PATH = 0x04

# file://localhost/x -> file:///x
REMOVE_DEFAULT_HOST = 0x08

# http://example.org:80/ -> http://example.org/
# Uri drops default ports on construction, so this flag never changes a URI
REMOVE_DEFAULT_PORT = 0x10

# /a/./b/../c -> /a/c
REMOVE_DOT_SEGMENTS = 0x20

# /a//b -> /a/b, not semantics-preserving
REMOVE_DUPLICATE_SLASHES = 0x40

# ?b=2&a=1 -> ?a=1&b=2, not semantics-preserving
SORT_QUERY_PARAMETERS = 0x80

PRESERVING_NORMALIZATIONS = (
    CAPITALIZE_PERCENT_ENCODING
    | DECODE_UNRESERVED_CHARACTERS
    | CONVERT_EMPTY_PATH
    | REMOVE_DEFAULT_HOST
    | REMOVE_DEFAULT_PORT
    | REMOVE_DOT_SEGMENTS
)

_UNRESERVED_ESCAPE = re.compile(r"%(?:2[DdEe]|3[0-9]|[46][1-9A-Fa-f]|[57][0-9Aa]|5[Ff]|7[Ee])")

_EMPTY_PATH_SCHEMES = frozenset({"http", "https"})


def _decode_unreserved(component: str) -> str:
    return _UNRESERVED_ESCAPE.sub(lambda m: chr(int(m.group(0)[1:], 16)), component)


def normalize_generic(uri: Uri, flags: int = PRESERVING_NORMALIZATIONS) -> Uri:
    """Apply the normalizations selected by flags.

    Bits not defined in this module are ignored.

    Args:
        uri: URI to normalize
        flags: Bitmask of normalization flags

    Returns:
        Normalized URI

    Example:
        >>> str(normalize_generic(Uri("http://example.org:80/a/./b/%7euser")))
        'http://example.org/a/b/~user'
    """
    if flags & CAPITALIZE_PERCENT_ENCODING:
        uri = uri.with_path(normalizers.normalize_percent_characters(uri.path))
        if uri.reference.query is not None:
            uri = uri.with_query(normalizers.normalize_percent_characters(uri.query))

    if flags & DECODE_UNRESERVED_CHARACTERS:
        uri = uri.with_path(_decode_unreserved(uri.path))
        if uri.reference.query is not None:
            uri = uri.with_query(_decode_unreserved(uri.query))

    if (
        flags & CONVERT_EMPTY_PATH
        and uri.path == ""
        and uri.authority is not None
        and uri.scheme in _EMPTY_PATH_SCHEMES
    ):
        uri = uri.with_path("/")

    if flags & REMOVE_DEFAULT_HOST and uri.scheme == "file" and uri.host == "localhost":
        uri = uri.with_host("")

    if flags & REMOVE_DOT_SEGMENTS and not uri.is_relative_path_reference():
        uri = uri.with_path(normalizers.remove_dot_segments(uri.path))

    if flags & REMOVE_DUPLICATE_SLASHES:
        uri = uri.with_path(re.sub(r"//+", "/", uri.path))

    if flags & SORT_QUERY_PARAMETERS and uri.query:
        uri = uri.with_query("&".join(sorted(uri.query.split("&"))))

    logger.debug(f"Normalized to {uri}", extra={"uri": str(uri), "flags": flags})
    return uri
