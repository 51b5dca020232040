"""URI normalization."""

from .generic import (
    CAPITALIZE_PERCENT_ENCODING,
    CONVERT_EMPTY_PATH,
    DECODE_UNRESERVED_CHARACTERS,
    PRESERVING_NORMALIZATIONS,
    REMOVE_DEFAULT_HOST,
    REMOVE_DEFAULT_PORT,
    REMOVE_DOT_SEGMENTS,
    REMOVE_DUPLICATE_SLASHES,
    SORT_QUERY_PARAMETERS,
    normalize_generic,
)
from .normalizer import APPLY_REALPATH, DEFAULT_FLAGS, normalize

__all__ = [
    "APPLY_REALPATH",
    "CAPITALIZE_PERCENT_ENCODING",
    "CONVERT_EMPTY_PATH",
    "DECODE_UNRESERVED_CHARACTERS",
    "DEFAULT_FLAGS",
    "PRESERVING_NORMALIZATIONS",
    "REMOVE_DEFAULT_HOST",
    "REMOVE_DEFAULT_PORT",
    "REMOVE_DOT_SEGMENTS",
    "REMOVE_DUPLICATE_SLASHES",
    "SORT_QUERY_PARAMETERS",
    "normalize",
    "normalize_generic",
]
