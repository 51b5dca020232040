"""URI normalization with canonicalization of local file paths."""

import sys

from ..factories.file_uri import FileUriFactory
from ..logging_config import get_logger
from ..uri import Uri
from .generic import PRESERVING_NORMALIZATIONS, normalize_generic

logger = get_logger("normalization.normalizer")

# Canonicalize the path of local file: URIs. Above all generic flags.
APPLY_REALPATH = 0x8000

DEFAULT_FLAGS = PRESERVING_NORMALIZATIONS | APPLY_REALPATH


def normalize(uri: Uri, flags: int | None = None) -> Uri:
    """Normalize a URI.

    Applies normalize_generic() first. If APPLY_REALPATH is set and the
    result is a local ``file:`` URI (scheme ``file``, empty host), its path
    is then replaced by the canonical path of the file it points to. Any
    other URI is returned as the generic normalizer left it.

    Args:
        uri: URI to normalize
        flags: Bitmask of flags from urikit.normalization.generic plus
            APPLY_REALPATH. Defaults to PRESERVING_NORMALIZATIONS |
            APPLY_REALPATH.

    Returns:
        Normalized URI

    Raises:
        FileNotFound: If the file a local file: URI points to does not exist
    """
    if flags is None:
        flags = DEFAULT_FLAGS

    uri = normalize_generic(uri, flags)

    if flags & APPLY_REALPATH and uri.scheme == "file" and uri.host == "":
        factory = FileUriFactory()
        fs_path = factory.uri_path_to_path(uri.path)

        # Handle Windows drive letters (e.g., \C:\path -> C:\path)
        if sys.platform == "win32" and len(fs_path) > 2 and fs_path[2] == ":":
            fs_path = fs_path[1:]

        canonical = factory.create(fs_path)
        logger.debug(f"Canonicalized {uri}", extra={"uri": str(uri), "path": fs_path})
        return uri.with_path(canonical.path)

    return uri
