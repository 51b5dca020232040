"""Factories creating URIs from paths, CURIEs and server environments."""

from .curie import (
    CurieResolver,
    NamespaceContext,
    StaticNamespaceContext,
    combine_namespace_and_local_name,
    unwrap_safe_curie,
)
from .file_uri import FileUriFactory, canonicalize_path, file_uris
from .server_env import USE_HTTP_HOST, UriFromServerEnvFactory

__all__ = [
    "USE_HTTP_HOST",
    "CurieResolver",
    "FileUriFactory",
    "NamespaceContext",
    "StaticNamespaceContext",
    "UriFromServerEnvFactory",
    "canonicalize_path",
    "combine_namespace_and_local_name",
    "file_uris",
    "unwrap_safe_curie",
]
