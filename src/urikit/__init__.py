"""urikit: file: URIs from filesystem paths, URIs from CURIEs, URI normalization."""

from .errors import (
    CurieSyntaxError,
    FileNotFound,
    UnknownNamespacePrefix,
    UnsupportedConfiguration,
    UriKitError,
)
from .factories import (
    CurieResolver,
    FileUriFactory,
    NamespaceContext,
    StaticNamespaceContext,
    UriFromServerEnvFactory,
    combine_namespace_and_local_name,
    file_uris,
)
from .normalization import APPLY_REALPATH, normalize
from .uri import Uri

__version__ = "0.1.0"

__all__ = [
    "APPLY_REALPATH",
    "CurieResolver",
    "CurieSyntaxError",
    "FileNotFound",
    "FileUriFactory",
    "NamespaceContext",
    "StaticNamespaceContext",
    "UnknownNamespacePrefix",
    "UnsupportedConfiguration",
    "Uri",
    "UriFromServerEnvFactory",
    "UriKitError",
    "combine_namespace_and_local_name",
    "file_uris",
    "normalize",
]
