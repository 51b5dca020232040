"""Conversion between filesystem paths and file: URIs.

Handles conversion of local paths to the path component of a ``file:`` URI
and back, for the host platform or for a foreign one (e.g. Windows paths on
a POSIX host).

None of the conversion methods checks its argument for syntactical
correctness. With ``\\`` as separator, ``foo\\\\bar`` silently becomes
``foo//bar``.

See RFC 8089 (https://datatracker.ietf.org/doc/html/rfc8089).
"""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from urllib.parse import quote, unquote

from ..errors import FileNotFound, UnsupportedConfiguration
from ..logging_config import get_logger
from ..uri import Uri

logger = get_logger("factories.file_uri")

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def canonicalize_path(path: str) -> str:
    """Resolve a path to its absolute, symlink-free form.

    Args:
        path: Path to canonicalize (relative paths are resolved against the
              current working directory)

    Returns:
        Canonical path as a string, without trailing separator

    Raises:
        FileNotFound: If the path does not exist or cannot be resolved, or
            if it ends with a separator but does not name a directory
    """
    try:
        resolved = Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug(
            f"Failed to canonicalize path: {e}",
            extra={"path": path, "error_code": "not_found"},
        )
        raise FileNotFound(path) from e

    # resolve() drops a trailing separator, so "file.txt/" would pass
    if path.endswith(_SEPARATORS) and not resolved.is_dir():
        logger.debug(
            "Trailing separator on a non-directory",
            extra={"path": path, "error_code": "not_found"},
        )
        raise FileNotFound(path)

    return str(resolved)


class FileUriFactory:
    """Factory for ``file:`` URIs.

    With default arguments the factory fits the host platform and
    canonicalizes paths in create(). With a foreign directory separator it
    converts paths that do not live on the local platform; canonicalization
    is then unavailable.

    Example:
        >>> factory = FileUriFactory("/", apply_realpath=False)
        >>> str(factory.create("/home/bob jr"))
        'file:///home/bob%20jr'
    """

    def __init__(
        self,
        directory_separator: str | None = None,
        apply_realpath: bool | None = None,
    ) -> None:
        """
        Initialize factory.

        Args:
            directory_separator: Directory separator of the paths handled.
                Defaults to the host separator.
            apply_realpath: Whether create() canonicalizes paths. Defaults to
                True if the separator is the host separator, else False.

        Raises:
            UnsupportedConfiguration: If canonicalization is requested
                together with a separator other than the host separator
        """
        separator = directory_separator if directory_separator is not None else os.sep
        host_separator = separator == os.sep

        if apply_realpath is None:
            apply_realpath = host_separator
        elif apply_realpath and not host_separator:
            raise UnsupportedConfiguration(
                separator,
                f'Cannot canonicalize paths with directory separator "{separator}" '
                f'on a host using "{os.sep}"',
            )

        self._directory_separator = separator
        self._apply_realpath = apply_realpath

    @property
    def directory_separator(self) -> str:
        """Directory separator used for filesystem paths."""
        return self._directory_separator

    @property
    def apply_realpath(self) -> bool:
        """Whether create() canonicalizes paths."""
        return self._apply_realpath

    def path_to_uri_path(self, path: str) -> str:
        """Convert a filesystem path to a path for use in a file: URI.

        Colons are never percent-encoded: RFC 3986 section 2.2 makes a
        reserved character and its percent-encoding non-equivalent, and the
        drive-letter production of RFC 8089 appendix E.2 requires a literal
        colon.

        Args:
            path: Filesystem path using this factory's separator

        Returns:
            URI path with percent-encoded segments joined by ``/``

        Example:
            >>> FileUriFactory("\\\\", False).path_to_uri_path("c:\\\\my docs")
            'c:/my%20docs'
        """
        return "/".join(
            quote(segment, safe="").replace("%3A", ":")
            for segment in path.split(self._directory_separator)
        )

    def uri_path_to_path(self, uri_path: str) -> str:
        """Convert the path of a file: URI to a filesystem path."""
        return self._directory_separator.join(
            unquote(segment) for segment in uri_path.split("/")
        )

    def create(self, path: str | os.PathLike[str]) -> Uri:
        """Create an absolute ``file:`` URI from a filesystem path.

        A trailing separator on the input is kept, even though
        canonicalization strips it, so that directory URIs stay directory
        URIs.

        Args:
            path: Filesystem path. If apply_realpath is off it must already
                be absolute; this is not checked.

        Returns:
            ``file:`` URI

        Raises:
            FileNotFound: If apply_realpath is on and the path does not exist
        """
        path = os.fspath(path)

        if self._apply_realpath:
            fs_path = canonicalize_path(path)
            if path.endswith(self._directory_separator) and not fs_path.endswith(
                self._directory_separator
            ):
                fs_path += self._directory_separator
        else:
            fs_path = path

        uri_path = self.path_to_uri_path(fs_path)

        # Canonical paths with a drive letter do not start with a separator
        if not uri_path.startswith("/"):
            uri_path = f"/{uri_path}"

        # "file://" + uri_path would turn the first segment into a host
        # unless uri_path itself starts with "//"
        uri = Uri(f"file:{uri_path}")
        logger.debug(f"Created {uri}", extra={"path": path, "uri": str(uri)})
        return uri


def file_uris(
    paths: Iterable[str | os.PathLike[str]],
    factory: FileUriFactory | None = None,
) -> Iterator[Uri]:
    """Lazily convert filesystem paths to ``file:`` URIs.

    Args:
        paths: Any iterable of paths
        factory: Factory to use. Defaults to a host-platform factory that
            canonicalizes paths.

    Yields:
        One URI per path, in input order

    Raises:
        FileNotFound: From the factory, when it canonicalizes and a path
            does not exist
    """
    factory = factory or FileUriFactory()
    for path in paths:
        yield factory.create(path)
