"""URIs of the current request, built from a CGI-style server environment."""

from collections.abc import Mapping
from typing import Any

from ..uri import Uri

# Use HTTP_HOST rather than SERVER_NAME.
#
# HTTP_HOST is client-controlled and thus reflects what the user sees in the
# browser. SERVER_NAME is server-controlled and not subject to manipulation,
# provided the server is configured correctly.
USE_HTTP_HOST = 1


class UriFromServerEnvFactory:
    """Create the request URI from server environment variables.

    Example:
        >>> factory = UriFromServerEnvFactory()
        >>> str(factory.create({
        ...     "SERVER_NAME": "example.org", "SERVER_PORT": 80, "REQUEST_URI": "/"
        ... }))
        'http://example.org/'
    """

    USE_HTTP_HOST = USE_HTTP_HOST

    def __init__(self, flags: int | None = None) -> None:
        self._flags = flags or 0

    @property
    def flags(self) -> int:
        return self._flags

    def create(self, server: Mapping[str, Any]) -> Uri:
        """
        Create URI from a server environment mapping.

        Args:
            server: Mapping with SERVER_NAME (or HTTP_HOST), SERVER_PORT,
                REQUEST_URI and, for TLS connections, HTTPS

        Returns:
            Request URI; the default port of the scheme is omitted

        Raises:
            KeyError: If a required variable is missing
        """
        scheme = "https" if "HTTPS" in server else "http"
        host = server["HTTP_HOST"] if self._flags & USE_HTTP_HOST else server["SERVER_NAME"]
        return Uri(f"{scheme}://{host}:{server['SERVER_PORT']}{server['REQUEST_URI']}")
