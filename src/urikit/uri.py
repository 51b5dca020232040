"""Immutable URI value.

Thin adapter over ``rfc3986.URIReference`` that adds the rendering rules the
rest of urikit relies on:

- ``file`` URIs with an empty or absolute path always carry an authority
  delimiter, so ``file:/foo`` renders as ``file:///foo``.
- An empty port (``host:``) or the default port of the scheme is dropped
  from the authority on construction.
"""

from rfc3986 import URIReference, uri_reference

# Default ports of the schemes most commonly seen in URIs
DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "gopher": 70,
    "nntp": 119,
    "news": 119,
    "telnet": 23,
    "tn3270": 23,
    "imap": 143,
    "pop": 110,
    "ldap": 389,
}


def compose_authority(userinfo: str | None, host: str | None, port: int | str | None) -> str:
    """Build an authority string from its components.

    Args:
        userinfo: User information, without the trailing ``@``
        host: Host (IP literals keep their brackets)
        port: Port, omitted when None or empty

    Returns:
        Authority string, e.g. ``user@example.org:8080``
    """
    authority = host or ""
    if userinfo is not None:
        authority = f"{userinfo}@{authority}"
    if port is not None and port != "":
        authority = f"{authority}:{port}"
    return authority


class Uri:
    """An immutable URI reference.

    Example:
        >>> uri = Uri("file:/tmp/foo")
        >>> str(uri)
        'file:///tmp/foo'
        >>> str(uri.with_path("/tmp/bar"))
        'file:///tmp/bar'
    """

    __slots__ = ("_reference",)

    def __init__(self, value: "str | Uri | URIReference") -> None:
        if isinstance(value, Uri):
            reference = value._reference
        elif isinstance(value, URIReference):
            reference = value
        else:
            reference = uri_reference(value)

        object.__setattr__(self, "_reference", _drop_default_port(reference))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def reference(self) -> URIReference:
        """Underlying ``rfc3986.URIReference``."""
        return self._reference

    @property
    def scheme(self) -> str:
        return self._reference.scheme or ""

    @property
    def authority(self) -> str | None:
        return self._reference.authority

    @property
    def userinfo(self) -> str | None:
        return self._reference.userinfo

    @property
    def host(self) -> str:
        """Host, or the empty string when the URI has no host."""
        return self._reference.host or ""

    @property
    def port(self) -> int | None:
        port = self._reference.port
        return int(port) if port else None

    @property
    def path(self) -> str:
        return self._reference.path or ""

    @property
    def query(self) -> str:
        return self._reference.query or ""

    @property
    def fragment(self) -> str:
        return self._reference.fragment or ""

    def with_path(self, path: str) -> "Uri":
        """Return a copy of this URI with the path replaced."""
        return Uri(self._reference.copy_with(path=path))

    def with_host(self, host: str) -> "Uri":
        """Return a copy of this URI with the host replaced."""
        reference = self._reference
        return Uri(
            reference.copy_with(
                authority=compose_authority(reference.userinfo, host, reference.port)
            )
        )

    def with_port(self, port: int | None) -> "Uri":
        """Return a copy of this URI with the port replaced or removed."""
        reference = self._reference
        return Uri(
            reference.copy_with(
                authority=compose_authority(reference.userinfo, reference.host, port)
            )
        )

    def with_query(self, query: str | None) -> "Uri":
        """Return a copy of this URI with the query replaced or removed."""
        return Uri(self._reference.copy_with(query=query))

    def is_relative_path_reference(self) -> bool:
        """Whether this is a relative-path reference (RFC 3986 section 4.2)."""
        return (
            not self.scheme
            and self.authority is None
            and not self.path.startswith("/")
        )

    def __str__(self) -> str:
        reference = self._reference
        parts: list[str] = []

        if reference.scheme:
            parts.append(f"{reference.scheme}:")

        authority = reference.authority
        if authority is None and self.scheme == "file" and (
            not self.path or self.path.startswith("/")
        ):
            authority = ""
        if authority is not None:
            parts.append(f"//{authority}")

        parts.append(self.path)

        if reference.query is not None:
            parts.append(f"?{reference.query}")
        if reference.fragment is not None:
            parts.append(f"#{reference.fragment}")

        return "".join(parts)

    def __repr__(self) -> str:
        return f"Uri({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Uri):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


def _drop_default_port(reference: URIReference) -> URIReference:
    """Remove an empty port or the scheme's default port from the authority."""
    authority = reference.authority
    if not authority or ":" not in authority.rsplit("]", 1)[-1]:
        return reference

    host = reference.host
    if host is None:
        # Authority does not parse; keep it verbatim
        return reference

    port = reference.port
    scheme = (reference.scheme or "").lower()
    if port and int(port) != DEFAULT_PORTS.get(scheme):
        return reference

    return reference.copy_with(
        authority=compose_authority(reference.userinfo, host, None)
    )
