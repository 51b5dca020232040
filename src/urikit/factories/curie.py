"""Resolution of CURIEs to URIs.

A CURIE (https://www.w3.org/TR/curie/) is resolved either against a static
mapping of prefixes to namespace names or against a namespace context, i.e.
anything able to look up the namespace bound to a prefix.

Unlike the literal concatenation prescribed by the CURIE syntax, a ``#`` is
inserted between namespace name and local name when both sides of the join
are alphanumeric. This makes ``xsd:string`` with the XML Schema namespace
``http://www.w3.org/2001/XMLSchema`` resolve to
``http://www.w3.org/2001/XMLSchema#string``.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from ..errors import CurieSyntaxError, UnknownNamespacePrefix
from ..logging_config import get_logger
from ..uri import Uri

logger = get_logger("factories.curie")


class NamespaceContext(Protocol):
    """Protocol for namespace contexts CURIEs can be resolved against.

    document_uri and line describe where the context comes from and are
    only used in error messages.
    """

    document_uri: str | None
    line: int | None

    def lookup_namespace(self, prefix: str | None) -> str | None:
        """
        Look up the namespace name bound to a prefix.

        Args:
            prefix: Namespace prefix, or None for the default namespace

        Returns:
            Namespace name, or None if the prefix is not bound
        """
        ...


@dataclass(frozen=True)
class StaticNamespaceContext:
    """Namespace context with a fixed set of bindings.

    Attributes:
        namespaces: Map of prefixes to namespace names
        default_namespace: Namespace name for unprefixed names
        document_uri: URI of the document the bindings come from
        line: Line in that document
    """

    namespaces: Mapping[str, str] = field(default_factory=dict)
    default_namespace: str | None = None
    document_uri: str | None = None
    line: int | None = None

    def lookup_namespace(self, prefix: str | None) -> str | None:
        if prefix is None:
            return self.default_namespace
        return self.namespaces.get(prefix)


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def combine_namespace_and_local_name(namespace: str | None, local_name: str) -> str:
    """Join a namespace name and a local name.

    Args:
        namespace: Namespace name, or None
        local_name: Local name

    Returns:
        The local name alone if there is no namespace, otherwise the
        concatenation, with ``#`` in between if the last character of the
        namespace and the first character of the local name are both
        alphanumeric

    Example:
        >>> combine_namespace_and_local_name("http://example.org", "123")
        'http://example.org#123'
        >>> combine_namespace_and_local_name("http://example.org/", "123")
        'http://example.org/123'
    """
    if namespace is None:
        return local_name

    if namespace and local_name and _is_alnum(namespace[-1]) and _is_alnum(local_name[0]):
        return f"{namespace}#{local_name}"

    return namespace + local_name


def unwrap_safe_curie(safe_curie: str) -> str:
    """Strip the brackets from a safe CURIE.

    Raises:
        CurieSyntaxError: If the opening or closing bracket is missing
    """
    if not safe_curie.startswith("["):
        raise CurieSyntaxError(safe_curie, 0, 'safe CURIE must begin with "["')

    if not safe_curie.endswith("]"):
        raise CurieSyntaxError(
            safe_curie, len(safe_curie) - 1, 'safe CURIE must end with "]"'
        )

    return safe_curie[1:-1]


class CurieResolver:
    """Create URIs from CURIEs, safe CURIEs, or URIs.

    Each kind of input can be resolved against a prefix map or against a
    namespace context.

    Example:
        >>> resolver = CurieResolver()
        >>> str(resolver.from_curie_and_map("foo:quux", {"foo": "http://foo.example.org/"}))
        'http://foo.example.org/quux'
    """

    def from_curie_and_map(
        self,
        curie: str,
        prefix_map: Mapping[str, str],
        default_prefix_value: str | None = None,
    ) -> Uri:
        """Create a URI from a CURIE and a prefix map.

        Args:
            curie: CURIE
            prefix_map: Map of CURIE prefixes to namespace names
            default_prefix_value: Namespace name for unprefixed names

        Returns:
            Resolved URI

        Raises:
            UnknownNamespacePrefix: If the prefix is not in the map
        """

        def lookup(prefix: str) -> str:
            try:
                return prefix_map[prefix]
            except KeyError:
                logger.debug(
                    f"Prefix not in map: {curie}",
                    extra={"prefix": prefix, "error_code": "unknown_namespace_prefix"},
                )
                raise UnknownNamespacePrefix(prefix, curie) from None

        return self._resolve(curie, lookup, default_prefix_value)

    def from_safe_curie_and_map(
        self,
        safe_curie: str,
        prefix_map: Mapping[str, str],
        default_prefix_value: str | None = None,
    ) -> Uri:
        """Create a URI from a safe CURIE and a prefix map.

        Raises:
            CurieSyntaxError: If the brackets are missing
            UnknownNamespacePrefix: If the prefix is not in the map
        """
        return self.from_curie_and_map(
            unwrap_safe_curie(safe_curie), prefix_map, default_prefix_value
        )

    def from_uri_or_safe_curie_and_map(
        self,
        uri_or_safe_curie: str,
        prefix_map: Mapping[str, str],
        default_prefix_value: str | None = None,
    ) -> Uri:
        """Create a URI from a URI or a safe CURIE and a prefix map.

        Values starting with ``[`` are safe CURIEs, anything else is taken
        as a URI as is.
        """
        if uri_or_safe_curie.startswith("["):
            return self.from_safe_curie_and_map(
                uri_or_safe_curie, prefix_map, default_prefix_value
            )
        return Uri(uri_or_safe_curie)

    def from_curie_and_context(
        self,
        curie: str,
        context: NamespaceContext,
        default_prefix_value: str | None = None,
    ) -> Uri:
        """Create a URI from a CURIE and a namespace context.

        Args:
            curie: CURIE
            context: Namespace context
            default_prefix_value: Namespace name for unprefixed names. If
                not given, the context's default namespace is used.

        Returns:
            Resolved URI

        Raises:
            UnknownNamespacePrefix: If the context cannot resolve the prefix
        """

        def lookup(prefix: str) -> str:
            namespace = context.lookup_namespace(prefix)
            if namespace is None:
                logger.debug(
                    f"Prefix not bound in context: {curie}",
                    extra={"prefix": prefix, "error_code": "unknown_namespace_prefix"},
                )
                raise UnknownNamespacePrefix(
                    prefix, curie, context.document_uri, context.line
                )
            return namespace

        if default_prefix_value is None:
            default_prefix_value = context.lookup_namespace(None)

        return self._resolve(curie, lookup, default_prefix_value)

    def from_safe_curie_and_context(
        self,
        safe_curie: str,
        context: NamespaceContext,
        default_prefix_value: str | None = None,
    ) -> Uri:
        """Create a URI from a safe CURIE and a namespace context.

        Raises:
            CurieSyntaxError: If the brackets are missing
            UnknownNamespacePrefix: If the context cannot resolve the prefix
        """
        return self.from_curie_and_context(
            unwrap_safe_curie(safe_curie), context, default_prefix_value
        )

    def from_uri_or_safe_curie_and_context(
        self,
        uri_or_safe_curie: str,
        context: NamespaceContext,
        default_prefix_value: str | None = None,
    ) -> Uri:
        """Create a URI from a URI or a safe CURIE and a namespace context."""
        if uri_or_safe_curie.startswith("["):
            return self.from_safe_curie_and_context(
                uri_or_safe_curie, context, default_prefix_value
            )
        return Uri(uri_or_safe_curie)

    @staticmethod
    def _resolve(
        curie: str,
        lookup: Callable[[str], str],
        default_prefix_value: str | None,
    ) -> Uri:
        prefix, colon, local_name = curie.partition(":")

        if not colon or not prefix:
            return Uri(combine_namespace_and_local_name(default_prefix_value, curie))

        return Uri(combine_namespace_and_local_name(lookup(prefix), local_name))
