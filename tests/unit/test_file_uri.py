"""Unit tests for conversion between filesystem paths and file: URIs."""

import os
from pathlib import Path

import pytest

from urikit.errors import FileNotFound, UnsupportedConfiguration
from urikit.factories.file_uri import FileUriFactory, canonicalize_path, file_uris

FOREIGN_SEPARATOR = "\\" if os.sep == "/" else "/"


class TestFileUriFactoryConfiguration:
    """Tests for FileUriFactory construction."""

    def test_defaults_fit_host_platform(self):
        """Test default separator is the host one and canonicalization is on."""
        factory = FileUriFactory()
        assert factory.directory_separator == os.sep
        assert factory.apply_realpath is True

    def test_foreign_separator_disables_canonicalization_by_default(self):
        """Test a foreign separator turns canonicalization off by default."""
        factory = FileUriFactory(FOREIGN_SEPARATOR)
        assert factory.directory_separator == FOREIGN_SEPARATOR
        assert factory.apply_realpath is False

    def test_host_separator_without_canonicalization(self):
        """Test canonicalization can be turned off explicitly."""
        factory = FileUriFactory(os.sep, False)
        assert factory.apply_realpath is False

    def test_foreign_separator_with_canonicalization_raises_error(self):
        """Test requesting canonicalization with a foreign separator fails early."""
        with pytest.raises(UnsupportedConfiguration) as exc_info:
            FileUriFactory(FOREIGN_SEPARATOR, True)

        assert exc_info.value.directory_separator == FOREIGN_SEPARATOR
        assert exc_info.value.error_code == "unsupported_configuration"


class TestPathToUriPath:
    """Tests for path_to_uri_path() and uri_path_to_path()."""

    def test_reserved_characters_are_encoded(self):
        """Test spaces, question marks and exclamation marks are encoded."""
        factory = FileUriFactory()
        path = os.sep.join(["foo", " bar?", "b!!z"])

        assert factory.path_to_uri_path(path) == "foo/%20bar%3F/b%21%21z"

    def test_colons_are_not_encoded(self):
        """Test colons stay literal so drive letters survive."""
        factory = FileUriFactory("\\", False)
        assert factory.path_to_uri_path("c:\\a:b\\x y") == "c:/a:b/x%20y"

    def test_unreserved_characters_are_kept(self):
        """Test RFC 3986 unreserved characters are not encoded."""
        factory = FileUriFactory("/", False)
        assert factory.path_to_uri_path("/a-b_c.d~e") == "/a-b_c.d~e"

    def test_non_ascii_characters_are_utf8_encoded(self):
        """Test non-ASCII characters are percent-encoded as UTF-8."""
        factory = FileUriFactory("/", False)
        assert factory.path_to_uri_path("/tmp/\u00fcber") == "/tmp/%C3%BCber"
        assert factory.uri_path_to_path("/tmp/%C3%BCber") == "/tmp/\u00fcber"

    def test_backslash_separator_becomes_slash(self):
        """Test foreign separators are converted to forward slashes."""
        factory = FileUriFactory("\\", False)
        assert factory.path_to_uri_path("d:\\data\\my file") == "d:/data/my%20file"
        assert factory.uri_path_to_path("d:/data/my%20file") == "d:\\data\\my file"

    @pytest.mark.parametrize(
        "path",
        [
            "/foo/ bar?/b!!z",
            "/foo/bar/",
            "c:/f==/bar",
            "relative/p%th",
            "/a+b/#c/&d=e",
            "",
        ],
    )
    def test_path_round_trip(self, path: str):
        """Test path -> URI path -> path returns the identical path."""
        factory = FileUriFactory("/", False)
        assert factory.uri_path_to_path(factory.path_to_uri_path(path)) == path

    @pytest.mark.parametrize(
        "uri_path",
        [
            "foo/%20bar%3F/b%21%21z",
            "/c:/program%20files/",
            "/a%2Bb/%23c",
        ],
    )
    def test_uri_path_round_trip(self, uri_path: str):
        """Test URI path -> path -> URI path returns the identical URI path."""
        factory = FileUriFactory("\\", False)
        assert factory.path_to_uri_path(factory.uri_path_to_path(uri_path)) == uri_path


class TestCreate:
    """Tests for FileUriFactory.create()."""

    @pytest.mark.parametrize(
        ("separator", "path", "expected"),
        [
            ("/", "/foo/b$r", "file:///foo/b%24r"),
            ("/", "c:/f==/bar", "file:///c:/f%3D%3D/bar"),
            ("\\", "c:\\foo\\bar", "file:///c:/foo/bar"),
            ("/", "/srv/www/", "file:///srv/www/"),
        ],
    )
    def test_create_without_canonicalization(
        self, separator: str, path: str, expected: str
    ):
        """Test create() encodes paths as given when canonicalization is off."""
        factory = FileUriFactory(separator, False)
        assert str(factory.create(path)) == expected

    def test_create_returns_local_file_uri(self, project_tree: Path):
        """Test create() returns a file: URI with empty host."""
        uri = FileUriFactory().create(project_tree / "docs" / "index.xml")

        assert uri.scheme == "file"
        assert uri.host == ""
        assert str(uri).startswith("file:///")

    def test_create_canonicalizes_path(self, project_tree: Path):
        """Test create() resolves dot segments."""
        factory = FileUriFactory()
        path = project_tree / "docs" / ".." / "my notes.txt"
        expected_path = factory.path_to_uri_path(str((project_tree / "my notes.txt").resolve()))

        uri = factory.create(str(path))

        assert uri.path.lstrip("/") == expected_path.lstrip("/")
        assert "%20" in str(uri)
        assert ".." not in str(uri)

    def test_create_keeps_trailing_separator(self, project_tree: Path):
        """Test a trailing separator on a directory survives canonicalization."""
        uri = FileUriFactory().create(str(project_tree / "docs") + os.sep)
        assert uri.path.endswith("/docs/")

    def test_create_trailing_separator_on_file_raises_error(self, project_tree: Path):
        """Test a file path with a trailing separator is not found."""
        path = str(project_tree / "my notes.txt") + os.sep

        with pytest.raises(FileNotFound) as exc_info:
            FileUriFactory().create(path)

        assert exc_info.value.path == path

    def test_canonicalize_trailing_separator_on_file_raises_error(self, project_tree: Path):
        with pytest.raises(FileNotFound):
            canonicalize_path(str(project_tree / "docs" / "index.xml") + os.sep)

    def test_create_without_trailing_separator(self, project_tree: Path):
        """Test no separator is added when the input has none."""
        uri = FileUriFactory().create(str(project_tree / "docs"))
        assert uri.path.endswith("/docs")

    def test_create_resolves_relative_path(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """Test create() resolves relative paths against the working directory."""
        monkeypatch.chdir(project_tree)
        uri = FileUriFactory().create("docs")

        expected = FileUriFactory().create(str(project_tree.resolve() / "docs"))
        assert uri == expected

    def test_create_nonexistent_path_raises_error(self, tmp_path: Path):
        """Test create() raises FileNotFound for a missing path."""
        missing = str(tmp_path / "does_not_exist")

        with pytest.raises(FileNotFound) as exc_info:
            FileUriFactory(None, True).create(missing)

        assert exc_info.value.path == missing
        assert str(exc_info.value) == f'File "{missing}" not found'
        assert isinstance(exc_info.value, FileNotFoundError)

    def test_create_nonexistent_path_without_canonicalization(self):
        """Test create() does not touch the filesystem when canonicalization is off."""
        uri = FileUriFactory("/", False).create("/does/not/exist")
        assert str(uri) == "file:///does/not/exist"


class TestCanonicalizePath:
    """Tests for canonicalize_path()."""

    def test_canonicalize_existing_path(self, project_tree: Path):
        """Test canonicalize_path() returns the resolved path."""
        result = canonicalize_path(str(project_tree / "docs" / "."))
        assert result == str((project_tree / "docs").resolve())

    def test_canonicalize_missing_path_raises_error(self, tmp_path: Path):
        """Test canonicalize_path() raises FileNotFound for a missing path."""
        with pytest.raises(FileNotFound):
            canonicalize_path(str(tmp_path / "missing"))


class TestFileUris:
    """Tests for file_uris()."""

    @pytest.mark.parametrize(
        ("separator", "paths", "expected"),
        [
            (
                "/",
                ["/home/bob jr", "/var/lib/foo?"],
                ["file:///home/bob%20jr", "file:///var/lib/foo%3F"],
            ),
            (
                "\\",
                ["c:\\program files", "d:\\data"],
                ["file:///c:/program%20files", "file:///d:/data"],
            ),
        ],
    )
    def test_file_uris_with_factory(
        self, separator: str, paths: list[str], expected: list[str]
    ):
        """Test file_uris() maps every path through the given factory."""
        factory = FileUriFactory(separator, False)
        result = [str(uri) for uri in file_uris(iter(paths), factory)]
        assert result == expected

    def test_file_uris_default_factory_canonicalizes(self, project_tree: Path):
        """Test file_uris() canonicalizes with the default factory."""
        paths = [project_tree / "docs" / "index.xml", project_tree / "my notes.txt"]
        uris = list(file_uris(paths))

        assert [uri.path.rsplit("/", 1)[-1] for uri in uris] == ["index.xml", "my%20notes.txt"]

    def test_file_uris_is_lazy(self, tmp_path: Path):
        """Test file_uris() only fails when the missing path is reached."""
        uris = file_uris([str(tmp_path), str(tmp_path / "missing")])

        assert next(uris).scheme == "file"
        with pytest.raises(FileNotFound):
            next(uris)
