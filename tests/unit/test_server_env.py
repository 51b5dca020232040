"""Unit tests for request URIs built from server environments."""

import pytest

from urikit.factories.server_env import USE_HTTP_HOST, UriFromServerEnvFactory


@pytest.mark.parametrize(
    ("flags", "server", "expected"),
    [
        (
            None,
            {
                "REQUEST_URI": "/",
                "SERVER_NAME": "server1.example.com",
                "SERVER_PORT": 80,
            },
            "http://server1.example.com/",
        ),
        (
            USE_HTTP_HOST,
            {
                "HTTP_HOST": "www.example.com",
                "SERVER_NAME": "server1.example.com",
                "SERVER_PORT": 80,
                "REQUEST_URI": "/foo/bar.php?baz=42",
            },
            "http://www.example.com/foo/bar.php?baz=42",
        ),
        (
            None,
            {
                "HTTPS": "on",
                "REQUEST_URI": "/qux.html",
                "SERVER_NAME": "server7.example.com",
                "SERVER_PORT": 443,
            },
            "https://server7.example.com/qux.html",
        ),
        (
            None,
            {
                "HTTPS": "on",
                "REQUEST_URI": "/bar",
                "SERVER_NAME": "server7.example.com",
                "SERVER_PORT": "8443",
            },
            "https://server7.example.com:8443/bar",
        ),
    ],
)
def test_create(flags: int | None, server: dict, expected: str):
    """Test scheme, host and port are taken from the environment."""
    factory = UriFromServerEnvFactory(flags)
    assert str(factory.create(server)) == expected


def test_flags_default_to_zero():
    assert UriFromServerEnvFactory().flags == 0
    assert UriFromServerEnvFactory(USE_HTTP_HOST).flags == UriFromServerEnvFactory.USE_HTTP_HOST


def test_missing_variable_raises_key_error():
    """Test a missing SERVER_NAME is not silently replaced."""
    with pytest.raises(KeyError):
        UriFromServerEnvFactory().create({"SERVER_PORT": 80, "REQUEST_URI": "/"})
