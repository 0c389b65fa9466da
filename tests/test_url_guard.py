import pytest

from recipease.app.services.url_parsing.errors import (
    DisallowedHostError,
    DisallowedSchemeError,
    InvalidUrlError,
)
from recipease.app.services.url_parsing.url_guard import is_blocked_host, validate_import_url


@pytest.mark.parametrize(
    "host",
    [
        "localhost",
        "LOCALHOST",
        "127.0.0.1",
        "::1",
        "0.0.0.0",
        "169.254.169.254",
        "10.0.0.5",
        "192.168.1.1",
        "172.16.0.1",
        "172.31.255.255",
    ],
)
def test_blocked_hosts(host):
    assert is_blocked_host(host)


@pytest.mark.parametrize("host", ["example.com", "172.32.0.1", "172.99.1.1", "8.8.8.8", "11.0.0.1"])
def test_public_hosts_allowed(host):
    assert not is_blocked_host(host)


def test_prefix_match_is_textual():
    # A hostname that merely starts with "10." is blocked even if it is public.
    assert is_blocked_host("10.example.com")
    assert is_blocked_host("localhost.example.com")


def test_validate_accepts_public_https_url():
    parsed = validate_import_url("  https://Recipes.Example.com/pasta?x=1  ")
    assert parsed.scheme == "https"
    assert parsed.hostname == "recipes.example.com"


@pytest.mark.parametrize("url", ["not a url", "/relative/path", "https://", "example.com/pasta"])
def test_validate_rejects_non_absolute_urls(url):
    with pytest.raises(InvalidUrlError):
        validate_import_url(url)


@pytest.mark.parametrize("url", ["ftp://example.com/file", "file:///etc/passwd", "javascript:alert(1)"])
def test_validate_rejects_other_schemes(url):
    with pytest.raises(DisallowedSchemeError):
        validate_import_url(url)


@pytest.mark.parametrize(
    "url",
    ["http://localhost:8000/admin", "http://10.0.0.5/", "https://192.168.1.1/recipe", "http://[::1]/"],
)
def test_validate_rejects_blocked_hosts(url):
    with pytest.raises(DisallowedHostError):
        validate_import_url(url)
