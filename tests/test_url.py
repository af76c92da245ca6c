"""Tests for URL helpers."""

import pytest

from newsguard.url import extract_domain, is_well_formed_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.reuters.com/world/article", "reuters.com"),
        ("http://news.example.org/a?b=c", "news.example.org"),
        ("https://WWW.Example.com", "example.com"),
        ("not a url", "Unknown"),
        ("", "Unknown"),
    ],
)
def test_extract_domain(url: str, expected: str) -> None:
    assert extract_domain(url) == expected


@pytest.mark.parametrize(
    "value",
    ["https://a.example", "http://a.example/path?q=1", "https://a.example:8080/x"],
)
def test_well_formed_urls(value: str) -> None:
    assert is_well_formed_url(value)


@pytest.mark.parametrize(
    "value",
    ["", "#", "a.example", "ftp://a.example", "https://", "https://a.example/has space", None, 5],
)
def test_malformed_urls(value: object) -> None:
    assert not is_well_formed_url(value)
