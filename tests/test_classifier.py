import pytest

from cspretty.classifier import Classification, Token, classify, is_host


@pytest.mark.parametrize("value", ["'self'", "'none'"])
def test_safe_keywords(value):
    assert classify(value) is Classification.SAFE


@pytest.mark.parametrize("value", ["'unsafe-inline'", "'unsafe-eval'", "data:"])
def test_unsafe_keywords(value):
    assert classify(value) is Classification.UNSAFE


def test_keywords_are_case_sensitive():
    assert classify("'SELF'") is Classification.MALFORMED
    assert classify("'Unsafe-Inline'") is Classification.MALFORMED


def test_unknown_keyword_is_malformed():
    assert classify("'unsafe-foobar'") is Classification.MALFORMED


def test_quoted_url_with_host_is_plain():
    assert classify("'https://foo.bar'") is Classification.PLAIN


def test_quoted_url_without_dot_is_malformed():
    assert classify("'https://foo'") is Classification.MALFORMED


@pytest.mark.parametrize(
    "value",
    [
        "trusted.com",
        "*.trusted.com",
        "media1.com",
        "userscripts.example.com",
        "http://example.com",
        "https://cdn.example.com/path/script.js",
    ],
)
def test_hosts_are_plain(value):
    assert classify(value) is Classification.PLAIN


@pytest.mark.parametrize("value", ["*", "https://*", "https:", "blob:", "'strict-dynamic'", ""])
def test_non_hosts_are_malformed(value):
    assert classify(value) is Classification.MALFORMED


def test_host_search_is_unanchored():
    assert is_host("!!!example.com???")
    assert classify("<example.com>") is Classification.PLAIN


@pytest.mark.parametrize("value", ["", " ", ";", "\x00", "ünïcödé", "a" * 1000, "'self' 'none'"])
def test_classify_is_total(value):
    assert classify(value) in set(Classification)


def test_token_from_text_keeps_text():
    token = Token.from_text("data:")

    assert token.text == "data:"
    assert token.classification is Classification.UNSAFE
