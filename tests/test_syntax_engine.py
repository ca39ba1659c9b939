"""
Tests for combined account identifier validation.
"""

import time

import pytest

from acctscout import (
    AccountIdentifierValidator,
    is_valid_account_identifier,
    is_valid_account_name,
    is_valid_domain,
    is_valid_local_part,
)
from acctscout.verifier.syntax_engine import _split_on_separator

VALID_IDENTIFIERS = [
    "alice@example.org",
    "john.doe@mastodon.social",
    "user+tag@sub.example.co.uk",
    "a@b.c",
    '"john doe"@example.org',
    '"a\\@b"@example.org',
    "x" * 64 + "@example.org",
]


class TestAccountIdentifier:
    """is_valid_account_identifier"""

    @pytest.mark.parametrize("value", VALID_IDENTIFIERS)
    def test_valid(self, value):
        assert is_valid_account_identifier(value) is True

    @pytest.mark.parametrize("value", [
        "alice@@example.org",
        "@example.org",
        "alice@",
        "@",
        "alice example.org",
        "alice",
        "john@example",
        "john@localhost",
        "alice@[192.168.0.1]",
        "alice@[IPv6:::1]",
        "acct:alice@example.org",
        "@alice@example.org",
        '"a@b"@example.org',
        " alice@example.org",
        "alice@example.org ",
        "alice@example.org\n",
        "alice@example.org.",
        "alice.@example.org",
        "x" * 65 + "@example.org",
        "alice@-example.org",
        "alice@exa_mple.org",
        "alice@192.168.0.1",
        "alice@example.123",
        "al\\@ice@example.org",
        '"a\\"@example.org',
        "",
    ])
    def test_invalid(self, value):
        assert is_valid_account_identifier(value) is False

    @pytest.mark.parametrize("value", [None, b"alice@example.org", 1, object()])
    def test_non_string(self, value):
        assert is_valid_account_identifier(value) is False


class TestDecomposition:
    """A valid identifier splits into a valid local-part and fully qualified domain."""

    @pytest.mark.parametrize("value", VALID_IDENTIFIERS)
    def test_parts_are_valid(self, value):
        local, domain = _split_on_separator(value)
        assert is_valid_local_part(local) is True
        assert is_valid_domain(domain, fully_qualified=True) is True


class TestDeterminism:
    """Repeated calls give the same answer."""

    @pytest.mark.parametrize("value", ["alice@example.org", "alice@@example.org", '"a\\@b"@example.org'])
    def test_repeated_calls(self, value):
        first = is_valid_account_identifier(value)
        assert all(is_valid_account_identifier(value) is first for _ in range(100))


class TestAdversarialInput:
    """Long crafted input finishes quickly."""

    @pytest.mark.parametrize("value", [
        "a" * 10000 + "@example.org",
        "a@" * 5000,
        "a." * 5000 + "@example.org",
        "alice@" + "a." * 5000 + "org",
        '"' + "\\@" * 5000 + '"@example.org',
        "\x00" * 10000,
        "!" * 10000,
    ])
    def test_bounded_time(self, value):
        started = time.perf_counter()
        assert is_valid_account_identifier(value) is False
        assert time.perf_counter() - started < 1.0

    @pytest.mark.parametrize("value, expected", [
        ('"' + "\\@" * 31 + '"@example.org', True),
        ('"' + "\\@" * 30 + '\\"@example.org', False),
        ('"' + "\\\\" * 31 + '"@' + "a." * 120 + "org", True),
    ])
    def test_scanner_within_length_limit(self, value, expected):
        started = time.perf_counter()
        for _ in range(1000):
            assert is_valid_account_identifier(value) is expected
        assert time.perf_counter() - started < 1.0


class TestAccountIdentifierValidator:
    """Facade class."""

    def test_account_name(self, validator):
        assert validator.is_valid_account_name("alice") is True
        assert validator.is_valid_account_name("alice..b") is False

    def test_local_part(self, validator):
        assert validator.is_valid_local_part("john.doe") is True

    def test_domain(self, validator):
        assert validator.is_valid_domain("example") is True
        assert validator.is_valid_domain("example", fully_qualified=True) is False
        assert validator.is_valid_domain("[10.0.0.1]") is True

    def test_account_identifier(self, validator):
        assert validator.is_valid_account_identifier("alice@example.org") is True
        assert validator.is_valid_account_identifier("alice@example") is False

    def test_callable(self, validator):
        assert validator("alice@example.org") is True
        assert validator("alice") is False

    def test_account_name_alias(self):
        assert is_valid_account_name is is_valid_local_part
