"""Tests for DNS syntax helpers"""

import pytest
from dnsendpoint_operator.utils.dns import dns1123_label_issues, dns1123_subdomain_issues, is_ip_address


def test_label():
    assert dns1123_label_issues("my-name") == []
    assert dns1123_label_issues("123-abc") == []
    assert dns1123_label_issues("a" * 63) == []


@pytest.mark.parametrize("label", ["", "-a", "a-", "a.b", "A", "a" * 64])
def test_invalid_label(label):
    assert dns1123_label_issues(label)


def test_label_too_long_reports_length():
    issues = dns1123_label_issues("a" * 64)

    assert issues == ["must be no more than 63 characters"]


def test_subdomain():
    assert dns1123_subdomain_issues("example.com") == []
    assert dns1123_subdomain_issues("a") == []


@pytest.mark.parametrize("name", ["", ".", "example.com.", "a..b", "example.com\n", "a" * 254])
def test_invalid_subdomain(name):
    assert dns1123_subdomain_issues(name)


@pytest.mark.parametrize("value", ["10.2.2.3", "0.0.0.0", "::1", "2001:db8::1", "::ffff:10.2.2.3"])
def test_ip_address(value):
    assert is_ip_address(value)


@pytest.mark.parametrize(
    "value", ["", "10.2.2", "10.12.34.1111", "1000.1.1.1", "acme.com", "2001:db8:::1", "fe80::1%eth0"]
)
def test_not_ip_address(value):
    assert not is_ip_address(value)
