"""
DNS syntax helpers
"""

import re
from typing import List

import dns.inet

DNS1123_LABEL_MAX_LENGTH = 63
DNS1123_SUBDOMAIN_MAX_LENGTH = 253

_DNS1123_LABEL_FMT = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_DNS1123_SUBDOMAIN_FMT = rf"{_DNS1123_LABEL_FMT}(\.{_DNS1123_LABEL_FMT})*"

_DNS1123_LABEL_RE = re.compile(_DNS1123_LABEL_FMT)
_DNS1123_SUBDOMAIN_RE = re.compile(_DNS1123_SUBDOMAIN_FMT)


def dns1123_label_issues(value: str) -> List[str]:
    """Return the reasons value is not an RFC 1123 label, empty if it is one"""
    issues = []
    if len(value) > DNS1123_LABEL_MAX_LENGTH:
        issues.append(f"must be no more than {DNS1123_LABEL_MAX_LENGTH} characters")
    if not _DNS1123_LABEL_RE.fullmatch(value):
        issues.append(
            "a lowercase RFC 1123 label must consist of lower case alphanumeric characters "
            "or '-', and must start and end with an alphanumeric character "
            f"(e.g. 'my-name', or '123-abc', regex used for validation is '{_DNS1123_LABEL_FMT}')"
        )
    return issues


def dns1123_subdomain_issues(value: str) -> List[str]:
    """Return the reasons value is not an RFC 1123 subdomain, empty if it is one"""
    issues = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        issues.append(f"must be no more than {DNS1123_SUBDOMAIN_MAX_LENGTH} characters")
    if not _DNS1123_SUBDOMAIN_RE.fullmatch(value):
        issues.append(
            "a lowercase RFC 1123 subdomain must consist of lower case alphanumeric characters, "
            "'-' or '.', and must start and end with an alphanumeric character "
            f"(e.g. 'example.com', regex used for validation is '{_DNS1123_SUBDOMAIN_FMT}')"
        )
    return issues


def is_ip_address(value: str) -> bool:
    """Check if value is an IPv4 or IPv6 literal, without an IPv6 zone"""
    return "%" not in value and dns.inet.is_address(value)
