"""
Validation profiles for DNSEndpoint resources
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet

# Record types the controller publishes to external-dns.
DEFAULT_RECORD_TYPES: FrozenSet[str] = frozenset({"A", "CNAME"})

EXTENDED_RECORD_TYPES: FrozenSet[str] = DEFAULT_RECORD_TYPES | frozenset({"TXT", "SRV", "NS", "PTR"})


@dataclass(frozen=True)
class ValidationProfile:
    """Which record types are accepted and what a target may look like"""

    name: str
    record_types: FrozenSet[str]
    hostname_targets: bool = True

    def supports(self, record_type: str) -> bool:
        """Membership test against the allow-list"""
        return record_type in self.record_types


DEFAULT_PROFILE = ValidationProfile("default", DEFAULT_RECORD_TYPES)
EXTENDED_PROFILE = ValidationProfile("extended", EXTENDED_RECORD_TYPES)
IP_ONLY_PROFILE = ValidationProfile("ip-only", DEFAULT_RECORD_TYPES, hostname_targets=False)

PROFILES: Dict[str, ValidationProfile] = {
    profile.name: profile for profile in (DEFAULT_PROFILE, EXTENDED_PROFILE, IP_ONLY_PROFILE)
}


def get_profile(name: str) -> ValidationProfile:
    """Look up a validation profile by name"""
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(
            f"Unknown validation profile {name!r}, expected one of: {', '.join(sorted(PROFILES))}"
        ) from None
