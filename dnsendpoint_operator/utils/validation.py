"""
DNSEndpoint validation

Checks run in a fixed order and stop at the first failure: the record set,
then each endpoint in turn, and within an endpoint its name, targets, record
type and TTL.
"""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from dnsendpoint_operator.config.profiles import DEFAULT_PROFILE, ValidationProfile
from dnsendpoint_operator.kubernetes.resources import DNSEndpoint, DNSEndpointSpec, Endpoint
from dnsendpoint_operator.utils.dns import dns1123_label_issues, dns1123_subdomain_issues, is_ip_address
from dnsendpoint_operator.utils.errors import (
    DNSEndpointValidationError,
    FieldError,
    duplicate,
    invalid,
    not_in_range,
    not_supported,
    required,
)

logger = logging.getLogger(__name__)


def check_hostname(name: Any, field: str = "DNSName") -> None:
    """Validate that name is an RFC 1123 subdomain"""
    if not isinstance(name, str):
        raise invalid(field, name, "name must be a string")
    issues = dns1123_subdomain_issues(name)
    if issues:
        raise invalid(field, name, ", ".join(issues))

    for label in name.split("."):
        issues = dns1123_label_issues(label)
        if issues:
            raise invalid(field, name, f"label {label} is not valid, {', '.join(issues)}")


def check_target(target: Any, field: str = "Targets", hostname_targets: bool = True) -> None:
    """Validate a target: an IP address, or a hostname with at least two labels.

    A single trailing dot is accepted on hostnames. With hostname_targets
    disabled only IP addresses pass.
    """
    if not isinstance(target, str) or not target:
        raise invalid(field, target, "target not provided")

    if is_ip_address(target):
        return

    if not hostname_targets:
        raise invalid(field, target, "target should be a valid IP address")

    name = target[:-1] if target.endswith(".") else target

    issues = dns1123_subdomain_issues(name)
    if issues:
        raise invalid(
            field, target, f"target should be a valid IP address or hostname, {', '.join(issues)}"
        )

    labels = name.split(".")
    if len(labels) < 2:
        raise invalid(
            field,
            target,
            "target should be a valid IP address or a domain with at least two segments separated by dots",
        )

    for label in labels:
        issues = dns1123_label_issues(label)
        if issues:
            raise invalid(
                field,
                target,
                f"label {label} should conform to the definition of label in DNS (RFC 1123), "
                f"{', '.join(issues)}",
            )


def check_targets_present(targets: Sequence[str], field: str = "Targets") -> None:
    """Require at least one target"""
    if not targets:
        raise required(field, "at least one target is required")


def check_unique_targets(targets: Iterable[str], field: str = "Targets") -> None:
    """Reject the first target that was already seen earlier in the list"""
    seen = set()
    for index, target in enumerate(targets):
        # Non-string targets are reported by check_target
        if not isinstance(target, str):
            continue
        if target in seen:
            raise duplicate(f"{field}[{index}]", target)
        seen.add(target)


def check_record_type(
    record_type: Any, profile: ValidationProfile = DEFAULT_PROFILE, field: str = "RecordType"
) -> None:
    """Validate record type against the profile allow-list, case-sensitive"""
    if not isinstance(record_type, str):
        raise invalid(field, record_type, "record type must be a string")
    if not profile.supports(record_type):
        raise not_supported(field, record_type, profile.record_types)


def check_ttl(ttl: Any, field: str = "RecordTTL") -> None:
    """Validate TTL is a positive integer"""
    if isinstance(ttl, bool) or not isinstance(ttl, int):
        raise invalid(field, ttl, "ttl must be an integer")
    if ttl <= 0:
        raise not_in_range(field, ttl, "ttl value should be > 0")


def _join(path: str, name: str) -> str:
    """Field path of name below path"""
    return f"{path}.{name}" if path else name


def _missing_endpoints() -> FieldError:
    """Error for a record set without endpoints"""
    return required("Endpoints", "no endpoints supplied, expected a list of endpoints")


def _endpoint_checks(
    endpoint: Endpoint, profile: ValidationProfile, path: str
) -> List[Callable[[], None]]:
    """Checks for one endpoint, in reporting order"""
    targets_field = _join(path, "Targets")

    checks = [
        lambda: check_hostname(endpoint.dns_name, _join(path, "DNSName")),
        lambda: check_targets_present(endpoint.targets, targets_field),
    ]

    for index, target in enumerate(endpoint.targets):
        checks.append(
            lambda index=index, target=target: check_target(
                target, f"{targets_field}[{index}]", profile.hostname_targets
            )
        )

    checks += [
        lambda: check_unique_targets(endpoint.targets, targets_field),
        lambda: check_record_type(endpoint.record_type, profile, _join(path, "RecordType")),
        lambda: check_ttl(endpoint.record_ttl, _join(path, "RecordTTL")),
    ]
    return checks


def validate_endpoint(
    endpoint: Endpoint, profile: Optional[ValidationProfile] = None, path: str = ""
) -> None:
    """Validate a single endpoint, raising the first FieldError found"""
    for check in _endpoint_checks(endpoint, profile or DEFAULT_PROFILE, path):
        check()


def validate_dns_endpoint_spec(
    spec: DNSEndpointSpec, profile: Optional[ValidationProfile] = None
) -> None:
    """Validate the record set: at least one endpoint, every endpoint valid"""
    if not spec.endpoints:
        raise _missing_endpoints()

    for index, endpoint in enumerate(spec.endpoints):
        validate_endpoint(endpoint, profile, path=f"Endpoints[{index}]")


def validate_dns_endpoint(
    resource: Union[DNSEndpoint, Mapping[str, Any]], profile: Optional[ValidationProfile] = None
) -> None:
    """Validate a DNSEndpoint resource.

    Accepts the parsed resource or the raw object body. Raises
    DNSEndpointValidationError, which keeps the kind, field and value of the
    underlying FieldError.
    """
    if not isinstance(resource, DNSEndpoint):
        resource = DNSEndpoint.from_dict(resource)

    try:
        validate_dns_endpoint_spec(resource.spec, profile)
    except FieldError as e:
        logger.debug(f"DNSEndpoint {resource.namespace}/{resource.name} rejected: {e}")
        raise DNSEndpointValidationError(e) from e


def collect_field_errors(
    resource: Union[DNSEndpoint, Mapping[str, Any]], profile: Optional[ValidationProfile] = None
) -> List[FieldError]:
    """Every violation in the resource, in the order validate_dns_endpoint checks them"""
    if not isinstance(resource, DNSEndpoint):
        resource = DNSEndpoint.from_dict(resource)

    endpoints: Sequence[Endpoint] = resource.spec.endpoints
    if not endpoints:
        return [_missing_endpoints()]

    errors = []
    for index, endpoint in enumerate(endpoints):
        for check in _endpoint_checks(endpoint, profile or DEFAULT_PROFILE, f"Endpoints[{index}]"):
            try:
                check()
            except FieldError as e:
                errors.append(e)
    return errors
