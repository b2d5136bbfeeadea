"""
Handlers for DNSEndpoint resources
"""

import kopf
import logging
from dnsendpoint_operator.config.settings import active_profile
from dnsendpoint_operator.kubernetes.resources import GROUP, VERSION, PLURAL, DNSEndpoint
from dnsendpoint_operator.utils.errors import DNSEndpointValidationError
from dnsendpoint_operator.utils.validation import collect_field_errors, validate_dns_endpoint

logger = logging.getLogger(__name__)


@kopf.on.validate(GROUP, VERSION, PLURAL)
def admit_dns_endpoint(body, logger, operation=None, **kwargs):
    """Reject invalid DNSEndpoint objects at admission time"""
    if operation == "DELETE":
        return

    resource = DNSEndpoint.from_dict(body)
    try:
        validate_dns_endpoint(resource, active_profile())
    except DNSEndpointValidationError as e:
        logger.warning(f"Denied DNSEndpoint {resource.namespace}/{resource.name}: {e}")
        raise kopf.AdmissionError(str(e), code=422)


@kopf.on.create(GROUP, VERSION, PLURAL)
@kopf.on.update(GROUP, VERSION, PLURAL)
@kopf.on.resume(GROUP, VERSION, PLURAL)
def reconcile_dns_endpoint(body, meta, name, namespace, patch, logger, **kwargs):
    """Validate a DNSEndpoint and record the generation that was checked"""
    logger.info(f"Validating DNSEndpoint {name}")

    resource = DNSEndpoint.from_dict(body)
    profile = active_profile()

    try:
        validate_dns_endpoint(resource, profile)
    except DNSEndpointValidationError as e:
        for error in collect_field_errors(resource, profile):
            logger.warning(f"DNSEndpoint {namespace}/{name}: {error}")
        raise kopf.PermanentError(f"Invalid DNSEndpoint: {e}")

    patch.status["observedGeneration"] = meta.get("generation")

    return {
        "phase": "Valid",
        "endpoints": len(resource.spec.endpoints),
        "profile": profile.name,
    }
