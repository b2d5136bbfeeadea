"""
DNSEndpoint custom resource
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

GROUP = "externaldns.nginx.org"
VERSION = "v1"
PLURAL = "dnsendpoints"
KIND = "DNSEndpoint"


@dataclass(frozen=True)
class ProviderSpecificProperty:
    name: str = ""
    value: str = ""


@dataclass(frozen=True)
class Endpoint:
    """One DNS record: a name pointing at one or more targets"""

    dns_name: str = ""
    targets: List[str] = field(default_factory=list)
    record_type: str = ""
    record_ttl: Any = 0
    labels: Dict[str, str] = field(default_factory=dict)
    provider_specific: List[ProviderSpecificProperty] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Endpoint":
        data = data or {}
        return cls(
            dns_name=data.get("dnsName") or "",
            targets=list(data.get("targets") or []),
            record_type=data.get("recordType") or "",
            record_ttl=data.get("recordTTL") or 0,
            labels=dict(data.get("labels") or {}),
            provider_specific=[
                ProviderSpecificProperty(name=p.get("name", ""), value=p.get("value", ""))
                for p in data.get("providerSpecific") or []
            ],
        )


@dataclass(frozen=True)
class DNSEndpointSpec:
    endpoints: List[Endpoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DNSEndpointSpec":
        data = data or {}
        return cls(endpoints=[Endpoint.from_dict(e) for e in data.get("endpoints") or []])


@dataclass(frozen=True)
class DNSEndpointStatus:
    # The generation observed by the controller
    observed_generation: int = 0


@dataclass(frozen=True)
class DNSEndpoint:
    """Wrapper object for the record set as stored by the API server"""

    name: str = ""
    namespace: str = ""
    generation: int = 0
    spec: DNSEndpointSpec = field(default_factory=DNSEndpointSpec)
    status: DNSEndpointStatus = field(default_factory=DNSEndpointStatus)

    @classmethod
    def from_dict(cls, body: Optional[Mapping[str, Any]]) -> "DNSEndpoint":
        body = body or {}
        meta = body.get("metadata") or {}
        status = body.get("status") or {}
        return cls(
            name=meta.get("name", ""),
            namespace=meta.get("namespace", ""),
            generation=meta.get("generation", 0),
            spec=DNSEndpointSpec.from_dict(body.get("spec")),
            status=DNSEndpointStatus(observed_generation=status.get("observedGeneration", 0)),
        )
