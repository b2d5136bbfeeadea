"""Tests for the DNSEndpoint resource model"""

from dnsendpoint_operator.kubernetes.resources import DNSEndpoint, Endpoint, ProviderSpecificProperty


def test_dns_endpoint_from_body():
    body = {
        "apiVersion": "externaldns.nginx.org/v1",
        "kind": "DNSEndpoint",
        "metadata": {"name": "cafe", "namespace": "default", "generation": 2},
        "spec": {
            "endpoints": [
                {
                    "dnsName": "cafe.example.com",
                    "targets": ["10.2.2.3", "10.2.2.4"],
                    "recordType": "A",
                    "recordTTL": 600,
                    "labels": {"owner": "nginx"},
                    "providerSpecific": [{"name": "aws/weight", "value": "10"}],
                }
            ]
        },
        "status": {"observedGeneration": 1},
    }

    resource = DNSEndpoint.from_dict(body)

    assert resource.name == "cafe"
    assert resource.namespace == "default"
    assert resource.generation == 2
    assert resource.status.observed_generation == 1

    endpoint = resource.spec.endpoints[0]
    assert endpoint.dns_name == "cafe.example.com"
    assert endpoint.targets == ["10.2.2.3", "10.2.2.4"]
    assert endpoint.record_type == "A"
    assert endpoint.record_ttl == 600
    assert endpoint.labels == {"owner": "nginx"}
    assert endpoint.provider_specific == [ProviderSpecificProperty(name="aws/weight", value="10")]


def test_missing_fields_use_zero_values():
    endpoint = Endpoint.from_dict({})

    assert endpoint.dns_name == ""
    assert endpoint.targets == []
    assert endpoint.record_type == ""
    assert endpoint.record_ttl == 0
    assert endpoint.labels == {}
    assert endpoint.provider_specific == []


def test_empty_body():
    resource = DNSEndpoint.from_dict(None)

    assert resource.spec.endpoints == []
    assert resource.status.observed_generation == 0


def test_null_endpoint_entry():
    resource = DNSEndpoint.from_dict({"spec": {"endpoints": [None]}})

    assert resource.spec.endpoints == [Endpoint()]
