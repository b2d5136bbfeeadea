"""Tests for validation profiles and operator settings"""

import logging

import pytest
from dnsendpoint_operator.config.profiles import DEFAULT_PROFILE, get_profile
from dnsendpoint_operator.config.settings import active_profile, load_settings


def test_default_profile():
    profile = get_profile("default")

    assert profile is DEFAULT_PROFILE
    assert profile.record_types == frozenset({"A", "CNAME"})
    assert profile.hostname_targets
    assert profile.supports("CNAME")
    assert not profile.supports("cname")


def test_extended_profile():
    profile = get_profile("extended")

    assert profile.record_types == frozenset({"A", "CNAME", "TXT", "SRV", "NS", "PTR"})


def test_ip_only_profile():
    assert not get_profile("ip-only").hostname_targets


def test_unknown_profile():
    with pytest.raises(ValueError, match="Unknown validation profile"):
        get_profile("everything")


def test_load_settings_defaults():
    settings = load_settings({})

    assert settings.namespace is None
    assert settings.validation_profile is DEFAULT_PROFILE
    assert settings.logging_level == logging.INFO
    assert settings.peering_name == "dnsendpoint-operator"
    assert settings.webhook_port is None


def test_load_settings_from_environment():
    settings = load_settings(
        {
            "OPERATOR_NAMESPACE": "dns",
            "VALIDATION_PROFILE": "extended",
            "LOG_LEVEL": "debug",
            "ADMISSION_WEBHOOK_PORT": "9443",
            "WEBHOOK_CERT_FILE": "/certs/tls.crt",
            "WEBHOOK_KEY_FILE": "/certs/tls.key",
        }
    )

    assert settings.namespace == "dns"
    assert settings.validation_profile.name == "extended"
    assert settings.logging_level == logging.DEBUG
    assert settings.webhook_port == 9443
    assert settings.webhook_cert_file == "/certs/tls.crt"


@pytest.mark.parametrize(
    "environ",
    [{"VALIDATION_PROFILE": "bogus"}, {"LOG_LEVEL": "LOUD"}, {"ADMISSION_WEBHOOK_PORT": "https"}],
)
def test_load_settings_rejects_bad_values(environ):
    with pytest.raises(ValueError):
        load_settings(environ)


def test_active_profile(monkeypatch):
    monkeypatch.delenv("VALIDATION_PROFILE", raising=False)
    assert active_profile() is DEFAULT_PROFILE

    monkeypatch.setenv("VALIDATION_PROFILE", "ip-only")
    assert active_profile().name == "ip-only"


def test_supports_is_case_sensitive():
    profile = get_profile("extended")

    assert profile.supports("TXT")
    assert not profile.supports("txt")
    assert not profile.supports("MX")
