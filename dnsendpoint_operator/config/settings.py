"""
Operator settings read from the environment
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dnsendpoint_operator.config.profiles import ValidationProfile, get_profile


@dataclass(frozen=True)
class OperatorSettings:
    namespace: Optional[str] = None
    profile: str = "default"
    log_level: str = "INFO"
    peering_name: str = "dnsendpoint-operator"
    webhook_port: Optional[int] = None
    webhook_cert_file: Optional[str] = None
    webhook_key_file: Optional[str] = None

    @property
    def validation_profile(self) -> ValidationProfile:
        return get_profile(self.profile)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> OperatorSettings:
    """Build settings from environment variables"""
    env = os.environ if environ is None else environ

    port = env.get("ADMISSION_WEBHOOK_PORT")
    try:
        webhook_port = int(port) if port else None
    except ValueError:
        raise ValueError(f"Invalid ADMISSION_WEBHOOK_PORT: {port}") from None

    profile = env.get("VALIDATION_PROFILE", "default")
    # Fail on startup rather than on the first resource
    get_profile(profile)

    log_level = env.get("LOG_LEVEL", "INFO")
    if not isinstance(logging.getLevelName(log_level.upper()), int):
        raise ValueError(f"Invalid LOG_LEVEL: {log_level}")

    return OperatorSettings(
        namespace=env.get("OPERATOR_NAMESPACE") or None,
        profile=profile,
        log_level=log_level,
        peering_name=env.get("PEERING_NAME", "dnsendpoint-operator"),
        webhook_port=webhook_port,
        webhook_cert_file=env.get("WEBHOOK_CERT_FILE"),
        webhook_key_file=env.get("WEBHOOK_KEY_FILE"),
    )


def active_profile() -> ValidationProfile:
    """Profile selected by VALIDATION_PROFILE"""
    return get_profile(os.getenv("VALIDATION_PROFILE", "default"))
