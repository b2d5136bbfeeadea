"""
Main entry point for the DNSEndpoint validation operator
"""

import logging
import sys
import kopf

from dnsendpoint_operator.config.settings import load_settings

# Import handlers
from dnsendpoint_operator.handlers import dnsendpoints  # noqa: F401

operator_config = load_settings()

# Configure logging
logging.basicConfig(
    level=operator_config.logging_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)


@kopf.on.startup()
def configure_operator(settings: kopf.OperatorSettings, **_):
    """Configure operator for production use"""

    # Watching configuration
    settings.watching.server_timeout = 60
    settings.watching.client_timeout = 120

    # Posting configuration
    settings.posting.enabled = True
    settings.posting.level = logging.WARNING

    # Peering configuration
    settings.peering.name = operator_config.peering_name
    settings.peering.mandatory = True

    # Execution configuration
    settings.execution.max_workers = 10

    # Admission webhook, served by the operator itself
    if operator_config.webhook_port:
        settings.admission.server = kopf.WebhookServer(
            addr="0.0.0.0",
            port=operator_config.webhook_port,
            certfile=operator_config.webhook_cert_file,
            pkeyfile=operator_config.webhook_key_file,
        )
        settings.admission.managed = "dnsendpoint.externaldns.nginx.org"

    logger.info(
        f"DNSEndpoint operator configured with validation profile "
        f"{operator_config.validation_profile.name}"
    )


@kopf.on.login()
def login(**kwargs):
    """Authenticate through the kubernetes client configuration"""
    return kopf.login_via_client(**kwargs)


def main():
    """Main entry point"""
    kopf.run(
        standalone=True,
        clusterwide=operator_config.namespace is None,
        namespaces=[operator_config.namespace] if operator_config.namespace else [],
    )


if __name__ == "__main__":
    main()
