"""Services wiring the UMM core to a host and the CLI."""

from umm.services.extension import init_extension
from umm.services.integration import IntegrationService

__all__ = ["IntegrationService", "init_extension"]
