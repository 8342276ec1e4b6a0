"""
Viewer Service - facade over identification and descriptor generation.
"""

import logging
from typing import Mapping, Optional

from ..config import TargetConfig, TransportConfig
from ..models import Target
from ..transport import ConsoleTransport
from .identification_service import IdentificationService
from .descriptor_service import DescriptorService

logger = logging.getLogger(__name__)


class ViewerService:
    """
    Main viewer service - produces a viewer descriptor for a console.

    Design Pattern: Facade Pattern
    Owns the transport and wires the identification and descriptor services
    together. Sessions are kept on each Target, so one service can handle
    several targets in turn.
    """

    def __init__(self,
                 transport: Optional[ConsoleTransport] = None,
                 templates: Optional[Mapping[int, str]] = None):
        """
        Initialize viewer service.

        Args:
            transport: HTTP transport; built from TransportConfig when omitted
            templates: Optional version to template name table
        """
        self._owns_transport = transport is None
        self.transport = transport or ConsoleTransport(
            verify_tls=TransportConfig.get_verify_tls(),
            timeout=TransportConfig.get_timeout()
        )
        self.identification = IdentificationService(self.transport)
        self.descriptors = DescriptorService(self.transport, self.identification, templates)

    def identify(self, target: Target) -> int:
        return self.identification.identify(target)

    def get_viewer(self, target: Target) -> str:
        """
        Identify the target if needed and return its viewer descriptor.

        Args:
            target: Console to connect to

        Returns:
            Viewer descriptor text
        """
        return self.descriptors.render(target)

    def close(self):
        """Close the transport if this service created it"""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()


def target_from_environment(**overrides) -> Target:
    """
    Build a Target from environment settings.

    Args:
        overrides: Values that replace environment settings when not None

    Returns:
        Target ready for identification
    """
    settings = TargetConfig.get_target_settings()
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return Target(**settings)


def initialize_viewer_service() -> ViewerService:
    """
    Initialize viewer service from environment variables.

    Returns:
        Configured ViewerService instance
    """
    service = ViewerService()
    logger.debug(f"Transport: verify_tls={service.transport.verify_tls}, timeout={service.transport.timeout}s")
    return service
