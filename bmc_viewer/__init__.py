"""
BMC Viewer Package

Detects which remote management console a server runs (Dell iDRAC6/7,
HP iLO, SuperMicro), logs in, and produces the JNLP descriptor a Java KVM
viewer needs to open a remote console session.

Architecture:
- Strategy Pattern for console probes
- Registry Pattern for the probe order
- Facade Pattern for the viewer service
- Value Object Pattern for probe results
"""

from .models import ConsoleVersion, Target, ProbeResult
from .exceptions import (
    ConsoleError,
    IdentificationError,
    UnsupportedVersionError,
    TemplateNotFoundError,
    DescriptorDownloadError,
)
from .transport import ConsoleTransport
from .strategies import ProbeStrategy, Idrac7Strategy, Idrac6Strategy, IloStrategy, SuperMicroStrategy
from .repositories import ProbeRegistry
from .services import IdentificationService, DescriptorService, ViewerService

__all__ = [
    # Models
    "ConsoleVersion",
    "Target",
    "ProbeResult",
    # Errors
    "ConsoleError",
    "IdentificationError",
    "UnsupportedVersionError",
    "TemplateNotFoundError",
    "DescriptorDownloadError",
    # Transport
    "ConsoleTransport",
    # Strategies
    "ProbeStrategy",
    "Idrac7Strategy",
    "Idrac6Strategy",
    "IloStrategy",
    "SuperMicroStrategy",
    # Registry
    "ProbeRegistry",
    # Services
    "IdentificationService",
    "DescriptorService",
    "ViewerService",
]
