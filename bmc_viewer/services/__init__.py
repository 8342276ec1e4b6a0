"""
Service layer - identification, descriptor generation and the viewer facade.
"""

from .identification_service import IdentificationService
from .descriptor_service import DescriptorService
from .viewer_service import ViewerService, initialize_viewer_service, target_from_environment

__all__ = [
    'IdentificationService',
    'DescriptorService',
    'ViewerService',
    'initialize_viewer_service',
    'target_from_environment',
]
