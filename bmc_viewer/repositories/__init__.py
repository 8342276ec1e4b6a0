"""
Repositories and factories - Factory Pattern implementation.
"""

from .probe_registry import ProbeRegistry

__all__ = ['ProbeRegistry']
