"""
Data models for remote console targets.
"""

from .console_version import ConsoleVersion
from .target import Target
from .probe_result import ProbeResult

__all__ = ['ConsoleVersion', 'Target', 'ProbeResult']
