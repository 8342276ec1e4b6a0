"""
Console probe strategies - Strategy Pattern.
Each console type has its own strategy for recognising and logging in to a host.
"""

from .base_strategy import ProbeStrategy
from .idrac_strategy import FileProbeStrategy, Idrac6Strategy, Idrac7Strategy
from .ilo_strategy import IloStrategy
from .supermicro_strategy import SuperMicroStrategy

__all__ = [
    'ProbeStrategy',
    'FileProbeStrategy',
    'Idrac6Strategy',
    'Idrac7Strategy',
    'IloStrategy',
    'SuperMicroStrategy',
]
