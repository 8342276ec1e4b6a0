"""
Probe Registry - Factory Pattern implementation.
Creates the ordered list of console probes.
"""

import logging
from typing import List, Type

from ..strategies import ProbeStrategy, Idrac7Strategy, Idrac6Strategy, IloStrategy, SuperMicroStrategy
from ..transport import ConsoleTransport

logger = logging.getLogger(__name__)


class ProbeRegistry:
    """
    Factory for creating probe strategy instances.

    Design Pattern: Factory Pattern + Registry Pattern
    Order matters: the first probe that matches decides the console type.
    The file probes come first because they need no credentials, and the
    SuperMicro login comes last because it accepts the broadest set of hosts.
    """

    # Probe order
    _STRATEGIES: List[Type[ProbeStrategy]] = [
        Idrac7Strategy,
        Idrac6Strategy,
        IloStrategy,
        SuperMicroStrategy,
    ]

    @classmethod
    def create_probes(cls, transport: ConsoleTransport) -> List[ProbeStrategy]:
        """
        Create probe instances in probing order.

        Args:
            transport: Transport shared by every probe

        Returns:
            Ordered list of initialized strategies
        """
        probes = [strategy_class(transport) for strategy_class in cls._STRATEGIES]
        logger.debug(f"Created probes: {', '.join(p.vendor_name for p in probes)}")
        return probes

    @classmethod
    def get_probe_order(cls) -> List[Type[ProbeStrategy]]:
        return list(cls._STRATEGIES)

    @classmethod
    def register_strategy(cls, strategy_class: Type[ProbeStrategy], position: int = None):
        """
        Register a new probe (for extensibility).

        The probe order is class-level state shared by every service in the
        process, and changes to it are not thread-safe. Register probes at
        startup, before any identification runs.

        Args:
            strategy_class: Strategy class to register
            position: Index in the probe order; appended when omitted
        """
        if position is None:
            cls._STRATEGIES.append(strategy_class)
        else:
            cls._STRATEGIES.insert(position, strategy_class)
        logger.info(f"Registered probe: {strategy_class.__name__}")

    @classmethod
    def unregister_strategy(cls, strategy_class: Type[ProbeStrategy]):
        """Remove a probe from the process-wide order (not thread-safe)"""
        cls._STRATEGIES.remove(strategy_class)
