"""
Base probe strategy - Abstract base class using Strategy Pattern.
Defines the interface that all console probes must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional
import requests

from ..models import ConsoleVersion, ProbeResult, Target
from ..transport import ConsoleTransport

logger = logging.getLogger(__name__)


class ProbeStrategy(ABC):
    """
    Abstract base class for console probes.

    Design Pattern: Strategy Pattern
    Each console type implements this interface with its own fingerprint.

    Responsibilities:
    - Issue the requests that recognise one console type
    - Log in where the console requires it and extract the session
    - Report the outcome as a ProbeResult without touching the Target
    """

    def __init__(self, transport: ConsoleTransport):
        """
        Initialize strategy with the shared transport.

        Args:
            transport: HTTP transport used for every probe request
        """
        self.transport = transport

    @property
    @abstractmethod
    def version(self) -> ConsoleVersion:
        """Console version this probe resolves to"""
        pass

    @property
    def vendor_name(self) -> str:
        return self.version.label

    def probe(self, target: Target) -> ProbeResult:
        """
        Check whether the target runs this console.

        Transport failures (refused connection, timeout, TLS errors) make the
        probe inconclusive and are reported as a miss.

        Args:
            target: Console to probe

        Returns:
            ProbeResult describing the match and any negotiated session
        """
        logger.debug(f"Probing {target.host} for {self.vendor_name}")
        try:
            result = self._probe(target)
        except requests.RequestException as e:
            logger.warning(f"{self.vendor_name} probe against {target.host} failed: {e}")
            return ProbeResult.miss()

        if result.matches:
            logger.info(f"{target.host} looks like {self.vendor_name}")
        return result

    @abstractmethod
    def _probe(self, target: Target) -> ProbeResult:
        """
        Issue the vendor-specific requests.

        Args:
            target: Console to probe

        Returns:
            ProbeResult for this console type
        """
        pass

    def url(self, target: Target, path: str) -> str:
        return f"{target.base_url}{path}"

    @staticmethod
    def find_cookie(response: requests.Response, name: str) -> Optional[str]:
        """Return a non-empty cookie value set by the response, if any"""
        for cookie in response.cookies:
            logger.debug(f"Cookie received: {cookie.name}")
            if cookie.name == name and cookie.value:
                return cookie.value
        return None
