"""
Identification Service - detects the console type of a target.

Runs the ordered probe sequence, stops at the first match, and stores the
negotiated session on the Target.
"""

import logging
from typing import List, Optional

from ..exceptions import IdentificationError
from ..models import ProbeResult, Target
from ..repositories import ProbeRegistry
from ..strategies import ProbeStrategy
from ..transport import ConsoleTransport

logger = logging.getLogger(__name__)


class IdentificationService:
    """
    Resolves a Target's console version.

    Design Pattern: Chain of strategies
    Probes are tried in registry order; a probe that errors or misses hands
    over to the next one. Only exhausting the list is an error.
    """

    def __init__(self, transport: ConsoleTransport, probes: Optional[List[ProbeStrategy]] = None):
        """
        Args:
            transport: HTTP transport shared by the probes
            probes: Ordered probes to use instead of the registry's
        """
        self.transport = transport
        self.probes = probes if probes is not None else ProbeRegistry.create_probes(transport)

    def identify(self, target: Target) -> int:
        """
        Detect the console version of a target.

        A target that already carries a version is returned unchanged
        without any network traffic.

        Args:
            target: Console to identify; mutated in place on success

        Returns:
            Resolved version

        Raises:
            IdentificationError: If no probe matched
        """
        if target.is_resolved:
            logger.debug(f"Using supplied version {target.version} for {target.host}")
            return target.version

        logger.info(f"Detecting console version of {target.host}...")

        for probe in self.probes:
            result = probe.probe(target)
            if result.matches:
                self._apply(target, result)
                logger.info(f"Found {probe.vendor_name} (version {target.version}) at {target.host}")
                return target.version

        logger.error(f"No known console found at {target.host}")
        raise IdentificationError(target.host)

    def _apply(self, target: Target, result: ProbeResult) -> None:
        """Copy the probe outcome onto the target"""
        if result.session_key:
            target.session_key = result.session_key
        if result.session_cookie:
            target.session_cookie = result.session_cookie
        if result.session_credential:
            target.adopt_session_credential(result.session_credential)
        target.version = result.version
