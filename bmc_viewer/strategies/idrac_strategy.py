import logging

from .base_strategy import ProbeStrategy
from ..models import ConsoleVersion, ProbeResult, Target

logger = logging.getLogger(__name__)


class FileProbeStrategy(ProbeStrategy):
    """
    Recognise a console by a file only that console generation serves.

    Subclasses set PATH to a client library shipped with the viewer.
    """

    PATH: str = ""

    def _probe(self, target: Target) -> ProbeResult:
        response = self.transport.head(self.url(target, self.PATH))
        logger.debug(f"{self.PATH} on {target.host} answered {response.status_code}")
        if response.status_code == 200:
            return ProbeResult.hit(self.version.value)
        return ProbeResult.miss()


class Idrac7Strategy(FileProbeStrategy):
    """Dell iDRAC7: the Mac OS X KVM native library only exists on this generation"""

    PATH = "/software/avctKVMIOMac64.jar"

    @property
    def version(self) -> ConsoleVersion:
        return ConsoleVersion.IDRAC7


class Idrac6Strategy(FileProbeStrategy):
    """Dell iDRAC6: ships the jpcsc smart card library"""

    PATH = "/software/jpcsc.jar"

    @property
    def version(self) -> ConsoleVersion:
        return ConsoleVersion.IDRAC6
