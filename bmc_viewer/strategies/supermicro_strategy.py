import logging
from urllib.parse import urlencode

from .base_strategy import ProbeStrategy
from ..models import ConsoleVersion, ProbeResult, Target

logger = logging.getLogger(__name__)


class SuperMicroStrategy(ProbeStrategy):
    """
    SuperMicro (ATEN) form login.

    Any host that accepts a POST to the CGI login is taken to be SuperMicro.
    The SID cookie it returns authorises the descriptor download and doubles
    as the viewer user name and password.
    """

    LOGIN_PATH = "/cgi/login.cgi"
    SESSION_COOKIE = "SID"

    @property
    def version(self) -> ConsoleVersion:
        return ConsoleVersion.SUPERMICRO

    def _probe(self, target: Target) -> ProbeResult:
        body = urlencode({"name": target.username, "pwd": target.password})
        response = self.transport.post(
            self.url(target, self.LOGIN_PATH),
            body,
            "application/x-www-form-urlencoded"
        )
        if response.status_code != 200:
            return ProbeResult.miss()

        sid = self.find_cookie(response, self.SESSION_COOKIE)
        if not sid:
            logger.warning(f"SuperMicro login on {target.host} returned no {self.SESSION_COOKIE} cookie")
            return ProbeResult.hit(self.version.value)

        return ProbeResult.hit(
            self.version.value,
            session_cookie=f"{self.SESSION_COOKIE}={sid}",
            session_credential=sid
        )
