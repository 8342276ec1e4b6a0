import json
import logging

from .base_strategy import ProbeStrategy
from ..models import ConsoleVersion, ProbeResult, Target

logger = logging.getLogger(__name__)


class IloStrategy(ProbeStrategy):
    """HP iLO JSON login"""

    LOGIN_PATH = "/json/login_session"
    SESSION_COOKIE = "sessionKey"

    @property
    def version(self) -> ConsoleVersion:
        return ConsoleVersion.ILO

    def _probe(self, target: Target) -> ProbeResult:
        auth_data = {
            "method": "login",
            "user_login": target.username,
            "password": target.password
        }
        response = self.transport.post(
            self.url(target, self.LOGIN_PATH),
            json.dumps(auth_data),
            "application/json"
        )
        if response.status_code != 200:
            return ProbeResult.miss()

        # A 200 without a session cookie still counts as iLO; the viewer
        # template is then rendered with an empty session key.
        session_key = self.find_cookie(response, self.SESSION_COOKIE)
        if not session_key:
            logger.warning(f"iLO login on {target.host} returned no {self.SESSION_COOKIE} cookie")
            return ProbeResult.hit(self.version.value)

        return ProbeResult.hit(self.version.value, session_key=session_key)
