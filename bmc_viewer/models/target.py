"""
Remote console target model.

Unlike the value objects in this package, a Target is mutable: the
identification engine resolves its version and stores the negotiated session
on it, and the descriptor generator reads it back. Keeping the session on the
Target rather than in module state means two targets never share a session.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from .console_version import ConsoleVersion

logger = logging.getLogger(__name__)


@dataclass
class Target:
    """
    One remote management console to contact.

    Attributes:
        host: Console host name or address
        username: Login user (replaced by the session id on SuperMicro)
        password: Login password (replaced by the session id on SuperMicro)
        version: Resolved console version, negative while unknown
        session_key: iLO sessionKey cookie value
        session_cookie: Cookie header sent with the SuperMicro descriptor download
        session_credential: Session id adopted as the viewer credential
    """
    host: str
    username: str = ""
    password: str = ""
    version: int = ConsoleVersion.UNKNOWN.value
    session_key: str = ""
    session_cookie: str = ""
    session_credential: str = ""

    def __post_init__(self):
        if not self.host:
            raise ValueError("Target host cannot be empty")
        self.version = int(self.version)

    @property
    def is_resolved(self) -> bool:
        return self.version >= 0

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"

    def adopt_session_credential(self, value: str) -> None:
        """
        Replace the login credentials with a session identifier.

        SuperMicro consoles expect the viewer to authenticate with the SID
        cookie value as both user name and password, so after a successful
        login the original credentials are overwritten. The value is also
        kept in session_credential so callers can tell it was swapped.

        Args:
            value: Session identifier returned by the console
        """
        logger.debug(f"Replacing credentials for {self.host} with the session identifier")
        self.session_credential = value
        self.username = value
        self.password = value

    def template_params(self) -> Dict[str, str]:
        """Placeholder values for viewer templates"""
        return {
            "host": self.host,
            "username": self.username,
            "password": self.password,
            "session_key": self.session_key,
        }
