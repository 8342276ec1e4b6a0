"""
Probe result - Value Object pattern.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of a single vendor probe.

    Attributes:
        matches: True if the console answered like this vendor
        version: Console version the probe resolves to (only when matched)
        session_key: iLO sessionKey cookie value, if one was handed out
        session_cookie: Cookie header value for later authenticated requests
        session_credential: Value the console expects in place of the
            username/password when launching the viewer
    """
    matches: bool
    version: Optional[int] = None
    session_key: Optional[str] = None
    session_cookie: Optional[str] = None
    session_credential: Optional[str] = None

    def __post_init__(self):
        if self.matches and self.version is None:
            raise ValueError("A matching probe result needs a version")

    @classmethod
    def miss(cls) -> 'ProbeResult':
        return cls(matches=False)

    @classmethod
    def hit(cls, version: int, **session) -> 'ProbeResult':
        return cls(matches=True, version=version, **session)
