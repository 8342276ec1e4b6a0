"""
HTTP transport for remote console requests.

Wraps a single requests.Session so connections are reused across probes and
downloads. Remote consoles almost always present self-signed certificates,
so certificate verification is off unless explicitly enabled.

The session keeps no cookies. Sessions negotiated with a console belong to
the Target they were negotiated for and are sent explicitly; a shared jar
would replay one target's login on every later request to the same host.
"""

import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Dict, Optional
import requests
from urllib3 import disable_warnings
from urllib3.exceptions import InsecureRequestWarning

disable_warnings(InsecureRequestWarning)
logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5


class ConsoleTransport:
    """
    Blocking HTTP client shared by the probes and the descriptor download.

    Every request uses the same connect/read timeout and is attempted once.
    Redirects are not followed, so a login page redirect is never mistaken
    for a successful response. Response cookies are still readable from each
    response; they are just never stored on the session.
    """

    def __init__(self, verify_tls: bool = False, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.verify_tls = verify_tls
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.verify = verify_tls
        self._session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    def head(self, url: str) -> requests.Response:
        logger.debug(f"HEAD {url}")
        return self._session.head(url, **self._request_options())

    def post(self, url: str, body: str, content_type: str) -> requests.Response:
        logger.debug(f"POST {url} ({content_type})")
        return self._session.post(
            url,
            data=body,
            headers={"Content-Type": content_type},
            **self._request_options()
        )

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        logger.debug(f"GET {url}")
        return self._session.get(url, headers=headers, **self._request_options())

    def _request_options(self) -> dict:
        # verify is passed per request: a session-level value loses to
        # REQUESTS_CA_BUNDLE / CURL_CA_BUNDLE when requests merges settings
        return {
            "verify": self.verify_tls,
            "timeout": self.timeout,
            "allow_redirects": False,
        }

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
