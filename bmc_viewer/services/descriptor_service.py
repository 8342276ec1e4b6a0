"""
Descriptor Service - produces the JNLP viewer descriptor for a target.

Dell and iLO descriptors are rendered locally from templates. SuperMicro
consoles generate their own, so it is downloaded with the session cookie.
"""

import logging
from typing import Mapping, Optional
import requests

from ..exceptions import DescriptorDownloadError, TemplateNotFoundError, UnsupportedVersionError
from ..models import ConsoleVersion, Target
from ..templates import TEMPLATES, get_template_name, render_template
from ..transport import ConsoleTransport
from .identification_service import IdentificationService

logger = logging.getLogger(__name__)

TEMPLATE_VERSIONS = (ConsoleVersion.IDRAC6, ConsoleVersion.IDRAC7, ConsoleVersion.ILO)


class DescriptorService:
    """Generates viewer descriptors, identifying the target first if needed"""

    DOWNLOAD_PATH = "/cgi/url_redirect.cgi?url_name=ikvm&url_type=jwsk"
    # Some SuperMicro firmware answers 500 when the Referer is missing
    REFERER = "127.0.0.1"

    def __init__(self, transport: ConsoleTransport,
                 identification: Optional[IdentificationService] = None,
                 templates: Optional[Mapping[int, str]] = None):
        """
        Args:
            transport: HTTP transport for the SuperMicro download
            identification: Service used to resolve unidentified targets
            templates: Version to template name table (defaults to the packaged one)
        """
        self.transport = transport
        self.identification = identification or IdentificationService(transport)
        self.templates = TEMPLATES if templates is None else templates

    def render(self, target: Target) -> str:
        """
        Produce the viewer descriptor for a target.

        Args:
            target: Console to produce a descriptor for

        Returns:
            Complete descriptor text

        Raises:
            IdentificationError: If the target had no version and none was detected
            TemplateNotFoundError: If no template is registered for the version
            UnsupportedVersionError: If the version has no descriptor path
            DescriptorDownloadError: If the SuperMicro download failed
        """
        version = self.identification.identify(target)

        if version in TEMPLATE_VERSIONS:
            return self._render_template(target, version)
        if version == ConsoleVersion.SUPERMICRO:
            return self._download(target)

        raise UnsupportedVersionError(version)

    def _render_template(self, target: Target, version: int) -> str:
        template_name = get_template_name(version, self.templates)
        if not template_name:
            raise TemplateNotFoundError(version)

        logger.info(f"Rendering {template_name} for {ConsoleVersion(version).label} at {target.host}")
        return render_template(template_name, target.template_params())

    def _download(self, target: Target) -> str:
        url = f"{target.base_url}{self.DOWNLOAD_PATH}"
        headers = {"Referer": self.REFERER}
        if target.session_cookie:
            headers["Cookie"] = target.session_cookie
        else:
            logger.warning(f"Downloading descriptor from {target.host} without a session cookie")

        logger.info(f"Downloading viewer descriptor from {target.host}")
        try:
            response = self.transport.get(url, headers=headers)
        except requests.RequestException as e:
            raise DescriptorDownloadError(target.host, str(e)) from e

        if response.status_code != 200:
            raise DescriptorDownloadError(target.host, f"HTTP {response.status_code}")

        return response.text
