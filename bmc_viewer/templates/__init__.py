"""
Viewer descriptor templates.

Maps each console version to the JNLP template shipped in this directory.
Templates use Jinja2 placeholders: host, username, password, session_key.
"""

import os
from typing import Dict, Mapping, Optional

import jinja2

from ..models import ConsoleVersion

TEMPLATE_DIR = os.path.dirname(os.path.abspath(__file__))

TEMPLATES: Dict[int, str] = {
    ConsoleVersion.SUPERMICRO.value: "ikvm169.jnlp",
    ConsoleVersion.ILO.value: "ilo2.jnlp",
    ConsoleVersion.IDRAC6.value: "viewer6.jnlp",
    ConsoleVersion.IDRAC7.value: "viewer7.jnlp",
}

_environment = jinja2.Environment(  # nosec B701
    loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
    autoescape=jinja2.select_autoescape(),
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)


def get_template_name(version: int, templates: Optional[Mapping[int, str]] = None) -> Optional[str]:
    """Return the template file name registered for a version, if any"""
    return (TEMPLATES if templates is None else templates).get(version)


def render_template(name: str, params: Mapping[str, str]) -> str:
    """
    Render a viewer template with the given parameters.

    :param name: template file name inside this directory
    :param params: placeholder values
    :returns: rendered descriptor text
    :raises: jinja2.exceptions.TemplateError if the template is missing,
        malformed, or references an unknown placeholder
    """
    return _environment.get_template(name).render(params)
