"""
Console errors.

Every failure the identification engine or the descriptor generator reports
to a caller derives from ConsoleError. Transport errors raised while probing
never reach the caller; template defects surface as jinja2.TemplateError.
"""


class ConsoleError(Exception):
    """Base class for remote console errors"""


class IdentificationError(ConsoleError):
    """No known console matched the probe sequence"""

    def __init__(self, host: str):
        self.host = host
        super().__init__(f"Unable to detect console version for {host}")


class UnsupportedVersionError(ConsoleError):
    """The resolved or supplied version has no descriptor path"""

    def __init__(self, version: int, message: str = None):
        self.version = version
        super().__init__(message or f"No support for console version {version}")


class TemplateNotFoundError(UnsupportedVersionError):
    """The version is rendered from a template, but none is registered"""

    def __init__(self, version: int):
        super().__init__(version, f"No viewer template for console version {version}")


class DescriptorDownloadError(ConsoleError):
    """The console did not hand out its viewer descriptor"""

    def __init__(self, host: str, reason: str):
        self.host = host
        self.reason = reason
        super().__init__(f"Failed to download viewer descriptor from {host}: {reason}")
