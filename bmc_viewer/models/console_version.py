"""
Console version enumeration.
"""

from enum import IntEnum


class ConsoleVersion(IntEnum):
    """
    Known remote console versions.

    The numeric values are the identifiers used on the command line, in the
    BMC_VERSION setting and as keys of the viewer template table.
    """
    UNKNOWN = -1
    SUPERMICRO = 1
    ILO = 2
    IDRAC6 = 6
    IDRAC7 = 7

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def known(cls) -> list:
        """Return the resolvable versions (everything except UNKNOWN)"""
        return [v for v in cls if v is not cls.UNKNOWN]

    @classmethod
    def is_known(cls, value: int) -> bool:
        return value in {v.value for v in cls.known()}


_LABELS = {
    ConsoleVersion.UNKNOWN: "unknown",
    ConsoleVersion.SUPERMICRO: "SuperMicro iKVM",
    ConsoleVersion.ILO: "HP iLO",
    ConsoleVersion.IDRAC6: "Dell iDRAC6",
    ConsoleVersion.IDRAC7: "Dell iDRAC7",
}
