import re
from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "1.0.0"


_re_version = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:([a-z]+)(\d+))?$")

# release levels by the first letter of their abbreviation
_release_levels = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}


class VersionInfo(NamedTuple):
    """Version of the package in the same form as ``sys.version_info``"""

    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        match = _re_version.match(v)
        if not match:
            raise ValueError(f"Invalid version: {v!r}.")
        major, minor, micro, level, serial = match.groups()
        releaselevel = _release_levels.get(level[:1], "final") if level else "final"
        return cls(
            int(major),
            int(minor),
            int(micro),
            releaselevel,
            int(serial) if serial and releaselevel != "final" else 0,
        )

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        if self.releaselevel != "final":
            v += f"{self.releaselevel[:1]}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
