from __future__ import annotations

import re
from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "0.4.0"


_re_version = re.compile(r"(\d+)\.(\d+)\.(\d+)(\D*)(\d*)")

_release_levels = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> VersionInfo:
        match = _re_version.match(v)
        if not match:
            raise ValueError(f"Invalid version string {v!r}.")
        major, minor, micro, level, serial = match.groups()
        return cls(
            int(major),
            int(minor),
            int(micro),
            _release_levels.get(level[:1], "final"),
            int(serial) if serial else 0,
        )

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        level = self.releaselevel
        if level and level != "final":
            v = f"{v}{level[:1]}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
