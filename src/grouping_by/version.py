from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "1.0.0"


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        major, minor, micro = map(int, v.split("."))
        return cls(major, minor, micro)

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.micro}"


version_info = VersionInfo.from_str(version)
