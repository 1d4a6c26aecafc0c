from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from bump_files.errors import InvalidVersionError


class BumpType(StrEnum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@dataclass(frozen=True)
class PkgVersion:
    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, raw: str) -> PkgVersion:
        """Only plain <major>.<minor>.<patch>, every bump file stores digits only.

        >>> PkgVersion.parse("8.1.1")
        PkgVersion(major=8, minor=1, patch=1)
        """
        parts = raw.split(".")
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            raise InvalidVersionError(raw, "expected <major>.<minor>.<patch> digits")
        major, minor, patch = parts
        return cls(int(major), int(minor), int(patch))

    def bump_major(self) -> PkgVersion:
        return PkgVersion(self.major + 1, 0, 0)

    def bump_minor(self) -> PkgVersion:
        return PkgVersion(self.major, self.minor + 1, 0)

    def bump_patch(self) -> PkgVersion:
        return PkgVersion(self.major, self.minor, self.patch + 1)

    def bump(self, bump_type: BumpType) -> PkgVersion:
        return _bumps[bump_type](self)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


_bumps: dict[BumpType, Callable[[PkgVersion], PkgVersion]] = {
    BumpType.MAJOR: PkgVersion.bump_major,
    BumpType.MINOR: PkgVersion.bump_minor,
    BumpType.PATCH: PkgVersion.bump_patch,
}
