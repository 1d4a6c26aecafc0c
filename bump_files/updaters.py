"""Read and write version strings embedded in file content.

Each updater is a pair of pure functions over the full text of one file:
`read_version` finds the recorded version and `write_version` returns a copy of
the text with the version replaced. Updaters never touch the file system.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

from bump_files.errors import InvalidVersionError, MissingFieldError

logger = logging.getLogger(__name__)

DEFAULT_MAJOR_FIELD = "versionMajor"
DEFAULT_MINOR_FIELD = "versionMinor"
DEFAULT_PATCH_FIELD = "versionPatch"


class VersionUpdater(Protocol):
    def read_version(self, content: str) -> str: ...

    def write_version(self, content: str, version: str) -> str: ...


def field_pattern(field_name: str) -> re.Pattern:
    return re.compile(rf"{re.escape(field_name)} = (\d+)")


def module_pattern(module_prefix: str) -> re.Pattern:
    return re.compile(rf"{re.escape(module_prefix)}/v(\d+)")


def split_version(version: str) -> tuple[str, str, str]:
    """Only the first three components are used, extra components are ignored.

    >>> split_version("1.2.3")
    ('1', '2', '3')
    >>> split_version("1.2.3.4")
    ('1', '2', '3')
    """
    parts = version.split(".")
    if len(parts) < 3:
        raise InvalidVersionError(version, "expected at least 3 components")
    major, minor, patch = parts[:3]
    return major, minor, patch


def _search_group(pattern: re.Pattern, field_name: str, content: str) -> str:
    if match := pattern.search(content):
        return match.group(1)
    raise MissingFieldError(field_name, pattern.pattern)


@dataclass(frozen=True)
class FieldVersionUpdater:
    """Version stored as three `name = <int>` assignments, e.g. constants in a source file.

    Each field is expected exactly once, so only the first match is replaced.
    """

    major_field: str = DEFAULT_MAJOR_FIELD
    minor_field: str = DEFAULT_MINOR_FIELD
    patch_field: str = DEFAULT_PATCH_FIELD
    strict: bool = False
    _patterns: tuple[tuple[str, re.Pattern], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        patterns = tuple(
            (name, field_pattern(name))
            for name in (self.major_field, self.minor_field, self.patch_field)
        )
        object.__setattr__(self, "_patterns", patterns)

    def read_version(self, content: str) -> str:
        return ".".join(
            _search_group(pattern, name, content) for name, pattern in self._patterns
        )

    def write_version(self, content: str, version: str) -> str:
        components = split_version(version)
        # the fields are integer assignments, anything else cannot be read back
        if not all(component.isdigit() for component in components):
            raise InvalidVersionError(version, "field components must be digits")
        for (name, pattern), component in zip(self._patterns, components):
            replacement = f"{name} = {component}"
            content, count = pattern.subn(lambda _: replacement, content, count=1)
            if count == 0:
                if self.strict:
                    raise MissingFieldError(name, pattern.pattern)
                logger.warning(f"field {name} not found, skipping write of {component}")
        return content


@dataclass(frozen=True)
class ModuleMajorUpdater:
    """Major version embedded in a module path, e.g. `example.com/pkg/v2`.

    A module path can be referenced many times (go.mod, README), all occurrences are replaced.
    Reading only consults the first occurrence.
    """

    module_prefix: str
    strict: bool = False
    _pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_pattern", module_pattern(self.module_prefix))

    def read_version(self, content: str) -> str:
        return _search_group(self._pattern, self.module_prefix, content)

    def write_version(self, content: str, version: str) -> str:
        major = version.split(".")[0]
        replacement = f"{self.module_prefix}/v{major}"
        content, count = self._pattern.subn(lambda _: replacement, content)
        if count == 0:
            if self.strict:
                raise MissingFieldError(self.module_prefix, self._pattern.pattern)
            logger.warning(f"module path {self.module_prefix} not found, skipping write")
        else:
            logger.debug(f"replaced {count} occurrences of {self.module_prefix}")
        return content
