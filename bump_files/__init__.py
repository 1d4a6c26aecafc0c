from bump_files.bump import BumpResult, bump_files, read_file_versions
from bump_files.config import BumpConfig, BumpFile, default_config, load_config
from bump_files.errors import (
    BumpFileNotFoundError,
    BumpFilesError,
    InvalidVersionError,
    MissingFieldError,
)
from bump_files.settings import BumpSettings
from bump_files.updaters import FieldVersionUpdater, ModuleMajorUpdater, VersionUpdater
from bump_files.version import BumpType, PkgVersion

VERSION = "0.1.0"

__all__ = [
    "BumpConfig",
    "BumpFile",
    "BumpFileNotFoundError",
    "BumpFilesError",
    "BumpResult",
    "BumpSettings",
    "BumpType",
    "FieldVersionUpdater",
    "InvalidVersionError",
    "MissingFieldError",
    "ModuleMajorUpdater",
    "PkgVersion",
    "VersionUpdater",
    "bump_files",
    "default_config",
    "load_config",
    "read_file_versions",
]
