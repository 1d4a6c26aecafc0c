from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from bump_files.config import BumpConfig, BumpFile
from bump_files.errors import BumpFileNotFoundError
from bump_files.settings import BumpSettings
from bump_files.updaters import VersionUpdater
from bump_files.version import BumpType, PkgVersion

logger = logging.getLogger(__name__)


@dataclass
class FileVersion:
    bump_file: BumpFile
    path: Path
    updater: VersionUpdater
    content: str
    version: str


@dataclass
class BumpResult:
    old_version: PkgVersion
    new_version: PkgVersion
    changed_paths: list[Path] = field(default_factory=list)
    unchanged_paths: list[Path] = field(default_factory=list)


def read_file_versions(settings: BumpSettings, config: BumpConfig) -> list[FileVersion]:
    """Every file is read before anything is written, a failing read leaves all files untouched."""
    file_versions = []
    for bump_file in config.bump_files:
        path = settings.file_path(bump_file)
        if not path.exists():
            raise BumpFileNotFoundError(path)
        updater = bump_file.updater.updater(strict=settings.strict_write)
        content = path.read_text()
        version = updater.read_version(content)
        logger.debug(f"read version {version} from {path}")
        file_versions.append(FileVersion(bump_file, path, updater, content, version))
    return file_versions


def current_version(file_versions: list[FileVersion]) -> PkgVersion:
    source, *others = file_versions
    version = PkgVersion.parse(source.version)
    for other in others:
        if other.version not in {str(version), str(version.major)}:
            logger.warning(
                f"{other.path.name} has version {other.version}, expected {version} from {source.path.name}"
            )
    return version


def bump_files(
    settings: BumpSettings,
    config: BumpConfig,
    bump_type: BumpType = BumpType.PATCH,
    *,
    new_version: str | None = None,
) -> BumpResult:
    file_versions = read_file_versions(settings, config)
    old_version = current_version(file_versions)
    next_version = (
        PkgVersion.parse(new_version) if new_version else old_version.bump(bump_type)
    )
    logger.info(f"bumping from {old_version} to {next_version}")
    result = BumpResult(old_version, next_version)
    # strict writes fail here, before any file is touched
    new_contents = [
        (fv, fv.updater.write_version(fv.content, str(next_version)))
        for fv in file_versions
    ]
    for file_version, new_content in new_contents:
        if new_content == file_version.content:
            result.unchanged_paths.append(file_version.path)
            continue
        result.changed_paths.append(file_version.path)
        if settings.dry_run:
            logger.info(f"dry run, skipping write to {file_version.path}")
            continue
        file_version.path.write_text(new_content)
    return result
