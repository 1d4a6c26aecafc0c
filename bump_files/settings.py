from pathlib import Path
from typing import Literal, Self

from pydantic import DirectoryPath, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bump_files.config import BumpFile


class BumpSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BUMP_FILES_")

    repo_root: DirectoryPath
    config_path: Path | None = None
    strict_write: bool = False
    dry_run: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @model_validator(mode="after")
    def check_paths(self) -> Self:
        if self.config_path and not self.config_path.is_absolute():
            self.config_path = self.repo_root / self.config_path
        assert self.config_path is None or self.config_path.exists(), (
            f"Config path does not exist: {self.config_path}"
        )
        return self

    def file_path(self, bump_file: BumpFile) -> Path:
        return self.repo_root / bump_file.filename
