from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Literal, Union

from model_lib import Entity, parse_model
from pydantic import Field

from bump_files.updaters import (
    DEFAULT_MAJOR_FIELD,
    DEFAULT_MINOR_FIELD,
    DEFAULT_PATCH_FIELD,
    FieldVersionUpdater,
    ModuleMajorUpdater,
    VersionUpdater,
)

if TYPE_CHECKING:
    from bump_files.settings import BumpSettings

logger = logging.getLogger(__name__)

DEFAULT_VERSION_FILE = "./version.go"
DEFAULT_MODULE_PREFIX = "stream-chat-go"


class FieldsUpdaterConfig(Entity):
    type: Literal["fields"] = "fields"
    major_field: str = DEFAULT_MAJOR_FIELD
    minor_field: str = DEFAULT_MINOR_FIELD
    patch_field: str = DEFAULT_PATCH_FIELD

    def updater(self, strict: bool = False) -> VersionUpdater:
        return FieldVersionUpdater(
            major_field=self.major_field,
            minor_field=self.minor_field,
            patch_field=self.patch_field,
            strict=strict,
        )


class ModuleUpdaterConfig(Entity):
    type: Literal["module_major"] = "module_major"
    module_prefix: str = Field(
        ..., description="Text before /v<major>, e.g. example.com/pkg"
    )

    def updater(self, strict: bool = False) -> VersionUpdater:
        return ModuleMajorUpdater(module_prefix=self.module_prefix, strict=strict)


UpdaterConfig = Annotated[
    Union[FieldsUpdaterConfig, ModuleUpdaterConfig], Field(discriminator="type")
]


class BumpFile(Entity):
    filename: str
    updater: UpdaterConfig


class BumpConfig(Entity):
    bump_files: list[BumpFile] = Field(
        ...,
        min_length=1,
        description="The first file is used to read the current version.",
    )


def default_config() -> BumpConfig:
    module_updater = ModuleUpdaterConfig(module_prefix=DEFAULT_MODULE_PREFIX)
    return BumpConfig(
        bump_files=[
            BumpFile(filename=DEFAULT_VERSION_FILE, updater=FieldsUpdaterConfig()),
            BumpFile(filename="./go.mod", updater=module_updater),
            BumpFile(filename="./README.md", updater=module_updater),
        ]
    )


def load_config(path: Path) -> BumpConfig:
    return parse_model(path, t=BumpConfig)


def resolve_config(settings: BumpSettings) -> BumpConfig:
    if config_path := settings.config_path:
        logger.info(f"using bump config @ {config_path}")
        return load_config(config_path)
    return default_config()
