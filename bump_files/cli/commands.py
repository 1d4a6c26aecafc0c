"""CLI commands for bump-files."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from typer import Typer

from bump_files.bump import BumpResult, bump_files, current_version, read_file_versions
from bump_files.cli.logs import configure_logging
from bump_files.cli.options import (
    default_repo_root,
    option_config_path,
    option_dry_run,
    option_repo_root,
    option_strict,
)
from bump_files.config import BumpConfig, resolve_config
from bump_files.errors import BumpFilesError
from bump_files.settings import BumpSettings
from bump_files.version import BumpType

logger = logging.getLogger(__name__)
app = Typer(name="bump-files", help="Keep version strings in sync across files")


def create_settings(**kwargs) -> BumpSettings:
    """Only explicit CLI values are passed, the rest come from BUMP_FILES_* env vars."""
    explicit = {key: value for key, value in kwargs.items() if value is not None}
    explicit.setdefault("repo_root", default_repo_root())
    return BumpSettings(**explicit)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    repo_root: Path | None = option_repo_root,
    config_path: Path | None = option_config_path,
    strict: bool | None = option_strict,
    dry_run: bool | None = option_dry_run,
):
    """bump-files: read and bump the version recorded in multiple files"""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    try:
        settings = create_settings(
            repo_root=repo_root,
            config_path=config_path,
            strict_write=strict,
            dry_run=dry_run,
        )
        config = resolve_config(settings)
    except (ValidationError, BumpFilesError) as e:
        logger.error(f"invalid settings: {e}")
        raise typer.Exit(1)
    configure_logging(settings.log_level)
    ctx.obj = (settings, config)


def _log_result(result: BumpResult) -> None:
    for path in result.changed_paths:
        logger.info(f"updated {path}")
    for path in result.unchanged_paths:
        logger.warning(f"no changes in {path}")


@app.command()
def read(ctx: typer.Context):
    """Print the current version, read from the first bump file"""
    settings: BumpSettings
    config: BumpConfig
    settings, config = ctx.obj
    try:
        file_versions = read_file_versions(settings, config)
        version = current_version(file_versions)
    except BumpFilesError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    for file_version in file_versions:
        logger.info(f"{file_version.bump_file.filename}: {file_version.version}")
    typer.echo(str(version))


@app.command()
def bump(
    ctx: typer.Context,
    bump_type: BumpType = typer.Argument(BumpType.PATCH, help="Which part to bump"),
):
    """Bump the version in all bump files"""
    settings, config = ctx.obj
    try:
        result = bump_files(settings, config, bump_type)
    except BumpFilesError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    _log_result(result)
    typer.echo(str(result.new_version))


@app.command(name="set")
def set_version(
    ctx: typer.Context,
    version: str = typer.Argument(..., help="Explicit version, e.g. 2.0.0"),
):
    """Write an explicit version to all bump files"""
    settings, config = ctx.obj
    try:
        result = bump_files(settings, config, new_version=version)
    except BumpFilesError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    _log_result(result)
    typer.echo(str(result.new_version))
