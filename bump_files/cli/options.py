"""CLI options and arguments for bump-files commands."""

from pathlib import Path

import typer

option_repo_root = typer.Option(
    None,
    "-r",
    "--repo-root",
    help="Directory the bump file names are relative to, defaults to cwd",
)

option_config_path = typer.Option(
    None,
    "-c",
    "--config",
    help="yaml/json file with `bump_files`, uses the version.go/go.mod/README.md setup if not set",
)

option_strict = typer.Option(
    None,
    "--strict",
    help="Fail when a pattern is missing at write time instead of leaving the text unchanged",
)

option_dry_run = typer.Option(
    None,
    "--dry-run",
    help="Compute the new content without writing any file",
)


def default_repo_root() -> Path:
    return Path.cwd()
