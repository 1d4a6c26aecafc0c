# CLI interface domain
from bump_files.cli.commands import app
from bump_files.cli.logs import configure_logging


def main():
    configure_logging()
    app.pretty_exceptions_enable = False
    app()


__all__ = ["main", "app", "configure_logging"]
