import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(log_level: str = "INFO") -> logging.Handler:
    """Calling again, e.g. after settings are parsed, updates the level of the existing handler."""
    root = logging.getLogger()
    handler = next((h for h in root.handlers if isinstance(h, RichHandler)), None)
    if handler is None:
        handler = RichHandler(
            rich_tracebacks=False, level=log_level, console=Console(stderr=True)
        )
        logging.basicConfig(
            level=log_level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[handler],
        )
        if handler not in root.handlers:  # basicConfig is a no-op when root has handlers
            root.addHandler(handler)
    handler.setLevel(log_level)
    root.setLevel(log_level)
    return handler
