"""Logging setup.

Vignette output goes to stdout through the CLI console; diagnostics go to
stderr through a `RichHandler` so both can be piped separately.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "solid-d2"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root logger once; later calls only adjust the level."""

    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging is set up (level=%s)", level)
    return root
