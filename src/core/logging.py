from __future__ import annotations

import logging
from typing import IO

from rich.console import Console
from rich.logging import RichHandler


def get_logger(name: str = "install_mcp") -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(*, level: str = "warning", stream: IO[str] | None = None) -> None:
    """Attach a Rich handler on stderr to the root logger (once)."""

    level_value = getattr(logging, level.strip().upper(), None)
    if not isinstance(level_value, int):
        level_value = logging.WARNING
    root = logging.getLogger()
    root.setLevel(level_value)
    if root.handlers:
        return

    console = Console(file=stream, stderr=stream is None)
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
