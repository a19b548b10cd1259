"""
Logging setup shared by the API server and the scripts.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Install a Rich handler on the root logger (once)."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.strip().upper(), logging.INFO))

    if any(isinstance(h, RichHandler) for h in root.handlers):
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
