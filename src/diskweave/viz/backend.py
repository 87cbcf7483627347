from __future__ import annotations

import importlib
import os
import sys
from typing import Optional


def _has_display() -> bool:
    """Best-effort check for a GUI display."""
    if sys.platform.startswith("linux"):
        if not os.environ.get("DISPLAY") and not os.environ.get("WAYLAND_DISPLAY"):
            return False
    return True


def detect_backend(prefer: str = "Agg") -> str:
    """Decide which matplotlib backend to use."""
    env = os.environ.get("MPLBACKEND")
    if env:
        return env
    if prefer.lower() in ("tkagg", "tk") and not _has_display():
        return "Agg"
    return prefer


def setup_matplotlib_backend(prefer: str = "Agg", force: Optional[str] = None) -> str:
    """Select the matplotlib backend BEFORE pyplot is imported.

    Once pyplot is loaded the current backend is kept and returned.
    """
    if "matplotlib.pyplot" in sys.modules:
        import matplotlib
        return matplotlib.get_backend()

    backend = force or detect_backend(prefer=prefer)

    import matplotlib
    try:
        matplotlib.use(backend, force=True)
    except (ImportError, ValueError):
        matplotlib.use("Agg", force=True)

    importlib.import_module("matplotlib.pyplot")
    return matplotlib.get_backend()


__all__ = ["detect_backend", "setup_matplotlib_backend"]
