from __future__ import annotations

import json
import logging
import os
from typing import Any, Mapping, Optional

_LEVEL_MAP = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_TEXT_FMT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; a dict passed as ``extra={"extra": {...}}`` is merged in."""

    def format(self, record: logging.LogRecord) -> str:
        base = {"level": record.levelname, "name": record.name, "msg": record.getMessage()}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, ensure_ascii=False)


def _normalize(level: Optional[str]) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().lower(), logging.WARNING)


def init_logging(level: int | str | None = None, fmt: str | None = None) -> None:
    """
    Set up the root logger and the ``diskweave`` logger without stacking handlers.

    ``DISKWEAVE_LOG_LEVEL`` / ``DISKWEAVE_LOG_FORMAT`` override the arguments.
    Repeated calls may change the level and format.
    """
    level = os.getenv("DISKWEAVE_LOG_LEVEL", level)
    fmt = os.getenv("DISKWEAVE_LOG_FORMAT", fmt or "text")
    lvl = _normalize(level) if isinstance(level, str) or level is None else int(level)

    formatter: logging.Formatter
    if fmt == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt=_TEXT_FMT, datefmt=_DATEFMT)

    root = logging.getLogger()
    handler = next((h for h in root.handlers if getattr(h, "_diskweave", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._diskweave = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    handler.setFormatter(formatter)
    root.setLevel(lvl)

    logging.getLogger("diskweave").setLevel(lvl)


def init_logging_from_cfg(cfg: Any) -> None:
    """Initialise logging from a :class:`LoggingConfig` or a plain mapping."""
    if cfg is None:
        init_logging()
        return
    if isinstance(cfg, Mapping):
        init_logging(cfg.get("level"), cfg.get("format"))
        return
    init_logging(getattr(cfg, "level", None), getattr(cfg, "format", None))


__all__ = ["JSONFormatter", "init_logging", "init_logging_from_cfg"]
