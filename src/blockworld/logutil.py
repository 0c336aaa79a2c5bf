from __future__ import annotations

import os

from . import config

_LEVEL_COLORS = {
    "WARN": "\x1b[33m",
    "ERROR": "\x1b[31m",
}


def log(scope: str, msg: str, level: str = "INFO") -> None:
    if not config.LOG_ENABLED:
        return
    text = f"[{level} {scope}] {msg}"
    color = _LEVEL_COLORS.get(level)
    if color and config.LOG_COLOR and os.getenv("NO_COLOR") is None:
        text = f"{color}{text}\x1b[0m"
    print(text)
