"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "output": {
        "format": "m3u_plus",
        "encoding": "utf-8",
    },
    "input": {
        "encoding": "utf-8",
    },
    "diagnostics": {
        "log_level": "WARNING",
        "log_file": None,
    },
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
