"""Runtime configuration for the monitor client."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .capture import CaptureConfig

DEFAULT_MONITOR_URL = "http://localhost:5000/monitor"


@dataclass
class MonitorConfig:
    url: str = DEFAULT_MONITOR_URL
    timeout_sec: float = 30.0
    capture: CaptureConfig = field(default_factory=CaptureConfig)
    log_dir: Path = Path("logs")
