"""Camera handle (OpenCV-based)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CaptureConfig:
    device_index: int = 0
    width: int = 640
    height: int = 480


class Capture:
    """Thin wrapper around OpenCV VideoCapture.

    Imports cv2 lazily to avoid import-time side effects in non-camera contexts.
    """

    def __init__(self, cfg: Optional[CaptureConfig] = None) -> None:
        self.cfg = cfg or CaptureConfig()
        self._cap = None

    @property
    def is_open(self) -> bool:
        return self._cap is not None

    def open(self) -> None:
        import cv2  # local import

        cap = cv2.VideoCapture(self.cfg.device_index)
        if not cap.isOpened():
            cap.release()
            raise RuntimeError(f"Failed to open camera {self.cfg.device_index}")
        # Set properties (best-effort)
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.cfg.width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.cfg.height)
        self._cap = cap

    def release(self) -> None:
        if self._cap is not None:
            self._cap.release()  # type: ignore[union-attr]
            self._cap = None
