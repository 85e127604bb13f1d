"""Camera permission capability.

The workflow only needs to know whether the camera can be opened; the handle
it receives is released straight away and never read from.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from .capture import Capture, CaptureConfig
from .errors import PermissionRejectedError

logger = logging.getLogger(__name__)


class CameraHandle(Protocol):
    def release(self) -> None: ...


class CameraPermission(Protocol):
    async def request_camera_access(self) -> CameraHandle:
        """Resolve with a releasable handle or raise PermissionRejectedError."""
        ...


class OpenCVCameraPermission:
    """Probe camera availability by opening the device once.

    Opening blocks inside OpenCV (and may wait on an OS permission prompt), so
    it runs in a worker thread.
    """

    def __init__(self, cfg: Optional[CaptureConfig] = None) -> None:
        self.cfg = cfg or CaptureConfig()

    def _open(self) -> Capture:
        cap = Capture(self.cfg)
        try:
            cap.open()
        except (RuntimeError, OSError) as e:
            raise PermissionRejectedError(str(e)) from e
        return cap

    async def request_camera_access(self) -> CameraHandle:
        cap = await asyncio.to_thread(self._open)
        logger.info("[CAMERA] device %d opened", self.cfg.device_index)
        return cap
