from __future__ import annotations

import pytest

from hrmonitor.capture import Capture, CaptureConfig
from hrmonitor.errors import PermissionRejectedError
from hrmonitor.permission import OpenCVCameraPermission


@pytest.mark.asyncio
async def test_unavailable_camera_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail_open(self: Capture) -> None:
        raise RuntimeError(f"Failed to open camera {self.cfg.device_index}")

    monkeypatch.setattr(Capture, "open", fail_open)
    with pytest.raises(PermissionRejectedError) as ei:
        await OpenCVCameraPermission(CaptureConfig(device_index=3)).request_camera_access()
    assert ei.value.reason == "Failed to open camera 3"


@pytest.mark.asyncio
async def test_opened_camera_is_returned_as_releasable_handle(monkeypatch: pytest.MonkeyPatch) -> None:
    released: list[bool] = []

    class FakeCap:
        def release(self) -> None:
            released.append(True)

    def ok_open(self: Capture) -> None:
        self._cap = FakeCap()

    monkeypatch.setattr(Capture, "open", ok_open)
    handle = await OpenCVCameraPermission().request_camera_access()
    assert isinstance(handle, Capture) and handle.is_open
    handle.release()
    assert released == [True]
    assert not handle.is_open
