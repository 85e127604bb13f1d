from __future__ import annotations

import pytest
from pydantic import ValidationError

from hrmonitor.models import MeasurementResult, MonitorPayload, MonitorResponse


def test_response_ok_range() -> None:
    assert MonitorResponse(200, b"").ok
    assert MonitorResponse(204, b"").ok
    assert not MonitorResponse(301, b"").ok
    assert not MonitorResponse(500, b"").ok


def test_payload_ignores_unknown_keys() -> None:
    p = MonitorPayload.model_validate({"status_code": 200, "extra": 1, "detail": {"results": {}, "x": 2}})
    assert p.status_code == 200
    assert p.detail is not None and p.detail.results == {}
    assert p.detail.message is None


def test_measurement_result_bounds() -> None:
    base = dict(bpm=70.0, fft_bpm=70.0, peaks_found=0, mean_ibi=800.0, sdnn=40.0, signal_quality=100, peaks=[])
    assert MeasurementResult(**base).peaks == []
    with pytest.raises(ValidationError):
        MeasurementResult(**{**base, "signal_quality": 101})
    with pytest.raises(ValidationError):
        MeasurementResult(**{**base, "peaks_found": -1})
