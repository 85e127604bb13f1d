from __future__ import annotations

from hrmonitor.models import MeasurementResult, WorkflowSnapshot, WorkflowState
from hrmonitor.view import button_label, error_line, result_rows, status_line


def test_result_rows_two_decimals_and_units() -> None:
    r = MeasurementResult(
        bpm=72.3,
        fft_bpm=71.9,
        peaks_found=3,
        mean_ibi=833.1,
        sdnn=45.0,
        signal_quality=88,
        peaks=[1, 5.5, 9],
    )
    rows = dict(result_rows(r))
    assert rows["BPM"] == "72.30"
    assert rows["FFT BPM"] == "71.90"
    assert rows["Peaks Found"] == "3"
    assert rows["Mean IBI"] == "833.10 ms"
    assert rows["SDNN"] == "45.00 ms"
    assert rows["Signal Quality"] == "88%"
    assert rows["Peaks"] == "1, 5.5, 9"
    assert [label for label, _ in result_rows(r)][0] == "BPM"


def test_labels_follow_snapshot() -> None:
    running = WorkflowSnapshot(state=WorkflowState.RUNNING, status="Initializing...", in_flight=True)
    failed = WorkflowSnapshot(state=WorkflowState.FAILED, status="Monitoring failed. Please try again.", failure="boom")
    assert button_label(running) == "Monitoring..."
    assert button_label(failed) == "Start Monitoring"
    assert status_line(running) == "Status: Initializing..."
    assert error_line(running) is None
    assert error_line(failed) == "Error: boom"
