"""Display formatting for workflow snapshots (no UI toolkit imports)."""

from __future__ import annotations

from typing import Optional

from .models import MeasurementResult, WorkflowSnapshot


def button_label(snap: WorkflowSnapshot) -> str:
    return "Monitoring..." if snap.in_flight else "Start Monitoring"


def status_line(snap: WorkflowSnapshot) -> str:
    return f"Status: {snap.status}"


def error_line(snap: WorkflowSnapshot) -> Optional[str]:
    return f"Error: {snap.failure}" if snap.failure else None


def result_rows(result: MeasurementResult) -> list[tuple[str, str]]:
    """Return (label, value) rows for the results grid.

    Floats are shown with two decimals; peaks keep server order.
    """
    return [
        ("BPM", f"{result.bpm:.2f}"),
        ("FFT BPM", f"{result.fft_bpm:.2f}"),
        ("Peaks Found", str(result.peaks_found)),
        ("Mean IBI", f"{result.mean_ibi:.2f} ms"),
        ("SDNN", f"{result.sdnn:.2f} ms"),
        ("Signal Quality", f"{result.signal_quality}%"),
        ("Peaks", ", ".join(_fmt_number(p) for p in result.peaks)),
    ]


def _fmt_number(x: float) -> str:
    # Integral timestamps/indices print without a trailing ".0"
    return str(int(x)) if float(x).is_integer() else str(x)
