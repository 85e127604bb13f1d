"""FastAPI stand-in for the measurement service.

Serves a fixed sample on GET /monitor in the same shape as the real service,
so the desktop client can be exercised without a camera pipeline behind it.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel

from .models import MeasurementResult

SAMPLE_RESULT = MeasurementResult(
    bpm=72.3,
    fft_bpm=71.9,
    peaks_found=40,
    mean_ibi=833.1,
    sdnn=45.2,
    signal_quality=88,
    peaks=[12, 37, 62, 88, 113, 138, 163, 189],
)


class DetailModel(BaseModel):
    message: Optional[str] = None
    results: MeasurementResult


class MonitorModel(BaseModel):
    status_code: int
    detail: DetailModel


def make_app(result: Optional[MeasurementResult] = None, message: str = "Monitoring complete!") -> FastAPI:
    app = FastAPI(title="Monitor Stub Service", version="0.1.0")
    sample = result or SAMPLE_RESULT

    @app.get("/health")
    async def health() -> dict[str, str]:  # pragma: no cover - trivial
        return {"status": "ok"}

    @app.get("/monitor")
    async def monitor() -> MonitorModel:
        return MonitorModel(status_code=200, detail=DetailModel(message=message, results=sample))

    return app


app = make_app()


def main() -> None:  # pragma: no cover - manual run helper
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=5000)


if __name__ == "__main__":  # pragma: no cover
    main()
