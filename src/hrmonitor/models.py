"""Workflow state and the measurement service's wire schema."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WorkflowState(str, Enum):
    IDLE = "Idle"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class MeasurementResult(BaseModel):
    """Results block of a successful response, kept exactly as sent.

    Strict: a string or bool where a number is expected, or a float where an
    int is expected, is rejected rather than coerced. Integer peaks stay ints.
    """

    model_config = ConfigDict(strict=True)

    bpm: float
    fft_bpm: float
    peaks_found: int = Field(ge=0)
    mean_ibi: float  # ms
    sdnn: float  # ms
    signal_quality: int = Field(ge=0, le=100)
    peaks: list[Union[int, float]]


class MonitorDetail(BaseModel):
    message: Optional[str] = None
    # Kept raw here; validated as MeasurementResult only once status_code passes
    results: Optional[dict] = None


class MonitorPayload(BaseModel):
    """Body of GET /monitor.

    `status_code` is the service's own success discriminator and is
    independent of the HTTP status of the response carrying it.
    """

    status_code: Optional[int] = Field(default=None, strict=True)
    detail: Optional[MonitorDetail] = None


@dataclass(frozen=True)
class MonitorResponse:
    """HTTP-like response returned by the fetch capability."""

    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class WorkflowSnapshot:
    state: WorkflowState
    status: str
    result: Optional[MeasurementResult] = None
    failure: Optional[str] = None
    in_flight: bool = False
