"""Monitoring workflow state machine.

One run goes Idle/terminal -> Running -> Succeeded | Failed:

1. probe camera permission (handle released immediately),
2. GET the monitor URL once,
3. validate the payload and publish the results,

with any failure turned into a user-facing message by `classify_failure`.
The run suspends only at the permission probe and at the fetch, in that
order. Observers receive a `WorkflowSnapshot` after every change.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Optional

from pydantic import ValidationError

from .client import ResultFetcher
from .config import DEFAULT_MONITOR_URL
from .errors import PayloadValidationError, TransportError, classify_failure
from .models import (
    MeasurementResult,
    MonitorDetail,
    MonitorPayload,
    MonitorResponse,
    WorkflowSnapshot,
    WorkflowState,
)
from .permission import CameraPermission

logger = logging.getLogger(__name__)

STATUS_READY = "Click the button to start monitoring."
STATUS_INITIALIZING = "Initializing..."
STATUS_CAPTURING = "Capturing data from the server..."
STATUS_COMPLETE = "Monitoring complete!"
STATUS_FAILED = "Monitoring failed. Please try again."

Listener = Callable[[WorkflowSnapshot], None]


def parse_payload(response: MonitorResponse) -> MonitorDetail:
    """Decode and validate a fetched response.

    Raises TransportError for a non-success HTTP status (before the body is
    looked at), ValueError for a body that is not JSON, and
    PayloadValidationError when the body does not carry status_code 200 and
    a detail.results object. Returns the detail block.
    """
    if not response.ok:
        raise TransportError(response.status_code)
    data = json.loads(response.body)
    logger.debug("[DATA] %s", data)
    try:
        payload = MonitorPayload.model_validate(data)
    except ValidationError as e:
        raise PayloadValidationError() from e
    if payload.status_code != 200 or payload.detail is None or payload.detail.results is None:
        raise PayloadValidationError()
    return payload.detail


def extract_result(detail: MonitorDetail) -> MeasurementResult:
    try:
        return MeasurementResult.model_validate(detail.results)
    except ValidationError as e:
        raise PayloadValidationError() from e


class MonitoringWorkflow:
    """Owns workflow state and runs one monitoring attempt per `start()`.

    The presentation layer reads state through `snapshot()` or `subscribe()`
    and never mutates it.
    """

    def __init__(
        self,
        permission: CameraPermission,
        fetcher: ResultFetcher,
        url: str = DEFAULT_MONITOR_URL,
    ) -> None:
        self.permission = permission
        self.fetcher = fetcher
        self.url = url
        self._state = WorkflowState.IDLE
        self._status = STATUS_READY
        self._result: Optional[MeasurementResult] = None
        self._failure: Optional[str] = None
        self._in_flight = False
        self._listeners: list[Listener] = []

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def status(self) -> str:
        return self._status

    @property
    def result(self) -> Optional[MeasurementResult]:
        return self._result

    @property
    def failure(self) -> Optional[str]:
        return self._failure

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def snapshot(self) -> WorkflowSnapshot:
        return WorkflowSnapshot(
            state=self._state,
            status=self._status,
            result=self._result,
            failure=self._failure,
            in_flight=self._in_flight,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener`; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("[UI] listener failed")

    def _begin(self) -> None:
        self._in_flight = True
        self._state = WorkflowState.RUNNING
        self._status = STATUS_INITIALIZING
        self._result = None
        self._failure = None
        self._notify()

    def _succeed(self, detail: MonitorDetail, result: MeasurementResult) -> None:
        self._status = detail.message or STATUS_COMPLETE
        self._result = result
        self._state = WorkflowState.SUCCEEDED
        self._notify()

    def _reset(self) -> None:
        self._state = WorkflowState.IDLE
        self._status = STATUS_READY
        self._result = None
        self._failure = None

    def _fail(self, error: Exception) -> None:
        self._failure = classify_failure(error)
        self._status = STATUS_FAILED
        self._state = WorkflowState.FAILED
        self._notify()

    async def start(self) -> bool:
        """Run one monitoring attempt to a terminal state.

        Returns False (and changes nothing) if a run is already in flight.
        Failures never propagate; they end the run in `Failed`. Cancellation
        propagates after the workflow is put back to `Idle`.
        """
        if self._in_flight:
            logger.warning("start() ignored: a monitoring run is already in flight")
            return False
        self._begin()
        try:
            handle = await self.permission.request_camera_access()
            handle.release()
            logger.info("[CAMERA] Access granted and handle released")
            self._status = STATUS_CAPTURING
            self._notify()

            response = await self.fetcher.fetch_monitoring_result(self.url)
            detail = parse_payload(response)
            result = extract_result(detail)
            self._succeed(detail, result)
            logger.info("[DATA] %d peaks, bpm %.2f", result.peaks_found, result.bpm)
        except Exception as e:
            logger.exception("[ERROR] %s", e)
            self._fail(e)
        finally:
            if self._state is WorkflowState.RUNNING:
                # Cancelled mid-run: nothing was published, go back to ready
                logger.warning("monitoring run cancelled")
                self._reset()
            self._in_flight = False
            self._notify()
        return True
