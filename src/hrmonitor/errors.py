"""Failure taxonomy and user-facing classification.

Every failure raised while a monitoring run is in flight ends up in
`classify_failure`, which is the only place that turns an exception into the
message shown to the user.
"""

from __future__ import annotations

CAMERA_REQUIRED_MESSAGE = "Camera access is required to perform monitoring."
INVALID_PAYLOAD_MESSAGE = "Monitoring failed. The data structure from the server was invalid."


class MonitoringError(Exception):
    """Base class for failures raised by the monitoring collaborators."""


class PermissionRejectedError(MonitoringError):
    """The camera permission probe was rejected.

    `reason` is the description reported by the permission layer, e.g.
    "Permission denied by user".
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TransportError(MonitoringError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error: {status_code}")
        self.status_code = status_code


class PayloadValidationError(MonitoringError):
    def __init__(self, message: str = INVALID_PAYLOAD_MESSAGE) -> None:
        super().__init__(message)


def describe(error: BaseException) -> str:
    """Return the human-readable description of an error."""
    text = str(error)
    return text if text else type(error).__name__


def classify_failure(error: BaseException) -> str:
    """Map any failure to the message shown to the user.

    Permission rejections are recognised by the substring "denied" in the
    description (case-sensitive), which is how the permission layer words a
    declined prompt. This also applies to errors that are not
    PermissionRejectedError.
    """
    description = describe(error)
    if "denied" in description:
        return CAMERA_REQUIRED_MESSAGE
    if isinstance(error, PayloadValidationError):
        return description
    return f"An error occurred: {description}"
