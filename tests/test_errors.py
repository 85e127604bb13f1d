from __future__ import annotations

from hrmonitor.errors import (
    CAMERA_REQUIRED_MESSAGE,
    INVALID_PAYLOAD_MESSAGE,
    PayloadValidationError,
    PermissionRejectedError,
    TransportError,
    classify_failure,
)


def test_denied_substring_maps_to_camera_message() -> None:
    assert classify_failure(PermissionRejectedError("Permission denied by user")) == CAMERA_REQUIRED_MESSAGE
    # Matching is on the description, whatever the error type
    assert classify_failure(OSError("access denied")) == CAMERA_REQUIRED_MESSAGE


def test_denied_match_is_case_sensitive() -> None:
    msg = classify_failure(PermissionRejectedError("Permission Denied"))
    assert msg == "An error occurred: Permission Denied"


def test_transport_error_embeds_status() -> None:
    err = TransportError(404)
    assert err.status_code == 404
    assert classify_failure(err) == "An error occurred: HTTP error: 404"


def test_validation_error_keeps_fixed_message() -> None:
    assert classify_failure(PayloadValidationError()) == INVALID_PAYLOAD_MESSAGE


def test_empty_description_falls_back_to_type_name() -> None:
    assert classify_failure(TimeoutError()) == "An error occurred: TimeoutError"
