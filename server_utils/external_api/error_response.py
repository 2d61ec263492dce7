"""Shared error response formatting for the collection endpoints."""

from typing import Any, Dict, Optional


def error_output(
    message: str,
    *,
    status_code: Optional[int] = None,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """Build a structured error payload under the ``output`` key.

    Returns a dictionary shaped like::

        {"output": {"error": "message", ...}}

    Optional fields are included only when provided.
    """

    payload: Dict[str, Any] = {"error": message}
    if status_code is not None:
        payload["status_code"] = status_code
    if details is not None:
        payload["details"] = details
    return {"output": payload}


def error_response(
    message: str,
    error_type: str = "api_error",
    status_code: Optional[int] = None,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Return a typed error payload."""

    payload: Dict[str, Any] = {"message": message, "type": error_type}
    if status_code is not None:
        payload["status_code"] = status_code
    if details:
        payload["details"] = details
    return {"output": {"error": payload}}


def configuration_error(message: str, setting_name: str) -> Dict[str, Any]:
    """Error response for a missing or blank destination setting."""

    return error_response(
        message=message,
        error_type="configuration_error",
        status_code=400,
        details={"setting": setting_name},
    )


def validation_error(
    message: str,
    field: Optional[str] = None,
    status_code: Optional[int] = None,
) -> Dict[str, Any]:
    """Error response for validation failure."""

    details = {"field": field} if field else None
    return error_response(
        message=message,
        error_type="validation_error",
        status_code=status_code,
        details=details,
    )
