from __future__ import annotations

from typing import Any

from tierwise.apps.api.response import ErrorEnvelope


def _error_example(*, code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    # Build a consistent error envelope example for OpenAPI docs.
    payload: dict[str, Any] = {
        "error": {"code": code, "message": message},
        "meta": {"request_id": "req_example", "api_version": "v1"},
    }
    if details:
        payload["error"]["details"] = details
    return payload


DEFAULT_ERROR_RESPONSES: dict[int, dict[str, Any]] = {
    404: {
        "model": ErrorEnvelope,
        "description": "Not found",
        "content": {
            "application/json": {
                "example": _error_example(
                    code="APP_NOT_FOUND",
                    message="Unknown application: example-app",
                    details={"app_id": "example-app"},
                ),
            }
        },
    },
    422: {
        "model": ErrorEnvelope,
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": _error_example(
                    code="REQUEST_VALIDATION_ERROR",
                    message="Validation error",
                    details={"errors": [{"loc": ["body", "organization", "workforce_size"], "msg": "too small"}]},
                ),
            }
        },
    },
    500: {
        "model": ErrorEnvelope,
        "description": "Internal error",
        "content": {
            "application/json": {
                "example": _error_example(code="INTERNAL_ERROR", message="Internal server error"),
            }
        },
    },
}
