from __future__ import annotations


class TierwiseError(Exception):
    """Base error for Tierwise."""


class InvalidInputError(TierwiseError):
    """Organization, scenario or application input outside the accepted domain."""

    def __init__(self, message: str, *, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class UnknownApplicationError(TierwiseError):
    """Application id not present in the catalog."""

    def __init__(self, app_id: str) -> None:
        super().__init__(f"Unknown application: {app_id}")
        self.app_id = app_id
