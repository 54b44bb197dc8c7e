from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tierwise.apps.api.errors import (
    http_exception_handler,
    invalid_input_exception_handler,
    unhandled_exception_handler,
    unknown_application_exception_handler,
    validation_exception_handler,
)
from tierwise.apps.api.response import API_VERSION, REQUEST_ID_HEADER, assign_request_id
from tierwise.apps.api.routes.analysis import router as analysis_router
from tierwise.apps.api.routes.catalog import router as catalog_router
from tierwise.apps.api.routes.health import router as health_router
from tierwise.core.config import get_settings
from tierwise.core.errors import InvalidInputError, UnknownApplicationError
from tierwise.core.logging import configure_logging


def create_app() -> FastAPI:
    configure_logging()
    settings = get_settings()
    app = FastAPI(title=settings.api_title)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):  # type: ignore[override]
        request_id = assign_request_id(request)
        response = await call_next(request)
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_exception_handler)
    app.add_exception_handler(UnknownApplicationError, unknown_application_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router, prefix=f"/{API_VERSION}")
    app.include_router(catalog_router, prefix=f"/{API_VERSION}")
    app.include_router(analysis_router, prefix=f"/{API_VERSION}")
    return app


app = create_app()
