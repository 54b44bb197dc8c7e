from __future__ import annotations

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

from tierwise.apps.api.openapi import DEFAULT_ERROR_RESPONSES
from tierwise.apps.api.response import SuccessEnvelope, success_response
from tierwise.domain.models import AppCategory, SaaSApp
from tierwise.services.catalog import APP_CATEGORIES, get_app, get_apps_by_category, list_apps
from tierwise.services.policy.vectors import count_vectors


router = APIRouter(prefix="/catalog", tags=["catalog"], responses=DEFAULT_ERROR_RESPONSES)


class AppResponse(BaseModel):
    id: str
    name: str
    category: str
    exfiltration_vectors: dict[str, bool]
    vector_count: int
    data_classification: str
    requires_local_os: bool
    common_compliance: list[str]
    typical_users: list[str]
    browser_only: bool
    notes: str


class AppListResponse(BaseModel):
    categories: list[str]
    items: list[AppResponse]


def _app_payload(app: SaaSApp) -> AppResponse:
    return AppResponse(
        id=app.id,
        name=app.name,
        category=app.category,
        exfiltration_vectors=app.exfiltration_vectors.flags(),
        vector_count=count_vectors(app.exfiltration_vectors),
        data_classification=app.data_classification,
        requires_local_os=app.requires_local_os,
        common_compliance=list(app.common_compliance),
        typical_users=list(app.typical_users),
        browser_only=app.browser_only,
        notes=app.notes,
    )


@router.get("/apps", response_model=SuccessEnvelope[AppListResponse])
async def list_catalog_apps(
    request: Request,
    category: AppCategory | None = Query(default=None),
) -> dict:
    apps = get_apps_by_category(category) if category else list_apps()
    payload = AppListResponse(
        categories=list(APP_CATEGORIES),
        items=[_app_payload(app) for app in apps],
    )
    return success_response(request=request, data=payload)


@router.get("/apps/{app_id}", response_model=SuccessEnvelope[AppResponse])
async def get_catalog_app(request: Request, app_id: str) -> dict:
    # Unknown ids raise UnknownApplicationError, mapped to 404 by the app factory.
    return success_response(request=request, data=_app_payload(get_app(app_id)))
