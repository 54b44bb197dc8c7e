from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, ConfigDict, Field

from tierwise.apps.api.openapi import DEFAULT_ERROR_RESPONSES
from tierwise.apps.api.response import SuccessEnvelope, success_response
from tierwise.core.errors import InvalidInputError
from tierwise.domain.models import AccessTier, ComplianceFramework, DeviceTrust, LocationRisk, UserTier
from tierwise.services.catalog import get_app
from tierwise.services.ingestion import AnalysisRequest, SaaSAppInput, build_analysis_inputs
from tierwise.services.policy.analysis import run_full_analysis
from tierwise.services.policy.scoring import score_breakdown
from tierwise.services.policy.tiers import resolve_tier
from tierwise.services.reporting import build_summary, cost_projection, heatmap


logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"], responses=DEFAULT_ERROR_RESPONSES)


class AnalysisResponse(BaseModel):
    result: dict[str, Any]
    summary: dict[str, Any]
    heatmap: dict[str, Any]
    projection: list[dict[str, int]]


class ScoreBreakdownRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app_id: str | None = None
    app: SaaSAppInput | None = None
    user_tier: UserTier
    device_trust: DeviceTrust
    location_risk: LocationRisk = "office"
    compliance_frameworks: list[ComplianceFramework] = Field(default_factory=list)


class ScoreBreakdownResponse(BaseModel):
    app_id: str
    factors: list[dict[str, Any]]
    total: int
    max_total: int
    tier: AccessTier
    deciding_rule: str


@router.post("/analysis", response_model=SuccessEnvelope[AnalysisResponse])
async def create_analysis(
    request: Request,
    payload: AnalysisRequest,
    tier_filter: AccessTier | None = Query(default=None),
    projection_months: int = Query(default=36, ge=1, le=120),
) -> dict:
    # Run one synchronous analysis; results are returned, never stored.
    inputs = build_analysis_inputs(payload)
    result = run_full_analysis(inputs.organization, inputs.scenario, inputs.selected_apps)
    response = AnalysisResponse(
        result=result.to_dict(),
        summary=build_summary(result),
        heatmap=heatmap(result, tier_filter=tier_filter),
        projection=cost_projection(result, months=projection_months),
    )
    return success_response(request=request, data=response)


@router.post("/score-breakdown", response_model=SuccessEnvelope[ScoreBreakdownResponse])
async def explain_score(request: Request, payload: ScoreBreakdownRequest) -> dict:
    if (payload.app_id is None) == (payload.app is None):
        raise InvalidInputError(
            "Provide exactly one of app_id or app",
            errors=[{"loc": ["body", "app_id"], "msg": "exactly one of app_id or app is required"}],
        )
    app = get_app(payload.app_id) if payload.app_id is not None else payload.app.to_domain()
    breakdown = score_breakdown(app, payload.user_tier, payload.device_trust, payload.location_risk)
    tier, rule = resolve_tier(breakdown.total, app, payload.device_trust, payload.compliance_frameworks)
    logger.debug("score_breakdown app=%s total=%s tier=%s rule=%s", app.id, breakdown.total, tier, rule)
    response = ScoreBreakdownResponse(
        app_id=app.id,
        factors=[asdict(factor) for factor in breakdown.factors],
        total=breakdown.total,
        max_total=breakdown.max_total,
        tier=tier,
        deciding_rule=rule,
    )
    return success_response(request=request, data=response)
