from __future__ import annotations

import logging
import math
from typing import Sequence

from tierwise.core.config import get_settings
from tierwise.core.errors import InvalidInputError
from tierwise.domain.models import (
    AccessScenario,
    AnalysisResult,
    DeviceTrust,
    LocationRisk,
    OrganizationProfile,
    PolicyDecision,
    RiskSummary,
    SaaSApp,
    UserTier,
)
from tierwise.services.policy.evaluator import TIER_MONTHLY_COSTS, evaluate_policy
from tierwise.services.policy.vectors import count_vectors


logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    # Round .5 upwards instead of to the nearest even integer.
    return int(math.floor(value + 0.5))


def active_user_tiers(organization: OrganizationProfile) -> list[UserTier]:
    tiers: list[UserTier] = []
    if organization.employee_percent > 0:
        tiers.append("employee")
    if organization.contractor_percent > 0:
        tiers.append("contractor")
    if organization.vendor_percent > 0:
        tiers.append("vendor")
    # "temp" is scoreable but never derived from the workforce composition.
    return tiers or ["employee"]


def active_device_trusts(scenario: AccessScenario) -> list[DeviceTrust]:
    trusts: list[DeviceTrust] = []
    if scenario.managed_percent > 0:
        trusts.append("managed")
    if scenario.unmanaged_percent > 0:
        trusts.append("unmanaged")
    if scenario.byod_percent > 0:
        trusts.append("byod")
    return trusts or ["managed"]


def location_for_work_model(scenario: AccessScenario) -> LocationRisk:
    # Hybrid is treated as remote; highRiskGeo is not reachable from a scenario.
    if scenario.work_model == "office":
        return "office"
    return "remote"


def user_tier_distribution(organization: OrganizationProfile) -> dict[UserTier, int]:
    size = organization.workforce_size
    return {
        "employee": round_half_up(size * organization.employee_percent / 100),
        "contractor": round_half_up(size * organization.contractor_percent / 100),
        "vendor": round_half_up(size * organization.vendor_percent / 100),
        "temp": 0,
    }


def device_distribution(organization: OrganizationProfile, scenario: AccessScenario) -> dict[DeviceTrust, int]:
    size = organization.workforce_size
    return {
        "managed": round_half_up(size * scenario.managed_percent / 100),
        "unmanaged": round_half_up(size * scenario.unmanaged_percent / 100),
        "byod": round_half_up(size * scenario.byod_percent / 100),
    }


def effective_users(
    decision: PolicyDecision,
    users_by_tier: dict[UserTier, int],
    devices_by_trust: dict[DeviceTrust, int],
    workforce_size: int,
) -> int:
    # Treats user-tier and device-trust mixes as independent; the joint distribution is unknown.
    user_count = users_by_tier.get(decision.user_tier, 0)
    device_ratio = devices_by_trust.get(decision.device_trust, 0) / workforce_size
    return round_half_up(user_count * device_ratio)


def run_full_analysis(
    organization: OrganizationProfile,
    scenario: AccessScenario,
    selected_apps: Sequence[SaaSApp],
) -> AnalysisResult:
    """Evaluate every (app, user tier, device trust) combination and roll up totals.

    Decisions are ordered applications first, then user tiers, then device trust.
    Costs are annual USD; tier counts count decisions, not users.
    """
    if organization.workforce_size <= 0:
        raise InvalidInputError(
            "workforce_size must be positive",
            errors=[{"loc": ["organization", "workforce_size"], "msg": "must be positive"}],
        )
    settings = get_settings()
    user_tiers = active_user_tiers(organization)
    device_trusts = active_device_trusts(scenario)
    location_risk = location_for_work_model(scenario)
    frameworks = organization.compliance_frameworks

    decisions: list[PolicyDecision] = []
    for app in selected_apps:
        for user_tier in user_tiers:
            for device_trust in device_trusts:
                decision = evaluate_policy(app, user_tier, device_trust, location_risk, frameworks)
                if settings.analysis_log_decisions:
                    logger.debug(
                        "policy_decision app=%s user_tier=%s device_trust=%s score=%s tier=%s",
                        app.id,
                        user_tier,
                        device_trust,
                        decision.risk_score,
                        decision.recommendation,
                    )
                decisions.append(decision)

    users_by_tier = user_tier_distribution(organization)
    devices_by_trust = device_distribution(organization, scenario)

    total_annual_cost = 0
    blanket_vdi_cost = 0
    tier_counts = {"native": 0, "secure_browser": 0, "full_daas": 0}
    total_vectors = 0
    all_gaps: set[str] = set()
    for decision in decisions:
        users = effective_users(decision, users_by_tier, devices_by_trust, organization.workforce_size)
        total_annual_cost += decision.monthly_cost_per_user * users * 12
        blanket_vdi_cost += TIER_MONTHLY_COSTS["full_daas"] * users * 12
        tier_counts[decision.recommendation] += 1
        # Counted per decision, so an app contributes once per user/device combination.
        total_vectors += count_vectors(decision.app.exfiltration_vectors)
        all_gaps.update(decision.compliance_gaps_closed)

    result = AnalysisResult(
        organization=organization,
        scenario=scenario,
        selected_apps=tuple(selected_apps),
        decisions=tuple(decisions),
        total_annual_cost=total_annual_cost,
        blanket_vdi_cost=blanket_vdi_cost,
        total_annual_savings=blanket_vdi_cost - total_annual_cost,
        risk_summary=RiskSummary(
            native_count=tier_counts["native"],
            secure_browser_count=tier_counts["secure_browser"],
            full_daas_count=tier_counts["full_daas"],
            total_exfiltration_vectors=total_vectors,
            compliance_gaps_closed=len(all_gaps),
        ),
    )
    logger.info(
        "analysis_complete org=%s apps=%s decisions=%s optimized_usd=%s blanket_usd=%s",
        organization.name,
        len(result.selected_apps),
        len(result.decisions),
        result.total_annual_cost,
        result.blanket_vdi_cost,
    )
    return result
