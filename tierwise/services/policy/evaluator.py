from __future__ import annotations

from typing import Sequence

from tierwise.domain.models import (
    AccessTier,
    ComplianceFramework,
    DeviceTrust,
    LocationRisk,
    PolicyDecision,
    SaaSApp,
    UserTier,
)
from tierwise.services.policy.dlp import derive_dlp_controls
from tierwise.services.policy.reasoning import generate_reason
from tierwise.services.policy.scoring import calculate_risk_score
from tierwise.services.policy.tiers import determine_access_tier


# Monthly list price per user for each access tier, in USD.
TIER_MONTHLY_COSTS: dict[AccessTier, int] = {
    "native": 0,
    "secure_browser": 7,
    "full_daas": 35,
}

COMPLIANCE_GAPS: dict[ComplianceFramework, tuple[str, ...]] = {
    "SOC2": ("SOC2-CC6.7", "SOC2-CC6.8"),
    "HIPAA": ("HIPAA-164.312(c)", "HIPAA-164.312(d)"),
    "PCI-DSS": ("PCI-DSS-3.4", "PCI-DSS-7.1"),
    "FedRAMP": ("FedRAMP-AC-4", "FedRAMP-SC-7"),
    "GDPR": ("GDPR-Art32", "GDPR-Art25"),
}


def compliance_gaps_closed(
    tier: AccessTier, compliance_frameworks: Sequence[ComplianceFramework]
) -> tuple[str, ...]:
    # Any isolated tier closes every gap of every applicable framework; native closes none.
    if tier == "native":
        return ()
    gaps: list[str] = []
    for framework in compliance_frameworks:
        gaps.extend(COMPLIANCE_GAPS.get(framework, ()))
    return tuple(dict.fromkeys(gaps))


def evaluate_policy(
    app: SaaSApp,
    user_tier: UserTier,
    device_trust: DeviceTrust,
    location_risk: LocationRisk,
    compliance_frameworks: Sequence[ComplianceFramework],
) -> PolicyDecision:
    risk_score = calculate_risk_score(app, user_tier, device_trust, location_risk)
    tier = determine_access_tier(risk_score, app, device_trust, compliance_frameworks)
    monthly_cost = TIER_MONTHLY_COSTS[tier]
    alternative_cost = TIER_MONTHLY_COSTS["full_daas"]
    return PolicyDecision(
        app=app,
        user_tier=user_tier,
        device_trust=device_trust,
        location_risk=location_risk,
        risk_score=risk_score,
        recommendation=tier,
        reason=generate_reason(app, tier, risk_score, user_tier, device_trust),
        dlp_controls=derive_dlp_controls(tier, app.exfiltration_vectors),
        monthly_cost_per_user=monthly_cost,
        alternative_cost=alternative_cost,
        # Savings are always measured against full isolation, whichever tier resolved.
        annual_savings_per_user=(alternative_cost - monthly_cost) * 12,
        compliance_gaps_closed=compliance_gaps_closed(tier, compliance_frameworks),
    )
