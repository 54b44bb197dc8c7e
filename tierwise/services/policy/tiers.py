from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from tierwise.domain.models import AccessTier, ComplianceFramework, DeviceTrust, SaaSApp


FULL_DAAS_THRESHOLD = 46
SECURE_BROWSER_THRESHOLD = 21
# Strict regulatory regimes intervene earlier than the generic threshold.
STRICT_COMPLIANCE_THRESHOLD = 15

STRICT_FRAMEWORKS: frozenset[str] = frozenset({"HIPAA", "PCI-DSS", "FedRAMP"})
BASELINE_FRAMEWORKS: frozenset[str] = frozenset({"SOC2", "GDPR"})


@dataclass(frozen=True)
class TierContext:
    risk_score: int
    app: SaaSApp
    device_trust: DeviceTrust
    compliance_frameworks: frozenset[str]


@dataclass(frozen=True)
class TierRule:
    # A rule returns a tier when it decides, or None to fall through to the next rule.
    name: str
    resolve: Callable[[TierContext], AccessTier | None]


def _threshold_tier(score: int, browser_threshold: int) -> AccessTier | None:
    if score >= FULL_DAAS_THRESHOLD:
        return "full_daas"
    if score >= browser_threshold:
        return "secure_browser"
    return None


def _local_os_required(ctx: TierContext) -> AccessTier | None:
    if ctx.app.requires_local_os:
        return "full_daas"
    return None


def _restricted_data(ctx: TierContext) -> AccessTier | None:
    if ctx.app.data_classification != "restricted":
        return None
    if ctx.risk_score >= FULL_DAAS_THRESHOLD:
        return "full_daas"
    return "secure_browser"


def _confidential_data(ctx: TierContext) -> AccessTier | None:
    if ctx.app.data_classification != "confidential":
        return None
    if ctx.risk_score >= FULL_DAAS_THRESHOLD:
        return "full_daas"
    if ctx.device_trust != "managed":
        return "secure_browser"
    return None


def _unmanaged_device(ctx: TierContext) -> AccessTier | None:
    if ctx.device_trust != "unmanaged":
        return None
    if ctx.risk_score >= FULL_DAAS_THRESHOLD:
        return "full_daas"
    return "secure_browser"


def _strict_compliance(ctx: TierContext) -> AccessTier | None:
    if not ctx.compliance_frameworks & STRICT_FRAMEWORKS:
        return None
    return _threshold_tier(ctx.risk_score, STRICT_COMPLIANCE_THRESHOLD)


def _baseline_compliance(ctx: TierContext) -> AccessTier | None:
    if not ctx.compliance_frameworks & BASELINE_FRAMEWORKS:
        return None
    return _threshold_tier(ctx.risk_score, SECURE_BROWSER_THRESHOLD)


def _general(ctx: TierContext) -> AccessTier | None:
    return _threshold_tier(ctx.risk_score, SECURE_BROWSER_THRESHOLD) or "native"


# Evaluated top to bottom; the first rule returning a tier wins.
TIER_RULES: tuple[TierRule, ...] = (
    TierRule("local_os_required", _local_os_required),
    TierRule("restricted_data", _restricted_data),
    TierRule("confidential_data", _confidential_data),
    TierRule("unmanaged_device", _unmanaged_device),
    TierRule("strict_compliance", _strict_compliance),
    TierRule("baseline_compliance", _baseline_compliance),
    TierRule("general", _general),
)


def resolve_tier(
    risk_score: int,
    app: SaaSApp,
    device_trust: DeviceTrust,
    compliance_frameworks: Sequence[ComplianceFramework],
) -> tuple[AccessTier, str]:
    # Return the resolved tier together with the name of the deciding rule.
    ctx = TierContext(
        risk_score=risk_score,
        app=app,
        device_trust=device_trust,
        compliance_frameworks=frozenset(compliance_frameworks),
    )
    for rule in TIER_RULES:
        tier = rule.resolve(ctx)
        if tier is not None:
            return tier, rule.name
    # The general rule always decides; kept for type completeness.
    return "native", "general"


def determine_access_tier(
    risk_score: int,
    app: SaaSApp,
    device_trust: DeviceTrust,
    compliance_frameworks: Sequence[ComplianceFramework],
) -> AccessTier:
    tier, _rule = resolve_tier(risk_score, app, device_trust, compliance_frameworks)
    return tier


def matching_rule(
    risk_score: int,
    app: SaaSApp,
    device_trust: DeviceTrust,
    compliance_frameworks: Sequence[ComplianceFramework],
) -> str:
    _tier, rule = resolve_tier(risk_score, app, device_trust, compliance_frameworks)
    return rule
