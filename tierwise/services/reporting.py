from __future__ import annotations

from typing import Any, Literal

from tierwise.domain.models import ACCESS_TIERS, AccessTier, AnalysisResult, PolicyDecision
from tierwise.services.policy.analysis import round_half_up
from tierwise.services.policy.evaluator import TIER_MONTHLY_COSTS
from tierwise.services.policy.vectors import count_vectors


SortField = Literal["risk_score", "app", "tier", "cost", "savings"]

TIER_LABELS: dict[AccessTier, str] = {
    "native": "Native Access",
    "secure_browser": "Secure Browser",
    "full_daas": "Full DaaS",
}

_TIER_RANK: dict[AccessTier, int] = {tier: rank for rank, tier in enumerate(ACCESS_TIERS)}


def savings_percent(result: AnalysisResult) -> int:
    # Share of the blanket full-isolation cost avoided by the optimized mix.
    if result.blanket_vdi_cost <= 0:
        return 0
    return round_half_up(result.total_annual_savings / result.blanket_vdi_cost * 100)


def cost_by_tier(result: AnalysisResult) -> list[dict[str, Any]]:
    counts = {tier: 0 for tier in ACCESS_TIERS}
    for decision in result.decisions:
        counts[decision.recommendation] += 1
    return [
        {
            "tier": tier,
            "label": TIER_LABELS[tier],
            "decisions": counts[tier],
            "monthly_cost_per_user": TIER_MONTHLY_COSTS[tier],
        }
        for tier in ACCESS_TIERS
    ]


def tier_distribution(result: AnalysisResult) -> dict[AccessTier, int]:
    # Percentage of decisions per tier; independent rounding may not sum to 100.
    total = len(result.decisions)
    summary = result.risk_summary
    counts = {
        "native": summary.native_count,
        "secure_browser": summary.secure_browser_count,
        "full_daas": summary.full_daas_count,
    }
    if total == 0:
        return {tier: 0 for tier in ACCESS_TIERS}
    return {tier: round_half_up(counts[tier] / total * 100) for tier in ACCESS_TIERS}


def cost_projection(result: AnalysisResult, *, months: int = 36) -> list[dict[str, int]]:
    # Cumulative spend for blanket vs optimized deployments, month 0 through `months`.
    monthly_blanket = result.blanket_vdi_cost / 12
    monthly_optimized = result.total_annual_cost / 12
    monthly_savings = result.total_annual_savings / 12
    return [
        {
            "month": month,
            "blanket_cost": round_half_up(monthly_blanket * month),
            "optimized_cost": round_half_up(monthly_optimized * month),
            "savings": round_half_up(monthly_savings * month),
        }
        for month in range(months + 1)
    ]


def heatmap(result: AnalysisResult, *, tier_filter: AccessTier | None = None) -> dict[str, Any]:
    """Arrange decisions as an application x (user tier, device trust) grid.

    Columns follow first-seen decision order. With ``tier_filter`` only
    applications having at least one decision in that tier are kept as rows.
    """
    user_tiers = list(dict.fromkeys(d.user_tier for d in result.decisions))
    device_trusts = list(dict.fromkeys(d.device_trust for d in result.decisions))
    columns = [
        {"user_tier": user_tier, "device_trust": device_trust, "label": f"{user_tier}/{device_trust}"}
        for user_tier in user_tiers
        for device_trust in device_trusts
    ]
    index = {(d.app.id, d.user_tier, d.device_trust): d for d in result.decisions}

    rows: list[dict[str, Any]] = []
    for app in result.selected_apps:
        cells: list[dict[str, Any] | None] = []
        tiers_seen: set[str] = set()
        for column in columns:
            decision = index.get((app.id, column["user_tier"], column["device_trust"]))
            if decision is None:
                cells.append(None)
                continue
            tiers_seen.add(decision.recommendation)
            cells.append({"risk_score": decision.risk_score, "tier": decision.recommendation})
        if tier_filter is not None and tier_filter not in tiers_seen:
            continue
        rows.append(
            {
                "app_id": app.id,
                "app_name": app.name,
                "vector_count": count_vectors(app.exfiltration_vectors),
                "vectors": app.exfiltration_vectors.flags(),
                "cells": cells,
            }
        )
    return {"columns": columns, "rows": rows}


def _sort_key(field: SortField):
    if field == "app":
        return lambda d: d.app.name.casefold()
    if field == "tier":
        return lambda d: _TIER_RANK[d.recommendation]
    if field == "cost":
        return lambda d: d.monthly_cost_per_user
    if field == "savings":
        return lambda d: d.annual_savings_per_user
    return lambda d: d.risk_score


def filter_decisions(
    result: AnalysisResult,
    *,
    search: str | None = None,
    tier: AccessTier | None = None,
    user_tier: str | None = None,
    device_trust: str | None = None,
    sort_field: SortField = "risk_score",
    descending: bool = True,
) -> list[PolicyDecision]:
    # Policy-table query; the sort is stable so ties keep decision order.
    items = list(result.decisions)
    if search:
        term = search.casefold()
        items = [d for d in items if term in d.app.name.casefold()]
    if tier is not None:
        items = [d for d in items if d.recommendation == tier]
    if user_tier is not None:
        items = [d for d in items if d.user_tier == user_tier]
    if device_trust is not None:
        items = [d for d in items if d.device_trust == device_trust]
    return sorted(items, key=_sort_key(sort_field), reverse=descending)


def top_risk_apps(result: AnalysisResult, *, limit: int = 10) -> list[dict[str, Any]]:
    max_risk: dict[str, int] = {}
    for decision in result.decisions:
        max_risk[decision.app.id] = max(max_risk.get(decision.app.id, 0), decision.risk_score)
    ranked = sorted(result.selected_apps, key=lambda app: max_risk.get(app.id, 0), reverse=True)
    return [{"app_id": app.id, "app_name": app.name, "max_risk": max_risk.get(app.id, 0)} for app in ranked[:limit]]


def apps_by_tier(result: AnalysisResult) -> dict[AccessTier, list[str]]:
    # An app appears under every tier any of its contexts resolved to.
    grouped: dict[AccessTier, dict[str, None]] = {tier: {} for tier in ACCESS_TIERS}
    for decision in result.decisions:
        grouped[decision.recommendation][decision.app.name] = None
    return {tier: list(names) for tier, names in grouped.items()}


def closed_gap_ids(result: AnalysisResult) -> list[str]:
    gaps: dict[str, None] = {}
    for decision in result.decisions:
        for gap in decision.compliance_gaps_closed:
            gaps[gap] = None
    return list(gaps)


def build_summary(result: AnalysisResult) -> dict[str, Any]:
    return {
        "savings_percent": savings_percent(result),
        "cost_by_tier": cost_by_tier(result),
        "tier_distribution": tier_distribution(result),
        "top_risk_apps": top_risk_apps(result),
        "apps_by_tier": apps_by_tier(result),
        "compliance_gaps": closed_gap_ids(result),
    }


def blueprint_markdown(result: AnalysisResult) -> str:
    # Render a printable summary for stakeholders.
    org = result.organization
    summary = result.risk_summary
    frameworks = ", ".join(org.compliance_frameworks) or "no declared"
    lines = [
        f"# Access Blueprint: {org.name}",
        "",
        "## Executive Summary",
        "",
        (
            f"{org.name} uses {len(result.selected_apps)} SaaS applications across a workforce of "
            f"{org.workforce_size:,} users ({org.employee_percent:g}% employees, "
            f"{org.contractor_percent:g}% contractors, {org.vendor_percent:g}% vendors). "
            f"Analysis identified {summary.total_exfiltration_vectors} exfiltration vectors across "
            f"{len(result.decisions)} access scenarios. The optimized strategy yields "
            f"${result.total_annual_savings:,}/year savings ({savings_percent(result)}% reduction) "
            f"vs. blanket full isolation, maintaining {frameworks} compliance."
        ),
        "",
        "## Cost Comparison",
        "",
        "| deployment | annual cost (USD) |",
        "| --- | ---: |",
        f"| Blanket full DaaS | {result.blanket_vdi_cost:,} |",
        f"| Optimized mix | {result.total_annual_cost:,} |",
        f"| Savings | {result.total_annual_savings:,} |",
        "",
        "## Tier Assignment",
        "",
    ]
    for tier, names in apps_by_tier(result).items():
        label = f"{TIER_LABELS[tier]} (${TIER_MONTHLY_COSTS[tier]}/mo per user)"
        lines.append(f"- {label}: {', '.join(names) if names else 'none'}")

    lines.extend(["", "## Highest Risk Applications", ""])
    for item in top_risk_apps(result):
        lines.append(f"- {item['app_name']}: {item['max_risk']}")

    gaps = closed_gap_ids(result)
    if gaps:
        lines.extend(["", "## Compliance Gaps Closed", ""])
        lines.extend(f"- {gap}" for gap in gaps)

    pilot_monthly = round_half_up(org.workforce_size * org.contractor_percent / 100 * TIER_MONTHLY_COSTS["secure_browser"])
    lines.extend(
        [
            "",
            "## Recommended Next Steps",
            "",
            (
                f"1. Pilot Secure Browser with the contractor population ({org.contractor_percent:g}% of "
                f"workforce) on highest-risk apps. Est. pilot: ${pilot_monthly:,}/mo."
            ),
            "2. Extend to remote employees accessing confidential/restricted data with clipboard, file transfer and print DLP.",
            "3. Reserve full DaaS for applications requiring local OS integration or scoring 46 and above.",
        ]
    )
    return "\n".join(lines) + "\n"
