from __future__ import annotations

# Re-export the decision engine for centralized imports.

from tierwise.services.policy.analysis import run_full_analysis
from tierwise.services.policy.dlp import derive_dlp_controls
from tierwise.services.policy.evaluator import COMPLIANCE_GAPS, TIER_MONTHLY_COSTS, evaluate_policy
from tierwise.services.policy.reasoning import generate_reason
from tierwise.services.policy.scoring import ScoreBreakdown, calculate_risk_score, score_breakdown
from tierwise.services.policy.tiers import TIER_RULES, determine_access_tier, matching_rule
from tierwise.services.policy.vectors import count_vectors

__all__ = [
    "run_full_analysis",
    "derive_dlp_controls",
    "COMPLIANCE_GAPS",
    "TIER_MONTHLY_COSTS",
    "evaluate_policy",
    "generate_reason",
    "ScoreBreakdown",
    "calculate_risk_score",
    "score_breakdown",
    "TIER_RULES",
    "determine_access_tier",
    "matching_rule",
    "count_vectors",
]
