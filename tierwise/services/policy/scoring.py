from __future__ import annotations

from dataclasses import dataclass

from tierwise.domain.models import (
    DataClassification,
    DeviceTrust,
    LocationRisk,
    SaaSApp,
    UserTier,
)
from tierwise.services.policy.vectors import count_vectors


MAX_VECTORS = 7

DATA_CLASSIFICATION_SCORES: dict[DataClassification, int] = {
    "public": 1,
    "internal": 2,
    "confidential": 3,
    "restricted": 4,
}

USER_TIER_SCORES: dict[UserTier, int] = {
    "employee": 1,
    "contractor": 3,
    "vendor": 3,
    "temp": 4,
}

DEVICE_TRUST_SCORES: dict[DeviceTrust, int] = {
    "managed": 1,
    "byod": 2,
    "unmanaged": 3,
}

LOCATION_RISK_SCORES: dict[LocationRisk, int] = {
    "office": 1,
    "remote": 2,
    "highRiskGeo": 3,
}

# Weights are shared with score breakdowns so displayed factors always add up to the score.
FACTOR_WEIGHTS: dict[str, int] = {
    "vectors": 3,
    "data_classification": 4,
    "user_tier": 3,
    "device_trust": 3,
    "location_risk": 2,
}

MAX_RISK_SCORE = (
    MAX_VECTORS * FACTOR_WEIGHTS["vectors"]
    + max(DATA_CLASSIFICATION_SCORES.values()) * FACTOR_WEIGHTS["data_classification"]
    + max(USER_TIER_SCORES.values()) * FACTOR_WEIGHTS["user_tier"]
    + max(DEVICE_TRUST_SCORES.values()) * FACTOR_WEIGHTS["device_trust"]
    + max(LOCATION_RISK_SCORES.values()) * FACTOR_WEIGHTS["location_risk"]
)


@dataclass(frozen=True)
class ScoreFactor:
    key: str
    label: str
    raw_value: str
    raw_score: int
    weight: int
    weighted: int
    max_weighted: int


@dataclass(frozen=True)
class ScoreBreakdown:
    factors: tuple[ScoreFactor, ...]
    total: int
    max_total: int


def _factor_scores(
    app: SaaSApp,
    user_tier: UserTier,
    device_trust: DeviceTrust,
    location_risk: LocationRisk,
) -> list[tuple[str, str, str, int, int]]:
    # (key, label, raw value, raw score, max raw score) in display order.
    vector_count = count_vectors(app.exfiltration_vectors)
    return [
        ("vectors", "Exfiltration vectors", f"{vector_count} active", vector_count, MAX_VECTORS),
        (
            "data_classification",
            "Data classification",
            app.data_classification,
            DATA_CLASSIFICATION_SCORES[app.data_classification],
            max(DATA_CLASSIFICATION_SCORES.values()),
        ),
        ("user_tier", "User tier", user_tier, USER_TIER_SCORES[user_tier], max(USER_TIER_SCORES.values())),
        (
            "device_trust",
            "Device trust",
            device_trust,
            DEVICE_TRUST_SCORES[device_trust],
            max(DEVICE_TRUST_SCORES.values()),
        ),
        (
            "location_risk",
            "Location",
            location_risk,
            LOCATION_RISK_SCORES[location_risk],
            max(LOCATION_RISK_SCORES.values()),
        ),
    ]


def calculate_risk_score(
    app: SaaSApp,
    user_tier: UserTier,
    device_trust: DeviceTrust,
    location_risk: LocationRisk,
) -> int:
    # Weighted sum of the five factors; deterministic and within [12, 64].
    return sum(
        raw_score * FACTOR_WEIGHTS[key]
        for key, _label, _raw_value, raw_score, _max_score in _factor_scores(
            app, user_tier, device_trust, location_risk
        )
    )


def score_breakdown(
    app: SaaSApp,
    user_tier: UserTier,
    device_trust: DeviceTrust,
    location_risk: LocationRisk,
) -> ScoreBreakdown:
    """Explain a risk score factor by factor.

    The total is computed from the same tables as ``calculate_risk_score`` so an
    interactive breakdown never disagrees with the resolved decision.
    """
    factors = tuple(
        ScoreFactor(
            key=key,
            label=label,
            raw_value=raw_value,
            raw_score=raw_score,
            weight=FACTOR_WEIGHTS[key],
            weighted=raw_score * FACTOR_WEIGHTS[key],
            max_weighted=max_score * FACTOR_WEIGHTS[key],
        )
        for key, label, raw_value, raw_score, max_score in _factor_scores(
            app, user_tier, device_trust, location_risk
        )
    )
    return ScoreBreakdown(
        factors=factors,
        total=sum(factor.weighted for factor in factors),
        max_total=MAX_RISK_SCORE,
    )
