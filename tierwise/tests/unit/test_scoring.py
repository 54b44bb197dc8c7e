from __future__ import annotations

import itertools

from tierwise.domain.models import ExfiltrationVectors
from tierwise.services.policy.scoring import (
    DATA_CLASSIFICATION_SCORES,
    DEVICE_TRUST_SCORES,
    LOCATION_RISK_SCORES,
    MAX_RISK_SCORE,
    USER_TIER_SCORES,
    calculate_risk_score,
    score_breakdown,
)
from tierwise.services.policy.vectors import count_vectors
from tierwise.tests.utils.factories import ALL_VECTORS, make_app


def _vectors_with(count: int) -> ExfiltrationVectors:
    names = list(ExfiltrationVectors().flags())
    return ExfiltrationVectors(**{name: index < count for index, name in enumerate(names)})


def test_count_vectors_bounds() -> None:
    assert count_vectors(ExfiltrationVectors()) == 0
    assert count_vectors(ALL_VECTORS) == 7
    assert count_vectors(ExfiltrationVectors(print_capable=True, api_export=True)) == 2


def test_score_for_low_risk_internal_app() -> None:
    app = make_app(classification="internal")
    assert calculate_risk_score(app, "employee", "managed", "office") == 16


def test_score_floor_and_ceiling() -> None:
    floor_app = make_app(classification="public")
    ceiling_app = make_app(vectors=ALL_VECTORS, classification="restricted")
    assert calculate_risk_score(floor_app, "employee", "managed", "office") == 12
    assert calculate_risk_score(ceiling_app, "temp", "unmanaged", "highRiskGeo") == 64
    assert MAX_RISK_SCORE == 64


def test_score_is_monotonic_in_every_factor() -> None:
    classifications = sorted(DATA_CLASSIFICATION_SCORES, key=DATA_CLASSIFICATION_SCORES.get)
    users = sorted(USER_TIER_SCORES, key=USER_TIER_SCORES.get)
    devices = sorted(DEVICE_TRUST_SCORES, key=DEVICE_TRUST_SCORES.get)
    locations = sorted(LOCATION_RISK_SCORES, key=LOCATION_RISK_SCORES.get)

    def score(vectors: int, classification: str, user: str, device: str, location: str) -> int:
        app = make_app(vectors=_vectors_with(vectors), classification=classification)
        return calculate_risk_score(app, user, device, location)

    for combo in itertools.product(range(8), classifications, users, devices, locations):
        base = score(*combo)
        vectors, classification, user, device, location = combo
        if vectors < 7:
            assert score(vectors + 1, classification, user, device, location) >= base
        for position, ordered in ((1, classifications), (2, users), (3, devices), (4, locations)):
            index = ordered.index(combo[position])
            if index + 1 < len(ordered):
                bumped = list(combo)
                bumped[position] = ordered[index + 1]
                assert score(*bumped) >= base


def test_breakdown_matches_score() -> None:
    app = make_app(vectors=ExfiltrationVectors(clipboard_paste=True, file_download=True), classification="confidential")
    breakdown = score_breakdown(app, "contractor", "byod", "remote")
    assert breakdown.total == calculate_risk_score(app, "contractor", "byod", "remote")
    assert breakdown.max_total == 64
    weighted = {factor.key: factor.weighted for factor in breakdown.factors}
    assert weighted == {
        "vectors": 6,
        "data_classification": 12,
        "user_tier": 9,
        "device_trust": 6,
        "location_risk": 4,
    }
    assert sum(factor.max_weighted for factor in breakdown.factors) == 64
