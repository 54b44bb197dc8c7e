from __future__ import annotations

import itertools

import pytest

from tierwise.services.policy.tiers import TIER_RULES, TierContext, determine_access_tier, matching_rule
from tierwise.tests.utils.factories import make_app


FRAMEWORK_SETS = [(), ("SOC2",), ("GDPR",), ("HIPAA",), ("PCI-DSS", "GDPR"), ("FedRAMP", "SOC2")]


def test_rule_order_is_fixed() -> None:
    assert [rule.name for rule in TIER_RULES] == [
        "local_os_required",
        "restricted_data",
        "confidential_data",
        "unmanaged_device",
        "strict_compliance",
        "baseline_compliance",
        "general",
    ]


def test_local_os_overrides_everything() -> None:
    app = make_app(requires_local_os=True, classification="public")
    assert determine_access_tier(5, app, "managed", []) == "full_daas"
    assert matching_rule(5, app, "managed", []) == "local_os_required"


@pytest.mark.parametrize(("score", "expected"), [(12, "secure_browser"), (45, "secure_browser"), (46, "full_daas")])
def test_restricted_data_never_native(score: int, expected: str) -> None:
    app = make_app(classification="restricted")
    assert determine_access_tier(score, app, "managed", []) == expected


def test_confidential_data_on_managed_device_falls_through() -> None:
    app = make_app(classification="confidential")
    assert determine_access_tier(20, app, "managed", []) == "native"
    assert matching_rule(30, app, "managed", []) == "general"
    assert determine_access_tier(20, app, "byod", []) == "secure_browser"
    assert matching_rule(20, app, "byod", []) == "confidential_data"
    assert determine_access_tier(46, app, "managed", []) == "full_daas"


def test_unmanaged_device_floor() -> None:
    app = make_app()
    assert determine_access_tier(12, app, "unmanaged", []) == "secure_browser"
    assert determine_access_tier(50, app, "unmanaged", []) == "full_daas"


def test_byod_is_not_treated_as_unmanaged() -> None:
    app = make_app()
    assert determine_access_tier(20, app, "byod", []) == "native"


def test_strict_compliance_lowers_threshold() -> None:
    app = make_app()
    assert determine_access_tier(15, app, "managed", ["HIPAA"]) == "secure_browser"
    assert determine_access_tier(15, app, "managed", []) == "native"
    assert determine_access_tier(14, app, "managed", ["PCI-DSS"]) == "native"
    assert matching_rule(15, app, "managed", ["FedRAMP"]) == "strict_compliance"


def test_baseline_compliance_uses_generic_threshold() -> None:
    app = make_app()
    assert determine_access_tier(20, app, "managed", ["SOC2"]) == "native"
    assert determine_access_tier(21, app, "managed", ["GDPR"]) == "secure_browser"
    assert matching_rule(21, app, "managed", ["GDPR"]) == "baseline_compliance"


@pytest.mark.parametrize(("score", "expected"), [(20, "native"), (21, "secure_browser"), (45, "secure_browser"), (46, "full_daas")])
def test_general_thresholds(score: int, expected: str) -> None:
    assert determine_access_tier(score, make_app(), "managed", []) == expected


def test_floors_hold_across_inputs() -> None:
    restricted = make_app(classification="restricted")
    internal = make_app()
    for score, device, frameworks in itertools.product(range(0, 65), ("managed", "byod", "unmanaged"), FRAMEWORK_SETS):
        assert determine_access_tier(score, restricted, device, list(frameworks)) != "native"
        assert determine_access_tier(score, internal, "unmanaged", list(frameworks)) != "native"


def test_individual_rules_fall_through() -> None:
    ctx = TierContext(risk_score=10, app=make_app(), device_trust="managed", compliance_frameworks=frozenset())
    resolved = {rule.name: rule.resolve(ctx) for rule in TIER_RULES}
    assert resolved == {
        "local_os_required": None,
        "restricted_data": None,
        "confidential_data": None,
        "unmanaged_device": None,
        "strict_compliance": None,
        "baseline_compliance": None,
        "general": "native",
    }
