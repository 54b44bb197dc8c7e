from __future__ import annotations

from tierwise.services.policy.evaluator import COMPLIANCE_GAPS, TIER_MONTHLY_COSTS, evaluate_policy
from tierwise.tests.utils.factories import ALL_VECTORS, make_app


def test_tier_costs_strictly_increase() -> None:
    assert TIER_MONTHLY_COSTS["native"] < TIER_MONTHLY_COSTS["secure_browser"] < TIER_MONTHLY_COSTS["full_daas"]
    assert TIER_MONTHLY_COSTS == {"native": 0, "secure_browser": 7, "full_daas": 35}


def test_low_risk_app_resolves_native() -> None:
    decision = evaluate_policy(make_app(), "employee", "managed", "office", [])
    assert decision.risk_score == 16
    assert decision.recommendation == "native"
    assert decision.monthly_cost_per_user == 0
    assert decision.alternative_cost == 35
    assert decision.annual_savings_per_user == 420
    assert decision.compliance_gaps_closed == ()


def test_hipaa_lowers_threshold_and_closes_gaps() -> None:
    decision = evaluate_policy(make_app(), "employee", "managed", "office", ["HIPAA"])
    assert decision.risk_score == 16
    assert decision.recommendation == "secure_browser"
    assert decision.monthly_cost_per_user == 7
    assert decision.annual_savings_per_user == 336
    assert decision.compliance_gaps_closed == ("HIPAA-164.312(c)", "HIPAA-164.312(d)")
    controls = decision.dlp_controls
    assert not (controls.clipboard_blocked or controls.file_transfer_blocked or controls.print_blocked)
    assert controls.watermark_enabled and controls.url_filtering_enabled


def test_local_os_app_saves_nothing() -> None:
    app = make_app(requires_local_os=True, classification="public")
    decision = evaluate_policy(app, "employee", "managed", "office", ["SOC2"])
    assert decision.recommendation == "full_daas"
    assert decision.annual_savings_per_user == 0
    assert "local OS" in decision.reason
    assert decision.compliance_gaps_closed == COMPLIANCE_GAPS["SOC2"]


def test_gaps_are_deduplicated_in_framework_order() -> None:
    app = make_app(vectors=ALL_VECTORS, classification="restricted")
    decision = evaluate_policy(app, "vendor", "unmanaged", "remote", ["GDPR", "PCI-DSS", "GDPR"])
    assert decision.compliance_gaps_closed == ("GDPR-Art32", "GDPR-Art25", "PCI-DSS-3.4", "PCI-DSS-7.1")


def test_savings_never_negative() -> None:
    app = make_app(vectors=ALL_VECTORS, classification="confidential")
    for user in ("employee", "contractor", "vendor", "temp"):
        for device in ("managed", "byod", "unmanaged"):
            decision = evaluate_policy(app, user, device, "remote", [])
            assert decision.annual_savings_per_user >= 0
            if decision.recommendation == "full_daas":
                assert decision.annual_savings_per_user == 0
