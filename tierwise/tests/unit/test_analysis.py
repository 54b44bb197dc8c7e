from __future__ import annotations

import pytest

from tierwise.core.errors import InvalidInputError
from tierwise.services.policy.analysis import (
    active_device_trusts,
    active_user_tiers,
    location_for_work_model,
    round_half_up,
    run_full_analysis,
    user_tier_distribution,
)
from tierwise.tests.utils.factories import ALL_VECTORS, make_app, make_org, make_scenario


def test_single_native_decision_example() -> None:
    result = run_full_analysis(make_org(), make_scenario(), [make_app()])
    assert len(result.decisions) == 1
    decision = result.decisions[0]
    assert (decision.risk_score, decision.recommendation) == (16, "native")
    assert result.total_annual_cost == 0
    assert result.blanket_vdi_cost == 35 * 500 * 12
    assert result.total_annual_savings == 210000
    assert result.risk_summary.native_count == 1
    assert result.risk_summary.compliance_gaps_closed == 0


def test_hipaa_example_costs_secure_browser() -> None:
    result = run_full_analysis(make_org(frameworks=("HIPAA",)), make_scenario(), [make_app()])
    assert result.decisions[0].recommendation == "secure_browser"
    assert result.total_annual_cost == 7 * 500 * 12
    assert result.total_annual_savings == 210000 - 42000
    assert result.risk_summary.secure_browser_count == 1
    assert result.risk_summary.compliance_gaps_closed == 2


def test_decision_count_and_order() -> None:
    apps = [make_app("alpha"), make_app("beta"), make_app("gamma")]
    org = make_org(employee=70, contractor=20, vendor=10)
    scenario = make_scenario(managed=60, unmanaged=15, byod=25)
    result = run_full_analysis(org, scenario, apps)
    assert len(result.decisions) == 3 * 3 * 3
    keys = [(d.app.id, d.user_tier, d.device_trust) for d in result.decisions[:4]]
    assert keys == [
        ("alpha", "employee", "managed"),
        ("alpha", "employee", "unmanaged"),
        ("alpha", "employee", "byod"),
        ("alpha", "contractor", "managed"),
    ]
    assert result.decisions[-1].app.id == "gamma"


def test_zero_percentages_fall_back_to_defaults() -> None:
    org = make_org(employee=0, contractor=0, vendor=0)
    scenario = make_scenario(managed=0, unmanaged=0, byod=0)
    assert active_user_tiers(org) == ["employee"]
    assert active_device_trusts(scenario) == ["managed"]
    result = run_full_analysis(org, scenario, [make_app("a"), make_app("b")])
    assert len(result.decisions) == 2


def test_work_model_maps_to_location() -> None:
    assert location_for_work_model(make_scenario(work_model="office")) == "office"
    assert location_for_work_model(make_scenario(work_model="hybrid")) == "remote"
    assert location_for_work_model(make_scenario(work_model="remote")) == "remote"


def test_tier_counts_round_half_up() -> None:
    distribution = user_tier_distribution(make_org(workforce_size=10, employee=25, contractor=35, vendor=40))
    assert distribution == {"employee": 3, "contractor": 4, "vendor": 4, "temp": 0}
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_mixed_workforce_costs() -> None:
    org = make_org(workforce_size=100, employee=60, contractor=40)
    result = run_full_analysis(org, make_scenario(), [make_app()])
    tiers = [(d.user_tier, d.recommendation) for d in result.decisions]
    assert tiers == [("employee", "native"), ("contractor", "secure_browser")]
    assert result.total_annual_cost == 7 * 40 * 12
    assert result.blanket_vdi_cost == 35 * 100 * 12
    assert result.total_annual_savings == 42000 - 3360


def test_effective_users_assume_independent_distributions() -> None:
    org = make_org(workforce_size=1000, employee=50, contractor=50)
    scenario = make_scenario(managed=50, byod=50)
    result = run_full_analysis(org, scenario, [make_app(requires_local_os=True)])
    # Four combinations of 250 users each, all on full DaaS.
    assert len(result.decisions) == 4
    assert result.total_annual_cost == 35 * 1000 * 12
    assert result.total_annual_savings == 0


def test_vectors_counted_per_decision() -> None:
    org = make_org(employee=50, contractor=50)
    result = run_full_analysis(org, make_scenario(), [make_app(vectors=ALL_VECTORS)])
    assert result.risk_summary.total_exfiltration_vectors == 14


def test_empty_application_list_is_valid() -> None:
    result = run_full_analysis(make_org(frameworks=("SOC2",)), make_scenario(), [])
    assert result.decisions == ()
    assert (result.total_annual_cost, result.blanket_vdi_cost, result.total_annual_savings) == (0, 0, 0)
    assert result.risk_summary.native_count == 0


def test_non_positive_workforce_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        run_full_analysis(make_org(workforce_size=0), make_scenario(), [make_app()])


def test_analysis_is_idempotent() -> None:
    org = make_org(employee=70, contractor=20, vendor=10, frameworks=("HIPAA", "GDPR"))
    scenario = make_scenario(managed=60, unmanaged=15, byod=25, work_model="hybrid")
    apps = [make_app("alpha", vectors=ALL_VECTORS, classification="confidential"), make_app("beta")]
    assert run_full_analysis(org, scenario, apps) == run_full_analysis(org, scenario, apps)


def test_decision_logging_is_opt_in(monkeypatch, caplog) -> None:
    from tierwise.core.config import get_settings

    monkeypatch.setenv("TIERWISE_ANALYSIS_LOG_DECISIONS", "true")
    get_settings.cache_clear()
    with caplog.at_level("DEBUG", logger="tierwise.services.policy.analysis"):
        run_full_analysis(make_org(), make_scenario(), [make_app("alpha")])
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("policy_decision app=alpha") for message in messages)
    assert any(message.startswith("analysis_complete") for message in messages)
