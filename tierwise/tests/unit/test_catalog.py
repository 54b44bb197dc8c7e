from __future__ import annotations

import pytest

from tierwise.core.errors import UnknownApplicationError
from tierwise.domain.models import DATA_CLASSIFICATIONS
from tierwise.services.catalog import APP_CATEGORIES, SAAS_APPS, get_app, get_apps_by_category, list_apps, resolve_apps


def test_catalog_ids_are_unique() -> None:
    ids = [app.id for app in SAAS_APPS]
    assert len(ids) == len(set(ids)) == 65


def test_catalog_entries_use_known_enumerations() -> None:
    for app in list_apps():
        assert app.category in APP_CATEGORIES
        assert app.data_classification in DATA_CLASSIFICATIONS


def test_get_app_and_local_os_flag() -> None:
    assert get_app("salesforce").data_classification == "confidential"
    assert get_app("microsoft-365").requires_local_os is True
    assert get_app("google-workspace").requires_local_os is False


def test_unknown_app_raises() -> None:
    with pytest.raises(UnknownApplicationError) as excinfo:
        get_app("does-not-exist")
    assert excinfo.value.app_id == "does-not-exist"


def test_apps_by_category() -> None:
    crm = get_apps_by_category("CRM")
    assert crm
    assert all(app.category == "CRM" for app in crm)
    assert get_apps_by_category("Nonexistent") == []


def test_resolve_apps_preserves_order_and_dedupes() -> None:
    apps = resolve_apps(["slack", "github", "slack"])
    assert [app.id for app in apps] == ["slack", "github"]
