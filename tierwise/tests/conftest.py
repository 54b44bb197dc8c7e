from __future__ import annotations

import pytest

from tierwise.core.config import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> None:
    # Settings are cached per process; env overrides in one test must not leak.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
