"""Pytest configuration and shared fixtures for highkind tests."""

import pytest
from hypothesis import HealthCheck, settings

from highkind import clear_log_hooks, reset

# fresh_config resets module state once per test, not per example
settings.register_profile('highkind', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('highkind')


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test starts from an environment-free configuration and no log hooks."""
    for name in ('HIGHKIND_SHOW_LIMIT', 'HIGHKIND_CHECK_NARROW', 'HIGHKIND_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()


@pytest.fixture
def checked_narrow():
    """Configuration with narrow checking switched on."""
    from highkind import init

    return init(check_narrow=True)


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from highkind import Maybe

    return Maybe.present(42)


@pytest.fixture
def sample_empty():
    """Sample Empty value for testing."""
    from highkind import Maybe

    return Maybe.empty()
