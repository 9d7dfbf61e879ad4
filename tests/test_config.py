"""Tests for configuration and environment detection."""

import logging

import pytest

from highkind import HighKindConfig, InvalidArgumentError, get_config, init, reset


class TestConfigDefaults:
    """Tests for the default configuration."""

    def test_defaults(self):
        """Without environment variables the defaults apply."""
        config = get_config()
        assert config == HighKindConfig(show_limit=10, check_narrow=False, log_level=None)

    def test_get_config_is_cached(self):
        """get_config() returns the same object until reset()."""
        first = get_config()
        assert get_config() is first
        reset()
        assert get_config() is not first

    def test_config_is_frozen(self):
        """HighKindConfig instances are immutable."""
        with pytest.raises(AttributeError):
            get_config().show_limit = 3  # type: ignore[misc]


class TestInit:
    """Tests for explicit initialization."""

    def test_explicit_values(self):
        """Explicit arguments win over detection."""
        config = init(show_limit=4, check_narrow=True)
        assert config.show_limit == 4
        assert config.check_narrow is True
        assert get_config() is config

    def test_negative_show_limit(self):
        """A negative show_limit is rejected."""
        with pytest.raises(InvalidArgumentError, match='show_limit'):
            init(show_limit=-1)


class TestEnvironmentDetection:
    """Tests for HIGHKIND_* environment variables."""

    def test_show_limit_from_env(self, monkeypatch):
        """HIGHKIND_SHOW_LIMIT sets the render limit."""
        monkeypatch.setenv('HIGHKIND_SHOW_LIMIT', '3')
        assert get_config().show_limit == 3

    def test_bad_show_limit_falls_back(self, monkeypatch, caplog):
        """A malformed HIGHKIND_SHOW_LIMIT logs a warning and uses the default."""
        monkeypatch.setenv('HIGHKIND_SHOW_LIMIT', 'many')
        with caplog.at_level(logging.WARNING):
            assert get_config().show_limit == 10
        assert 'HIGHKIND_SHOW_LIMIT' in caplog.text

    @pytest.mark.parametrize(('raw', 'expected'), [('1', True), ('TRUE', True), ('off', False), ('', False)])
    def test_check_narrow_from_env(self, monkeypatch, raw, expected):
        """HIGHKIND_CHECK_NARROW accepts the usual boolean spellings."""
        monkeypatch.setenv('HIGHKIND_CHECK_NARROW', raw)
        assert get_config().check_narrow is expected

    def test_unknown_check_narrow(self, monkeypatch, caplog):
        """An unknown HIGHKIND_CHECK_NARROW value leaves checking off."""
        monkeypatch.setenv('HIGHKIND_CHECK_NARROW', 'maybe')
        with caplog.at_level(logging.WARNING):
            assert get_config().check_narrow is False
        assert 'HIGHKIND_CHECK_NARROW' in caplog.text

    def test_log_level_from_env(self, monkeypatch):
        """HIGHKIND_LOG_LEVEL is upper-cased."""
        monkeypatch.setenv('HIGHKIND_LOG_LEVEL', 'debug')
        assert get_config().log_level == 'DEBUG'
