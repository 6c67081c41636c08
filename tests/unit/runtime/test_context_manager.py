"""Unit tests for the application context."""

import pytest

from src.users_service.runtime.config.config_data import ConfigData
from src.users_service.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    set_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        """Should have a default context available."""
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_default_context_uses_test_environment(self):
        """The test run loads config.yaml with the test overrides."""
        config = get_config()

        assert config.app.environment == "test"
        assert config.database.url == "sqlite://"

    def test_with_context_override_single_level(self):
        """Should override config for the duration of the context manager."""
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.app.host == original_host
        assert after_config is original_config

    def test_with_context_keeps_unset_fields(self):
        """Fields not set on the override are inherited from the parent."""
        original = get_config()

        test_config = ConfigData()
        test_config.database.create_tables = False

        with with_context(test_config):
            merged = get_config()
            assert merged.database.create_tables is False
            assert merged.database.url == original.database.url
            assert merged.app.environment == original.app.environment
            assert merged.logging.level == original.logging.level

    def test_with_context_nested_overrides(self):
        """Should handle nested context overrides correctly."""
        original_level = get_config().logging.level

        level1_config = ConfigData()
        level1_config.app.host = "level1_host"
        level1_config.app.port = 8001

        with with_context(level1_config):
            level2_config = ConfigData()
            level2_config.app.port = 8002
            level2_config.logging.level = "DEBUG"

            with with_context(level2_config):
                config = get_config()
                assert config.app.host == "level1_host"
                assert config.app.port == 8002
                assert config.logging.level == "DEBUG"

            assert get_config().app.port == 8001
            assert get_config().logging.level == original_level

    def test_with_context_none_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"host": "x"}}):  # type: ignore[arg-type]
                pass

    def test_with_context_restores_after_exception(self):
        original = get_config()
        test_config = ConfigData()
        test_config.app.port = 1

        with pytest.raises(RuntimeError):
            with with_context(test_config):
                raise RuntimeError("boom")

        assert get_config() is original

    def test_set_config_replaces_configuration(self):
        original_context = get_context()
        replacement = ConfigData()
        replacement.app.host = "replaced"

        set_config(replacement)
        try:
            assert get_config() is replacement
        finally:
            set_context(original_context)

        assert get_config() is original_context.config
