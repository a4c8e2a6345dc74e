"""Unit tests for the application context."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.selectshop.runtime.config.config_data import ConfigData
from src.selectshop.runtime.context import (
    AppContext,
    get_config,
    get_context,
    load_config,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is get_config()

    def test_override_reverts_on_exit(self):
        original = get_config()
        override = ConfigData()
        override.product.min_my_price = 5000

        with with_context(override):
            assert get_config().product.min_my_price == 5000
            assert get_config() is not original

        assert get_config() is original

    def test_unset_fields_are_inherited(self):
        original_url = get_config().database.url
        override = ConfigData()
        override.app.port = 9999

        with with_context(override):
            assert get_config().app.port == 9999
            assert get_config().database.url == original_url

    def test_nested_overrides(self):
        original_price = get_config().product.min_my_price
        outer = ConfigData()
        outer.security.admin_token = "outer"
        inner = ConfigData()
        inner.product.min_my_price = 300

        with with_context(outer):
            with with_context(inner):
                assert get_config().security.admin_token == "outer"
                assert get_config().product.min_my_price == 300
            assert get_config().product.min_my_price == original_price
            assert get_config().security.admin_token == "outer"

    def test_none_override_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"port": 1}}):
                pass

    def test_override_does_not_leak_to_other_threads(self):
        override = ConfigData()
        override.app.host = "thread-local-host"
        original_host = get_config().app.host

        with with_context(override):
            with ThreadPoolExecutor(max_workers=1) as pool:
                seen = pool.submit(lambda: get_config().app.host).result()

        assert seen == original_host


class TestLoadConfig:
    def test_reads_configured_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  product:\n    min_my_price: 250\n", encoding="utf-8")
        monkeypatch.setenv("APP_CONFIG_FILE", str(path))
        monkeypatch.setenv("APP_ENVIRONMENT", "test")

        config = load_config()

        assert config.product.min_my_price == 250
        assert config.app.environment == "test"

    def test_missing_file_falls_back_to_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("APP_CONFIG_FILE", str(tmp_path / "absent.yaml"))
        monkeypatch.setenv("APP_ENVIRONMENT", "test")

        config = load_config()

        assert config.product.min_my_price == 100
        assert config.app.environment == "test"
