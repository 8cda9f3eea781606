"""
Unit tests for config_loader
"""
from utils import config_loader
from utils.config_loader import get_config_value, load_config, resolve_value, setting


class TestConfigLoader:
    """Test YAML loading and value resolution"""

    def test_missing_file(self, tmp_path):
        assert load_config(str(tmp_path / "absent.yaml")) == {}
        assert load_config(None) == {}

    def test_nested_lookup(self, tmp_path):
        path = tmp_path / "app.yaml"
        path.write_text("judge:\n  max_polls: 4\n", encoding="utf-8")
        config = load_config(str(path))
        assert get_config_value(config, ["judge", "max_polls"]) == 4
        assert get_config_value(config, ["judge", "missing"], "fallback") == "fallback"

    def test_explicit_value_wins(self):
        assert resolve_value("env", {"a": "yaml"}, ["a"], "default") == "env"
        assert resolve_value(None, {"a": "yaml"}, ["a"], "default") == "yaml"
        assert resolve_value(None, {}, ["a"], "default") == "default"

    def test_setting_reads_env_then_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "app.yaml"
        path.write_text("judge:\n  max_polls: 4\n", encoding="utf-8")
        monkeypatch.setenv("APP_CONFIG_PATH", str(path))
        monkeypatch.delenv("JUDGE0_MAX_POLLS", raising=False)
        config_loader.get_app_config.cache_clear()
        try:
            assert setting("JUDGE0_MAX_POLLS", ["judge", "max_polls"], 10, cast=int) == 4
            monkeypatch.setenv("JUDGE0_MAX_POLLS", "7")
            assert setting("JUDGE0_MAX_POLLS", ["judge", "max_polls"], 10, cast=int) == 7
        finally:
            monkeypatch.delenv("APP_CONFIG_PATH")
            config_loader.get_app_config.cache_clear()
