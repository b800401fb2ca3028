"""
Тесты конфигурации: pydantic схема и загрузчик config.yaml.
"""

import pytest

from replication_sync.config import Config, ENV_TABLE_NAME, load_config
from replication_sync.core.config_schema import AppConfig, get_default_config, validate_config
from replication_sync.core.exceptions import ConfigError


class TestConfigSchema:
    """Тесты validate_config."""

    def test_defaults(self):
        config = get_default_config()
        assert config.appdb.table_name == "REPLICATION_IP_MULTICAST_TABLE"
        assert config.compare.primary_label == "APP DB"
        assert config.compare.secondary_label == "Packet replication cache"
        assert config.output.default_format == "table"

    def test_valid_override(self):
        config = validate_config({"output": {"default_format": "csv"}, "debug": True})
        assert isinstance(config, AppConfig)
        assert config.output.default_format == "csv"
        assert config.debug is True

    @pytest.mark.parametrize("config_dict, key", [
        ({"appdb": {"table_name": ""}}, "appdb.table_name"),
        ({"appdb": {"table_name": "A:B"}}, "appdb.table_name"),
        ({"output": {"default_format": "xml"}}, "output.default_format"),
        ({"logging": {"level": "LOUD"}}, "logging.level"),
        ({"compare": {"primary_label": ""}}, "compare.primary_label"),
    ])
    def test_invalid(self, config_dict, key):
        with pytest.raises(ConfigError) as exc_info:
            validate_config(config_dict, config_file="my.yaml")
        assert exc_info.value.key == key
        assert exc_info.value.config_file == "my.yaml"


class TestConfigLoader:
    """Тесты загрузки config.yaml."""

    def test_load_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(ENV_TABLE_NAME, raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(
            "appdb:\n  table_name: TEST_TABLE\ncompare:\n  secondary_label: P4RT cache\n",
            encoding="utf-8",
        )
        cfg = load_config(str(path))

        assert cfg.config_file == str(path)
        assert cfg.appdb.table_name == "TEST_TABLE"
        assert cfg.compare.secondary_label == "P4RT cache"
        assert cfg.settings.compare.primary_label == "APP DB"

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(ENV_TABLE_NAME, raising=False)
        cfg = Config()
        assert cfg.config_file is None
        assert cfg.appdb.table_name == "REPLICATION_IP_MULTICAST_TABLE"

    def test_search_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(ENV_TABLE_NAME, raising=False)
        (tmp_path / "config.yml").write_text("output:\n  output_folder: out\n", encoding="utf-8")
        assert Config().output.output_folder == "out"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_TABLE_NAME, "ENV_TABLE")
        path = tmp_path / "config.yaml"
        path.write_text("appdb:\n  table_name: FILE_TABLE\n", encoding="utf-8")
        assert load_config(str(path)).appdb.table_name == "ENV_TABLE"

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("appdb: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_validation_error(self, tmp_path, monkeypatch):
        monkeypatch.delenv(ENV_TABLE_NAME, raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  default_format: xml\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path))
        assert exc_info.value.key == "output.default_format"

    def test_env_with_empty_appdb_section(self, tmp_path, monkeypatch):
        """Пустая секция appdb: и переменная окружения - таблица из env."""
        monkeypatch.setenv(ENV_TABLE_NAME, "ENV_TABLE")
        path = tmp_path / "config.yaml"
        path.write_text("appdb:\n", encoding="utf-8")
        assert load_config(str(path)).appdb.table_name == "ENV_TABLE"

    @pytest.mark.parametrize("content", ["appdb: 5\n", "appdb: [a, b]\n", "appdb: text\n"])
    def test_env_with_invalid_appdb_section(self, tmp_path, monkeypatch, content):
        monkeypatch.setenv(ENV_TABLE_NAME, "ENV_TABLE")
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path))
        assert exc_info.value.key == "appdb"
