"""
Tests for dialect configuration loading.
"""
import pytest

from asa_dialect import ConfigError, DialectConfig, load_config


class TestDialectConfig:
    """Test defaults and validation."""

    def test_defaults(self):
        config = DialectConfig()
        assert config.enable_schema_cache is True
        assert config.schema_cache_duration == 3600
        assert config.excluded_owners == ["rs_systabgroup"]
        assert config.effective_default_schema == "dbo"

    def test_default_schema_precedence(self):
        assert DialectConfig(username="web").effective_default_schema == "web"
        assert DialectConfig(username="web", default_schema="dba").effective_default_schema == "dba"

    def test_version_override_cast(self):
        assert DialectConfig(version_override="12").version_override == 12

    def test_invalid_version_override(self):
        with pytest.raises(ConfigError):
            DialectConfig(version_override="twelve")

    def test_invalid_cache_duration(self):
        with pytest.raises(ConfigError):
            DialectConfig(schema_cache_duration=0)

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigError) as exc_info:
            DialectConfig.from_dict({"username": "dba", "colour": "blue"})
        assert "colour" in str(exc_info.value)

    def test_from_dict_excluded_owners_must_be_list(self):
        with pytest.raises(ConfigError):
            DialectConfig.from_dict({"excluded_owners": "rs_systabgroup"})

    def test_from_dict_none(self):
        assert DialectConfig.from_dict(None) == DialectConfig()


class TestLoadConfig:
    """Test YAML loading."""

    def test_nested_section(self, tmp_path):
        path = tmp_path / "dialect.yaml"
        path.write_text(
            "asa_dialect:\n"
            "  username: webuser\n"
            "  version_override: 16\n"
            "  schema_cache_duration: 600\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.username == "webuser"
        assert config.version_override == 16
        assert config.schema_cache_duration == 600

    def test_top_level(self, tmp_path):
        path = tmp_path / "dialect.yaml"
        path.write_text("default_schema: dba\nenable_schema_cache: false\n", encoding="utf-8")
        config = load_config(path)
        assert config.effective_default_schema == "dba"
        assert config.enable_schema_cache is False

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == DialectConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("asa_dialect: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
