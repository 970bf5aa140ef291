from pathlib import Path

import pytest
import yaml

from clausecheck.core.config import ConfigLoader
from clausecheck.errors import ConfigError

VALID = {
    "root_dir": ".",
    "current_time": "1970-01-01T00:00:00Z",
    "engine": "mypkg.engine:Engine",
    "loader": "mypkg.loader:Loader",
    "log_level": "INFO",
}


class TestConfigLoader:
    def test_load_config_with_defaults_only(self, tmp_path: Path) -> None:
        config_file = tmp_path / "clausecheck.yaml"
        config_file.write_text(
            yaml.dump({"defaults": {"root_dir": "templates", "engine": "a.b:C"}})
        )

        config = ConfigLoader().load_config(str(config_file))

        assert config["defaults"]["root_dir"] == "templates"
        assert config["defaults"]["engine"] == "a.b:C"

    def test_load_config_missing_file_uses_built_in_defaults(self) -> None:
        loader = ConfigLoader()
        config = loader.load_config("/nonexistent/path/clausecheck.yaml")

        assert config == {"defaults": {}}

        merged = loader.get_suite_config(config)
        assert merged["root_dir"] == "."
        assert merged["current_time"] == "1970-01-01T00:00:00Z"
        assert merged["log_level"] == "INFO"

    def test_load_config_from_env_variable(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "custom.yaml"
        config_file.write_text(yaml.dump({"defaults": {"current_time": "2022-01-01"}}))
        monkeypatch.setenv("CLAUSECHECK_CONFIG", str(config_file))

        config = ConfigLoader().load_config()

        assert config["defaults"]["current_time"] == "2022-01-01"

    def test_load_config_invalid_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "clausecheck.yaml"
        config_file.write_text("defaults: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader().load_config(str(config_file))

    def test_interpolation(self, tmp_path: Path) -> None:
        config_file = tmp_path / "clausecheck.yaml"
        config_file.write_text(
            "templates: /srv/templates\n"
            "defaults:\n"
            "  root_dir: ${templates}/counter\n"
        )

        config = ConfigLoader().load_config(str(config_file))

        assert config["defaults"]["root_dir"] == "/srv/templates/counter"

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "clausecheck.yaml"
        config_file.write_text("- root_dir\n- engine\n")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            ConfigLoader().load_config(str(config_file))

    def test_undefined_variable(self, tmp_path: Path) -> None:
        config_file = tmp_path / "clausecheck.yaml"
        config_file.write_text("defaults:\n  root_dir: ${missing}\n")

        with pytest.raises(ConfigError):
            ConfigLoader().load_config(str(config_file))


class TestGetSuiteConfig:
    def test_suite_overrides_defaults(self) -> None:
        config = {
            "defaults": {"root_dir": "templates", "current_time": "2020-01-01"},
            "suites": {"late": {"root_dir": "templates/late"}},
        }

        merged = ConfigLoader().get_suite_config(config, "late")

        assert merged["root_dir"] == "templates/late"
        assert merged["current_time"] == "2020-01-01"

    def test_overrides_take_precedence_and_skip_none(self) -> None:
        config = {"defaults": {"root_dir": "templates", "engine": "a:b"}}

        merged = ConfigLoader().get_suite_config(
            config, overrides={"root_dir": "other", "engine": None}
        )

        assert merged["root_dir"] == "other"
        assert merged["engine"] == "a:b"

    def test_unknown_suite(self) -> None:
        config = {"defaults": {}, "suites": {"a": {}, "b": {}}}

        with pytest.raises(ConfigError, match="Available suites"):
            ConfigLoader().get_suite_config(config, "c")

    def test_unknown_suite_without_suites(self) -> None:
        with pytest.raises(ConfigError, match="No suites are defined"):
            ConfigLoader().get_suite_config({"defaults": {}}, "c")


class TestValidateConfig:
    def test_valid(self) -> None:
        ConfigLoader().validate_config(dict(VALID))

    @pytest.mark.parametrize("field", ["engine", "loader"])
    def test_missing_plugin(self, field: str) -> None:
        config = dict(VALID, **{field: None})

        with pytest.raises(ConfigError, match=f"{field} is required"):
            ConfigLoader().validate_config(config)

    def test_plugin_without_attribute(self) -> None:
        with pytest.raises(ConfigError, match="module:attribute"):
            ConfigLoader().validate_config(dict(VALID, engine="mypkg.engine"))

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError, match="log_level"):
            ConfigLoader().validate_config(dict(VALID, log_level="LOUD"))

    def test_current_time_must_be_string(self) -> None:
        with pytest.raises(ConfigError, match="current_time"):
            ConfigLoader().validate_config(dict(VALID, current_time=0))

    def test_to_userdata(self) -> None:
        userdata = ConfigLoader().to_userdata(dict(VALID, loader=None))

        assert userdata["engine"] == "mypkg.engine:Engine"
        assert "loader" not in userdata
