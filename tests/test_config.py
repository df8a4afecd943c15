from argparse import Namespace

import pytest

from logparser.config import Config, ConfigError, load_config, load_yaml_config


class TestLoadYamlConfig:
    def test_no_path(self):
        assert load_yaml_config(None) == {}

    def test_missing_file_uses_defaults(self):
        assert load_yaml_config("/nonexistent/path/config.yml") == {}

    def test_loads_mapping(self, yaml_file):
        path = yaml_file("severity_threshold: 10\noutput_format: json\n")
        assert load_yaml_config(path) == {"severity_threshold": 10, "output_format": "json"}

    def test_empty_file(self, yaml_file):
        assert load_yaml_config(yaml_file("")) == {}

    def test_invalid_yaml(self, yaml_file):
        with pytest.raises(ConfigError):
            load_yaml_config(yaml_file("severity_threshold: [1, 2\n"))

    def test_non_mapping(self, yaml_file):
        with pytest.raises(ConfigError):
            load_yaml_config(yaml_file("- 1\n- 2\n"))


class TestLoadConfig:
    def test_defaults(self, cli_args):
        config = load_config(cli_args, {})
        assert config == Config()
        assert config.severity_threshold == 50
        assert config.output_format == "text"
        assert config.color is False
        assert config.log_level == "WARNING"

    def test_yaml_overrides_defaults(self, cli_args):
        config = load_config(cli_args, {"severity_threshold": 2, "color": True, "log_level": "info"})
        assert config.severity_threshold == 2
        assert config.color is True
        assert config.log_level == "INFO"

    def test_env_overrides_yaml(self, cli_args, monkeypatch):
        monkeypatch.setenv("LOG_PARSER_SEVERITY", "7")
        monkeypatch.setenv("LOG_PARSER_COLOR", "yes")
        monkeypatch.setenv("LOG_PARSER_OUTPUT", "json")
        config = load_config(cli_args, {"severity_threshold": 2, "color": False})
        assert config.severity_threshold == 7
        assert config.color is True
        assert config.output_format == "json"

    def test_env_false_string(self, cli_args, monkeypatch):
        monkeypatch.setenv("LOG_PARSER_COLOR", "false")
        assert load_config(cli_args, {"color": True}).color is False

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("LOG_PARSER_SEVERITY", "7")
        monkeypatch.setenv("LOG_PARSER_OUTPUT", "json")
        args = Namespace(severity=-1, output="text", color=True, verbose=True)
        config = load_config(args, {})
        assert config.severity_threshold == -1
        assert config.output_format == "text"
        assert config.color is True
        assert config.log_level == "DEBUG"

    def test_severity_zero_from_cli_is_kept(self, cli_args):
        cli_args.severity = 0
        assert load_config(cli_args, {"severity_threshold": 9}).severity_threshold == 0

    def test_missing_cli_attributes(self):
        assert load_config(Namespace(), {}) == Config()

    def test_bad_threshold(self, cli_args):
        with pytest.raises(ConfigError):
            load_config(cli_args, {"severity_threshold": "high"})

    def test_bad_output_format(self, cli_args):
        with pytest.raises(ConfigError):
            load_config(cli_args, {"output_format": "xml"})

    def test_bad_log_level(self, cli_args, monkeypatch):
        monkeypatch.setenv("LOG_PARSER_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigError):
            load_config(cli_args, {})

    def test_config_is_frozen(self):
        config = Config()
        with pytest.raises(AttributeError):
            config.severity_threshold = 1
