"""Tests for configuration loading and validation."""

import warnings
from pathlib import Path

import pytest

from palindrome_checker.config import (
    AppConfig,
    BenchmarkConfig,
    ConfigurationError,
    LoggingConfig,
    load_config,
    load_environment_config,
    validate_config_file,
)
from palindrome_checker.config.validators import check_for_warnings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self):
        app_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.strategy == "deque"
        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"
        assert app_config.benchmark.warmup_iterations == 50
        assert app_config.benchmark.iterations == 500
        assert app_config.benchmark.input == "Was it a car or a cat I saw?"
        assert app_config.benchmark.strategies == ["two_pointer", "stack", "recursive"]
        assert env_config.environment == "local"

    def test_load_minimal_config_applies_defaults(self):
        app_config, _ = load_config(FIXTURES_DIR / "minimal_config.yaml")

        assert app_config.strategy == "stack"
        assert app_config.logging.level == "INFO"
        assert app_config.logging.format == "key-value"
        assert app_config.benchmark.warmup_iterations == 1000
        assert app_config.benchmark.iterations == 10000
        assert app_config.benchmark.input == "A man a plan a canal Panama"
        assert app_config.benchmark.strategies == []

    def test_defaults_when_no_file_present(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        app_config, _ = load_config()

        assert app_config == AppConfig()
        assert app_config.strategy == "two_pointer"

    def test_default_location_discovered(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "palindrome.yaml").write_text("strategy: recursive\n")

        app_config, _ = load_config()

        assert app_config.strategy == "recursive"

    def test_current_directory_takes_precedence(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "palindrome.yaml").write_text("strategy: stack\n")
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "palindrome.yaml").write_text("strategy: recursive\n")

        app_config, _ = load_config()

        assert app_config.strategy == "stack"

    def test_explicit_file_not_found(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(Path("nonexistent.yaml"))

        assert "not found" in str(exc_info.value)

    def test_unknown_strategy(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "unknown_strategy_config.yaml")

        error = exc_info.value
        assert error.message == "Configuration validation failed"
        assert any("bubble_sort" in message for message in error.errors)

    def test_invalid_benchmark_values(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_benchmark_config.yaml")

        errors = exc_info.value.errors
        assert any("warmup_iterations" in message for message in errors)
        assert any("iterations" in message and "warmup" not in message for message in errors)

    def test_duplicate_benchmark_strategies(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "duplicate_strategies_config.yaml")

        assert any("Duplicate strategies: deque" in message for message in exc_info.value.errors)

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_log_level_config.yaml")

        assert any("logging -> level" in message for message in exc_info.value.errors)

    def test_invalid_yaml(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_yaml_config.yaml")

        assert "Failed to parse YAML" in str(exc_info.value)

    def test_empty_file(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "empty_config.yaml")

        assert "empty" in str(exc_info.value)

    def test_non_mapping_file(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "list_config.yaml")

        assert "mapping" in str(exc_info.value)

    def test_warnings_emitted(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            load_config(FIXTURES_DIR / "low_iterations_config.yaml")

        messages = [str(w.message) for w in caught if issubclass(w.category, UserWarning)]
        assert any("reverse_concat" in message for message in messages)
        assert any("Low benchmark iterations" in message for message in messages)


class TestCheckForWarnings:
    def test_no_warnings_for_defaults(self):
        assert check_for_warnings({"strategy": "two_pointer"}) == []

    def test_high_iterations(self):
        messages = check_for_warnings({"benchmark": {"iterations": 5_000_000}})
        assert len(messages) == 1
        assert "High benchmark iterations" in messages[0]

    def test_ignores_non_dict_benchmark(self):
        assert check_for_warnings({"benchmark": "fast"}) == []

    @pytest.mark.parametrize("name", ["reverse_concat", "Reverse-Concat", " reverse concat "])
    def test_reverse_concat_warning_for_any_spelling(self, name):
        messages = check_for_warnings({"strategy": name})
        assert len(messages) == 1
        assert "reverse_concat" in messages[0]


class TestModels:
    def test_strategy_name_is_canonicalized(self):
        assert AppConfig(strategy="Two-Pointer").strategy == "two_pointer"

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError):
            AppConfig(strategy="nope")

    def test_logging_level_case_insensitive(self):
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_logging_defaults_are_plain_strings(self):
        logging_config = AppConfig().logging

        assert logging_config.level == "INFO"
        assert type(logging_config.level) is str
        assert logging_config.format == "key-value"
        assert type(logging_config.format) is str

    def test_benchmark_limits(self):
        with pytest.raises(ValueError):
            BenchmarkConfig(iterations=0)
        with pytest.raises(ValueError):
            BenchmarkConfig(warmup_iterations=-1)
        assert BenchmarkConfig(warmup_iterations=0, iterations=1).iterations == 1


class TestEnvironmentConfig:
    def test_defaults_without_variables(self):
        env_config = load_environment_config()

        assert env_config.strategy is None
        assert env_config.log_level is None
        assert env_config.log_format is None
        assert env_config.environment == "local"

    def test_valid_variables_normalized(self, mock_env_vars):
        env_config = load_environment_config()

        assert env_config.strategy == "deque"
        assert env_config.log_level == "DEBUG"
        assert env_config.log_format == "json"
        assert env_config.environment == "test"

    def test_invalid_variables_collected(self, monkeypatch):
        monkeypatch.setenv("PALINDROME_STRATEGY", "quantum")
        monkeypatch.setenv("LOG_LEVEL", "CHATTY")
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert "PALINDROME_STRATEGY" in errors[0]
        assert "LOG_LEVEL" in errors[1]
        assert "LOG_FORMAT" in errors[2]

    def test_load_config_propagates_environment_errors(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "CHATTY")

        with pytest.raises(ConfigurationError):
            load_config(FIXTURES_DIR / "minimal_config.yaml")


class TestConfigurationError:
    def test_formatted_message(self):
        error = ConfigurationError(
            "Broken", errors=["first", "second"], suggestions=["fix it"]
        )

        text = str(error)
        assert text.startswith("Broken")
        assert "  1. first" in text
        assert "  2. second" in text
        assert "  - fix it" in text


class TestValidateConfigFile:
    def test_valid(self, capsys):
        assert validate_config_file(FIXTURES_DIR / "valid_config.yaml") is True
        assert "is valid" in capsys.readouterr().out

    def test_invalid(self, capsys):
        assert validate_config_file(FIXTURES_DIR / "unknown_strategy_config.yaml") is False
        assert "validation failed" in capsys.readouterr().out
