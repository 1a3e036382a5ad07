"""Configuration loader for the palindrome checker."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

DEFAULT_CONFIG_LOCATIONS = [
    Path("palindrome.yaml"),
    Path("config") / "palindrome.yaml",
]


def load_config(config_path: Optional[Path] = None) -> tuple[AppConfig, EnvironmentConfig]:
    """Load and validate configuration from YAML and environment variables.

    Config file lookup:
    1. Use config_path if given (it must exist)
    2. Try palindrome.yaml in the current directory
    3. Try ./config/palindrome.yaml
    4. Fall back to built-in defaults

    Environment values are returned separately; main.py applies them on top
    of the file values.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If a file is unreadable or invalid, or the environment is invalid
    """
    config_file = _find_config_file(config_path)

    if config_file is None:
        app_config = AppConfig()
    else:
        config_dict = _read_yaml(config_file)

        warnings = check_for_warnings(config_dict)
        if warnings:
            emit_warnings(warnings)

        app_config = _validate(config_dict)

    env_config = load_environment_config()

    return app_config, env_config


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[f"Ensure {config_file} is readable"],
        ) from e

    if not config_dict:
        raise ConfigurationError(
            f"Configuration file is empty: {config_file}",
            suggestions=[
                "Copy palindrome.example.yaml to palindrome.yaml",
                "Delete the file to use built-in defaults",
            ],
        )

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(config_dict).__name__}",
            suggestions=["Review palindrome.example.yaml for the expected layout"],
        )

    return config_dict


def _validate(config_dict: Dict[str, Any]) -> AppConfig:
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            error_type = error["type"]

            if error_type == "missing":
                errors.append(f"Missing required field: {field_path}")
            elif error_type in ("string_type", "int_type", "int_parsing", "list_type"):
                expected_type = error_type.split("_")[0]
                errors.append(
                    f"Invalid type for '{field_path}': expected {expected_type}, got {error.get('input')!r}"
                )
            elif error_type == "enum":
                errors.append(f"Invalid value for '{field_path}': {error['msg']}")
            else:
                errors.append(f"{field_path}: {error['msg']}")

        raise ConfigurationError(
            "Configuration validation failed",
            errors=errors,
            suggestions=[
                "Review palindrome.example.yaml for correct format",
                "Run 'palindrome-checker strategies' to list valid strategy names",
            ],
        ) from e


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """Resolve the config file to load, or None to use defaults.

    Raises:
        ConfigurationError: If an explicit config_path does not exist
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Omit --config to use palindrome.yaml or built-in defaults",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return None


def validate_config_file(config_path: Path) -> bool:
    """Validate a configuration file without reading the environment.

    Args:
        config_path: Path to configuration file

    Returns:
        True if valid, False otherwise (errors printed)
    """
    try:
        _validate(_read_yaml(config_path))
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False

    print(f"✓ Configuration file {config_path} is valid")
    return True
