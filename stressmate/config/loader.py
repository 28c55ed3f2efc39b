"""Rule table loader for StressMate."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

DEFAULT_RULES_PATH = Path(__file__).parent / "default_rules.yaml"


def load_config(config_path: Optional[Path] = None) -> tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate rule tables and environment variables.

    Fallback order for the rule file:
    1. Use provided config_path if given
    2. Use STRESSMATE_RULES if set
    3. Try stressmate.yaml in current directory
    4. Try ./config/stressmate.yaml
    5. Use the packaged default_rules.yaml

    Args:
        config_path: Optional path to a rule table file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If a file is missing, unreadable or invalid
    """
    env_config = load_environment_config()
    config_file = _find_config_file(config_path, env_config.rules_path)
    app_config = load_rules(config_file)
    return app_config, env_config


def load_rules(config_file: Path) -> AppConfig:
    """
    Load and validate a single rule table file.

    Args:
        config_file: Path to YAML file

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    config_dict = _read_yaml(config_file)

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    return _validate(config_dict, config_file)


@lru_cache(maxsize=1)
def load_default_config() -> AppConfig:
    """Load the packaged rule tables once per process."""
    return load_rules(DEFAULT_RULES_PATH)


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    """Parse a YAML file into a dict, translating failures."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"Rule file not found: {config_file}",
            suggestions=[
                f"Copy {DEFAULT_RULES_PATH.name} from the stressmate package to stressmate.yaml",
                f"Ensure {config_file} exists and is readable",
            ],
        )
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML rule file: {e}",
            suggestions=[
                "Check YAML syntax in your rule file",
                "Ensure proper indentation (use spaces, not tabs)",
                "Quote Korean keys and strings containing ':'",
            ],
            source=config_file,
        )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read rule file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
            source=config_file,
        )

    if not config_dict:
        raise ConfigurationError(
            "Rule file is empty",
            suggestions=[f"Start from the packaged {DEFAULT_RULES_PATH.name}"],
            source=config_file,
        )

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Rule file must contain a mapping at the top level, got {type(config_dict).__name__}",
            suggestions=["Top-level keys are: stress, finance, jobs, chat, logging"],
            source=config_file,
        )

    return config_dict


def _validate(config_dict: Dict[str, Any], source: Optional[Path] = None) -> AppConfig:
    """Validate a raw dict with Pydantic, converting errors to ConfigurationError."""
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            error_msg = error["msg"]
            error_type = error["type"]

            if error_type == "missing":
                errors.append(f"Missing required field: {field_path}")
            elif error_type in ["string_type", "int_type", "float_type", "bool_type", "list_type"]:
                expected_type = error_type.replace("_type", "")
                errors.append(
                    f"Invalid type for '{field_path}': expected {expected_type}, got {error.get('input')}"
                )
            elif "enum" in error_type or "literal" in error_type:
                errors.append(f"Invalid value for '{field_path}': {error_msg}")
            else:
                errors.append(f"{field_path}: {error_msg}")

        raise ConfigurationError(
            "Rule table validation failed",
            errors=errors,
            suggestions=[
                f"Compare against the packaged {DEFAULT_RULES_PATH.name}",
                "Check that all required sections are present",
                "Verify weights have the right sign for their list",
            ],
            source=source,
        )


def _find_config_file(
    config_path: Optional[Path] = None, env_rules_path: Optional[Path] = None
) -> Path:
    """
    Find the rule file using fallback logic.

    Args:
        config_path: Optional explicit path to rule file
        env_rules_path: Path taken from STRESSMATE_RULES, if set

    Returns:
        Path to rule file

    Raises:
        ConfigurationError: If an explicit path does not exist
    """
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified rule file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Omit --config to use the packaged defaults",
                ],
            )
        return config_path

    if env_rules_path:
        return env_rules_path

    candidates = [
        Path("stressmate.yaml"),
        Path("config") / "stressmate.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return DEFAULT_RULES_PATH


def validate_config_file(config_path: Path) -> bool:
    """
    Validate a rule file without touching environment variables.

    Args:
        config_path: Path to rule file

    Returns:
        True if valid, False otherwise (errors printed to stdout)
    """
    try:
        load_rules(Path(config_path))
        print(f"✓ Rule file {config_path} is valid")
        return True
    except ConfigurationError as e:
        print(f"✗ Rule validation failed:\n{e}")
        return False
