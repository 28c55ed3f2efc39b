"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "key-value"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        rules_path: Optional[Path] = None,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.rules_path = rules_path
        self.log_level = log_level
        self.log_format = log_format
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - STRESSMATE_RULES: Path to a rule table YAML file
    - STRESSMATE_LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - STRESSMATE_LOG_FORMAT: Override log format (json, key-value)
    - ENVIRONMENT: Environment label added to every log record (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    rules_path_str = os.getenv("STRESSMATE_RULES")
    log_level = os.getenv("STRESSMATE_LOG_LEVEL")
    log_format = os.getenv("STRESSMATE_LOG_FORMAT")
    environment = os.getenv("ENVIRONMENT")

    rules_path = None
    if rules_path_str:
        rules_path = Path(rules_path_str).expanduser()
        if not rules_path.exists():
            errors.append(f"STRESSMATE_RULES points to a missing file: {rules_path}")

    if log_level:
        log_level = log_level.upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid STRESSMATE_LOG_LEVEL: '{log_level}'. "
                f"Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if log_format:
        log_format = log_format.lower()
        if log_format not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid STRESSMATE_LOG_FORMAT: '{log_format}'. "
                f"Must be one of: {', '.join(VALID_LOG_FORMATS)}"
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the STRESSMATE_* entries in your .env file",
                "Unset a variable to fall back to the rule file or defaults",
            ],
        )

    return EnvironmentConfig(
        rules_path=rules_path,
        log_level=log_level,
        log_format=log_format,
        environment=environment,
    )
