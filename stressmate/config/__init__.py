"""Rule table and environment configuration for StressMate."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import (
    DEFAULT_RULES_PATH,
    load_config,
    load_default_config,
    load_rules,
    validate_config_file,
)
from .models import (
    AppConfig,
    CategoryRule,
    ChatRules,
    DistanceTier,
    ExplainRules,
    FinanceRules,
    FinanceTipRule,
    GuidanceLines,
    GuidanceRules,
    IntentRule,
    JobRules,
    KeywordRule,
    LogFormat,
    LoggingConfig,
    LogLevel,
    StressFactor,
    StressRules,
    TipTiers,
)

__all__ = [
    # Loader functions
    "load_config",
    "load_rules",
    "load_default_config",
    "validate_config_file",
    "load_environment_config",
    "DEFAULT_RULES_PATH",
    # Rule table models
    "AppConfig",
    "StressRules",
    "StressFactor",
    "KeywordRule",
    "CategoryRule",
    "TipTiers",
    "GuidanceLines",
    "GuidanceRules",
    "FinanceRules",
    "FinanceTipRule",
    "JobRules",
    "DistanceTier",
    "ExplainRules",
    "ChatRules",
    "IntentRule",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
