"""Configuration models and YAML loading."""

from .config_data import AppConfig, ConfigData, DatabaseConfig, LoggingConfig
from .config_template import load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "ConfigData",
    "DatabaseConfig",
    "LoggingConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
