from src.catalog.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    CORSConfig,
    DatabaseConfig,
    ErrorsConfig,
    LoggingConfig,
)

__all__ = [
    "AppConfig",
    "ConfigData",
    "CORSConfig",
    "DatabaseConfig",
    "ErrorsConfig",
    "LoggingConfig",
]
