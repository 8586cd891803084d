from .settings import AppConfig, ConfigError, OutputConfig, ProcessingConfig, load_config

__all__ = ["AppConfig", "ConfigError", "OutputConfig", "ProcessingConfig", "load_config"]
