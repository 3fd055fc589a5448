"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional


class LargeNumbersConfig(BaseSettings):
    """Fibonacci search driver configuration"""

    # Search configuration
    target_digits: int = Field(default=1000, ge=1)  # basically 10 ** 1000
    start_index: int = Field(default=0, ge=0)
    progress_log_interval: int = Field(default=500, ge=0)  # 0 disables progress lines

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Start-up checks
    self_check_on_start: bool = True

    class Config:
        env_prefix = "LARGE_NUMBERS_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = LargeNumbersConfig()


def get_config() -> LargeNumbersConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LargeNumbersConfig:
    """Reload configuration from environment"""
    global config
    config = LargeNumbersConfig()
    return config
