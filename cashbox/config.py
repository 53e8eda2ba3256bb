"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings


class CashboxConfig(BaseSettings):
    """Cashbox configuration"""
    
    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "text"] = "json"
    logger_name: str = "cashbox"
    
    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v
    
    @field_validator('log_format', mode='before')
    @classmethod
    def normalize_log_format(cls, v):
        return v.lower() if isinstance(v, str) else v
    
    class Config:
        env_prefix = "CASHBOX_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # .env may hold settings for other tools


# Global configuration instance
config = CashboxConfig()


def get_config() -> CashboxConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> CashboxConfig:
    """Reload configuration from environment"""
    global config
    config = CashboxConfig()
    return config
