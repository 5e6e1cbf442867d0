"""
Pydantic settings for environment configuration.
"""

from typing import Optional, Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RequestSettings(BaseSettings):
    """
    Request defaults read from HTTP_REQUEST_* variables or a .env file.

    Example .env file:
        HTTP_REQUEST_VERIFY_SSL=false
        HTTP_REQUEST_PROXY=http://proxy.internal:3128
        HTTP_REQUEST_TIMEOUT_CONNECT=5
        HTTP_REQUEST_TIMEOUT_READ=30
        HTTP_REQUEST_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix='HTTP_REQUEST_',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    verify_ssl: bool = Field(default=True)
    proxy: Optional[str] = None
    user_agent: Optional[str] = None
    max_redirects: int = Field(default=30, ge=0)

    # Timeouts (unset = no timeout)
    timeout_connect: Optional[float] = Field(default=None, gt=0)
    timeout_read: Optional[float] = Field(default=None, gt=0)

    # Logging
    log_enabled: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text", "colored"] = Field(default="text")
    log_enable_console: bool = Field(default=True)
    log_file_path: Optional[str] = None

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('log_format', mode='before')
    @classmethod
    def normalize_format(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator('proxy', 'user_agent')
    @classmethod
    def empty_as_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None
