"""
Build RequestConfig from environment variables and .env files.

Nothing here runs implicitly: Request only sees what load_from_env()
returns when the caller passes it in.
"""

from typing import Optional

from ..config import RequestConfig, TimeoutConfig
from ..logging.config import LoggingConfig
from .validator import RequestSettings


def load_from_env(env_file: Optional[str] = None, **overrides) -> RequestConfig:
    """
    Load RequestConfig.

    Priority (highest to lowest):
    1. **overrides - explicit parameters (same names as RequestSettings fields)
    2. Environment variables (HTTP_REQUEST_*)
    3. env_file
    4. Defaults

    Example:
        >>> config = load_from_env(env_file=".env", verify_ssl=False)
        >>> req = Request(Method.GET, "https://example.com", config=config)
    """
    settings = RequestSettings(_env_file=env_file)

    def pick(name: str):
        return overrides.get(name, getattr(settings, name))

    timeout = None
    connect, read = pick('timeout_connect'), pick('timeout_read')
    if connect is not None or read is not None:
        timeout = TimeoutConfig(
            connect=connect if connect is not None else TimeoutConfig.connect,
            read=read if read is not None else TimeoutConfig.read,
        )

    logging_config = None
    if pick('log_enabled'):
        file_path = pick('log_file_path')
        logging_config = LoggingConfig.create(
            level=pick('log_level'),
            format=pick('log_format'),
            enable_console=pick('log_enable_console'),
            enable_file=bool(file_path),
            file_path=file_path,
        )

    return RequestConfig(
        verify_ssl=pick('verify_ssl'),
        proxy=pick('proxy'),
        user_agent=pick('user_agent'),
        timeout=timeout,
        max_redirects=pick('max_redirects'),
        logging=logging_config,
    )
