"""
Система конфигурации для HTTP Request.

Все конфиги immutable (frozen dataclasses) - один конфиг можно
разделять между многими Request.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union, TYPE_CHECKING

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .logging import LoggingConfig

# Размер буфера диагностики движка
DEFAULT_ERROR_BUFFER_SIZE = 256

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
        >>> TimeoutConfig.from_value((3, 60))
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ConfigurationError("connect timeout must be positive")
        if self.read <= 0:
            raise ConfigurationError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

    @classmethod
    def from_value(
        cls,
        value: Union[float, Tuple[float, float], 'TimeoutConfig']
    ) -> 'TimeoutConfig':
        """
        Нормализовать таймаут.

        Число задаёт read timeout, кортеж - (connect, read).
        """
        if isinstance(value, TimeoutConfig):
            return value
        if isinstance(value, tuple):
            return cls(connect=value[0], read=value[1])
        return cls(read=value)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# REQUEST CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class RequestConfig:
    """
    Начальная конфигурация Request.

    Setters Request переопределяют эти значения для конкретного запроса.

    Args:
        verify_ssl: Проверять SSL сертификаты
        proxy: Адрес прокси для http и https
        user_agent: User-Agent (None = дефолтный User-Agent движка)
        timeout: Таймауты (None = без таймаута)
        max_redirects: Максимум редиректов (редиректы всегда включены)
        error_buffer_size: Размер буфера диагностики
        logging: Конфигурация логирования (None = без логов)

    Examples:
        >>> RequestConfig(verify_ssl=False)
        >>> RequestConfig.create(timeout=10, proxy="http://proxy:3128")
    """
    verify_ssl: bool = True
    proxy: Optional[str] = None
    user_agent: Optional[str] = None
    timeout: Optional[TimeoutConfig] = None
    max_redirects: int = 30
    error_buffer_size: int = DEFAULT_ERROR_BUFFER_SIZE
    logging: Optional['LoggingConfig'] = field(default=None, compare=False)

    def __post_init__(self):
        """Валидация."""
        if self.max_redirects < 0:
            raise ConfigurationError("max_redirects must be non-negative")
        if self.error_buffer_size <= 0:
            raise ConfigurationError("error_buffer_size must be positive")

    @classmethod
    def create(
        cls,
        timeout: Optional[Union[float, Tuple[float, float], TimeoutConfig]] = None,
        verify_ssl: bool = True,
        proxy: Optional[str] = None,
        user_agent: Optional[str] = None,
        max_redirects: Optional[int] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'RequestConfig':
        """
        Удобный конструктор конфигурации.

        Args:
            timeout: Таймаут (число, (connect, read) или TimeoutConfig)
            verify_ssl: Проверять SSL
            proxy: Прокси
            user_agent: User-Agent
            max_redirects: Максимальное количество редиректов
            logging: Конфигурация логирования

        Returns:
            RequestConfig instance

        Examples:
            >>> config = RequestConfig.create(timeout=60)
            >>> config = RequestConfig.create(timeout=(5, 60), verify_ssl=False)
        """
        kwargs = {}
        if max_redirects is not None:
            kwargs['max_redirects'] = max_redirects

        return cls(
            verify_ssl=verify_ssl,
            proxy=proxy,
            user_agent=user_agent,
            timeout=TimeoutConfig.from_value(timeout) if timeout is not None else None,
            logging=logging,
            **kwargs
        )
