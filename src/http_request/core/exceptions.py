"""
Иерархия исключений HTTP Request.

Ошибки передачи (сеть, TLS, DNS) НЕ являются исключениями - они
возвращаются через Response. Исключения здесь описывают неправильное
использование API и ошибки конфигурации.

Классификация:
- FatalError (fatal=True) - ошибка вызывающего кода, повтор не поможет
"""

from typing import Optional

from ..utils.sanitizer import mask_url

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HTTPRequestException(Exception):
    """Базовое исключение HTTP Request."""

    fatal: bool = False

    def __init__(self, message: str, **kwargs):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ФАТАЛЬНЫЕ ОШИБКИ (fatal=True)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FatalError(HTTPRequestException):
    """
    Фатальная ошибка - НЕ ретраить.

    Примеры: неверная конфигурация, использование закрытого запроса.
    """
    fatal = True

class ConfigurationError(FatalError, ValueError):
    """
    Недопустимое значение в конфигурации.

    Наследует ValueError: неверный аргумент dataclass конфига.
    """

class EngineInitError(FatalError):
    """
    Не удалось создать handle транспортного движка.

    Args:
        url: URL запроса
        reason: Исходная ошибка движка
    """

    def __init__(self, url: str, reason: Optional[Exception] = None):
        self.url = url
        self.reason = reason

        msg = f"Failed to create transfer handle for {mask_url(url)}"
        if reason is not None:
            msg += f": {reason}"

        super().__init__(msg)

class RequestClosedError(FatalError):
    """Запрос уже закрыт (или его ресурсы перемещены в другой Request)."""

    def __init__(self, url: str = ""):
        self.url = url
        msg = "Request has no transfer handle (closed or moved)"
        if url:
            msg += f" (url: {mask_url(url)})"
        super().__init__(msg)

class FormError(FatalError):
    """Базовая ошибка multipart формы."""
    pass

class FormNotInitializedError(FormError):
    """add_file()/add_field() вызваны до make_form()."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f"Cannot add part '{field_name}': call make_form() before adding form parts"
        )

class FormAlreadyInitializedError(FormError):
    """make_form() вызван повторно."""

    def __init__(self):
        super().__init__("Multipart form is already initialized for this request")
