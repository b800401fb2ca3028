"""
Типизированные исключения для Replication Sync.

Иерархия:
    ReplicationSyncError (базовый)
    ├── InvalidEncodingError (битый ключ/поле в AppDB)
    ├── UnsupportedOperationError (неизвестный тип update)
    ├── SnapshotError (снапшот AppDB, файл запросов)
    └── ConfigError (конфигурация)

Расхождения между AppDB и кэшем - НЕ ошибки. Их возвращает
ReplicationComparator как обычные данные.

Пример использования:
    from replication_sync.core.exceptions import InvalidEncodingError

    try:
        entries = get_all_packet_replication_entries(table)
    except InvalidEncodingError as e:
        logger.error(f"AppDB повреждена: {e.key} - {e.message}")
"""

from typing import Optional, Any


class ReplicationSyncError(Exception):
    """
    Базовое исключение для всех ошибок Replication Sync.

    Attributes:
        message: Описание ошибки
        details: Дополнительные детали (dict)
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """Сериализация для логов/отчётов."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidEncodingError(ReplicationSyncError):
    """
    Ключ или поле AppDB не соответствует формату таблицы.

    Означает повреждение AppDB или несовпадение кодеков writer/reader,
    поэтому никогда не пропускается молча.

    Attributes:
        key: AppDB ключ
        field: Имя поля (port:0xinstance)
        value: Фрагмент который не распарсился

    Пример:
        raise InvalidEncodingError("Invalid group id", key="REPLICATION_IP_MULTICAST_TABLE:zz")
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        self.key = key
        self.field = field
        self.value = value
        details = details or {}
        if key is not None:
            details["key"] = key
        if field is not None:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)[:100]  # Ограничиваем размер
        super().__init__(message, details)


class UnsupportedOperationError(ReplicationSyncError):
    """
    Тип обновления вне {INSERT, MODIFY, DELETE}.

    Attributes:
        update_type: Полученный тип обновления
    """

    def __init__(
        self,
        message: str,
        update_type: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        self.update_type = update_type
        details = details or {}
        if update_type is not None:
            details["update_type"] = str(update_type)
        super().__init__(message, details)


class SnapshotError(ReplicationSyncError):
    """
    Ошибка чтения/записи входных файлов: снапшот AppDB, файл запросов.

    Attributes:
        path: Путь к файлу
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.path = path
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class ConfigError(ReplicationSyncError):
    """
    Ошибка конфигурации.

    Attributes:
        config_file: Путь к файлу конфигурации
        key: Ключ конфигурации с ошибкой

    Пример:
        raise ConfigError("Missing required field", config_file="config.yaml", key="appdb.table_name")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.config_file = config_file
        self.key = key
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if key:
            details["key"] = key
        super().__init__(message, details)


def format_error_for_log(error: Exception) -> str:
    """
    Форматирует ошибку для вывода в лог.

    Args:
        error: Исключение

    Returns:
        str: Отформатированная строка ошибки
    """
    if isinstance(error, ReplicationSyncError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
