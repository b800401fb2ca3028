"""
Structured Logging для Replication Sync.

Два формата:
- human-readable для консоли
- JSON для файлов (ELK/Loki)

Пример использования:
    from replication_sync.core.logging import setup_logging, get_logger

    setup_logging(json_format=False, level=logging.DEBUG)

    logger = get_logger(__name__)
    logger.info("Прочитано групп: 12", operation="read", table="REPLICATION_IP_MULTICAST_TABLE")

Формат вывода (JSON):
    {"timestamp": "2026-10-19T10:30:15.123456", "level": "INFO",
     "message": "Прочитано групп: 12", "logger": "replication_sync.appdb.translation",
     "operation": "read", "run_id": "2026-10-19T10-30-00"}
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass
from enum import Enum


class RotationType(str, Enum):
    """Тип ротации логов."""
    SIZE = "size"
    TIME = "time"
    NONE = "none"


@dataclass
class LogConfig:
    """
    Конфигурация логирования.

    Attributes:
        level: Уровень логирования
        json_format: JSON для файла (консоль всегда human-readable)
        console: Выводить в консоль
        file_path: Путь к файлу логов (None = без файла)
        rotation: Тип ротации (size, time, none)
        max_bytes: Макс размер файла для size-ротации
        backup_count: Количество backup файлов
        when: Интервал для time-ротации (S, M, H, D, midnight)
        interval: Частота ротации для time
    """
    level: int = logging.INFO
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    rotation: RotationType = RotationType.SIZE
    max_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5
    when: str = "midnight"
    interval: int = 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Создаёт конфигурацию из словаря (секция logging в config.yaml)."""
        rotation = data.get("rotation", "size")
        if isinstance(rotation, str):
            rotation = RotationType(rotation)

        level = data.get("level", "INFO")
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)

        return cls(
            level=level,
            json_format=data.get("json_format", False),
            console=data.get("console", True),
            file_path=data.get("file_path"),
            rotation=rotation,
            max_bytes=data.get("max_bytes", 10 * 1024 * 1024),
            backup_count=data.get("backup_count", 5),
            when=data.get("when", "midnight"),
            interval=data.get("interval", 1),
        )


class JSONFormatter(logging.Formatter):
    """
    JSON форматтер.

    Все extra поля записи попадают в JSON как есть.
    """

    # Поля logging.LogRecord которые не нужно включать в JSON
    RESERVED_ATTRS = {
        "args", "asctime", "created", "exc_info", "exc_text",
        "filename", "funcName", "levelname", "levelno", "lineno",
        "module", "msecs", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread",
        "threadName", "taskName", "message",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    """
    Human-readable форматтер.

    Формат: TIMESTAMP - LEVEL - [run_id] MESSAGE (operation=X, key=Y)
    """

    EXTRA_FIELDS = ("operation", "table", "key", "group_id")

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        message = record.getMessage()

        run_id = getattr(record, "run_id", None)
        prefix = f"[{run_id}] " if run_id else ""

        extras = []
        for attr in self.EXTRA_FIELDS:
            value = getattr(record, attr, None)
            if value is not None and value != "":
                extras.append(f"{attr}={value}")
        extra_str = f" ({', '.join(extras)})" if extras else ""

        result = f"{timestamp} - {level} - {prefix}{message}{extra_str}"

        if record.exc_info:
            result += "\n" + self.formatException(record.exc_info)

        return result


class StructuredLogger:
    """
    Обёртка над logging.Logger с именованными полями.

        logger.info("Мутация записана", key="REPLICATION_IP_MULTICAST_TABLE:a")
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, **extra: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return

        # run_id из глобального контекста если не указан
        if "run_id" not in extra:
            from .context import get_current_context
            ctx = get_current_context()
            if ctx:
                extra["run_id"] = ctx.run_id

        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log DEBUG."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log INFO."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log WARNING."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log ERROR."""
        self._log(logging.ERROR, message, **kwargs)


# Кэш логгеров
_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """
    Получает или создаёт StructuredLogger.

    Args:
        name: Имя логгера (обычно __name__)
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def _reset_root_handlers() -> logging.Logger:
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    return root_logger


def setup_logging(
    json_format: bool = False,
    level: int = logging.INFO,
    stream: Any = None,
) -> None:
    """
    Настройка консольного логирования.

    Args:
        json_format: True для JSON, False для human-readable
        level: Уровень логирования
        stream: Поток вывода (по умолчанию sys.stderr)

    Example:
        setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    """
    if stream is None:
        stream = sys.stderr

    root_logger = _reset_root_handlers()

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())

    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def _create_file_handler(
    file_path: str,
    rotation: RotationType,
    max_bytes: int,
    backup_count: int,
    when: str,
    interval: int,
) -> logging.Handler:
    """Создаёт file handler с нужной ротацией."""
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    if rotation == RotationType.SIZE:
        return logging.handlers.RotatingFileHandler(
            filename=file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    elif rotation == RotationType.TIME:
        return logging.handlers.TimedRotatingFileHandler(
            filename=file_path,
            when=when,
            interval=interval,
            backupCount=backup_count,
            encoding="utf-8",
        )
    else:
        return logging.FileHandler(file_path, encoding="utf-8")


def setup_logging_from_config(config: LogConfig) -> None:
    """
    Настраивает логирование из LogConfig.

    Консоль всегда human-readable, файл - по json_format.
    """
    root_logger = _reset_root_handlers()
    handlers: List[logging.Handler] = []

    if config.console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        console_handler.setFormatter(HumanFormatter())
        handlers.append(console_handler)

    if config.file_path:
        file_handler = _create_file_handler(
            file_path=config.file_path,
            rotation=config.rotation,
            max_bytes=config.max_bytes,
            backup_count=config.backup_count,
            when=config.when,
            interval=config.interval,
        )
        file_handler.setLevel(config.level)
        file_handler.setFormatter(JSONFormatter() if config.json_format else HumanFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    root_logger.setLevel(config.level)
