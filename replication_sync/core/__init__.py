"""
Core модули Replication Sync.

- models: IR multicast группы и KFV мутации AppDB
- constants: формат ключей/полей таблицы packet replication
- exceptions: типизированные ошибки
- Structured Logging: JSON/Human-readable логирование
- RunContext: контекст выполнения команды
"""

from .context import RunContext, get_current_context, set_current_context
from .logging import (
    get_logger,
    setup_logging,
    setup_logging_from_config,
    StructuredLogger,
    JSONFormatter,
    HumanFormatter,
    LogConfig,
    RotationType,
)
from .exceptions import (
    ReplicationSyncError,
    InvalidEncodingError,
    UnsupportedOperationError,
    SnapshotError,
    ConfigError,
    format_error_for_log,
)
from .models import (
    Replica,
    MulticastGroupEntry,
    UpdateType,
    KfvOperation,
    KeyOpFieldsValues,
)

__all__ = [
    # Context
    "RunContext",
    "get_current_context",
    "set_current_context",
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    "StructuredLogger",
    "JSONFormatter",
    "HumanFormatter",
    "LogConfig",
    "RotationType",
    # Exceptions
    "ReplicationSyncError",
    "InvalidEncodingError",
    "UnsupportedOperationError",
    "SnapshotError",
    "ConfigError",
    "format_error_for_log",
    # Models
    "Replica",
    "MulticastGroupEntry",
    "UpdateType",
    "KfvOperation",
    "KeyOpFieldsValues",
]
