"""
Контекст выполнения команды CLI.

run_id попадает во все логи текущего запуска через StructuredLogger.

Пример использования:
    ctx = RunContext.create(command="diff")
    set_current_context(ctx)
    ...
    logger.info(f"Готово за {ctx.elapsed_human}")
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class RunContext:
    """
    Контекст одного запуска.

    Attributes:
        run_id: Идентификатор запуска (timestamp или короткий UUID)
        started_at: Время начала
        command: Команда CLI
        extra: Дополнительные данные
    """

    run_id: str
    started_at: datetime
    command: str = ""
    extra: dict = field(default_factory=dict)

    @classmethod
    def create(cls, command: str = "", use_timestamp_id: bool = True) -> "RunContext":
        """
        Создаёт новый контекст.

        Args:
            command: Название команды CLI
            use_timestamp_id: Использовать timestamp вместо UUID
        """
        started_at = datetime.now()
        if use_timestamp_id:
            # Формат: 2026-10-19T12-30-22
            run_id = started_at.strftime("%Y-%m-%dT%H-%M-%S")
        else:
            run_id = str(uuid.uuid4())[:8]

        ctx = cls(run_id=run_id, started_at=started_at, command=command)
        logger.debug(f"Created RunContext: {ctx.run_id}")
        return ctx

    @property
    def elapsed_seconds(self) -> float:
        """Время выполнения в секундах."""
        return (datetime.now() - self.started_at).total_seconds()

    @property
    def elapsed_human(self) -> str:
        """Время выполнения в человекочитаемом формате."""
        elapsed = self.elapsed_seconds
        if elapsed < 60:
            return f"{elapsed:.1f}s"
        minutes = int(elapsed // 60)
        seconds = int(elapsed % 60)
        return f"{minutes}m {seconds}s"

    def to_dict(self) -> dict:
        """Сериализует контекст для отчётов."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat(),
            "command": self.command,
            "elapsed_seconds": self.elapsed_seconds,
            "extra": self.extra,
        }

    def __str__(self) -> str:
        return f"RunContext({self.run_id})"


# Глобальный контекст для случаев когда нет явного прокидывания
_current_context: Optional[RunContext] = None


def get_current_context() -> Optional[RunContext]:
    """Возвращает текущий глобальный контекст."""
    return _current_context


def set_current_context(ctx: Optional[RunContext]) -> None:
    """Устанавливает текущий глобальный контекст."""
    global _current_context
    _current_context = ctx
