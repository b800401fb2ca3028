"""
Pydantic схемы для валидации config.yaml.

Ошибки валидации выбрасывают ConfigError.

Пример использования:
    from replication_sync.core.config_schema import validate_config

    config_dict = yaml.safe_load(open("config.yaml"))
    validated = validate_config(config_dict)  # raises ConfigError on failure
"""

from typing import Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .constants import TABLE_NAME, DEFAULT_PRIMARY_LABEL, DEFAULT_SECONDARY_LABEL
from .exceptions import ConfigError


class AppDbConfig(BaseModel):
    """Настройки таблицы AppDB."""
    table_name: str = TABLE_NAME

    @field_validator("table_name")
    @classmethod
    def validate_table_name(cls, v: str) -> str:
        """Имя таблицы не может быть пустым или содержать разделитель."""
        if not v or ":" in v:
            raise PydanticCustomError(
                "invalid_table_name",
                "Имя таблицы AppDB не может быть пустым или содержать ':'",
            )
        return v


class CompareConfig(BaseModel):
    """Подписи сторон в отчёте сравнения."""
    primary_label: str = Field(default=DEFAULT_PRIMARY_LABEL, min_length=1)
    secondary_label: str = Field(default=DEFAULT_SECONDARY_LABEL, min_length=1)


class OutputConfig(BaseModel):
    """Настройки вывода."""
    output_folder: str = "reports"
    default_format: str = Field(default="table", pattern="^(table|excel|csv|json)$")
    csv_delimiter: str = ","
    excel_autofilter: bool = True
    excel_freeze_header: bool = True


class LoggingConfig(BaseModel):
    """Настройки логирования."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    rotation: str = Field(default="size", pattern="^(size|time|none)$")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)  # min 1KB
    backup_count: int = Field(default=5, ge=1, le=100)
    when: str = "midnight"
    interval: int = Field(default=1, ge=1)


class AppConfig(BaseModel):
    """Полная конфигурация приложения."""
    appdb: AppDbConfig = Field(default_factory=AppDbConfig)
    compare: CompareConfig = Field(default_factory=CompareConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    debug: bool = False


def validate_config(config_dict: dict, config_file: str = "config.yaml") -> AppConfig:
    """
    Валидирует словарь конфигурации.

    Args:
        config_dict: Словарь из YAML
        config_file: Имя файла (для текста ошибки)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: При ошибке валидации
    """
    try:
        return AppConfig(**config_dict)
    except ValidationError as e:
        key = None
        error_msg = str(e)
        errors = e.errors()
        if errors:
            first_error = errors[0]
            key = ".".join(str(x) for x in first_error.get("loc", []))
            msg = first_error.get("msg", "Unknown error")
            error_msg = f"{key}: {msg}"

        raise ConfigError(
            message=f"Ошибка валидации конфигурации: {error_msg}",
            config_file=config_file,
            key=key,
        ) from e


def get_default_config() -> AppConfig:
    """Возвращает конфигурацию по умолчанию."""
    return AppConfig()
