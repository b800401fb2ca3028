"""
Загрузчик конфигурации из config.yaml.

Порядок: значения по умолчанию -> YAML -> переменные окружения,
затем валидация через pydantic (core/config_schema.py).

Доступ через точку:
    config.appdb.table_name
    config.compare.primary_label
    config.logging.level
"""

import os
from typing import Any, Optional

import yaml

from .core.config_schema import AppConfig, validate_config
from .core.exceptions import ConfigError
from .core.logging import get_logger

logger = get_logger(__name__)

# Файлы которые ищутся если путь не указан явно
SEARCH_PATHS = [
    "config.yaml",
    "config.yml",
    ".replication_sync.yaml",
]

ENV_TABLE_NAME = "REPLICATION_SYNC_TABLE"


class Config:
    """
    Главный класс конфигурации.

    Пример:
        cfg = load_config("config.yaml")
        cfg.appdb.table_name     # "REPLICATION_IP_MULTICAST_TABLE"
        cfg.output.output_folder # "reports"
    """

    def __init__(self, config_file: Optional[str] = None):
        self.config_file: Optional[str] = None
        self._settings: AppConfig = AppConfig()
        self.reload(config_file)

    def _find_config_file(self) -> Optional[str]:
        for path in SEARCH_PATHS:
            if os.path.exists(path):
                return path
        return None

    def _load_yaml(self, config_file: str) -> dict:
        """Загружает настройки из YAML файла."""
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Ошибка чтения конфигурации: {e}", config_file=config_file) from e

        if not isinstance(data, dict):
            raise ConfigError("Конфигурация должна быть словарём", config_file=config_file)

        logger.debug(f"Конфигурация загружена из {config_file}")
        return data

    def _apply_env(self, data: dict, config_file: Optional[str]) -> None:
        """Переменные окружения перекрывают YAML."""
        table_name = os.getenv(ENV_TABLE_NAME)
        if not table_name:
            return

        appdb = data.get("appdb")
        if appdb is None:
            # Пустая секция "appdb:" в YAML
            appdb = data["appdb"] = {}
        elif not isinstance(appdb, dict):
            raise ConfigError(
                "Секция appdb должна быть словарём",
                config_file=config_file,
                key="appdb",
            )
        appdb["table_name"] = table_name

    def reload(self, config_file: Optional[str] = None) -> None:
        """
        Перезагружает конфигурацию.

        Args:
            config_file: Путь к YAML. Явно указанный несуществующий файл - ConfigError.

        Raises:
            ConfigError: Файл не найден, не читается или не проходит валидацию
        """
        if config_file and not os.path.exists(config_file):
            raise ConfigError("Файл конфигурации не найден", config_file=config_file)

        config_file = config_file or self._find_config_file()
        data = self._load_yaml(config_file) if config_file else {}
        self._apply_env(data, config_file)

        self._settings = validate_config(data, config_file=config_file or "config.yaml")
        self.config_file = config_file

    @property
    def settings(self) -> AppConfig:
        """Валидированная pydantic модель."""
        return self._settings

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            return super().__getattribute__(name)
        return getattr(self._settings, name)


def load_config(config_file: Optional[str] = None) -> Config:
    """
    Загружает конфигурацию из файла.

    Args:
        config_file: Путь к YAML файлу (опционально)

    Returns:
        Config: Объект конфигурации
    """
    return Config(config_file)
