"""
Базовый класс экспортера отчётов.

Экспортеры пишут плоские строки (List[Dict]) - дампы multicast групп
и отчёты сравнения - в файл.

Пример создания кастомного экспортера:
    class XMLExporter(BaseExporter):
        file_extension = ".xml"

        def _write(self, data, file_path):
            ...
"""

from abc import ABC, abstractmethod
from pathlib import Path
from datetime import datetime
from typing import List, Dict, Any, Optional

from ..core.logging import get_logger

logger = get_logger(__name__)


class BaseExporter(ABC):
    """
    Абстрактный базовый класс для экспортеров.

    Attributes:
        output_folder: Папка для сохранения файлов
        encoding: Кодировка файлов
    """

    file_extension: str = ".txt"

    def __init__(
        self,
        output_folder: str = "reports",
        encoding: str = "utf-8",
    ):
        self.output_folder = Path(output_folder)
        self.encoding = encoding

    def export(
        self,
        data: List[Dict[str, Any]],
        filename: Optional[str] = None,
    ) -> Optional[Path]:
        """
        Экспортирует данные в файл.

        Args:
            data: Список словарей с данными
            filename: Имя файла (без пути). Если None - генерируется автоматически

        Returns:
            Path: Путь к созданному файлу или None если данных нет / запись не удалась
        """
        if not data:
            logger.warning("Нет данных для экспорта")
            return None

        self.output_folder.mkdir(parents=True, exist_ok=True)

        if not filename:
            filename = self._generate_filename()
        if not filename.endswith(self.file_extension):
            filename += self.file_extension

        file_path = self.output_folder / filename

        try:
            self._write(data, file_path)
        except OSError as e:
            logger.error(f"Ошибка экспорта в {file_path}: {e}")
            return None

        logger.info(f"Данные экспортированы: {file_path}")
        return file_path

    @abstractmethod
    def _write(self, data: List[Dict[str, Any]], file_path: Path) -> None:
        """Записывает данные в файл."""

    def _generate_filename(self) -> str:
        """Генерирует имя файла с текущей датой."""
        date_str = datetime.now().strftime("%Y-%m-%d_%H%M%S")
        return f"replication_{date_str}"

    def _get_all_columns(self, data: List[Dict[str, Any]]) -> List[str]:
        """Все уникальные колонки в порядке появления."""
        columns = []
        seen = set()
        for row in data:
            for key in row.keys():
                if key not in seen:
                    columns.append(key)
                    seen.add(key)
        return columns
