"""
JSON экспортер.

Пример использования:
    exporter = JSONExporter(indent=2)
    exporter.export(diff_rows, "diff.json")
"""

import json
from pathlib import Path
from datetime import datetime
from typing import List, Dict, Any, Optional

from .base import BaseExporter
from ..core.logging import get_logger

logger = get_logger(__name__)


class JSONExporter(BaseExporter):
    """
    Экспортер в JSON.

    Attributes:
        indent: Отступ (None = компактный)
        include_metadata: Добавить метаданные (дата, количество записей)
    """

    file_extension = ".json"

    def __init__(
        self,
        output_folder: str = "reports",
        encoding: str = "utf-8",
        indent: Optional[int] = 2,
        include_metadata: bool = True,
    ):
        super().__init__(output_folder, encoding)
        self.indent = indent
        self.include_metadata = include_metadata

    def _write(self, data: List[Dict[str, Any]], file_path: Path) -> None:
        if self.include_metadata:
            output = {
                "metadata": {
                    "generated_at": datetime.now().isoformat(),
                    "total_records": len(data),
                    "columns": self._get_all_columns(data),
                },
                "data": data,
            }
        else:
            output = data

        with open(file_path, "w", encoding=self.encoding) as f:
            json.dump(output, f, indent=self.indent, ensure_ascii=False, default=str)

        logger.debug(f"JSON записан: {len(data)} записей")
