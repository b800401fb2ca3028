"""
CSV экспортер.

Пример использования:
    exporter = CSVExporter(delimiter=";")
    exporter.export(rows, "groups.csv")
"""

import csv
from pathlib import Path
from typing import List, Dict, Any

from .base import BaseExporter
from ..core.logging import get_logger

logger = get_logger(__name__)


class CSVExporter(BaseExporter):
    """
    Экспортер в CSV.

    Attributes:
        delimiter: Разделитель полей (или имя: comma, semicolon, tab, pipe)
    """

    file_extension = ".csv"

    DELIMITERS = {
        "comma": ",",
        "semicolon": ";",
        "tab": "\t",
        "pipe": "|",
    }

    def __init__(
        self,
        output_folder: str = "reports",
        encoding: str = "utf-8",
        delimiter: str = ",",
    ):
        super().__init__(output_folder, encoding)
        self.delimiter = self.DELIMITERS.get(delimiter, delimiter)

    def _write(self, data: List[Dict[str, Any]], file_path: Path) -> None:
        columns = self._get_all_columns(data)

        with open(file_path, "w", newline="", encoding=self.encoding) as f:
            writer = csv.DictWriter(
                f,
                fieldnames=columns,
                delimiter=self.delimiter,
                extrasaction="ignore",
            )
            writer.writeheader()
            writer.writerows(data)

        logger.debug(f"CSV записан: {len(data)} строк")
