"""
Модули экспорта отчётов.

Поддерживаемые форматы:
- Excel (.xlsx) - с форматированием и подсветкой расхождений
- CSV (.csv) - с настраиваемым разделителем
- JSON (.json) - структурированные данные
"""

from .base import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter
from .excel import ExcelExporter

__all__ = ["BaseExporter", "CSVExporter", "JSONExporter", "ExcelExporter"]
