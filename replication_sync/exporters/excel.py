"""
Excel экспортер с форматированием.

Заголовок, автофильтр, закреплённая первая строка и подсветка
типа расхождения в отчёте сравнения.

Пример использования:
    exporter = ExcelExporter(autofilter=True, freeze_header=True)
    exporter.export(diff_rows, "diff.xlsx")
"""

from pathlib import Path
from typing import List, Dict, Any, Optional

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from .base import BaseExporter
from ..core.logging import get_logger

logger = get_logger(__name__)


COLORS = {
    "header_bg": "4472C4",
    "header_font": "FFFFFF",
    "missing_group": "FFC7CE",    # Красный
    "missing_replica": "FFEB9C",  # Жёлтый
}


class ExcelExporter(BaseExporter):
    """
    Экспортер в Excel.

    Attributes:
        autofilter: Включить автофильтр
        freeze_header: Закрепить строку заголовка
        color_rules: {column: {value: color_hex}}, по умолчанию подсвечивается kind
    """

    file_extension = ".xlsx"

    def __init__(
        self,
        output_folder: str = "reports",
        autofilter: bool = True,
        freeze_header: bool = True,
        color_rules: Optional[Dict[str, Dict[str, str]]] = None,
    ):
        super().__init__(output_folder, encoding="utf-8")
        self.autofilter = autofilter
        self.freeze_header = freeze_header
        self.color_rules = color_rules or {
            "kind": {
                "missing_group": COLORS["missing_group"],
                "missing_replica": COLORS["missing_replica"],
            },
        }

        self.header_font = Font(bold=True, color=COLORS["header_font"])
        self.header_fill = PatternFill(
            start_color=COLORS["header_bg"],
            end_color=COLORS["header_bg"],
            fill_type="solid",
        )
        thin_border = Side(style="thin", color="D9D9D9")
        self.cell_border = Border(
            left=thin_border, right=thin_border, top=thin_border, bottom=thin_border
        )

    def _write(self, data: List[Dict[str, Any]], file_path: Path) -> None:
        wb = Workbook()
        ws = wb.active
        ws.title = "Data"

        columns = self._get_all_columns(data)

        for col_idx, column in enumerate(columns, start=1):
            cell = ws.cell(row=1, column=col_idx, value=column.upper())
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = self.cell_border

        for row_idx, row in enumerate(data, start=2):
            for col_idx, column in enumerate(columns, start=1):
                value = row.get(column, "")
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = self.cell_border
                color = self.color_rules.get(column.lower(), {}).get(str(value).lower())
                if color:
                    cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")

        # Ширина колонок по самому длинному значению, максимум 50
        for col_idx, column in enumerate(columns, start=1):
            max_length = max([len(column)] + [len(str(row.get(column, ""))) for row in data])
            ws.column_dimensions[get_column_letter(col_idx)].width = min(max_length + 2, 50)

        if self.autofilter:
            ws.auto_filter.ref = ws.dimensions
        if self.freeze_header:
            ws.freeze_panes = "A2"

        wb.save(file_path)
        logger.debug(f"Excel записан: {len(data)} строк, {len(columns)} колонок")
