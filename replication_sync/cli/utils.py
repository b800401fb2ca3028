"""
Утилиты CLI.

Общие функции для всех команд CLI.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from ..appdb.codec import build_key
from ..core.exceptions import SnapshotError, UnsupportedOperationError
from ..core.models import MulticastGroupEntry, UpdateType
from ..exporters import CSVExporter, ExcelExporter, JSONExporter, BaseExporter
from ..core.logging import get_logger

logger = get_logger(__name__)


def get_exporter(
    format_type: str,
    output_folder: str,
    delimiter: str = ",",
    excel_autofilter: bool = True,
    excel_freeze_header: bool = True,
) -> BaseExporter:
    """
    Возвращает экспортер для указанного формата.

    Args:
        format_type: excel, csv или json
        output_folder: Папка для отчётов
        delimiter: Разделитель для CSV
        excel_autofilter: Автофильтр в Excel
        excel_freeze_header: Закрепить заголовок в Excel
    """
    if format_type == "csv":
        return CSVExporter(output_folder=output_folder, delimiter=delimiter)
    if format_type == "json":
        return JSONExporter(output_folder=output_folder)
    return ExcelExporter(
        output_folder=output_folder,
        autofilter=excel_autofilter,
        freeze_header=excel_freeze_header,
    )


def parse_update_type(raw: Any) -> UpdateType:
    """
    Парсит тип обновления из файла запросов (регистр не важен).

    Raises:
        UnsupportedOperationError: Тип вне INSERT/MODIFY/DELETE
    """
    try:
        return UpdateType(str(raw).upper())
    except ValueError:
        raise UnsupportedOperationError(
            f"Unsupported update type: {raw}",
            update_type=raw,
        ) from None


def load_requests(path: str) -> List[Tuple[UpdateType, MulticastGroupEntry]]:
    """
    Загружает запросы на изменение из YAML/JSON файла.

    Формат:
        - type: INSERT
          group_id: 10
          replicas:
            - {port: Ethernet0, instance: 0}
            - [Ethernet4, 1]
        - type: DELETE
          group_id: 7

    Returns:
        List[Tuple[UpdateType, MulticastGroupEntry]]: Запросы в порядке файла

    Raises:
        SnapshotError: Файл не найден или неверной структуры
        UnsupportedOperationError: Неизвестный type
    """
    file_path = Path(path)
    if not file_path.exists():
        raise SnapshotError("Requests file not found", path=str(file_path))

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or []
    except (OSError, yaml.YAMLError) as e:
        raise SnapshotError(f"Cannot read requests: {e}", path=str(file_path)) from e

    if not isinstance(data, list):
        raise SnapshotError("Requests file must contain a list", path=str(file_path))

    requests = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict) or "group_id" not in item:
            raise SnapshotError(
                f"Request #{idx} must be a mapping with group_id",
                path=str(file_path),
            )
        update_type = parse_update_type(item.get("type", "INSERT"))
        try:
            entry = MulticastGroupEntry.from_dict(item)
        except (TypeError, ValueError) as e:
            raise SnapshotError(f"Request #{idx} is invalid: {e}", path=str(file_path)) from e
        requests.append((update_type, entry))

    logger.debug(f"Загружено запросов: {len(requests)} из {file_path}")
    return requests


def entries_to_rows(entries: List[MulticastGroupEntry], table_name: str) -> List[Dict[str, Any]]:
    """Плоские строки для экспорта: одна строка на группу."""
    rows = []
    for entry in sorted(entries, key=lambda e: e.group_id):
        rows.append({
            "group_id": entry.group_id,
            "key": build_key(entry.group_id, table_name),
            "replica_count": len(entry.replicas),
            "replicas": ", ".join(entry.port_instances()),
        })
    return rows


def exporter_from_config(format_type: str, args, cfg) -> BaseExporter:
    """Экспортер с настройками секции output и папкой из -o."""
    return get_exporter(
        format_type,
        args.output or cfg.output.output_folder,
        delimiter=cfg.output.csv_delimiter,
        excel_autofilter=cfg.output.excel_autofilter,
        excel_freeze_header=cfg.output.excel_freeze_header,
    )
