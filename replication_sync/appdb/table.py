"""
AppDB таблица: контракт хранилища и in-memory реализация.

Ядро использует от хранилища только два метода:
- keys(): все ключи в AppDB (включая чужие таблицы)
- get(key): упорядоченный список (field, value) для ключа

InMemoryAppDbTable дополнительно умеет применять KFV мутации и
загружаться/сохраняться в снапшот (JSON или YAML):

    {
      "REPLICATION_IP_MULTICAST_TABLE:a": {"Ethernet0:0x0": "replica"},
      "FIXED_ROUTER_INTERFACE_TABLE:rif-1": {"port": "Ethernet0"}
    }

Пример использования:
    table = load_snapshot("appdb.json")
    entries = get_all_packet_replication_entries(table)
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Tuple, Union

import yaml

from ..core.exceptions import SnapshotError
from ..core.models import KeyOpFieldsValues, KfvOperation
from ..core.logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class AppDbTable(Protocol):
    """Контракт read-only доступа к AppDB."""

    def keys(self) -> List[str]:
        ...

    def get(self, key: str) -> List[Tuple[str, str]]:
        ...


class InMemoryAppDbTable:
    """
    AppDB в памяти.

    Порядок полей внутри ключа сохраняется (как в Redis hash
    при последовательной записи).

    Example:
        table = InMemoryAppDbTable()
        table.apply_all(kfv_updates)
        table.get("REPLICATION_IP_MULTICAST_TABLE:a")
    """

    def __init__(self, data: Optional[Dict[str, Dict[str, str]]] = None):
        self._data: Dict[str, Dict[str, str]] = {}
        for key, fields in (data or {}).items():
            self._data[key] = dict(fields or {})

    def keys(self) -> List[str]:
        """Все ключи AppDB."""
        return list(self._data.keys())

    def get(self, key: str) -> List[Tuple[str, str]]:
        """Поля ключа. Несуществующий ключ - пустой список."""
        return list(self._data.get(key, {}).items())

    def set(self, key: str, fields_values: Iterable[Tuple[str, str]]) -> None:
        """Полностью заменяет поля ключа."""
        self._data[key] = {f: v for f, v in fields_values}

    def delete(self, key: str) -> None:
        """Удаляет ключ (если есть)."""
        self._data.pop(key, None)

    def apply(self, kfv: KeyOpFieldsValues) -> None:
        """
        Применяет одну KFV мутацию.

        SET заменяет весь набор полей, DEL удаляет ключ.
        """
        if kfv.op == KfvOperation.SET:
            self.set(kfv.key, kfv.fields_values)
        else:
            self.delete(kfv.key)
        logger.debug(f"AppDB {kfv.op.value}", operation="apply", key=kfv.key)

    def apply_all(self, kfvs: Iterable[KeyOpFieldsValues]) -> int:
        """Применяет мутации по порядку. Возвращает количество."""
        count = 0
        for kfv in kfvs:
            self.apply(kfv)
            count += 1
        return count

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Снимок содержимого."""
        return {key: dict(fields) for key, fields in self._data.items()}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data


def _read_structured_file(file_path: Path) -> object:
    with open(file_path, "r", encoding="utf-8") as f:
        if file_path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(f)
        return json.load(f)


def load_snapshot(path: Union[str, Path]) -> InMemoryAppDbTable:
    """
    Загружает снапшот AppDB из JSON/YAML файла.

    Args:
        path: Путь к файлу

    Returns:
        InMemoryAppDbTable: Таблица с содержимым снапшота

    Raises:
        SnapshotError: Файл не найден, не парсится или неверной структуры
    """
    file_path = Path(path)
    if not file_path.exists():
        raise SnapshotError("Snapshot file not found", path=str(file_path))

    try:
        data = _read_structured_file(file_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SnapshotError(f"Cannot read snapshot: {e}", path=str(file_path)) from e

    data = data or {}
    if not isinstance(data, dict):
        raise SnapshotError(
            f"Snapshot must be a mapping of key -> fields, got {type(data).__name__}",
            path=str(file_path),
        )

    table = InMemoryAppDbTable()
    for key, fields in data.items():
        fields = fields or {}
        if not isinstance(fields, dict):
            raise SnapshotError(
                f"Fields of key {key!r} must be a mapping",
                path=str(file_path),
            )
        table.set(str(key), ((str(f), str(v)) for f, v in fields.items()))

    logger.debug(f"Снапшот загружен: {file_path} ({len(table)} ключей)")
    return table


def save_snapshot(table: InMemoryAppDbTable, path: Union[str, Path]) -> Path:
    """
    Сохраняет таблицу в снапшот (формат по расширению файла).

    Raises:
        SnapshotError: Ошибка записи
    """
    file_path = Path(path)
    data = table.to_dict()
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            if file_path.suffix.lower() in YAML_SUFFIXES:
                yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
            else:
                json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise SnapshotError(f"Cannot write snapshot: {e}", path=str(file_path)) from e

    logger.info(f"Снапшот сохранён: {file_path}")
    return file_path
