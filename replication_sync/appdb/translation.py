"""
Трансляция multicast групп IR <-> AppDB.

Запись:
    kfv_updates = []
    key = create_packet_replication_update(UpdateType.INSERT, entry, kfv_updates)
    # kfv_updates отправляются в AppDB пачкой вызывающей стороной

Чтение:
    entries = get_all_packet_replication_entries(table)

MODIFY выглядит ровно как INSERT: полная замена набора реплик.
Разницу разрешает потребитель AppDB (orchagent), а не этот слой.
"""

from typing import Iterable, List, Tuple

from ..core.constants import TABLE_NAME, REPLICA_FIELD_VALUE
from ..core.exceptions import UnsupportedOperationError
from ..core.logging import get_logger
from ..core.models import (
    KeyOpFieldsValues,
    KfvOperation,
    MulticastGroupEntry,
    Replica,
    UpdateType,
)
from .codec import (
    build_key,
    decode_replica,
    encode_replica,
    parse_group_id,
    strip_table_prefix,
    table_prefix,
)
from .table import AppDbTable

logger = get_logger(__name__)


def _create_entry_for_insert(
    entry: MulticastGroupEntry,
    kfv_updates: List[KeyOpFieldsValues],
    table_name: str,
) -> str:
    key = build_key(entry.group_id, table_name)
    # port и instance по отдельности не уникальны, поэтому имя поля - их пара
    fields_values = [
        (encode_replica(r.port, r.instance), REPLICA_FIELD_VALUE)
        for r in entry.sorted_replicas()
    ]
    kfv_updates.append(KeyOpFieldsValues(key=key, op=KfvOperation.SET, fields_values=fields_values))
    return key


def _create_entry_for_delete(
    entry: MulticastGroupEntry,
    kfv_updates: List[KeyOpFieldsValues],
    table_name: str,
) -> str:
    key = build_key(entry.group_id, table_name)
    kfv_updates.append(KeyOpFieldsValues(key=key, op=KfvOperation.DEL))
    return key


def create_packet_replication_update(
    update_type: UpdateType,
    entry: MulticastGroupEntry,
    kfv_updates: List[KeyOpFieldsValues],
    table_name: str = TABLE_NAME,
) -> str:
    """
    Транслирует IR update в KFV мутацию AppDB.

    Мутация добавляется в конец kfv_updates (батчинг - забота
    вызывающей стороны), ключ возвращается для логов/корреляции.

    Args:
        update_type: INSERT, MODIFY или DELETE
        entry: Multicast группа
        kfv_updates: Список для накопления мутаций
        table_name: Имя таблицы AppDB

    Returns:
        str: AppDB ключ мутации

    Raises:
        UnsupportedOperationError: Неизвестный тип обновления
    """
    logger.debug(
        f"{getattr(update_type, 'value', update_type)} IR packet replication entry: "
        f"group_id={entry.group_id} replicas={len(entry.replicas)}",
        operation="translate",
    )

    if update_type in (UpdateType.INSERT, UpdateType.MODIFY):
        return _create_entry_for_insert(entry, kfv_updates, table_name)
    if update_type == UpdateType.DELETE:
        return _create_entry_for_delete(entry, kfv_updates, table_name)

    raise UnsupportedOperationError(
        f"Unsupported update type: {update_type}",
        update_type=update_type,
    )


def build_packet_replication_updates(
    updates: Iterable[Tuple[UpdateType, MulticastGroupEntry]],
    table_name: str = TABLE_NAME,
) -> List[KeyOpFieldsValues]:
    """
    Транслирует пачку updates, сохраняя порядок вызовов.

    Args:
        updates: Пары (update_type, entry)
        table_name: Имя таблицы AppDB

    Returns:
        List[KeyOpFieldsValues]: Мутации в том же порядке
    """
    kfv_updates: List[KeyOpFieldsValues] = []
    for update_type, entry in updates:
        create_packet_replication_update(update_type, entry, kfv_updates, table_name)
    return kfv_updates


def get_all_packet_replication_keys(
    table: AppDbTable,
    table_name: str = TABLE_NAME,
) -> List[str]:
    """
    Ключи таблицы packet replication.

    Ключи других таблиц в той же AppDB игнорируются.
    """
    prefix = table_prefix(table_name)
    return [key for key in table.keys() if key.startswith(prefix)]


def _read_entry(table: AppDbTable, key: str, table_name: str) -> MulticastGroupEntry:
    group_id = parse_group_id(strip_table_prefix(key, table_name), key=key)

    replicas: List[Replica] = []
    # Значение поля не используется
    for field_name, _value in table.get(key):
        replicas.append(decode_replica(field_name, key=key))

    return MulticastGroupEntry(group_id=group_id, replicas=frozenset(replicas))


def get_all_packet_replication_entries(
    table: AppDbTable,
    table_name: str = TABLE_NAME,
) -> List[MulticastGroupEntry]:
    """
    Восстанавливает все multicast группы из AppDB.

    Каждый ключ - одна группа со всеми репликами. Ключ без полей -
    группа без реплик (допустимо).

    Порядок результата не гарантируется.

    Raises:
        InvalidEncodingError: Любой битый ключ или поле прерывает чтение
            целиком, чтобы не выдать частичную картину за полную
    """
    entries: List[MulticastGroupEntry] = []

    for key in get_all_packet_replication_keys(table, table_name):
        logger.debug(f"Read packet replication engine entry {key} from App DB", operation="read")
        entries.append(_read_entry(table, key, table_name))

    logger.info(f"Прочитано multicast групп из AppDB: {len(entries)}", operation="read")
    return entries


def read_packet_replication_entries(
    table: AppDbTable,
    keys: Iterable[str],
    table_name: str = TABLE_NAME,
) -> List[MulticastGroupEntry]:
    """
    Читает группы по явному списку ключей.

    В отличие от get_all_packet_replication_entries ключ чужой
    таблицы здесь - InvalidEncodingError, а не фильтрация.
    """
    return [_read_entry(table, key, table_name) for key in keys]
