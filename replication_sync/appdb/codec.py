"""
Кодеки ключа и поля AppDB для таблицы packet replication.

Ключ:  <table>:<hex group id>      - hex без 0x и без padding
Поле:  <port>:0x<hex instance>     - hex с обязательным 0x

Пример:
    >>> build_key(10)
    'REPLICATION_IP_MULTICAST_TABLE:a'
    >>> encode_replica("Ethernet4", 1)
    'Ethernet4:0x1'
    >>> decode_replica("Ethernet4:0x1")
    Replica(port='Ethernet4', instance=1)
"""

import re
from typing import Optional

from ..core.constants import TABLE_NAME, KEY_SEPARATOR, HEX_MARKER, MAX_UINT32
from ..core.exceptions import InvalidEncodingError
from ..core.models import Replica

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def table_prefix(table_name: str = TABLE_NAME) -> str:
    """Префикс ключей таблицы: '<table>:'."""
    return f"{table_name}{KEY_SEPARATOR}"


def _parse_hex_uint32(text: str) -> int:
    """
    Парсит hex в uint32.

    Допускает префикс 0x/0X. Пустая строка, не-hex символы
    и переполнение uint32 - ValueError.
    """
    digits = text
    if digits[:2].lower() == HEX_MARKER:
        digits = digits[2:]
    if not _HEX_RE.fullmatch(digits):
        raise ValueError(f"not a hex number: {text!r}")
    value = int(digits, 16)
    if value > MAX_UINT32:
        raise ValueError(f"hex value overflows uint32: {text!r}")
    return value


def build_key(group_id: int, table_name: str = TABLE_NAME) -> str:
    """
    Формирует AppDB ключ multicast группы.

    Args:
        group_id: ID группы
        table_name: Имя таблицы

    Returns:
        str: Ключ вида REPLICATION_IP_MULTICAST_TABLE:a
    """
    return f"{table_prefix(table_name)}{group_id:x}"


def strip_table_prefix(key: str, table_name: str = TABLE_NAME) -> str:
    """
    Отрезает префикс таблицы от ключа.

    Args:
        key: Полный AppDB ключ
        table_name: Имя таблицы

    Returns:
        str: hex group id

    Raises:
        InvalidEncodingError: Ключ не начинается с '<table>:'
    """
    prefix = table_prefix(table_name)
    if not key.startswith(prefix):
        raise InvalidEncodingError(
            "Invalid packet replication App DB key",
            key=key,
        )
    return key[len(prefix):]


def parse_group_id(group_id_hex: str, key: Optional[str] = None) -> int:
    """
    Парсит hex group id.

    Args:
        group_id_hex: Часть ключа после префикса
        key: Полный ключ (только для текста ошибки)

    Raises:
        InvalidEncodingError: Не hex или вне uint32
    """
    try:
        return _parse_hex_uint32(group_id_hex)
    except ValueError:
        raise InvalidEncodingError(
            "Failed to parse multicast_group_id from App DB packet replication entry key",
            key=key,
            value=group_id_hex,
        ) from None


def encode_replica(port: str, instance: int) -> str:
    """Имя поля реплики: <port>:0x<hex instance>."""
    return f"{port}{KEY_SEPARATOR}{HEX_MARKER}{instance:x}"


def decode_replica(field_name: str, key: Optional[str] = None) -> Replica:
    """
    Разбирает имя поля в Replica.

    Делит по ПОСЛЕДНЕМУ ':' - порт сам может содержать ':'.

    Args:
        field_name: Имя поля из AppDB
        key: Ключ AppDB (только для текста ошибки)

    Raises:
        InvalidEncodingError: Нет разделителя или instance не hex
    """
    port, sep, instance_str = field_name.rpartition(KEY_SEPARATOR)
    if not sep:
        raise InvalidEncodingError(
            "Unexpected multicast port/instance format for APP DB packet replication",
            key=key,
            field=field_name,
        )
    try:
        instance = _parse_hex_uint32(instance_str)
    except ValueError:
        raise InvalidEncodingError(
            "Unexpected replica instance value for APP DB packet replication",
            key=key,
            field=field_name,
            value=instance_str,
        ) from None
    return Replica(port=port, instance=instance)
