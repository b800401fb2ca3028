"""
AppDB слой: кодеки ключей/полей, трансляция IR <-> KFV и таблица.

Использование:
    from replication_sync.appdb import (
        create_packet_replication_update,
        get_all_packet_replication_entries,
        load_snapshot,
    )
"""

from .codec import (
    table_prefix,
    build_key,
    strip_table_prefix,
    parse_group_id,
    encode_replica,
    decode_replica,
)
from .table import AppDbTable, InMemoryAppDbTable, load_snapshot, save_snapshot
from .translation import (
    create_packet_replication_update,
    build_packet_replication_updates,
    get_all_packet_replication_keys,
    get_all_packet_replication_entries,
    read_packet_replication_entries,
)

__all__ = [
    "table_prefix",
    "build_key",
    "strip_table_prefix",
    "parse_group_id",
    "encode_replica",
    "decode_replica",
    "AppDbTable",
    "InMemoryAppDbTable",
    "load_snapshot",
    "save_snapshot",
    "create_packet_replication_update",
    "build_packet_replication_updates",
    "get_all_packet_replication_keys",
    "get_all_packet_replication_entries",
    "read_packet_replication_entries",
]
