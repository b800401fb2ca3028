"""
Replication Sync - трансляция и сверка packet replication (multicast) записей.

Модуль предоставляет:
- Трансляцию IR multicast групп в KFV мутации AppDB (INSERT/MODIFY/DELETE)
- Чтение multicast групп обратно из AppDB
- Сверку двух наборов групп (AppDB против кэша) с отчётом расхождений
- Экспорт отчётов (Excel, CSV, JSON)

Примеры использования:
    # CLI
    python -m replication_sync dump --appdb appdb.json
    python -m replication_sync diff --appdb appdb.json --cache cache.json
    python -m replication_sync translate --requests updates.yaml

    # Python API
    from replication_sync import (
        MulticastGroupEntry, Replica, UpdateType,
        create_packet_replication_update, compare_packet_replication_entries,
    )

    kfv_updates = []
    entry = MulticastGroupEntry(10, [Replica("Ethernet0", 0)])
    create_packet_replication_update(UpdateType.INSERT, entry, kfv_updates)

Версия: 1.0.0
"""

__version__ = "1.0.0"

from .core.models import Replica, MulticastGroupEntry, UpdateType, KfvOperation, KeyOpFieldsValues
from .core.exceptions import (
    ReplicationSyncError,
    InvalidEncodingError,
    UnsupportedOperationError,
)
from .appdb import (
    InMemoryAppDbTable,
    load_snapshot,
    create_packet_replication_update,
    get_all_packet_replication_entries,
)
from .core.domain import ReplicationComparator, compare_packet_replication_entries

__all__ = [
    "__version__",
    # Models
    "Replica",
    "MulticastGroupEntry",
    "UpdateType",
    "KfvOperation",
    "KeyOpFieldsValues",
    # Exceptions
    "ReplicationSyncError",
    "InvalidEncodingError",
    "UnsupportedOperationError",
    # AppDB
    "InMemoryAppDbTable",
    "load_snapshot",
    "create_packet_replication_update",
    "get_all_packet_replication_entries",
    # Compare
    "ReplicationComparator",
    "compare_packet_replication_entries",
]
