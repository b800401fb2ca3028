"""
Domain Layer для Replication Sync.

Чистая логика сравнения, не зависит от AppDB.

Использование:
    from replication_sync.core.domain import ReplicationComparator

    diff = ReplicationComparator().compare(app_db_entries, cache_entries)
    print(diff.format_detailed())
"""

from .replication import (
    ReplicationComparator,
    ReplicationDiff,
    Discrepancy,
    DiscrepancyKind,
    compare_packet_replication_entries,
)

__all__ = [
    "ReplicationComparator",
    "ReplicationDiff",
    "Discrepancy",
    "DiscrepancyKind",
    "compare_packet_replication_entries",
]
