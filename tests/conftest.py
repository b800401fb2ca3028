"""
Pytest configuration и общие fixtures для тестов.

- scenario_entry: группа 10 с двумя репликами
- app_db_table: in-memory AppDB с несколькими таблицами
- write_snapshot: запись снапшота AppDB во временный файл
"""

import json
import pytest
from pathlib import Path
from typing import Dict

from replication_sync.core.models import MulticastGroupEntry, Replica
from replication_sync.appdb.table import InMemoryAppDbTable


TABLE = "REPLICATION_IP_MULTICAST_TABLE"


@pytest.fixture
def scenario_entry() -> MulticastGroupEntry:
    """Группа 10: Ethernet0/0 и Ethernet4/1."""
    return MulticastGroupEntry(
        group_id=10,
        replicas=[Replica("Ethernet0", 0), Replica("Ethernet4", 1)],
    )


@pytest.fixture
def app_db_data() -> Dict[str, Dict[str, str]]:
    """Содержимое AppDB: две multicast группы и ключ чужой таблицы."""
    return {
        f"{TABLE}:a": {
            "Ethernet0:0x0": "replica",
            "Ethernet4:0x1": "replica",
        },
        f"{TABLE}:7": {
            "Ethernet8:0x0": "replica",
        },
        "FIXED_ROUTER_INTERFACE_TABLE:rif-1": {
            "port": "Ethernet0",
            "src_mac": "00:02:03:04:05:06",
        },
    }


@pytest.fixture
def app_db_table(app_db_data) -> InMemoryAppDbTable:
    """In-memory AppDB."""
    return InMemoryAppDbTable(app_db_data)


@pytest.fixture
def write_snapshot(tmp_path):
    """
    Fixture для записи снапшота AppDB в JSON.

    Usage:
        path = write_snapshot("appdb.json", {"KEY": {"f": "v"}})
    """
    def _write(filename: str, data: Dict[str, Dict[str, str]]) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
