"""
Тесты трансляции IR <-> AppDB.

Проверяет:
- INSERT/MODIFY -> SET с полным набором полей
- DELETE -> DEL без полей
- Неизвестный тип -> UnsupportedOperationError
- Чтение всех групп из AppDB и фильтрацию чужих таблиц
- Битые ключи/поля прерывают чтение целиком
"""

import pytest

from replication_sync.appdb.table import InMemoryAppDbTable
from replication_sync.appdb.translation import (
    create_packet_replication_update,
    build_packet_replication_updates,
    get_all_packet_replication_keys,
    get_all_packet_replication_entries,
    read_packet_replication_entries,
)
from replication_sync.core.exceptions import InvalidEncodingError, UnsupportedOperationError
from replication_sync.core.models import (
    KfvOperation,
    MulticastGroupEntry,
    Replica,
    UpdateType,
)

TABLE = "REPLICATION_IP_MULTICAST_TABLE"


class TestCreateUpdate:
    """Тесты сериализации update в KFV."""

    def test_insert_scenario(self, scenario_entry):
        """Группа 10 -> ключ ...:a и два поля с placeholder."""
        kfv_updates = []
        key = create_packet_replication_update(UpdateType.INSERT, scenario_entry, kfv_updates)

        assert key == f"{TABLE}:a"
        assert len(kfv_updates) == 1
        kfv = kfv_updates[0]
        assert kfv.key == key
        assert kfv.op == KfvOperation.SET
        assert dict(kfv.fields_values) == {
            "Ethernet0:0x0": "replica",
            "Ethernet4:0x1": "replica",
        }

    def test_insert_is_idempotent(self, scenario_entry):
        """Дважды INSERT одной группы - одинаковый ключ и поля."""
        first, second = [], []
        key1 = create_packet_replication_update(UpdateType.INSERT, scenario_entry, first)
        key2 = create_packet_replication_update(UpdateType.INSERT, scenario_entry, second)

        assert key1 == key2
        assert first[0].fields_values == second[0].fields_values

    def test_field_order_is_deterministic(self):
        """Порядок полей не зависит от порядка реплик на входе."""
        a = MulticastGroupEntry(1, [Replica("Ethernet8", 2), Replica("Ethernet0", 5), Replica("Ethernet0", 1)])
        b = MulticastGroupEntry(1, [Replica("Ethernet0", 1), Replica("Ethernet8", 2), Replica("Ethernet0", 5)])
        updates = build_packet_replication_updates([(UpdateType.INSERT, a), (UpdateType.INSERT, b)])

        assert updates[0].fields_values == updates[1].fields_values
        assert [f for f, _ in updates[0].fields_values] == [
            "Ethernet0:0x1",
            "Ethernet0:0x5",
            "Ethernet8:0x2",
        ]

    def test_modify_looks_like_insert(self, scenario_entry):
        """MODIFY - полная замена, ровно как INSERT."""
        inserts, modifies = [], []
        create_packet_replication_update(UpdateType.INSERT, scenario_entry, inserts)
        create_packet_replication_update(UpdateType.MODIFY, scenario_entry, modifies)

        assert inserts[0].to_dict() == modifies[0].to_dict()

    def test_delete_has_no_fields(self, scenario_entry):
        kfv_updates = []
        key = create_packet_replication_update(UpdateType.DELETE, scenario_entry, kfv_updates)

        assert key == f"{TABLE}:a"
        assert kfv_updates[0].op == KfvOperation.DEL
        assert kfv_updates[0].fields_values == []

    def test_empty_group_insert(self):
        kfv_updates = []
        create_packet_replication_update(UpdateType.INSERT, MulticastGroupEntry(3), kfv_updates)

        assert kfv_updates[0].op == KfvOperation.SET
        assert kfv_updates[0].fields_values == []

    def test_unsupported_update_type(self, scenario_entry):
        """Неизвестный тип - ошибка, в список ничего не добавлено."""
        kfv_updates = []
        with pytest.raises(UnsupportedOperationError) as exc_info:
            create_packet_replication_update("UNSPECIFIED", scenario_entry, kfv_updates)

        assert kfv_updates == []
        assert exc_info.value.details["update_type"] == "UNSPECIFIED"

    def test_updates_appended_in_call_order(self, scenario_entry):
        """Мутации копятся в переданном списке в порядке вызовов."""
        other = MulticastGroupEntry(7, [Replica("Ethernet8", 0)])
        kfv_updates = []
        create_packet_replication_update(UpdateType.INSERT, scenario_entry, kfv_updates)
        create_packet_replication_update(UpdateType.DELETE, other, kfv_updates)
        create_packet_replication_update(UpdateType.MODIFY, other, kfv_updates)

        assert [(k.key, k.op) for k in kfv_updates] == [
            (f"{TABLE}:a", KfvOperation.SET),
            (f"{TABLE}:7", KfvOperation.DEL),
            (f"{TABLE}:7", KfvOperation.SET),
        ]

    def test_custom_table_name(self, scenario_entry):
        kfv_updates = []
        key = create_packet_replication_update(
            UpdateType.INSERT, scenario_entry, kfv_updates, table_name="TEST_TABLE",
        )
        assert key == "TEST_TABLE:a"


class TestReadEntries:
    """Тесты чтения групп из AppDB."""

    def test_keys_ignore_other_tables(self, app_db_table):
        keys = get_all_packet_replication_keys(app_db_table)
        assert sorted(keys) == [f"{TABLE}:7", f"{TABLE}:a"]

    def test_read_all_entries(self, app_db_table):
        entries = get_all_packet_replication_entries(app_db_table)
        by_id = {e.group_id: e for e in entries}

        assert set(by_id) == {7, 10}
        assert by_id[10].replicas == frozenset({Replica("Ethernet0", 0), Replica("Ethernet4", 1)})
        assert by_id[7].replicas == frozenset({Replica("Ethernet8", 0)})

    def test_empty_table(self):
        assert get_all_packet_replication_entries(InMemoryAppDbTable()) == []

    def test_only_other_tables(self):
        table = InMemoryAppDbTable({"ROUTER_TABLE:r1": {"port": "Ethernet0"}})
        assert get_all_packet_replication_entries(table) == []

    def test_key_without_fields_is_empty_group(self):
        table = InMemoryAppDbTable({f"{TABLE}:5": {}})
        entries = get_all_packet_replication_entries(table)

        assert entries == [MulticastGroupEntry(5)]
        assert entries[0].replicas == frozenset()

    def test_field_value_is_ignored(self):
        table = InMemoryAppDbTable({f"{TABLE}:1": {"Ethernet0:0x2": "anything"}})
        entries = get_all_packet_replication_entries(table)
        assert entries[0].replicas == frozenset({Replica("Ethernet0", 2)})

    def test_malformed_group_id_fails_whole_read(self, app_db_data):
        """Один битый ключ - ошибка всего чтения, а не пропуск."""
        app_db_data[f"{TABLE}:zz"] = {"Ethernet0:0x0": "replica"}
        with pytest.raises(InvalidEncodingError) as exc_info:
            get_all_packet_replication_entries(InMemoryAppDbTable(app_db_data))
        assert exc_info.value.key == f"{TABLE}:zz"

    def test_malformed_field_fails_whole_read(self, app_db_data):
        app_db_data[f"{TABLE}:b"] = {"Ethernet0": "replica"}
        with pytest.raises(InvalidEncodingError) as exc_info:
            get_all_packet_replication_entries(InMemoryAppDbTable(app_db_data))
        assert exc_info.value.field == "Ethernet0"

    def test_malformed_instance_fails_whole_read(self):
        table = InMemoryAppDbTable({f"{TABLE}:1": {"Ethernet0:0xqq": "replica"}})
        with pytest.raises(InvalidEncodingError):
            get_all_packet_replication_entries(table)

    def test_wrong_table_key_fails_explicit_read(self):
        """Ключ чужой таблицы при явном чтении - InvalidEncodingError."""
        table = InMemoryAppDbTable({"wrongtable:a": {"Ethernet0:0x0": "replica"}})
        with pytest.raises(InvalidEncodingError):
            read_packet_replication_entries(table, ["wrongtable:a"])

    def test_round_trip_through_table(self, scenario_entry):
        """INSERT -> apply -> чтение возвращает ту же группу."""
        table = InMemoryAppDbTable()
        table.apply_all(build_packet_replication_updates([(UpdateType.INSERT, scenario_entry)]))

        assert get_all_packet_replication_entries(table) == [scenario_entry]

    def test_modify_replaces_replicas(self, scenario_entry):
        """MODIFY полностью заменяет набор реплик ключа."""
        modified = MulticastGroupEntry(10, [Replica("Ethernet12", 3)])
        table = InMemoryAppDbTable()
        table.apply_all(build_packet_replication_updates([
            (UpdateType.INSERT, scenario_entry),
            (UpdateType.MODIFY, modified),
        ]))

        assert get_all_packet_replication_entries(table) == [modified]

    def test_delete_removes_group(self, scenario_entry):
        table = InMemoryAppDbTable()
        table.apply_all(build_packet_replication_updates([
            (UpdateType.INSERT, scenario_entry),
            (UpdateType.DELETE, scenario_entry),
        ]))

        assert get_all_packet_replication_entries(table) == []
