"""
Domain Layer: сравнение packet replication записей.

Чистые функции - не зависят от AppDB и кэша. На вход два набора
MulticastGroupEntry, полученных независимо (обычно AppDB и кэш
P4RT), на выход - список расхождений.

Пример использования:
    from replication_sync.core.domain.replication import compare_packet_replication_entries

    failures = compare_packet_replication_entries(entries_app_db, entries_cache)
    for failure in failures:
        print(failure)
    # Packet replication cache is missing replica Ethernet0_0 for group id 10
    # APP DB is missing multicast group ID 7

Расхождения - не ошибки: сравнение всегда завершается и возвращает
(возможно пустой) отчёт.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from ..constants import DEFAULT_PRIMARY_LABEL, DEFAULT_SECONDARY_LABEL
from ..models import MulticastGroupEntry

EntryLike = Union[MulticastGroupEntry, Dict[str, Any]]


class DiscrepancyKind(str, Enum):
    """Тип расхождения."""
    MISSING_GROUP = "missing_group"
    MISSING_REPLICA = "missing_replica"


@dataclass
class Discrepancy:
    """
    Одно атомарное расхождение.

    Attributes:
        kind: Группа или реплика
        group_id: ID multicast группы
        missing_from: Подпись стороны, где объекта нет
        replica: port_instance (только для MISSING_REPLICA)
    """
    kind: DiscrepancyKind
    group_id: int
    missing_from: str
    replica: str = ""

    def __str__(self) -> str:
        if self.kind == DiscrepancyKind.MISSING_GROUP:
            return f"{self.missing_from} is missing multicast group ID {self.group_id}"
        return (
            f"{self.missing_from} is missing replica {self.replica} "
            f"for group id {self.group_id}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь."""
        return {
            "kind": self.kind.value,
            "group_id": self.group_id,
            "replica": self.replica,
            "missing_from": self.missing_from,
            "message": str(self),
        }


@dataclass
class ReplicationDiff:
    """
    Результат сравнения двух наборов multicast групп.

    Attributes:
        primary_label: Подпись основной стороны (APP DB)
        secondary_label: Подпись второй стороны (кэш)
        discrepancies: Расхождения в порядке возрастания group id
    """
    primary_label: str = DEFAULT_PRIMARY_LABEL
    secondary_label: str = DEFAULT_SECONDARY_LABEL
    discrepancies: List[Discrepancy] = field(default_factory=list)

    @property
    def has_discrepancies(self) -> bool:
        return bool(self.discrepancies)

    @property
    def total(self) -> int:
        return len(self.discrepancies)

    def messages(self) -> List[str]:
        """Расхождения в виде строк - одна строка на расхождение."""
        return [str(d) for d in self.discrepancies]

    def count_by(self, kind: DiscrepancyKind, missing_from: Optional[str] = None) -> int:
        return len([
            d for d in self.discrepancies
            if d.kind == kind and (missing_from is None or d.missing_from == missing_from)
        ])

    def summary(self) -> str:
        """Краткая сводка."""
        if not self.discrepancies:
            return f"{self.primary_label} vs {self.secondary_label}: consistent"

        parts = []
        for label in (self.secondary_label, self.primary_label):
            groups = self.count_by(DiscrepancyKind.MISSING_GROUP, label)
            replicas = self.count_by(DiscrepancyKind.MISSING_REPLICA, label)
            if groups or replicas:
                parts.append(f"{label} missing {groups} group(s), {replicas} replica(s)")
        return f"{self.primary_label} vs {self.secondary_label}: {'; '.join(parts)}"

    def format_detailed(self) -> str:
        """Сводка и список всех расхождений."""
        lines = [self.summary()]
        for message in self.messages():
            lines.append(f"  {message}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь."""
        return {
            "primary": self.primary_label,
            "secondary": self.secondary_label,
            "total": self.total,
            "discrepancies": [d.to_dict() for d in self.discrepancies],
        }


class ReplicationComparator:
    """
    Двухуровневое сравнение: группы, затем реплики внутри групп.

    Example:
        comparator = ReplicationComparator(primary_label="APP DB", secondary_label="cache")
        diff = comparator.compare(app_db_entries, cache_entries)
        print(diff.format_detailed())
    """

    def __init__(
        self,
        primary_label: str = DEFAULT_PRIMARY_LABEL,
        secondary_label: str = DEFAULT_SECONDARY_LABEL,
    ):
        self.primary_label = primary_label
        self.secondary_label = secondary_label

    @staticmethod
    def _index_by_group_id(entries: Iterable[EntryLike]) -> Dict[int, MulticastGroupEntry]:
        # Дубли group id не должны встречаться, но при них побеждает последний
        index: Dict[int, MulticastGroupEntry] = {}
        for entry in MulticastGroupEntry.ensure_list(entries):
            index[entry.group_id] = entry
        return dict(sorted(index.items()))

    def _compare_replicas(
        self,
        primary: MulticastGroupEntry,
        secondary: MulticastGroupEntry,
        result: List[Discrepancy],
    ) -> None:
        # group id совпадает - сравниваются только записи с общим ID
        primary_pi = set(primary.port_instances())
        secondary_pi = set(secondary.port_instances())

        for pi in sorted(primary_pi - secondary_pi):
            result.append(Discrepancy(
                kind=DiscrepancyKind.MISSING_REPLICA,
                group_id=primary.group_id,
                missing_from=self.secondary_label,
                replica=pi,
            ))

        for pi in sorted(secondary_pi - primary_pi):
            result.append(Discrepancy(
                kind=DiscrepancyKind.MISSING_REPLICA,
                group_id=primary.group_id,
                missing_from=self.primary_label,
                replica=pi,
            ))

    def compare(
        self,
        primary: Iterable[EntryLike],
        secondary: Iterable[EntryLike],
    ) -> ReplicationDiff:
        """
        Сравнивает два набора групп.

        Args:
            primary: Записи основной стороны (AppDB)
            secondary: Записи второй стороны (кэш)

        Returns:
            ReplicationDiff: Расхождения (пустой если наборы совпадают)
        """
        primary_map = self._index_by_group_id(primary)
        secondary_map = self._index_by_group_id(secondary)
        discrepancies: List[Discrepancy] = []

        for group_id, entry in primary_map.items():
            if group_id not in secondary_map:
                discrepancies.append(Discrepancy(
                    kind=DiscrepancyKind.MISSING_GROUP,
                    group_id=group_id,
                    missing_from=self.secondary_label,
                ))
                continue
            self._compare_replicas(entry, secondary_map[group_id], discrepancies)

        # Общие группы уже сравнены в первом проходе
        for group_id in secondary_map:
            if group_id not in primary_map:
                discrepancies.append(Discrepancy(
                    kind=DiscrepancyKind.MISSING_GROUP,
                    group_id=group_id,
                    missing_from=self.primary_label,
                ))

        return ReplicationDiff(
            primary_label=self.primary_label,
            secondary_label=self.secondary_label,
            discrepancies=discrepancies,
        )


def compare_packet_replication_entries(
    entries_primary: Iterable[EntryLike],
    entries_secondary: Iterable[EntryLike],
    primary_label: str = DEFAULT_PRIMARY_LABEL,
    secondary_label: str = DEFAULT_SECONDARY_LABEL,
) -> List[str]:
    """
    Сравнивает два набора групп и возвращает расхождения строками.

    Args:
        entries_primary: Записи AppDB
        entries_secondary: Записи кэша
        primary_label: Подпись основной стороны
        secondary_label: Подпись второй стороны

    Returns:
        List[str]: По одной строке на каждое атомарное расхождение
    """
    comparator = ReplicationComparator(primary_label, secondary_label)
    return comparator.compare(entries_primary, entries_secondary).messages()
