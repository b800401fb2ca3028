"""
Data Models для Replication Sync.

IR (intermediate representation) multicast группы и KFV записи AppDB.

Использование:
    from replication_sync.core.models import MulticastGroupEntry, Replica

    entry = MulticastGroupEntry(
        group_id=10,
        replicas=[Replica("Ethernet0", 0), Replica("Ethernet4", 1)],
    )

    # Создание из dict (например, из YAML запроса)
    entry = MulticastGroupEntry.from_dict(
        {"group_id": 10, "replicas": [{"port": "Ethernet0", "instance": 0}]}
    )
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Tuple, Union
from enum import Enum

from .constants import MAX_UINT32, OP_SET, OP_DEL


class UpdateType(str, Enum):
    """Тип обновления от control plane."""
    INSERT = "INSERT"
    MODIFY = "MODIFY"
    DELETE = "DELETE"


class KfvOperation(str, Enum):
    """Операция над ключом AppDB."""
    SET = OP_SET
    DEL = OP_DEL


def _require(data: Dict[str, Any], name: str) -> Any:
    if name not in data or data[name] is None:
        raise ValueError(f"отсутствует обязательное поле {name}")
    return data[name]


def _parse_uint32(name: str, value: Any) -> int:
    """int как есть, строка только если это точная запись десятичного числа."""
    if isinstance(value, str) and value.isdigit():
        value = int(value)
    return _check_uint32(name, value)


def _check_uint32(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} должен быть int, получен {type(value).__name__}")
    if value < 0 or value > MAX_UINT32:
        raise ValueError(f"{name} вне диапазона uint32: {value}")
    return value


@dataclass(frozen=True, order=True)
class Replica:
    """
    Одна реплика multicast группы.

    Ни port, ни instance по отдельности не уникальны в группе,
    уникальна только пара.

    Attributes:
        port: Имя порта (Ethernet0)
        instance: Номер инстанса (uint32)
    """
    port: str
    instance: int

    def __post_init__(self):
        if not isinstance(self.port, str):
            raise ValueError(f"port должен быть str, получен {type(self.port).__name__}")
        _check_uint32("instance", self.instance)

    @property
    def port_instance(self) -> str:
        """Диагностическая форма: port_instance (instance в decimal)."""
        return f"{self.port}_{self.instance}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Replica":
        """
        Создаёт Replica из словаря.

        Raises:
            ValueError: Нет port или instance, либо instance не uint32
        """
        return cls(
            port=_require(data, "port"),
            instance=_parse_uint32("instance", _require(data, "instance")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return {"port": self.port, "instance": self.instance}


@dataclass(frozen=True)
class MulticastGroupEntry:
    """
    Multicast группа (packet replication engine entry).

    replicas - множество: порядок не важен, дубликаты схлопываются.

    Attributes:
        group_id: ID группы (uint32)
        replicas: Реплики группы
    """
    group_id: int
    replicas: FrozenSet[Replica] = field(default_factory=frozenset)

    def __post_init__(self):
        _check_uint32("group_id", self.group_id)
        replicas = self.replicas
        if not isinstance(replicas, frozenset):
            replicas = frozenset(replicas)
        for replica in replicas:
            if not isinstance(replica, Replica):
                raise ValueError(f"Ожидалась Replica, получен {type(replica).__name__}")
        object.__setattr__(self, "replicas", replicas)

    def sorted_replicas(self) -> List[Replica]:
        """Реплики в детерминированном порядке (port, instance)."""
        return sorted(self.replicas)

    def port_instances(self) -> List[str]:
        """Отсортированные строки port_instance."""
        return sorted(r.port_instance for r in self.replicas)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MulticastGroupEntry":
        """Создаёт MulticastGroupEntry из словаря."""
        replicas = []
        for item in data.get("replicas") or []:
            if isinstance(item, Replica):
                replicas.append(item)
            elif isinstance(item, dict):
                replicas.append(Replica.from_dict(item))
            else:
                # Короткая форма: ["Ethernet0", 0]
                if isinstance(item, str) or len(item) != 2:
                    raise ValueError(f"реплика должна быть парой [port, instance], получено {item!r}")
                port, instance = item
                replicas.append(Replica(port, _parse_uint32("instance", instance)))
        group_id = _parse_uint32("group_id", _require(data, "group_id"))
        return cls(group_id=group_id, replicas=frozenset(replicas))

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return {
            "group_id": self.group_id,
            "replicas": [r.to_dict() for r in self.sorted_replicas()],
        }

    @classmethod
    def ensure_list(
        cls,
        data: Iterable[Union[Dict[str, Any], "MulticastGroupEntry"]],
    ) -> List["MulticastGroupEntry"]:
        """Конвертирует список dict или MulticastGroupEntry в список MulticastGroupEntry."""
        return [
            item if isinstance(item, MulticastGroupEntry) else cls.from_dict(item)
            for item in data
        ]


FieldValue = Tuple[str, str]


@dataclass
class KeyOpFieldsValues:
    """
    Мутация AppDB (KFV запись).

    SET всегда несёт полный набор полей ключа (без дельт),
    DEL - пустой набор.

    Attributes:
        key: AppDB ключ
        op: SET или DEL
        fields_values: Упорядоченный список (field, value)
    """
    key: str
    op: KfvOperation
    fields_values: List[FieldValue] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return {
            "key": self.key,
            "op": self.op.value,
            "fields": [[f, v] for f, v in self.fields_values],
        }

    def __str__(self) -> str:
        if not self.fields_values:
            return f"{self.op.value} {self.key}"
        fields_str = ", ".join(f"{f}={v}" for f, v in self.fields_values)
        return f"{self.op.value} {self.key} [{fields_str}]"


# Type aliases
GroupEntries = List[MulticastGroupEntry]
KfvUpdates = List[KeyOpFieldsValues]
