"""
Команда diff.

Сверка multicast групп AppDB с кэшем (или любыми двумя снапшотами).
Код возврата 1 если найдены расхождения.
"""


from ...appdb import load_snapshot, get_all_packet_replication_entries
from ...core.domain import ReplicationComparator
from ..utils import exporter_from_config
from ...core.logging import get_logger

logger = get_logger(__name__)


def cmd_diff(args, cfg) -> int:
    """Сравнивает --appdb (основной) и --cache (вторичный)."""
    table_name = cfg.appdb.table_name

    app_db_entries = get_all_packet_replication_entries(load_snapshot(args.appdb), table_name)
    cache_entries = get_all_packet_replication_entries(load_snapshot(args.cache), table_name)

    comparator = ReplicationComparator(
        primary_label=cfg.compare.primary_label,
        secondary_label=cfg.compare.secondary_label,
    )
    diff = comparator.compare(app_db_entries, cache_entries)

    format_type = args.format or cfg.output.default_format
    if format_type == "table":
        print(diff.format_detailed())
    elif diff.has_discrepancies:
        exporter = exporter_from_config(format_type, args, cfg)
        exporter.export([d.to_dict() for d in diff.discrepancies], "packet_replication_diff")
    else:
        print(diff.summary())

    if diff.has_discrepancies:
        logger.warning(f"Найдено расхождений: {diff.total}", operation="diff")
        return 1
    return 0
