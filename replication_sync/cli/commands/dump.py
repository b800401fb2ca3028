"""
Команда dump.

Чтение multicast групп из снапшота AppDB.
"""


from ...appdb import load_snapshot, get_all_packet_replication_entries
from ..utils import entries_to_rows, exporter_from_config
from ...core.logging import get_logger

logger = get_logger(__name__)


def cmd_dump(args, cfg) -> int:
    """
    Выводит multicast группы из AppDB.

    Битый ключ или поле прерывает команду целиком (InvalidEncodingError).
    """
    table_name = cfg.appdb.table_name
    table = load_snapshot(args.appdb)
    entries = get_all_packet_replication_entries(table, table_name)
    rows = entries_to_rows(entries, table_name)

    format_type = args.format or cfg.output.default_format
    if format_type == "table":
        if not rows:
            print("No packet replication entries")
            return 0
        print(f"{'GROUP':>10}  {'KEY':<40}  REPLICAS")
        for row in rows:
            print(f"{row['group_id']:>10}  {row['key']:<40}  {row['replicas']}")
        print(f"\nTotal: {len(rows)} group(s)")
        return 0

    exporter = exporter_from_config(format_type, args, cfg)
    exporter.export(rows, "packet_replication_entries")
    return 0
