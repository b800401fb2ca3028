"""
Команда translate.

Превращает запросы INSERT/MODIFY/DELETE в KFV мутации AppDB.
С --apply мутации применяются к снапшоту --appdb и он сохраняется.
"""

import json

from ...appdb import build_packet_replication_updates, load_snapshot, save_snapshot
from ...core.exceptions import SnapshotError
from ..utils import load_requests
from ...core.logging import get_logger

logger = get_logger(__name__)


def cmd_translate(args, cfg) -> int:
    """Печатает мутации и (опционально) применяет их к снапшоту."""
    if args.apply and not args.appdb:
        raise SnapshotError("--apply requires --appdb snapshot")

    requests = load_requests(args.requests)
    kfv_updates = build_packet_replication_updates(requests, cfg.appdb.table_name)

    if args.json:
        print(json.dumps([kfv.to_dict() for kfv in kfv_updates], indent=2, ensure_ascii=False))
    else:
        for kfv in kfv_updates:
            print(kfv)

    if args.apply:
        table = load_snapshot(args.appdb)
        applied = table.apply_all(kfv_updates)
        save_snapshot(table, args.save_to or args.appdb)
        logger.info(f"Применено мутаций: {applied}", operation="apply")

    return 0
