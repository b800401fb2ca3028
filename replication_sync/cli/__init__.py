"""
CLI модуль replication_sync.

Структура:
- utils.py: общие утилиты (get_exporter, load_requests)
- commands/: обработчики команд
  - dump.py: dump
  - diff.py: diff
  - translate.py: translate

Примеры использования:
    python -m replication_sync dump --appdb appdb.json
    python -m replication_sync diff --appdb appdb.json --cache cache.json --format excel
    python -m replication_sync translate --requests updates.yaml --appdb appdb.json --apply
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import load_config
from ..core.context import RunContext, set_current_context
from ..core.exceptions import ReplicationSyncError, format_error_for_log
from ..core.logging import LogConfig, get_logger, setup_logging_from_config

from .commands import cmd_dump, cmd_diff, cmd_translate

logger = get_logger(__name__)

FORMATS = ["table", "excel", "csv", "json"]

COMMANDS = {
    "dump": cmd_dump,
    "diff": cmd_diff,
    "translate": cmd_translate,
}


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="replication_sync",
        description="Трансляция и сверка packet replication (multicast) записей AppDB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s dump --appdb appdb.json --format csv
  %(prog)s diff --appdb appdb.json --cache cache.json
  %(prog)s translate --requests updates.yaml --json
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Путь к файлу конфигурации YAML (default: config.yaml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Папка для отчётов (default: из конфига)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Команды")

    # === DUMP ===
    dump_parser = subparsers.add_parser("dump", help="Multicast группы из снапшота AppDB")
    dump_parser.add_argument(
        "--appdb",
        required=True,
        help="Снапшот AppDB (JSON/YAML)",
    )
    dump_parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default=None,
        help="Формат вывода (default: из конфига)",
    )

    # === DIFF ===
    diff_parser = subparsers.add_parser("diff", help="Сверка AppDB с кэшем")
    diff_parser.add_argument(
        "--appdb",
        required=True,
        help="Снапшот AppDB (основная сторона)",
    )
    diff_parser.add_argument(
        "--cache",
        required=True,
        help="Снапшот кэша (вторая сторона)",
    )
    diff_parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default=None,
        help="Формат вывода (default: из конфига)",
    )

    # === TRANSLATE ===
    translate_parser = subparsers.add_parser(
        "translate", help="Запросы INSERT/MODIFY/DELETE -> KFV мутации AppDB"
    )
    translate_parser.add_argument(
        "--requests",
        required=True,
        help="Файл запросов (YAML/JSON)",
    )
    translate_parser.add_argument(
        "--json",
        action="store_true",
        help="Вывести мутации в JSON",
    )
    translate_parser.add_argument(
        "--appdb",
        help="Снапшот AppDB для --apply",
    )
    translate_parser.add_argument(
        "--apply",
        action="store_true",
        help="Применить мутации к снапшоту --appdb",
    )
    translate_parser.add_argument(
        "--save-to",
        help="Сохранить результат в другой файл (default: перезаписать --appdb)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Главная функция CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    try:
        cfg = load_config(args.config)
    except ReplicationSyncError as e:
        print(f"Ошибка конфигурации: {format_error_for_log(e)}", file=sys.stderr)
        sys.exit(2)

    log_config = LogConfig.from_dict(cfg.logging.model_dump())
    if args.verbose or cfg.debug:
        log_config.level = logging.DEBUG
    setup_logging_from_config(log_config)

    ctx = RunContext.create(command=args.command)
    set_current_context(ctx)

    try:
        exit_code = COMMANDS[args.command](args, cfg)
    except ReplicationSyncError as e:
        logger.error(format_error_for_log(e), operation=args.command)
        sys.exit(2)
    finally:
        logger.debug(f"Команда {args.command} завершена за {ctx.elapsed_human}")
        set_current_context(None)

    sys.exit(exit_code)
