"""
Точка входа для запуска модуля.

    python -m replication_sync [команда] [опции]

Примеры:
    python -m replication_sync dump --appdb appdb.json --format csv
    python -m replication_sync diff --appdb appdb.json --cache cache.json
"""

from .cli import main

if __name__ == "__main__":
    main()
