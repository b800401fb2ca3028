"""
Константы формата AppDB для таблицы packet replication.

Формат ключа:  REPLICATION_IP_MULTICAST_TABLE:<hex group id>   (без 0x)
Формат поля:   <port>:0x<hex instance>                        (с 0x)

Асимметрия 0x между ключом и полем обязательна для совместимости
с уже записанными AppDB.
"""

# Имя таблицы в AppDB
TABLE_NAME = "REPLICATION_IP_MULTICAST_TABLE"

# Разделитель таблицы и ключа, а также порта и instance
KEY_SEPARATOR = ":"

# Маркер hex в имени поля
HEX_MARKER = "0x"

# Значение поля не используется, но AppDB требует непустое значение
REPLICA_FIELD_VALUE = "replica"

# Операции KFV
OP_SET = "SET"
OP_DEL = "DEL"

# Максимум для uint32 (group id, instance)
MAX_UINT32 = 0xFFFFFFFF

# Подписи сторон в отчёте сравнения
DEFAULT_PRIMARY_LABEL = "APP DB"
DEFAULT_SECONDARY_LABEL = "Packet replication cache"
