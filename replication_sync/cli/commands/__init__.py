"""
CLI команды.

- dump.py: dump
- diff.py: diff
- translate.py: translate
"""

from .dump import cmd_dump
from .diff import cmd_diff
from .translate import cmd_translate

__all__ = [
    "cmd_dump",
    "cmd_diff",
    "cmd_translate",
]
