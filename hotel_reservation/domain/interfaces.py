"""
Порты доменного слоя.
"""

from typing import Iterable, List, Optional, Protocol


class IRecordStore(Protocol):
    """Источник и приёмник построчных записей (один файл с данными)."""

    @property
    def location(self) -> str: ...

    def read(self) -> Optional[List[str]]:
        """Возвращает строки источника или None, если источника нет."""
        ...

    def write(self, lines: Iterable[str]) -> None:
        """Полностью заменяет содержимое. Либо всё, либо ничего."""
        ...
