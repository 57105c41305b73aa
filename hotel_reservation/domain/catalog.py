"""
Каталог номеров.

Каталог - единственный владелец списка номеров. Номера неизменяемы,
поэтому флаг занятости меняется только через mark_booked/mark_available,
которые подменяют объект номера в каталоге.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import ParseError, PersistenceError, ValidationError
from .interfaces import IRecordStore
from .models import CategoryRotation, Room, room_key

RoomSnapshot = Tuple[Room, ...]


class AvailableRooms:
    """Ленивая выборка свободных номеров; каждый проход читает каталог заново."""

    def __init__(self, catalog: "RoomCatalog"):
        self._catalog = catalog

    def __iter__(self) -> Iterator[Room]:
        return (room for room in self._catalog.rooms() if not room.is_booked)


class RoomCatalog:
    """Упорядоченный набор номеров с уникальными (без учёта регистра) номерами."""

    def __init__(self, rooms: Optional[List[Room]] = None) -> None:
        self._rooms: List[Room] = []
        self._index: Dict[str, int] = {}
        if rooms:
            self._replace(self._check_unique(rooms))

    def __len__(self) -> int:
        return len(self._rooms)

    # --- Загрузка и сохранение ---

    def initialize(
        self,
        store: IRecordStore,
        rotation: CategoryRotation,
        count: int = 10,
        prefix: str = "R",
        persist: bool = True,
    ) -> bool:
        """
        Загружает каталог из store, а если источника нет - создаёт
        каталог по умолчанию и сразу его сохраняет.
        С persist=False созданный каталог только заполняется в памяти,
        сохранить его должен вызывающий код.

        Возвращает True, если каталог был создан заново.
        """
        lines = store.read()
        if lines is not None:
            self._replace(self._parse(lines, store.location))
            return False

        rooms = rotation.seed_rooms(count, prefix)
        # Сначала запись, потом состояние в памяти: при ошибке каталог не меняется
        if persist:
            store.write(room.to_record() for room in rooms)
        self._replace(rooms)
        return True

    def load(self, source: IRecordStore) -> None:
        """Заменяет каталог содержимым источника целиком или не меняет вовсе."""
        lines = source.read()
        if lines is None:
            raise PersistenceError("source does not exist", source.location)
        self._replace(self._parse(lines, source.location))

    def save(self, sink: IRecordStore) -> None:
        sink.write(room.to_record() for room in self._rooms)

    # --- Запросы ---

    def find_by_number(self, room_number: str) -> Optional[Room]:
        position = self._index.get(room_key(room_number))
        return None if position is None else self._rooms[position]

    def list_available(self) -> AvailableRooms:
        return AvailableRooms(self)

    def rooms(self) -> List[Room]:
        return list(self._rooms)

    def room_numbers(self) -> List[str]:
        return [room.room_number for room in self._rooms]

    # --- Изменение состояния ---

    def mark_booked(self, room_number: str) -> Room:
        return self._set_booked(room_number, True)

    def mark_available(self, room_number: str) -> Room:
        return self._set_booked(room_number, False)

    def snapshot(self) -> RoomSnapshot:
        return tuple(self._rooms)

    def restore(self, snapshot: RoomSnapshot) -> None:
        self._replace(list(snapshot))

    # --- Внутренние методы ---

    def _set_booked(self, room_number: str, is_booked: bool) -> Room:
        position = self._index.get(room_key(room_number))
        if position is None:
            raise ValidationError("room not found", room_number)
        room = self._rooms[position].model_copy(update={"is_booked": is_booked})
        self._rooms[position] = room
        return room

    def _replace(self, rooms: List[Room]) -> None:
        self._rooms = list(rooms)
        self._index = {room.key: position for position, room in enumerate(rooms)}

    @staticmethod
    def _check_unique(rooms: List[Room]) -> List[Room]:
        seen = set()
        for room in rooms:
            if room.key in seen:
                raise ValueError(f"Duplicate room number {room.room_number}")
            seen.add(room.key)
        return rooms

    @staticmethod
    def _parse(lines: List[str], location: str) -> List[Room]:
        rooms: List[Room] = []
        seen = set()
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            room = Room.from_record(line, line_number, location)
            if room.key in seen:
                raise ParseError(
                    f"duplicate room number {room.room_number}", line_number, location
                )
            seen.add(room.key)
            rooms.append(room)
        return rooms
