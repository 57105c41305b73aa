"""
Журнал бронирований.
"""

from typing import List, Optional, Tuple

from .exceptions import ParseError, PersistenceError
from .interfaces import IRecordStore
from .models import Reservation, room_key

ReservationSnapshot = Tuple[Reservation, ...]


class ReservationLedger:
    """
    Список бронирований в порядке добавления.

    Журнал не проверяет, что на номер нет другого бронирования:
    за это отвечает BookingEngine.
    """

    def __init__(self, reservations: Optional[List[Reservation]] = None) -> None:
        self._reservations: List[Reservation] = list(reservations or [])

    def __len__(self) -> int:
        return len(self._reservations)

    def load(self, source: IRecordStore) -> None:
        """Заменяет журнал содержимым источника. Нет источника - пустой журнал."""
        lines = source.read()
        if lines is None:
            self._reservations = []
            return

        reservations: List[Reservation] = []
        seen = set()
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            reservation = Reservation.from_record(line, line_number, source.location)
            if reservation.key in seen:
                raise ParseError(
                    f"second reservation for room {reservation.room_number}",
                    line_number,
                    source.location,
                )
            seen.add(reservation.key)
            reservations.append(reservation)
        self._reservations = reservations

    def save(self, sink: IRecordStore) -> None:
        sink.write(reservation.to_record() for reservation in self._reservations)

    def find_by_room(self, room_number: str) -> Optional[Reservation]:
        key = room_key(room_number)
        for reservation in self._reservations:
            if reservation.key == key:
                return reservation
        return None

    def all(self) -> List[Reservation]:
        return list(self._reservations)

    def add(self, reservation: Reservation) -> None:
        self._reservations.append(reservation)

    def remove(self, room_number: str) -> Optional[Reservation]:
        key = room_key(room_number)
        for position, reservation in enumerate(self._reservations):
            if reservation.key == key:
                del self._reservations[position]
                return reservation
        return None

    def snapshot(self) -> ReservationSnapshot:
        return tuple(self._reservations)

    def restore(self, snapshot: ReservationSnapshot) -> None:
        self._reservations = list(snapshot)
