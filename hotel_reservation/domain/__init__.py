"""
Доменный слой: номера, бронирования, каталог и журнал.
"""

from .catalog import AvailableRooms, RoomCatalog
from .exceptions import HotelError, ParseError, PersistenceError, ValidationError
from .interfaces import IRecordStore
from .ledger import ReservationLedger
from .models import CategoryRotation, Reservation, Room, room_key

__all__ = [
    "AvailableRooms",
    "CategoryRotation",
    "HotelError",
    "IRecordStore",
    "ParseError",
    "PersistenceError",
    "Reservation",
    "ReservationLedger",
    "Room",
    "RoomCatalog",
    "ValidationError",
    "room_key",
]
