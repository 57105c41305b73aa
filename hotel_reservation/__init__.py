"""
Система бронирования номеров в отеле.

Каталог номеров и журнал бронирований хранятся в плоских текстовых
файлах; все изменения проходят через BookingEngine.
"""

from .application import BookingEngine
from .bootstrap import bootstrap_app
from .config import HotelSettings
from .domain import (
    CategoryRotation,
    HotelError,
    ParseError,
    PersistenceError,
    Reservation,
    ReservationLedger,
    Room,
    RoomCatalog,
    ValidationError,
)

__all__ = [
    "BookingEngine",
    "CategoryRotation",
    "HotelError",
    "HotelSettings",
    "ParseError",
    "PersistenceError",
    "Reservation",
    "ReservationLedger",
    "Room",
    "RoomCatalog",
    "ValidationError",
    "bootstrap_app",
]
