from typing import Optional

from .application import BookingEngine, ILogger
from .config import HotelSettings
from .infrastructure import ConsoleLogger, FlatFileRecordStore


def bootstrap_app(
    settings: Optional[HotelSettings] = None, logger: Optional[ILogger] = None
) -> BookingEngine:
    """Создает и настраивает движок бронирования по настройкам."""
    settings = settings or HotelSettings.from_env()

    # 1. Хранилища для двух файлов
    rooms_store = FlatFileRecordStore(settings.rooms_path)
    reservations_store = FlatFileRecordStore(settings.reservations_path)

    # 2. Движок со всеми зависимостями; данные загружает вызывающий код
    return BookingEngine(
        rooms_store=rooms_store,
        reservations_store=reservations_store,
        logger=logger or ConsoleLogger(settings.log_level),
        rotation=settings.rotation,
        seed_room_count=settings.seed_room_count,
        room_prefix=settings.room_prefix,
        payment_status=settings.payment_status,
    )
