"""
Прикладной слой: сервис бронирования и единица работы.
"""

from .interfaces import ILogger
from .services import DEFAULT_PAYMENT_STATUS, BookingEngine
from .unit_of_work import HotelUnitOfWork

__all__ = [
    "BookingEngine",
    "DEFAULT_PAYMENT_STATUS",
    "HotelUnitOfWork",
    "ILogger",
]
