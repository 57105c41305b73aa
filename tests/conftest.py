"""
Общие фикстуры для тестов системы бронирования.
"""
from unittest.mock import MagicMock

import pytest

from hotel_reservation.application import BookingEngine
from hotel_reservation.domain import CategoryRotation
from hotel_reservation.infrastructure import InMemoryRecordStore


@pytest.fixture
def rotation() -> CategoryRotation:
    return CategoryRotation(categories=("Standard", "Deluxe", "Suite"))


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def rooms_store() -> InMemoryRecordStore:
    """Пустое хранилище номеров: движок создаст каталог по умолчанию."""
    return InMemoryRecordStore(name="rooms")


@pytest.fixture
def reservations_store() -> InMemoryRecordStore:
    return InMemoryRecordStore(name="reservations")


@pytest.fixture
def engine(rooms_store, reservations_store, logger, rotation) -> BookingEngine:
    """Движок с загруженным каталогом по умолчанию (R1..R10)."""
    engine = BookingEngine(
        rooms_store=rooms_store,
        reservations_store=reservations_store,
        logger=logger,
        rotation=rotation,
    )
    engine.reload()
    return engine
