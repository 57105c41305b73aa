"""
Тесты для единицы работы над каталогом и журналом.
"""
from unittest.mock import MagicMock

import pytest

from hotel_reservation.application import HotelUnitOfWork
from hotel_reservation.domain import Reservation, ReservationLedger, Room, RoomCatalog


@pytest.fixture
def catalog() -> RoomCatalog:
    return RoomCatalog([Room(room_number="R1", category="Deluxe")])


@pytest.fixture
def ledger() -> ReservationLedger:
    return ReservationLedger()


def book(catalog: RoomCatalog, ledger: ReservationLedger) -> None:
    catalog.mark_booked("R1")
    ledger.add(
        Reservation(
            room_number="R1",
            customer_name="Alice",
            category="Deluxe",
            payment_status="Paid",
        )
    )


def test_commit_keeps_changes(catalog, ledger, logger: MagicMock):
    with HotelUnitOfWork(catalog, ledger, logger, "book_room") as uow:
        book(uow.catalog, uow.ledger)

    assert uow.committed is True
    assert catalog.find_by_number("R1").is_booked is True
    assert len(ledger) == 1
    logger.debug.assert_called_once_with("book_room committed")


def test_exception_restores_both_stores(catalog, ledger, logger: MagicMock):
    with pytest.raises(RuntimeError, match="boom"):
        with HotelUnitOfWork(catalog, ledger, logger, "book_room") as uow:
            book(catalog, ledger)
            raise RuntimeError("boom")

    assert uow.committed is False
    assert catalog.find_by_number("R1").is_booked is False
    assert len(ledger) == 0
    logger.warning.assert_called_once_with("book_room rolled back", reason="boom")


def test_rollback_outside_scope_is_noop(catalog, ledger, logger: MagicMock):
    uow = HotelUnitOfWork(catalog, ledger, logger)
    uow.rollback()

    logger.warning.assert_not_called()
