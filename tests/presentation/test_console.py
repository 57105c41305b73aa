"""
Тесты для текстового интерфейса поверх движка.
"""
from unittest.mock import patch

import pytest

from hotel_reservation.application import BookingEngine
from hotel_reservation.domain import PersistenceError
from hotel_reservation.infrastructure import InMemoryRecordStore
from hotel_reservation.presentation import HotelConsole


@pytest.fixture
def console(engine: BookingEngine) -> HotelConsole:
    return HotelConsole(engine)


def test_load_rooms(console: HotelConsole):
    outcome = console.load_rooms()
    assert outcome.ok is True
    assert outcome.message == "Rooms loaded successfully."


def test_load_rooms_reports_parse_error(console: HotelConsole, reservations_store):
    reservations_store.write(["R1,Alice"])

    outcome = console.load_rooms()

    assert outcome.ok is False
    assert outcome.kind == "parse"
    assert outcome.message.startswith("Error loading rooms:")


def test_search_rooms(console: HotelConsole):
    console.book_room("R1", "Alice")

    lines = console.search_rooms().message.splitlines()

    assert lines[0] == "Available Rooms:"
    assert lines[1] == "R2 | Suite | Available"
    assert len(lines) == 10


def test_book_and_cancel_messages(console: HotelConsole):
    booked = console.book_room("R1", "Alice")
    assert booked.ok is True
    assert booked.message == "Room R1 booked successfully by Alice."

    again = console.book_room("R1", "Bob")
    assert again.ok is False
    assert again.kind == "validation"
    assert again.message == "Room already booked."

    cancelled = console.cancel_booking("R1")
    assert cancelled.message == "Booking cancelled for room R1."

    missing = console.cancel_booking("R1")
    assert missing.ok is False
    assert missing.message == "No reservation found for selected room."


def test_validation_messages(console: HotelConsole):
    assert console.book_room("R1", "").message == "Select a room and enter your name."
    assert console.book_room("R77", "Alice").message == "Room not found."


def test_view_reservations(console: HotelConsole):
    empty = console.view_reservations()
    assert empty.ok is True
    assert empty.message == "Reservations:\nNo reservations found."

    console.book_room("R1", "Alice")
    assert console.view_reservations().message == (
        "Reservations:\nRoom: R1 | Name: Alice | Category: Deluxe | Payment: Paid"
    )


def test_save_data(console: HotelConsole, reservations_store: InMemoryRecordStore):
    console.book_room("R1", "Alice")

    outcome = console.save_data()

    assert outcome.message == "Data saved successfully."
    assert reservations_store.lines == ["R1,Alice,Deluxe,Paid"]


def test_save_data_reports_io_error(console: HotelConsole, rooms_store):
    with patch.object(rooms_store, "write", side_effect=PersistenceError("denied")):
        outcome = console.save_data()

    assert outcome.ok is False
    assert outcome.kind == "io"
    assert outcome.message == "Error: denied"


class TestExecute:
    def test_book_with_multi_word_name(self, console: HotelConsole):
        outcome = console.execute("book r2 Mary Ann")
        assert outcome.message == "Room R2 booked successfully by Mary Ann."

    def test_quoted_name(self, console: HotelConsole):
        outcome = console.execute('book R3 "Jean Luc"')
        assert outcome.message == "Room R3 booked successfully by Jean Luc."

    def test_missing_arguments(self, console: HotelConsole):
        assert console.execute("book R1").ok is False
        assert console.execute("cancel").message == "Select a room to cancel."

    def test_unknown_command(self, console: HotelConsole):
        outcome = console.execute("dance")
        assert outcome.ok is False
        assert "Unknown command" in outcome.message

    def test_quit(self, console: HotelConsole):
        assert console.execute("quit") is None

    def test_blank_line(self, console: HotelConsole):
        assert console.execute("   ").message == ""


def test_run_loop(console: HotelConsole):
    commands = iter(["book R1 Alice", "view", "quit", "never reached"])
    output = []

    console.run(read=lambda prompt: next(commands), write=output.append)

    assert output[0] == "Rooms loaded successfully."
    assert output[1].startswith("Rooms: R1, R2")
    assert output[2] == "Room R1 booked successfully by Alice."
    assert output[3].startswith("Reservations:")
    assert next(commands) == "never reached"


def test_run_stops_on_eof(console: HotelConsole):
    def read(prompt):
        raise EOFError

    output = []
    console.run(read=read, write=output.append)
    assert len(output) == 2
