"""
Текстовый интерфейс системы бронирования.

Тонкий адаптер над BookingEngine: каждая команда вызывает одну операцию
движка и превращает результат или ошибку в Outcome с текстом для вывода.
"""

import shlex
from typing import Callable, Optional

from pydantic import BaseModel

from ..application import BookingEngine
from ..bootstrap import bootstrap_app
from ..domain import HotelError

HELP_TEXT = """Commands:
  load                  Load rooms and reservations
  search                Show available rooms
  book <room> <name>    Book a room for a customer
  cancel <room>         Cancel the booking for a room
  view                  Show all reservations
  save                  Save rooms and reservations
  help                  Show this help
  quit                  Exit"""


class Outcome(BaseModel):
    """Результат команды для отображения пользователю."""

    ok: bool
    message: str
    kind: Optional[str] = None  # Тип ошибки: validation, parse, io


class HotelConsole:
    """Команды окна бронирования, отвязанные от виджетов."""

    def __init__(self, engine: BookingEngine):
        self.engine = engine

    def load_rooms(self) -> Outcome:
        return self._run(self.engine.reload, lambda _: "Rooms loaded successfully.")

    def search_rooms(self) -> Outcome:
        def render(rooms) -> str:
            return "\n".join(["Available Rooms:"] + [str(room) for room in rooms])

        return self._run(self.engine.search_available, render)

    def book_room(self, room_number: str, customer_name: str) -> Outcome:
        return self._run(
            lambda: self.engine.book_room(room_number, customer_name),
            lambda r: f"Room {r.room_number} booked successfully by {r.customer_name}.",
        )

    def cancel_booking(self, room_number: str) -> Outcome:
        return self._run(
            lambda: self.engine.cancel_booking(room_number),
            lambda r: f"Booking cancelled for room {r.room_number}.",
        )

    def view_reservations(self) -> Outcome:
        def render(reservations) -> str:
            if not reservations:
                return "Reservations:\nNo reservations found."
            return "\n".join(["Reservations:"] + [str(r) for r in reservations])

        return self._run(self.engine.list_reservations, render)

    def save_data(self) -> Outcome:
        return self._run(self.engine.persist, lambda _: "Data saved successfully.")

    def execute(self, command_line: str) -> Optional[Outcome]:
        """Разбирает и выполняет одну команду. Для quit возвращает None."""
        try:
            words = shlex.split(command_line)
        except ValueError as e:
            return Outcome(ok=False, message=f"Cannot parse command: {e}")
        if not words:
            return Outcome(ok=True, message="")

        command, args = words[0].lower(), words[1:]
        if command in ("quit", "exit"):
            return None
        if command == "help":
            return Outcome(ok=True, message=HELP_TEXT)
        if command == "load":
            return self.load_rooms()
        if command == "search":
            return self.search_rooms()
        if command == "view":
            return self.view_reservations()
        if command == "save":
            return self.save_data()
        if command == "book":
            if len(args) < 2:
                return Outcome(ok=False, message="Select a room and enter your name.")
            return self.book_room(args[0], " ".join(args[1:]))
        if command == "cancel":
            if len(args) != 1:
                return Outcome(ok=False, message="Select a room to cancel.")
            return self.cancel_booking(args[0])
        return Outcome(ok=False, message=f"Unknown command: {command}. Type 'help'.")

    def run(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        """Цикл команд. Данные загружаются при запуске, как в оконной версии."""
        write(self.load_rooms().message)
        write(f"Rooms: {', '.join(self.engine.room_numbers())}")
        while True:
            try:
                line = read("hotel> ")
            except EOFError:
                break
            outcome = self.execute(line)
            if outcome is None:
                break
            if outcome.message:
                write(outcome.message)

    def _run(self, action: Callable, render: Callable) -> Outcome:
        try:
            result = action()
        except HotelError as e:
            return Outcome(ok=False, message=_describe(e), kind=e.kind)
        return Outcome(ok=True, message=render(result))


def _describe(error: HotelError) -> str:
    messages = {
        "empty name": "Select a room and enter your name.",
        "invalid name": "Customer name cannot contain commas or line breaks.",
        "room not found": "Room not found.",
        "already booked": "Room already booked.",
        "not found": "No reservation found for selected room.",
    }
    if error.kind == "validation":
        return messages.get(error.message, error.message)
    if error.kind == "parse":
        return f"Error loading rooms: {error.message}"
    return f"Error: {error.message}"


def main() -> int:
    HotelConsole(bootstrap_app()).run()
    return 0
