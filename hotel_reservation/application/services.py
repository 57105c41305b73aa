"""
Сервис приложения: движок бронирования.

Движок - единственная точка, через которую меняются номера и бронирования.
Он поддерживает главный инвариант: номер занят тогда и только тогда,
когда на него есть бронирование.
"""

from typing import List, Optional

from ..domain import (
    CategoryRotation,
    ParseError,
    PersistenceError,
    Reservation,
    ReservationLedger,
    Room,
    RoomCatalog,
    ValidationError,
)
from ..domain.interfaces import IRecordStore
from ..domain.models import FIELD_SEPARATOR
from .interfaces import ILogger
from .unit_of_work import HotelUnitOfWork

DEFAULT_PAYMENT_STATUS = "Paid"


class BookingEngine:
    """Сервис приложения для бронирования номеров."""

    def __init__(
        self,
        rooms_store: IRecordStore,
        reservations_store: IRecordStore,
        logger: ILogger,
        rotation: Optional[CategoryRotation] = None,
        seed_room_count: int = 10,
        room_prefix: str = "R",
        payment_status: str = DEFAULT_PAYMENT_STATUS,
    ):
        self._rooms_store = rooms_store
        self._reservations_store = reservations_store
        self._logger = logger
        self._rotation = rotation or CategoryRotation()
        self._seed_room_count = seed_room_count
        self._room_prefix = room_prefix
        self._payment_status = payment_status
        self._catalog = RoomCatalog()
        self._ledger = ReservationLedger()

    # --- Команды ---

    def book_room(self, room_number: str, customer_name: str) -> Reservation:
        """Бронирует свободный номер на имя гостя."""
        name = (customer_name or "").strip()
        if not name:
            raise self._rejected(ValidationError("empty name", room_number))
        if FIELD_SEPARATOR in name or "\n" in name or "\r" in name:
            raise self._rejected(ValidationError("invalid name", room_number))

        room = self._catalog.find_by_number(room_number or "")
        if room is None:
            raise self._rejected(ValidationError("room not found", room_number))
        if room.is_booked:
            raise self._rejected(ValidationError("already booked", room.room_number))

        with HotelUnitOfWork(self._catalog, self._ledger, self._logger, "book_room"):
            booked = self._catalog.mark_booked(room.room_number)
            reservation = Reservation(
                room_number=booked.room_number,
                customer_name=name,
                category=booked.category,
                payment_status=self._payment_status,
            )
            self._ledger.add(reservation)

        self._logger.info(
            f"Room {reservation.room_number} booked",
            customer=reservation.customer_name,
            category=reservation.category,
        )
        return reservation

    def cancel_booking(self, room_number: str) -> Reservation:
        """Снимает бронирование с номера и освобождает номер."""
        if self._ledger.find_by_room(room_number or "") is None:
            raise self._rejected(ValidationError("not found", room_number))

        with HotelUnitOfWork(
            self._catalog, self._ledger, self._logger, "cancel_booking"
        ):
            reservation = self._ledger.remove(room_number)
            self._catalog.mark_available(reservation.room_number)

        self._logger.info(f"Booking for room {reservation.room_number} cancelled")
        return reservation

    # --- Запросы ---

    def search_available(self) -> List[Room]:
        return list(self._catalog.list_available())

    def list_reservations(self) -> List[Reservation]:
        return self._ledger.all()

    def find_room(self, room_number: str) -> Optional[Room]:
        return self._catalog.find_by_number(room_number)

    def find_reservation(self, room_number: str) -> Optional[Reservation]:
        return self._ledger.find_by_room(room_number)

    def list_rooms(self) -> List[Room]:
        return self._catalog.rooms()

    def room_numbers(self) -> List[str]:
        return self._catalog.room_numbers()

    # --- Сохранение и загрузка ---

    def persist(self) -> None:
        """
        Сохраняет каталог, затем журнал.

        Два файла не образуют одну транзакцию: если журнал записать
        не удалось, файл номеров уже обновлён.
        """
        try:
            self._catalog.save(self._rooms_store)
        except PersistenceError as e:
            self._logger.error("Saving rooms failed", error=str(e))
            raise
        try:
            self._ledger.save(self._reservations_store)
        except PersistenceError as e:
            self._logger.error(
                "Saving reservations failed, rooms file already updated",
                error=str(e),
            )
            raise
        self._logger.info(
            "Data saved",
            rooms=len(self._catalog),
            reservations=len(self._ledger),
        )

    def reload(self) -> bool:
        """
        Полностью заменяет состояние в памяти данными из хранилищ.

        Если каталог ещё не сохранялся, создаёт каталог по умолчанию
        и записывает его только после успешной загрузки журнала.
        При любой ошибке прежнее состояние остаётся нетронутым.
        Возвращает True, если каталог был создан заново.
        """
        catalog = RoomCatalog()
        ledger = ReservationLedger()
        try:
            seeded = catalog.initialize(
                self._rooms_store,
                self._rotation,
                self._seed_room_count,
                self._room_prefix,
                persist=False,
            )
            ledger.load(self._reservations_store)
            if seeded:
                # Новый каталог отражает уже сохранённые бронирования
                for reservation in ledger.all():
                    if catalog.find_by_number(reservation.room_number) is not None:
                        catalog.mark_booked(reservation.room_number)
            self._check_consistency(catalog, ledger)
            if seeded:
                catalog.save(self._rooms_store)
        except (ParseError, PersistenceError) as e:
            self._logger.error("Loading data failed", error=str(e))
            raise

        self._catalog = catalog
        self._ledger = ledger
        if seeded:
            self._logger.info(
                "Default rooms created",
                rooms=len(catalog),
                location=self._rooms_store.location,
            )
        self._logger.info(
            "Rooms loaded", rooms=len(catalog), reservations=len(ledger)
        )
        return seeded

    def initialize(self) -> bool:
        return self.reload()

    # --- Внутренние методы ---

    def _check_consistency(
        self, catalog: RoomCatalog, ledger: ReservationLedger
    ) -> None:
        location = self._reservations_store.location
        for reservation in ledger.all():
            room = catalog.find_by_number(reservation.room_number)
            if room is None:
                raise ParseError(
                    f"reservation for unknown room {reservation.room_number}",
                    location=location,
                )
            if not room.is_booked:
                raise ParseError(
                    f"room {room.room_number} has a reservation but is not booked",
                    location=location,
                )
        for room in catalog.rooms():
            if room.is_booked and ledger.find_by_room(room.room_number) is None:
                raise ParseError(
                    f"room {room.room_number} is booked but has no reservation",
                    location=location,
                )

    def _rejected(self, error: ValidationError) -> ValidationError:
        self._logger.warning(
            f"Request rejected: {error.message}", room=error.room_number
        )
        return error
