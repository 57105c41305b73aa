"""
Единица работы над каталогом и журналом.
"""

from typing import Optional

from ..domain import ReservationLedger, RoomCatalog
from ..domain.catalog import RoomSnapshot
from ..domain.ledger import ReservationSnapshot
from .interfaces import ILogger


class HotelUnitOfWork:
    """
    Делает изменение каталога и журнала одной логической транзакцией.

    При входе запоминает состояние обоих хранилищ, при выходе
    с исключением восстанавливает его и пробрасывает исключение дальше.
    """

    def __init__(
        self,
        catalog: RoomCatalog,
        ledger: ReservationLedger,
        logger: ILogger,
        operation: str = "operation",
    ):
        self.catalog = catalog
        self.ledger = ledger
        self._logger = logger
        self._operation = operation
        self._rooms: Optional[RoomSnapshot] = None
        self._reservations: Optional[ReservationSnapshot] = None
        self.committed = False

    def __enter__(self) -> "HotelUnitOfWork":
        self._rooms = self.catalog.snapshot()
        self._reservations = self.ledger.snapshot()
        self.committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback(exc_val)
        return False

    def commit(self) -> None:
        self._rooms = None
        self._reservations = None
        self.committed = True
        self._logger.debug(f"{self._operation} committed")

    def rollback(self, reason: Optional[BaseException] = None) -> None:
        if self._rooms is None or self._reservations is None:
            return
        self.catalog.restore(self._rooms)
        self.ledger.restore(self._reservations)
        self._rooms = None
        self._reservations = None
        self.committed = False
        self._logger.warning(
            f"{self._operation} rolled back", reason=str(reason) if reason else None
        )
