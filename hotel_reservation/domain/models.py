"""
Доменная модель: номера, бронирования и таблица категорий.

Записи хранятся в плоских текстовых файлах, по одной на строку,
поля разделены запятой и никак не экранируются.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ParseError

FIELD_SEPARATOR = ","


def room_key(room_number: str) -> str:
    """Ключ для сравнения номеров без учёта регистра."""
    return room_number.strip().lower()


def _split_record(
    line: str, expected: int, line_number: Optional[int], location: Optional[str]
) -> List[str]:
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != expected:
        raise ParseError(
            f"expected {expected} fields, got {len(parts)}", line_number, location
        )
    if any(not part.strip() for part in parts):
        raise ParseError("empty field", line_number, location)
    return [part.strip() for part in parts]


def _parse_bool(
    value: str, line_number: Optional[int], location: Optional[str]
) -> bool:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ParseError(f"invalid boolean {value!r}", line_number, location)


class Room(BaseModel):
    """Номер в отеле."""

    model_config = ConfigDict(frozen=True)

    room_number: str = Field(..., min_length=1)  # "R1", "R2", ...
    category: str = Field(..., min_length=1)
    is_booked: bool = False

    @property
    def key(self) -> str:
        return room_key(self.room_number)

    def to_record(self) -> str:
        return FIELD_SEPARATOR.join(
            [self.room_number, self.category, "true" if self.is_booked else "false"]
        )

    @classmethod
    def from_record(
        cls,
        line: str,
        line_number: Optional[int] = None,
        location: Optional[str] = None,
    ) -> "Room":
        room_number, category, booked = _split_record(
            line, 3, line_number, location
        )
        return cls(
            room_number=room_number,
            category=category,
            is_booked=_parse_bool(booked, line_number, location),
        )

    def __str__(self) -> str:
        status = "Booked" if self.is_booked else "Available"
        return f"{self.room_number} | {self.category} | {status}"


class Reservation(BaseModel):
    """Бронирование: привязка гостя к номеру."""

    model_config = ConfigDict(frozen=True)

    room_number: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)  # Копируется из номера при бронировании
    payment_status: str = Field(..., min_length=1)

    @property
    def key(self) -> str:
        return room_key(self.room_number)

    def to_record(self) -> str:
        return FIELD_SEPARATOR.join(
            [self.room_number, self.customer_name, self.category, self.payment_status]
        )

    @classmethod
    def from_record(
        cls,
        line: str,
        line_number: Optional[int] = None,
        location: Optional[str] = None,
    ) -> "Reservation":
        room_number, customer_name, category, payment_status = _split_record(
            line, 4, line_number, location
        )
        return cls(
            room_number=room_number,
            customer_name=customer_name,
            category=category,
            payment_status=payment_status,
        )

    def __str__(self) -> str:
        return (
            f"Room: {self.room_number} | Name: {self.customer_name} | "
            f"Category: {self.category} | Payment: {self.payment_status}"
        )


class CategoryRotation(BaseModel):
    """
    Таблица категорий для начального заполнения каталога.

    Номер на позиции N получает категорию categories[N % len(categories)].
    Позиции считаются с единицы, поэтому при таблице
    (Standard, Deluxe, Suite) номер R1 получает Deluxe, R2 - Suite,
    R3 - Standard.
    """

    model_config = ConfigDict(frozen=True)

    categories: Tuple[str, ...] = ("Standard", "Deluxe", "Suite")

    @field_validator("categories")
    @classmethod
    def categories_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("Таблица категорий не может быть пустой")
        for category in v:
            if not category.strip() or FIELD_SEPARATOR in category:
                raise ValueError(f"Недопустимая категория: {category!r}")
        return v

    def category_for(self, position: int) -> str:
        return self.categories[position % len(self.categories)]

    def seed_rooms(self, count: int, prefix: str = "R") -> List[Room]:
        """Создаёт count свободных номеров prefix1..prefixN."""
        if count <= 0:
            raise ValueError("Количество номеров должно быть положительным")
        return [
            Room(room_number=f"{prefix}{position}", category=self.category_for(position))
            for position in range(1, count + 1)
        ]
