"""
Настройки приложения.
"""

import os
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .domain.models import CategoryRotation

ENV_PREFIX = "HOTEL_"


class HotelSettings(BaseModel):
    """Настройки системы бронирования."""

    data_dir: Path = Field(default=Path("."), description="Каталог с файлами данных")
    rooms_file: str = "rooms.txt"
    reservations_file: str = "reservations.txt"
    seed_room_count: int = Field(default=10, gt=0)
    room_prefix: str = Field(default="R", min_length=1)
    category_rotation: Tuple[str, ...] = ("Standard", "Deluxe", "Suite")
    payment_status: str = Field(default="Paid", min_length=1)
    log_level: str = "INFO"

    @field_validator("category_rotation")
    @classmethod
    def rotation_is_valid(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        try:
            CategoryRotation(categories=v)
        except PydanticValidationError as e:
            raise ValueError(e.errors()[0]["msg"]) from e
        return v

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level

    @property
    def rooms_path(self) -> Path:
        return self.data_dir / self.rooms_file

    @property
    def reservations_path(self) -> Path:
        return self.data_dir / self.reservations_file

    @property
    def rotation(self) -> CategoryRotation:
        return CategoryRotation(categories=self.category_rotation)

    @classmethod
    def from_env(cls) -> "HotelSettings":
        """Читает настройки из переменных окружения HOTEL_*."""
        values = {}
        for name in (
            "data_dir",
            "rooms_file",
            "reservations_file",
            "seed_room_count",
            "room_prefix",
            "payment_status",
            "log_level",
        ):
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw
        rotation = os.getenv(ENV_PREFIX + "CATEGORY_ROTATION")
        if rotation is not None:
            values["category_rotation"] = tuple(
                part.strip() for part in rotation.split(",") if part.strip()
            )
        return cls(**values)
