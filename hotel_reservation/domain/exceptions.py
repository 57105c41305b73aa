"""
Иерархия исключений системы бронирования.
"""

from typing import Optional


class HotelError(Exception):
    """Базовое исключение для всех ошибок системы бронирования."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(HotelError):
    """Некорректный запрос: пустое имя, неизвестный номер, номер занят и т.д."""

    kind = "validation"

    def __init__(self, message: str, room_number: Optional[str] = None):
        super().__init__(message)
        self.room_number = room_number


class ParseError(HotelError):
    """Повреждённая запись в сохранённых данных."""

    kind = "parse"

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        location: Optional[str] = None,
    ):
        details = message
        if line_number is not None:
            details = f"line {line_number}: {details}"
        if location is not None:
            details = f"{location}: {details}"
        super().__init__(details)
        self.reason = message
        self.line_number = line_number
        self.location = location


class PersistenceError(HotelError):
    """Источник данных не удалось прочитать или записать."""

    kind = "io"

    def __init__(self, message: str, location: Optional[str] = None):
        super().__init__(f"{location}: {message}" if location else message)
        self.location = location
