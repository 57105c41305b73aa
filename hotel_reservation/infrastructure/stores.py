"""
Хранилища построчных записей: текстовые файлы и память.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..domain.exceptions import PersistenceError
from ..domain.interfaces import IRecordStore


class FlatFileRecordStore(IRecordStore):
    """Плоский текстовый файл, одна запись на строку."""

    def __init__(self, file_path: Union[str, Path], encoding: str = "utf-8"):
        """
        Инициализирует хранилище.

        Args:
            file_path: Путь к файлу с данными
            encoding: Кодировка файла
        """
        self._file_path = Path(file_path)
        self._encoding = encoding

    @property
    def location(self) -> str:
        return str(self._file_path)

    @property
    def path(self) -> Path:
        return self._file_path

    def read(self) -> Optional[List[str]]:
        """Читает строки файла. Если файла нет, возвращает None."""
        if not self._file_path.exists():
            return None
        try:
            with open(self._file_path, "r", encoding=self._encoding) as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"cannot read: {e}", self.location) from e

    def write(self, lines: Iterable[str]) -> None:
        """
        Записывает строки во временный файл рядом с целевым и атомарно
        подменяет им целевой. При ошибке прежний файл не меняется.
        """
        content = "".join(f"{line}\n" for line in lines)
        tmp_path = None
        try:
            # Создаем директорию, если она не существует
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self._file_path.name}.", dir=self._file_path.parent
            )
            with os.fdopen(fd, "w", encoding=self._encoding) as f:
                f.write(content)
            os.chmod(tmp_path, self._target_mode())
            os.replace(tmp_path, self._file_path)
            tmp_path = None
        except OSError as e:
            raise PersistenceError(f"cannot write: {e}", self.location) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def _target_mode(self) -> int:
        """Права нового файла: как у прежнего, иначе 0o666 с учётом umask."""
        try:
            return stat.S_IMODE(os.stat(self._file_path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask


class InMemoryRecordStore(IRecordStore):
    """Реализация хранилища в памяти."""

    def __init__(self, lines: Optional[List[str]] = None, name: str = "memory"):
        self._lines = None if lines is None else list(lines)
        self._name = name

    @property
    def location(self) -> str:
        return self._name

    @property
    def lines(self) -> Optional[List[str]]:
        return None if self._lines is None else list(self._lines)

    def read(self) -> Optional[List[str]]:
        return None if self._lines is None else list(self._lines)

    def write(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
