"""
Инфраструктурный слой: файловые хранилища и логгер.
"""

from .loggers import ConsoleLogger
from .stores import FlatFileRecordStore, InMemoryRecordStore

__all__ = ["ConsoleLogger", "FlatFileRecordStore", "InMemoryRecordStore"]
