"""
Слой представления: текстовые команды поверх BookingEngine.
"""

from .console import HotelConsole, Outcome, main

__all__ = ["HotelConsole", "Outcome", "main"]
