"""
Тесты для консольного логгера.
"""
import pytest

from hotel_reservation.infrastructure import ConsoleLogger


def test_info_goes_to_stdout_with_context(capsys):
    ConsoleLogger().info("Room R1 booked", customer="Alice")

    out, err = capsys.readouterr()
    assert out.startswith("[INFO] Room R1 booked\n")
    assert '"customer": "Alice"' in out
    assert err == ""


def test_warnings_and_errors_go_to_stderr(capsys):
    logger = ConsoleLogger()
    logger.warning("careful")
    logger.error("failed")

    out, err = capsys.readouterr()
    assert out == ""
    assert "[WARNING] careful" in err
    assert "[ERROR] failed" in err


def test_messages_below_level_are_dropped(capsys):
    logger = ConsoleLogger("warning")
    logger.debug("hidden")
    logger.info("hidden too")

    assert capsys.readouterr() == ("", "")


def test_unknown_level():
    with pytest.raises(KeyError):
        ConsoleLogger("verbose")
