"""Date and time registers of the PCF8563."""

from __future__ import annotations

from dataclasses import dataclass

from .device import RegisterDevice
from .registers import BitFlag, InvalidInputError, Register, decode_bcd, encode_bcd

__all__ = ["DateTime", "Time", "ClockMixin"]


@dataclass(frozen=True)
class DateTime:
    """Date and time components as kept by the clock."""

    year: int
    """Year within the century [0-99]."""
    month: int
    """Month [1-12]."""
    weekday: int
    """Weekday [0-6]."""
    day: int
    """Day of the month [1-31]."""
    hours: int
    """Hours [0-23]."""
    minutes: int
    """Minutes [0-59]."""
    seconds: int
    """Seconds [0-59]."""


@dataclass(frozen=True)
class Time:
    """Time components only, for clocks without a calendar."""

    hours: int
    minutes: int
    seconds: int


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise InvalidInputError(f"{name} {value} is outside {low}-{high}")


def _decode_year(value: int) -> int:
    # The year register uses all eight bits, so the tens digit goes up to 9.
    return (value >> 4) * 10 + (value & 0x0F)


class ClockMixin(RegisterDevice):
    """Reading and setting the date and time.

    All seven date and time registers are read or written in one
    transaction, as the datasheet recommends.
    """

    def get_datetime(self) -> DateTime:
        """Read date and time all at once."""
        data = self._read_registers(Register.VL_SECONDS, 7)
        seconds, minutes, hours, day, weekday, month, year = data
        return DateTime(
            year=_decode_year(year),
            month=decode_bcd(month & 0x1F),
            weekday=decode_bcd(weekday & 0x07),
            day=decode_bcd(day & 0x3F),
            hours=decode_bcd(hours & 0x3F),
            minutes=decode_bcd(minutes & 0x7F),
            seconds=decode_bcd(seconds),
        )

    def set_datetime(self, datetime: DateTime) -> None:
        """Set date and time all at once.

        Raises InvalidInputError if any component is out of range. The
        century flag is cleared by this write.
        """
        _check_range("year", datetime.year, 0, 99)
        _check_range("month", datetime.month, 1, 12)
        _check_range("weekday", datetime.weekday, 0, 6)
        _check_range("day", datetime.day, 1, 31)
        _check_range("hours", datetime.hours, 0, 23)
        _check_range("minutes", datetime.minutes, 0, 59)
        _check_range("seconds", datetime.seconds, 0, 59)
        values = (
            datetime.seconds,
            datetime.minutes,
            datetime.hours,
            datetime.day,
            datetime.weekday,
            datetime.month,
            datetime.year,
        )
        self._write_registers(Register.VL_SECONDS, [encode_bcd(v) for v in values])

    def set_time(self, time: Time) -> None:
        """Set only the time; the date is left unchanged.

        Raises InvalidInputError if any component is out of range.
        """
        _check_range("hours", time.hours, 0, 23)
        _check_range("minutes", time.minutes, 0, 59)
        _check_range("seconds", time.seconds, 0, 59)
        values = (time.seconds, time.minutes, time.hours)
        self._write_registers(Register.VL_SECONDS, [encode_bcd(v) for v in values])

    def get_century_flag(self) -> int:
        """Read the century flag (0: century N, 1: century N+1)."""
        return 1 if self._is_flag_set(Register.CENTURY_MONTHS, BitFlag.C) else 0

    def set_century_flag(self, century: int) -> None:
        """Set the century flag (0: century N, 1: century N+1)."""
        if century == 0:
            self._clear_flag(Register.CENTURY_MONTHS, BitFlag.C)
        elif century == 1:
            self._set_flag(Register.CENTURY_MONTHS, BitFlag.C)
        else:
            raise InvalidInputError(f"century flag must be 0 or 1, not {century}")