"""Command line tool that initialises the clock and prints the date and time."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from .clock import DateTime
from .driver import PCF8563
from .registers import PCF8563Error

__all__ = [
    "LinuxI2CBus",
    "weekday_name",
    "month_name",
    "format_datetime",
    "main",
]

_I2C_SLAVE = 0x0703

_WEEKDAYS = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class LinuxI2CBus:
    """An I2C bus reached through a Linux ``/dev/i2c-N`` character device."""

    def __init__(self, bus: int | str | os.PathLike) -> None:
        self.path = f"/dev/i2c-{bus}" if isinstance(bus, int) else os.fspath(bus)
        self._fd: int | None = os.open(self.path, os.O_RDWR)
        self._address: int | None = None

    def __enter__(self) -> LinuxI2CBus:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _select(self, address: int) -> int:
        if self._fd is None:
            raise OSError(f"{self.path} is closed")
        if address != self._address:
            import fcntl

            fcntl.ioctl(self._fd, _I2C_SLAVE, address)
            self._address = address
        return self._fd

    def write(self, address: int, data: bytes) -> None:
        """Write ``data`` to the device at ``address``."""
        fd = self._select(address)
        written = os.write(fd, bytes(data))
        if written != len(data):
            raise OSError(f"short write: {written} of {len(data)} bytes")

    def write_read(self, address: int, data: bytes, length: int) -> bytes:
        """Write ``data`` to the device, then read ``length`` bytes back."""
        self.write(address, data)
        return os.read(self._select(address), length)

    def close(self) -> None:
        """Close the device file; closing twice does nothing."""
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None


def weekday_name(weekday: int) -> str:
    """English name of a weekday number, Sunday being 0."""
    return _WEEKDAYS[weekday] if 0 <= weekday < len(_WEEKDAYS) else _WEEKDAYS[0]


def month_name(month: int) -> str:
    """English name of a month number, January being 1."""
    return _MONTHS[month - 1] if 1 <= month <= len(_MONTHS) else _MONTHS[0]


def format_datetime(now: DateTime) -> str:
    """Describe a date and time in a long English form."""
    return (
        f"It's {weekday_name(now.weekday)}, {now.day} {month_name(now.month)} "
        f"20{now.year:02} {now.hours:02}:{now.minutes:02}:{now.seconds:02}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Initialise the clock, read the date and time and print them."""
    parser = argparse.ArgumentParser(
        description="Initialise a PCF8563 real-time clock and print its date and time."
    )
    parser.add_argument("--bus", type=int, default=1, help="I2C bus number (default 1)")
    parser.add_argument("--device", help="path of the I2C device file, overrides --bus")
    args = parser.parse_args(argv)

    try:
        with LinuxI2CBus(args.device if args.device else args.bus) as bus:
            rtc = PCF8563(bus)
            rtc.rtc_init()
            now = rtc.get_datetime()
    except (PCF8563Error, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(format_datetime(now))
    return 0


if __name__ == "__main__":
    sys.exit(main())