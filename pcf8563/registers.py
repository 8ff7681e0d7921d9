"""Register map, bit masks, error types and BCD helpers for the PCF8563."""

from __future__ import annotations

import enum

__all__ = [
    "Register",
    "BitFlag",
    "Control",
    "PCF8563Error",
    "BusError",
    "InvalidInputError",
    "encode_bcd",
    "decode_bcd",
]


class Register(enum.IntEnum):
    """Addresses of the PCF8563 registers."""

    CTRL_STATUS_1 = 0x00
    CTRL_STATUS_2 = 0x01
    VL_SECONDS = 0x02
    MINUTES = 0x03
    HOURS = 0x04
    DAYS = 0x05
    WEEKDAYS = 0x06
    CENTURY_MONTHS = 0x07
    YEARS = 0x08
    MINUTE_ALARM = 0x09
    HOUR_ALARM = 0x0A
    DAY_ALARM = 0x0B
    WEEKDAY_ALARM = 0x0C
    CLKOUT_CTRL = 0x0D
    TIMER_CTRL = 0x0E
    TIMER = 0x0F


class BitFlag:
    """Bit masks within the registers.

    Several masks share a value because they live in different registers,
    so they are kept as plain integers rather than enum members.
    """

    TEST1 = 0b1000_0000
    STOP = 0b0010_0000
    TESTC = 0b0000_1000
    TI_TP = 0b0001_0000
    AF = 0b0000_1000
    TF = 0b0000_0100
    AIE = 0b0000_0010
    TIE = 0b0000_0001
    AE = 0b1000_0000  # alarm disable bit, shared by all four alarm registers
    TE = 0b1000_0000  # timer enable
    FE = 0b1000_0000  # clock output enable
    VL = 0b1000_0000  # voltage low detector flag
    C = 0b1000_0000  # century flag


class Control(enum.Enum):
    """Switch used by the various enable/disable operations."""

    ON = "on"
    OFF = "off"


class PCF8563Error(Exception):
    """Base class of all errors raised by this package."""


class BusError(PCF8563Error):
    """The I2C bus reported a failure; the original exception is the cause."""


class InvalidInputError(PCF8563Error, ValueError):
    """A value passed to the device is out of its allowed range."""


def decode_bcd(value: int) -> int:
    """Convert a binary coded decimal byte to an integer, using the lowest 7 bits."""
    digits = value & 0x0F
    tens = (value >> 4) & 0x07
    return 10 * tens + digits


def encode_bcd(value: int) -> int:
    """Convert an integer in the range 0-255 to a binary coded decimal byte."""
    if not 0 <= value <= 0xFF:
        raise InvalidInputError(f"value {value} does not fit in a byte")
    tens, digits = divmod(value, 10)
    return ((tens << 4) + digits) & 0xFF