"""The complete PCF8563 driver."""

from __future__ import annotations

from .alarm import AlarmMixin
from .clkout import ClkoutMixin
from .clock import ClockMixin
from .control import ControlMixin
from .timer import TimerMixin

__all__ = ["PCF8563"]


class PCF8563(ControlMixin, AlarmMixin, TimerMixin, ClockMixin, ClkoutMixin):
    """Driver for the PCF8563 real-time clock on an I2C bus.

    Offers date and time, alarms, the countdown timer, the clock output
    and the general control flags. Create it with an object that has
    ``write(address, data)`` and ``write_read(address, data, length)``.
    """