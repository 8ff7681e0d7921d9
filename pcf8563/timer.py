"""Countdown timer settings of the PCF8563."""

from __future__ import annotations

import enum

from .device import RegisterDevice
from .registers import BitFlag, Control, InvalidInputError, Register

__all__ = ["TimerFreq", "InterruptOutput", "TimerMixin"]

_FREQUENCY_MASK = 0b0000_0011


class TimerFreq(enum.IntEnum):
    """Source clock frequencies of the countdown timer."""

    TIMER_4096HZ = 0b0000_0000
    TIMER_64HZ = 0b0000_0001
    TIMER_1HZ = 0b0000_0010
    # Lowest frequency; use it while the timer is off to save power.
    TIMER_1_60HZ = 0b0000_0011


class InterruptOutput(enum.Enum):
    """Interrupt pin behaviour while the timer flag is set."""

    CONTINUOUS = "continuous"
    PULSATING = "pulsating"


class TimerMixin(RegisterDevice):
    """Countdown timer operations."""

    def set_timer(self, time: int) -> None:
        """Set the timer countdown value [0-255]."""
        if not 0 <= time <= 0xFF:
            raise InvalidInputError(f"timer value {time} is outside 0-255")
        self._write_register(Register.TIMER, time)

    def set_timer_frequency(self, frequency: TimerFreq) -> None:
        """Set the timer frequency, keeping the TE bit unchanged."""
        current = self._read_register(Register.TIMER_CTRL)
        bits = TimerFreq(frequency) & _FREQUENCY_MASK
        self._write_register(Register.TIMER_CTRL, (current & BitFlag.TE) | bits)

    def control_timer(self, flag: Control) -> None:
        """Start or stop the timer."""
        if flag is Control.ON:
            self._set_flag(Register.TIMER_CTRL, BitFlag.TE)
        else:
            self._clear_flag(Register.TIMER_CTRL, BitFlag.TE)

    def is_timer_enabled(self) -> bool:
        """Whether the timer is enabled."""
        return self._is_flag_set(Register.TIMER_CTRL, BitFlag.TE)

    def control_timer_interrupt(self, flag: Control) -> None:
        """Enable or disable the timer interrupt."""
        if flag is Control.ON:
            self._set_flag(Register.CTRL_STATUS_2, BitFlag.TIE)
        else:
            self._clear_flag(Register.CTRL_STATUS_2, BitFlag.TIE)

    def is_timer_interrupt_enabled(self) -> bool:
        """Whether the timer interrupt is enabled."""
        return self._is_flag_set(Register.CTRL_STATUS_2, BitFlag.TIE)

    def get_timer_flag(self) -> bool:
        """Whether the timer has been triggered."""
        return self._is_flag_set(Register.CTRL_STATUS_2, BitFlag.TF)

    def clear_timer_flag(self) -> None:
        """Clear the timer flag."""
        self._clear_flag(Register.CTRL_STATUS_2, BitFlag.TF)

    def timer_interrupt_output(self, output: InterruptOutput) -> None:
        """Select whether the interrupt pin is continuous or pulsating."""
        if output is InterruptOutput.PULSATING:
            self._set_flag(Register.CTRL_STATUS_2, BitFlag.TI_TP)
        else:
            self._clear_flag(Register.CTRL_STATUS_2, BitFlag.TI_TP)

    def get_timer(self) -> int:
        """Read the current timer value."""
        return self._read_register(Register.TIMER)