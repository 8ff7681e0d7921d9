"""Clock output settings of the PCF8563."""

from __future__ import annotations

import enum

from .device import RegisterDevice
from .registers import BitFlag, Control, Register

__all__ = ["ClkoutFreq", "ClkoutMixin"]

_FREQUENCY_MASK = 0b0000_0011


class ClkoutFreq(enum.IntEnum):
    """Frequencies available on the clock output pin."""

    CLKOUT_32768HZ = 0b0000_0000
    CLKOUT_1024HZ = 0b0000_0001
    CLKOUT_32HZ = 0b0000_0010
    CLKOUT_1HZ = 0b0000_0011


class ClkoutMixin(RegisterDevice):
    """Clock output operations."""

    def set_clkout_frequency(self, frequency: ClkoutFreq) -> None:
        """Set the clock output frequency, keeping the FE bit unchanged."""
        current = self._read_register(Register.CLKOUT_CTRL)
        bits = ClkoutFreq(frequency) & _FREQUENCY_MASK
        self._write_register(Register.CLKOUT_CTRL, (current & BitFlag.FE) | bits)

    def control_clkout(self, status: Control) -> None:
        """Enable or disable the clock output."""
        if status is Control.ON:
            self._set_flag(Register.CLKOUT_CTRL, BitFlag.FE)
        else:
            self._clear_flag(Register.CLKOUT_CTRL, BitFlag.FE)

    def is_clkout_enabled(self) -> bool:
        """Whether the clock output is enabled."""
        return self._is_flag_set(Register.CLKOUT_CTRL, BitFlag.FE)