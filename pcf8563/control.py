"""General control of the PCF8563: clock, test modes and power flags."""

from __future__ import annotations

from .alarm import AlarmMixin
from .registers import BitFlag, Control, Register
from .timer import TimerFreq, TimerMixin

__all__ = ["ControlMixin"]


class ControlMixin(AlarmMixin, TimerMixin):
    """Control operations that are not tied to one feature."""

    def control_ext_clk_test_mode(self, flag: Control) -> None:
        """Enable or disable the external clock test mode."""
        if flag is Control.ON:
            self._set_flag(Register.CTRL_STATUS_1, BitFlag.TEST1)
        else:
            self._clear_flag(Register.CTRL_STATUS_1, BitFlag.TEST1)

    def is_ext_clk_mode_enabled(self) -> bool:
        """Whether the external clock test mode is enabled."""
        return self._is_flag_set(Register.CTRL_STATUS_1, BitFlag.TEST1)

    def control_clock(self, flag: Control) -> None:
        """Start or stop the internal clock."""
        if flag is Control.ON:
            self._clear_flag(Register.CTRL_STATUS_1, BitFlag.STOP)
        else:
            self._set_flag(Register.CTRL_STATUS_1, BitFlag.STOP)

    def is_clock_running(self) -> bool:
        """Whether the internal clock is running (STOP bit cleared)."""
        return not self._is_flag_set(Register.CTRL_STATUS_1, BitFlag.STOP)

    def control_power_on_reset_override(self, flag: Control) -> None:
        """Enable or disable the power-on-reset override facility."""
        if flag is Control.ON:
            self._set_flag(Register.CTRL_STATUS_1, BitFlag.TESTC)
        else:
            self._clear_flag(Register.CTRL_STATUS_1, BitFlag.TESTC)

    def is_power_on_reset_override_enabled(self) -> bool:
        """Whether the power-on-reset override facility is enabled."""
        return self._is_flag_set(Register.CTRL_STATUS_1, BitFlag.TESTC)

    def get_voltage_low_flag(self) -> bool:
        """Whether the voltage low detector has been triggered."""
        return self._is_flag_set(Register.VL_SECONDS, BitFlag.VL)

    def clear_voltage_low_flag(self) -> None:
        """Clear the voltage low detector flag."""
        self._clear_flag(Register.VL_SECONDS, BitFlag.VL)

    def rtc_init(self) -> None:
        """Put the device into a known, low-power state.

        Clears both control registers and the voltage low flag, disables
        every alarm component and sets the timer to 1/60 Hz.
        """
        self._write_register(Register.CTRL_STATUS_1, 0)
        self._write_register(Register.CTRL_STATUS_2, 0)
        self.clear_voltage_low_flag()
        self.disable_all_alarms()
        self.set_timer_frequency(TimerFreq.TIMER_1_60HZ)