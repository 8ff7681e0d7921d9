"""Alarm settings of the PCF8563: minute, hour, day and weekday alarms."""

from __future__ import annotations

from .device import RegisterDevice
from .registers import (
    BitFlag,
    Control,
    InvalidInputError,
    Register,
    decode_bcd,
    encode_bcd,
)

__all__ = ["AlarmMixin"]


class AlarmMixin(RegisterDevice):
    """Alarm operations.

    Each alarm register carries an AE bit; when it is set the component
    takes no part in the alarm, so a cleared AE bit means "enabled".
    """

    def _set_alarm_component(
        self, register: Register, value: int, low: int, high: int, name: str
    ) -> None:
        if not low <= value <= high:
            raise InvalidInputError(f"alarm {name} {value} is outside {low}-{high}")
        current = self._read_register(register)
        self._write_register(register, (current & BitFlag.AE) | encode_bcd(value))

    def _control_alarm_component(self, register: Register, status: Control) -> None:
        if status is Control.ON:
            self._clear_flag(register, BitFlag.AE)
        else:
            self._set_flag(register, BitFlag.AE)

    def _is_alarm_component_enabled(self, register: Register) -> bool:
        return not self._is_flag_set(register, BitFlag.AE)

    def set_alarm_minutes(self, minutes: int) -> None:
        """Set the alarm minutes [0-59], keeping the AE bit unchanged."""
        self._set_alarm_component(Register.MINUTE_ALARM, minutes, 0, 59, "minutes")

    def set_alarm_hours(self, hours: int) -> None:
        """Set the alarm hours [0-23], keeping the AE bit unchanged."""
        self._set_alarm_component(Register.HOUR_ALARM, hours, 0, 23, "hours")

    def set_alarm_day(self, day: int) -> None:
        """Set the alarm day [1-31], keeping the AE bit unchanged."""
        self._set_alarm_component(Register.DAY_ALARM, day, 1, 31, "day")

    def set_alarm_weekday(self, weekday: int) -> None:
        """Set the alarm weekday [0-6], keeping the AE bit unchanged."""
        self._set_alarm_component(Register.WEEKDAY_ALARM, weekday, 0, 6, "weekday")

    def control_alarm_minutes(self, status: Control) -> None:
        """Enable or disable the minutes alarm component."""
        self._control_alarm_component(Register.MINUTE_ALARM, status)

    def is_alarm_minutes_enabled(self) -> bool:
        """Whether the minutes alarm component is enabled."""
        return self._is_alarm_component_enabled(Register.MINUTE_ALARM)

    def control_alarm_hours(self, status: Control) -> None:
        """Enable or disable the hours alarm component."""
        self._control_alarm_component(Register.HOUR_ALARM, status)

    def is_alarm_hours_enabled(self) -> bool:
        """Whether the hours alarm component is enabled."""
        return self._is_alarm_component_enabled(Register.HOUR_ALARM)

    def control_alarm_day(self, status: Control) -> None:
        """Enable or disable the day alarm component."""
        self._control_alarm_component(Register.DAY_ALARM, status)

    def is_alarm_day_enabled(self) -> bool:
        """Whether the day alarm component is enabled."""
        return self._is_alarm_component_enabled(Register.DAY_ALARM)

    def control_alarm_weekday(self, status: Control) -> None:
        """Enable or disable the weekday alarm component."""
        self._control_alarm_component(Register.WEEKDAY_ALARM, status)

    def is_alarm_weekday_enabled(self) -> bool:
        """Whether the weekday alarm component is enabled."""
        return self._is_alarm_component_enabled(Register.WEEKDAY_ALARM)

    def control_alarm_interrupt(self, status: Control) -> None:
        """Enable or disable the alarm interrupt."""
        if status is Control.ON:
            self._set_flag(Register.CTRL_STATUS_2, BitFlag.AIE)
        else:
            self._clear_flag(Register.CTRL_STATUS_2, BitFlag.AIE)

    def get_alarm_minutes(self) -> int:
        """Read the alarm minutes setting."""
        return decode_bcd(self._read_register(Register.MINUTE_ALARM))

    def get_alarm_hours(self) -> int:
        """Read the alarm hours setting."""
        return decode_bcd(self._read_register(Register.HOUR_ALARM))

    def get_alarm_day(self) -> int:
        """Read the alarm day setting."""
        return decode_bcd(self._read_register(Register.DAY_ALARM))

    def get_alarm_weekday(self) -> int:
        """Read the alarm weekday setting."""
        return decode_bcd(self._read_register(Register.WEEKDAY_ALARM))

    def get_alarm_flag(self) -> bool:
        """Whether an alarm event has happened."""
        return self._is_flag_set(Register.CTRL_STATUS_2, BitFlag.AF)

    def clear_alarm_flag(self) -> None:
        """Clear the alarm flag."""
        self._clear_flag(Register.CTRL_STATUS_2, BitFlag.AF)

    def is_alarm_interrupt_enabled(self) -> bool:
        """Whether the alarm interrupt is enabled."""
        return self._is_flag_set(Register.CTRL_STATUS_2, BitFlag.AIE)

    def disable_all_alarms(self) -> None:
        """Disable every alarm component at once."""
        self.control_alarm_minutes(Control.OFF)
        self.control_alarm_hours(Control.OFF)
        self.control_alarm_day(Control.OFF)
        self.control_alarm_weekday(Control.OFF)