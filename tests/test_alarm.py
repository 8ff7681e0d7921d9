import pytest

from pcf8563.alarm import AlarmMixin
from pcf8563.device import DEVICE_ADDRESS
from pcf8563.registers import (
    BitFlag,
    BusError,
    Control,
    InvalidInputError,
    Register,
    encode_bcd,
)


class Chip(bytearray):
    """The register file itself, answering bus transfers."""

    def __init__(self, preset=(), broken=False, broken_writes=False):
        super().__init__(16)
        for register, value in dict(preset).items():
            self[register] = value
        self.broken = broken
        self.broken_writes = broken_writes
        self.writes = []
        self.reads = []

    def _accept(self, address):
        if self.broken:
            raise OSError("bus fault")
        assert address == DEVICE_ADDRESS

    def write(self, address, data):
        self._accept(address)
        if self.broken_writes:
            raise OSError("bus fault")
        data = bytes(data)
        self.writes.append(data)
        self[data[0] : data[0] + len(data) - 1] = data[1:]

    def write_read(self, address, data, length):
        self._accept(address)
        self.reads.append(bytes(data))
        return bytes(self[data[0] : data[0] + length])


def wired(preset=()):
    chip = Chip(preset)
    return chip, AlarmMixin(chip)


SETTERS = [
    ("set_alarm_minutes", "get_alarm_minutes", Register.MINUTE_ALARM),
    ("set_alarm_hours", "get_alarm_hours", Register.HOUR_ALARM),
    ("set_alarm_day", "get_alarm_day", Register.DAY_ALARM),
    ("set_alarm_weekday", "get_alarm_weekday", Register.WEEKDAY_ALARM),
]

CONTROLS = [
    ("control_alarm_minutes", "is_alarm_minutes_enabled", Register.MINUTE_ALARM),
    ("control_alarm_hours", "is_alarm_hours_enabled", Register.HOUR_ALARM),
    ("control_alarm_day", "is_alarm_day_enabled", Register.DAY_ALARM),
    ("control_alarm_weekday", "is_alarm_weekday_enabled", Register.WEEKDAY_ALARM),
]

LIMITS = {
    "set_alarm_minutes": (0, 59),
    "set_alarm_hours": (0, 23),
    "set_alarm_day": (1, 31),
    "set_alarm_weekday": (0, 6),
}


@pytest.mark.parametrize(
    "setter, getter, value",
    [
        (setter, getter, value)
        for setter, getter, _ in SETTERS
        for value in LIMITS[setter]
    ],
)
def test_alarm_component_round_trip(setter, getter, value):
    _, rtc = wired()
    getattr(rtc, setter)(value)
    assert getattr(rtc, getter)() == value


@pytest.mark.parametrize("setter, getter, register", SETTERS)
@pytest.mark.parametrize(
    "initial, value, expected",
    [
        (BitFlag.AE, 5, BitFlag.AE | encode_bcd(5)),
        (0x03, 4, encode_bcd(4)),
    ],
    ids=["disabled", "enabled"],
)
def test_setting_alarm_keeps_enable_bit(setter, getter, register, initial, value, expected):
    chip, rtc = wired({register: initial})
    getattr(rtc, setter)(value)
    assert chip[register] == expected
    assert getattr(rtc, getter)() == value


def test_set_alarm_hours_wire_bytes():
    chip, rtc = wired()
    rtc.set_alarm_hours(9)
    assert chip.writes == [bytes([Register.HOUR_ALARM, 9])]


@pytest.mark.parametrize(
    "setter, value",
    [
        ("set_alarm_minutes", 60),
        ("set_alarm_minutes", -1),
        ("set_alarm_hours", 24),
        ("set_alarm_day", 0),
        ("set_alarm_day", 32),
        ("set_alarm_weekday", 7),
    ],
)
def test_out_of_range_alarm_is_rejected(setter, value):
    chip, rtc = wired()
    with pytest.raises(InvalidInputError):
        getattr(rtc, setter)(value)
    assert chip.writes == []


@pytest.mark.parametrize("control, query, register", CONTROLS)
def test_control_alarm_component(control, query, register):
    chip, rtc = wired({register: encode_bcd(12)})
    for status, enabled, stored in (
        (Control.OFF, False, BitFlag.AE | encode_bcd(12)),
        (Control.ON, True, encode_bcd(12)),
    ):
        getattr(rtc, control)(status)
        assert getattr(rtc, query)() is enabled
        assert chip[register] == stored


@pytest.mark.parametrize("control, query, register", CONTROLS)
def test_control_without_change_does_not_write(control, query, register):
    chip, rtc = wired({register: BitFlag.AE})
    getattr(rtc, control)(Control.OFF)
    assert chip.writes == []


def test_alarm_interrupt_control():
    chip, rtc = wired({Register.CTRL_STATUS_2: BitFlag.TIE})
    for status, enabled, stored in (
        (Control.ON, True, BitFlag.TIE | BitFlag.AIE),
        (Control.OFF, False, BitFlag.TIE),
    ):
        rtc.control_alarm_interrupt(status)
        assert rtc.is_alarm_interrupt_enabled() is enabled
        assert chip[Register.CTRL_STATUS_2] == stored


def test_alarm_flag_read_and_clear():
    chip, rtc = wired({Register.CTRL_STATUS_2: BitFlag.AF | BitFlag.AIE})
    assert rtc.get_alarm_flag() is True
    rtc.clear_alarm_flag()
    assert rtc.get_alarm_flag() is False
    assert chip[Register.CTRL_STATUS_2] == BitFlag.AIE


def test_disable_all_alarms():
    values = {
        Register.MINUTE_ALARM: encode_bcd(25),
        Register.HOUR_ALARM: encode_bcd(9),
        Register.DAY_ALARM: encode_bcd(4),
        Register.WEEKDAY_ALARM: encode_bcd(2),
    }
    chip, rtc = wired(values)
    rtc.disable_all_alarms()
    assert {register: chip[register] for register in values} == {
        register: value | BitFlag.AE for register, value in values.items()
    }
    assert not any(getattr(rtc, query)() for _, query, _ in CONTROLS)
    assert (rtc.get_alarm_minutes(), rtc.get_alarm_hours()) == (25, 9)


def test_bus_failure_on_read_raises_bus_error():
    chip = Chip({Register.CTRL_STATUS_2: BitFlag.AF}, broken=True)
    rtc = AlarmMixin(chip)
    with pytest.raises(BusError):
        rtc.get_alarm_flag()
    assert chip.reads == []
    assert chip[Register.CTRL_STATUS_2] == BitFlag.AF


def test_bus_failure_on_write_raises_bus_error_and_leaves_register():
    preset = BitFlag.AE | encode_bcd(30)
    chip = Chip({Register.MINUTE_ALARM: preset}, broken_writes=True)
    rtc = AlarmMixin(chip)
    with pytest.raises(BusError):
        rtc.set_alarm_minutes(10)
    assert chip.reads == [bytes([Register.MINUTE_ALARM])]
    assert chip.writes == []
    assert chip[Register.MINUTE_ALARM] == preset