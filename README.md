# pcf8563

A driver for the NXP PCF8563 real-time clock and calendar. The chip sits on the
I2C bus at address `0x51`.

With the driver you can:

- read and set the date and time in one transfer, or set only the time
- read and set the century flag
- set, enable and disable the minute, hour, day and weekday alarms
- set the countdown timer, choose its frequency and start or stop it
- enable, disable and clear the timer and alarm interrupts, and choose
  continuous or pulsating interrupt output
- enable and disable the clock output and choose its frequency
- start and stop the clock, use the test modes, and read and clear the
  voltage-low flag

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests, install the `test`
extra:

```
pip install ".[test]"
pytest
```

## The bus

`PCF8563` works with any object that has these two methods:

- `write(address, data)` writes bytes to the device.
- `write_read(address, data, length)` writes bytes and then returns `length`
  bytes read back.

`pcf8563.device.I2CBus` is a `typing.Protocol` that describes this interface.
On Linux, `pcf8563.cli.LinuxI2CBus` provides it through a `/dev/i2c-N` device
file. Pass it a bus number or a path. It is also a context manager and closes
the file on exit.

When a bus method raises, the driver raises `BusError` and keeps the original
exception as the cause. The driver also raises `BusError` when a read returns
the wrong number of bytes. `destroy()` gives back the bus object. After that
call, every operation on the driver raises `BusError`.

## Usage

```python
from pcf8563.cli import LinuxI2CBus
from pcf8563.clock import DateTime, Time
from pcf8563.driver import PCF8563

with LinuxI2CBus(1) as bus:
    rtc = PCF8563(bus)
    rtc.rtc_init()

    rtc.set_datetime(DateTime(year=21, month=4, weekday=0, day=4,
                              hours=7, minutes=15, seconds=0))
    now = rtc.get_datetime()
    print(now.hours, now.minutes, now.seconds)

    rtc.set_time(Time(hours=8, minutes=0, seconds=0))
```

`rtc_init()` does the following:

- writes zero to both control registers, which turns off the interrupts, the
  timer and the special modes
- clears the voltage-low flag
- disables every alarm component
- sets the timer to 1/60 Hz to save power

`DateTime` and `Time` are frozen dataclasses. `set_datetime()` checks each
field and raises `InvalidInputError` for any value out of range:

| Field   | Range |
|---------|-------|
| year    | 0–99  |
| month   | 1–12  |
| weekday | 0–6   |
| day     | 1–31  |
| hours   | 0–23  |
| minutes | 0–59  |
| seconds | 0–59  |

`set_datetime()` also clears the century flag. To set it again afterwards, call
`set_century_flag(1)`. `get_century_flag()` returns `0` or `1`.

### Alarm

```python
from pcf8563.registers import Control

rtc.set_alarm_minutes(25)
rtc.set_alarm_hours(9)
rtc.control_alarm_minutes(Control.ON)
rtc.control_alarm_hours(Control.ON)
rtc.control_alarm_interrupt(Control.ON)

if rtc.get_alarm_flag():
    rtc.clear_alarm_flag()

rtc.disable_all_alarms()
```

Setting an alarm value does not change whether that component is enabled.
Enable or disable it with the `control_alarm_*` methods, and check it with the
`is_alarm_*_enabled` methods. The `get_alarm_*` methods read back the stored
values.

### Timer

```python
from pcf8563.timer import InterruptOutput, TimerFreq

rtc.set_timer_frequency(TimerFreq.TIMER_1HZ)
rtc.set_timer(30)                 # 0-255
rtc.control_timer_interrupt(Control.ON)
rtc.timer_interrupt_output(InterruptOutput.PULSATING)
rtc.control_timer(Control.ON)

if rtc.get_timer_flag():
    rtc.clear_timer_flag()
```

If both the alarm interrupt and the timer interrupt are enabled, the interrupt
pin goes active when either one fires.

### Clock output

```python
from pcf8563.clkout import ClkoutFreq

rtc.set_clkout_frequency(ClkoutFreq.CLKOUT_1024HZ)
rtc.control_clkout(Control.ON)
```

### Control

- `control_clock()` and `is_clock_running()` start the clock, stop it, and
  report whether it is running.
- `control_ext_clk_test_mode()` and `control_power_on_reset_override()` switch
  the two test modes on or off.
- `get_voltage_low_flag()` and `clear_voltage_low_flag()` read and clear the
  voltage-low flag.

### Errors

All errors derive from `PCF8563Error` in `pcf8563.registers`:

- `InvalidInputError` is raised for an argument out of range. It is also a
  `ValueError`.
- `BusError` is raised when a bus transfer fails.

## Command line

```
pcf8563
pcf8563 --bus 0
pcf8563 --device /dev/i2c-1
```

The command initialises the clock with `rtc_init()`, reads the date and time,
and prints them. Example output:

```
It's Sunday, 4 April 2021 07:15:00
```

By default it uses I2C bus 1. When it fails, it prints the error to standard
error and exits with status 1.

## Limitations

- There is no method to read back the clock-output frequency, the timer
  frequency or the timer interrupt output mode. You can only set them.
- The command only reads the date and time. It cannot set the date and time,
  alarms or the timer. Use the Python API for those.
- `LinuxI2CBus` needs a Linux I2C device file. On any other system, pass your
  own bus object to `PCF8563`.