"""I2C bus protocol and register-level access to the PCF8563."""

from __future__ import annotations

import contextlib
from typing import Iterator, Protocol, Sequence

from .registers import BusError, PCF8563Error

__all__ = ["DEVICE_ADDRESS", "I2CBus", "RegisterDevice"]

DEVICE_ADDRESS = 0x51


class I2CBus(Protocol):
    """What the driver needs from an I2C bus."""

    def write(self, address: int, data: bytes) -> None:
        """Write ``data`` to the device at ``address``."""
        ...

    def write_read(self, address: int, data: bytes, length: int) -> bytes:
        """Write ``data`` to the device, then read ``length`` bytes back."""
        ...


class RegisterDevice:
    """Register-level access to a PCF8563 over an I2C bus."""

    def __init__(self, i2c: I2CBus) -> None:
        self._i2c = i2c

    def destroy(self) -> I2CBus:
        """Release the driver and hand back the bus."""
        i2c = self._i2c
        self._i2c = None
        return i2c

    @contextlib.contextmanager
    def _bus(self) -> Iterator[I2CBus]:
        if self._i2c is None:
            raise BusError("the driver has been destroyed")
        try:
            yield self._i2c
        except PCF8563Error:
            raise
        except Exception as exc:
            raise BusError(str(exc)) from exc

    def _write_registers(self, register: int, values: Sequence[int]) -> None:
        payload = bytes([register, *values])
        with self._bus() as bus:
            bus.write(DEVICE_ADDRESS, payload)

    def _read_registers(self, register: int, count: int) -> bytes:
        with self._bus() as bus:
            data = bytes(bus.write_read(DEVICE_ADDRESS, bytes([register]), count))
        if len(data) != count:
            raise BusError(f"expected {count} bytes, got {len(data)}")
        return data

    def _write_register(self, register: int, value: int) -> None:
        self._write_registers(register, [value])

    def _read_register(self, register: int) -> int:
        return self._read_registers(register, 1)[0]

    def _is_flag_set(self, register: int, mask: int) -> bool:
        return self._read_register(register) & mask != 0

    def _set_flag(self, register: int, mask: int) -> None:
        value = self._read_register(register)
        if value & mask == 0:
            self._write_register(register, value | mask)

    def _clear_flag(self, register: int, mask: int) -> None:
        value = self._read_register(register)
        if value & mask != 0:
            self._write_register(register, value & ~mask & 0xFF)