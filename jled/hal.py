"""Hardware abstraction: where brightness is written and where time comes from."""

import time
from abc import ABC, abstractmethod

_U32 = 0xFFFFFFFF


def scale_to_10bit(x):
    """Scale an 8-bit value to 10 bit: 0 -> 0, 255 -> 1023, keeping order."""
    x &= 0xFF
    return 0 if x == 0 else (x << 2) + 3


class Hal(ABC):
    """Output and clock of an LED."""

    @abstractmethod
    def analog_write(self, val):
        """Write brightness ``val`` (0..255) to the output."""

    @abstractmethod
    def millis(self):
        """Current time in ms, wrapping at 32 bit."""


class MemoryHal(Hal):
    """A HAL keeping output and time in memory; the clock is set by hand."""

    def __init__(self, pin=0, millis=0):
        self.pin = pin
        self.value = 0
        self.is_output = False
        self._millis = millis

    def __repr__(self):
        return f"MemoryHal(pin={self.pin}, value={self.value}, millis={self._millis})"

    def analog_write(self, val):
        # the pin is configured lazily on first use
        self.is_output = True
        self.value = val & 0xFF

    def millis(self):
        return self._millis & _U32

    def set_millis(self, millis):
        """Set the time reported by :meth:`millis`."""
        self._millis = millis


class SystemHal(Hal):
    """A HAL using a monotonic clock and passing values to a writer callback.

    ``writer(pin, value)`` receives every written value; with ``ten_bit``
    values are scaled to a 10-bit range first.
    """

    def __init__(self, pin, writer=None, *, ten_bit=False, clock=time.monotonic):
        self.pin = pin
        self.value = 0
        self._writer = writer
        self._ten_bit = ten_bit
        self._clock = clock
        self._start = clock()

    def __repr__(self):
        return f"SystemHal(pin={self.pin}, value={self.value})"

    def analog_write(self, val):
        val &= 0xFF
        self.value = scale_to_10bit(val) if self._ten_bit else val
        if self._writer is not None:
            self._writer(self.pin, self.value)

    def millis(self):
        return int((self._clock() - self._start) * 1000) & _U32


class Esp32ChanMapper:
    """Assigns PWM channels to pins, reusing channels once all are taken."""

    MAX_CHANNELS = 16

    def __init__(self):
        self._channels = [None] * self.MAX_CHANNELS
        self._next = 0

    def chan_for_pin(self, pin):
        """Return the channel of ``pin``, assigning one if it has none."""
        if pin in self._channels:
            return self._channels.index(pin)
        if None in self._channels:
            chan = self._channels.index(None)
        else:
            chan = self._next
            self._next = (self._next + 1) % self.MAX_CHANNELS
        self._channels[chan] = pin
        return chan