"""Non-blocking LED control: an effect played over time with repeats and delays."""

from enum import Enum

from .effects import (
    BlinkBrightnessEvaluator,
    BreatheBrightnessEvaluator,
    CandleBrightnessEvaluator,
    ConstantBrightnessEvaluator,
)
from .functions import FULL_BRIGHTNESS, ZERO_BRIGHTNESS, lerp8by8
from .hal import Hal, SystemHal

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF
_SIGN32 = 0x80000000

REPEAT_FOREVER = 65535


class StopMode(Enum):
    """What :meth:`JLed.stop` writes to the LED."""

    TO_MIN_BRIGHTNESS = 0
    FULL_OFF = 1
    KEEP_CURRENT = 2


class _State(Enum):
    STOPPED = 0
    INIT = 1
    RUNNING = 2
    IN_DELAY_AFTER_PHASE = 3


def _is_negative32(value):
    """True if ``value`` read as a signed 32-bit integer is negative."""
    return (value & _U32) >= _SIGN32


class JLed:
    """An LED playing a brightness effect, driven by repeated :meth:`update` calls.

    ``hal`` is a :class:`~jled.hal.Hal`, or a pin number for which a
    :class:`~jled.hal.SystemHal` is created. All configuration methods
    return the LED itself so that calls can be chained.
    """

    def __init__(self, hal):
        self.hal = hal if isinstance(hal, Hal) else SystemHal(hal)
        self._evaluator = None
        self._state = _State.INIT
        self._low_active = False
        self._min_brightness = 0
        self._max_brightness = 255
        self._num_repetitions = 1
        self._last_update_time = 0
        self._time_start = 0
        self._delay_before = 0
        self._delay_after = 0
        self.last_value = None

    def __repr__(self):
        return (
            f"JLed(hal={self.hal!r}, effect={self._evaluator!r}, "
            f"state={self._state.name})"
        )

    @property
    def evaluator(self):
        """The brightness evaluator currently in use, or None."""
        return self._evaluator

    @property
    def is_low_active(self):
        return self._low_active

    @property
    def is_forever(self):
        return self._num_repetitions == REPEAT_FOREVER

    @property
    def is_running(self):
        return self._state is not _State.STOPPED

    @property
    def min_brightness(self):
        return self._min_brightness

    @property
    def max_brightness(self):
        return self._max_brightness

    def low_active(self):
        """Invert every value written to the output."""
        self._low_active = True
        return self

    def on(self, duration=1):
        """Turn the LED on for ``duration`` ms."""
        return self.set(FULL_BRIGHTNESS, duration)

    def off(self, duration=1):
        """Turn the LED off for ``duration`` ms."""
        return self.set(ZERO_BRIGHTNESS, duration)

    def set(self, brightness, duration=1):
        """Hold the LED at ``brightness`` for ``duration`` ms."""
        return self._set_evaluator(ConstantBrightnessEvaluator(brightness, duration))

    def fade_on(self, duration, from_=0, to=FULL_BRIGHTNESS):
        """Fade the LED on from ``from_`` to ``to``."""
        return self._set_evaluator(BreatheBrightnessEvaluator(duration, 0, 0, from_, to))

    def fade_off(self, duration, from_=FULL_BRIGHTNESS, to=0):
        """Fade the LED off from ``from_`` down to ``to``."""
        return self._set_evaluator(BreatheBrightnessEvaluator(0, 0, duration, to, from_))

    def fade(self, from_, to, duration):
        """Fade from ``from_`` to ``to`` within ``duration`` ms."""
        if from_ < to:
            return self.fade_on(duration, from_, to)
        return self.fade_off(duration, from_, to)

    def breathe(self, duration_fade_on, duration_on=None, duration_fade_off=None):
        """Breathe effect.

        With one argument it is the whole period, split evenly into fading on
        and off; with three they are the fade-on, on and fade-off durations.
        """
        if duration_on is None and duration_fade_off is None:
            period = duration_fade_on & _U16
            duration_fade_on, duration_on, duration_fade_off = period // 2, 0, period // 2
        elif duration_on is None or duration_fade_off is None:
            raise TypeError("breathe() takes either one or three durations")
        return self._set_evaluator(
            BreatheBrightnessEvaluator(duration_fade_on, duration_on, duration_fade_off)
        )

    def blink(self, duration_on, duration_off):
        """Blink with the given on and off durations."""
        return self._set_evaluator(BlinkBrightnessEvaluator(duration_on, duration_off))

    def candle(self, speed=6, jitter=15, period=0xFFFF):
        """Simulate a flickering candle."""
        return self._set_evaluator(CandleBrightnessEvaluator(speed, jitter, period))

    def user_func(self, evaluator):
        """Use a user provided brightness evaluator."""
        return self._set_evaluator(evaluator)

    def repeat(self, num_repetitions):
        """Play the effect ``num_repetitions`` times."""
        self._num_repetitions = num_repetitions & _U16
        return self

    def forever(self):
        """Repeat the effect forever."""
        return self.repeat(REPEAT_FOREVER)

    def delay_before(self, delay):
        """Wait ``delay`` ms after the first update before the effect starts."""
        self._delay_before = delay & _U16
        return self

    def delay_after(self, delay):
        """Wait ``delay`` ms after each repetition."""
        self._delay_after = delay & _U16
        return self

    def stop(self, mode=StopMode.TO_MIN_BRIGHTNESS):
        """Stop the effect; later updates have no effect."""
        if mode is not StopMode.KEEP_CURRENT:
            self._write(
                ZERO_BRIGHTNESS if mode is StopMode.FULL_OFF else self._min_brightness
            )
        self._state = _State.STOPPED
        return self

    def reset(self):
        """Return to the initial state so the effect starts over."""
        self._time_start = 0
        self._last_update_time = 0
        self._state = _State.INIT
        return self

    def set_min_brightness(self, level):
        """Set the lowest brightness written (0..255)."""
        self._min_brightness = level & _U8
        return self

    def set_max_brightness(self, level):
        """Set the highest brightness written (0..255)."""
        self._max_brightness = level & _U8
        return self

    def update(self, t=None):
        """Advance the effect to time ``t`` (ms; the HAL's clock if omitted).

        Returns True while the effect is running. The value written during
        this call, after min/max scaling, is left in :attr:`last_value`,
        which is None when nothing was written.
        """
        self.last_value = None
        if t is None:
            t = self.hal.millis()
        t &= _U32

        if self._state is _State.STOPPED or self._evaluator is None:
            return False

        if self._state is _State.INIT:
            self._time_start = (t + self._delay_before) & _U32
            self._state = _State.RUNNING
        elif (t & 0xFF) == self._last_update_time:
            # no need to process updates twice during one time tick
            return True

        self._last_update_time = t & 0xFF

        if _is_negative32(t - self._time_start):
            return True

        period = self._evaluator.period() & _U16
        cycle = period + self._delay_after

        if not self.is_forever:
            time_end = (self._time_start + cycle * self._num_repetitions - 1) & _U32
            if not _is_negative32(t - time_end):
                # make sure the final value at t = period - 1 is written
                self._state = _State.STOPPED
                self._write_current(period - 1)
                return False

        t = ((t - self._time_start) & _U32) % cycle
        if t < period:
            self._state = _State.RUNNING
            self._write_current(t)
        elif self._state is _State.RUNNING:
            # in the delay-after phase write only once at its beginning
            self._state = _State.IN_DELAY_AFTER_PHASE
            self._write_current(period - 1)
        return True

    def _set_evaluator(self, evaluator):
        self._evaluator = evaluator
        return self.reset()

    def _write_current(self, t):
        val = lerp8by8(
            self._evaluator.eval(t & _U32), self._min_brightness, self._max_brightness
        )
        self.last_value = val
        self._write(val)

    def _write(self, val):
        self.hal.analog_write(FULL_BRIGHTNESS - val if self._low_active else val)