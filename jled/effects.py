"""Brightness evaluators: functions of time that yield an LED's brightness."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .functions import (
    FULL_BRIGHTNESS,
    ZERO_BRIGHTNESS,
    fadeon_func,
    lerp8by8,
    rand8,
)

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


class BrightnessEvaluator(ABC):
    """An effect: brightness as a function of t in [0, period - 1].

    ``eval(period() - 1)`` is called last to set the LED's final state.
    """

    @abstractmethod
    def period(self):
        """Duration of one cycle of the effect in ms."""

    @abstractmethod
    def eval(self, t):
        """Brightness (0..255) at time ``t``."""


@dataclass
class ConstantBrightnessEvaluator(BrightnessEvaluator):
    """Keeps the LED at a constant brightness for ``duration`` ms."""

    val: int
    duration: int = 1

    def period(self):
        return self.duration & _U16

    def eval(self, t):
        return self.val & _U8


@dataclass
class BlinkBrightnessEvaluator(BrightnessEvaluator):
    """One on-off cycle per period."""

    duration_on: int
    duration_off: int

    def period(self):
        return (self.duration_on + self.duration_off) & _U16

    def eval(self, t):
        return FULL_BRIGHTNESS if t < (self.duration_on & _U16) else ZERO_BRIGHTNESS


@dataclass
class BreatheBrightnessEvaluator(BrightnessEvaluator):
    """Fade on, stay on, fade off, scaled into the range [from_, to]."""

    duration_fade_on: int
    duration_on: int
    duration_fade_off: int
    from_: int = 0
    to: int = FULL_BRIGHTNESS

    def period(self):
        return (self.duration_fade_on + self.duration_on + self.duration_fade_off) & _U16

    def eval(self, t):
        fade_on = self.duration_fade_on & _U16
        on = self.duration_on & _U16
        if t < fade_on:
            val = fadeon_func(t, fade_on)
        elif t < fade_on + on:
            val = FULL_BRIGHTNESS
        else:
            val = fadeon_func((self.period() - t) & _U32, self.duration_fade_off)
        return lerp8by8(val, self.from_, self.to)


_CANDLE_TABLE = (5, 10, 20, 30, 50, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 255)


class CandleBrightnessEvaluator(BrightnessEvaluator):
    """Flickering candle simulation.

    ``speed`` (0..15): 0 is fastest, each step halves the speed.
    ``jitter``: 0 none, 15 candle, 64 fire, 255 storm.
    """

    def __init__(self, speed, jitter, period):
        self.speed = speed & _U8
        self.jitter = jitter & _U8
        self._period = period & _U16
        self._last = 5
        self._last_t = 0

    def __repr__(self):
        return (
            f"{type(self).__name__}(speed={self.speed}, jitter={self.jitter}, "
            f"period={self._period})"
        )

    def period(self):
        return self._period

    def eval(self, t):
        tick = (t & _U32) >> self.speed
        if tick == self._last_t:
            return self._last
        self._last_t = tick
        rnd = rand8()
        if rnd >= self.jitter:
            self._last = 255
        else:
            self._last = (50 + _CANDLE_TABLE[rnd & 0xF]) & _U8
        return self._last