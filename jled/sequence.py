"""A group of LEDs played together, either in parallel or one after another."""

from enum import Enum

_U16 = 0xFFFF

REPEAT_FOREVER = 65535


class SequenceMode(Enum):
    """How the LEDs of a :class:`JLedSequence` are played."""

    SEQUENCE = 0
    PARALLEL = 1


class JLedSequence:
    """Controls several :class:`~jled.led.JLed` objects at once.

    In ``PARALLEL`` mode all LEDs are updated with the same time stamp; in
    ``SEQUENCE`` mode each LED plays its effect to the end before the next
    one starts. Configuration methods return the sequence for chaining.
    """

    def __init__(self, mode, leds):
        self.mode = mode
        self.leds = list(leds)
        self._cur = 0
        self._num_repetitions = 1
        self._iteration = 0
        self._is_running = True

    def __repr__(self):
        return (
            f"JLedSequence(mode={self.mode.name}, leds={len(self.leds)}, "
            f"running={self._is_running})"
        )

    @property
    def is_forever(self):
        return self._num_repetitions == REPEAT_FOREVER

    @property
    def is_running(self):
        return self._is_running

    def update(self):
        """Advance all LEDs; returns True while the sequence is still playing."""
        if not self._is_running or not self.leds:
            return False

        if self.mode is SequenceMode.PARALLEL:
            led_running = self._update_parallel()
        else:
            led_running = self._update_sequentially()
        if led_running:
            return True

        # start the next iteration of the sequence
        self._cur = 0
        self._reset_leds()
        self._iteration = (self._iteration + 1) & _U16
        self._is_running = (
            self._iteration < self._num_repetitions
            or self._num_repetitions == REPEAT_FOREVER
        )
        return self._is_running

    def reset(self):
        """Reset all LEDs and start the sequence over."""
        self._reset_leds()
        self._cur = 0
        self._iteration = 0
        self._is_running = True

    def stop(self):
        """Stop the sequence and every LED in it."""
        self._is_running = False
        for led in self.leds:
            led.stop()

    def repeat(self, num_repetitions):
        """Play the whole sequence ``num_repetitions`` times."""
        self._num_repetitions = num_repetitions & _U16
        return self

    def forever(self):
        """Repeat the sequence forever."""
        return self.repeat(REPEAT_FOREVER)

    def _update_parallel(self):
        t = self.leds[0].hal.millis()
        results = [led.update(t) for led in self.leds]
        return any(results)

    def _update_sequentially(self):
        if not self.leds[self._cur].update():
            self._cur += 1
            return self._cur < len(self.leds)
        return True

    def _reset_leds(self):
        for led in self.leds:
            led.reset()