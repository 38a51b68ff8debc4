# jled

Non-blocking LED effects for anything that can take a brightness value
between 0 and 255 and tell the time in milliseconds.

An LED is described once, with chained calls, and then advanced by calling
`update()` from your main loop. Nothing ever sleeps: each call works out the
brightness for the current time, writes it through a hardware abstraction
layer (HAL) and returns whether the effect is still running.

## A first example

```python
from jled.hal import MemoryHal
from jled.led import JLed

hal = MemoryHal(pin=13)
led = JLed(hal).blink(500, 500).repeat(3).delay_before(1000)

for ms in range(5000):
    hal.set_millis(ms)
    running = led.update()
    # hal.value holds the brightness last written, led.last_value the value
    # written during this call (None if nothing was written)
```

With a `SystemHal` the clock is the system's monotonic clock, and every
value written is handed to a callback:

```python
import time

from jled.hal import SystemHal
from jled.led import JLed

led = JLed(SystemHal(13, writer=lambda pin, value: print(pin, value)))
led.breathe(2000).repeat(5)

while led.update():
    time.sleep(0.001)
```

`JLed(13)` with a plain pin number creates such a `SystemHal` without a
callback.

## Effects

`jled.led.JLed` offers these effects, with times in milliseconds and
brightness values from 0 to 255:

- `on(duration=1)`, `off(duration=1)`, `set(brightness, duration=1)`: a constant level
- `blink(duration_on, duration_off)`: one on/off cycle
- `fade_on(duration, from_=0, to=255)`, `fade_off(duration, from_=255, to=0)`,
  `fade(from_, to, duration)`: smooth fades
- `breathe(period)` or `breathe(duration_fade_on, duration_on, duration_fade_off)`:
  fade on, hold, fade off; with one argument the period is split evenly into
  fading on and off
- `candle(speed=6, jitter=15, period=65535)`: a flickering candle
- `user_func(evaluator)`: any `BrightnessEvaluator` of your own

Each effect can be shaped further:

- `repeat(n)` or `forever()`
- `delay_before(ms)`: wait after the first update before the effect starts
- `delay_after(ms)`: pause after each repetition
- `low_active()`: invert the output for LEDs wired active-low
- `set_min_brightness(level)`, `set_max_brightness(level)`: scale output into a range
- `stop(mode)` with a `StopMode` (`TO_MIN_BRIGHTNESS`, `FULL_OFF`,
  `KEEP_CURRENT`), and `reset()` to start over

Every configuring call returns the LED itself, so calls chain. The state can
be read through the properties `evaluator`, `is_running`, `is_forever`,
`is_low_active`, `min_brightness` and `max_brightness`.

`update(t=None)` takes the time in ms, or asks the HAL's `millis()` when it
is omitted. Times wrap around at 32 bits, as a microcontroller's millisecond
counter does.

## Brightness evaluators

`jled.effects` holds the effects themselves. `BrightnessEvaluator` is the
abstract base with `period()` and `eval(t)`; `ConstantBrightnessEvaluator`,
`BlinkBrightnessEvaluator`, `BreatheBrightnessEvaluator` and
`CandleBrightnessEvaluator` are the built-in ones. Subclass
`BrightnessEvaluator` and pass an instance to `JLed.user_func()` to play an
effect of your own.

## Hardware abstraction

`jled.hal` holds the layers an LED writes through:

- `Hal`: the interface, with `analog_write(val)` and `millis()`
- `MemoryHal`: keeps the last written value in `value`; its clock is set by
  hand with `set_millis(ms)`. Useful for simulations and tests
- `SystemHal(pin, writer=None, *, ten_bit=False, clock=time.monotonic)`:
  counts milliseconds from its creation on the given clock and passes each
  value to `writer(pin, value)`; with `ten_bit=True` values are scaled to
  0..1023 first
- `scale_to_10bit(x)`: maps 0..255 onto 0..1023 (0 to 0, 255 to 1023)
- `Esp32ChanMapper`: hands out one of 16 PWM channels per pin with
  `chan_for_pin(pin)`, reusing channels in turn once all are taken

## Sequences

`jled.sequence.JLedSequence(mode, leds)` runs a group of LEDs together,
either all at once with the same time stamp (`SequenceMode.PARALLEL`) or one
after another (`SequenceMode.SEQUENCE`). It has `update()`, `reset()`,
`stop()`, `repeat(n)` and `forever()`, and the properties `is_running` and
`is_forever`.

## Morse code

`jled.morse` turns text into a blink pattern. `Morse(text)` encodes a
message into dits, dahs and pauses, one bit per dit duration, readable with
`test(i)` and `size`. `MorseEffect(message, speed=200)` is a brightness
evaluator that plays it, `speed` being the length of a dit in ms; hand it to
`JLed.user_func()`. `Bitset` is the small bit array behind it.

## Low-level helpers

`jled.functions` exposes the integer arithmetic the effects are built on:
`fadeon_func`, `scale8`, `lerp8by8`, `invlerp8by8`, and the small
pseudo-random generator `rand_seed` / `rand8` used by the candle effect.
They work with integers only and give the same results on every platform.

## What this package does not do

There is no driver for real PWM pins and no command-line program. Output
goes to `MemoryHal`, to the `writer` callback of `SystemHal`, or to a `Hal`
subclass you write for your own hardware.

## Tests

The test suite uses pytest, which the `test` extra installs.