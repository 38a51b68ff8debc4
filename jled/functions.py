"""Integer brightness helpers: fade curve, pseudo random numbers and 8-bit scaling."""

FULL_BRIGHTNESS = 255
ZERO_BRIGHTNESS = 0

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF

# Samples of y(x) = (exp(sin((x - period/2) * pi / period)) - 0.36787944) * 108
# at x = 0, 32, ..., 256; values in between are linearly interpolated.
_FADE_ON_TABLE = (0, 3, 13, 33, 68, 118, 179, 232, 255)


def fadeon_func(t, period):
    """Return the fade-on brightness at time ``t`` of an effect lasting ``period`` ms."""
    t &= _U32
    period &= _U16
    if ((t + 1) & _U32) >= period:
        return FULL_BRIGHTNESS

    t = (((t << 8) & _U32) // period) & _U8
    i = t >> 5
    y0 = _FADE_ON_TABLE[i]
    y1 = _FADE_ON_TABLE[i + 1]
    x0 = i << 5
    return ((((t - x0) * (y1 - y0)) >> 5) + y0) & _U8


class _RandomState:
    __slots__ = ("value",)

    def __init__(self):
        self.value = 0


_random = _RandomState()


def rand_seed(seed):
    """Seed the shared pseudo random generator."""
    _random.value = seed & _U32


def rand8():
    """Return the next pseudo random byte of the shared generator."""
    state = _random.value
    if state & 1:
        state >>= 1
    else:
        state = (state >> 1) ^ 0x7FFFF159
    _random.value = state & _U32
    return state & _U8


def scale8(val, factor):
    """Scale byte ``val`` by byte ``factor``; factor 255 keeps the value."""
    return ((val & _U8) * (factor & _U8)) // 255


def lerp8by8(val, a, b):
    """Map byte ``val`` linearly onto the interval [a, b]."""
    val &= _U8
    a &= _U8
    b &= _U8
    if a == 0 and b == 255:
        return val
    delta = (b - a) & _U8
    return (a + scale8(val, delta)) & _U8


def invlerp8by8(val, a, b):
    """Inverse of :func:`lerp8by8`: map ``val`` in [a, b] back onto [0, 255]."""
    val &= _U8
    a &= _U8
    b &= _U8
    delta = (b - a) & _U16
    if delta == 0:
        return 0
    return ((((val - a) & _U16) * 255) // delta) & _U8