"""Morse code: text encoded as an on/off sequence and played as an LED effect."""

from .effects import BrightnessEvaluator

_U8 = 0xFF
_U16 = 0xFFFF

# Pre-ordered tree of morse codes, bit 1 = 'dah', 0 = 'dit'. The position in
# the string is the position in a binary tree whose root is at 1.
_LATIN = "*ETIANMSURWDKGOHVF*L*PJBXCYZQ**54*3***2*******16*******7***8*90"

_DURATION_DIT = 1
_DURATION_DAH = 3 * _DURATION_DIT
_DURATION_PAUSE_CHAR = _DURATION_DAH
_DURATION_PAUSE_WORD = 7 * _DURATION_DIT


class Bitset:
    """A fixed-size set of ``n`` bits, all initially cleared."""

    def __init__(self, n=0):
        self._n = n
        self._bits = bytearray(self.num_bytes(n))

    def __repr__(self):
        return f"Bitset({self._n})"

    def __len__(self):
        return self._n

    @property
    def size(self):
        return self._n

    @staticmethod
    def num_bytes(n):
        """Number of bytes needed to store ``n`` bits."""
        return ((n - 1) >> 3) + 1 if n > 0 else 0

    def set(self, i, val):
        """Set bit ``i`` to ``val``."""
        mask = 1 << (i & 7)
        if val:
            self._bits[i >> 3] |= mask
        else:
            self._bits[i >> 3] &= ~mask & _U8

    def test(self, i):
        """Return whether bit ``i`` is set."""
        return (self._bits[i >> 3] & (1 << (i & 7))) != 0


def _upper(c):
    return chr(ord(c) - 32) if "a" <= c <= "z" else c


class Morse:
    """The morse sequence of a text, one bit per dit duration (1 = on)."""

    def __init__(self, text=""):
        symbols = list(self._iterate_sequence(text))
        self._bits = Bitset(len(symbols))
        for i, val in enumerate(symbols):
            self._bits.set(i, val)

    def __repr__(self):
        return f"Morse(size={self.size})"

    def __len__(self):
        return self._bits.size

    @property
    def size(self):
        """Length of the complete morse sequence in bits."""
        return self._bits.size

    def test(self, i):
        """Return the ``i``-th bit of the sequence."""
        return self._bits.test(i)

    @staticmethod
    def treepos(c):
        """Position of ``c`` in the morse tree, counting from 1 (E=2, T=3, ...)."""
        index = _LATIN.find(c, 1)
        if index < 0:
            raise ValueError(f"character {c!r} has no morse code")
        return index + 1

    @staticmethod
    def pos_to_morse_code(code):
        """Encode a tree position: length in the high byte, symbols reversed in the low byte."""
        res = 0
        size = 0
        while code > 1:
            size += 1
            res = ((res << 1) | (code & 1)) & _U8
            code >>= 1
        return res | (size << 8)

    @classmethod
    def _iterate_sequence(cls, text):
        for pos, raw in enumerate(text):
            c = _upper(raw)
            if c == " ":
                yield from [False] * _DURATION_PAUSE_WORD
                continue

            morse_code = cls.pos_to_morse_code(cls.treepos(c))
            code = morse_code & _U8
            size = morse_code >> 8
            while size:
                size -= 1
                yield from [True] * (_DURATION_DAH if code & 1 else _DURATION_DIT)
                if size:
                    yield from [False] * _DURATION_DIT
                code >>= 1

            following = text[pos + 1 : pos + 2]
            if following and following != " ":
                yield from [False] * _DURATION_PAUSE_CHAR


class MorseEffect(BrightnessEvaluator):
    """Plays a message in morse code; ``speed`` is the duration of a dit in ms."""

    def __init__(self, message, speed=200):
        self.morse = Morse(message)
        self.speed = speed

    def __repr__(self):
        return f"MorseEffect(size={self.morse.size}, speed={self.speed})"

    def eval(self, t):
        pos = t // self.speed
        if pos >= self.morse.size:
            return 0
        return 255 if self.morse.test(pos) else 0

    def period(self):
        return ((self.morse.size + 1) * self.speed) & _U16