"""Multi-stream Lehmer random number generator.

The generator has 256 independent streams. Each stream produces numbers
uniformly distributed strictly between 0.0 and 1.0, with period
``MODULUS - 1``.
"""

from __future__ import annotations

import itertools
import math
import time

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789

_PROMPT = "\nEnter a positive integer seed (9 digits or less) >> "
_RETRY = "\nInput out of range ... try again"


class RandomStreams:
    """A set of 256 Lehmer generator streams, one of which is current."""

    def __init__(self) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False

    @property
    def stream(self) -> int:
        """Index of the current stream."""
        return self._stream

    def random(self) -> float:
        """Advance the current stream and return a number in (0, 1)."""
        q, r = divmod(MODULUS, MULTIPLIER)
        seed = self._seeds[self._stream]
        t = MULTIPLIER * (seed % q) - r * (seed // q)
        self._seeds[self._stream] = t if t > 0 else t + MODULUS
        return self._seeds[self._stream] / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and derive every other stream from it."""
        q, r = divmod(MODULUS, A256)
        self._initialized = True
        current = self._stream
        self._stream = 0
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            prev = self._seeds[j - 1]
            value = A256 * (prev % q) - r * (prev // q)
            self._seeds[j] = value if value > 0 else value + MODULUS

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive ``x`` is used (reduced modulo ``MODULUS``); a negative one
        takes the state from the clock; zero asks for a seed on standard input.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        if x == 0:
            x = self._ask_seed()
        self._seeds[self._stream] = x

    @staticmethod
    def _ask_seed() -> int:
        while True:
            reply = input(_PROMPT)
            try:
                value = int(reply.strip())
            except ValueError:
                value = 0
            if 0 < value < MODULUS:
                return value
            print(_RETRY)

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo 256) the current one."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)


def self_test() -> bool:
    """Check the generator against its published reference values."""
    streams = RandomStreams()
    streams.select_stream(0)
    streams.put_seed(1)
    for _ in range(10000):
        streams.random()
    ok = streams.get_seed() == CHECK
    streams.select_stream(1)
    streams.plant_seeds(1)
    return ok and streams.get_seed() == A256


def find_value(seed: int, target: int) -> int:
    """Draw from stream 1 seeded with ``seed`` until ``target`` comes up.

    Each draw is scaled to an integer in ``[0, 10**9)``. Returns the number
    of draws taken. Raises ``LookupError`` if the stream cycles without
    producing ``target``.
    """
    if not 0 <= target < 1_000_000_000:
        raise ValueError(f"target {target} is outside [0, 1000000000)")
    streams = RandomStreams()
    streams.select_stream(1)
    streams.put_seed(seed)
    start = streams.get_seed()
    for draws in itertools.count(1):
        if math.floor(streams.random() * 1_000_000_000) == target:
            return draws
        if streams.get_seed() == start:
            raise LookupError(f"value {target} never occurs for seed {seed}")
    raise AssertionError("unreachable")