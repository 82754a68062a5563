"""Monotonic UUID version 7 generator (RFC 9562)."""

import secrets
import threading
import time
from uuid import UUID

_COUNTER_BITS = 42
_COUNTER_MAX = (1 << _COUNTER_BITS) - 1
_RANDOM_TAIL_BITS = 32
_TIMESTAMP_MAX = (1 << 48) - 1


class TimeOrderedUUIDGenerator:
    """
    Thread-safe generator of time-ordered UUIDs.

    Layout (most significant first):
        48 bits  Unix timestamp in milliseconds
         4 bits  version (0b0111)
        12 bits  counter, high part (rand_a)
         2 bits  variant (0b10)
        30 bits  counter, low part
        32 bits  random

    The 42-bit counter is reseeded with a random value (top bit cleared,
    leaving room to increment) whenever the millisecond changes, and is
    incremented for every UUID issued within the same millisecond. If it
    overflows, or the wall clock steps backwards, the stored timestamp is
    used (advanced by one millisecond on overflow), so every value issued
    by one instance is strictly greater than the previous one.

    Example:
        >>> generator = TimeOrderedUUIDGenerator()
        >>> first, second = generator.generate(), generator.generate()
        >>> first < second
        True
    """

    def __init__(self, clock=None):
        """
        Initialize generator.

        Args:
            clock: Callable returning the current Unix time in milliseconds
                (default: wall clock). Injectable for tests.
        """
        self._clock = clock or (lambda: time.time_ns() // 1_000_000)
        self._lock = threading.Lock()
        self._last_ms = -1
        self._counter = 0

    def generate(self) -> UUID:
        """Return the next UUID v7."""
        with self._lock:
            now_ms = self._clock()
            if now_ms > self._last_ms:
                self._last_ms = now_ms
                self._counter = secrets.randbits(_COUNTER_BITS - 1)
            else:
                self._counter += 1
                if self._counter > _COUNTER_MAX:
                    self._last_ms += 1
                    self._counter = secrets.randbits(_COUNTER_BITS - 1)
            timestamp_ms = self._last_ms & _TIMESTAMP_MAX
            counter = self._counter

        rand_a = counter >> 30
        counter_low = counter & ((1 << 30) - 1)
        tail = secrets.randbits(_RANDOM_TAIL_BITS)

        value = timestamp_ms << 80
        value |= 0x7 << 76
        value |= rand_a << 64
        value |= 0b10 << 62
        value |= counter_low << 32
        value |= tail
        return UUID(int=value)

    def generate_many(self, count: int) -> list[UUID]:
        """Return count UUIDs in ascending order."""
        return [self.generate() for _ in range(count)]


# Process-wide instance shared by all requests
uuid7_generator = TimeOrderedUUIDGenerator()
