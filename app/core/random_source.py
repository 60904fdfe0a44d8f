"""
Random suffix generation for values file names.

One process-wide random source, seeded once from the current time. Access is
guarded by a lock because sync route handlers run concurrently in the thread pool.
"""

import logging
import random
import threading
import time

from app.core.config import SUFFIX_ALPHABET

logger = logging.getLogger(__name__)


class RandomSource:
    """Lock-guarded pseudo-random source producing letter-only suffixes."""

    def __init__(self, seed: int | None = None, alphabet: str = SUFFIX_ALPHABET) -> None:
        if seed is None:
            seed = time.time_ns()
        self._rng = random.Random(seed)
        self._lock = threading.Lock()
        self.alphabet = alphabet

    def generate(self, length: int) -> str:
        """Return `length` characters, each drawn uniformly from the alphabet."""
        if length < 1:
            raise ValueError(f"length must be a positive integer, got {length!r}")
        with self._lock:
            chars = [self._rng.choice(self.alphabet) for _ in range(length)]
        return "".join(chars)


_source: RandomSource | None = None
_source_lock = threading.Lock()


def get_random_source() -> RandomSource:
    """Return the process-wide random source, creating it on first use."""
    global _source
    with _source_lock:
        if _source is None:
            _source = RandomSource()
            logger.info("[random_source:get_random_source] seeded process-wide random source")
        return _source
