"""Id generation strategies for RecordStore.

A strategy is any callable taking the set of ids currently in use and
returning an int.
"""
from __future__ import annotations

import random
from typing import TYPE_CHECKING, AbstractSet, Callable

if TYPE_CHECKING:
    from recstore.config import StoreConfig

IdStrategy = Callable[[AbstractSet[int]], int]


class MonotonicIds:
    """Counter that never hands out an id already present in the store."""

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self, in_use: AbstractSet[int]) -> int:
        while self._next in in_use:
            self._next += 1
        value = self._next
        self._next += 1
        return value


class RandomIds:
    """Uniform draw over ``[low, high]``.

    Ignores ``in_use``: a draw that hits an existing id overwrites that record.
    """

    def __init__(self, low: int = 0, high: int = 999, rng: random.Random | None = None):
        if low > high:
            raise ValueError(f"empty id range [{low}, {high}]")
        self.low = low
        self.high = high
        self._rng = rng or random.Random()

    def __call__(self, in_use: AbstractSet[int]) -> int:
        return self._rng.randint(self.low, self.high)


def make_id_strategy(config: StoreConfig) -> IdStrategy:
    """Build the strategy named by ``config.id_strategy``."""
    if config.id_strategy == "counter":
        return MonotonicIds(config.counter_start)
    if config.id_strategy == "random":
        return RandomIds(config.random_id_low, config.random_id_high)
    raise ValueError(f"Unknown id strategy: {config.id_strategy!r}")
