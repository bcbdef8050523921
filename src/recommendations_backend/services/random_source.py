"""Random number sources injectable into the recommendation service."""

from __future__ import annotations

import random
from collections.abc import Iterable
from itertools import cycle
from typing import Protocol


class RandomSource(Protocol):
    """Anything with a ``random()`` returning a float in ``[0, 1)``; :class:`random.Random` qualifies."""

    def random(self) -> float: ...


class SequenceRandom:
    """Replays a fixed sequence of draws, cycling when it runs out."""

    def __init__(self, values: Iterable[float]) -> None:
        draws = list(values)
        if not draws:
            raise ValueError("SequenceRandom needs at least one value")
        for value in draws:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"random draws must lie in [0, 1), got {value!r}")
        self._draws = cycle(draws)

    def random(self) -> float:
        return next(self._draws)


def default_random_source() -> RandomSource:
    return random.Random()


__all__ = ["RandomSource", "SequenceRandom", "default_random_source"]
