"""
Bounded history of recent calculations.

Owned by the caller (CLI session, UI); the engines never see it.
"""

from collections import deque
from typing import Iterator, Optional

from casingcalc.models.outputs import Calculation

DEFAULT_HISTORY_SIZE = 10


class CalculationHistory:
    """Ring buffer of calculations, newest first."""

    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE):
        if max_size < 1:
            raise ValueError(f"history size must be at least 1, got {max_size}")
        self._items: deque[Calculation] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._items.maxlen

    def add(self, calculation: Calculation) -> None:
        """Record a calculation, dropping the oldest one when full."""
        self._items.appendleft(calculation)

    def latest(self) -> Optional[Calculation]:
        return self._items[0] if self._items else None

    def get(self, calculation_id: str) -> Optional[Calculation]:
        for calculation in self._items:
            if calculation.id == calculation_id:
                return calculation
        return None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Calculation]:
        return iter(self._items)
