"""
Cooperative cancellation and step pacing for a generation run.

The generator polls a CancellationSignal at the start of every step (a grid
row, a leaf, a corridor) and between phases. Nothing already painted is
undone; callers who need all-or-nothing must snapshot the grid themselves.
"""

import time


class GenerationCancelled(Exception):
    """Raised at a suspension point once cancellation has been requested."""


class CancellationSignal:
    """A pollable cancellation flag. Once set it stays set."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise GenerationCancelled()


class StepPacing:
    """
    Delay between visual steps so a host can watch the layout appear.

    Purely cosmetic: a zero delay (the default) makes wait() a no-op.
    """

    def __init__(self, delay_seconds: float = 0.0) -> None:
        if delay_seconds < 0:
            raise ValueError(f"Delay must not be negative, got {delay_seconds}")
        self.delay_seconds = delay_seconds

    def wait(self) -> None:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
