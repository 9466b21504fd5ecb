"""Decorative animated avatar shown while synthesized speech plays."""

import random
import threading
from typing import Callable

from .infrastructure.interfaces import SpeakingIndicator

CLOSED_MOUTH = "closed"
OPEN_MOUTH = "open"


class SpeakingAvatar(SpeakingIndicator):
    """Toggles the avatar mouth on a randomized timer while speaking."""

    def __init__(
        self,
        on_change: Callable[[str], None] | None = None,
        min_interval: float = 0.1,
        max_interval: float = 0.3,
        change_probability: float = 0.6,
    ):
        self._on_change = on_change
        self._min_interval = min_interval
        self._max_interval = max_interval
        self._change_probability = change_probability
        self._mouth = CLOSED_MOUTH
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def mouth(self) -> str:
        return self._mouth

    @property
    def is_speaking(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        with self._lock:
            if self._timer is not None:
                return
            self._schedule()

    def stop(self) -> None:
        with self._lock:
            # Ticks already waiting on the lock see a stale generation and exit.
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._set_mouth(CLOSED_MOUTH)

    def _schedule(self) -> None:
        interval = random.uniform(self._min_interval, self._max_interval)
        self._timer = threading.Timer(interval, self._tick, args=(self._generation,))
        self._timer.daemon = True
        self._timer.start()

    def _tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            if random.random() < self._change_probability:
                self._set_mouth(
                    OPEN_MOUTH if self._mouth == CLOSED_MOUTH else CLOSED_MOUTH
                )
            self._schedule()

    def _set_mouth(self, mouth: str) -> None:
        changed = mouth != self._mouth
        self._mouth = mouth
        if changed and self._on_change is not None:
            self._on_change(mouth)
