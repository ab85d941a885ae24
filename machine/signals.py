"""Input signals sampled once per frame by the polling loops."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

ADVANCE_KEY = " "
ENTER_KEY = "\n"
SELECTION_KEYS = "012345"


class KeySource(Protocol):
    def poll(self) -> None: ...

    def is_active(self, key: str) -> bool: ...


class EdgeDetector:
    """Turns a level signal into single events on the inactive -> active edge."""

    def __init__(self, source: KeySource, key: str = ADVANCE_KEY) -> None:
        self.source = source
        self.key = key
        self._was_active = False

    def just_activated(self) -> bool:
        active = self.source.is_active(self.key)
        fired = active and not self._was_active
        self._was_active = active
        return fired

    def prime(self) -> None:
        # Adopt the current level without firing, so a key already held when
        # a loop starts needs to be released before it counts.
        self._was_active = self.source.is_active(self.key)


def first_active(source: KeySource, keys: Iterable[str]) -> Optional[str]:
    """Level-triggered read: the first of ``keys`` held in the current frame."""
    for key in keys:
        if source.is_active(key):
            return key
    return None
