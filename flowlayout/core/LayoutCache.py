"""
Single-entry cache for flow layout passes.

The cache remembers the last computed layout together with a fingerprint
of the inputs it was computed from. A pass with an identical fingerprint
reuses it; any other pass recomputes and overwrites it.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import threading
from typing import Callable, Sequence

from flowlayout.core.LayoutModels import LayoutResult, ProposedSize, Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Fingerprint:
    """Identity of the inputs of a layout pass.

    Attributes:
        values: Proposed width and height (unconstrained axes as infinity)
                followed by every item's width and height in order
    """

    values: tuple[float, ...]

    @classmethod
    def of(cls, proposal: ProposedSize, sizes: Sequence[Size]) -> Fingerprint:
        """Build the fingerprint of a proposal and the measured item sizes."""
        concrete = proposal.replacing_unspecified(Size(math.inf, math.inf))
        values = [concrete.width, concrete.height]
        for size in sizes:
            values.append(size.width)
            values.append(size.height)
        return cls(tuple(values))


@dataclass(frozen=True, slots=True)
class CacheEntry:
    fingerprint: Fingerprint
    result: LayoutResult


class LayoutCache:
    """Engine-owned layout state that persists across passes.

    Holds the minimum size of the current items and the most recently
    computed layout. Lookups and updates are serialized so a host that
    runs passes from several threads never sees a partially stored entry.
    """

    def __init__(self, min_size: Size | None = None):
        """Initialize cache.

        Args:
            min_size: Minimum size of the items, if already known
        """
        self.min_size = min_size
        self._entry: CacheEntry | None = None
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def get_or_compute(
        self,
        fingerprint: Fingerprint,
        compute: Callable[[], LayoutResult],
    ) -> LayoutResult:
        """Return the cached layout for fingerprint, computing it on a miss.

        Args:
            fingerprint: Fingerprint of the current pass
            compute: Produces the layout when the cache cannot

        Returns:
            Cached or freshly computed layout
        """
        with self._lock:
            if self._entry is not None and self._entry.fingerprint == fingerprint:
                self.hits += 1
                logger.debug("Layout cache hit")
                return self._entry.result

            self.misses += 1
            logger.debug("Layout cache miss, recomputing rows")
            result = compute()
            self._entry = CacheEntry(fingerprint, result)
            return result

    def clear(self) -> None:
        """Drop the cached layout; the minimum size is kept."""
        with self._lock:
            self._entry = None
