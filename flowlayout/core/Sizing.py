"""
Sizing contract between the flow layout engine and the items it arranges.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Callable, Protocol, Sequence

from flowlayout.core.LayoutModels import Point, ProposedSize, Size

logger = logging.getLogger(__name__)


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LayoutSubview(Protocol):
    """Item managed by a flow layout.

    The engine never inspects an item beyond these two calls.
    """

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        """Return the item's natural size under the given proposal."""
        ...

    def place(self, position: Point, proposal: ProposedSize) -> None:
        """Move the item so its top-left corner is at ``position``."""
        ...


# Preferred distance between two adjacent items along an axis
SpacingProvider = Callable[[LayoutSubview, LayoutSubview, Axis], float]

# Spacing between two items of one pass, identified by their indices
PairSpacing = Callable[[int, int], float]


def measure_sizes(subviews: Sequence[LayoutSubview], proposal: ProposedSize) -> list[Size]:
    """Ask every item for its size, once each, in input order."""
    return [subview.size_that_fits(proposal) for subview in subviews]


def minimum_size(subviews: Sequence[LayoutSubview]) -> Size:
    """Compute the smallest size able to hold any single item.

    Every item is measured against a zero proposal and the results are
    combined componentwise.

    Returns:
        Componentwise maximum of the items' minimum sizes
    """
    size = Size.zero()
    for item_size in measure_sizes(subviews, ProposedSize.zero()):
        size = size.expanded_to(item_size)

    logger.debug(f"Minimum size of {len(subviews)} items: {size.width}x{size.height}")
    return size
