"""
Flow layout engine: wraps items into rows and stacks the rows.

The engine answers the two questions a host layout pass asks:

- measure(): how big the layout wants to be for a proposal
- arrange(): where each item goes inside given bounds

Both share one packing step, cached across passes while the proposal
and the item sizes stay the same.
"""

from enum import Enum
import logging
from typing import Sequence

from flowlayout.constants import DEFAULT_ALIGNMENT, DEFAULT_SPACING
from flowlayout.core.Alignment import Alignment, anchor_for, resolve_position
from flowlayout.core.LayoutCache import Fingerprint, LayoutCache
from flowlayout.core.LayoutModels import (
    LayoutResult,
    Placement,
    Point,
    ProposedSize,
    Rect,
    Size,
    SizeMeasurement,
)
from flowlayout.core.RowPacker import RowPacker
from flowlayout.core.RowStacker import RowStacker
from flowlayout.core.Sizing import (
    Axis,
    LayoutSubview,
    SpacingProvider,
    measure_sizes,
    minimum_size as measure_minimum_size,
)

logger = logging.getLogger(__name__)


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class FlowLayoutEngine:
    """Arranges items in horizontal rows, wrapping when the width runs out.

    Example:
        engine = FlowLayoutEngine(alignment=Alignment.LEADING, horizontal_spacing=4)
        measurement = engine.measure(ProposedSize(320, None), items)
        engine.arrange(Rect(0, 0, 320, measurement.fitting.height),
                       ProposedSize(320, None), items)
    """

    # Items flow along this axis before wrapping
    orientation = Orientation.HORIZONTAL

    def __init__(
        self,
        alignment: Alignment = DEFAULT_ALIGNMENT,
        horizontal_spacing: float | None = None,
        vertical_spacing: float | None = None,
        spacing_provider: SpacingProvider | None = None,
    ):
        """Initialize the engine.

        Args:
            alignment: Alignment of rows in the container and items in rows
            horizontal_spacing: Fixed distance between items in a row
                                (None asks spacing_provider for each pair)
            vertical_spacing: Fixed distance between rows
                              (None asks spacing_provider for each pair)
            spacing_provider: Preferred distance between two items along an
                              axis, used when no fixed spacing is set
        """
        self.alignment = alignment
        self._horizontal_spacing = horizontal_spacing
        self._vertical_spacing = vertical_spacing
        self._spacing_provider = spacing_provider
        self._packer = RowPacker()
        self._stacker = RowStacker()
        self._cache = LayoutCache()

    # ========================================
    # Configuration
    # ========================================

    @property
    def cache(self) -> LayoutCache:
        return self._cache

    @property
    def horizontal_spacing(self) -> float | None:
        return self._horizontal_spacing

    @horizontal_spacing.setter
    def horizontal_spacing(self, value: float | None) -> None:
        self._horizontal_spacing = value
        self._cache.clear()

    @property
    def vertical_spacing(self) -> float | None:
        return self._vertical_spacing

    @vertical_spacing.setter
    def vertical_spacing(self, value: float | None) -> None:
        self._vertical_spacing = value
        self._cache.clear()

    def invalidate(self, subviews: Sequence[LayoutSubview]) -> None:
        """Refresh the minimum size after the items changed.

        Args:
            subviews: Current items of the layout
        """
        self._cache.min_size = measure_minimum_size(subviews)

    def minimum_size(self, subviews: Sequence[LayoutSubview]) -> Size:
        """Minimum size of the items, computed on first use."""
        if self._cache.min_size is None:
            self.invalidate(subviews)
        return self._cache.min_size

    # ========================================
    # Layout Passes
    # ========================================

    def measure(self, proposal: ProposedSize, subviews: Sequence[LayoutSubview]) -> SizeMeasurement:
        """Report the minimum size and the best-fit size for a proposal.

        Args:
            proposal: Size offered by the host
            subviews: Items to lay out

        Returns:
            SizeMeasurement; the fitting size falls back to the minimum
            size when nothing can be laid out
        """
        result = self._layout(proposal, subviews)
        min_size = self.minimum_size(subviews)

        if result.is_empty:
            return SizeMeasurement(min_size, min_size)
        return SizeMeasurement(min_size, result.size)

    def arrange(
        self,
        bounds: Rect,
        proposal: ProposedSize,
        subviews: Sequence[LayoutSubview],
    ) -> list[Placement]:
        """Place every item inside bounds.

        Each item's place() is called with its top-left position in the
        host's coordinates and the proposal the layout received.

        Args:
            bounds: Rectangle the layout occupies
            proposal: Size the host proposed for this pass
            subviews: Items to place

        Returns:
            Placements in input order (empty when nothing fits)
        """
        result = self._layout(proposal, subviews)
        anchor = anchor_for(self.alignment)
        placements: list[Placement] = []

        for row in result.rows:
            for element in row.elements:
                offset = resolve_position(element, row, anchor, bounds.width)
                position = Point(offset.x + bounds.min_x, offset.y + bounds.min_y)
                subviews[element.index].place(position, proposal)
                placements.append(Placement(element.index, position, element.size))

        return placements

    # ========================================
    # Internals
    # ========================================

    def _layout(self, proposal: ProposedSize, subviews: Sequence[LayoutSubview]) -> LayoutResult:
        """Compute (or reuse) the rows for a pass."""
        if not subviews:
            return LayoutResult.empty()

        # Nothing can be laid out in a proposal below the minimum size
        min_size = self.minimum_size(subviews)
        if not proposal.admits(min_size):
            logger.debug(
                f"Proposal {proposal.width}x{proposal.height} is smaller than "
                f"minimum size {min_size.width}x{min_size.height}"
            )
            return LayoutResult.empty()

        sizes = measure_sizes(subviews, proposal)
        fingerprint = Fingerprint.of(proposal, sizes)

        def compute() -> LayoutResult:
            rows = self._packer.pack(
                sizes,
                proposal.width,
                lambda previous, following: self._spacing(
                    subviews, previous, following, Axis.HORIZONTAL
                ),
            )
            rows = self._stacker.stack(
                rows,
                lambda previous, following: self._spacing(
                    subviews, previous, following, Axis.VERTICAL
                ),
            )
            return self._stacker.build_result(rows, proposal)

        return self._cache.get_or_compute(fingerprint, compute)

    def _spacing(
        self,
        subviews: Sequence[LayoutSubview],
        previous: int,
        following: int,
        axis: Axis,
    ) -> float:
        """Resolve the distance between two items along an axis."""
        fixed = self._horizontal_spacing if axis is Axis.HORIZONTAL else self._vertical_spacing
        if fixed is not None:
            return fixed
        if self._spacing_provider is None:
            return DEFAULT_SPACING
        return self._spacing_provider(subviews[previous], subviews[following], axis)
