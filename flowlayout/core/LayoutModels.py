"""Geometry and layout data models.

This module defines the value types exchanged between the flow layout
engine and its host: sizes and size proposals, points and rectangles,
and the rows produced by a layout pass. All of them are immutable so a
cached layout can be handed out repeatedly without being altered.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import NamedTuple


# ============================================================================
# Exceptions
# ============================================================================


class FlowLayoutError(Exception):
    """Base exception for flow layout errors."""

    pass


class InvalidSizeError(FlowLayoutError, ValueError):
    """Raised when a size or proposal component is negative or NaN."""

    pass


def _check_component(value: float | None, label: str) -> None:
    if value is None:
        return
    if math.isnan(value) or value < 0:
        raise InvalidSizeError(f"{label} must be a non-negative number, got {value!r}")


# ============================================================================
# Geometry
# ============================================================================


@dataclass(frozen=True, slots=True)
class Size:
    """Measured size of an item or of the whole layout.

    Attributes:
        width: Horizontal extent
        height: Vertical extent
    """

    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        """Validate both components."""
        _check_component(self.width, "width")
        _check_component(self.height, "height")

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0, 0.0)

    def expanded_to(self, other: Size) -> Size:
        """Componentwise maximum of two sizes."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True, slots=True)
class ProposedSize:
    """Size constraint offered to the layout by its host.

    Each axis is either a finite value or ``None`` when that axis is
    unconstrained.

    Attributes:
        width: Available width, or None for unconstrained
        height: Available height, or None for unconstrained
    """

    width: float | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        """Validate both components."""
        _check_component(self.width, "proposed width")
        _check_component(self.height, "proposed height")

    @classmethod
    def zero(cls) -> ProposedSize:
        return cls(0.0, 0.0)

    @classmethod
    def unspecified(cls) -> ProposedSize:
        return cls(None, None)

    def replacing_unspecified(self, size: Size) -> Size:
        """Fill unconstrained axes from ``size``.

        Args:
            size: Values used for unconstrained axes

        Returns:
            Concrete size
        """
        return Size(
            size.width if self.width is None else self.width,
            size.height if self.height is None else self.height,
        )

    def admits(self, size: Size) -> bool:
        """Check whether ``size`` fits in every constrained axis.

        Returns:
            True if size is not larger than the proposal on any axis
        """
        fits_width = self.width is None or size.width <= self.width
        fits_height = self.height is None or size.height <= self.height
        return fits_width and fits_height


@dataclass(frozen=True, slots=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y


# ============================================================================
# Layout output
# ============================================================================


@dataclass(frozen=True, slots=True)
class RowElement:
    """Single item placed within a row.

    Attributes:
        index: Position of the item in the input sequence
        size: Measured size of the item for this pass
        x_offset: Distance from the row origin to the item's leading edge
    """

    index: int
    size: Size
    x_offset: float


@dataclass(frozen=True, slots=True)
class Row:
    """Ordered run of items laid out on one line.

    Attributes:
        elements: Items of the row in input order
        width: Sum of item widths plus the spacing between them
        height: Height of the tallest item
        y_offset: Distance from the content top to the row's top edge
    """

    elements: tuple[RowElement, ...] = ()
    width: float = 0.0
    height: float = 0.0
    y_offset: float = 0.0

    @property
    def tallest(self) -> RowElement | None:
        """Tallest element of the row, first one wins on ties."""
        tallest = None
        for element in self.elements:
            if tallest is None or element.size.height > tallest.size.height:
                tallest = element
        return tallest

    @property
    def indices(self) -> list[int]:
        return [element.index for element in self.elements]

    def __len__(self) -> int:
        return len(self.elements)


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Rows of a layout pass together with the content size.

    Attributes:
        rows: Stacked rows in input order
        width: Widest row, widened to the proposed width when larger
        height: Bottom edge of the last row
    """

    rows: tuple[Row, ...] = ()
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def empty(cls) -> LayoutResult:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


class SizeMeasurement(NamedTuple):
    """Answer to a size negotiation: the floor and the best fit."""

    minimum: Size
    fitting: Size


@dataclass(frozen=True, slots=True)
class Placement:
    """Final absolute position of one item.

    Attributes:
        index: Position of the item in the input sequence
        position: Top-left corner in the host's coordinate space
        size: Size the item was measured at
    """

    index: int
    position: Point
    size: Size
