"""Alignment of rows and items inside a flow layout.

Alignment is applied when items are placed, not while rows are packed,
so a cached packing stays valid whatever the alignment is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flowlayout.core.LayoutModels import Point, Row, RowElement


class Alignment(str, Enum):
    """Symbolic alignment of the content inside its container.

    The nine compass points map to fixed anchors. Baseline alignments are
    accepted for compatibility with text-oriented hosts but have no anchor
    of their own and are centered.
    """

    TOP_LEADING = "top_leading"
    TOP = "top"
    TOP_TRAILING = "top_trailing"
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"
    BOTTOM_LEADING = "bottom_leading"
    BOTTOM = "bottom"
    BOTTOM_TRAILING = "bottom_trailing"
    LEADING_FIRST_TEXT_BASELINE = "leading_first_text_baseline"
    CENTER_FIRST_TEXT_BASELINE = "center_first_text_baseline"
    TRAILING_FIRST_TEXT_BASELINE = "trailing_first_text_baseline"
    LEADING_LAST_TEXT_BASELINE = "leading_last_text_baseline"
    CENTER_LAST_TEXT_BASELINE = "center_last_text_baseline"
    TRAILING_LAST_TEXT_BASELINE = "trailing_last_text_baseline"

    @classmethod
    def from_string(cls, value: str | None) -> Alignment:
        """Convert string to Alignment.

        Args:
            value: Alignment name such as "top_leading" (None means center)

        Returns:
            Alignment enum value

        Raises:
            ValueError: If value is not a known alignment
        """
        if not value:
            return cls.CENTER

        try:
            return cls(value.strip().lower().replace("-", "_"))
        except ValueError:
            raise ValueError(
                f"Invalid alignment: '{value}'. Must be one of "
                f"{', '.join(member.value for member in cls)}"
            )


@dataclass(frozen=True, slots=True)
class UnitPoint:
    """Anchor expressed as fractions of a container (0..1 on each axis)."""

    x: float
    y: float


CENTER_ANCHOR = UnitPoint(0.5, 0.5)

_ANCHORS: dict[Alignment, UnitPoint] = {
    Alignment.TOP_LEADING: UnitPoint(0.0, 0.0),
    Alignment.TOP: UnitPoint(0.5, 0.0),
    Alignment.TOP_TRAILING: UnitPoint(1.0, 0.0),
    Alignment.LEADING: UnitPoint(0.0, 0.5),
    Alignment.CENTER: CENTER_ANCHOR,
    Alignment.TRAILING: UnitPoint(1.0, 0.5),
    Alignment.BOTTOM_LEADING: UnitPoint(0.0, 1.0),
    Alignment.BOTTOM: UnitPoint(0.5, 1.0),
    Alignment.BOTTOM_TRAILING: UnitPoint(1.0, 1.0),
}


def anchor_for(alignment: Alignment) -> UnitPoint:
    """Map an alignment to its anchor, centering anything outside the table."""
    return _ANCHORS.get(alignment, CENTER_ANCHOR)


def resolve_position(
    element: RowElement,
    row: Row,
    anchor: UnitPoint,
    container_width: float,
) -> Point:
    """Compute an item's position inside the layout content.

    The row is shifted within the container width and the item within
    the row height, both by the anchor fractions.

    Args:
        element: Item to position
        row: Row holding the item
        anchor: Fractional anchor
        container_width: Width the rows are aligned in

    Returns:
        Top-left corner relative to the content origin
    """
    x = element.x_offset + anchor.x * (container_width - row.width)
    y = row.y_offset + anchor.y * (row.height - element.size.height)
    return Point(x, y)
