"""
Row packing: split an ordered sequence of item sizes into wrapped rows.
"""

import logging
from typing import Sequence

from flowlayout.core.LayoutModels import Row, RowElement, Size
from flowlayout.core.Sizing import PairSpacing

logger = logging.getLogger(__name__)


def _exceeds(extent: float, available_width: float | None) -> bool:
    """Check if extent overflows the available width (None never overflows)."""
    return available_width is not None and extent > available_width


class RowPacker:
    """Packs items left to right into rows no wider than the available width."""

    def pack(
        self,
        sizes: Sequence[Size],
        available_width: float | None,
        spacing: PairSpacing,
    ) -> list[Row]:
        """Group items into rows in a single pass.

        An item that is wider than the available width on its own always
        gets a row to itself, so every item is placed and the items after
        it keep flowing.

        Args:
            sizes: Measured item sizes, in input order
            available_width: Width to wrap at, or None for no wrapping
            spacing: Horizontal spacing between two items given their indices

        Returns:
            Rows with x offsets relative to each row's origin. The vertical
            fields are left at zero for the stacker to fill in.
        """
        rows: list[Row] = []
        elements: list[RowElement] = []
        cursor_x = 0.0

        def close_row() -> None:
            nonlocal elements, cursor_x
            rows.append(Row(elements=tuple(elements), width=cursor_x))
            elements = []
            cursor_x = 0.0

        for index, size in enumerate(sizes):
            spacing_x = spacing(elements[-1].index, index) if elements else 0.0
            oversized = _exceeds(size.width, available_width)

            # Finish the current row before an item that cannot share one
            if oversized and elements:
                close_row()
                spacing_x = 0.0

            # Wrap when the item does not fit after the cursor
            if _exceeds(cursor_x + size.width + spacing_x, available_width) and elements:
                close_row()
                spacing_x = 0.0

            elements.append(RowElement(index=index, size=size, x_offset=cursor_x + spacing_x))
            cursor_x += size.width + spacing_x

            if oversized:
                logger.debug(
                    f"Item {index} ({size.width}) is wider than {available_width}, "
                    f"placing it alone"
                )
                close_row()

        if elements:
            close_row()

        return rows
