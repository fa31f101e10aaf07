"""
Row stacking: assign vertical offsets to packed rows.
"""

from dataclasses import replace
from typing import Sequence

from flowlayout.core.LayoutModels import LayoutResult, ProposedSize, Row
from flowlayout.core.Sizing import PairSpacing


class RowStacker:
    """Stacks rows top to bottom and computes the content size."""

    def stack(self, rows: Sequence[Row], spacing: PairSpacing) -> list[Row]:
        """Position rows vertically.

        Spacing between two rows is resolved between their tallest items,
        so per-item spacing preferences of the items that define the row
        heights are respected.

        Args:
            rows: Packed rows in order
            spacing: Vertical spacing between two items given their indices

        Returns:
            Copies of the rows with height and y offset set
        """
        stacked: list[Row] = []
        cursor_y = 0.0
        previous_tallest: int | None = None

        for row in rows:
            tallest = row.tallest
            if tallest is None:
                continue

            spacing_y = spacing(previous_tallest, tallest.index) if previous_tallest is not None else 0.0
            height = tallest.size.height

            stacked.append(replace(row, y_offset=cursor_y + spacing_y, height=height))
            cursor_y += height + spacing_y
            previous_tallest = tallest.index

        return stacked

    @staticmethod
    def build_result(rows: Sequence[Row], proposal: ProposedSize) -> LayoutResult:
        """Wrap stacked rows with the size of the content they cover.

        The width is the widest row, widened to the proposed width when a
        larger one is offered. The height is the bottom edge of the last row.

        Returns:
            LayoutResult for the rows (empty when there are none)
        """
        if not rows:
            return LayoutResult.empty()

        width = max(row.width for row in rows)
        if proposal.width is not None:
            width = max(width, proposal.width)

        last = rows[-1]
        return LayoutResult(rows=tuple(rows), width=width, height=last.y_offset + last.height)
