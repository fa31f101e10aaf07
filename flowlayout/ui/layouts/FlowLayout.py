"""
FlowLayout - Custom layout that arranges widgets in a flowing manner.

Widgets are laid out horizontally until the available width is filled,
then wraps to the next line. Similar to CSS flexbox with flex-wrap.
Row packing, stacking and caching are delegated to FlowLayoutEngine;
this class only feeds it Qt sizes and applies the resulting positions.
"""
import math
from typing import List, Optional

from PySide6.QtCore import QPoint, QRect, QSize, Qt
from PySide6.QtWidgets import QApplication, QLayout, QLayoutItem, QSizePolicy, QWidget

from flowlayout.constants import DEFAULT_ALIGNMENT, DEFAULT_MARGIN, DEFAULT_SPACING
from flowlayout.core.Alignment import Alignment
from flowlayout.core.FlowLayoutEngine import FlowLayoutEngine
from flowlayout.core.LayoutModels import Point, ProposedSize, Rect, Size
from flowlayout.core.Sizing import Axis

_QT_ALIGNMENTS = {
    ("top", "leading"): Alignment.TOP_LEADING,
    ("top", "center"): Alignment.TOP,
    ("top", "trailing"): Alignment.TOP_TRAILING,
    ("center", "leading"): Alignment.LEADING,
    ("center", "center"): Alignment.CENTER,
    ("center", "trailing"): Alignment.TRAILING,
    ("bottom", "leading"): Alignment.BOTTOM_LEADING,
    ("bottom", "center"): Alignment.BOTTOM,
    ("bottom", "trailing"): Alignment.BOTTOM_TRAILING,
}


def alignment_from_qt(flags: Qt.AlignmentFlag, default: Alignment = DEFAULT_ALIGNMENT) -> Alignment:
    """Convert Qt alignment flags to an Alignment.

    Args:
        flags: Qt alignment flags (an axis without a flag is centered)
        default: Returned when no flag is set at all

    Returns:
        Matching Alignment
    """
    if not flags:
        return default

    if flags & (Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignLeading):
        horizontal = "leading"
    elif flags & (Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignTrailing):
        horizontal = "trailing"
    else:
        horizontal = "center"

    if flags & Qt.AlignmentFlag.AlignTop:
        vertical = "top"
    elif flags & Qt.AlignmentFlag.AlignBottom:
        vertical = "bottom"
    else:
        vertical = "center"

    return _QT_ALIGNMENTS[(vertical, horizontal)]


class _LayoutItemView:
    """Exposes a QLayoutItem to the engine."""

    def __init__(self, item: QLayoutItem):
        self.item = item
        self._size = QSize(0, 0)

    @property
    def control_type(self) -> QSizePolicy.ControlType:
        widget = self.item.widget()
        if widget is None:
            return QSizePolicy.ControlType.DefaultType
        return widget.sizePolicy().controlType()

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        if proposal == ProposedSize.zero():
            size = self.item.minimumSize()
        else:
            size = self.item.sizeHint()
            if self.item.hasHeightForWidth() and proposal.width is not None:
                width = min(size.width(), int(proposal.width))
                size = QSize(width, self.item.heightForWidth(width))

        # Invalid Qt sizes are reported as -1
        self._size = QSize(max(0, size.width()), max(0, size.height()))
        return Size(self._size.width(), self._size.height())

    def place(self, position: Point, proposal: ProposedSize) -> None:
        top_left = QPoint(round(position.x), round(position.y))
        self.item.setGeometry(QRect(top_left, self._size))


class FlowLayout(QLayout):
    """Layout that arranges widgets in rows, wrapping to new lines as needed.

    This layout automatically wraps widgets to the next line when the current
    line would exceed the available width. Rows are aligned within the layout
    width and widgets within their row height according to the layout's
    alignment.

    Example:
        layout = FlowLayout(horizontal_spacing=10, alignment=Alignment.LEADING)
        for i in range(20):
            layout.addWidget(QPushButton(f"Button {i}"))
        container.setLayout(layout)
    """

    def __init__(
            self,
            parent: Optional[QWidget] = None,
            margin: int = DEFAULT_MARGIN,
            horizontal_spacing: Optional[int] = None,
            vertical_spacing: Optional[int] = None,
            alignment: Alignment = DEFAULT_ALIGNMENT
    ):
        """Initialize the flow layout.

        Args:
            parent: Parent widget (optional)
            margin: Margin around the layout in pixels
            horizontal_spacing: Space between items in a row (None uses the style)
            vertical_spacing: Space between rows (None uses the style)
            alignment: Alignment used when no Qt alignment is set on the layout
        """
        super().__init__()
        self._item_list: List[QLayoutItem] = []
        self._default_alignment = alignment
        self._engine = FlowLayoutEngine(
            alignment=alignment,
            horizontal_spacing=horizontal_spacing,
            vertical_spacing=vertical_spacing,
            spacing_provider=self._style_spacing,
        )

        self.setContentsMargins(margin, margin, margin, margin)

        # Attach only once the engine exists, installing calls invalidate()
        if parent is not None:
            parent.setLayout(self)

    # ========================================
    # QLayout Interface Implementation
    # ========================================

    def addItem(self, item: QLayoutItem) -> None:
        """Add an item to the layout.

        Args:
            item: Layout item to add
        """
        self._item_list.append(item)
        self.invalidate()

    def count(self) -> int:
        """Return the number of items in the layout.

        Returns:
            Number of items
        """
        return len(self._item_list)

    def itemAt(self, index: int) -> Optional[QLayoutItem]:
        """Return the item at the specified index.

        Args:
            index: Index of the item

        Returns:
            Layout item at index, or None if index is out of bounds
        """
        if 0 <= index < len(self._item_list):
            return self._item_list[index]
        return None

    def takeAt(self, index: int) -> Optional[QLayoutItem]:
        """Remove and return the item at the specified index.

        Args:
            index: Index of the item to remove

        Returns:
            Removed layout item, or None if index is out of bounds
        """
        if 0 <= index < len(self._item_list):
            item = self._item_list.pop(index)
            self.invalidate()
            return item
        return None

    def invalidate(self) -> None:
        """Discard cached information and refresh the minimum size."""
        super().invalidate()
        self._engine.invalidate(self._views())

    @property
    def engine(self) -> FlowLayoutEngine:
        return self._engine

    # ========================================
    # Spacing
    # ========================================

    def horizontalSpacing(self) -> Optional[int]:
        return self._engine.horizontal_spacing

    def setHorizontalSpacing(self, spacing: Optional[int]) -> None:
        self._engine.horizontal_spacing = spacing
        self.invalidate()

    def verticalSpacing(self) -> Optional[int]:
        return self._engine.vertical_spacing

    def setVerticalSpacing(self, spacing: Optional[int]) -> None:
        self._engine.vertical_spacing = spacing
        self.invalidate()

    def _style_spacing(self, previous: _LayoutItemView, following: _LayoutItemView, axis: Axis) -> float:
        """Ask the widget style for the distance between two items."""
        parent = self.parentWidget()
        style = parent.style() if parent is not None else QApplication.style()
        orientation = Qt.Orientation.Horizontal if axis is Axis.HORIZONTAL else Qt.Orientation.Vertical

        spacing = style.layoutSpacing(
            previous.control_type, following.control_type, orientation, None, parent
        )
        if spacing < 0:
            return DEFAULT_SPACING
        return spacing

    # ========================================
    # Layout Behavior
    # ========================================

    def expandingDirections(self) -> Qt.Orientation:
        """Return which directions the layout can expand.

        Returns:
            No expansion (layout respects size hints)
        """
        return Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:
        """Indicate that height depends on width.

        This is true for flow layouts since wrapping depends on available width.

        Returns:
            Always True
        """
        return True

    def heightForWidth(self, width: int) -> int:
        """Calculate required height for given width.

        Args:
            width: Available width in pixels

        Returns:
            Required height in pixels
        """
        margins = self.contentsMargins()
        inner_width = max(0, width - margins.left() - margins.right())

        measurement = self._engine.measure(ProposedSize(inner_width, None), self._views())
        return math.ceil(measurement.fitting.height) + margins.top() + margins.bottom()

    def setGeometry(self, rect: QRect) -> None:
        """Set the geometry of the layout and arrange items.

        The height of rect is not used as a constraint: rows are wrapped
        at the available width and stacked from the top.

        Args:
            rect: Available rectangle for the layout
        """
        super().setGeometry(rect)

        margins = self.contentsMargins()
        inner = rect.adjusted(margins.left(), margins.top(), -margins.right(), -margins.bottom())
        bounds = Rect(inner.x(), inner.y(), max(0, inner.width()), max(0, inner.height()))

        self._engine.alignment = alignment_from_qt(self.alignment(), self._default_alignment)
        self._engine.arrange(bounds, ProposedSize(bounds.width, None), self._views())

    # ========================================
    # Size Hints
    # ========================================

    def sizeHint(self) -> QSize:
        """Return the preferred size of the layout.

        Returns:
            Preferred size (same as minimum size for flow layouts)
        """
        return self.minimumSize()

    def minimumSize(self) -> QSize:
        """Calculate minimum size needed for the layout.

        Returns:
            Minimum size that can contain any single item
        """
        min_size = self._engine.minimum_size(self._views())
        size = QSize(math.ceil(min_size.width), math.ceil(min_size.height))

        # Add margins
        margins = self.contentsMargins()
        size += QSize(
            margins.left() + margins.right(),
            margins.top() + margins.bottom()
        )

        return size

    # ========================================
    # Utility Methods
    # ========================================

    def _views(self) -> List[_LayoutItemView]:
        """Wrap the visible items for the engine."""
        return [_LayoutItemView(item) for item in self._item_list if not item.isEmpty()]

    def clear(self) -> None:
        """Remove all items from the layout.

        Note: This does not delete the widgets, only removes them from layout.
        """
        while self.count() > 0:
            item = self.takeAt(0)
            if item and item.widget():
                item.widget().setParent(None)

    def get_items(self) -> List[QLayoutItem]:
        """Get a copy of all layout items.

        Returns:
            List of all layout items
        """
        return self._item_list.copy()
