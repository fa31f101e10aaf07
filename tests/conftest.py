import os
from dataclasses import dataclass, field

import pytest

from flowlayout.core.LayoutModels import Point, ProposedSize, Size

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@dataclass
class FakeSubview:
    """Item with a fixed natural size and a smaller minimum size."""

    width: float
    height: float
    min_width: float = 0.0
    min_height: float = 0.0
    size_calls: int = 0
    placed_at: list[Point] = field(default_factory=list)

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        self.size_calls += 1
        if proposal == ProposedSize.zero():
            return Size(self.min_width, self.min_height)
        return Size(self.width, self.height)

    def place(self, position: Point, proposal: ProposedSize) -> None:
        self.placed_at.append(position)


@pytest.fixture
def make_subviews():
    def factory(widths, height=20.0, heights=None):
        heights = heights or [height] * len(widths)
        return [FakeSubview(width, h) for width, h in zip(widths, heights)]

    return factory


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
