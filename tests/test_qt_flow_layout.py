import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QRect, QSize, Qt
from PySide6.QtWidgets import QWidget

from flowlayout.core.Alignment import Alignment
from flowlayout.ui.layouts.FlowLayout import FlowLayout, alignment_from_qt


@pytest.fixture
def container(qapp):
    widget = QWidget()
    yield widget
    widget.deleteLater()


def add_widgets(container, layout, count, width=50, height=20):
    widgets = []
    for _ in range(count):
        widget = QWidget(container)
        widget.setFixedSize(width, height)
        layout.addWidget(widget)
        widgets.append(widget)
    container.show()
    return widgets


def test_widgets_wrap_to_next_row(container):
    layout = FlowLayout(
        container, horizontal_spacing=10, vertical_spacing=5, alignment=Alignment.TOP_LEADING
    )
    widgets = add_widgets(container, layout, 3)

    layout.setGeometry(QRect(0, 0, 120, 200))

    assert [w.geometry() for w in widgets] == [
        QRect(0, 0, 50, 20),
        QRect(60, 0, 50, 20),
        QRect(0, 25, 50, 20),
    ]


def test_rows_follow_alignment(container):
    layout = FlowLayout(
        container, horizontal_spacing=10, vertical_spacing=5, alignment=Alignment.TRAILING
    )
    widgets = add_widgets(container, layout, 3)

    layout.setGeometry(QRect(0, 0, 120, 200))

    assert widgets[0].geometry().topLeft().x() == 10
    assert widgets[2].geometry().topLeft().x() == 70


def test_margins_offset_content(container):
    layout = FlowLayout(
        container, margin=4, horizontal_spacing=10, vertical_spacing=5,
        alignment=Alignment.TOP_LEADING,
    )
    widgets = add_widgets(container, layout, 3)

    layout.setGeometry(QRect(0, 0, 128, 200))

    assert widgets[0].geometry().topLeft().x() == 4
    assert widgets[0].geometry().topLeft().y() == 4
    assert layout.heightForWidth(128) == 53


def test_height_for_width_and_minimum_size(container):
    layout = FlowLayout(container, horizontal_spacing=10, vertical_spacing=5)
    add_widgets(container, layout, 3)

    assert layout.hasHeightForWidth()
    assert layout.heightForWidth(120) == 45
    assert layout.heightForWidth(1000) == 20
    assert layout.minimumSize() == QSize(50, 20)
    assert layout.sizeHint() == layout.minimumSize()


def test_hidden_widgets_are_skipped(container):
    layout = FlowLayout(
        container, horizontal_spacing=10, vertical_spacing=5, alignment=Alignment.TOP_LEADING
    )
    widgets = add_widgets(container, layout, 3)
    widgets[1].hide()

    layout.setGeometry(QRect(0, 0, 120, 200))

    assert widgets[2].geometry().topLeft().x() == 60
    assert widgets[2].geometry().topLeft().y() == 0


def test_style_spacing_is_used_without_override(container):
    layout = FlowLayout(container, alignment=Alignment.TOP_LEADING)
    widgets = add_widgets(container, layout, 2)

    layout.setGeometry(QRect(0, 0, 1000, 200))

    assert layout.horizontalSpacing() is None
    assert widgets[1].geometry().x() >= 50


def test_take_and_clear_items(container):
    layout = FlowLayout(container)
    add_widgets(container, layout, 3)

    item = layout.takeAt(0)

    assert item is not None
    assert layout.count() == 2
    assert layout.takeAt(5) is None

    layout.clear()

    assert layout.count() == 0
    assert layout.get_items() == []


@pytest.mark.parametrize(
    "flags, alignment",
    [
        (Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop, Alignment.TOP_LEADING),
        (Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignBottom, Alignment.BOTTOM_TRAILING),
        (Qt.AlignmentFlag.AlignHCenter, Alignment.CENTER),
        (Qt.AlignmentFlag.AlignTop, Alignment.TOP),
        (Qt.AlignmentFlag.AlignRight, Alignment.TRAILING),
    ],
)
def test_alignment_from_qt_flags(flags, alignment):
    assert alignment_from_qt(flags) is alignment


def test_alignment_from_qt_without_flags_uses_default():
    assert alignment_from_qt(Qt.AlignmentFlag(0), Alignment.BOTTOM) is Alignment.BOTTOM
