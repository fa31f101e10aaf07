import math

import pytest

from flowlayout.core.LayoutModels import (
    FlowLayoutError,
    InvalidSizeError,
    LayoutResult,
    ProposedSize,
    Row,
    RowElement,
    Size,
)


def test_size_rejects_negative_components():
    with pytest.raises(InvalidSizeError):
        Size(-1, 10)


def test_proposed_size_rejects_nan():
    with pytest.raises(InvalidSizeError):
        ProposedSize(math.nan, None)


def test_invalid_size_error_is_value_error():
    assert issubclass(InvalidSizeError, ValueError)
    assert issubclass(InvalidSizeError, FlowLayoutError)


def test_proposal_admits_only_constrained_axes():
    proposal = ProposedSize(100, None)
    assert proposal.admits(Size(100, 5000))
    assert not proposal.admits(Size(101, 1))
    assert ProposedSize.unspecified().admits(Size(1e9, 1e9))


def test_replacing_unspecified_keeps_constrained_axes():
    size = ProposedSize(40, None).replacing_unspecified(Size(math.inf, math.inf))
    assert size.width == 40
    assert size.height == math.inf


def test_row_tallest_first_occurrence_wins():
    row = Row(
        elements=(
            RowElement(0, Size(10, 20), 0),
            RowElement(1, Size(10, 30), 10),
            RowElement(2, Size(10, 30), 20),
        )
    )
    assert row.tallest.index == 1


def test_empty_result_has_zero_size():
    result = LayoutResult.empty()
    assert result.is_empty
    assert result.size == Size.zero()
