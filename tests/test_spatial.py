from __future__ import annotations

import dataclasses
import math

import pytest

from refkit.errors import InvalidDimensionError, RefkitError
from refkit.spatial import SpatialCell


def test_cell_reads_back_supplied_values_and_area() -> None:
    cell = SpatialCell(center_x=1.5, center_y=-2.25, width=4.0, height=2.5)

    assert (cell.center_x, cell.center_y, cell.width, cell.height) == (1.5, -2.25, 4.0, 2.5)
    assert cell.area() == 4.0 * 2.5


@pytest.mark.parametrize(
    ("width", "height"),
    [(0.0, 1.0), (1.0, 0.0), (-3.0, 2.0), (2.0, -0.5), (math.nan, 1.0)],
)
def test_cell_rejects_non_positive_dimensions(width: float, height: float) -> None:
    with pytest.raises(InvalidDimensionError):
        SpatialCell(center_x=0.0, center_y=0.0, width=width, height=height)


def test_invalid_dimension_is_a_value_error() -> None:
    with pytest.raises(ValueError) as excinfo:
        SpatialCell(0.0, 0.0, 0.0, 1.0)

    assert isinstance(excinfo.value, RefkitError)
    assert "width" in str(excinfo.value)


def test_distance_uses_euclidean_norm() -> None:
    cell = SpatialCell(center_x=1.0, center_y=1.0, width=1.0, height=1.0)

    assert cell.distance_to(4.0, 5.0) == 5.0
    assert cell.distance_to(-2.0, -3.0) == 5.0
    assert cell.distance_to(1.0, 1.0) == 0.0


VARIED_CELLS = [
    SpatialCell(3.0, 4.0, 1.0, 1.0),
    SpatialCell(-0.1, 0.7, 2.0, 3.0),
    SpatialCell(1e10, -1e-10, 0.5, 0.5),
    SpatialCell(7, -2, 1, 1),
    SpatialCell(10**200, 0, 1, 1),
]


@pytest.mark.parametrize("cell", VARIED_CELLS)
def test_distance_to_origin_matches_distance_to_zero_exactly(cell: SpatialCell) -> None:
    assert cell.distance_to_origin() == cell.distance_to(0, 0)
    assert cell.distance_to_origin() == cell.distance_to(0.0, 0.0)


@pytest.mark.parametrize("cell", VARIED_CELLS)
def test_self_distance_is_zero(cell: SpatialCell) -> None:
    assert cell.distance_to(cell.center_x, cell.center_y) == 0.0


def test_distance_with_huge_integer_center_overflows_to_inf() -> None:
    cell = SpatialCell(10**200, 0, 1, 1)

    assert cell.distance_to(0, 0) == math.inf
    assert cell.distance_to_origin() == math.inf


def test_distance_to_origin_known_value() -> None:
    assert SpatialCell(3.0, 4.0, 1.0, 1.0).distance_to_origin() == 5.0


def test_bounds_and_contains() -> None:
    cell = SpatialCell(center_x=0.0, center_y=0.0, width=4.0, height=2.0)

    assert cell.bounds() == (-2.0, -1.0, 2.0, 1.0)
    assert cell.contains(0.0, 0.0)
    assert cell.contains(2.0, 1.0)
    assert not cell.contains(2.5, 0.0)
    assert not cell.contains(0.0, -1.5)


def test_cell_is_immutable() -> None:
    cell = SpatialCell(0.0, 0.0, 1.0, 1.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        cell.width = 2.0  # type: ignore[misc]
