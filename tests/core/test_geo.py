from __future__ import annotations

import math

import pytest

from disaster_console.errors import ValidationError
from disaster_console.geo import (
    COORDINATE_RANGE_MESSAGE,
    INVALID_COORDINATES_MESSAGE,
    format_coordinates,
    format_distance,
    map_severity_from_radius,
    parse_coordinates,
    severity_from_radius,
    validate_coordinates,
)


@pytest.mark.parametrize(
    ("lat", "lng"),
    [(90.0, 180.0), (-90.0, -180.0), (0.0, 0.0), (28.6139, 77.209)],
)
def test_validate_coordinates_accepts_bounds(lat: float, lng: float) -> None:
    assert validate_coordinates(lat, lng) == (lat, lng)


@pytest.mark.parametrize(
    ("lat", "lng"),
    [(90.0001, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)],
)
def test_validate_coordinates_rejects_out_of_range(lat: float, lng: float) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_coordinates(lat, lng)
    assert str(excinfo.value) == COORDINATE_RANGE_MESSAGE


def test_validate_coordinates_rejects_nan() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_coordinates(math.nan, 10.0)
    assert str(excinfo.value) == INVALID_COORDINATES_MESSAGE


def test_parse_coordinates_from_text() -> None:
    assert parse_coordinates(" 28.5 ", "77.25") == (28.5, 77.25)

    with pytest.raises(ValidationError) as excinfo:
        parse_coordinates("north", "77")
    assert str(excinfo.value) == INVALID_COORDINATES_MESSAGE

    with pytest.raises(ValidationError):
        parse_coordinates("95", "77")


@pytest.mark.parametrize(
    ("radius", "expected"),
    [(12.0, "critical"), (10.0, "critical"), (9.9, "high"), (5.0, "high"), (2.0, "medium"), (1.5, "low")],
)
def test_severity_from_radius(radius: float, expected: str) -> None:
    assert severity_from_radius(radius) == expected


def test_map_severity_marks_inactive_as_resolved() -> None:
    assert map_severity_from_radius(15.0) == "high"
    assert map_severity_from_radius(5.0) == "medium"
    assert map_severity_from_radius(4.99) == "low"
    assert map_severity_from_radius(15.0, active=False) == "resolved"


def test_formatting_helpers() -> None:
    assert format_coordinates(28.61394, 77.20902) == "28.6139, 77.2090"
    assert format_distance(2.5) == "2.5 km"
    assert format_distance(0.25) == "250 m"
