"""
Geometry model tests: positions, variants, ring rules, builder, numpy views.

Usage:
    pytest test_geometry.py
"""

import dataclasses

import numpy as np
import pytest

from geojson_codec import (
    ConstructionError,
    InvalidRingError,
    LineString,
    LineStringBuilder,
    MissingFieldError,
    NamedCRS,
    OutOfRangeError,
    ParseError,
    Point,
    Polygon,
    Position,
    GeometryKind,
)

SQUARE = [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]


def positions(*pairs):
    return [Position(*pair) for pair in pairs]


# ---------------------------------------------------------------- Position

def test_position_order_and_float_storage():
    pos = Position(-122.428938, 37.766713)
    assert pos.longitude == -122.428938
    assert pos.latitude == 37.766713
    assert pos.altitude is None
    assert pos.to_tuple() == (-122.428938, 37.766713)
    assert isinstance(Position(1, 2).longitude, float)


def test_position_with_altitude():
    pos = Position(1, 2, 3)
    assert pos.has_altitude
    assert pos.to_tuple() == (1.0, 2.0, 3.0)
    assert pos.without_altitude() == Position(1, 2)


def test_position_rejects_missing_and_invalid_values():
    with pytest.raises(MissingFieldError) as exc:
        Position(None, 1)
    assert exc.value.field == 'longitude'

    with pytest.raises(OutOfRangeError):
        Position(True, 1)
    with pytest.raises(OutOfRangeError):
        Position("1", 2)
    with pytest.raises(OutOfRangeError):
        Position(float('inf'), 2)
    with pytest.raises(OutOfRangeError):
        Position(1, 2, float('nan'))


def test_position_rejects_integers_beyond_float_range():
    with pytest.raises(OutOfRangeError) as exc:
        Position(10**400, 0)
    assert exc.value.field == 'longitude'
    with pytest.raises(OutOfRangeError) as exc:
        Position(0, 0, -10**400)
    assert exc.value.field == 'altitude'


def test_position_is_immutable():
    pos = Position(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.longitude = 5


# ---------------------------------------------------------------- Point

def test_point_from_coordinates():
    point = Point.from_coordinates([-122.428938, 37.766713])
    assert point.coordinates == Position(-122.428938, 37.766713)
    assert point.type == GeometryKind.POINT
    assert point.crs is None


def test_point_requires_a_position():
    with pytest.raises(MissingFieldError):
        Point(None)
    with pytest.raises(OutOfRangeError):
        Point([1, 2])


# ---------------------------------------------------------------- LineString

def test_linestring_two_positions_is_not_a_ring():
    line = LineString.from_coordinates([[0, 0], [1, 1]])
    assert len(line) == 2
    assert not line.is_closed()
    assert not line.is_linear_ring()


def test_linestring_closed_four_positions_is_a_ring():
    line = LineString.from_coordinates([[0, 0], [1, 0], [1, 1], [0, 0]])
    assert line.is_closed()
    assert line.is_linear_ring()


def test_closed_but_short_line_is_not_a_ring():
    for coords in ([[0, 0], [0, 0]], [[0, 0], [1, 1], [0, 0]]):
        line = LineString.from_coordinates(coords)
        assert line.is_closed()
        assert not line.is_linear_ring()


def test_closure_is_exact_equality():
    line = LineString.from_coordinates([[0, 0], [1, 0], [1, 1], [1e-12, 0]])
    assert not line.is_closed()

    with_altitude = LineString.from_coordinates([[0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 0, 2]])
    assert not with_altitude.is_closed()


def test_linestring_needs_two_positions():
    with pytest.raises(OutOfRangeError) as exc:
        LineString(positions((0, 0)))
    assert exc.value.field == 'coordinates'

    with pytest.raises(MissingFieldError):
        LineString(None)
    with pytest.raises(OutOfRangeError):
        LineString([Position(0, 0), (1, 1)])


def test_linestring_from_coordinates_rejects_bad_shape():
    with pytest.raises(ParseError):
        LineString.from_coordinates([0, 0])
    with pytest.raises(ParseError):
        LineString.from_coordinates([[0, 0], [1]])


def test_linestring_coordinates_are_a_tuple():
    line = LineString(positions((0, 0), (1, 1)))
    assert isinstance(line.coordinates, tuple)
    assert line == LineString(tuple(positions((0, 0), (1, 1))))
    assert hash(line) == hash(LineString(positions((0, 0), (1, 1))))


# ---------------------------------------------------------------- Polygon

def test_polygon_from_rings_and_raw_coordinates_agree():
    ring = LineString.from_coordinates(SQUARE)
    assert Polygon([ring]) == Polygon.from_coordinates([SQUARE])
    assert Polygon([ring.coordinates]) == Polygon([ring])


def test_polygon_exterior_and_holes():
    hole = [[0.2, 0.2], [0.4, 0.2], [0.4, 0.4], [0.2, 0.2]]
    polygon = Polygon.from_coordinates([SQUARE, hole])
    assert polygon.exterior.is_linear_ring()
    assert len(polygon.holes) == 1
    assert polygon.holes[0].coordinates[0] == Position(0.2, 0.2)
    assert len(list(polygon.positions())) == 9


def test_polygon_rejects_unclosed_ring():
    with pytest.raises(InvalidRingError) as exc:
        Polygon.from_coordinates([[[0, 0], [1, 0], [1, 1]]])
    assert isinstance(exc.value, ConstructionError)
    assert exc.value.ring_index == 0
    assert exc.value.rule in (InvalidRingError.TOO_SHORT, InvalidRingError.NOT_CLOSED)


def test_polygon_rejects_unclosed_four_position_ring():
    with pytest.raises(InvalidRingError) as exc:
        Polygon.from_coordinates([[[0, 0], [1, 0], [1, 1], [0, 1]]])
    assert exc.value.rule == InvalidRingError.NOT_CLOSED
    assert 'rings[0]' in str(exc.value)


def test_polygon_names_the_offending_hole():
    short_hole = [[0.2, 0.2], [0.4, 0.2], [0.2, 0.2]]
    with pytest.raises(InvalidRingError) as exc:
        Polygon.from_coordinates([SQUARE, short_hole])
    assert exc.value.ring_index == 1
    assert exc.value.rule == InvalidRingError.TOO_SHORT
    assert exc.value.field == 'rings[1]'


def test_polygon_rejects_prebuilt_linestring_that_is_not_a_ring():
    line = LineString.from_coordinates([[0, 0], [1, 1]])
    with pytest.raises(InvalidRingError):
        Polygon([line])


def test_polygon_needs_at_least_one_ring():
    with pytest.raises(OutOfRangeError):
        Polygon([])
    with pytest.raises(MissingFieldError):
        Polygon(None)
    with pytest.raises(MissingFieldError):
        Polygon([None])


def test_polygon_ring_crs_is_dropped():
    crs = NamedCRS("EPSG:4326")
    ring = LineString.from_coordinates(SQUARE, crs=crs)
    polygon = Polygon([ring])
    assert polygon.exterior.crs is None
    assert polygon == Polygon.from_coordinates([SQUARE])


def test_crs_is_shared_not_copied():
    crs = NamedCRS("urn:ogc:def:crs:EPSG::4326")
    point = Point(Position(1, 2), crs)
    line = LineString(positions((0, 0), (1, 1)), crs)
    assert point.crs is line.crs


# ---------------------------------------------------------------- Builder

def test_builder_defers_validation_until_build():
    builder = LineStringBuilder()
    builder.add_coordinates(0, 0)
    assert len(builder) == 1
    assert not hasattr(builder, 'kind')
    with pytest.raises(OutOfRangeError):
        builder.build()

    builder.add(Position(1, 1))
    line = builder.build()
    assert line == LineString.from_coordinates([[0, 0], [1, 1]])


def test_builder_ring():
    builder = LineStringBuilder()
    builder.add_coordinates(0, 0).add_coordinates(1, 0).add_coordinates(1, 1).add_coordinates(0, 1)
    with pytest.raises(InvalidRingError) as exc:
        builder.build_ring()
    assert exc.value.rule == InvalidRingError.NOT_CLOSED

    ring = builder.close().build_ring()
    assert ring.is_linear_ring()
    assert len(ring) == 5
    assert builder.close().positions == ring.coordinates


def test_builder_short_ring_and_bad_input():
    builder = LineStringBuilder().extend(positions((0, 0), (1, 1))).close()
    with pytest.raises(InvalidRingError) as exc:
        builder.build_ring()
    assert exc.value.rule == InvalidRingError.TOO_SHORT

    with pytest.raises(OutOfRangeError):
        LineStringBuilder().close()
    with pytest.raises(OutOfRangeError):
        LineStringBuilder().add((1, 2))


def test_built_linestring_is_independent_of_builder():
    builder = LineStringBuilder().extend(positions((0, 0), (1, 1)))
    line = builder.build()
    builder.add_coordinates(2, 2)
    builder.clear()
    assert len(line) == 2
    assert len(builder) == 0


# ---------------------------------------------------------------- numpy views

def test_to_array_shapes():
    line = LineString.from_coordinates([[0, 0], [1, 1], [2, 0]])
    assert line.to_array().shape == (3, 2)

    line3d = LineString.from_coordinates([[0, 0, 5], [1, 1, 6]])
    np.testing.assert_array_equal(line3d.to_array(), [[0, 0, 5], [1, 1, 6]])

    mixed = LineString.from_coordinates([[0, 0, 5], [1, 1]])
    assert mixed.to_array().shape == (2, 2)

    assert Point.from_coordinates([3, 4]).to_array().tolist() == [3.0, 4.0]


def test_from_array_validates_shape():
    line = LineString.from_array(np.array([[0, 0], [1, 1]]))
    assert line == LineString.from_coordinates([[0, 0], [1, 1]])

    with pytest.raises(OutOfRangeError):
        LineString.from_array(np.zeros((3, 4)))
    with pytest.raises(OutOfRangeError):
        LineString.from_array(np.zeros(4))
    with pytest.raises(OutOfRangeError):
        LineString.from_array(np.zeros((1, 2)))


def test_polygon_arrays_round_trip():
    polygon = Polygon.from_coordinates([SQUARE])
    arrays = polygon.to_arrays()
    assert arrays[0].shape == (5, 2)
    assert Polygon.from_arrays(arrays) == polygon

    with pytest.raises(InvalidRingError) as exc:
        Polygon.from_arrays([np.array(SQUARE), np.array([[0, 0], [1, 1], [0, 0]])])
    assert exc.value.ring_index == 1
