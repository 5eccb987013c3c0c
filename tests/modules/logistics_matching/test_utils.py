"""Tests for geographic utilities (distance and polygon tests)."""

import math

import pytest
from pydantic import ValidationError

from src.modules.logistics_matching.utils import (
    haversine_distance,
    distance_km,
    point_in_polygon,
)
from src.modules.logistics_matching.schemas import Coordinate
from src.modules.logistics_matching.constants import EARTH_RADIUS_KM


class TestDistance:
    """Test suite for Haversine distance."""

    def setup_method(self):
        """Set up test fixtures."""
        self.trichy = Coordinate(latitude=10.7905, longitude=78.7047)
        self.srirangam = Coordinate(latitude=10.8620, longitude=78.6936)
        self.thanjavur = Coordinate(latitude=10.7870, longitude=79.1378)
        self.chennai = Coordinate(latitude=13.0827, longitude=80.2707)

    def test_identical_points(self):
        """Distance from a point to itself is zero."""
        assert distance_km(self.trichy, self.trichy) == 0.0

    def test_symmetry(self):
        """Distance does not depend on argument order."""
        assert distance_km(self.trichy, self.chennai) == pytest.approx(
            distance_km(self.chennai, self.trichy)
        )
        assert distance_km(self.srirangam, self.thanjavur) == pytest.approx(
            distance_km(self.thanjavur, self.srirangam)
        )

    def test_triangle_inequality(self):
        """d(a, c) <= d(a, b) + d(b, c) for every ordering."""
        points = [self.trichy, self.srirangam, self.thanjavur, self.chennai]

        for a in points:
            for b in points:
                for c in points:
                    assert distance_km(a, c) <= (
                        distance_km(a, b) + distance_km(b, c) + 1e-9
                    )

    def test_one_degree_of_latitude(self):
        """One degree along a meridian is R × π / 180."""
        distance = haversine_distance(0.0, 0.0, 1.0, 0.0)

        assert distance == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)

    def test_known_city_distance(self):
        """Tiruchirappalli to Chennai is roughly 300 km as the crow flies."""
        distance = distance_km(self.trichy, self.chennai)

        assert 290 < distance < 320

    def test_antipodal_points(self):
        """Antipodal points are half a circumference apart."""
        distance = haversine_distance(0.0, 0.0, 0.0, 180.0)

        assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_custom_radius(self):
        """Distance scales with the sphere radius."""
        distance = distance_km(self.trichy, self.chennai, radius=EARTH_RADIUS_KM * 2)

        assert distance == pytest.approx(2 * distance_km(self.trichy, self.chennai))


class TestPointInPolygon:
    """Test suite for polygon containment."""

    def setup_method(self):
        """Set up test fixtures."""
        # Square around central Trichy
        self.square = [
            Coordinate(latitude=10.75, longitude=78.65),
            Coordinate(latitude=10.75, longitude=78.75),
            Coordinate(latitude=10.85, longitude=78.75),
            Coordinate(latitude=10.85, longitude=78.65),
        ]

    def test_point_inside(self):
        """A point in the middle of the square is inside."""
        point = Coordinate(latitude=10.80, longitude=78.70)

        assert point_in_polygon(point, self.square) is True

    def test_point_outside(self):
        """Points beyond each side are outside."""
        outside = [
            Coordinate(latitude=10.90, longitude=78.70),
            Coordinate(latitude=10.70, longitude=78.70),
            Coordinate(latitude=10.80, longitude=78.80),
            Coordinate(latitude=10.80, longitude=78.60),
        ]

        for point in outside:
            assert point_in_polygon(point, self.square) is False

    def test_concave_polygon(self):
        """The notch of an L-shaped polygon is outside."""
        l_shape = [
            Coordinate(latitude=0.0, longitude=0.0),
            Coordinate(latitude=0.0, longitude=2.0),
            Coordinate(latitude=1.0, longitude=2.0),
            Coordinate(latitude=1.0, longitude=1.0),
            Coordinate(latitude=2.0, longitude=1.0),
            Coordinate(latitude=2.0, longitude=0.0),
        ]

        assert point_in_polygon(Coordinate(latitude=0.5, longitude=1.5), l_shape) is True
        assert point_in_polygon(Coordinate(latitude=1.5, longitude=0.5), l_shape) is True
        assert point_in_polygon(Coordinate(latitude=1.5, longitude=1.5), l_shape) is False

    def test_degenerate_polygon(self):
        """Fewer than three vertices contain nothing."""
        point = Coordinate(latitude=10.80, longitude=78.70)

        assert point_in_polygon(point, []) is False
        assert point_in_polygon(point, self.square[:2]) is False


class TestCoordinate:
    """Test suite for the Coordinate schema."""

    def test_field_descriptions(self):
        """Coordinate fields are documented in the generated JSON schema."""
        properties = Coordinate.model_json_schema()["properties"]

        assert properties["latitude"]["description"] == "Latitude in decimal degrees"
        assert properties["longitude"]["description"] == "Longitude in decimal degrees"

    def test_frozen(self):
        """Coordinates are immutable values."""
        point = Coordinate(latitude=10.7905, longitude=78.7047)

        with pytest.raises(ValidationError):
            point.latitude = 0.0
