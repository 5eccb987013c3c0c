"""
Utility functions for the Logistics Matching module
"""

import math
from typing import Sequence

from shapely.geometry import Point, Polygon

from .constants import EARTH_RADIUS_KM, MIN_POLYGON_POINTS
from .schemas import Coordinate


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius: float = EARTH_RADIUS_KM
) -> float:
    """
    Calculate the great-circle distance between two points on Earth
    using the Haversine formula.

    Formula:
        d = 2R × arcsin(√(sin²((φ₂-φ₁)/2) + cos(φ₁)cos(φ₂)sin²((λ₂-λ₁)/2)))

    Args:
        lat1: Latitude of point 1 in degrees
        lon1: Longitude of point 1 in degrees
        lat2: Latitude of point 2 in degrees
        lon2: Longitude of point 2 in degrees
        radius: Earth radius in km (default: 6371.0)

    Returns:
        Distance in kilometers

    Example:
        >>> haversine_distance(10.7905, 78.7047, 13.0827, 80.2707)
        306.6  # Tiruchirappalli to Chennai in km (approx.)
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)

    delta_phi = phi2 - phi1
    delta_lambda = math.radians(lon2) - math.radians(lon1)

    a = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )

    # Rounding can push sqrt(a) slightly above 1 for antipodal points
    c = 2 * math.asin(min(1.0, math.sqrt(a)))

    return radius * c


def distance_km(
    a: Coordinate,
    b: Coordinate,
    radius: float = EARTH_RADIUS_KM
) -> float:
    """Great-circle distance between two coordinates, in km."""
    return haversine_distance(
        a.latitude, a.longitude,
        b.latitude, b.longitude,
        radius=radius
    )


def point_in_polygon(point: Coordinate, polygon: Sequence[Coordinate]) -> bool:
    """
    Test a point against a polygon given by its ordered vertices.

    Latitude/longitude are treated as planar coordinates, which is fine at
    delivery-zone scale. The ring is closed implicitly and points lying
    exactly on an edge are outside.

    Args:
        point: Point to test
        polygon: Ordered vertices

    Returns:
        True if the point is inside. Polygons with fewer than three
        vertices contain nothing.
    """
    if len(polygon) < MIN_POLYGON_POINTS:
        return False

    shape = Polygon([(vertex.longitude, vertex.latitude) for vertex in polygon])
    return shape.contains(Point(point.longitude, point.latitude))
