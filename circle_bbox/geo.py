# -*- coding: utf-8 -*-
"""
Bounding boxes around a circle on a spherical Earth.

Implements the "bounding coordinates" method (J. P. Matuschek; Bronshtein et al.,
Handbook of Mathematics) on a sphere with Earth's equatorial radius:

  1) angular radius of the circle
  2) latitude band +/- angular radius
  3) longitude half-span from the tangent latitude
  4) clamp to the poles when the circle covers one
  5) split at the 180th meridian when the box wraps around it

Everything here is pure: each step returns a new value, nothing is shared
between calls.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace

from . import trig
from .constants import EQUATORIAL_RADIUS_M

HALF_PI = math.pi / 2
TWO_PI = 2 * math.pi

# acos arguments that overshoot 1 by no more than this are rounding noise
_ACOS_SLACK = 1e-12


def to_radians(deg: float) -> float:
    return deg * math.pi / 180


def to_degrees(rad: float) -> float:
    return rad * 180 / math.pi


def normalize_meridian(lon: float) -> float:
    """Bring a longitude (radians) back into [-pi, pi]; in-range values are returned as is."""
    if -math.pi <= lon <= math.pi:
        return lon
    return (lon + 3 * math.pi) % TWO_PI - math.pi


def angular_radius(radius_km: float) -> float:
    """Angle (radians) subtended at Earth's center by radius_km along the surface."""
    return 1000 * radius_km / EQUATORIAL_RADIUS_M


def _acos(x: float) -> float:
    if 1.0 < x <= 1.0 + _ACOS_SLACK:
        x = 1.0
    elif -1.0 - _ACOS_SLACK <= x < -1.0:
        x = -1.0
    return trig.acos(x)


@dataclass(frozen=True)
class Point:
    latitude: float
    longitude: float

    def to_radians(self) -> Point:
        return Point(to_radians(self.latitude), to_radians(self.longitude))

    def to_degrees(self) -> Point:
        return Point(to_degrees(self.latitude), to_degrees(self.longitude))

    def normalized(self) -> Point:
        return replace(self, longitude=normalize_meridian(self.longitude))

    def as_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class BBox:
    """Lower-left (min) and upper-right (max) corners of a lat/lon aligned box."""
    min: Point
    max: Point

    @property
    def min_lat(self) -> float:
        return self.min.latitude

    @property
    def min_lon(self) -> float:
        return self.min.longitude

    @property
    def max_lat(self) -> float:
        return self.max.latitude

    @property
    def max_lon(self) -> float:
        return self.max.longitude

    def to_degrees(self) -> BBox:
        return BBox(self.min.to_degrees(), self.max.to_degrees())

    def as_dict(self) -> dict[str, dict[str, float]]:
        return {"min": self.min.as_dict(), "max": self.max.as_dict()}


def tangent_latitude(center: Point, ang_radius: float) -> float:
    """Latitude (radians) where the bounding meridians touch the circle."""
    return trig.asin(trig.sin(center.latitude) / trig.cos(ang_radius))


def delta_longitude(center: Point, ang_radius: float, lat_t: float) -> float:
    """Half-width (radians) of the longitude span seen from the center meridian."""
    num = trig.cos(ang_radius) - trig.sin(lat_t) * trig.sin(center.latitude)
    return _acos(num / (trig.cos(lat_t) * trig.cos(center.latitude)))


def with_angular_radius(bbox: BBox, center: Point, ang_radius: float) -> BBox:
    return BBox(
        replace(bbox.min, latitude=center.latitude - ang_radius),
        replace(bbox.max, latitude=center.latitude + ang_radius),
    )


def with_delta_lon(bbox: BBox, center: Point, delta_lon: float) -> BBox:
    return BBox(
        replace(bbox.min, longitude=center.longitude - delta_lon),
        replace(bbox.max, longitude=center.longitude + delta_lon),
    )


def with_pole_clamp(bbox: BBox) -> BBox:
    """A box reaching past a pole covers every longitude; its latitude stops at the pole."""
    lo, hi = bbox.min, bbox.max
    if hi.latitude > HALF_PI:
        lo = Point(lo.latitude, -math.pi)
        hi = Point(HALF_PI, math.pi)
    if lo.latitude < -HALF_PI:
        lo = Point(-HALF_PI, -math.pi)
        hi = Point(hi.latitude, math.pi)
    return BBox(lo, hi)


def split_at_antimeridian(bbox: BBox) -> list[BBox]:
    """
    Split a box (radians, not yet normalized) that wraps around +/-pi.

    Returns one box when there is no wraparound, otherwise the eastern part
    ending at pi followed by the western part starting at -pi.
    """
    lo, hi = bbox.min, bbox.max
    if lo.longitude < -math.pi:
        return [
            BBox(Point(lo.latitude, lo.longitude + TWO_PI), Point(hi.latitude, math.pi)),
            BBox(Point(lo.latitude, -math.pi), Point(hi.latitude, hi.longitude)),
        ]
    if hi.longitude > math.pi:
        return [
            BBox(Point(lo.latitude, lo.longitude), Point(hi.latitude, math.pi)),
            BBox(Point(lo.latitude, -math.pi), Point(hi.latitude, hi.longitude - TWO_PI)),
        ]
    return [bbox]


def normalized(bbox: BBox) -> BBox:
    return BBox(bbox.min.normalized(), bbox.max.normalized())


def bboxes_around(radius_km: float, center: Point) -> list[BBox]:
    """
    Bounding box(es), in degrees, enclosing the circle of radius_km around center.

    center is in degrees (latitude in [-90, 90], longitude in [-180, 180]);
    radius_km should stay well under half of Earth's circumference. Neither is
    validated: degenerate input yields NaN coordinates instead of an error.

    Two boxes are returned when the area crosses the 180th meridian, one otherwise.
    """
    ang = angular_radius(radius_km)
    c = center.to_radians()

    lat_t = tangent_latitude(c, ang)
    dlon = delta_longitude(c, ang, lat_t)

    bbox = BBox(c, c)
    bbox = with_angular_radius(bbox, c, ang)
    bbox = with_delta_lon(bbox, c, dlon)
    bbox = with_pole_clamp(bbox)

    return [normalized(b).to_degrees() for b in split_at_antimeridian(bbox)]


def wraps_antimeridian(bboxes: list[BBox]) -> bool:
    return len(bboxes) == 2
