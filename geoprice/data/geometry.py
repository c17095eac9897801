"""
Polygon helpers shared by the geocoding adapter.

Ring order is fixed: rectangles go NW, NE, SE, SW and octagons start at N
and run clockwise. Both repeat the first point as the last.
"""

import math
from typing import List
from .base import Bounds, GeoPoint, LatLng

KM_PER_DEGREE = 111.0
DIAGONAL_SCALE = 0.7

def rectangle_to_boundary(bounds: Bounds) -> List[LatLng]:
    ne, sw = bounds.northeast, bounds.southwest
    return [
        (ne.lat, sw.lng),  # NW
        (ne.lat, ne.lng),  # NE
        (sw.lat, ne.lng),  # SE
        (sw.lat, sw.lng),  # SW
        (ne.lat, sw.lng),  # close
    ]

def octagon_boundary(center: GeoPoint, radius_km: float) -> List[LatLng]:
    """
    Approximate a circle of `radius_km` around `center` with 8 points.
    The longitude offset is widened by 1/cos(lat) so the shape is not
    squashed away from the equator.
    """
    lat_off = radius_km / KM_PER_DEGREE
    lng_off = radius_km / (KM_PER_DEGREE * math.cos(math.radians(center.lat)))
    d = DIAGONAL_SCALE
    lat, lng = center.lat, center.lng
    ring = [
        (lat + lat_off, lng),                    # N
        (lat + lat_off * d, lng + lng_off * d),  # NE
        (lat, lng + lng_off),                    # E
        (lat - lat_off * d, lng + lng_off * d),  # SE
        (lat - lat_off, lng),                    # S
        (lat - lat_off * d, lng - lng_off * d),  # SW
        (lat, lng - lng_off),                    # W
        (lat + lat_off * d, lng - lng_off * d),  # NW
    ]
    ring.append(ring[0])
    return ring
