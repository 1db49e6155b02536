import math
from typing import Iterable, Optional

from nutricare.data.hospitals import AHMEDABAD, GUJARAT_CITY_COORDS

EARTH_RADIUS_KM = 6371


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometers on a spherical Earth."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lng2 - lng1)

    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * \
        math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    # rounding can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


class HospitalLocator:
    """
    Radius search and id lookup over a fixed hospital catalog.

    The catalog is handed in at construction and never modified; every call
    returns freshly built dicts so callers can annotate results freely.
    """

    def __init__(self, catalog: Iterable[dict]):
        self._catalog = tuple(catalog)

    def __iter__(self):
        return (dict(h) for h in self._catalog)

    def __len__(self):
        return len(self._catalog)

    def find_nearby(self, lat: float, lng: float, radius_km: float) -> list:
        nearby = []
        for hospital in self._catalog:
            location = hospital["location"]
            distance = haversine_km(lat, lng, location["lat"], location["lng"])
            if distance <= radius_km:
                nearby.append({**hospital, "distance": distance})
        # sorted() is stable, so equal distances keep catalog order
        return sorted(nearby, key=lambda h: h["distance"])

    def get(self, hospital_id: str) -> Optional[dict]:
        for hospital in self._catalog:
            if hospital["id"] == hospital_id:
                return dict(hospital)
        return None


def geocode_address(address: str) -> dict:
    """
    Resolve a free-text Gujarat address to coordinates by city/area name.

    Unknown places fall back to central Ahmedabad.
    """
    normalized = address.lower().strip()
    lat, lng = AHMEDABAD
    for place, coords in GUJARAT_CITY_COORDS:
        if place in normalized:
            lat, lng = coords
            break
    return {"lat": lat, "lng": lng, "address": address}
