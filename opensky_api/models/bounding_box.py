"""Geographic bounding box used to filter state vectors."""

from __future__ import annotations

from dataclasses import dataclass
import math

from opensky_api.errors import ValidationError


@dataclass(frozen=True)
class BoundingBox:
    """Area defined by WGS-84 latitude/longitude bounds in decimal degrees."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self) -> None:
        for name in ("min_lat", "max_lat", "min_lon", "max_lon"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
                raise ValidationError(f"{name} must be a number, got {value!r}")

        if not -90.0 <= self.min_lat <= 90.0 or not -90.0 <= self.max_lat <= 90.0:
            raise ValidationError(
                f"Latitudes must be within [-90, 90], got {self.min_lat}..{self.max_lat}"
            )
        if not -180.0 <= self.min_lon <= 180.0 or not -180.0 <= self.max_lon <= 180.0:
            raise ValidationError(
                f"Longitudes must be within [-180, 180], got {self.min_lon}..{self.max_lon}"
            )
        if self.min_lat > self.max_lat:
            raise ValidationError(
                f"min_lat ({self.min_lat}) is greater than max_lat ({self.max_lat})"
            )
        if self.min_lon > self.max_lon:
            raise ValidationError(
                f"min_lon ({self.min_lon}) is greater than max_lon ({self.max_lon})"
            )

    @classmethod
    def around(cls, lat: float, lon: float, radius_nm: float) -> "BoundingBox":
        """Box enclosing a circle of ``radius_nm`` nautical miles, clamped to valid ranges."""

        if radius_nm <= 0:
            raise ValidationError(f"radius_nm must be positive, got {radius_nm}")

        # One nautical mile is one arc minute of latitude
        lat_delta = radius_nm / 60.0
        lon_delta = radius_nm / max(60.0 * math.cos(math.radians(lat)), 0.0001)
        return cls(
            min_lat=max(lat - lat_delta, -90.0),
            max_lat=min(lat + lat_delta, 90.0),
            min_lon=max(lon - lon_delta, -180.0),
            max_lon=min(lon + lon_delta, 180.0),
        )

    def to_params(self) -> dict[str, float]:
        """Query parameters understood by ``/states/all``."""

        return {
            "lamin": self.min_lat,
            "lomin": self.min_lon,
            "lamax": self.max_lat,
            "lomax": self.max_lon,
        }


__all__ = ["BoundingBox"]
