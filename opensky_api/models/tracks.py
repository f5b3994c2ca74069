"""Models for aircraft trajectories returned by ``/tracks``."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

WAYPOINT_FIELDS = (
    "time",
    "latitude",
    "longitude",
    "baro_altitude",
    "true_track",
    "on_ground",
)


class Waypoint(BaseModel):
    """A single point of a trajectory.

    Decodes from the positional array OpenSky sends or from an object with
    the same keys.
    """

    time: int = Field(..., strict=True, description="Unix time of the waypoint")
    latitude: Optional[float] = Field(default=None, strict=True)
    longitude: Optional[float] = Field(default=None, strict=True)
    baro_altitude: Optional[float] = Field(
        default=None, strict=True, description="Barometric altitude in meters"
    )
    true_track: Optional[float] = Field(
        default=None, strict=True, description="Degrees clockwise from north"
    )
    on_ground: bool = Field(..., strict=True)

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != len(WAYPOINT_FIELDS):
                raise ValueError(f"expected {len(WAYPOINT_FIELDS)} elements, got {len(data)}")
            return dict(zip(WAYPOINT_FIELDS, data))
        return data


class FlightTrack(BaseModel):
    """Trajectory of one aircraft."""

    icao24: str = Field(..., strict=True)
    start_time: float = Field(
        ..., alias="startTime", strict=True, description="Time of the first waypoint (Unix)"
    )
    end_time: float = Field(
        ..., alias="endTime", strict=True, description="Time of the last waypoint (Unix)"
    )
    callsign: Optional[str] = Field(default=None, strict=True)
    path: list[Waypoint] = Field(default_factory=list)

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, allow_inf_nan=False
    )


__all__ = ["FlightTrack", "WAYPOINT_FIELDS", "Waypoint"]
