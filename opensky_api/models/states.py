"""Models for aircraft state vectors returned by ``/states``."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Positional layout of a state vector row. ``category`` is only present in
# rows requested with ``extended=1`` and newer responses.
STATE_VECTOR_FIELDS = (
    "icao24",
    "callsign",
    "origin_country",
    "time_position",
    "last_contact",
    "longitude",
    "latitude",
    "baro_altitude",
    "on_ground",
    "velocity",
    "true_track",
    "vertical_rate",
    "sensors",
    "geo_altitude",
    "squawk",
    "spi",
    "position_source",
    "category",
)


class StateVector(BaseModel):
    """One observation of an aircraft's position and kinematic state."""

    icao24: str = Field(
        ..., strict=True, description="ICAO 24-bit transponder address, lower case hex"
    )
    callsign: Optional[str] = Field(
        default=None, strict=True, description="Callsign (8 chars, space padded)"
    )
    origin_country: str = Field(
        ..., strict=True, description="Country inferred from the ICAO 24-bit address"
    )
    time_position: Optional[int] = Field(
        default=None, strict=True, description="Unix time of the last position update"
    )
    last_contact: int = Field(
        ..., strict=True, description="Unix time of the last valid message"
    )
    longitude: Optional[float] = Field(
        default=None, strict=True, description="WGS-84 longitude in decimal degrees"
    )
    latitude: Optional[float] = Field(
        default=None, strict=True, description="WGS-84 latitude in decimal degrees"
    )
    baro_altitude: Optional[float] = Field(
        default=None, strict=True, description="Barometric altitude in meters"
    )
    on_ground: bool = Field(
        ..., strict=True, description="Position came from a surface position report"
    )
    velocity: Optional[float] = Field(
        default=None, strict=True, description="Velocity over ground in m/s"
    )
    true_track: Optional[float] = Field(
        default=None,
        strict=True,
        description="True track in degrees clockwise from north",
    )
    vertical_rate: Optional[float] = Field(
        default=None, strict=True, description="Vertical rate in m/s, positive when climbing"
    )
    sensors: Optional[list[int]] = Field(
        default=None,
        strict=True,
        description="Receivers that contributed; null unless filtered by sensor",
    )
    geo_altitude: Optional[float] = Field(
        default=None, strict=True, description="Geometric altitude in meters"
    )
    squawk: Optional[str] = Field(
        default=None, strict=True, description="Transponder code"
    )
    spi: bool = Field(..., strict=True, description="Special purpose indicator")
    position_source: int = Field(
        ...,
        strict=True,
        description="0 = ADS-B, 1 = ASTERIX, 2 = MLAT, 3 = FLARM",
    )
    category: Optional[int] = Field(
        default=None, strict=True, description="Aircraft category (0-20)"
    )

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) not in (len(STATE_VECTOR_FIELDS) - 1, len(STATE_VECTOR_FIELDS)):
                raise ValueError(
                    f"expected {len(STATE_VECTOR_FIELDS) - 1} or "
                    f"{len(STATE_VECTOR_FIELDS)} elements, got {len(data)}"
                )
            return dict(zip(STATE_VECTOR_FIELDS, data))
        return data


class States(BaseModel):
    """Snapshot of state vectors valid at ``time``."""

    time: int = Field(..., strict=True, description="Unix time the vectors are associated with")
    states: list[StateVector] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("states", mode="before")
    @classmethod
    def _null_means_empty(cls, value: Any) -> Any:
        # OpenSky sends "states": null when nothing matches the filters
        return [] if value is None else value


__all__ = ["STATE_VECTOR_FIELDS", "StateVector", "States"]
