"""Models for flights returned by the ``/flights`` endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Flight(BaseModel):
    """A flight between two (estimated) airports."""

    icao24: str = Field(..., strict=True, description="ICAO 24-bit transponder address")
    first_seen: int = Field(
        ..., alias="firstSeen", strict=True, description="Estimated departure time (Unix)"
    )
    est_departure_airport: Optional[str] = Field(
        default=None,
        alias="estDepartureAirport",
        strict=True,
        description="ICAO code of the estimated departure airport",
    )
    last_seen: int = Field(
        ..., alias="lastSeen", strict=True, description="Estimated arrival time (Unix)"
    )
    est_arrival_airport: Optional[str] = Field(
        default=None,
        alias="estArrivalAirport",
        strict=True,
        description="ICAO code of the estimated arrival airport",
    )
    callsign: Optional[str] = Field(
        default=None, strict=True, description="Most frequently seen callsign"
    )
    est_departure_airport_horiz_distance: Optional[int] = Field(
        default=None, alias="estDepartureAirportHorizDistance", strict=True
    )
    est_departure_airport_vert_distance: Optional[int] = Field(
        default=None, alias="estDepartureAirportVertDistance", strict=True
    )
    est_arrival_airport_horiz_distance: Optional[int] = Field(
        default=None, alias="estArrivalAirportHorizDistance", strict=True
    )
    est_arrival_airport_vert_distance: Optional[int] = Field(
        default=None, alias="estArrivalAirportVertDistance", strict=True
    )
    departure_airport_candidates_count: int = Field(
        default=0, alias="departureAirportCandidatesCount", strict=True
    )
    arrival_airport_candidates_count: int = Field(
        default=0, alias="arrivalAirportCandidatesCount", strict=True
    )

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


__all__ = ["Flight"]
