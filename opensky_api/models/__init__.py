"""Pydantic models for OpenSky API records."""

from .bounding_box import BoundingBox
from .credentials import Credentials
from .flights import Flight
from .states import STATE_VECTOR_FIELDS, StateVector, States
from .tracks import FlightTrack, Waypoint

__all__ = [
    "BoundingBox",
    "Credentials",
    "Flight",
    "FlightTrack",
    "STATE_VECTOR_FIELDS",
    "StateVector",
    "States",
    "Waypoint",
]
