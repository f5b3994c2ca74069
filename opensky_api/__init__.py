"""Async client for the OpenSky Network REST API.

The OpenSky Network is a community-based receiver network which collects
air traffic surveillance data and makes it available to researchers and
developers. See https://openskynetwork.github.io/opensky-api/ for the API.

Example::

    api = OpenSkyApi()
    vectors = await api.get_states(time=1458564121, icao24="3c6444")
"""

from .client import OpenSkyApi
from .config import Settings, load_credentials, settings
from .errors import (
    DecodeError,
    HttpStatusError,
    OpenSkyError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from .models import BoundingBox, Credentials, Flight, FlightTrack, StateVector, States, Waypoint

__all__ = [
    "BoundingBox",
    "Credentials",
    "DecodeError",
    "Flight",
    "FlightTrack",
    "HttpStatusError",
    "OpenSkyApi",
    "OpenSkyError",
    "RateLimitError",
    "Settings",
    "StateVector",
    "States",
    "TransportError",
    "ValidationError",
    "Waypoint",
    "load_credentials",
    "settings",
]
