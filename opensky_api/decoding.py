"""Turn decoded JSON payloads into typed records."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from opensky_api.errors import DecodeError
from opensky_api.models import Flight, FlightTrack, States

logger = logging.getLogger("opensky_api.decoding")

_FLIGHTS_ADAPTER = TypeAdapter(list[Flight])


def _describe(exc: PydanticValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{exc.error_count()} invalid field(s), first at {location}: {first['msg']}"


def decode_states(payload: Any) -> States:
    """Decode a ``/states`` payload.

    One malformed row fails the whole payload; rows are never dropped.
    """

    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object for states, got {type(payload).__name__}")
    try:
        states = States.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodeError(f"State vector payload does not match schema: {_describe(exc)}") from exc

    logger.debug("Decoded %s state vectors at time %s", len(states.states), states.time)
    return states


def decode_flights(payload: Any) -> list[Flight]:
    """Decode a ``/flights`` payload (a JSON array of flight objects)."""

    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of flights, got {type(payload).__name__}")
    try:
        flights = _FLIGHTS_ADAPTER.validate_python(payload)
    except PydanticValidationError as exc:
        raise DecodeError(f"Flight payload does not match schema: {_describe(exc)}") from exc

    logger.debug("Decoded %s flights", len(flights))
    return flights


def decode_track(payload: Any) -> FlightTrack:
    """Decode a ``/tracks`` payload."""

    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object for a track, got {type(payload).__name__}")
    try:
        track = FlightTrack.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodeError(f"Track payload does not match schema: {_describe(exc)}") from exc

    logger.debug("Decoded track for %s with %s waypoints", track.icao24, len(track.path))
    return track


__all__ = ["decode_flights", "decode_states", "decode_track"]
