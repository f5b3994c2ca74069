"""Async client for the OpenSky Network REST API."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import re
from typing import Any, Iterable, Optional, Union

import httpx

from opensky_api.config import Settings, load_credentials, settings
from opensky_api.decoding import decode_flights, decode_states, decode_track
from opensky_api.errors import (
    DecodeError,
    HttpStatusError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from opensky_api.models import BoundingBox, Credentials, Flight, FlightTrack, StateVector, States

logger = logging.getLogger("opensky_api.client")

Timestamp = Union[int, datetime]
QueryParams = list[tuple[str, Union[str, int, float]]]

# Longest interval, in seconds, each flights endpoint answers for
FLIGHT_INTERVAL_LIMITS = {
    "all": 2 * 60 * 60,
    "aircraft": 30 * 24 * 60 * 60,
    "arrival": 7 * 24 * 60 * 60,
    "departure": 7 * 24 * 60 * 60,
}
TRACK_HISTORY_LIMIT = 30 * 24 * 60 * 60

RATE_LIMIT_REMAINING_HEADER = "X-Rate-Limit-Remaining"
RATE_LIMIT_RETRY_AFTER_HEADER = "X-Rate-Limit-Retry-After-Seconds"

_ICAO24_RE = re.compile(r"^[0-9a-f]{6}$")
_AIRPORT_RE = re.compile(r"^[A-Z0-9]{4}$")


def _to_timestamp(value: Any, name: str) -> int:
    """Convert an epoch-seconds int or a datetime to epoch seconds."""

    if isinstance(value, datetime):
        if value.tzinfo is None:
            # Naive datetimes are taken as UTC
            value = value.replace(tzinfo=timezone.utc)
        value = int(value.timestamp())
    elif isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be Unix seconds or a datetime, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must not be negative, got {value}")
    return value


def _normalize_address(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"ICAO24 address must be a string, got {value!r}")
    address = value.strip().lower()
    if not _ICAO24_RE.match(address):
        raise ValidationError(f"Invalid ICAO24 address {value!r}; expected 6 hex digits")
    return address


def _normalize_addresses(value: Union[str, Iterable[str], None]) -> list[str]:
    """Lowercase, validate and de-duplicate addresses, keeping their order."""

    if value is None:
        return []
    values = [value] if isinstance(value, str) else list(value)
    if not values:
        raise ValidationError("ICAO24 filter is empty; pass None to request all aircraft")

    addresses: list[str] = []
    for raw in values:
        address = _normalize_address(raw)
        if address not in addresses:
            addresses.append(address)
    return addresses


def _normalize_airport(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"Airport must be an ICAO code string, got {value!r}")
    airport = value.strip().upper()
    if not _AIRPORT_RE.match(airport):
        raise ValidationError(f"Invalid airport ICAO code {value!r}; expected 4 characters")
    return airport


def _normalize_serials(value: Optional[Iterable[int]]) -> list[int]:
    if value is None:
        return []
    serials: list[int] = []
    for serial in value:
        if isinstance(serial, bool) or not isinstance(serial, int) or serial < 0:
            raise ValidationError(f"Receiver serial must be a non-negative int, got {serial!r}")
        if serial not in serials:
            serials.append(serial)
    return serials


def _parse_retry_after(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


class OpenSkyApi:
    """Client for the OpenSky Network API <https://openskynetwork.github.io/opensky-api>.

    Every method sends exactly one GET request and raises an
    :class:`~opensky_api.errors.OpenSkyError` subclass on failure. Nothing is
    retried. Pass ``http_client`` to reuse a connection pool you own;
    otherwise each call opens and closes its own client.
    """

    def __init__(
        self,
        *,
        credentials: Credentials | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.credentials = credentials
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout or settings.timeout
        self.transport = transport
        self.http_client = http_client

    @classmethod
    def from_settings(cls, config: Settings | None = None, **kwargs: Any) -> "OpenSkyApi":
        """Build a client from environment-driven settings."""

        config = config or settings
        return cls(
            credentials=load_credentials(config),
            base_url=config.base_url,
            timeout=config.timeout,
            **kwargs,
        )

    # ----- States -----

    async def get_states(
        self,
        time: Timestamp | None = None,
        bounding_box: BoundingBox | None = None,
        icao24: Union[str, Iterable[str], None] = None,
        extended: bool = False,
    ) -> list[StateVector]:
        """Return the state vectors at ``time`` (now when omitted).

        ``bounding_box`` limits the area; ``icao24`` is one address or a
        collection of addresses to filter by. ``extended`` asks OpenSky to
        include the aircraft category.
        """

        snapshot = await self.fetch_states(
            time=time, bounding_box=bounding_box, icao24=icao24, extended=extended
        )
        return list(snapshot.states)

    async def fetch_states(
        self,
        time: Timestamp | None = None,
        bounding_box: BoundingBox | None = None,
        icao24: Union[str, Iterable[str], None] = None,
        extended: bool = False,
    ) -> States:
        """Like :meth:`get_states` but keeps the snapshot time from the response."""

        params: QueryParams = []
        if time is not None:
            params.append(("time", _to_timestamp(time, "time")))
        if bounding_box is not None:
            if not isinstance(bounding_box, BoundingBox):
                raise ValidationError(
                    f"bounding_box must be a BoundingBox, got {type(bounding_box).__name__}"
                )
            params.extend(bounding_box.to_params().items())
        params.extend(("icao24", address) for address in _normalize_addresses(icao24))
        if extended:
            params.append(("extended", 1))

        payload = await self._get_json("states/all", params)
        return decode_states(payload)

    async def get_own_states(
        self,
        time: Timestamp | None = None,
        icao24: Union[str, Iterable[str], None] = None,
        serials: Optional[Iterable[int]] = None,
    ) -> States:
        """Return state vectors seen by your own receivers.

        Requires credentials. ``serials`` restricts the result to the given
        receivers, which must be registered to the account.
        """

        if self.credentials is None:
            raise ValidationError("Own states require credentials")

        params: QueryParams = []
        if time is not None:
            params.append(("time", _to_timestamp(time, "time")))
        params.extend(("icao24", address) for address in _normalize_addresses(icao24))
        params.extend(("serials", serial) for serial in _normalize_serials(serials))

        payload = await self._get_json("states/own", params)
        return decode_states(payload)

    # ----- Flights -----

    async def get_flights(self, begin: Timestamp, end: Timestamp) -> list[Flight]:
        """All flights within ``[begin, end]``. The interval may span at most 2 hours."""

        return await self._get_flights("all", begin, end)

    async def get_flights_by_aircraft(
        self, icao24: str, begin: Timestamp, end: Timestamp
    ) -> list[Flight]:
        """Flights of one aircraft. The interval may span at most 30 days."""

        return await self._get_flights("aircraft", begin, end, [("icao24", _normalize_address(icao24))])

    async def get_arrivals_by_airport(
        self, airport: str, begin: Timestamp, end: Timestamp
    ) -> list[Flight]:
        """Flights that arrived at ``airport`` (ICAO code). At most 7 days."""

        return await self._get_flights("arrival", begin, end, [("airport", _normalize_airport(airport))])

    async def get_departures_by_airport(
        self, airport: str, begin: Timestamp, end: Timestamp
    ) -> list[Flight]:
        """Flights that departed from ``airport`` (ICAO code). At most 7 days."""

        return await self._get_flights("departure", begin, end, [("airport", _normalize_airport(airport))])

    async def _get_flights(
        self,
        endpoint: str,
        begin: Timestamp,
        end: Timestamp,
        extra: QueryParams | None = None,
    ) -> list[Flight]:
        begin_ts = _to_timestamp(begin, "begin")
        end_ts = _to_timestamp(end, "end")
        if end_ts <= begin_ts:
            raise ValidationError(f"end ({end_ts}) must be greater than begin ({begin_ts})")

        interval = end_ts - begin_ts
        limit = FLIGHT_INTERVAL_LIMITS[endpoint]
        if interval > limit:
            logger.warning(
                "Interval (%s secs) is larger than the %s flights limit (%s secs)",
                interval,
                endpoint,
                limit,
            )

        params: QueryParams = [("begin", begin_ts), ("end", end_ts)]
        params.extend(extra or [])

        payload = await self._get_json(f"flights/{endpoint}", params, not_found_is_empty=True)
        if payload is None:
            logger.debug("No %s flights found between %s and %s", endpoint, begin_ts, end_ts)
            return []
        return decode_flights(payload)

    # ----- Tracks -----

    async def get_track_by_aircraft(self, icao24: str, time: Timestamp = 0) -> FlightTrack:
        """Trajectory of an aircraft at ``time``; ``0`` requests the live track.

        Waypoints are a sample of the state vectors, not every observation.
        """

        address = _normalize_address(icao24)
        timestamp = _to_timestamp(time, "time")
        if timestamp != 0:
            age = int(datetime.now(timezone.utc).timestamp()) - timestamp
            if age > TRACK_HISTORY_LIMIT:
                logger.warning(
                    "Track time is %s secs old, beyond the %s secs OpenSky keeps tracks for",
                    age,
                    TRACK_HISTORY_LIMIT,
                )

        payload = await self._get_json("tracks/all", [("icao24", address), ("time", timestamp)])
        return decode_track(payload)

    # ----- HTTP -----

    def _auth_kwargs(self) -> dict[str, Any]:
        if self.credentials is None:
            return {}
        if self.credentials.token is not None:
            return {"headers": {"Authorization": f"Bearer {self.credentials.token.get_secret_value()}"}}
        return {
            "auth": httpx.BasicAuth(
                self.credentials.username, self.credentials.password.get_secret_value()
            )
        }

    async def _send(self, url: str, params: QueryParams) -> httpx.Response:
        kwargs = self._auth_kwargs()
        if self.http_client is not None:
            return await self.http_client.get(url, params=params, timeout=self.timeout, **kwargs)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            return await client.get(url, params=params, **kwargs)

    async def _get_json(
        self, path: str, params: QueryParams, *, not_found_is_empty: bool = False
    ) -> Any:
        """Send one GET and return the decoded JSON body.

        Returns ``None`` for a 404 when ``not_found_is_empty`` is set.
        """

        url = f"{self.base_url}/{path}"
        logger.debug("GET %s params=%s", url, params)

        try:
            response = await self._send(url, params)
        except httpx.TimeoutException as exc:
            raise TransportError(f"OpenSky request timed out: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"OpenSky request failed: {exc}") from exc

        remaining = response.headers.get(RATE_LIMIT_REMAINING_HEADER)
        if remaining is not None:
            logger.debug("OpenSky rate limit credits remaining: %s", remaining)

        if response.status_code == 404 and not_found_is_empty:
            return None
        if response.status_code == 429:
            raise RateLimitError(
                body=response.text,
                url=str(response.url),
                retry_after=_parse_retry_after(response.headers.get(RATE_LIMIT_RETRY_AFTER_HEADER)),
            )
        if response.status_code != 200:
            raise HttpStatusError(response.status_code, body=response.text, url=str(response.url))

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"Failed to parse OpenSky JSON response: {exc}") from exc


__all__ = [
    "FLIGHT_INTERVAL_LIMITS",
    "OpenSkyApi",
    "TRACK_HISTORY_LIMIT",
]
