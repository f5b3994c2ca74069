import logging

import httpx
import pytest

from opensky_api import DecodeError, HttpStatusError, OpenSkyApi, ValidationError

FLIGHT = {
    "icao24": "0101be",
    "firstSeen": 1517220729,
    "estDepartureAirport": None,
    "lastSeen": 1517230737,
    "estArrivalAirport": "EDDF",
    "callsign": "MSR785  ",
    "estDepartureAirportHorizDistance": None,
    "estDepartureAirportVertDistance": None,
    "estArrivalAirportHorizDistance": 1593,
    "estArrivalAirportVertDistance": 523,
    "departureAirportCandidatesCount": 0,
    "arrivalAirportCandidatesCount": 2,
}


def make_api(handler) -> OpenSkyApi:
    return OpenSkyApi(base_url="https://example.test/api", transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_get_flights_decodes_camel_case_fields():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request):
        captured.append(request)
        return httpx.Response(200, json=[FLIGHT])

    flights = await make_api(handler).get_flights(1517227200, 1517230800)

    assert captured[0].url.path == "/api/flights/all"
    assert captured[0].url.params["begin"] == "1517227200"
    assert captured[0].url.params["end"] == "1517230800"

    flight = flights[0]
    assert flight.icao24 == "0101be"
    assert flight.first_seen == 1517220729
    assert flight.est_departure_airport is None
    assert flight.est_arrival_airport == "EDDF"
    assert flight.callsign == "MSR785  "
    assert flight.est_arrival_airport_horiz_distance == 1593
    assert flight.est_arrival_airport_vert_distance == 523
    assert flight.arrival_airport_candidates_count == 2


@pytest.mark.anyio
async def test_filtered_flight_endpoints_send_their_filter():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request):
        captured.append(request)
        return httpx.Response(200, json=[])

    api = make_api(handler)
    await api.get_flights_by_aircraft("3C675A", 1517184000, 1517270400)
    await api.get_arrivals_by_airport("eddf", 1517227200, 1517230800)
    await api.get_departures_by_airport("EDDF", 1517227200, 1517230800)

    assert captured[0].url.path == "/api/flights/aircraft"
    assert captured[0].url.params["icao24"] == "3c675a"
    assert captured[1].url.path == "/api/flights/arrival"
    assert captured[1].url.params["airport"] == "EDDF"
    assert captured[2].url.path == "/api/flights/departure"
    assert captured[2].url.params["airport"] == "EDDF"


@pytest.mark.anyio
async def test_not_found_means_no_flights():
    def handler(request: httpx.Request):
        return httpx.Response(404, text="[]")

    assert await make_api(handler).get_arrivals_by_airport("EDDF", 1, 3600) == []


@pytest.mark.anyio
async def test_other_errors_are_raised():
    def handler(request: httpx.Request):
        return httpx.Response(400, text="interval too large")

    with pytest.raises(HttpStatusError) as excinfo:
        await make_api(handler).get_flights(1, 3600)

    assert excinfo.value.status_code == 400


@pytest.mark.anyio
async def test_invalid_interval_or_airport_is_rejected_before_request():
    calls = []

    def handler(request: httpx.Request):
        calls.append(request)
        return httpx.Response(200, json=[])

    api = make_api(handler)
    with pytest.raises(ValidationError):
        await api.get_flights(3600, 3600)
    with pytest.raises(ValidationError):
        await api.get_departures_by_airport("FRANKFURT", 1, 3600)
    with pytest.raises(ValidationError):
        await api.get_flights_by_aircraft("not-hex", 1, 3600)

    assert calls == []


@pytest.mark.anyio
async def test_interval_over_limit_warns_but_is_sent(caplog):
    calls = []

    def handler(request: httpx.Request):
        calls.append(request)
        return httpx.Response(200, json=[])

    with caplog.at_level(logging.WARNING, logger="opensky_api.client"):
        await make_api(handler).get_flights(0, 3 * 60 * 60)

    assert len(calls) == 1
    assert "larger than the all flights limit" in caplog.text


@pytest.mark.anyio
async def test_malformed_flight_fails_decode():
    broken = dict(FLIGHT)
    del broken["firstSeen"]

    def handler(request: httpx.Request):
        return httpx.Response(200, json=[FLIGHT, broken])

    with pytest.raises(DecodeError):
        await make_api(handler).get_flights(1, 3600)
