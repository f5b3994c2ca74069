#!/usr/bin/env python
"""
Fetch the flights of one aircraft over the last week.

Usage (from repo root; OPENSKY_USERNAME / OPENSKY_PASSWORD or OPENSKY_TOKEN
should be set, anonymous flight requests are heavily limited):
    python scripts/get_flights.py 8990ed
    python scripts/get_flights.py --arrivals EDDF --hours 2
"""

from __future__ import annotations

import argparse
import asyncio
from datetime import datetime, timedelta, timezone
import logging
import sys

from opensky_api import OpenSkyApi, OpenSkyError, settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print OpenSky flights")
    parser.add_argument("icao24", nargs="?", help="Aircraft address")
    parser.add_argument("--arrivals", metavar="AIRPORT", help="Arrivals at an airport")
    parser.add_argument("--departures", metavar="AIRPORT", help="Departures from an airport")
    parser.add_argument("--hours", type=float, default=7 * 24, help="Look-back window in hours")
    return parser


async def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    api = OpenSkyApi.from_settings()

    end = datetime.now(timezone.utc)
    begin = end - timedelta(hours=args.hours)
    logging.info("Requesting flights between %s and %s", begin.isoformat(), end.isoformat())

    try:
        if args.arrivals:
            flights = await api.get_arrivals_by_airport(args.arrivals, begin, end)
        elif args.departures:
            flights = await api.get_departures_by_airport(args.departures, begin, end)
        elif args.icao24:
            flights = await api.get_flights_by_aircraft(args.icao24, begin, end)
        else:
            parser.error("give an icao24 address, --arrivals or --departures")
    except OpenSkyError as exc:
        logging.error("Error: %s", exc)
        return 1

    logging.info("Got %s flights", len(flights))
    for flight in flights:
        print(
            f"{flight.icao24} {(flight.callsign or '').strip():8} "
            f"{flight.est_departure_airport or '????'} -> {flight.est_arrival_airport or '????'} "
            f"{datetime.fromtimestamp(flight.first_seen, tz=timezone.utc).isoformat()} .. "
            f"{datetime.fromtimestamp(flight.last_seen, tz=timezone.utc).isoformat()}"
        )
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    sys.exit(asyncio.run(main()))
