#!/usr/bin/env python
"""
Fetch the live (or historical) track of an aircraft.

Usage (from repo root):
    python scripts/get_tracks.py 3c4b26
    python scripts/get_tracks.py 3c4b26 --time 1689750000
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from opensky_api import OpenSkyApi, OpenSkyError, settings


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print an OpenSky flight track")
    parser.add_argument("icao24", help="Aircraft address")
    parser.add_argument("--time", type=int, default=0, help="Unix time within the flight (0 = live)")
    args = parser.parse_args(argv)

    api = OpenSkyApi.from_settings()
    try:
        track = await api.get_track_by_aircraft(args.icao24, time=args.time)
    except OpenSkyError as exc:
        logging.error("Error: %s", exc)
        return 1

    logging.info(
        "Track for %s (%s): %s waypoints",
        track.icao24,
        (track.callsign or "").strip() or "no callsign",
        len(track.path),
    )
    for point in track.path:
        print(
            f"{point.time} lat={point.latitude} lon={point.longitude} "
            f"alt_m={point.baro_altitude} trk={point.true_track} on_ground={point.on_ground}"
        )
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    sys.exit(asyncio.run(main()))
