#!/usr/bin/env python
"""
Fetch live state vectors from OpenSky and print a few of them.

Usage (from repo root, credentials optional via OPENSKY_* env vars):
    python scripts/get_states.py --lat 50.0379 --lon 8.5622 --radius-nm 30
    python scripts/get_states.py --icao24 3c6444 --time 1458564121
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from opensky_api import BoundingBox, OpenSkyApi, OpenSkyError, settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print OpenSky state vectors")
    parser.add_argument("--time", type=int, help="Unix time of the snapshot (default: now)")
    parser.add_argument("--icao24", action="append", help="Filter by address (repeatable)")
    parser.add_argument("--lat", type=float, help="Center latitude of the search area")
    parser.add_argument("--lon", type=float, help="Center longitude of the search area")
    parser.add_argument("--radius-nm", type=float, default=25.0, help="Search radius in NM")
    parser.add_argument("--limit", type=int, default=10, help="Number of vectors to print")
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    api = OpenSkyApi.from_settings()

    bbox = None
    if args.lat is not None and args.lon is not None:
        bbox = BoundingBox.around(args.lat, args.lon, args.radius_nm)

    try:
        snapshot = await api.fetch_states(time=args.time, bounding_box=bbox, icao24=args.icao24)
    except OpenSkyError as exc:
        logging.error("Error: %s", exc)
        return 1

    logging.info("Received %s state vectors at %s", len(snapshot.states), snapshot.time)
    for idx, v in enumerate(snapshot.states[: args.limit], start=1):
        print(
            f"{idx}. icao24={v.icao24} callsign={(v.callsign or '').strip()!r} "
            f"country={v.origin_country} lat={v.latitude} lon={v.longitude} "
            f"alt_m={v.baro_altitude} gs_ms={v.velocity} trk={v.true_track} "
            f"on_ground={v.on_ground}"
        )
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    sys.exit(asyncio.run(main()))
