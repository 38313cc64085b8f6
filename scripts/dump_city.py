#!/usr/bin/env python3
"""Dump what the glasscast library can fetch for one city.

This script logs in (or reuses a stored token), resolves a city by name,
loads its weather and forecast through the sync engine, optionally marks
it as a favorite, and prints the resulting engine state.

Usage
-----
Set environment variables and run::

    export GLASSCAST_EMAIL="you@example.com"
    export GLASSCAST_PASSWORD="your-password"
    python scripts/dump_city.py Paris

Options::

    --favorite           Also add the city to the favorites
    --refresh            Refresh every favorite afterwards
    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from glasscast import GlasscastClient, GlasscastConfig, GlasscastError  # noqa: E402
from glasscast.models.city import CityRecord  # noqa: E402


def _section(title: str) -> str:
    return f"\n{'=' * 60}\n  {title}\n{'=' * 60}"


def _describe(record: CityRecord, out: list[str]) -> None:
    out.append(f"  {record.name} (id={record.id}, favorite={record.is_favorite})")
    out.append(f"    updated : {record.last_updated.isoformat()}")
    if record.weather is not None:
        temp = record.weather.temperature
        out.append(f"    now     : {temp.temp:.1f} K, {record.weather.detailed_status}")
        out.append(f"    range   : {temp.temp_min:.1f} .. {temp.temp_max:.1f} K (feels {temp.feels_like:.1f} K)")
    out.append(f"    forecast: {len(record.forecast or [])} step(s)")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Dump weather data glasscast fetches for one city.")
    parser.add_argument("city", help="Free-text city name to search for")
    parser.add_argument("--favorite", action="store_true", help="Also add the city to the favorites")
    parser.add_argument("--refresh", action="store_true", help="Refresh every favorite afterwards")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = GlasscastConfig.from_env()
    email = os.environ.get("GLASSCAST_EMAIL", "")
    password = os.environ.get("GLASSCAST_PASSWORD", "")

    async with GlasscastClient(config) as client:
        try:
            if not client.auth.is_authenticated:
                if not email or not password:
                    print("Set GLASSCAST_EMAIL and GLASSCAST_PASSWORD (or GLASSCAST_CREDENTIAL_PATH)", file=sys.stderr)
                    return 2
                await client.login(email, password)

            record = await client.search_city(args.city)
            if args.favorite and record is not None:
                await client.add_favorite(record.id, record.name)
            failures: dict[int, str] = {}
            if args.refresh:
                failures = {city_id: str(exc) for city_id, exc in (await client.refresh_favorites()).items()}
        except GlasscastError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

        state = client.state

    if args.json_mode or args.output:
        result: dict[str, Any] = state.model_dump(mode="json")
        result["refresh_failures"] = failures
        payload = json.dumps(result, indent=2, ensure_ascii=False)
        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"JSON written to {args.output}", file=sys.stderr)
        else:
            print(payload)
        return 0

    out: list[str] = [_section("CURRENT CITY")]
    if state.current_city is not None:
        _describe(state.current_city, out)
    else:
        out.append("  (none)")
    out.append(_section("FAVORITES"))
    for city in state.favorite_cities:
        _describe(city, out)
    for city_id, message in failures.items():
        out.append(f"  refresh failed for {city_id}: {message}")
    print("\n".join(out))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
