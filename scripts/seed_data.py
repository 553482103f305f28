#!/usr/bin/env python3
"""
Fill a collection file with sample records so the mock server has data to page through.

Usage:
  python scripts/seed_data.py cars [--count 25] [--append]
  python scripts/seed_data.py bookings --count 5
"""
from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Dict, List

from mockapi.core.config import get_settings
from mockapi.repositories.json_storage import JsonCollectionStore, Record
from mockapi.resources import RESOURCES

MAKES = {
    "Toyota": ["Corolla", "Camry", "RAV4"],
    "Honda": ["Civic", "Accord", "CR-V"],
    "Ford": ["Focus", "Mustang", "Explorer"],
    "Tesla": ["Model 3", "Model Y"],
}


def sample_car(n: int, rng: random.Random) -> Record:
    make = rng.choice(sorted(MAKES))
    return {
        "id": str(n),
        "make": make,
        "model": rng.choice(MAKES[make]),
        "year": rng.randint(2012, 2024),
        "pricePerDay": rng.randint(30, 150),
        "available": rng.random() > 0.2,
    }


def sample_booking(n: int, rng: random.Random) -> Record:
    day = rng.randint(1, 25)
    return {
        "id": str(n),
        "carId": str(rng.randint(1, 25)),
        "customerName": rng.choice(["Ana", "Bruno", "Carla", "Diego", "Eva"]),
        "startDate": f"2024-06-{day:02d}",
        "endDate": f"2024-06-{day + rng.randint(1, 5):02d}",
    }


GENERATORS: Dict[str, Callable[[int, random.Random], Record]] = {
    "cars": sample_car,
    "bookings": sample_booking,
}


def next_numeric_id(records: List[Record]) -> int:
    """One past the largest all-digit id stored, so appended ids never repeat."""
    ids = (int(r["id"]) for r in records if isinstance(r, dict) and str(r.get("id", "")).isdecimal())
    return max(ids, default=0) + 1


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed a mock collection file")
    ap.add_argument("collection", choices=[r.name for r in RESOURCES])
    ap.add_argument("--count", type=int, default=25, help="Records to generate (default: 25)")
    ap.add_argument("--append", action="store_true", help="Keep existing records")
    ap.add_argument("--seed", type=int, default=42, help="Random seed")
    args = ap.parse_args()

    if args.count < 0:
        raise SystemExit("--count must be >= 0")
    resource = next(r for r in RESOURCES if r.name == args.collection)
    store = JsonCollectionStore(resource.data_file(get_settings()), strict=True)
    records: List[Record] = store.load() if args.append and store.path.exists() else []

    rng = random.Random(args.seed)
    start = next_numeric_id(records)
    generate = GENERATORS[resource.name]
    records.extend(generate(n, rng) for n in range(start, start + args.count))
    store.save(records)
    print(f"OK: {args.count} record(s) written to {store.path} ({len(records)} total)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
