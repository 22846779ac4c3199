#!/usr/bin/env python3
"""
Load vPIC reference data (makes, models, model years) into SQLite.

Usage:
    python import_vpic_reference.py --file data/vpic_reference.csv
    python import_vpic_reference.py --make-id 460 --make-id 474 --from-year 2015 --to-year 2024
"""

import argparse
import asyncio
import csv
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from app.db import add_model_year, close_db, get_db, upsert_make, upsert_model
from app.repositories.nhtsa import NhtsaVpicClient


async def import_row(year: int, make_id: int, make: str, model_id: int, model: str) -> bool:
    """Store one (year, make, model) triple. Returns True if the model year was new."""
    await upsert_make(make_id, make)
    await upsert_model(model_id, make_id, model)
    return await add_model_year(model_id, year)


async def run_csv(filepath: str) -> int:
    path = Path(filepath)
    if not path.exists():
        print(f"Error: file not found: {path}")
        return 0
    await get_db()
    count = 0
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            year = int(row["year"])
            make_id = int(row["make_id"])
            model_id = int(row["model_id"])
            make = row["make"].strip()
            model = row["model"].strip()
            if await import_row(year, make_id, make, model_id, model):
                count += 1
                print(f"  + {year} {make} {model} (model_id={model_id})")
            else:
                print(f"  skip (exists) {year} {make} {model}")
    return count


async def run_api(make_ids: list[int], from_year: int, to_year: int) -> int:
    client = NhtsaVpicClient()
    await get_db()
    count = 0
    for make_id in make_ids:
        for year in range(from_year, to_year + 1):
            results = await client.get_models_for_make_id_year(make_id, year)
            for r in results:
                if await import_row(year, int(r["Make_ID"]), r["Make_Name"], int(r["Model_ID"]), r["Model_Name"]):
                    count += 1
            print(f"  make_id={make_id} {year}: {len(results)} models")
    return count


async def run(args: argparse.Namespace) -> int:
    try:
        if args.file:
            return await run_csv(args.file)
        return await run_api(args.make_id, args.from_year, args.to_year)
    finally:
        await close_db()


def main():
    parser = argparse.ArgumentParser(description="Import vPIC makes/models/years")
    parser.add_argument("--file", help="Path to CSV (year, make_id, make, model_id, model)")
    parser.add_argument("--make-id", type=int, action="append", default=[], help="vPIC make id to fetch (repeatable)")
    parser.add_argument("--from-year", type=int, help="First model year to fetch")
    parser.add_argument("--to-year", type=int, help="Last model year to fetch (default: --from-year)")
    args = parser.parse_args()

    if not args.file:
        if not args.make_id or args.from_year is None:
            parser.error("either --file or --make-id with --from-year is required")
        if args.to_year is None:
            args.to_year = args.from_year

    n = asyncio.run(run(args))
    print(f"Imported {n} model years.")


if __name__ == "__main__":
    main()
