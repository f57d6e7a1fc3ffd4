"""Parse the homeowner CSV column into one row per person."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import pandas as pd

from homeowners.config import RAW_CSV_PATH
from homeowners.load_dataset import load_homeowner_entries
from homeowners.parser import parse_all
from homeowners.person import HomeOwner

TARGET_COLUMNS = ("title", "forename", "initial", "surname", "display")


def homeowners_to_frame(people: Sequence[HomeOwner]) -> pd.DataFrame:
    return pd.DataFrame([p.to_record() for p in people], columns=TARGET_COLUMNS)


def _write_frame(df: pd.DataFrame, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix == ".parquet":
        df.to_parquet(output_path, index=False)
    else:
        df.to_csv(output_path, index=False)


def ingest(input_path: Path, output_path: Path | None = None, column: int = 0) -> pd.DataFrame:
    entries = load_homeowner_entries(input_path, column=column)
    people = parse_all(entries)
    df = homeowners_to_frame(people)
    if output_path is not None:
        _write_frame(df, output_path)
    return df


def _print_homeowners(df: pd.DataFrame) -> None:
    print("[ingest] homeowners:")
    for idx, row in enumerate(df.to_dict(orient="records")):
        print(
            f"  [{idx}] '{row['display']}' title={row['title']} "
            f"forename={row['forename']} initial={row['initial']} surname={row['surname']}"
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split homeowner name entries into people.")
    parser.add_argument(
        "--in",
        dest="input_path",
        default=str(RAW_CSV_PATH),
        help="Path to the homeowner CSV",
    )
    parser.add_argument(
        "--out",
        dest="output_path",
        default=None,
        help="Optional destination (.csv or .parquet)",
    )
    parser.add_argument(
        "--column",
        type=int,
        default=0,
        help="Zero-based index of the name column",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    input_path = Path(args.input_path)
    output_path = Path(args.output_path) if args.output_path else None
    print(f"[ingest] loading homeowner entries from {input_path}")
    df = ingest(input_path, output_path, column=args.column)
    if output_path is not None:
        print(f"[ingest] saved {len(df)} homeowners -> {output_path}")
    if not df.empty:
        _print_homeowners(df)
    print(f"[ingest] parsed {len(df)} homeowners")


if __name__ == "__main__":
    main()
