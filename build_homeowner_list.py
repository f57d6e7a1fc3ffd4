# build_homeowner_list.py

from __future__ import annotations

from homeowners.config import PROCESSED_CSV, PROCESSED_PARQUET, RAW_CSV_PATH
from homeowners.data.ingest import ingest


def main() -> None:
    df = ingest(RAW_CSV_PATH, PROCESSED_PARQUET)
    df.to_csv(PROCESSED_CSV, index=False)

    missing_surname = int(df["surname"].isna().sum())
    print(f"[build_homeowner_list] saved canonical parquet to {PROCESSED_PARQUET}")
    print(f"[build_homeowner_list] saved CSV fallback to {PROCESSED_CSV}")
    print(f"[build_homeowner_list] homeowners without a surname: {missing_surname}")
    print(f"[build_homeowner_list] final shape: {df.shape}")


if __name__ == "__main__":
    main()
