from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
PROCESSED_DATA_DIR = DATA_DIR / "processed"

RAW_CSV_PATH = RAW_DATA_DIR / "HomeOwnerList.csv"
PROCESSED_PARQUET = PROCESSED_DATA_DIR / "homeowners_v1.parquet"
PROCESSED_CSV = PROCESSED_DATA_DIR / "homeowners_v1.csv"

# first cell of the source column, not a data row
HEADER_TOKEN = "homeowner"

ENTRY_DELIMITERS = ("and", "&", "+")

WHITESPACE_TRIM_CHARS = " \t\n\r\0\x0b"
FORENAME_TRIM_CHARS = ".," + WHITESPACE_TRIM_CHARS
