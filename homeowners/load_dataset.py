import os
import pandas as pd
from pathlib import Path
from homeowners.config import RAW_CSV_PATH

def load_homeowner_entries(path: str | os.PathLike = None, column: int = 0) -> list[str]:

    csv_path = Path(str(path)) if path else RAW_CSV_PATH

    if not csv_path.exists():
        raise FileNotFoundError(f"Homeowner CSV not found at: {csv_path}")

    # the first row fixes the width; longer rows (unquoted commas) are cut back to it
    width = pd.read_csv(csv_path, header=None, dtype=str, nrows=1).shape[1]

    if column >= width:
        raise ValueError(f"Column {column} out of range for {csv_path} ({width} columns).")

    # keep every cell as text, header row included; the parser drops it
    df = pd.read_csv(
        csv_path,
        header=None,
        dtype=str,
        keep_default_na=False,
        engine="python",
        on_bad_lines=lambda fields: fields[:width],
    )

    entries = df.iloc[:, column].fillna("").tolist()
    print(f"[load_dataset] loaded {len(entries)} entries from {csv_path}")
    return entries


if __name__ == "__main__":
    entries = load_homeowner_entries(RAW_CSV_PATH)
    print(entries[:5])
