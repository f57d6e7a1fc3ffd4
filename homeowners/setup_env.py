import sys

def check_versions():
    print("[info] Python version:", sys.version)

    try:
        import pandas as pd
        print("[ok] pandas", pd.__version__)
    except ImportError:
        print("[error] pandas not installed")

    try:
        import regex
        print("[ok] regex", regex.__version__)
    except ImportError:
        print("[error] regex not installed")

    try:
        import pyarrow
        print("[ok] pyarrow", pyarrow.__version__)
    except ImportError:
        print("[warn] pyarrow not installed (needed for parquet output)")

if __name__ == "__main__":
    check_versions()
