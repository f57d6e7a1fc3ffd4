from homeowners.load_dataset import load_homeowner_entries
from homeowners.config import RAW_CSV_PATH
from homeowners.parser import parse_all

def main():
    print("[info] checking setup...")
    print(f"[info] expecting CSV at: {RAW_CSV_PATH}")

    try:
        entries = load_homeowner_entries()
        people = parse_all(entries)
        print(f"[success] parsed {len(people)} homeowners.")
        for person in people[:3]:
            print(f"  {person}")
    except FileNotFoundError as e:
        print("[fail]", e)
        print("---> Put your file at that exact path or update homeowners/config.py <---")

if __name__ == "__main__":
    main()
