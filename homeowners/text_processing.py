import regex as re

from homeowners.config import (
    ENTRY_DELIMITERS,
    FORENAME_TRIM_CHARS,
    WHITESPACE_TRIM_CHARS,
)

# literal, case-sensitive alternation; "and" matches inside words too
ENTRY_DELIMITER_PATTERN = re.compile("|".join(re.escape(d) for d in ENTRY_DELIMITERS))

def split_entry(entry: str) -> list[str]:
    if not isinstance(entry, str):
        return [""]
    return ENTRY_DELIMITER_PATTERN.split(entry)

def trim_whitespace(text: str) -> str:
    return text.strip(WHITESPACE_TRIM_CHARS)

def tokenize(fragment: str) -> list[str]:
    # "".split(" ") == [""], consecutive spaces leave empty tokens
    return trim_whitespace(fragment).split(" ")

def trim_forename(text: str | None) -> str | None:
    if text is None:
        return None
    return text.strip(FORENAME_TRIM_CHARS)

if __name__ == "__main__":
    for sample in ("Mr & Mrs Smith", "Dr P Gunn", "Mr and Mrs J. Doe"):
        print(f"[text_processing] {sample!r} -> {[tokenize(f) for f in split_entry(sample)]}")
