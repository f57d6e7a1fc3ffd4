"""Turn raw homeowner entries into one ``HomeOwner`` per person."""

from __future__ import annotations

from typing import Iterable

from homeowners.config import HEADER_TOKEN
from homeowners.person import HomeOwner
from homeowners.text_processing import split_entry, tokenize, trim_forename


def parse_fragment(fragment: str) -> HomeOwner:
    """Parse one person's worth of text: title first, surname last, the rest is the forename."""
    tokens = tokenize(fragment)
    title = tokens[0]
    surname = tokens[-1] if len(tokens) > 1 else None
    forename = " ".join(tokens[1:-1]) if len(tokens) > 2 else None
    return HomeOwner(title, trim_forename(forename), surname)


def backfill_surnames(group: list[HomeOwner]) -> list[HomeOwner]:
    """Give a surname-less person the surname of the person right after them.

    One left to right sweep over adjacent pairs, e.g. "Mr & Mrs Smith" hands
    "Smith" back to "Mr". The list is updated in place and returned.
    """
    for i in range(1, len(group)):
        if group[i].surname is not None and group[i - 1].surname is None:
            group[i - 1].surname = group[i].surname
    return group


def parse_entry(entry: str) -> list[HomeOwner]:
    group = [parse_fragment(fragment) for fragment in split_entry(entry)]
    return backfill_surnames(group)


def parse_all(raw_entries: Iterable[str]) -> list[HomeOwner]:
    homeowners: list[HomeOwner] = []
    for entry in raw_entries:
        if entry == HEADER_TOKEN:
            continue
        homeowners.extend(parse_entry(entry))
    return homeowners
