"""The per-person record produced by the name parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class HomeOwner:
    """One homeowner parsed out of a raw entry.

    ``initial`` is taken from the forename as supplied, before a single
    letter forename is dropped, and cannot be reassigned afterwards.
    """

    title: str | None = None
    forename: str | None = None
    surname: str | None = None
    _initial: str | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.forename:
            self._initial = self.forename[0]
        if self.forename is not None and len(self.forename) <= 1:
            # a lone letter is an initial, not a name
            self.forename = None

    @property
    def initial(self) -> str | None:
        return self._initial

    def __str__(self) -> str:
        forename_or_initial = self.forename or self._initial or ""
        return f"{self.title or ''} {forename_or_initial} {self.surname or ''}"

    def to_record(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "forename": self.forename,
            "initial": self._initial,
            "surname": self.surname,
            "display": str(self),
        }
