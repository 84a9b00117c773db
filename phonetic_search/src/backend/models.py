# backend/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .normalize import normalize


@dataclass(frozen=True, slots=True)
class Entry:
    original: str    # name exactly as supplied
    canonical: str   # normalized key, computed once

    @classmethod
    def from_raw(cls, raw: str) -> "Entry":
        return cls(original=raw, canonical=normalize(raw))


@dataclass(frozen=True, slots=True)
class Library:
    entries: Tuple[Entry, ...]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class SearchResult:
    term: str
    matches: Tuple[str, ...]
    error: str | None = None   # set when the term itself could not be normalized

    def to_dict(self) -> dict:
        out = {"term": self.term, "matches": list(self.matches)}
        if self.error is not None:
            out["error"] = self.error
        return out
