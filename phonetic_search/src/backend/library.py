# backend/library.py
"""
Library index: normalize reference names once, answer many queries.

    lib = build(["Jones", "Jonas", "Smith"])
    query(lib, "Johns")   # -> ["Jones", "Jonas"]
"""
from __future__ import annotations
from typing import Iterable, List

from .errors import InvalidInput
from .matcher import equivalent
from .models import Entry, Library
from .normalize import normalize


def build(names: Iterable[str]) -> Library:
    """Build an immutable Library in input order; InvalidInput names the bad entry."""
    entries: List[Entry] = []
    for pos, raw in enumerate(names):
        try:
            entries.append(Entry.from_raw(raw))
        except InvalidInput as exc:
            raise InvalidInput(raw, index=pos) from exc
    return Library(entries=tuple(entries))


def query(library: Library, term: str) -> List[str]:
    """Return the original names equivalent to `term`, in library order."""
    key = normalize(term)
    return [e.original for e in library.entries if equivalent(e.canonical, key)]
