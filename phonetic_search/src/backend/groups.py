# backend/groups.py
"""Letter equivalence classes used by the matcher (static, read-only)."""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

# group tag -> letters that sound alike
GROUPS: Mapping[int, str] = MappingProxyType({
    1: "AEIOU",
    2: "CGJKQSXYZ",
    3: "BFPVW",
    4: "DT",
    5: "MN",
    6: "L",
    7: "R",
    8: "H",
})

_CLASS_OF: Mapping[str, int] = MappingProxyType(
    {ch: tag for tag, letters in GROUPS.items() for ch in letters}
)


def class_of(ch: str) -> int:
    """Return the group tag (1-8) of an uppercase letter A-Z; KeyError otherwise."""
    return _CLASS_OF[ch]
