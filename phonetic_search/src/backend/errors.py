# backend/errors.py
from __future__ import annotations
from typing import Optional


class PhoneticSearchError(Exception):
    """Base class for every error raised by the phonetic search backend."""


class InvalidInput(PhoneticSearchError, ValueError):
    """
    A raw name or search term has no ASCII letters, so it has no canonical key.

    `index` is the position of the offending name in the library input,
    or None when the value was a search term.
    """

    def __init__(self, value: str, index: Optional[int] = None) -> None:
        self.value = value
        self.index = index
        where = f" (library entry {index})" if index is not None else ""
        super().__init__(f"{value!r}{where} contains no ASCII letters")


class EngineNotReady(PhoneticSearchError, RuntimeError):
    """Raised when the Engine is queried before a library was built."""
