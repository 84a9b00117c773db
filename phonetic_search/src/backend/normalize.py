# backend/normalize.py
from __future__ import annotations
import re

from .errors import InvalidInput

_NON_LETTER_RE = re.compile(r"[^A-Za-z]")
# letters dropped after the first position
_SILENT_RE = re.compile(r"[AEIHOUWY]")


def strip_letters(raw: str) -> str:
    """Keep only ASCII letters, uppercased."""
    return _NON_LETTER_RE.sub("", raw).upper()


def normalize(raw: str) -> str:
    """
    Turn a raw name into its canonical comparison key.
    Rules:
      * drop everything that is not an ASCII letter (digits, punctuation, spaces, accents)
      * uppercase
      * keep the first letter; drop A E I H O U W Y from the rest
    Raises InvalidInput when no letters are left after the first step.
    """
    letters = strip_letters(raw)
    if not letters:
        raise InvalidInput(raw)
    return letters[0] + _SILENT_RE.sub("", letters[1:])


def is_searchable(raw: str) -> bool:
    """True when `raw` has at least one ASCII letter (i.e. normalize() will not raise)."""
    return _NON_LETTER_RE.sub("", raw) != ""
