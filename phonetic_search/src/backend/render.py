from __future__ import annotations
from typing import Sequence

from .config import RESULT_SEPARATOR, NO_RESULTS_TEXT, INVALID_TERM_TEXT
from .models import SearchResult


def format_result(term: str, matches: Sequence[str]) -> str:
    """'Jones: Jonas, Johns' or 'Bones: No results found.'"""
    body = RESULT_SEPARATOR.join(matches) if matches else NO_RESULTS_TEXT
    return f"{term}: {body}"


def format_search_result(r: SearchResult) -> str:
    if r.error is not None:
        return f"{r.term}: {INVALID_TERM_TEXT}"
    return format_result(r.term, r.matches)
