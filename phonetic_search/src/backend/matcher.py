# backend/matcher.py
from __future__ import annotations

from .groups import class_of


def _skip_run(key: str, pos: int, group: int) -> int:
    """Advance `pos` over following characters of `key` that share `group`."""
    while pos + 1 < len(key) and class_of(key[pos + 1]) == group:
        pos += 1
    return pos


def equivalent(a: str, b: str) -> bool:
    """
    Decide whether two canonical keys sound alike.

    Both keys are walked in step. At each checkpoint the letter groups must be
    equal; a run of consecutive letters from the same group counts as one
    sound and is consumed on each side independently. The keys match only if
    both are exhausted together.
    """
    i = j = 0
    n, m = len(a), len(b)
    while i < n and j < m:
        group = class_of(a[i])
        if group != class_of(b[j]):
            return False
        i = _skip_run(a, i, group) + 1
        j = _skip_run(b, j, group) + 1
    return i == n and j == m
