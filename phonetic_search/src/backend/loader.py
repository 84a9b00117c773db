from __future__ import annotations
import os
from typing import Iterable, Iterator, List

from .config import ENCODING, NAME_FILE_EXTS


def read_names(stream: Iterable[str], *, stop_at_blank: bool = True) -> List[str]:
    """
    Read one name per line, trailing newlines stripped.
    With stop_at_blank (stdin convention) the first blank line ends the list;
    otherwise blank lines are skipped.
    """
    names: List[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line.strip():
            if stop_at_blank:
                break
            continue
        names.append(line)
    return names


def iter_name_files(roots: Iterable[str]) -> Iterator[str]:
    """Yield name files: a root that is a file is used as-is, directories are walked for *.txt."""
    for root in roots:
        if os.path.isfile(root):
            yield root
            continue
        if not os.path.isdir(root):
            raise FileNotFoundError(root)
        found: List[str] = []
        for dirpath, _, filenames in os.walk(root):
            for fn in filenames:
                if fn.lower().endswith(NAME_FILE_EXTS):
                    found.append(os.path.join(dirpath, fn))
        yield from sorted(found)


def load_names(roots: Iterable[str]) -> List[str]:
    """Concatenate the names of every file under `roots`, in file order."""
    names: List[str] = []
    for path in iter_name_files(roots):
        with open(path, "r", encoding=ENCODING, errors="ignore") as f:
            names.extend(read_names(f, stop_at_blank=False))
    return names
