# backend/engine.py
from __future__ import annotations

import os
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, TextIO

from . import config as CFG
from .errors import EngineNotReady, InvalidInput
from .library import build as build_library, query as query_library
from .loader import load_names, read_names
from .models import Library, SearchResult
from .normalize import is_searchable

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer shared by the CLI, the Flask UI and the desktop GUI:
      - name ingestion (iterable, files/folders, or a text stream),
      - an immutable Library built once per session,
      - single and batch phonetic search.

    Public API:
      * build(names, ...):        normalize and index raw names
      * load_files(roots, ...):   read names from *.txt files, then build
      * load_stream(stream, ...): read names from stdin-like streams, then build
      * search(term):             names matching one term, library order
      * search_many(terms, ...):  SearchResult per term, term order
      * shutdown():               drop the library
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.library: Optional[Library] = None
        self.skipped: List[str] = []

    # /* ~~~ Build the library from raw names ~~~ */
    def build(
        self,
        names: Iterable[str],
        *,
        skip_invalid: bool = False,   # drop names without letters instead of failing
        verbose: bool = False,
    ) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ["PHONETIC_VERBOSE"] = "1"

        names = list(names)
        skipped: List[str] = []
        if skip_invalid:
            kept: List[str] = []
            for pos, raw in enumerate(names):
                if is_searchable(raw):
                    kept.append(raw)
                else:
                    log.warning("Skipping library entry %d (%r): no ASCII letters", pos, raw)
                    skipped.append(raw)
            names = kept

        # raises InvalidInput with the entry position when not skipping;
        # library and skipped are only replaced together on success
        library = build_library(names)
        self.library, self.skipped = library, skipped
        log.info("Engine build() complete: names=%d skipped=%d", len(self.library), len(self.skipped))

    # /* ~~~ Read names from files or folders ~~~ */
    def load_files(self, roots: Iterable[str], *, skip_invalid: bool = False, verbose: bool = False) -> None:
        roots = list(roots)
        if not roots:
            raise ValueError("load_files(): at least one names file or folder is required")
        log.info("Loading names from %s", roots)
        self.build(load_names(roots), skip_invalid=skip_invalid, verbose=verbose)

    # /* ~~~ Read names from a text stream (one per line, blank line ends) ~~~ */
    def load_stream(self, stream: TextIO, *, skip_invalid: bool = False, verbose: bool = False) -> None:
        self.build(read_names(stream), skip_invalid=skip_invalid, verbose=verbose)

    @property
    def size(self) -> int:
        return len(self.library) if self.library is not None else 0

    # ------------- query -------------

    def search(self, term: str) -> List[str]:
        return query_library(self._require_library(), term)

    # /* ~~~ Search several terms; results keep the caller's term order ~~~ */
    def search_many(self, terms: Iterable[str], *, workers: Optional[int] = None) -> List[SearchResult]:
        lib = self._require_library()
        terms = list(terms)
        workers = CFG.WORKERS if workers is None else int(workers)

        def one(term: str) -> SearchResult:
            try:
                return SearchResult(term=term, matches=tuple(query_library(lib, term)))
            except InvalidInput as exc:
                return SearchResult(term=term, matches=(), error=str(exc))

        if workers <= 1 or len(terms) <= 1:
            return [one(t) for t in terms]
        with ThreadPoolExecutor(max_workers=min(workers, len(terms))) as ex:
            return list(ex.map(one, terms))

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.library = None
        self.skipped = []
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_library(self) -> Library:
        if self.library is None:
            raise EngineNotReady("Engine not initialized. Call build() or load_files() first.")
        return self.library
