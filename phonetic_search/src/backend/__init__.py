"""Phonetic name search backend: normalizer, matcher, library index and engine."""
from .errors import PhoneticSearchError, InvalidInput, EngineNotReady
from .normalize import normalize
from .groups import class_of
from .matcher import equivalent
from .models import Entry, Library, SearchResult
from .library import build, query
from .engine import Engine

__version__ = "1.0.0"
__all__ = [
    "PhoneticSearchError", "InvalidInput", "EngineNotReady",
    "normalize", "class_of", "equivalent",
    "Entry", "Library", "SearchResult",
    "build", "query", "Engine",
]
