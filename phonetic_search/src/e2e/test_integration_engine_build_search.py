import io
from pathlib import Path
import pytest
from backend.engine import Engine
from backend.errors import EngineNotReady, InvalidInput

NAMES = ["Jones", "Jonas", "Johns", "Saunas", "Smith"]

def _seed(tmp: Path) -> str:
    root = tmp / "Library"; root.mkdir()
    (root / "names.txt").write_text("\n".join(NAMES) + "\n", encoding="utf-8")
    return str(root)

@pytest.mark.e2e
def test_load_files_and_search(tmp_path: Path):
    eng = Engine()
    try:
        eng.load_files([_seed(tmp_path)])
        assert eng.size == 5
        assert eng.search("Jones") == ["Jones", "Jonas", "Johns", "Saunas"]
        assert eng.search("Bones") == []
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_load_stream():
    eng = Engine()
    try:
        eng.load_stream(io.StringIO("Smith\nSmyth\n\nJones\n"))
        assert eng.size == 2
        assert eng.search("Smmith") == ["Smith", "Smyth"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
@pytest.mark.parametrize("workers", [1, 4])
def test_search_many_keeps_term_order(workers):
    eng = Engine()
    try:
        eng.build(NAMES)
        terms = ["Smith", "Bones", "123", "Jones", "Smmith"]
        rows = eng.search_many(terms, workers=workers)
        assert [r.term for r in rows] == terms
        assert rows[0].matches == ("Smith",)
        assert rows[1].matches == ()
        assert rows[2].error is not None and rows[2].matches == ()
        assert rows[3].matches == ("Jones", "Jonas", "Johns", "Saunas")
        assert rows[4].matches == ("Smith",)
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_invalid_entry_aborts_or_is_skipped():
    eng = Engine()
    try:
        with pytest.raises(InvalidInput):
            eng.build(["Jones", "---", "Jonas"])
        eng.build(["Jones", "---", "Jonas"], skip_invalid=True)
        assert eng.size == 2
        assert eng.skipped == ["---"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_failed_rebuild_keeps_previous_library_and_skipped():
    eng = Engine()
    try:
        eng.build(["Jones", "123", "Smith"], skip_invalid=True)
        with pytest.raises(InvalidInput):
            eng.build(["Bones", "'"])
        assert eng.size == 2
        assert eng.skipped == ["123"]
        assert eng.search("Jonas") == ["Jones"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_not_ready():
    eng = Engine()
    try:
        with pytest.raises(EngineNotReady):
            eng.search("Jones")
        with pytest.raises(ValueError):
            eng.load_files([])
    finally:
        eng.shutdown()
