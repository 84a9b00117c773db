import io
import json
from pathlib import Path
from frontend.__main__ import main
from backend.render import format_result

LIBRARY = "Jones\nJonas\nJohns\nSaunas\nSmith\n"

def test_format_result():
    assert format_result("Jones", ["Jonas", "Johns"]) == "Jones: Jonas, Johns"
    assert format_result("Bones", []) == "Bones: No results found."

def test_stdin_library(capsys):
    rc = main(["Jones", "Bones", "Smmith"], stdin=io.StringIO(LIBRARY))
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "Jones: Jones, Jonas, Johns, Saunas",
        "Bones: No results found.",
        "Smmith: Smith",
    ]

def test_invalid_term_is_reported_per_term(capsys):
    rc = main(["!!!", "Jones"], stdin=io.StringIO(LIBRARY))
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "!!!: Invalid search term."
    assert out[1].startswith("Jones: Jones")

def test_no_terms(capsys):
    assert main([], stdin=io.StringIO(LIBRARY)) == 2
    assert "You have not entered any search terms." in capsys.readouterr().out

def test_empty_library(capsys):
    assert main(["Jones"], stdin=io.StringIO("\nJones\n")) == 1
    assert "any names" in capsys.readouterr().out

def test_invalid_library_entry(capsys):
    assert main(["Jones"], stdin=io.StringIO("Jones\n123\n")) == 1
    assert "Invalid library entry" in capsys.readouterr().err
    assert main(["Jones", "--skip-invalid"], stdin=io.StringIO("Jones\n123\n")) == 0

def test_names_file_and_json(tmp_path: Path, capsys):
    f = tmp_path / "names.txt"; f.write_text(LIBRARY, encoding="utf-8")
    rc = main(["Bones", "Jones", "--names", str(f), "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"term": "Bones", "matches": []},
        {"term": "Jones", "matches": ["Jones", "Jonas", "Johns", "Saunas"]},
    ]

def test_terms_after_names_option(tmp_path: Path, capsys):
    f = tmp_path / "names.txt"; f.write_text(LIBRARY, encoding="utf-8")
    rc = main(["--names", str(f), "Jones", "Bones"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "Jones: Jones, Jonas, Johns, Saunas",
        "Bones: No results found.",
    ]

def test_repeated_names_option_with_interleaved_terms(tmp_path: Path, capsys):
    a = tmp_path / "a.txt"; a.write_text("Jones\n", encoding="utf-8")
    b = tmp_path / "b.txt"; b.write_text("Smith\nJonas\n", encoding="utf-8")
    rc = main(["Johns", "--names", str(a), "Smmith", "--names", str(b)])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "Johns: Jones, Jonas",
        "Smmith: Smith",
    ]
