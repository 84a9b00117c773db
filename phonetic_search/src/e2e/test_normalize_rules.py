import pytest
from backend.normalize import normalize, is_searchable
from backend.errors import InvalidInput

@pytest.mark.parametrize("raw,key", [
    ("Jones", "JNS"),
    ("Johns", "JNS"),
    ("Saunas", "SNS"),
    ("Smith", "SMT"),
    ("Smmith", "SMMT"),
    ("Hugh", "HG"),       # first letter kept even when it would be dropped later
    ("Anne", "ANN"),
])
def test_canonical_keys(raw, key):
    assert normalize(raw) == key

def test_case_insensitive():
    assert normalize("Jones") == normalize("JONES") == normalize("jones")

def test_non_letters_are_deleted():
    assert normalize("O'Brien-2") == normalize("OBrien") == "OBRN"
    assert normalize("  van der  Berg ") == normalize("vanderberg")

def test_non_ascii_letters_are_deleted():
    assert normalize("José") == "JS"

def test_idempotent_on_canonical_output():
    for raw in ("Jones", "Smith", "Winston", "O'Brien"):
        key = normalize(raw)
        assert normalize(key) == key

@pytest.mark.parametrize("raw", ["123", "'", "", "  -- ", "ßü"])
def test_no_letters_raises_invalid_input(raw):
    with pytest.raises(InvalidInput) as ei:
        normalize(raw)
    assert ei.value.value == raw
    assert ei.value.index is None
    assert not is_searchable(raw)

def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        normalize("42")
