# tests/test_model_store.py
import pytest
from predictive_text.core.trie import Trie
from predictive_text.utils.model_store import load_model, parse_entry, save_model


@pytest.fixture
def trie():
    t = Trie()
    for w, f in [("the", 100), ("that", 50), ("this", 20), ("a", 75)]:
        t.insert(w, f)
    return t


def test_round_trip(trie, tmp_path):
    path = tmp_path / "model.txt"
    assert save_model(trie, path)

    fresh = Trie()
    assert load_model(fresh, path)
    assert dict(fresh.entries()) == dict(trie.entries())


def test_file_format_follows_dfs_order(tmp_path):
    t = Trie()
    for w in ("b", "a", "ab"):
        t.insert(w, 2)
    path = tmp_path / "model.txt"
    save_model(t, path)
    assert path.read_text(encoding="utf-8").splitlines() == ["b 2", "a 2", "ab 2"]


def test_load_adds_to_existing(trie, tmp_path):
    path = tmp_path / "model.txt"
    save_model(trie, path)
    load_model(trie, path)
    assert trie.frequency("the") == 200


def test_malformed_lines_skipped(tmp_path):
    path = tmp_path / "model.txt"
    path.write_text(
        "good 3\n"
        "\n"
        "lonely\n"
        "bad x\n"
        "neg -4\n"
        "float 2.5\n"
        "extra 7 trailing tokens\n"
        "  Spaced   9  \n",
        encoding="utf-8",
    )
    t = Trie()
    assert load_model(t, path)
    assert dict(t.entries()) == {"good": 3, "extra": 7, "spaced": 9}


def test_parse_entry():
    assert parse_entry("word 12\n") == ("word", 12)
    assert parse_entry("word") is None
    assert parse_entry("") is None
    assert parse_entry("word twelve") is None


def test_load_missing_file(tmp_path):
    t = Trie()
    t.insert("keep", 1)
    assert load_model(t, tmp_path / "nope.txt") is False
    assert dict(t.entries()) == {"keep": 1}


def test_save_unwritable(trie, tmp_path):
    # a directory can't be opened for writing
    assert save_model(trie, tmp_path) is False
    assert save_model(trie, tmp_path / "missing" / "model.txt") is False


def test_non_utf8_line_does_not_abort_load(tmp_path):
    path = tmp_path / "model.txt"
    path.write_bytes(b"alpha 3\ncaf\xe9 2\nomega 4\n")
    t = Trie()
    assert load_model(t, path)
    assert t.frequency("alpha") == 3
    assert t.frequency("omega") == 4
    assert t.size() == 3

    # the undecodable byte is written back unchanged
    out = tmp_path / "resaved.txt"
    assert save_model(t, out)
    assert b"caf\xe9 2\n" in out.read_bytes()


@pytest.mark.parametrize("raw", ["1_000", "+5", "-4", "٣", "2.5", "0x10"])
def test_frequency_must_be_ascii_digits(raw):
    assert parse_entry(f"word {raw}") is None


def test_zero_frequency_accepted():
    assert parse_entry("word 0") == ("word", 0)
