import pytest

from structlab.hashing import (
    ChainingHashTable,
    LinearProbingHashTable,
    TableFullError,
    hash_key,
    main,
)


@pytest.mark.parametrize("key", ["", "a", "alice", "zebra crossing"])
@pytest.mark.parametrize("size", [1, 7, 10])
def test_hash_key_in_range(key, size):
    assert 0 <= hash_key(key, size) < size


def test_hash_key_ignores_order_of_characters():
    assert hash_key("listen", 10) == hash_key("silent", 10)


def test_hash_key_of_empty_string_is_zero():
    assert hash_key("", 10) == 0


def test_chaining_finds_inserted_entry():
    table = ChainingHashTable()
    table.insert("alice", "office")
    phone, comparisons = table.search("alice")
    assert phone == "office"
    assert comparisons == 1


def test_chaining_collision_needs_extra_comparison():
    table = ChainingHashTable()
    table.insert("ab", "first")
    table.insert("ba", "second")
    first = table.search("ab")
    second = table.search("ba")
    assert first[0] == "first"
    assert second[0] == "second"
    assert second[1] == first[1] + 1


def test_chaining_missing_counts_bucket_entries():
    table = ChainingHashTable()
    table.insert("ab", "first")
    table.insert("ba", "second")
    assert table.search("zz") == (None, 0) or hash_key("zz", 10) == hash_key("ab", 10)
    phone, comparisons = table.search("ab" + "\x00")
    assert phone is None
    assert comparisons == 2


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        ChainingHashTable(0)
    with pytest.raises(ValueError):
        LinearProbingHashTable(-3)


def test_probing_round_trip():
    table = LinearProbingHashTable()
    names = ["alice", "bob", "carol", "dave"]
    for name in names:
        table.insert(name, name.upper())
    for name in names:
        assert table.search(name)[0] == name.upper()


def test_probing_overwrites_existing_name():
    table = LinearProbingHashTable()
    table.insert("alice", "old")
    table.insert("alice", "new")
    assert table.search("alice") == ("new", 1)


def test_probing_collision_moves_to_next_slot():
    table = LinearProbingHashTable()
    table.insert("ab", "first")
    table.insert("ba", "second")
    phone, comparisons = table.search("ba")
    assert phone == "second"
    assert comparisons == 2


def test_probing_full_table_raises():
    table = LinearProbingHashTable(2)
    table.insert("a", "1")
    table.insert("b", "2")
    with pytest.raises(TableFullError):
        table.insert("c", "3")


def test_probing_missing_in_full_table_scans_every_slot():
    size = 3
    table = LinearProbingHashTable(size)
    for name in ["a", "b", "c"]:
        table.insert(name, name)
    assert table.search("zz") == (None, size)


def test_probing_missing_in_empty_table():
    phone, comparisons = LinearProbingHashTable().search("nobody")
    assert phone is None
    assert comparisons == 1


def test_main_session(monkeypatch, capsys):
    answers = iter(["1", "alice", "office", "0", "alice", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Phone number for alice: office" in out
    assert "Number of comparisons: 1" in out
    assert "Exiting..." in out


def test_main_reports_missing(monkeypatch, capsys):
    answers = iter(["2", "alice", "office", "0", "bob", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    main([])
    assert "bob not found!" in capsys.readouterr().out