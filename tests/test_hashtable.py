import pytest

from crawlkit.hashtable import HashTable


def entries(table):
    return sorted(
        (node.key, node.value) for bucket in table.buckets for node in bucket
    )


def test_key_index_in_range_for_strings_and_ints():
    table = HashTable(7)
    for key in ("A", "Banana", "", 0, 13, 700):
        assert 0 <= table.key_index(key) < table.size


def test_anagram_string_keys_share_bucket():
    table = HashTable(5)
    assert table.key_index("listen") == table.key_index("silent")


def test_int_keys_differing_by_size_share_bucket():
    table = HashTable(6)
    assert table.key_index(3) == table.key_index(3 + table.size)


def test_key_index_rejects_other_types():
    with pytest.raises(TypeError):
        HashTable(4).key_index(1.5)


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        HashTable(0)


def test_insert_stores_entries_in_their_bucket():
    table = HashTable(4)
    table.insert("Apple", "A")
    table.insert("Banana", "B")
    bucket = table.buckets[table.key_index("A")]
    assert ("A", "Apple") in [(n.key, n.value) for n in bucket]
    assert entries(table) == [("A", "Apple"), ("B", "Banana")]


def test_colliding_keys_chain_in_insertion_order():
    table = HashTable(4)
    table.insert("first", "ab")
    table.insert("second", "ba")
    bucket = table.buckets[table.key_index("ab")]
    assert [n.value for n in bucket] == ["first", "second"]
    assert table.current == 1


def test_table_grows_when_buckets_fill():
    table = HashTable(2)
    initial = table.size
    for key in range(10):
        table.insert(f"v{key}", key)
    assert table.size > initial
    assert table.size % initial == 0
    assert entries(table) == sorted((k, f"v{k}") for k in range(10))


def test_resize_doubles_and_keeps_entries():
    table = HashTable(3)
    for key in ("x", "y", "z"):
        table.insert(key * 2, key)
    before = entries(table)
    old_size = table.size
    table.resize()
    assert table.size == old_size * 2
    assert entries(table) == before
    occupied = sum(1 for b in table.buckets if not b.is_empty())
    assert table.current == occupied


def test_traverse_prints_matching_entries(capsys):
    table = HashTable(4)
    table.insert("Apple", "A")
    table.insert("Banana", "B")
    table.insert("Carrot", "C")
    table.traverse("A")
    assert capsys.readouterr().out == "key: A  value: Apple\n"


def test_print_all_lists_occupied_buckets(capsys):
    table = HashTable(4)
    table.insert("Apple", "A")
    table.print_all()
    out = capsys.readouterr().out
    index = table.key_index("A")
    assert out == f"Index {index}:\n  Key: A, Value: Apple\n"