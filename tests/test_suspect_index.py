import pytest

from case_data import CLUE_SUSPECTS
from suspect_index import SuspectIndex, djb2


def test_djb2_known_values():
    assert djb2("") == 5381
    assert djb2("a") == 5381 * 33 + 97
    assert djb2("ab") == (5381 * 33 + 97) * 33 + 98


def test_djb2_hashes_utf8_bytes():
    # "á" is two bytes in UTF-8
    expected = ((5381 * 33 + 0xC3) * 33) + 0xA1
    assert djb2("á") == expected


def test_djb2_wraps_to_64_bits():
    assert djb2("x" * 200) < 2 ** 64


def test_get_returns_put_value():
    index = SuspectIndex()
    index.put("pegada molhada", "Sr. Avelar")
    assert index.get("pegada molhada") == "Sr. Avelar"
    assert index.get("Pegada molhada") is None
    assert index.get("nada") is None


def test_last_write_wins():
    index = SuspectIndex()
    index.put("fio de cabelo", "Sra. Beatriz")
    index.put("fio de cabelo", "Srta. Clara")
    assert index.get("fio de cabelo") == "Srta. Clara"
    assert len(index) == 1


def test_colliding_clues_share_a_chain():
    index = SuspectIndex(bucket_count=1)
    for clue, suspect in CLUE_SUSPECTS.items():
        index.put(clue, suspect)
    assert index.chain_length(0) == len(CLUE_SUSPECTS)
    for clue, suspect in CLUE_SUSPECTS.items():
        assert index.get(clue) == suspect


def test_new_entries_are_prepended_to_the_chain():
    index = SuspectIndex(bucket_count=1)
    index.put("a", "X")
    index.put("b", "Y")
    assert list(index.items()) == [("b", "Y"), ("a", "X")]


def test_from_mapping_loads_case_table():
    index = SuspectIndex.from_mapping(CLUE_SUSPECTS)
    assert index.bucket_count == 101
    assert len(index) == 9
    assert dict(index.items()) == CLUE_SUSPECTS
    assert "cheiro de queimado" in index
    assert index.bucket_for("cheiro de queimado") == djb2("cheiro de queimado") % 101


def test_invalid_bucket_count():
    with pytest.raises(ValueError):
        SuspectIndex(bucket_count=0)


def test_clear_releases_entries():
    index = SuspectIndex.from_mapping(CLUE_SUSPECTS)
    assert index.clear() == 9
    assert len(index) == 0
    assert index.get("pegada molhada") is None
