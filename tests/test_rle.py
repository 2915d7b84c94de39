import pytest

from mtmkit.rle import RLEList


def test_basic_example():
    rle = RLEList()
    for char in "acbababaaa":
        rle.append(char)
    rle.remove(1)
    expected = "abababaaa"
    assert [rle[i] for i in range(len(rle))] == list(expected)
    assert len(rle) == len(expected)


def test_empty_list():
    rle = RLEList()
    assert len(rle) == 0
    assert rle.export_to_string() == ""
    assert list(rle) == []


def test_append_merges_runs():
    rle = RLEList("aaabbc")
    assert rle.export_to_string() == "a3\nb2\nc1\n"
    assert "".join(rle) == "aaabbc"


def test_nul_is_ignored():
    rle = RLEList("a")
    rle.append("\0")
    assert len(rle) == 1


def test_append_rejects_bad_values():
    rle = RLEList()
    with pytest.raises(ValueError):
        rle.append("ab")
    with pytest.raises(TypeError):
        rle.append(5)


def test_get_out_of_bounds():
    rle = RLEList("abc")
    assert rle[0] == "a"
    assert rle[2] == "c"
    with pytest.raises(IndexError):
        rle[3]
    with pytest.raises(IndexError):
        rle[-1]
    assert "".join(rle) == "abc"


def test_remove_out_of_bounds():
    rle = RLEList("abc")
    with pytest.raises(IndexError):
        rle.remove(3)
    with pytest.raises(IndexError):
        rle.remove(-1)
    assert "".join(rle) == "abc"


def test_remove_merges_neighbours():
    rle = RLEList("aabaa")
    rle.remove(2)
    assert rle.export_to_string() == "a4\n"


def test_remove_first_and_last():
    rle = RLEList("abc")
    rle.remove(0)
    assert "".join(rle) == "bc"
    rle.remove(1)
    assert "".join(rle) == "b"
    rle.remove(0)
    assert len(rle) == 0


def test_remove_inside_run():
    rle = RLEList("aaab")
    rle.remove(1)
    assert rle.export_to_string() == "a2\nb1\n"


def test_map_merges_runs():
    rle = RLEList("abab")
    rle.map(lambda c: "x")
    assert rle.export_to_string() == "x4\n"


def test_map_requires_callable():
    with pytest.raises(TypeError):
        RLEList("a").map(None)


def test_large_count_export():
    rle = RLEList("z" * 12)
    assert rle.export_to_string() == "z12\n"