import io

import pytest

from mtmkit.powers import is_power_of_two, main, power_of_two


@pytest.mark.parametrize("k", range(0, 31))
def test_powers_round_trip(k):
    assert is_power_of_two(2**k)
    assert power_of_two(2**k) == k


@pytest.mark.parametrize("num", [0, -1, -8, 3, 6, 12, 1023])
def test_not_powers(num):
    assert not is_power_of_two(num)


@pytest.mark.parametrize("n", [0, 1, -4])
def test_power_of_small_values_is_zero(n):
    assert power_of_two(n) == 0


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out.splitlines()


def test_main_reports_powers(monkeypatch, capsys):
    code, lines = _run(monkeypatch, capsys, "4\n8 3 1\n16\n")
    assert code == 0
    assert lines[0] == "Enter size of input:"
    assert lines[1] == "Enter numbers:"
    assert "The number 8 is a power of 2: 8 = 2^3" in lines
    assert "The number 1 is a power of 2: 1 = 2^0" in lines
    assert "The number 16 is a power of 2: 16 = 2^4" in lines
    assert not any("number 3 " in line for line in lines)
    assert lines[-1] == "Total exponent sum is 7"


def test_main_invalid_size(monkeypatch, capsys):
    _, lines = _run(monkeypatch, capsys, "0\n")
    assert lines[-1] == "Invalid size"


def test_main_invalid_count(monkeypatch, capsys):
    _, lines = _run(monkeypatch, capsys, "abc\n")
    assert lines[-1] == "Invalid number"


def test_main_invalid_number(monkeypatch, capsys):
    _, lines = _run(monkeypatch, capsys, "2\n4 x\n")
    assert lines[-1] == "Invalid number"
    assert not any(line.startswith("Total") for line in lines)


def test_main_missing_numbers(monkeypatch, capsys):
    _, lines = _run(monkeypatch, capsys, "3\n4\n")
    assert lines[-1] == "Invalid number"