import pytest

from dsakit.conversions import binary_to_decimal, decimal_to_binary, main


@pytest.mark.parametrize("n", range(0, 200))
def test_round_trip(n):
    assert binary_to_decimal(decimal_to_binary(n)) == n


@pytest.mark.parametrize("n", [0, 1, 2, 7, 64, 1023])
def test_decimal_to_binary_matches_format(n):
    assert decimal_to_binary(n) == int(format(n, "b"))


def test_zero_binary():
    assert binary_to_decimal(0) == 0


def test_non_binary_digits_are_ignored():
    assert binary_to_decimal(121) == binary_to_decimal(101)


def test_negative_binary_raises():
    with pytest.raises(ValueError):
        binary_to_decimal(-1)


def test_negative_decimal_raises():
    with pytest.raises(ValueError):
        decimal_to_binary(-3)


def test_main_binary_to_decimal(capsys):
    assert main(["1", "101"]) == 0
    out = capsys.readouterr().out
    assert "Enter binary to convert it into number" in out
    assert out.strip().splitlines()[-1] == "Answer is 5"


def test_main_decimal_to_binary(capsys):
    assert main(["2", "5"]) == 0
    out = capsys.readouterr().out
    assert out.strip().splitlines()[-1] == "Answer is 101"


def test_main_invalid_option(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert out.strip().splitlines()[-1] == "Enter a valid option!"
    assert "Welcome to binary and decimal converter Program" in out