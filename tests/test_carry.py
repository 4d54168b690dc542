import pytest

from zombiesplit.carry import Carry


def test_from_division_reduces_and_carries() -> None:
    result = Carry.from_division(125, 60)
    assert (result.value, result.carry, result.original) == (5, 2, 125)


def test_from_division_exact_multiple() -> None:
    result = Carry.from_division(120, 60)
    assert (result.value, result.carry) == (0, 2)


@pytest.mark.parametrize("modulus", [1, 60, 256, 1000])
def test_from_division_invariants(modulus: int) -> None:
    for value in range(0, 3000, 7):
        result = Carry.from_division(value, modulus)
        assert result.value == value % modulus
        assert result.carry == (value - result.value) // modulus
        assert result.value < modulus


def test_from_division_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        Carry.from_division(5, 0)
    with pytest.raises(ValueError):
        Carry.from_division(-1, 60)


def test_map_keeps_carry() -> None:
    result = Carry.from_division(64, 60).map(str)
    assert result.value == "4"
    assert result.carry == 1
    assert result.original == 64
