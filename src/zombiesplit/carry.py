from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Carry(Generic[T]):
    """A reduced value plus whatever overflowed its modulus."""

    value: T
    carry: int
    original: int

    @classmethod
    def from_division(cls, value: int, modulus: int) -> "Carry[int]":
        if modulus <= 0:
            raise ValueError(f"Modulus must be positive, got {modulus}")
        if value < 0:
            raise ValueError(f"Cannot carry a negative magnitude: {value}")
        reduced = value % modulus
        return cls(value=reduced, carry=(value - reduced) // modulus, original=value)

    def map(self, fn: Callable[[T], U]) -> "Carry[U]":
        return Carry(value=fn(self.value), carry=self.carry, original=self.original)
