"""
Position and velocity value types.

A segment evaluation yields plain (x, y, z) tuples from the Chebyshev
evaluator; these classes wrap them with the vector arithmetic callers
usually need next.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, List, Sequence, Tuple

from .error import InvalidInputError


@dataclass(frozen=True)
class Vector:
    """An immutable Cartesian 3-vector."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for value in (self.x, self.y, self.z):
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidInputError("Vector components must be numeric")

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Vector":
        """Build a vector from any 3-element sequence."""
        if len(values) != 3:
            raise InvalidInputError(
                f"Vector needs exactly 3 components, got {len(values)}"
            )
        return cls(values[0], values[1], values[2])

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector":
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Invalid index: {index}")

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z]

    def __repr__(self) -> str:
        return f"Vector[{self.x}, {self.y}, {self.z}]"

    __str__ = __repr__


@dataclass(frozen=True)
class State:
    """Position and velocity of a body at one instant.

    Attributes:
        position: Position vector, in the units of the source coefficients
        velocity: Velocity vector, in those units per day
    """

    position: Vector
    velocity: Vector

    @classmethod
    def from_sequences(
        cls, position: Sequence[float], velocity: Sequence[float]
    ) -> "State":
        return cls(Vector.from_sequence(position), Vector.from_sequence(velocity))

    def to_lists(self) -> Tuple[List[float], List[float]]:
        return self.position.to_list(), self.velocity.to_list()
