"""
Six degree-of-freedom vectors.

A 6-DOF vector combines three translational and three rotational axes of a
vehicle in its local frame.

Field Order
-----------
    0 : forward      (translation)
    1 : right        (translation)
    2 : upwards      (translation)
    3 : turn_right   (yaw)
    4 : pitch_up     (pitch)
    5 : roll_right   (roll)

Any type exposing the six ``get_*`` accessors is a :class:`Relative6DVector`
and can be converted to a :class:`Vec6` or dotted with any other conforming
value, regardless of its class hierarchy.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

FIELD_NAMES = ("forward", "right", "upwards", "turn_right", "pitch_up", "roll_right")

_ACCESSOR_NAMES = tuple(f"get_{name}" for name in FIELD_NAMES)


class Relative6DVector(ABC):
    """
    Capability of any value shaped like a 6-DOF vector.

    Subclasses implement the six accessors and inherit ``get_generic``,
    ``dot`` and ``as_array``. Classes that only provide the accessors, without
    inheriting, are still recognised by ``isinstance``.
    """

    @abstractmethod
    def get_forward(self) -> float:
        pass

    @abstractmethod
    def get_right(self) -> float:
        pass

    @abstractmethod
    def get_upwards(self) -> float:
        pass

    @abstractmethod
    def get_turn_right(self) -> float:
        pass

    @abstractmethod
    def get_pitch_up(self) -> float:
        pass

    @abstractmethod
    def get_roll_right(self) -> float:
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Relative6DVector:
            if all(callable(getattr(subclass, name, None)) for name in _ACCESSOR_NAMES):
                return True
        return NotImplemented

    def get_generic(self) -> "Vec6":
        """Lossless projection into the canonical :class:`Vec6`."""
        return to_vec6(self)

    def dot(self, other: "Relative6DVector") -> float:
        """
        Dot product with another 6-DOF value.

        Parameters
        ----------
        other : Relative6DVector
            Any value exposing the six accessors.

        Returns
        -------
        float
            Sum of the six pairwise products, accumulated in field order.
        """
        lhs = to_vec6(self)
        rhs = to_vec6(other)
        return sum(a * b for a, b in zip(lhs, rhs))

    def as_array(self) -> np.ndarray:
        """Components as a float64 array of shape (6,)."""
        return np.fromiter(to_vec6(self), dtype=np.float64, count=6)


def to_vec6(value) -> "Vec6":
    """
    Convert any value exposing the six accessors into a :class:`Vec6`.

    Parameters
    ----------
    value : Relative6DVector
        Conforming value (inheriting or duck-typed).

    Returns
    -------
    Vec6
        New vector holding the accessor values.
    """
    return Vec6(
        forward=float(value.get_forward()),
        right=float(value.get_right()),
        upwards=float(value.get_upwards()),
        turn_right=float(value.get_turn_right()),
        pitch_up=float(value.get_pitch_up()),
        roll_right=float(value.get_roll_right()),
    )


class SixAxisRecord(Relative6DVector):
    """Implements the accessors for records with the six named fields."""

    def get_forward(self) -> float:
        return self.forward

    def get_right(self) -> float:
        return self.right

    def get_upwards(self) -> float:
        return self.upwards

    def get_turn_right(self) -> float:
        return self.turn_right

    def get_pitch_up(self) -> float:
        return self.pitch_up

    def get_roll_right(self) -> float:
        return self.roll_right


@dataclass(frozen=True)
class Vec6(SixAxisRecord):
    """
    Canonical 6-DOF vector.

    Supports component-wise ``+`` and ``-``, positional indexing over
    ``0..5`` and iteration in field order. No other algebra is defined.

    Examples
    --------
    >>> aim = Vec6(forward=2.0) - Vec6(forward=0.5, roll_right=0.1)
    >>> aim[0], aim[5]
    (1.5, -0.1)
    >>> list(Vec6(1, 2, 3, 4, 5, 6))
    [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    """

    forward: float = 0.0
    right: float = 0.0
    upwards: float = 0.0
    turn_right: float = 0.0
    pitch_up: float = 0.0
    roll_right: float = 0.0

    def __post_init__(self):
        for name in FIELD_NAMES:
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def zeros(cls) -> "Vec6":
        return cls()

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vec6":
        """
        Build a vector from six values in field order.

        Raises
        ------
        ValueError
            If ``values`` does not hold exactly six entries.
        """
        arr = np.asarray(values, dtype=np.float64).ravel()
        if arr.shape != (6,):
            raise ValueError(f"Vec6 needs exactly 6 values, got {arr.size}")
        return cls(*(float(v) for v in arr))

    def get_generic(self) -> "Vec6":
        return self

    def __add__(self, other):
        if not isinstance(other, Vec6):
            return NotImplemented
        return Vec6(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not isinstance(other, Vec6):
            return NotImplemented
        return Vec6(*(a - b for a, b in zip(self, other)))

    def __getitem__(self, index: int) -> float:
        # Negative indices are out of bounds too
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Vec6 indices must be integers, got {type(index).__name__}")
        if not 0 <= index < 6:
            raise IndexError(f"Vec6 index {index} out of range 0..5")
        return getattr(self, FIELD_NAMES[index])

    def __iter__(self) -> Iterator[float]:
        for index in range(6):
            yield self[index]

    def __len__(self) -> int:
        return 6
