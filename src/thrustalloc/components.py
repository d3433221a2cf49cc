"""
Per-thruster and per-vehicle state records.

ForceAxis
    Which 6-DOF directions a thruster contributes to.
Thruster
    Commanded output of a thruster. Both stored values are clamped at the
    setter, so readers never see an out-of-range value.
CurrentVelocity / IntendedVelocity
    Actual and desired vehicle velocity in the local 6-DOF frame.
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from thrustalloc.vector import SixAxisRecord

logger = logging.getLogger(__name__)

# Local +Z is the direction a thruster pushes along
THRUST_DIRECTION = np.array([0.0, 0.0, 1.0])
THRUST_DIRECTION.setflags(write=False)


def _clamp(value: float, lower: float, upper: float = math.inf) -> float:
    value = float(value)
    if math.isnan(value):
        return lower
    return min(max(value, lower), upper)


@dataclass(frozen=True)
class ForceAxis(SixAxisRecord):
    """
    6-DOF contribution of a single thruster.

    Values are not range-checked; callers are expected to supply normalised
    axes (forces in [-1, 1], torques scaled similarly). An all-zero axis never
    receives a non-zero score from a dot-product strategy.
    """

    forward: float = 0.0
    right: float = 0.0
    upwards: float = 0.0
    turn_right: float = 0.0
    pitch_up: float = 0.0
    roll_right: float = 0.0


@dataclass
class CurrentVelocity(SixAxisRecord):
    """Velocity of the vehicle over the most recent frame."""

    forward: float = 0.0
    right: float = 0.0
    upwards: float = 0.0
    turn_right: float = 0.0
    pitch_up: float = 0.0
    roll_right: float = 0.0


@dataclass
class IntendedVelocity(SixAxisRecord):
    """Velocity the vehicle should be moving at."""

    forward: float = 0.0
    right: float = 0.0
    upwards: float = 0.0
    turn_right: float = 0.0
    pitch_up: float = 0.0
    roll_right: float = 0.0


class Thruster:
    """
    Commanded state of one thruster.

    Parameters
    ----------
    strength_factor : float, optional
        Multiplied by ``current_status`` to get the physical force. Negative
        values are clamped to 0 since firing backwards is not supported.
        Default is 1.0.
    current_status : float, optional
        Output level in [0, 1], overwritten on every allocation. Default 0.0.

    Notes
    -----
    Out-of-range inputs are never rejected. The setters clamp them and log a
    warning. Mutation is not thread-safe; apply strategy results from a
    single writer.

    Examples
    --------
    >>> thruster = Thruster.new_with_strength_factor(40.0)
    >>> thruster.set_current_status(2.0).get_current_status()
    1.0
    """

    def __init__(self, strength_factor: float = 1.0, current_status: float = 0.0):
        self._strength_factor = 0.0
        self._current_status = 0.0
        self.set_strength_factor(strength_factor)
        self.set_current_status(current_status)

    @classmethod
    def new(cls) -> "Thruster":
        """Create a thruster with the default values."""
        return cls()

    @classmethod
    def new_with_strength_factor(cls, strength_factor: float) -> "Thruster":
        return cls(strength_factor=strength_factor)

    # =========================================================================
    # Strength factor
    # =========================================================================

    def get_strength_factor(self) -> float:
        return max(self._strength_factor, 0.0)

    def set_strength_factor(self, strength_factor: float) -> "Thruster":
        if not strength_factor >= 0.0:
            logger.warning("Strength factor %s must be >= 0.0", strength_factor)
        self._strength_factor = _clamp(strength_factor, 0.0)
        return self

    @property
    def strength_factor(self) -> float:
        return self.get_strength_factor()

    @strength_factor.setter
    def strength_factor(self, value: float) -> None:
        self.set_strength_factor(value)

    # =========================================================================
    # Current status
    # =========================================================================

    def get_current_status(self) -> float:
        return _clamp(self._current_status, 0.0, 1.0)

    def set_current_status(self, current_status: float) -> "Thruster":
        if not 0.0 <= current_status <= 1.0:
            logger.warning("Current status %s must be between 0.0 and 1.0 (inclusive)", current_status)
        self._current_status = _clamp(current_status, 0.0, 1.0)
        return self

    @property
    def current_status(self) -> float:
        return self.get_current_status()

    @current_status.setter
    def current_status(self, value: float) -> None:
        self.set_current_status(value)

    # Later revisions call the status "strength"
    get_strength = get_current_status
    set_strength = set_current_status
    strength = current_status

    # =========================================================================
    # Physics
    # =========================================================================

    def force(self, direction: Sequence[float] = THRUST_DIRECTION) -> np.ndarray:
        """
        Physical force produced by the thruster.

        Parameters
        ----------
        direction : array_like, shape (3,), optional
            Unit thrust axis in the thruster's local frame. Defaults to +Z.

        Returns
        -------
        np.ndarray, shape (3,)
            ``direction * current_status * strength_factor``.
        """
        direction = np.asarray(direction, dtype=np.float64)
        return direction * self.get_current_status() * self.get_strength_factor()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"strength_factor={self.get_strength_factor()}, "
            f"current_status={self.get_current_status()})"
        )
