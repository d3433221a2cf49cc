"""
Least-squares allocation strategy.

Finds the strengths whose combined thrust best reproduces the correction:

    minimise ||B s - aim||² + λ ||s||²
    subject to  lb <= s <= ub

where the columns of B (6 x N) are the force axes of the N thrusters and
``aim = intended_velocity - current_velocity``. The bounds depend on the
parameters:

    non_negative : lb = 0   (thrusters cannot push backwards)
    saturate     : ub = 1   (thrusters cannot exceed full output)

Unconstrained problems use ``numpy.linalg.lstsq`` (minimum-norm solution).
Non-negative problems use ``scipy.optimize.nnls`` and doubly bounded ones
``scipy.optimize.lsq_linear`` with the BVLS solver. The small ridge term λ
makes the bounded problems strictly convex, so redundant thrusters share the
load evenly instead of one taking it all.

Thrusters with an all-zero axis are left out of the solve and always get 0.

References
----------
- Fossen, T. I., "Handbook of Marine Craft Hydrodynamics and Motion
  Control", ch. 12 (thrust allocation).
- Lawson, C. L. and Hanson, R. J., "Solving Least Squares Problems", 1974
  (NNLS and BVLS).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

import numpy as np
from scipy.optimize import lsq_linear, nnls

from thrustalloc.strategies.base import ID, ParentInfo, PureStrategy, ThrusterInfo

logger = logging.getLogger(__name__)


@dataclass
class LeastSquaresParams:
    """
    Parameters for :class:`LeastSquaresStrategy`.

    Attributes
    ----------
    rcond : float or None
        Cut-off ratio for small singular values in the unconstrained solve,
        passed to ``numpy.linalg.lstsq``. None uses machine precision.
    non_negative : bool
        Constrain strengths to be >= 0. Default True.
    saturate : bool
        Constrain strengths to be <= 1. Default True.
    regularization : float
        Ridge weight λ used by the bounded solvers. Default 1e-8.
    max_iterations : int or None
        Iteration limit for the bounded solvers. None uses scipy's default.
    """

    rcond: Optional[float] = None
    non_negative: bool = True
    saturate: bool = True
    regularization: float = 1e-8
    max_iterations: Optional[int] = None

    def __post_init__(self):
        """Validate parameters after initialization."""
        if self.rcond is not None and self.rcond < 0:
            raise ValueError(f"rcond must be non-negative, got {self.rcond}")
        if self.regularization < 0:
            raise ValueError(f"regularization must be non-negative, got {self.regularization}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")

    @property
    def bounds(self) -> Tuple[float, float]:
        """(lower, upper) bound applied to every strength."""
        lower = 0.0 if self.non_negative else -np.inf
        upper = 1.0 if self.saturate else np.inf
        return lower, upper


@dataclass(repr=False)
class LeastSquaresStrategy(PureStrategy[ID]):
    """
    Bounded least-squares allocator.

    Parameters
    ----------
    params : LeastSquaresParams, optional
        Solver settings. Defaults to strengths bounded to [0, 1].

    Examples
    --------
    >>> from thrustalloc import CurrentVelocity, ForceAxis, IntendedVelocity, Thruster
    >>> blocks = {
    ...     "left": ThrusterInfo(Thruster(), ForceAxis(forward=1.0, turn_right=1.0)),
    ...     "right": ThrusterInfo(Thruster(), ForceAxis(forward=1.0, turn_right=-1.0)),
    ... }
    >>> parent = ParentInfo(CurrentVelocity(), IntendedVelocity(forward=1.0))
    >>> strengths = LeastSquaresStrategy().calculate(blocks, parent)
    >>> round(strengths["left"], 6), round(strengths["right"], 6)
    (0.5, 0.5)
    """

    params: LeastSquaresParams = field(default_factory=LeastSquaresParams)

    name = "least_squares"

    def calculate(self, blocks: Mapping[ID, ThrusterInfo], parent: ParentInfo) -> Dict[ID, float]:
        ids = list(blocks.keys())
        if not ids:
            return {}

        aim = parent.difference().as_array()
        B = np.column_stack([blocks[thruster_id].force_axis.as_array() for thruster_id in ids])

        s = np.zeros(len(ids))
        # Thrusters with an all-zero axis can never contribute
        active = np.any(B != 0.0, axis=0)
        if active.any():
            try:
                s[active] = self._solve(B[:, active], aim)
            except (np.linalg.LinAlgError, RuntimeError) as exc:
                logger.warning("Least-squares allocation failed (%s); commanding all thrusters to 0", exc)
                s[:] = 0.0

        return {thruster_id: float(value) for thruster_id, value in zip(ids, s)}

    def _solve(self, B: np.ndarray, aim: np.ndarray) -> np.ndarray:
        """Solve the (possibly bounded) problem for the given axis columns."""
        lower, upper = self.params.bounds
        n = B.shape[1]

        if np.isneginf(lower) and np.isposinf(upper):
            s, *_ = np.linalg.lstsq(B, aim, rcond=self.params.rcond)
            return s

        # Ridge rows: ||B s - aim||² + λ||s||² as one stacked least-squares problem
        if self.params.regularization > 0:
            B = np.vstack([B, np.sqrt(self.params.regularization) * np.eye(n)])
            aim = np.concatenate([aim, np.zeros(n)])

        if lower == 0.0 and np.isposinf(upper):
            s, _ = nnls(B, aim, maxiter=self.params.max_iterations)
        else:
            result = lsq_linear(B, aim, bounds=(lower, upper), method="bvls", max_iter=self.params.max_iterations)
            if result.status == 0:
                logger.debug("BVLS stopped at the iteration limit: %s", result.message)
            s = result.x

        return np.clip(s, lower, upper)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(params={self.params})"


def create_least_squares_strategy(
    rcond: Optional[float] = None,
    non_negative: bool = True,
    saturate: bool = True,
    regularization: float = 1e-8,
    max_iterations: Optional[int] = None,
) -> LeastSquaresStrategy:
    """
    Create a least-squares strategy with the given settings.

    Returns
    -------
    LeastSquaresStrategy
        Configured strategy.
    """
    params = LeastSquaresParams(
        rcond=rcond,
        non_negative=non_negative,
        saturate=saturate,
        regularization=regularization,
        max_iterations=max_iterations,
    )
    return LeastSquaresStrategy(params)
