"""
thrustalloc - Thrust Allocation for Multi-Thruster Vehicles.

This library computes per-thruster firing strengths so that the combined
thrust of a vehicle best matches a desired 6-DOF velocity correction.

Allocation strategies live in the `thrustalloc.strategies` submodule:
    from thrustalloc.strategies import ExactAxisStrategy, get_strategy
"""

__version__ = "0.1.0"

from thrustalloc.allocation import (
    apply_strengths,
    build_blocks,
    compute_strengths,
    run_allocation,
    thruster_forces,
)
from thrustalloc.components import (
    THRUST_DIRECTION,
    CurrentVelocity,
    ForceAxis,
    IntendedVelocity,
    Thruster,
)
from thrustalloc.strategies import (
    STRATEGY_REGISTRY,
    ExactAxisStrategy,
    LeastSquaresParams,
    LeastSquaresStrategy,
    ParentInfo,
    PureStrategy,
    ThrusterInfo,
    create_exact_axis_strategy,
    create_least_squares_strategy,
    get_strategy,
    list_strategies,
)
from thrustalloc.vector import FIELD_NAMES, Relative6DVector, SixAxisRecord, Vec6, to_vec6

__all__ = [
    # Velocities
    "CurrentVelocity",
    # Strategies
    "ExactAxisStrategy",
    "FIELD_NAMES",
    # Components
    "ForceAxis",
    "IntendedVelocity",
    "LeastSquaresParams",
    "LeastSquaresStrategy",
    "ParentInfo",
    "PureStrategy",
    # Vectors
    "Relative6DVector",
    "STRATEGY_REGISTRY",
    "SixAxisRecord",
    "THRUST_DIRECTION",
    "Thruster",
    "ThrusterInfo",
    "Vec6",
    "__version__",
    # Pipeline
    "apply_strengths",
    "build_blocks",
    "compute_strengths",
    "create_exact_axis_strategy",
    "create_least_squares_strategy",
    "get_strategy",
    "list_strategies",
    "run_allocation",
    "thruster_forces",
    "to_vec6",
]
