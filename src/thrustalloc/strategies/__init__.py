"""
Thrust-allocation strategies.

All strategies implement :class:`PureStrategy` and can be swapped at the call
site. Each allocation uses exactly one strategy.

Available Strategies
--------------------
exact_axis : ExactAxisStrategy
    Projects the correction onto each thruster's force axis. Unclamped.

least_squares : LeastSquaresStrategy
    Minimum-norm least-squares fit of all axes to the correction, with
    optional non-negativity and saturation.

Usage
-----
>>> from thrustalloc.strategies import ExactAxisStrategy
>>> strategy = ExactAxisStrategy()

Or use the strategy registry:
>>> from thrustalloc.strategies import get_strategy
>>> strategy = get_strategy('least_squares', params=LeastSquaresParams(saturate=False))
"""

from typing import Dict, Type

from .base import ParentInfo, PureStrategy, ThrusterInfo
from .exact_axis import ExactAxisStrategy, create_exact_axis_strategy
from .least_squares import LeastSquaresParams, LeastSquaresStrategy, create_least_squares_strategy

# Registry mapping strategy names to strategy classes
STRATEGY_REGISTRY: Dict[str, Type[PureStrategy]] = {
    ExactAxisStrategy.name: ExactAxisStrategy,
    LeastSquaresStrategy.name: LeastSquaresStrategy,
}


def get_strategy(name: str, **kwargs) -> PureStrategy:
    """
    Instantiate a strategy by name.

    Parameters
    ----------
    name : str
        Name of the strategy. Options: 'exact_axis', 'least_squares'.
    **kwargs
        Passed to the strategy constructor.

    Returns
    -------
    PureStrategy
        New strategy instance.

    Raises
    ------
    ValueError
        If the strategy name is not recognized.

    Examples
    --------
    >>> strategy = get_strategy('exact_axis')
    >>> strengths = strategy.calculate(blocks, parent)
    """
    if name not in STRATEGY_REGISTRY:
        available = ", ".join(STRATEGY_REGISTRY.keys())
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}")

    return STRATEGY_REGISTRY[name](**kwargs)


def list_strategies() -> list:
    """
    List all available allocation strategies.

    Returns
    -------
    list of str
        Names of available strategies.
    """
    return list(STRATEGY_REGISTRY.keys())


__all__ = [
    "STRATEGY_REGISTRY",
    # Reference strategy
    "ExactAxisStrategy",
    # Least squares
    "LeastSquaresParams",
    "LeastSquaresStrategy",
    # Interface
    "ParentInfo",
    "PureStrategy",
    "ThrusterInfo",
    "create_exact_axis_strategy",
    "create_least_squares_strategy",
    # Registry
    "get_strategy",
    "list_strategies",
]
