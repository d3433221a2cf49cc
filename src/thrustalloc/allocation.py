"""
Staged allocation pipeline for a host simulation.

One allocation cycle for a vehicle runs in three phases:

1. gather   : snapshot every thruster's state and force axis
2. compute  : run a pure strategy on the snapshot
3. apply    : write the strengths back through the clamped setters

Only the apply phase mutates thrusters. ``Thruster`` is not thread-safe, so the
apply phase for a given vehicle must run from a single writer.
"""

import logging
from typing import Dict, Hashable, Mapping, Sequence, Tuple, TypeVar

import numpy as np

from thrustalloc.components import THRUST_DIRECTION, CurrentVelocity, ForceAxis, IntendedVelocity, Thruster
from thrustalloc.strategies.base import ParentInfo, PureStrategy, ThrusterInfo

logger = logging.getLogger(__name__)

ID = TypeVar("ID", bound=Hashable)


def build_blocks(thrusters: Mapping[ID, Tuple[Thruster, ForceAxis]]) -> Dict[ID, ThrusterInfo]:
    """
    Pair each thruster with its force axis.

    Parameters
    ----------
    thrusters : Mapping[ID, (Thruster, ForceAxis)]
        Thruster state and axis per identifier.

    Returns
    -------
    dict
        ``id -> ThrusterInfo`` in the same key order.
    """
    return {
        thruster_id: ThrusterInfo(thruster=thruster, force_axis=force_axis)
        for thruster_id, (thruster, force_axis) in thrusters.items()
    }


def compute_strengths(
    strategy: PureStrategy,
    thrusters: Mapping[ID, Tuple[Thruster, ForceAxis]],
    current_velocity: CurrentVelocity,
    intended_velocity: IntendedVelocity,
) -> Dict[ID, float]:
    """
    Run a strategy on a snapshot of the vehicle's thrusters.

    Returns
    -------
    dict
        Raw strategy output, one entry per thruster. Nothing is mutated.
    """
    blocks = build_blocks(thrusters)
    parent = ParentInfo(current_velocity=current_velocity, intended_velocity=intended_velocity)
    return strategy.calculate(blocks, parent)


def apply_strengths(thrusters: Mapping[ID, Thruster], strengths: Mapping[ID, float]) -> Dict[ID, float]:
    """
    Write strengths into the thrusters' ``current_status``.

    Values outside [0, 1] are clamped by ``Thruster.set_current_status``.

    Parameters
    ----------
    thrusters : Mapping[ID, Thruster]
        Thrusters to update.
    strengths : Mapping[ID, float]
        Strategy output.

    Returns
    -------
    dict
        Status actually stored for each updated thruster.

    Raises
    ------
    KeyError
        If a strength refers to an unknown thruster. Nothing is written in that case.
    """
    missing = [thruster_id for thruster_id in strengths if thruster_id not in thrusters]
    if missing:
        raise KeyError(f"No thruster for ids: {missing!r}")

    applied = {}
    for thruster_id, strength in strengths.items():
        thruster = thrusters[thruster_id]
        thruster.set_current_status(strength)
        applied[thruster_id] = thruster.get_current_status()
    return applied


def run_allocation(
    strategy: PureStrategy,
    thrusters: Mapping[ID, Tuple[Thruster, ForceAxis]],
    current_velocity: CurrentVelocity,
    intended_velocity: IntendedVelocity,
) -> Dict[ID, float]:
    """
    Compute and apply one allocation cycle.

    Parameters
    ----------
    strategy : PureStrategy
        Strategy used for this cycle.
    thrusters : Mapping[ID, (Thruster, ForceAxis)]
        All thrusters of the vehicle.
    current_velocity : CurrentVelocity
        Measured velocity.
    intended_velocity : IntendedVelocity
        Target velocity.

    Returns
    -------
    dict
        Clamped status stored in each thruster.
    """
    strengths = compute_strengths(strategy, thrusters, current_velocity, intended_velocity)
    applied = apply_strengths({thruster_id: pair[0] for thruster_id, pair in thrusters.items()}, strengths)
    logger.debug("%r allocated %d thrusters: %s", strategy, len(applied), applied)
    return applied


def thruster_forces(
    thrusters: Mapping[ID, Thruster],
    direction: Sequence[float] = THRUST_DIRECTION,
) -> Dict[ID, np.ndarray]:
    """
    Physical force of each thruster along its local thrust direction.

    Returns
    -------
    dict
        ``id -> np.ndarray`` of shape (3,).
    """
    return {thruster_id: thruster.force(direction) for thruster_id, thruster in thrusters.items()}
