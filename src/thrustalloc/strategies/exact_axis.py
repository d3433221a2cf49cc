"""
Exact-axis projection strategy.

Each thruster's strength is the projection of the desired correction onto its
force axis:

    aim = intended_velocity - current_velocity
    s_i = axis_i · aim

A thruster pointing along the needed correction gets the largest score, one
opposing it gets a negative score. Scores are returned unclamped. Negative and
greater-than-one values are clamped when written to
``Thruster.current_status``, which keeps the projection itself a plain linear
map.
"""

from typing import Dict, Mapping

from thrustalloc.strategies.base import ID, ParentInfo, PureStrategy, ThrusterInfo


class ExactAxisStrategy(PureStrategy[ID]):
    """
    Score every thruster by the dot product of its axis with the correction.

    Examples
    --------
    >>> from thrustalloc import CurrentVelocity, ForceAxis, IntendedVelocity, Thruster
    >>> blocks = {"main": ThrusterInfo(Thruster(), ForceAxis(forward=1.0))}
    >>> parent = ParentInfo(CurrentVelocity(), IntendedVelocity(forward=2.0))
    >>> ExactAxisStrategy().calculate(blocks, parent)
    {'main': 2.0}
    """

    name = "exact_axis"

    def calculate(self, blocks: Mapping[ID, ThrusterInfo], parent: ParentInfo) -> Dict[ID, float]:
        aim = parent.difference()
        return {thruster_id: info.force_axis.dot(aim) for thruster_id, info in blocks.items()}


def create_exact_axis_strategy() -> ExactAxisStrategy:
    """Create the reference projection strategy."""
    return ExactAxisStrategy()
