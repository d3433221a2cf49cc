"""
Abstract base class for thrust-allocation strategies.

A strategy maps every candidate thruster of a vehicle to a firing strength,
given the thrusters' force axes and the vehicle's current and intended
velocity. Strategies are pure: they read their inputs, never mutate them and
return a freshly built mapping.

The thruster identifier is a type parameter, so strategies work with any
hashable key the host storage uses (entity handles, integers, strings, ...).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Mapping, TypeVar

from thrustalloc.components import CurrentVelocity, ForceAxis, IntendedVelocity, Thruster
from thrustalloc.vector import Vec6

ID = TypeVar("ID", bound=Hashable)


@dataclass(frozen=True)
class ThrusterInfo:
    """Read-only view of one thruster and its force axis."""

    thruster: Thruster
    force_axis: ForceAxis


@dataclass(frozen=True)
class ParentInfo:
    """Read-only view of the velocities of the vehicle owning the thrusters."""

    current_velocity: CurrentVelocity
    intended_velocity: IntendedVelocity

    def difference(self) -> Vec6:
        """
        Correction the thrusters should produce.

        Returns
        -------
        Vec6
            ``intended_velocity - current_velocity``, recomputed on each call.
        """
        return self.intended_velocity.get_generic() - self.current_velocity.get_generic()


class PureStrategy(ABC, Generic[ID]):
    """
    Abstract base class for allocation strategies.

    Implementations must:

    - return exactly one entry per key of ``blocks`` (nothing added, nothing
      dropped), so an empty mapping yields an empty dict;
    - leave ``blocks`` and ``parent`` untouched and perform no I/O;
    - be deterministic for identical inputs;
    - never raise for well-formed inputs. A thruster that cannot be scored
      gets ``0.0``.

    Scores are nominally in [0, 1]. Whether a strategy clamps is up to the
    implementation; ``Thruster.set_current_status`` clamps on assignment.
    """

    #: Key in the strategy registry
    name: str = ""

    @abstractmethod
    def calculate(self, blocks: Mapping[ID, ThrusterInfo], parent: ParentInfo) -> Dict[ID, float]:
        """
        Compute a strength for every thruster.

        Parameters
        ----------
        blocks : Mapping[ID, ThrusterInfo]
            All candidate thrusters of the vehicle.
        parent : ParentInfo
            Current and intended velocity of the vehicle.

        Returns
        -------
        dict
            Mapping from each key of ``blocks`` to its strength.
        """
        pass

    def __call__(self, blocks: Mapping[ID, ThrusterInfo], parent: ParentInfo) -> Dict[ID, float]:
        return self.calculate(blocks, parent)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
