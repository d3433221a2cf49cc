#!/usr/bin/env python3
"""
Example 01: Basic Allocation

Demonstrates fundamental thrustalloc usage:
- Describing thrusters with force axes
- Computing strengths with interchangeable strategies
- Applying strengths and reading back physical forces

Vehicle: box with six translation thrusters and two yaw thrusters
"""

import logging

import thrustalloc as ta
from thrustalloc.utils import setup_logging, temporary_log_level


def build_vehicle():
    """Thrusters keyed by name, each with its state and force axis."""
    return {
        "aft": (ta.Thruster(strength_factor=40.0), ta.ForceAxis(forward=1.0)),
        "bow": (ta.Thruster(strength_factor=40.0), ta.ForceAxis(forward=-1.0)),
        "port": (ta.Thruster(strength_factor=20.0), ta.ForceAxis(right=1.0)),
        "starboard": (ta.Thruster(strength_factor=20.0), ta.ForceAxis(right=-1.0)),
        "ventral": (ta.Thruster(strength_factor=20.0), ta.ForceAxis(upwards=1.0)),
        "dorsal": (ta.Thruster(strength_factor=20.0), ta.ForceAxis(upwards=-1.0)),
        "yaw_left": (ta.Thruster(strength_factor=5.0), ta.ForceAxis(turn_right=-1.0)),
        "yaw_right": (ta.Thruster(strength_factor=5.0), ta.ForceAxis(turn_right=1.0)),
    }


def allocation_example(strategy):
    print("=" * 60)
    print(f"Strategy: {strategy!r}")
    print("=" * 60)

    vehicle = build_vehicle()
    current = ta.CurrentVelocity(forward=0.2, right=0.1)
    intended = ta.IntendedVelocity(forward=0.8, turn_right=0.3)

    # Raw scores outside [0, 1] are expected here; silence the clamp warnings
    with temporary_log_level("thrustalloc.components", logging.ERROR):
        applied = ta.run_allocation(strategy, vehicle, current, intended)

    forces = ta.thruster_forces({name: pair[0] for name, pair in vehicle.items()})
    for name, status in applied.items():
        print(f"{name:>10}: status={status:.3f} force={forces[name]}")


def main():
    setup_logging("thrustalloc", level=logging.INFO)
    for name in ta.list_strategies():
        allocation_example(ta.get_strategy(name))


if __name__ == "__main__":
    main()
