"""
Pytest configuration and shared fixtures for thrustalloc tests.
"""

import numpy as np
import pytest

from thrustalloc import CurrentVelocity, ForceAxis, IntendedVelocity, ParentInfo, Thruster, ThrusterInfo, Vec6

# =============================================================================
# Random Seed Fixture
# =============================================================================


@pytest.fixture
def rng():
    """Provide a seeded random number generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vec6(rng):
    """Generate a random Vec6."""

    def _random_vec6(scale=1.0):
        return Vec6.from_array(scale * rng.standard_normal(6))

    return _random_vec6


# =============================================================================
# Tolerance Fixtures
# =============================================================================


@pytest.fixture
def atol():
    """Absolute tolerance for floating point comparisons."""
    return 1e-10


@pytest.fixture
def rtol():
    """Relative tolerance for floating point comparisons."""
    return 1e-6


# =============================================================================
# Vehicle Fixtures
# =============================================================================


@pytest.fixture
def box_thrusters():
    """Six translation thrusters, one per direction, keyed by name."""
    return {
        "aft": (Thruster(), ForceAxis(forward=1.0)),
        "bow": (Thruster(), ForceAxis(forward=-1.0)),
        "port": (Thruster(), ForceAxis(right=1.0)),
        "starboard": (Thruster(), ForceAxis(right=-1.0)),
        "ventral": (Thruster(), ForceAxis(upwards=1.0)),
        "dorsal": (Thruster(), ForceAxis(upwards=-1.0)),
    }


@pytest.fixture
def make_parent():
    """Build a ParentInfo from current and intended Vec6 values."""

    def _make_parent(current=None, intended=None):
        current = current if current is not None else Vec6()
        intended = intended if intended is not None else Vec6()
        return ParentInfo(
            current_velocity=CurrentVelocity(*current),
            intended_velocity=IntendedVelocity(*intended),
        )

    return _make_parent


@pytest.fixture
def make_blocks():
    """Build strategy input from a mapping of id -> ForceAxis."""

    def _make_blocks(axes):
        return {thruster_id: ThrusterInfo(Thruster(), axis) for thruster_id, axis in axes.items()}

    return _make_blocks


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
