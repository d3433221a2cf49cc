"""
Smoke tests to verify package imports and basic functionality.

These tests run quickly and verify that the package is correctly installed.
"""

import pytest


class TestPackageImports:
    """Test that all package components can be imported."""

    def test_import_package(self):
        """Package should be importable."""
        import thrustalloc  # noqa: PLC0415

        assert hasattr(thrustalloc, "__version__")

    def test_import_vector_types(self):
        """Vector types should be importable."""
        from thrustalloc import Relative6DVector, Vec6  # noqa: PLC0415

        assert Vec6 is not None
        assert Relative6DVector is not None

    def test_import_strategies(self):
        """Strategies should be importable."""
        from thrustalloc import ExactAxisStrategy, PureStrategy, get_strategy  # noqa: PLC0415

        assert issubclass(ExactAxisStrategy, PureStrategy)
        assert callable(get_strategy)

    def test_import_utils(self):
        """Logging utilities should be importable."""
        from thrustalloc.utils import setup_logging, temporary_log_level  # noqa: PLC0415

        assert callable(setup_logging)
        assert callable(temporary_log_level)

    def test_all_exports_exist(self):
        """Every name in __all__ should resolve."""
        import thrustalloc  # noqa: PLC0415

        for name in thrustalloc.__all__:
            assert hasattr(thrustalloc, name), name


class TestBasicFunctionality:
    """Quick tests for basic functionality."""

    def test_version_string(self):
        """Version should be a valid string."""
        import thrustalloc  # noqa: PLC0415

        assert isinstance(thrustalloc.__version__, str)
        assert len(thrustalloc.__version__) > 0

    def test_exact_axis_runs(self):
        """Reference strategy should run without error."""
        import thrustalloc as ta  # noqa: PLC0415

        thrusters = {0: (ta.Thruster(), ta.ForceAxis(forward=1.0))}
        applied = ta.run_allocation(
            ta.ExactAxisStrategy(), thrusters, ta.CurrentVelocity(), ta.IntendedVelocity(forward=0.5)
        )
        assert applied == {0: 0.5}

    @pytest.mark.parametrize("name", ["exact_axis", "least_squares"])
    def test_registered_strategy_runs(self, name):
        """Every registered strategy should run without error."""
        import thrustalloc as ta  # noqa: PLC0415

        thrusters = {"a": (ta.Thruster(), ta.ForceAxis(right=1.0))}
        strengths = ta.compute_strengths(
            ta.get_strategy(name), thrusters, ta.CurrentVelocity(), ta.IntendedVelocity(right=0.25)
        )
        assert strengths["a"] == pytest.approx(0.25)
