"""
Test suite for the Ok/Degraded result types.

System role: Verification of degradation signalling
"""

import dataclasses

import pytest

from backend.core.result import Degraded, Ok


class TestResultTypes:
    """Test suite for Ok and Degraded."""

    def test_ok_should_not_be_degraded(self) -> None:
        """Test Ok exposes its data with no cause."""
        # Act
        result = Ok([1, 2])

        # Assert
        assert result.data == [1, 2]
        assert result.is_degraded is False
        assert result.cause is None

    def test_degraded_should_carry_cause_and_error(self) -> None:
        """Test Degraded keeps fallback data, cause and triggering exception."""
        # Arrange
        error = RuntimeError("store down")

        # Act
        result = Degraded(["fallback"], cause="store_error", error=error)

        # Assert
        assert result.is_degraded is True
        assert result.data == ["fallback"]
        assert result.cause == "store_error"
        assert result.error is error

    def test_results_should_be_immutable(self) -> None:
        """Test result fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ok("x").data = "y"
