"""Tests for gear limit validation utilities."""
import pytest

from manual_transmission.utils.validation import check_gear_limits, validate_gear_limits


class TestCheckGearLimits:

    def test_valid_limits(self):
        assert check_gear_limits([0, 10, 5, 20, 15, 30, 25, 40, 35, 50]) == []

    def test_reports_every_issue(self):
        issues = check_gear_limits([5, 2, 30, 45, 35, 70, 60, 95, 85, 125])
        assert len(issues) == 3
        assert "gear 1" in issues[0]
        assert issues[1].startswith("Gaps between gear ranges are not allowed")
        assert "first gear" in issues[2]

    def test_wrong_count_short_circuits(self):
        issues = check_gear_limits([0, 10, 5, 20], num_gears=5)
        assert issues == ["Invalid number of gear range arguments: expected 10, got 4"]

    @pytest.mark.parametrize("num_gears", [0, -2, 1.5])
    def test_invalid_number_of_gears(self, num_gears):
        issues = check_gear_limits([0, 10], num_gears=num_gears)
        assert len(issues) == 1
        assert "positive integer" in issues[0]


    def test_oversized_limit_reported(self):
        issues = check_gear_limits([0, 2 ** 63, 5, 2 ** 64], num_gears=2)
        assert len(issues) == 1
        assert "cannot exceed" in issues[0]


class TestValidateGearLimits:

    def test_valid_result(self):
        result = validate_gear_limits([0, 10, 10, 20], num_gears=2)
        assert result['status'] == 'valid'
        assert result['num_gears'] == 2
        assert result['issues'] == []

    def test_invalid_result(self):
        result = validate_gear_limits([0, 10, 15, 20], num_gears=2)
        assert result['status'] == 'invalid'
        assert len(result['issues']) == 1
        assert result['message'] == result['issues'][0]
