"""Tests for transmission status messages."""
import pytest

from manual_transmission.transmission import GearTable, TransmissionStatus, status_after_speed_change


class TestTransmissionStatus:

    def test_ok_statuses(self):
        assert TransmissionStatus.OK.is_ok
        assert TransmissionStatus.MAY_INCREASE_GEAR.is_ok
        assert TransmissionStatus.MAY_DECREASE_GEAR.is_ok

    def test_refusal_statuses(self):
        refusals = [status for status in TransmissionStatus if not status.is_ok]
        assert len(refusals) == 8
        assert all(status.value.startswith("Cannot") for status in refusals)

    def test_str_is_message(self):
        assert str(TransmissionStatus.MIN_GEAR) == "Cannot decrease gear. Reached minimum gear."


class TestStatusAfterSpeedChange:

    @pytest.mark.parametrize("gear, speed, expected", [
        (1, 3, TransmissionStatus.OK),
        (1, 5, TransmissionStatus.MAY_INCREASE_GEAR),
        (2, 9, TransmissionStatus.MAY_DECREASE_GEAR),
        (2, 12, TransmissionStatus.OK),
        (5, 40, TransmissionStatus.MAY_DECREASE_GEAR),
        (5, 45, TransmissionStatus.OK),
    ])
    def test_standard_table(self, gear_table, gear, speed, expected):
        assert status_after_speed_change(gear_table, gear, speed) is expected

    def test_upshift_preferred_over_downshift(self):
        table = GearTable([0, 10, 0, 20, 5, 30], num_gears=3)
        assert status_after_speed_change(table, 2, 7) is TransmissionStatus.MAY_INCREASE_GEAR
