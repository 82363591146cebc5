"""Tests for the manual transmission state machine."""
import random

import pytest

from manual_transmission.transmission import (
    InvalidConfiguration,
    ManualTransmission,
    RegularManualTransmission,
    TransmissionState,
    TransmissionStatus,
    create_regular_transmission,
)

OK = "OK: everything is OK."
MAY_INCREASE = "OK: you may increase the gear."
MAY_DECREASE = "OK: you may decrease the gear."


def _drive_to(transmission, speed):
    while transmission.get_speed() < speed:
        transmission.increase_speed()


class TestConstruction:

    def test_initial_conditions(self, transmission):
        assert transmission.get_speed() == 0
        assert transmission.get_gear() == 1
        assert transmission.get_status() == OK

    def test_invalid_gear_ranges(self):
        with pytest.raises(InvalidConfiguration):
            RegularManualTransmission(7, 10, 8, 20, 15, 30, 28, 40, 35, 50)

    def test_lower_limit_greater_than_upper_limit(self):
        with pytest.raises(InvalidConfiguration, match="cannot be higher"):
            RegularManualTransmission(0, 4, 3, 20, 45, 20, 25, 40, 35, 50)

    def test_first_gear_lower_speed_not_zero(self):
        with pytest.raises(InvalidConfiguration, match="first gear"):
            RegularManualTransmission(1, 10, 10, 20, 20, 30, 30, 40, 40, 50)

    def test_gap_between_gears(self):
        with pytest.raises(InvalidConfiguration, match="Gaps"):
            RegularManualTransmission(0, 10, 15, 20, 10, 10, 30, 40, 35, 50)

    def test_non_overlapping_ranges(self):
        with pytest.raises(InvalidConfiguration):
            RegularManualTransmission(0, 10, 15, 20, 25, 30, 35, 40, 45, 50)

    @pytest.mark.parametrize("limits", [
        (),
        (0, 10, 5, 20, 15, 30, 25, 40, 35),
        (0, 10, 5, 20, 15, 30, 25, 40, 35, 50, 45, 60),
    ])
    def test_wrong_argument_count(self, limits):
        with pytest.raises(InvalidConfiguration, match="number of gear range arguments"):
            RegularManualTransmission(*limits)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            RegularManualTransmission(0, 10)

    def test_touching_ranges_are_valid(self):
        transmission = RegularManualTransmission(0, 10, 10, 20, 20, 30, 30, 40, 40, 50)
        assert transmission.get_state() == TransmissionState(0, 1, OK)

    def test_custom_number_of_gears(self):
        transmission = RegularManualTransmission(0, 10, 5, 20, 15, 30, num_gears=3)
        assert transmission.num_gears == 3
        assert transmission.gear_table.max_speed == 30

    def test_count_must_match_number_of_gears(self):
        with pytest.raises(InvalidConfiguration):
            RegularManualTransmission(0, 10, 5, 20, 15, 30, 25, 40, 35, 50, num_gears=3)

    def test_from_gear_table(self, gear_table):
        transmission = RegularManualTransmission.from_gear_table(gear_table)
        assert transmission.gear_table is gear_table
        assert transmission.get_state() == TransmissionState(0, 1, OK)

    def test_create_regular_transmission_uses_reference_table(self):
        transmission = create_regular_transmission()
        assert transmission.gear_table.as_limits() == [0, 10, 5, 20, 15, 30, 25, 40, 35, 50]

    def test_oversized_limits_raise_invalid_configuration(self):
        with pytest.raises(InvalidConfiguration):
            RegularManualTransmission(0, 2 ** 63, num_gears=1)

    def test_interface_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ManualTransmission()


class TestSpeedChanges:

    def test_increase_speed_within_range(self, transmission):
        transmission.increase_speed()
        assert transmission.get_speed() == 1
        assert transmission.get_status() == OK

    def test_increase_speed_into_next_gear_range(self, transmission):
        _drive_to(transmission, 5)
        assert transmission.get_status() == MAY_INCREASE

    def test_increase_speed_at_upper_limit(self, transmission):
        for _ in range(10):
            transmission.increase_speed()
        assert transmission.get_speed() == 10
        assert transmission.get_status() == MAY_INCREASE

    def test_increase_speed_beyond_gear_limit(self, transmission):
        for _ in range(51):
            transmission.increase_speed()
        assert transmission.get_speed() == 10
        assert transmission.get_status() == "Cannot increase speed, increase gear first."

    def test_decrease_speed_within_range(self, transmission):
        transmission.increase_speed()
        transmission.decrease_speed()
        assert transmission.get_speed() == 0
        assert transmission.get_status() == OK

    def test_decrease_speed_at_lower_limit(self, transmission):
        transmission.increase_speed()
        transmission.decrease_speed()
        transmission.decrease_speed()
        assert transmission.get_speed() == 0
        assert transmission.get_status() == "Cannot decrease speed. Reached minimum speed."

    def test_decrease_speed_below_min(self, transmission):
        transmission.decrease_speed()
        assert transmission.get_speed() == 0
        assert transmission.get_status() == "Cannot decrease speed. Reached minimum speed."

    def test_decrease_speed_advises_downshift(self, transmission):
        _drive_to(transmission, 10)
        transmission.increase_gear()
        transmission.decrease_speed()
        assert transmission.get_speed() == 9
        assert transmission.get_gear() == 2
        assert transmission.get_status() == MAY_DECREASE

    def test_decrease_speed_at_gear_lower_limit(self, transmission):
        _drive_to(transmission, 10)
        transmission.increase_gear()
        for _ in range(6):
            transmission.decrease_speed()
        assert transmission.get_speed() == 5
        assert transmission.get_status() == "Cannot decrease speed, decrease gear first."

    def test_reaching_maximum_speed(self, transmission):
        for target in (10, 20, 30, 40):
            _drive_to(transmission, target)
            transmission.increase_gear()
        _drive_to(transmission, 50)
        assert transmission.get_gear() == 5
        transmission.increase_speed()
        assert transmission.get_speed() == 50
        assert transmission.get_status() == "Cannot increase speed. Reached maximum speed."

    def test_maximum_speed_reported_before_gear_limit(self):
        transmission = RegularManualTransmission(0, 10, 5, 10, num_gears=2)
        _drive_to(transmission, 10)
        transmission.increase_speed()
        assert transmission.get_gear() == 1
        assert transmission.get_status() == "Cannot increase speed. Reached maximum speed."

    def test_upshift_advice_takes_priority(self):
        transmission = RegularManualTransmission(0, 10, 0, 20, 5, 30, num_gears=3)
        transmission.increase_gear()
        assert transmission.get_gear() == 2

        transmission.increase_speed()
        assert transmission.get_status() == MAY_DECREASE

        _drive_to(transmission, 5)
        # Both a downshift (5 <= 10) and an upshift (5 >= 5) are possible here
        assert transmission.get_status() == MAY_INCREASE

    def test_speed_between_neighbour_ranges(self, transmission):
        _drive_to(transmission, 10)
        transmission.increase_gear()
        transmission.increase_speed()
        assert transmission.get_speed() == 11
        assert transmission.get_status() == OK


class TestGearChanges:

    def test_increase_gear_requires_speed(self, transmission):
        transmission.increase_speed().increase_speed()
        transmission.increase_gear()
        assert transmission.get_gear() == 1
        assert transmission.get_status() == "Cannot increase gear, increase speed first."

    def test_increase_gear_at_standstill(self, transmission):
        transmission.increase_gear()
        assert transmission.get_gear() == 1
        assert transmission.get_status() == "Cannot increase gear, increase speed first."

    def test_decrease_gear_below_min(self, transmission):
        transmission.decrease_gear()
        assert transmission.get_gear() == 1
        assert transmission.get_status() == "Cannot decrease gear. Reached minimum gear."

    def test_decrease_gear_after_refused_upshift(self, transmission):
        transmission.increase_speed().increase_speed()
        transmission.increase_gear()
        transmission.decrease_gear()
        assert transmission.get_gear() == 1
        assert transmission.get_status() == "Cannot decrease gear. Reached minimum gear."

    def test_shift_up_and_back_down(self, transmission):
        _drive_to(transmission, 10)
        transmission.increase_gear()
        assert transmission.get_gear() == 2
        assert transmission.get_status() == OK

        transmission.decrease_gear()
        assert transmission.get_gear() == 1
        assert transmission.get_speed() == 10
        assert transmission.get_status() == OK

    def test_decrease_gear_requires_lower_speed(self, transmission):
        _drive_to(transmission, 10)
        transmission.increase_gear()
        transmission.increase_speed()
        transmission.decrease_gear()
        assert transmission.get_gear() == 2
        assert transmission.get_status() == "Cannot decrease gear, decrease speed first."

    def test_cannot_increase_gear_beyond_max(self, transmission):
        transmission.increase_speed()
        for _ in range(1, 5):
            while transmission.get_status() != MAY_INCREASE:
                transmission.increase_speed()
            transmission.increase_gear()

        assert transmission.get_gear() == 5

        transmission.increase_gear()
        assert transmission.get_gear() == 5
        assert transmission.get_status() == "Cannot increase gear. Reached maximum gear."

    def test_gear_change_resets_status(self, transmission):
        _drive_to(transmission, 10)
        transmission.increase_gear()
        _drive_to(transmission, 20)
        assert transmission.get_status() == MAY_INCREASE

        transmission.increase_gear()
        # Speed 20 still allows second gear, but a gear change always reports OK
        assert transmission.get_gear() == 3
        assert transmission.get_status() == OK

    def test_single_gear_transmission(self):
        transmission = RegularManualTransmission(0, 10, num_gears=1)
        transmission.increase_gear()
        assert transmission.get_status() == "Cannot increase gear. Reached maximum gear."
        transmission.decrease_gear()
        assert transmission.get_status() == "Cannot decrease gear. Reached minimum gear."
        _drive_to(transmission, 10)
        assert transmission.get_status() == OK
        transmission.increase_speed()
        assert transmission.get_status() == "Cannot increase speed. Reached maximum speed."


class TestChainingAndState:

    def test_operations_return_self(self, transmission):
        assert transmission.increase_speed() is transmission
        assert transmission.decrease_speed() is transmission
        assert transmission.increase_gear() is transmission
        assert transmission.decrease_gear() is transmission

    def test_chained_calls(self, transmission):
        transmission.increase_speed().increase_speed().increase_speed()
        assert transmission.get_speed() == 3

    def test_get_state_snapshot(self, transmission):
        transmission.increase_speed().increase_speed()
        state = transmission.get_state()
        assert state == TransmissionState(speed=2, gear=1, status=OK)

        transmission.increase_speed()
        assert state.speed == 2

    def test_status_code(self, transmission):
        transmission.decrease_speed()
        assert transmission.get_status_code() is TransmissionStatus.MIN_SPEED

    def test_repr(self, transmission):
        assert repr(transmission) == "RegularManualTransmission(speed=0, gear=1, status='OK: everything is OK.')"


class TestReachableStates:

    OPERATIONS = ['increase_speed', 'decrease_speed', 'increase_gear', 'decrease_gear']

    def test_random_walk_invariants(self, transmission):
        rng = random.Random(42)
        table = transmission.gear_table

        for _ in range(2000):
            speed, gear = transmission.get_speed(), transmission.get_gear()
            getattr(transmission, rng.choice(self.OPERATIONS))()
            new_speed, new_gear = transmission.get_speed(), transmission.get_gear()

            assert 0 <= new_speed <= table.max_speed
            assert 1 <= new_gear <= table.num_gears
            assert abs(new_speed - speed) + abs(new_gear - gear) <= 1
            assert table.get_range(new_gear).contains(new_speed)

            if new_gear > gear:
                assert new_speed >= table.lower(new_gear)
            elif new_gear < gear:
                assert new_speed <= table.upper(new_gear)

            if (new_speed, new_gear) == (speed, gear):
                assert not transmission.get_status_code().is_ok

    def test_increase_then_decrease_restores_speed(self, transmission):
        rng = random.Random(7)

        for _ in range(500):
            speed = transmission.get_speed()
            transmission.increase_speed()
            if transmission.get_speed() != speed:
                transmission.decrease_speed()
                assert transmission.get_speed() == speed
            getattr(transmission, rng.choice(self.OPERATIONS))()
