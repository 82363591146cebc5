"""
Status messages for the manual transmission model.

Every operation on a transmission leaves behind one of these advisory
messages. Refusals (the ``CANNOT_*`` members) are not errors: the operation is
simply a no-op and the message explains what the driver has to do first.
"""

from enum import Enum

from .gear_table import GearTable


class TransmissionStatus(Enum):
    """Enumeration of transmission status messages."""
    OK = "OK: everything is OK."
    MAY_INCREASE_GEAR = "OK: you may increase the gear."
    MAY_DECREASE_GEAR = "OK: you may decrease the gear."
    MAX_SPEED = "Cannot increase speed. Reached maximum speed."
    INCREASE_GEAR_FIRST = "Cannot increase speed, increase gear first."
    MIN_SPEED = "Cannot decrease speed. Reached minimum speed."
    DECREASE_GEAR_FIRST = "Cannot decrease speed, decrease gear first."
    MAX_GEAR = "Cannot increase gear. Reached maximum gear."
    INCREASE_SPEED_FIRST = "Cannot increase gear, increase speed first."
    MIN_GEAR = "Cannot decrease gear. Reached minimum gear."
    DECREASE_SPEED_FIRST = "Cannot decrease gear, decrease speed first."

    @property
    def is_ok(self) -> bool:
        """True for statuses left by an operation that changed the state."""
        return self.value.startswith("OK")

    def __str__(self) -> str:
        return self.value


def status_after_speed_change(gear_table: GearTable, gear: int, speed: int) -> TransmissionStatus:
    """
    Derive the status following a successful speed change.

    An available upshift is reported in preference to an available downshift.

    Args:
        gear_table: Gear ranges of the transmission
        gear: Current gear (1-based)
        speed: Speed after the change

    Returns:
        Status describing which gear changes are now possible
    """
    if gear < gear_table.num_gears and speed >= gear_table.lower(gear + 1):
        return TransmissionStatus.MAY_INCREASE_GEAR
    if gear > 1 and speed <= gear_table.upper(gear - 1):
        return TransmissionStatus.MAY_DECREASE_GEAR
    return TransmissionStatus.OK
