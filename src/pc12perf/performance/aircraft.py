"""Airframe and weight selections for the PC-12/47E performance tables."""

from enum import Enum


class AircraftType(Enum):
    """PC-12/47E airframe variants with distinct performance tables.

    Values are the serial number range and propeller, as labelled in the POH
    supplements.
    """

    MSN_1451_1942_4_BLADE = "PC-12/47E MSN 1451-1942 4 Blade"
    MSN_1576_1942_5_BLADE = "PC-12/47E MSN 1576-1942 5 Blade"
    MSN_2001_5_BLADE = "PC-12/47E MSN 2001+ 5 Blade"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "AircraftType":
        return cls.MSN_1576_1942_5_BLADE


class WeightClass(Enum):
    """Gross weight buckets of the cruise airspeed tables.

    The value is the weight in pounds. Weight is only ever used to pick an
    airspeed table plane, never interpolated.
    """

    LBS_7000 = 7000
    LBS_8000 = 8000
    LBS_9000 = 9000
    LBS_10000 = 10000
    LBS_10400 = 10400

    @property
    def pounds(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return f"{self.value} lbs"

    @property
    def index(self) -> int:
        """Plane of this weight in the airspeed tables."""
        return list(WeightClass).index(self)

    @classmethod
    def default(cls) -> "WeightClass":
        return cls.LBS_8000
