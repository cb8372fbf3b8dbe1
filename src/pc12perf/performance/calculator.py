"""Cruise performance lookup for the PC-12/47E.

This module derives maximum cruise torque, fuel flow, and true airspeed
from pressure altitude and static air temperature using the POH tables in
pc12perf.performance.tables.

Torque is only defined inside the charted envelope; outside it the result
is None. Fuel flow and airspeed report 0 when no value can be looked up.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from pc12perf.avionics.base import AvionicsReading
from pc12perf.performance import tables
from pc12perf.performance.aircraft import AircraftType, WeightClass

logger = logging.getLogger(__name__)

MIN_ALTITUDE_FT = 10000
MAX_ALTITUDE_FT = 30000
ISA_SEA_LEVEL_TEMP_C = 15
ISA_LAPSE_RATE_C_PER_1000FT = 2


@dataclass(frozen=True)
class PerfData:
    """Cruise performance figures.

    Attributes:
        torque_psi: Maximum cruise torque (psi), None outside the envelope
        fuel_flow_lb_per_h: Fuel flow (lb/h), 0 if unavailable
        airspeed_kt: True airspeed (kt), 0 if unavailable
    """

    torque_psi: float | None
    fuel_flow_lb_per_h: int
    airspeed_kt: int


def _round_half_up(value: float) -> float:
    return int(value * 100 + 0.5) / 100


def _altitude_thousands(altitude_ft: float) -> int:
    return int((altitude_ft + 500) / 1000)


def isa_deviation(altitude_ft: float, outside_temp_c: float) -> float:
    """Deviation from the standard atmosphere temperature at this altitude.

    Args:
        altitude_ft: Pressure altitude (ft).
        outside_temp_c: Static air temperature (°C).

    Returns:
        Temperature above (positive) or below ISA (°C).
    """
    return (
        outside_temp_c
        + _altitude_thousands(altitude_ft) * ISA_LAPSE_RATE_C_PER_1000FT
        - ISA_SEA_LEVEL_TEMP_C
    )


def _isa_column(deviation: int) -> int:
    return int((deviation - tables.ISA_DEVIATION_INDEX[0]) // 10)


def interpolate_isa(row: np.ndarray, isa: float) -> float:
    """Interpolate one table row at an ISA deviation.

    Deviations beyond the first or last column are clamped to it. Between
    columns the value moves from the column nearer ISA toward the next one
    away from ISA.

    Args:
        row: Table row, one cell per ISA_DEVIATION_INDEX entry.
        isa: ISA deviation (°C).

    Returns:
        Interpolated value, NaN if a cell involved is undefined.
    """
    if isa <= tables.ISA_DEVIATION_INDEX[0]:
        return float(row[0])
    if isa >= tables.ISA_DEVIATION_INDEX[-1]:
        return float(row[-1])

    near = math.trunc(isa / 10) * 10
    frac = (abs(isa) % 10) / 10
    near_value = float(row[_isa_column(near)])
    if frac == 0:
        return near_value

    far = near + 10 if isa > 0 else near - 10
    far_value = float(row[_isa_column(far)])
    return near_value + (far_value - near_value) * frac


class PerformanceEngine:
    """Look up cruise performance in the POH tables.

    Examples:
        >>> engine = PerformanceEngine()
        >>> perf = engine.compute(
        ...     AvionicsReading(altitude_ft=21000, outside_temp_c=-22),
        ...     AircraftType.MSN_1576_1942_5_BLADE,
        ...     WeightClass.LBS_8000,
        ... )
        >>> perf.fuel_flow_lb_per_h, perf.airspeed_kt
        (389, 277)
    """

    def __init__(
        self,
        torque_tables: Mapping[AircraftType, np.ndarray] | None = None,
        fuel_flow_tables: Mapping[AircraftType, np.ndarray] | None = None,
        airspeed_tables: Mapping[AircraftType, np.ndarray] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            torque_tables: Torque table per airframe, 21 x 55.
            fuel_flow_tables: Fuel flow table per airframe, 11 x 8.
            airspeed_tables: Airspeed table per airframe, 5 x 11 x 8.
        """
        self.torque_tables = torque_tables or tables.TORQUE_TABLES
        self.fuel_flow_tables = fuel_flow_tables or tables.FUEL_FLOW_TABLES
        self.airspeed_tables = airspeed_tables or tables.AIRSPEED_TABLES

    def compute(
        self,
        reading: AvionicsReading,
        aircraft_type: AircraftType,
        weight_class: WeightClass,
    ) -> PerfData:
        """Compute all cruise figures for a reading.

        Args:
            reading: Altitude and temperature from a gateway.
            aircraft_type: Airframe selected in settings.
            weight_class: Gross weight bucket selected in settings.

        Returns:
            Torque, fuel flow, and airspeed.
        """
        perf = PerfData(
            torque_psi=self.compute_torque(
                reading.altitude_ft, reading.outside_temp_c, aircraft_type
            ),
            fuel_flow_lb_per_h=self.compute_fuel_flow(
                reading.altitude_ft, reading.outside_temp_c, aircraft_type
            ),
            airspeed_kt=self.compute_airspeed(
                reading.altitude_ft, reading.outside_temp_c, aircraft_type, weight_class
            ),
        )
        logger.debug(
            "Perf at %s ft %s °C (%s, %s): %s",
            reading.altitude_ft,
            reading.outside_temp_c,
            aircraft_type.name,
            weight_class.label,
            perf,
        )
        return perf

    def compute_torque(
        self, altitude_ft: float, outside_temp_c: float, aircraft_type: AircraftType
    ) -> float | None:
        """Look up maximum cruise torque.

        Temperatures between two SAT_TEMP_INDEX entries take the mean of the
        two cells, rounded half up to 0.01 psi.

        Args:
            altitude_ft: Pressure altitude (ft).
            outside_temp_c: Static air temperature (°C).
            aircraft_type: Airframe.

        Returns:
            Torque (psi), or None outside the charted envelope.
        """
        sat_index = tables.SAT_TEMP_INDEX
        if not MIN_ALTITUDE_FT <= altitude_ft <= MAX_ALTITUDE_FT:
            logger.info("Torque: altitude %s ft out of range", altitude_ft)
            return None
        if not sat_index[0] <= outside_temp_c <= sat_index[-1]:
            logger.info("Torque: temperature %s °C out of range", outside_temp_c)
            return None

        row = self.torque_tables[aircraft_type][_altitude_thousands(altitude_ft) - 10]
        column = int(np.searchsorted(sat_index, outside_temp_c, side="left"))

        if sat_index[column] == outside_temp_c:
            torque = float(row[column])
        else:
            torque = (float(row[column]) + float(row[column - 1])) / 2

        # Uncharted cells are NaN; either neighbour makes the mean undefined
        if math.isnan(torque):
            logger.info("Torque: %s ft %s °C outside envelope", altitude_ft, outside_temp_c)
            return None
        if sat_index[column] != outside_temp_c:
            torque = _round_half_up(torque)
        return torque

    def compute_fuel_flow(
        self, altitude_ft: float, outside_temp_c: float, aircraft_type: AircraftType
    ) -> int:
        """Look up cruise fuel flow.

        Args:
            altitude_ft: Pressure altitude (ft).
            outside_temp_c: Static air temperature (°C).
            aircraft_type: Airframe.

        Returns:
            Fuel flow (lb/h), 0 if unavailable.
        """
        return self._lookup(self.fuel_flow_tables[aircraft_type], altitude_ft, outside_temp_c)

    def compute_airspeed(
        self,
        altitude_ft: float,
        outside_temp_c: float,
        aircraft_type: AircraftType,
        weight_class: WeightClass,
    ) -> int:
        """Look up cruise true airspeed.

        Args:
            altitude_ft: Pressure altitude (ft).
            outside_temp_c: Static air temperature (°C).
            aircraft_type: Airframe.
            weight_class: Gross weight bucket.

        Returns:
            True airspeed (kt), 0 if unavailable.
        """
        table = self.airspeed_tables[aircraft_type][weight_class.index]
        return self._lookup(table, altitude_ft, outside_temp_c)

    def _lookup(self, table: np.ndarray, altitude_ft: float, outside_temp_c: float) -> int:
        """Interpolate a 2000 ft x ISA deviation table; odd thousands average two rows."""
        thousands = _altitude_thousands(altitude_ft)
        if not MIN_ALTITUDE_FT // 1000 <= thousands <= MAX_ALTITUDE_FT // 1000:
            logger.info("Lookup: altitude %s ft out of range", altitude_ft)
            return 0

        if thousands % 2 == 0:
            rows = [thousands // 2 - 5]
        else:
            rows = [(thousands - 1) // 2 - 5, (thousands + 1) // 2 - 5]

        isa = isa_deviation(altitude_ft, outside_temp_c)
        value = sum(interpolate_isa(table[r], isa) for r in rows) / len(rows)

        if math.isnan(value):
            logger.info("Lookup: %s ft ISA%+g outside charted envelope", altitude_ft, isa)
            return 0
        return int(value)
