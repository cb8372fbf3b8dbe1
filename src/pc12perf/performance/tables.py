"""Cruise performance tables for the PC-12/47E.

Torque tables come from the POH maximum cruise power charts: one row per
1000 ft from 10000 to 30000 ft, one column per SAT_TEMP_INDEX entry. Cells
outside the charted envelope are NaN.

Fuel flow and airspeed tables have one row per 2000 ft from 10000 to 30000
ft and one column per ISA_DEVIATION_INDEX entry. Airspeed tables carry one
plane per WeightClass, in WeightClass order. Their values are representative,
not certified POH data; replace them before operational use.
"""

# ruff: noqa: E501

import numpy as np

from pc12perf.performance.aircraft import AircraftType

nan = np.nan

# Static air temperature (°C) of each torque column. Steps are 2 °C in the
# cold range, 1 °C around zero, then 2 °C again.
SAT_TEMP_INDEX = np.array(
    [-55, -53, -51, -49, -47, -45, -43, -41, -39, -37, -35, -33, -31, -29, -27, -25, -23, -21,
     -20, -19, -18, -17, -16, -15, -14, -13, -12, -11, -10, -9, -8, -7, -6, -5, -4, -3, -2, -1,
     0, 1, 2, 3, 4, 5, 6, 7, 8, 10, 12, 14, 16, 18, 20, 22, 24]
)

# ISA deviation (°C) of each fuel flow and airspeed column.
ISA_DEVIATION_INDEX = np.array([-40, -30, -20, -10, 0, 10, 20, 30])

# Torque (psi), MSN 1451-1942 4 blade.
_TORQUE_1451_1942_4_BLADE = np.array(
    [
        [nan, nan, nan, nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.8, 36.8, 36.3, 35.2, 34.0, 32.9, 31.7],
        [nan, nan, nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.8, 36.7, 36.6, 36.5, 36.4, 36.2, 35.7, 34.6, 33.5, 32.4, 31.2, nan],
        [nan, nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.7, 36.5, 36.4, 36.2, 36.1, 36.0, 35.7, 35.1, 34.0, 32.9, 31.8, 30.7, nan, nan],
        [nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.7, 36.5, 36.3, 36.1, 35.9, 35.7, 35.5, 35.3, 35.1, 34.5, 33.4, 32.3, 31.3, 30.2, nan, nan, nan],
        [nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.7, 36.4, 36.2, 35.9, 35.6, 35.4, 35.1, 34.8, 34.6, 34.3, 33.8, 32.8, 31.7, 30.7, 29.6, nan, nan, nan, nan],
        [nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.8, 36.8, 36.7, 36.7, 36.7, 36.7, 36.6, 36.4, 36.1, 35.8, 35.4, 35.1, 34.8, 34.5, 34.1, 33.8, 33.5, 33.0, 32.5, 32.0, 31.0, 30.0, 29.0, nan, nan, nan, nan, nan],
        [36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.8, 36.7, 36.6, 36.6, 36.5, 36.5, 36.4, 36.4, 36.1, 35.7, 35.3, 35.0, 34.6, 34.2, 33.8, 33.5, 33.1, 32.7, 32.2, 31.8, 31.3, 30.8, 30.3, 29.3, 28.4, nan, nan, nan, nan, nan, nan],
        [36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.7, 36.5, 36.4, 36.2, 36.1, 35.9, 35.8, 35.6, 35.5, 35.2, 34.8, 34.5, 34.1, 33.7, 33.4, 33.0, 32.6, 32.2, 31.9, 31.4, 31.0, 30.5, 30.0, 29.6, 29.1, 28.6, 27.7, nan, nan, nan, nan, nan, nan, nan],
        [36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.7, 36.5, 36.3, 36.0, 35.8, 35.6, 35.3, 35.1, 34.9, 34.6, 34.3, 33.9, 33.6, 33.2, 32.9, 32.5, 32.1, 31.8, 31.4, 31.0, 30.6, 30.2, 29.7, 29.3, 28.8, 28.3, 27.9, 27.4, 27.0, nan, nan, nan, nan, nan, nan, nan, nan],
        [36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.6, 36.5, 36.4, 36.3, 36.2, 35.8, 35.5, 35.3, 35.0, 34.8, 34.5, 34.3, 34.0, 33.7, 33.4, 33.1, 32.7, 32.4, 32.0, 31.7, 31.3, 31.0, 30.6, 30.3, 29.8, 29.4, 29.0, 28.5, 28.1, 27.7, 27.2, 26.8, 26.3, 25.9, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.3, 36.1, 35.9, 35.7, 35.5, 35.1, 34.5, 34.2, 34.0, 33.7, 33.4, 33.1, 32.9, 32.6, 32.2, 31.9, 31.5, 31.2, 30.8, 30.5, 30.2, 29.8, 29.5, 29.1, 28.7, 28.2, 27.8, 27.4, 27.0, 26.5, 26.1, 25.7, 25.3, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [35.7, 35.8, 35.9, 35.9, 36.0, 36.0, 36.0, 36.0, 36.0, 36.0, 35.8, 35.5, 35.2, 34.9, 34.6, 34.1, 33.5, 33.0, 32.8, 32.5, 32.2, 32.0, 31.7, 31.3, 31.0, 30.7, 30.4, 30.0, 29.7, 29.4, 29.1, 28.7, 28.4, 27.9, 27.5, 27.1, 26.7, 26.3, 25.9, 25.4, 25.0, 24.6, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [35.1, 35.3, 35.4, 35.5, 35.6, 35.6, 35.6, 35.6, 35.6, 35.2, 34.8, 34.4, 34.0, 33.6, 33.1, 32.6, 32.1, 31.6, 31.3, 31.1, 30.8, 30.5, 30.2, 29.9, 29.6, 29.2, 28.9, 28.6, 28.3, 28.0, 27.6, 27.2, 26.8, 26.4, 26.0, 25.6, 25.2, 24.8, 24.4, 24.0, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [34.1, 34.3, 34.4, 34.5, 34.5, 34.6, 34.6, 34.6, 34.3, 33.9, 33.4, 33.0, 32.6, 32.1, 31.6, 31.2, 30.7, 30.2, 30.0, 29.7, 29.4, 29.1, 28.8, 28.5, 28.2, 27.9, 27.6, 27.3, 26.9, 26.5, 26.1, 25.7, 25.3, 24.9, 24.5, 24.1, 23.7, 23.3, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [33.2, 33.4, 33.4, 33.5, 33.6, 33.6, 33.7, 33.4, 32.9, 32.5, 32.0, 31.6, 31.1, 30.7, 30.2, 29.8, 29.4, 28.8, 28.5, 28.2, 28.0, 27.7, 27.4, 27.1, 26.8, 26.5, 26.2, 25.8, 25.4, 25.0, 24.6, 24.2, 23.8, 23.5, 23.1, 22.7, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [32.2, 32.3, 32.4, 32.5, 32.5, 32.6, 32.3, 31.9, 31.4, 31.0, 30.6, 30.1, 29.7, 29.3, 28.8, 28.4, 27.9, 27.3, 27.1, 26.8, 26.5, 26.2, 26.0, 25.7, 25.4, 25.0, 24.6, 24.2, 23.8, 23.5, 23.1, 22.7, 22.3, 21.9, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [31.2, 31.3, 31.4, 31.4, 31.5, 31.2, 30.8, 30.4, 30.0, 29.5, 29.1, 28.7, 28.3, 27.9, 27.4, 26.9, 26.4, 25.9, 25.6, 25.4, 25.1, 24.8, 24.5, 24.1, 23.8, 23.4, 23.0, 22.7, 22.3, 21.9, 21.6, 21.2, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [30.1, 30.2, 30.3, 30.5, 30.2, 29.8, 29.3, 28.9, 28.5, 28.1, 27.7, 27.3, 26.9, 26.4, 26.0, 25.5, 25.0, 24.4, 24.2, 23.9, 23.6, 23.3, 22.9, 22.6, 22.2, 21.9, 21.5, 21.2, 20.8, 20.5, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [29.1, 29.2, 29.4, 29.1, 28.7, 28.3, 27.9, 27.5, 27.1, 26.7, 26.3, 25.9, 25.5, 25.0, 24.5, 24.0, 23.5, 23.1, 22.8, 22.4, 22.1, 21.7, 21.4, 21.1, 20.7, 20.4, 20.0, 19.7, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [28.1, 28.3, 28.1, 27.7, 27.3, 26.9, 26.5, 26.1, 25.7, 25.3, 24.9, 24.5, 24.1, 23.6, 23.2, 22.7, 22.2, 21.6, 21.3, 21.0, 20.7, 20.3, 20.0, 19.7, 19.3, 19.0, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [27.3, 27.0, 26.7, 26.3, 25.9, 25.5, 25.1, 24.7, 24.3, 24.0, 23.6, 23.1, 22.7, 22.3, 21.9, 21.4, 20.8, 20.2, 19.9, 19.6, 19.3, 19.0, 18.6, 18.3, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
    ]
)

# Torque (psi), MSN 1576-1942 5 blade.
_TORQUE_1576_1942_5_BLADE = np.array(
    [
        [nan, nan, nan, nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.5, 35.4, 34.4, 33.3, 32.2],
        [nan, nan, nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.8, 36.8, 36.7, 36.6, 36.1, 35.0, 34.0, 32.9, 31.8, nan],
        [nan, nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.7, 36.6, 36.6, 36.5, 36.4, 36.3, 35.7, 34.6, 33.5, 32.4, 31.3, nan, nan],
        [nan, nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.7, 36.5, 36.4, 36.3, 36.1, 36.0, 35.8, 35.7, 35.1, 34.0, 32.9, 31.8, 30.7, nan, nan, nan],
        [nan, nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.6, 36.3, 36.1, 35.9, 35.7, 35.5, 35.3, 35.1, 34.9, 34.4, 33.4, 32.3, 31.2, 30.2, nan, nan, nan, nan],
        [nan, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.7, 36.4, 36.1, 35.8, 35.5, 35.2, 34.9, 34.6, 34.4, 34.1, 33.6, 33.1, 32.6, 31.6, 30.6, 29.5, nan, nan, nan, nan, nan],
        [36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.6, 36.3, 35.9, 35.5, 35.1, 34.7, 34.4, 34.0, 33.6, 33.2, 32.9, 32.4, 31.9, 31.4, 30.9, 29.9, 28.9, nan, nan, nan, nan, nan, nan],
        [36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.7, 36.6, 36.5, 36.5, 36.4, 36.3, 36.1, 36.0, 35.8, 35.4, 35.0, 34.6, 34.3, 33.9, 33.5, 33.2, 32.8, 32.4, 32.0, 31.5, 31.1, 30.6, 30.1, 29.6, 29.2, 28.2, nan, nan, nan, nan, nan, nan, nan],
        [36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.9, 36.8, 36.7, 36.5, 36.3, 36.1, 36.0, 35.8, 35.6, 35.5, 35.3, 34.9, 34.5, 34.2, 33.8, 33.4, 33.0, 32.7, 32.3, 31.9, 31.6, 31.1, 30.7, 30.2, 29.7, 29.4, 28.9, 28.4, 28.0, 27.5, nan, nan, nan, nan, nan, nan, nan, nan],
        [36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.7, 36.6, 36.6, 36.6, 36.2, 36.0, 35.8, 35.5, 35.3, 35.1, 34.9, 34.6, 34.4, 34.1, 33.7, 33.3, 32.9, 32.6, 32.2, 31.9, 31.5, 31.1, 30.8, 30.4, 29.9, 29.5, 29.0, 28.5, 28.1, 27.7, 27.3, 26.8, 26.4, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.5, 36.4, 36.4, 36.3, 36.3, 36.2, 35.8, 35.2, 34.9, 34.6, 34.4, 34.1, 33.8, 33.5, 33.2, 32.9, 32.5, 32.2, 31.7, 31.4, 31.0, 30.7, 30.3, 30.0, 29.6, 29.1, 28.7, 28.3, 27.8, 27.4, 26.9, 26.5, 26.2, 25.7, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [35.9, 36.0, 36.0, 36.0, 36.0, 36.0, 36.0, 36.0, 36.0, 36.0, 35.9, 35.7, 35.6, 35.4, 35.2, 34.8, 34.2, 33.7, 33.4, 33.2, 32.9, 32.6, 32.3, 32.0, 31.6, 31.3, 31.0, 30.6, 30.2, 29.9, 29.6, 29.2, 28.9, 28.4, 28.0, 27.6, 27.1, 26.7, 26.3, 25.8, 25.4, 25.0, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [35.5, 35.5, 35.5, 35.6, 35.6, 35.6, 35.6, 35.6, 35.6, 35.3, 35.1, 34.8, 34.5, 34.2, 33.8, 33.2, 32.7, 32.2, 32.0, 31.7, 31.4, 31.1, 30.8, 30.5, 30.1, 29.8, 29.5, 29.2, 28.8, 28.5, 28.1, 27.7, 27.3, 26.8, 26.4, 26.0, 25.6, 25.1, 24.7, 24.3, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [34.2, 34.3, 34.3, 34.4, 34.5, 34.6, 34.7, 34.8, 34.6, 34.2, 33.9, 33.6, 33.2, 32.8, 32.3, 31.8, 31.3, 30.8, 30.5, 30.2, 29.9, 29.6, 29.3, 29.0, 28.7, 28.4, 28.1, 27.8, 27.3, 26.9, 26.5, 26.1, 25.7, 25.3, 24.9, 24.4, 24.0, 23.6, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [33.0, 33.0, 33.2, 33.4, 33.6, 33.8, 34.0, 33.8, 33.4, 33.0, 32.6, 32.2, 31.8, 31.3, 30.9, 30.4, 29.9, 29.4, 29.1, 28.8, 28.5, 28.2, 27.9, 27.6, 27.3, 27.0, 26.7, 26.3, 25.7, 25.3, 24.9, 24.5, 24.1, 23.7, 23.3, 22.9, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [31.9, 32.1, 32.3, 32.4, 32.6, 32.8, 32.5, 32.2, 31.9, 31.5, 31.2, 30.8, 30.3, 29.9, 29.4, 29.0, 28.4, 27.9, 27.6, 27.3, 27.0, 26.7, 26.4, 26.1, 25.8, 25.4, 25.0, 24.7, 24.1, 23.7, 23.4, 23.0, 22.6, 22.2, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [31.0, 31.1, 31.2, 31.4, 31.5, 31.3, 31.0, 30.7, 30.4, 30.1, 29.7, 29.3, 28.9, 28.4, 28.0, 27.5, 26.9, 26.4, 26.1, 25.8, 25.6, 25.3, 25.0, 24.6, 24.2, 23.9, 23.5, 23.1, 22.6, 22.2, 21.8, 21.4, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [30.0, 30.1, 30.3, 30.5, 30.3, 30.0, 29.7, 29.4, 29.1, 28.7, 28.3, 27.8, 27.4, 27.0, 26.5, 26.0, 25.4, 24.9, 24.7, 24.4, 24.1, 23.7, 23.4, 23.0, 22.7, 22.3, 21.9, 21.6, 21.0, 20.6, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [29.1, 29.2, 29.4, 29.2, 28.9, 28.6, 28.3, 28.0, 27.6, 27.2, 26.8, 26.4, 26.0, 25.5, 25.0, 24.5, 24.0, 23.5, 23.2, 22.9, 22.5, 22.2, 21.8, 21.5, 21.1, 20.8, 20.4, 20.1, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [28.2, 28.4, 28.2, 27.9, 27.6, 27.3, 27.0, 26.6, 26.2, 25.8, 25.4, 25.0, 24.5, 24.1, 23.6, 23.1, 22.7, 22.1, 21.7, 21.4, 21.0, 20.7, 20.4, 20.0, 19.7, 19.4, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [27.3, 27.1, 26.9, 26.6, 26.3, 26.0, 25.6, 25.2, 24.8, 24.4, 24.0, 23.6, 23.1, 22.7, 22.3, 21.8, 21.2, 20.6, 20.3, 19.9, 19.6, 19.3, 19.0, 18.7, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
    ]
)

# Torque (psi), MSN 2001+ 5 blade.
_TORQUE_2001_5_BLADE = np.array(
    [
        [nan, nan, nan, nan, nan, nan, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.4, 40.1, 39.7, 39.1, 38.5, 37.9, 37.0, 35.9, 34.7, 33.6, 32.4],
        [nan, nan, nan, nan, nan, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.3, 39.9, 39.6, 39.2, 38.8, 38.1, 37.3, 36.4, 35.3, 34.1, 33.0, 31.9, nan],
        [nan, nan, nan, nan, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.3, 39.8, 39.4, 39.0, 38.5, 38.1, 37.6, 36.7, 35.8, 34.7, 33.6, 32.5, 31.4, nan, nan],
        [nan, nan, nan, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.5, 40.5, 40.4, 40.3, 40.3, 40.2, 40.1, 40.1, 40.0, 39.6, 39.2, 38.8, 38.3, 37.9, 37.4, 37.0, 36.5, 36.1, 35.1, 34.1, 33.0, 31.9, 30.8, nan, nan, nan],
        [nan, nan, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.7, 40.7, 40.7, 40.7, 40.7, 40.7, 40.7, 40.7, 40.7, 40.6, 40.4, 40.3, 40.1, 40.0, 39.9, 39.7, 39.6, 39.5, 39.3, 39.0, 38.5, 38.1, 37.7, 37.2, 36.8, 36.4, 35.9, 35.5, 35.0, 34.5, 33.5, 32.4, 31.3, 30.2, nan, nan, nan, nan],
        [nan, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.5, 40.3, 40.1, 39.9, 39.7, 39.5, 39.2, 39.0, 38.8, 38.6, 38.2, 37.8, 37.4, 36.9, 36.5, 36.0, 35.6, 35.1, 34.7, 34.3, 33.8, 33.3, 32.7, 31.7, 30.7, 29.7, nan, nan, nan, nan, nan],
        [40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.4, 40.2, 39.9, 39.6, 39.3, 39.0, 38.8, 38.5, 38.2, 37.9, 37.5, 37.1, 36.6, 36.2, 35.7, 35.3, 34.8, 34.4, 33.9, 33.5, 33.0, 32.5, 32.0, 31.6, 31.1, 30.1, 29.1, nan, nan, nan, nan, nan, nan],
        [40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.5, 40.5, 40.3, 39.9, 39.6, 39.3, 38.9, 38.6, 38.2, 37.9, 37.5, 37.2, 36.8, 36.4, 35.9, 35.5, 35.0, 34.6, 34.2, 33.7, 33.3, 32.9, 32.4, 31.9, 31.4, 31.0, 30.5, 30.0, 29.5, 28.6, nan, nan, nan, nan, nan, nan, nan],
        [40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.5, 40.5, 40.4, 40.1, 39.7, 39.3, 38.9, 38.5, 38.1, 37.7, 37.3, 36.9, 36.5, 36.1, 35.7, 35.2, 34.8, 34.4, 33.9, 33.5, 33.1, 32.7, 32.2, 31.8, 31.3, 30.8, 30.4, 29.9, 29.4, 29.0, 28.5, 28.0, nan, nan, nan, nan, nan, nan, nan, nan],
        [40.2, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.4, 40.2, 40.0, 39.7, 39.5, 38.8, 38.4, 38.1, 37.7, 37.3, 36.9, 36.5, 36.1, 35.7, 35.3, 34.9, 34.5, 34.1, 33.6, 33.2, 32.8, 32.4, 31.9, 31.5, 31.1, 30.6, 30.2, 29.7, 29.3, 28.8, 28.4, 27.9, 27.5, 27.0, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [40.5, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.6, 40.3, 39.9, 39.4, 39.0, 38.6, 37.9, 37.2, 36.8, 36.4, 36.1, 35.7, 35.3, 35.0, 34.6, 34.1, 33.7, 33.3, 32.9, 32.5, 32.1, 31.6, 31.2, 30.8, 30.4, 29.9, 29.5, 29.1, 28.6, 28.2, 27.8, 27.3, 26.9, 26.4, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [38.8, 38.8, 38.8, 38.8, 38.8, 39.0, 39.2, 39.4, 39.6, 39.9, 39.5, 39.0, 38.5, 38.0, 37.5, 36.9, 36.2, 35.5, 35.1, 34.8, 34.4, 34.1, 33.7, 33.3, 32.9, 32.5, 32.1, 31.7, 31.3, 30.9, 30.5, 30.1, 29.7, 29.3, 28.8, 28.4, 28.0, 27.6, 27.1, 26.7, 26.3, 25.8, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [36.9, 36.9, 36.9, 36.9, 37.3, 37.7, 38.2, 38.6, 39.1, 38.7, 38.2, 37.6, 37.0, 36.4, 35.8, 35.2, 34.5, 33.9, 33.5, 33.2, 32.9, 32.5, 32.1, 31.7, 31.3, 30.9, 30.6, 30.2, 29.8, 29.4, 29.0, 28.6, 28.2, 27.7, 27.3, 26.9, 26.5, 26.1, 25.7, 25.2, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [36.1, 36.2, 36.3, 36.5, 36.8, 37.1, 37.4, 37.7, 37.4, 36.9, 36.4, 35.9, 35.4, 34.8, 34.2, 33.5, 32.9, 32.3, 31.9, 31.6, 31.2, 30.8, 30.5, 30.1, 29.7, 29.3, 29.0, 28.6, 28.2, 27.8, 27.4, 27.0, 26.6, 26.2, 25.8, 25.3, 24.9, 24.5, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [35.4, 35.6, 35.8, 35.9, 36.1, 36.2, 36.4, 36.1, 35.7, 35.2, 34.8, 34.4, 33.8, 33.2, 32.6, 32.0, 31.4, 30.7, 30.3, 29.9, 29.6, 29.2, 28.9, 28.5, 28.2, 27.8, 27.4, 27.0, 26.6, 26.2, 25.8, 25.4, 25.0, 24.6, 24.2, 23.8, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [34.3, 34.5, 34.6, 34.8, 34.9, 35.1, 34.8, 34.4, 34.1, 33.7, 33.3, 32.8, 32.2, 31.6, 31.0, 30.4, 29.7, 29.0, 28.7, 28.4, 28.0, 27.7, 27.3, 27.0, 26.6, 26.2, 25.9, 25.5, 25.1, 24.7, 24.3, 23.9, 23.5, 23.2, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [33.1, 33.3, 33.4, 33.6, 33.7, 33.5, 33.2, 32.9, 32.6, 32.2, 31.7, 31.1, 30.6, 30.0, 29.4, 28.8, 28.1, 27.5, 27.2, 26.8, 26.5, 26.2, 25.8, 25.5, 25.1, 24.7, 24.4, 24.0, 23.6, 23.2, 22.9, 22.5, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [32.1, 32.2, 32.3, 32.5, 32.3, 32.1, 31.8, 31.5, 31.2, 30.7, 30.2, 29.6, 29.0, 28.5, 27.9, 27.2, 26.6, 26.0, 25.7, 25.3, 25.0, 24.7, 24.3, 24.0, 23.6, 23.2, 22.9, 22.5, 22.2, 21.8, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [31.0, 31.1, 31.3, 31.1, 30.9, 30.7, 30.5, 30.2, 29.8, 29.2, 28.6, 28.1, 27.5, 26.9, 26.3, 25.7, 25.1, 24.5, 24.2, 23.8, 23.5, 23.2, 22.8, 22.5, 22.2, 21.8, 21.5, 21.2, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [30.0, 30.1, 30.0, 29.8, 29.6, 29.4, 29.2, 28.8, 28.3, 27.7, 27.2, 26.6, 26.0, 25.5, 24.9, 24.3, 23.7, 23.1, 22.8, 22.5, 22.1, 21.8, 21.5, 21.2, 20.9, 20.5, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
        [29.0, 28.9, 28.8, 28.6, 28.4, 28.3, 27.8, 27.3, 26.8, 26.2, 25.7, 25.1, 24.6, 24.0, 23.5, 22.9, 22.4, 21.7, 21.4, 21.1, 20.8, 20.5, 20.2, 19.9, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan, nan],
    ]
)

# Fuel flow (lb/h), MSN 1451-1942 4 blade.
_FUEL_FLOW_1451_1942_4_BLADE = np.array(
    [
        [514, 504, 494, 484, 474, 462, 449, nan],
        [502, 492, 482, 472, 462, 450, 437, nan],
        [488, 478, 468, 458, 448, 436, 423, 410],
        [473, 463, 453, 443, 433, 421, 408, 395],
        [457, 447, 437, 427, 417, 405, 392, 379],
        [440, 430, 420, 410, 400, 388, 375, 362],
        [422, 412, 402, 392, 382, 370, 357, 344],
        [402, 392, 382, 372, 362, 350, 337, 324],
        [382, 372, 362, 352, 342, 330, 317, 304],
        [362, 352, 342, 332, 322, 310, 297, 284],
        [342, 332, 322, 312, 302, 290, 277, 264],
    ]
)

# Fuel flow (lb/h), MSN 1576-1942 5 blade.
_FUEL_FLOW_1576_1942_5_BLADE = np.array(
    [
        [518, 508, 498, 488, 478, 466, 453, nan],
        [506, 496, 486, 476, 466, 454, 441, nan],
        [492, 482, 472, 462, 452, 440, 427, 414],
        [477, 467, 457, 447, 437, 425, 412, 399],
        [461, 451, 441, 431, 421, 409, 396, 383],
        [444, 434, 424, 414, 404, 392, 379, 366],
        [426, 416, 406, 396, 386, 374, 361, 348],
        [406, 396, 386, 376, 366, 354, 341, 328],
        [386, 376, 366, 356, 346, 334, 321, 308],
        [366, 356, 346, 336, 326, 314, 301, 288],
        [346, 336, 326, 316, 306, 294, 281, 268],
    ]
)

# Fuel flow (lb/h), MSN 2001+ 5 blade.
_FUEL_FLOW_2001_5_BLADE = np.array(
    [
        [530, 520, 510, 500, 490, 478, 465, nan],
        [518, 508, 498, 488, 478, 466, 453, nan],
        [504, 494, 484, 474, 464, 452, 439, 426],
        [489, 479, 469, 459, 449, 437, 424, 411],
        [473, 463, 453, 443, 433, 421, 408, 395],
        [456, 446, 436, 426, 416, 404, 391, 378],
        [438, 428, 418, 408, 398, 386, 373, 360],
        [418, 408, 398, 388, 378, 366, 353, 340],
        [398, 388, 378, 368, 358, 346, 333, 320],
        [378, 368, 358, 348, 338, 326, 313, 300],
        [358, 348, 338, 328, 318, 306, 293, 280],
    ]
)

# True airspeed (kt) per weight class, MSN 1451-1942 4 blade.
_AIRSPEED_1451_1942_4_BLADE = np.array(
    [
        [
            [257, 259, 261, 262, 263, 261, 258, nan],
            [261, 263, 265, 266, 267, 265, 262, nan],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [271, 273, 275, 276, 277, 275, 272, 268],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [274, 276, 278, 279, 280, 278, 275, 271],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [270, 272, 274, 275, 276, 274, 271, 267],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [258, 260, 262, 263, 264, 262, 259, 255],
        ],
        [
            [253, 255, 257, 258, 259, 257, 254, nan],
            [257, 259, 261, 262, 263, 261, 258, nan],
            [261, 263, 265, 266, 267, 265, 262, 258],
            [264, 266, 268, 269, 270, 268, 265, 261],
            [267, 269, 271, 272, 273, 271, 268, 264],
            [269, 271, 273, 274, 275, 273, 270, 266],
            [270, 272, 274, 275, 276, 274, 271, 267],
            [269, 271, 273, 274, 275, 273, 270, 266],
            [266, 268, 270, 271, 272, 270, 267, 263],
            [261, 263, 265, 266, 267, 265, 262, 258],
            [254, 256, 258, 259, 260, 258, 255, 251],
        ],
        [
            [249, 251, 253, 254, 255, 253, 250, nan],
            [253, 255, 257, 258, 259, 257, 254, nan],
            [257, 259, 261, 262, 263, 261, 258, 254],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [263, 265, 267, 268, 269, 267, 264, 260],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [266, 268, 270, 271, 272, 270, 267, 263],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [262, 264, 266, 267, 268, 266, 263, 259],
            [257, 259, 261, 262, 263, 261, 258, 254],
            [250, 252, 254, 255, 256, 254, 251, 247],
        ],
        [
            [244, 246, 248, 249, 250, 248, 245, nan],
            [248, 250, 252, 253, 254, 252, 249, nan],
            [252, 254, 256, 257, 258, 256, 253, 249],
            [255, 257, 259, 260, 261, 259, 256, 252],
            [258, 260, 262, 263, 264, 262, 259, 255],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [261, 263, 265, 266, 267, 265, 262, 258],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [257, 259, 261, 262, 263, 261, 258, 254],
            [252, 254, 256, 257, 258, 256, 253, 249],
            [245, 247, 249, 250, 251, 249, 246, 242],
        ],
        [
            [242, 244, 246, 247, 248, 246, 243, nan],
            [246, 248, 250, 251, 252, 250, 247, nan],
            [250, 252, 254, 255, 256, 254, 251, 247],
            [253, 255, 257, 258, 259, 257, 254, 250],
            [256, 258, 260, 261, 262, 260, 257, 253],
            [258, 260, 262, 263, 264, 262, 259, 255],
            [259, 261, 263, 264, 265, 263, 260, 256],
            [258, 260, 262, 263, 264, 262, 259, 255],
            [255, 257, 259, 260, 261, 259, 256, 252],
            [250, 252, 254, 255, 256, 254, 251, 247],
            [243, 245, 247, 248, 249, 247, 244, 240],
        ],
    ]
)

# True airspeed (kt) per weight class, MSN 1576-1942 5 blade.
_AIRSPEED_1576_1942_5_BLADE = np.array(
    [
        [
            [260, 262, 264, 265, 266, 264, 261, nan],
            [264, 266, 268, 269, 270, 268, 265, nan],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [271, 273, 275, 276, 277, 275, 272, 268],
            [274, 276, 278, 279, 280, 278, 275, 271],
            [276, 278, 280, 281, 282, 280, 277, 273],
            [277, 279, 281, 282, 283, 281, 278, 274],
            [276, 278, 280, 281, 282, 280, 277, 273],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [261, 263, 265, 266, 267, 265, 262, 258],
        ],
        [
            [256, 258, 260, 261, 262, 260, 257, nan],
            [260, 262, 264, 265, 266, 264, 261, nan],
            [264, 266, 268, 269, 270, 268, 265, 261],
            [267, 269, 271, 272, 273, 271, 268, 264],
            [270, 272, 274, 275, 276, 274, 271, 267],
            [272, 274, 276, 277, 278, 276, 273, 269],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [272, 274, 276, 277, 278, 276, 273, 269],
            [269, 271, 273, 274, 275, 273, 270, 266],
            [264, 266, 268, 269, 270, 268, 265, 261],
            [257, 259, 261, 262, 263, 261, 258, 254],
        ],
        [
            [252, 254, 256, 257, 258, 256, 253, nan],
            [256, 258, 260, 261, 262, 260, 257, nan],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [263, 265, 267, 268, 269, 267, 264, 260],
            [266, 268, 270, 271, 272, 270, 267, 263],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [269, 271, 273, 274, 275, 273, 270, 266],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [253, 255, 257, 258, 259, 257, 254, 250],
        ],
        [
            [247, 249, 251, 252, 253, 251, 248, nan],
            [251, 253, 255, 256, 257, 255, 252, nan],
            [255, 257, 259, 260, 261, 259, 256, 252],
            [258, 260, 262, 263, 264, 262, 259, 255],
            [261, 263, 265, 266, 267, 265, 262, 258],
            [263, 265, 267, 268, 269, 267, 264, 260],
            [264, 266, 268, 269, 270, 268, 265, 261],
            [263, 265, 267, 268, 269, 267, 264, 260],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [255, 257, 259, 260, 261, 259, 256, 252],
            [248, 250, 252, 253, 254, 252, 249, 245],
        ],
        [
            [245, 247, 249, 250, 251, 249, 246, nan],
            [249, 251, 253, 254, 255, 253, 250, nan],
            [253, 255, 257, 258, 259, 257, 254, 250],
            [256, 258, 260, 261, 262, 260, 257, 253],
            [259, 261, 263, 264, 265, 263, 260, 256],
            [261, 263, 265, 266, 267, 265, 262, 258],
            [262, 264, 266, 267, 268, 266, 263, 259],
            [261, 263, 265, 266, 267, 265, 262, 258],
            [258, 260, 262, 263, 264, 262, 259, 255],
            [253, 255, 257, 258, 259, 257, 254, 250],
            [246, 248, 250, 251, 252, 250, 247, 243],
        ],
    ]
)

# True airspeed (kt) per weight class, MSN 2001+ 5 blade.
_AIRSPEED_2001_5_BLADE = np.array(
    [
        [
            [265, 267, 269, 270, 271, 269, 266, nan],
            [269, 271, 273, 274, 275, 273, 270, nan],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [276, 278, 280, 281, 282, 280, 277, 273],
            [279, 281, 283, 284, 285, 283, 280, 276],
            [281, 283, 285, 286, 287, 285, 282, 278],
            [282, 284, 286, 287, 288, 286, 283, 279],
            [281, 283, 285, 286, 287, 285, 282, 278],
            [278, 280, 282, 283, 284, 282, 279, 275],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [266, 268, 270, 271, 272, 270, 267, 263],
        ],
        [
            [261, 263, 265, 266, 267, 265, 262, nan],
            [265, 267, 269, 270, 271, 269, 266, nan],
            [269, 271, 273, 274, 275, 273, 270, 266],
            [272, 274, 276, 277, 278, 276, 273, 269],
            [275, 277, 279, 280, 281, 279, 276, 272],
            [277, 279, 281, 282, 283, 281, 278, 274],
            [278, 280, 282, 283, 284, 282, 279, 275],
            [277, 279, 281, 282, 283, 281, 278, 274],
            [274, 276, 278, 279, 280, 278, 275, 271],
            [269, 271, 273, 274, 275, 273, 270, 266],
            [262, 264, 266, 267, 268, 266, 263, 259],
        ],
        [
            [257, 259, 261, 262, 263, 261, 258, nan],
            [261, 263, 265, 266, 267, 265, 262, nan],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [271, 273, 275, 276, 277, 275, 272, 268],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [274, 276, 278, 279, 280, 278, 275, 271],
            [273, 275, 277, 278, 279, 277, 274, 270],
            [270, 272, 274, 275, 276, 274, 271, 267],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [258, 260, 262, 263, 264, 262, 259, 255],
        ],
        [
            [252, 254, 256, 257, 258, 256, 253, nan],
            [256, 258, 260, 261, 262, 260, 257, nan],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [263, 265, 267, 268, 269, 267, 264, 260],
            [266, 268, 270, 271, 272, 270, 267, 263],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [269, 271, 273, 274, 275, 273, 270, 266],
            [268, 270, 272, 273, 274, 272, 269, 265],
            [265, 267, 269, 270, 271, 269, 266, 262],
            [260, 262, 264, 265, 266, 264, 261, 257],
            [253, 255, 257, 258, 259, 257, 254, 250],
        ],
        [
            [250, 252, 254, 255, 256, 254, 251, nan],
            [254, 256, 258, 259, 260, 258, 255, nan],
            [258, 260, 262, 263, 264, 262, 259, 255],
            [261, 263, 265, 266, 267, 265, 262, 258],
            [264, 266, 268, 269, 270, 268, 265, 261],
            [266, 268, 270, 271, 272, 270, 267, 263],
            [267, 269, 271, 272, 273, 271, 268, 264],
            [266, 268, 270, 271, 272, 270, 267, 263],
            [263, 265, 267, 268, 269, 267, 264, 260],
            [258, 260, 262, 263, 264, 262, 259, 255],
            [251, 253, 255, 256, 257, 255, 252, 248],
        ],
    ]
)

TORQUE_TABLES: dict[AircraftType, np.ndarray] = {
    AircraftType.MSN_1451_1942_4_BLADE: _TORQUE_1451_1942_4_BLADE,
    AircraftType.MSN_1576_1942_5_BLADE: _TORQUE_1576_1942_5_BLADE,
    AircraftType.MSN_2001_5_BLADE: _TORQUE_2001_5_BLADE,
}

FUEL_FLOW_TABLES: dict[AircraftType, np.ndarray] = {
    AircraftType.MSN_1451_1942_4_BLADE: _FUEL_FLOW_1451_1942_4_BLADE,
    AircraftType.MSN_1576_1942_5_BLADE: _FUEL_FLOW_1576_1942_5_BLADE,
    AircraftType.MSN_2001_5_BLADE: _FUEL_FLOW_2001_5_BLADE,
}

AIRSPEED_TABLES: dict[AircraftType, np.ndarray] = {
    AircraftType.MSN_1451_1942_4_BLADE: _AIRSPEED_1451_1942_4_BLADE,
    AircraftType.MSN_1576_1942_5_BLADE: _AIRSPEED_1576_1942_5_BLADE,
    AircraftType.MSN_2001_5_BLADE: _AIRSPEED_2001_5_BLADE,
}

for _table in (*TORQUE_TABLES.values(), *FUEL_FLOW_TABLES.values(), *AIRSPEED_TABLES.values()):
    _table.setflags(write=False)
