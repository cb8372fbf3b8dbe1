"""Cruise performance calculation.

This module provides PC-12/47E cruise figures looked up from POH tables:
- Maximum cruise torque
- Fuel flow
- True airspeed by gross weight
"""

from pc12perf.performance.aircraft import AircraftType, WeightClass
from pc12perf.performance.calculator import PerfData, PerformanceEngine

__all__ = ["AircraftType", "PerfData", "PerformanceEngine", "WeightClass"]
