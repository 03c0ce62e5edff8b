import logging
from enum import Enum
from typing import Optional, Union

import numpy as np

from .coefficients import (
    TYPE_B,
    TYPE_E,
    TYPE_J,
    TYPE_K,
    TYPE_N,
    TYPE_R,
    TYPE_S,
    TYPE_T,
)
from .polynomial import TypeProfile, cold_junction_voltage, inverse_temperature

# Handles converting millivolt readings into degrees Celcius for thermocouple types
# B, E, J, K, N, R, S and T, with cold junction compensation.

"""
The measured voltage of a thermocouple depends on the temperature difference
between its measuring junction and its cold (reference) junction. The
conversion therefore happens in two steps:

- The cold junction temperature is converted into the voltage the thermocouple
  would produce with its cold junction at 0 degrees Celcius.
- That voltage is added to the measured voltage, and the sum converted back into
  a temperature using the segment of the inverse fit whose range contains it.

Voltages outside every segment are not extrapolated; OUT_OF_RANGE is returned
instead. The cold junction temperature is never range checked, so a cold
junction far outside ordinary ambient temperatures gives a meaningless, but not
OUT_OF_RANGE, result.
"""

# Returned instead of a temperature when the voltage is outside the calibrated range
OUT_OF_RANGE = -1000.0


class Thermocouple:
    """Convert voltage readings of one thermocouple type into degrees Celcius.
    Holds no state between calls, so a single instance can be shared between
    threads."""

    def __init__(self, profile: TypeProfile):
        self.profile = profile

    def __repr__(self):
        return f"Thermocouple(type={self.profile.name})"

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def low(self) -> float:
        """Lowest calibrated voltage, in mV"""
        return self.profile.low

    @property
    def high(self) -> float:
        """Highest calibrated voltage, in mV"""
        return self.profile.high

    def cold_junction_voltage(self, cold_junction: float) -> float:
        """Returns the voltage in mV equivalent to the cold junction temperature"""
        return cold_junction_voltage(cold_junction, self.profile.cold_junction)

    def compute_temperature(self, millivolts: float) -> float:
        """Convert a cold junction compensated voltage into degrees Celcius.
        Returns OUT_OF_RANGE if the voltage is outside the calibrated range."""
        segment = self.profile.segment_for(millivolts)
        if segment is None:
            logging.debug(
                f"{millivolts} mV outside calibrated range of type {self.name} "
                f"thermocouple"
            )
            return OUT_OF_RANGE

        return inverse_temperature(millivolts, segment.coefficients)

    def get_temperature(self, millivolts: float, cold_junction: float) -> float:
        """Convert a measured voltage in mV into degrees Celcius, given the cold
        junction temperature in degrees Celcius.
        Returns OUT_OF_RANGE if the compensated voltage is outside the calibrated
        range."""
        return self.compute_temperature(
            millivolts + self.cold_junction_voltage(cold_junction)
        )

    def get_temperature_f32(self, millivolts, cold_junction) -> np.float32:
        """Single precision version of get_temperature. The calculation itself is
        done in double precision."""
        temperature = self.get_temperature(
            float(np.float32(millivolts)), float(np.float32(cold_junction))
        )
        return np.float32(temperature)

    def temperature(self, millivolts: float, cold_junction: float) -> Optional[float]:
        """As get_temperature, but returns None rather than OUT_OF_RANGE"""
        result = self.get_temperature(millivolts, cold_junction)
        if result == OUT_OF_RANGE:
            return None
        return result

    def get_temperatures(self, millivolts, cold_junction) -> np.ndarray:
        """Array version of get_temperature. Both arguments may be arrays, or
        scalars that are broadcast against each other."""
        millivolts = np.asarray(millivolts, dtype=np.float64)
        cold_junction = np.asarray(cold_junction, dtype=np.float64)

        voltage = millivolts + cold_junction_voltage(
            cold_junction, self.profile.cold_junction
        )
        return self.compute_temperatures(voltage)

    def compute_temperatures(self, millivolts) -> np.ndarray:
        """Array version of compute_temperature"""
        voltage = np.atleast_1d(np.asarray(millivolts, dtype=np.float64))

        conditions = [s.contains(voltage) for s in self.profile.segments]
        functions = [_segment_function(s.coefficients) for s in self.profile.segments]
        functions.append(OUT_OF_RANGE)  # Default value
        return np.piecewise(voltage, conditions, functions)


def _segment_function(coefficients):
    return lambda v: inverse_temperature(v, coefficients)


class ThermocoupleType(Enum):
    """The supported thermocouple types"""

    B = TYPE_B
    E = TYPE_E
    J = TYPE_J
    K = TYPE_K
    N = TYPE_N
    R = TYPE_R
    S = TYPE_S
    T = TYPE_T

    @property
    def profile(self) -> TypeProfile:
        return self.value


type_b = Thermocouple(TYPE_B)
type_e = Thermocouple(TYPE_E)
type_j = Thermocouple(TYPE_J)
type_k = Thermocouple(TYPE_K)
type_n = Thermocouple(TYPE_N)
type_r = Thermocouple(TYPE_R)
type_s = Thermocouple(TYPE_S)
type_t = Thermocouple(TYPE_T)

_thermocouples = {
    ThermocoupleType.B: type_b,
    ThermocoupleType.E: type_e,
    ThermocoupleType.J: type_j,
    ThermocoupleType.K: type_k,
    ThermocoupleType.N: type_n,
    ThermocoupleType.R: type_r,
    ThermocoupleType.S: type_s,
    ThermocoupleType.T: type_t,
}


def get_thermocouple(tc_type: Union[ThermocoupleType, str]) -> Thermocouple:
    """Return the converter for the given thermocouple type, given either as a
    ThermocoupleType or as its letter"""
    if not isinstance(tc_type, ThermocoupleType):
        try:
            tc_type = ThermocoupleType[str(tc_type).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown thermocouple type '{tc_type}'") from None

    return _thermocouples[tc_type]
