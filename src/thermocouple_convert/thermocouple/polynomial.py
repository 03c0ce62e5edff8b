from collections import namedtuple
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

"""
Rational polynomial approximations of the thermocouple reference functions.

The fits come from Mosaic Industries, who replaced the NIST ITS-90 polynomials
with low order rational functions of a shifted input:
http://www.mosaic-industries.com/embedded-systems/microcontroller-projects/temperature-measurement/thermocouple/calibration-table

Each fit is centred on a point (T0, V0) of the reference table. The cold
junction fit maps a temperature to a voltage:

    V = V0 + (T - T0)(p1 + (T - T0)(p2 + (T - T0)(p3 + p4(T - T0))))
             / (1 + (T - T0)(q1 + q2(T - T0)))

and the inverse fit maps a voltage to a temperature:

    T = T0 + (V - V0)(p1 + (V - V0)(p2 + (V - V0)(p3 + p4(V - V0))))
             / (1 + (V - V0)(q1 + (V - V0)(q2 + q3(V - V0))))

The denominators never reach zero inside the range each fit is published for.
"""

# The coefficients of one cold junction fit
ColdJunctionCoeffs = namedtuple(
    "ColdJunctionCoeffs", ["T0", "V0", "p1", "p2", "p3", "p4", "q1", "q2"]
)

# The coefficients of one segment of the inverse (voltage to temperature) fit
InverseCoeffs = namedtuple(
    "InverseCoeffs", ["T0", "V0", "p1", "p2", "p3", "p4", "q1", "q2", "q3"]
)


def cold_junction_voltage(temperature: float, coeffs: ColdJunctionCoeffs) -> float:
    """Convert a cold junction temperature in degrees Celcius into the equivalent
    thermocouple voltage in mV"""
    dt = temperature - coeffs.T0
    numerator = dt * (coeffs.p1 + dt * (coeffs.p2 + dt * (coeffs.p3 + coeffs.p4 * dt)))
    denominator = 1.0 + dt * (coeffs.q1 + coeffs.q2 * dt)
    return coeffs.V0 + numerator / denominator


def inverse_temperature(millivolts: float, coeffs: InverseCoeffs) -> float:
    """Convert a thermocouple voltage in mV into degrees Celcius using a single
    segment's coefficients. No range checking is done here."""
    dv = millivolts - coeffs.V0
    numerator = dv * (coeffs.p1 + dv * (coeffs.p2 + dv * (coeffs.p3 + coeffs.p4 * dv)))
    denominator = 1.0 + dv * (coeffs.q1 + dv * (coeffs.q2 + coeffs.q3 * dv))
    return coeffs.T0 + numerator / denominator


class Bounds(Enum):
    """Which ends of a segment's voltage range belong to the segment"""

    # low <= v < high
    CLOSED_OPEN = "[)"
    # low < v <= high
    OPEN_CLOSED = "(]"


@dataclass(frozen=True)
class Segment:
    """A voltage range and the inverse fit that applies within it"""

    low: float
    high: float
    coefficients: InverseCoeffs
    bounds: Bounds = Bounds.CLOSED_OPEN

    def __post_init__(self):
        if self.low >= self.high:
            raise ValueError(
                f"Segment low {self.low} must be less than high {self.high}"
            )

    def contains(self, millivolts):
        # Works element-wise for numpy arrays as well as for single floats
        if self.bounds is Bounds.OPEN_CLOSED:
            return (self.low < millivolts) & (millivolts <= self.high)
        return (self.low <= millivolts) & (millivolts < self.high)


@dataclass(frozen=True)
class TypeProfile:
    """All the fitted data for one thermocouple type"""

    # Letter code of the thermocouple type, e.g. "K"
    name: str
    cold_junction: ColdJunctionCoeffs
    # Ordered by increasing voltage
    segments: Tuple[Segment, ...]

    def __post_init__(self):
        if not self.segments:
            raise ValueError(f"Type {self.name} has no segments")

        if len({s.bounds for s in self.segments}) != 1:
            raise ValueError(f"Type {self.name} mixes segment boundary rules")

        _verify_contiguous(self.name, self.segments)

    @property
    def low(self) -> float:
        return self.segments[0].low

    @property
    def high(self) -> float:
        return self.segments[-1].high

    @property
    def bounds(self) -> Bounds:
        return self.segments[0].bounds

    def segment_for(self, millivolts: float) -> Optional[Segment]:
        """Return the segment whose range contains the given voltage, or None if
        the voltage is outside the calibrated range"""
        for segment in self.segments:
            if segment.contains(millivolts):
                return segment
        return None


def _verify_contiguous(name: str, segments: Tuple[Segment, ...]) -> None:
    prev_high: Optional[float] = None
    for segment in segments:
        if prev_high is not None and segment.low != prev_high:
            raise ValueError(
                f"Type {name} segments must be contiguous; gap or overlap at "
                f"{prev_high} -> {segment.low}"
            )
        prev_high = segment.high
