from .polynomial import Bounds, ColdJunctionCoeffs, InverseCoeffs, Segment, TypeProfile
from .thermocouple import (
    OUT_OF_RANGE,
    Thermocouple,
    ThermocoupleType,
    get_thermocouple,
    type_b,
    type_e,
    type_j,
    type_k,
    type_n,
    type_r,
    type_s,
    type_t,
)

__all__ = [
    "Bounds",
    "ColdJunctionCoeffs",
    "InverseCoeffs",
    "Segment",
    "TypeProfile",
    "OUT_OF_RANGE",
    "Thermocouple",
    "ThermocoupleType",
    "get_thermocouple",
    "type_b",
    "type_e",
    "type_j",
    "type_k",
    "type_n",
    "type_r",
    "type_s",
    "type_t",
]
