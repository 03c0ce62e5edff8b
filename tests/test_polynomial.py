import math

import pytest

from thermocouple_convert.thermocouple.coefficients import ALL_TYPES
from thermocouple_convert.thermocouple.polynomial import (
    Bounds,
    ColdJunctionCoeffs,
    InverseCoeffs,
    Segment,
    TypeProfile,
    cold_junction_voltage,
    inverse_temperature,
)

# Adjacent segments are separate fits, so they only agree to within their fitting
# error at the voltage where they meet
BOUNDARY_TOLERANCE = 0.1  # degC

COLD_JUNCTION = ColdJunctionCoeffs(25.0, 1.0, 0.04, 0.0, 0.0, 0.0, 0.0, 0.0)
LINEAR = InverseCoeffs(0.0, 0.0, 25.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def boundaries():
    """Every internal segment boundary of every thermocouple type"""
    for profile in ALL_TYPES:
        for below, above in zip(profile.segments, profile.segments[1:]):
            yield pytest.param(
                profile, below, above, id=f"{profile.name}-{below.high}"
            )


def all_segments():
    for profile in ALL_TYPES:
        for segment in profile.segments:
            yield pytest.param(segment, id=f"{profile.name}-{segment.low}")


def test_cold_junction_voltage_linear():
    assert cold_junction_voltage(25.0, COLD_JUNCTION) == 1.0
    assert cold_junction_voltage(50.0, COLD_JUNCTION) == pytest.approx(2.0)
    assert cold_junction_voltage(0.0, COLD_JUNCTION) == pytest.approx(0.0)


def test_inverse_temperature_linear():
    assert inverse_temperature(4.0, LINEAR) == pytest.approx(100.0)
    assert inverse_temperature(-2.0, LINEAR) == pytest.approx(-50.0)


def test_inverse_temperature_rational():
    """Evaluate a segment with every coefficient in use against the expanded
    expression"""
    coeffs = InverseCoeffs(10.0, 1.0, 2.0, 3.0, 4.0, 5.0, 0.1, 0.2, 0.3)
    dv = 1.5 - 1.0
    numerator = 2.0 * dv + 3.0 * dv**2 + 4.0 * dv**3 + 5.0 * dv**4
    denominator = 1.0 + 0.1 * dv + 0.2 * dv**2 + 0.3 * dv**3

    assert inverse_temperature(1.5, coeffs) == pytest.approx(
        10.0 + numerator / denominator
    )


@pytest.mark.parametrize("profile", ALL_TYPES, ids=lambda p: p.name)
def test_cold_junction_fit_centre(profile):
    coeffs = profile.cold_junction
    assert cold_junction_voltage(coeffs.T0, coeffs) == coeffs.V0


@pytest.mark.parametrize("segment", all_segments())
def test_inverse_fit_centre(segment):
    coeffs = segment.coefficients
    assert inverse_temperature(coeffs.V0, coeffs) == coeffs.T0


@pytest.mark.parametrize("profile, below, above", boundaries())
def test_segments_agree_at_boundary(profile, below, above):
    """Both fits give the same temperature where two segments meet"""
    boundary = below.high
    assert boundary == above.low

    temp_below = inverse_temperature(boundary, below.coefficients)
    temp_above = inverse_temperature(boundary, above.coefficients)
    assert math.isclose(temp_below, temp_above, abs_tol=BOUNDARY_TOLERANCE)


@pytest.mark.parametrize("profile, below, above", boundaries())
def test_boundary_belongs_to_closed_side(profile, below, above):
    boundary = below.high
    if profile.bounds is Bounds.OPEN_CLOSED:
        assert profile.segment_for(boundary) is below
    else:
        assert profile.segment_for(boundary) is above


@pytest.mark.parametrize("profile", ALL_TYPES, ids=lambda p: p.name)
def test_segment_for_outside_range(profile):
    assert profile.segment_for(profile.low - 0.001) is None
    assert profile.segment_for(profile.high + 0.001) is None


def test_segment_contains():
    closed_open = Segment(0.0, 1.0, LINEAR)
    assert closed_open.contains(0.0)
    assert closed_open.contains(0.5)
    assert not closed_open.contains(1.0)

    open_closed = Segment(0.0, 1.0, LINEAR, Bounds.OPEN_CLOSED)
    assert not open_closed.contains(0.0)
    assert open_closed.contains(0.5)
    assert open_closed.contains(1.0)


@pytest.mark.parametrize("low, high", [(1.0, 1.0), (2.0, 1.0)])
def test_segment_invalid_range(low, high):
    with pytest.raises(ValueError):
        Segment(low, high, LINEAR)


@pytest.mark.parametrize(
    "segments",
    [
        # Gap
        (Segment(0.0, 1.0, LINEAR), Segment(1.5, 2.0, LINEAR)),
        # Overlap
        (Segment(0.0, 1.0, LINEAR), Segment(0.5, 2.0, LINEAR)),
        # Out of order
        (Segment(1.0, 2.0, LINEAR), Segment(0.0, 1.0, LINEAR)),
        # Mixed boundary rules
        (
            Segment(0.0, 1.0, LINEAR),
            Segment(1.0, 2.0, LINEAR, Bounds.OPEN_CLOSED),
        ),
        # Empty
        (),
    ],
)
def test_profile_invalid_segments(segments):
    with pytest.raises(ValueError):
        TypeProfile("X", COLD_JUNCTION, segments)


def test_profile_range():
    profile = TypeProfile(
        "X",
        COLD_JUNCTION,
        (Segment(-1.0, 0.0, LINEAR), Segment(0.0, 2.0, LINEAR)),
    )
    assert profile.low == -1.0
    assert profile.high == 2.0
    assert profile.bounds is Bounds.CLOSED_OPEN
    assert profile.segment_for(0.0) is profile.segments[1]
    assert profile.segment_for(2.0) is None


def test_coefficients_are_values():
    assert LINEAR == InverseCoeffs(0.0, 0.0, 25.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        LINEAR.T0 = 1.0  # type: ignore
