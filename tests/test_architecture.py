"""Stage 1 (process -> architecture) formula and classifier tests."""

import itertools

import numpy as np
import pytest

from pva_predictor.architecture import (
    classify_morphology,
    concentration_window,
    mw_tier,
    predict_architecture,
    process_factors,
)
from pva_predictor.models import Morphology, MWTier, ProcessInputs

BOUNDS = {
    'fiber_diameter': (150, 1500),
    'porosity': (60, 95),
    'pore_size': (2, 15),
    'tensile_strength': (2, 32),
    'youngs_modulus': (20, 85),
    'water_absorption': (350, 950),
    'contact_angle': (35, 75),
    'degradation_rate': (4, 25),
    'swelling_ratio': (80, 100),
}


def domain_grid(n=5):
    return itertools.product(
        np.linspace(30000, 200000, n),
        np.linspace(5, 20, n),
        np.linspace(10, 25, n),
        np.linspace(0.5, 3.0, n),
        np.linspace(10, 25, n),
    )


def test_reference_state_factors_are_unity():
    assert process_factors(ProcessInputs()) == (1.0, 1.0, 1.0, 1.0)


def test_reference_state_properties():
    arch = predict_architecture(ProcessInputs())

    assert arch.fiber_diameter == pytest.approx(400)
    assert arch.porosity == pytest.approx(85)
    assert arch.pore_size == pytest.approx(7.25)
    assert arch.tensile_strength == pytest.approx(7.7)
    assert arch.youngs_modulus == pytest.approx(85)
    assert arch.water_absorption == pytest.approx(750)
    assert arch.contact_angle == pytest.approx(57)
    # 25 - 10.5 plus the porosity term (85 - 75) * 0.15
    assert arch.degradation_rate == pytest.approx(16.0)
    assert arch.swelling_ratio == pytest.approx(92)


def test_youngs_modulus_saturates_at_upper_bound():
    arch = predict_architecture(ProcessInputs(molecular_weight=200000, concentration=20))
    assert arch.youngs_modulus == 85


def test_thick_fibers_lose_tensile_strength():
    inputs = ProcessInputs(molecular_weight=200000, concentration=15, voltage=10, flow_rate=3.0, distance=25)
    arch = predict_architecture(inputs)
    assert arch.fiber_diameter > 1000
    expected = 2.5 + 2 * 5.2 + 5 * 0.35 - 2
    assert arch.tensile_strength == pytest.approx(expected)


def test_fiber_diameter_clamped_low_and_high():
    thin = predict_architecture(ProcessInputs(molecular_weight=30000, concentration=5, voltage=25, flow_rate=0.5))
    thick = predict_architecture(ProcessInputs(molecular_weight=200000, concentration=20, voltage=10, flow_rate=3.0))
    assert thin.fiber_diameter == 150
    assert thick.fiber_diameter == 1500


def test_all_properties_within_bounds_over_domain():
    for mw, conc, voltage, flow, dist in domain_grid():
        arch = predict_architecture(ProcessInputs(mw, conc, voltage, flow, dist))
        for name, (low, high) in BOUNDS.items():
            value = getattr(arch, name)
            assert low <= value <= high, (name, value, mw, conc, voltage, flow, dist)


def test_out_of_domain_inputs_are_clamped():
    arch = predict_architecture(ProcessInputs(molecular_weight=1_000_000, concentration=40, voltage=0))
    for name, (low, high) in BOUNDS.items():
        assert low <= getattr(arch, name) <= high


@pytest.mark.parametrize("mw, conc, expected", [
    (60000, 8, Morphology.BEADED),
    (120000, 8, Morphology.OPTIMAL_UNIFORM),
    (120000, 12, Morphology.OPTIMAL_UNIFORM),
    (180000, 12, Morphology.RIBBON_LIKE),
    (180000, 10, Morphology.UNIFORM_BEAD_FREE),
    (60000, 10, Morphology.UNIFORM_BEAD_FREE),
    (150000, 12, Morphology.OPTIMAL_UNIFORM),
    (100000, 5, Morphology.OPTIMAL_UNIFORM),
])
def test_classify_morphology(mw, conc, expected):
    assert classify_morphology(mw, conc) is expected


def test_morphology_labels():
    assert Morphology.BEADED.label == "Beaded fibers (beads-on-string)"
    assert Morphology.OPTIMAL_UNIFORM.label == "Smooth, uniform, bead-free (optimal)"


@pytest.mark.parametrize("mw, tier", [
    (30000, MWTier.LOW),
    (69999, MWTier.LOW),
    (70000, MWTier.MEDIUM),
    (149999, MWTier.MEDIUM),
    (150000, MWTier.HIGH),
    (200000, MWTier.HIGH),
])
def test_mw_tier_boundaries(mw, tier):
    assert mw_tier(mw) is tier


def test_concentration_window_narrows_and_shifts_up_with_mw():
    low, medium, high = (concentration_window(mw, 10) for mw in (50000, 100000, 180000))

    widths = [w.max_concentration - w.min_concentration for w in (low, medium, high)]
    assert widths[0] > widths[1] > widths[2]
    assert low.min_concentration < medium.min_concentration < high.min_concentration


def test_concentration_window_membership_is_inclusive():
    assert concentration_window(100000, 8).in_window
    assert concentration_window(100000, 12).in_window
    assert not concentration_window(100000, 12.5).in_window
    assert not concentration_window(180000, 11).in_window

    window = concentration_window(60000, 5)
    assert window.tier is MWTier.LOW
    assert (window.min_concentration, window.max_concentration) == (6, 14)
    assert not window.in_window
