"""Stage 1: process parameters to scaffold architecture.

Empirical formula bank calibrated against literature reference points
(e.g. 200k Da PVA: 29.8 MPa tensile strength, 78 MPa Young's modulus).
Every property is clamped to its literature-informed bounds.
"""
from __future__ import annotations

from .models import (
    ArchitectureProperties,
    ConcentrationWindow,
    Morphology,
    MWTier,
    ProcessInputs,
)


def clamp(value, low, high):
    return max(low, min(high, value))


def process_factors(inputs: ProcessInputs):
    """Return (viscosity, voltage, flow, distance) factors; all are 1 at the reference state."""
    viscosity_factor = (inputs.molecular_weight / 100000) * (inputs.concentration / 10)
    voltage_factor = 1 - (inputs.voltage - 17.5) * 0.015
    flow_factor = 1 + (inputs.flow_rate - 1.5) * 0.12
    distance_factor = 1 + (inputs.distance - 15) * 0.008
    return viscosity_factor, voltage_factor, flow_factor, distance_factor


def mw_tier(mw) -> MWTier:
    if mw < 70000:
        return MWTier.LOW
    if mw < 150000:
        return MWTier.MEDIUM
    return MWTier.HIGH


def concentration_window(mw, concentration) -> ConcentrationWindow:
    tier = mw_tier(mw)
    in_window = tier.min_concentration <= concentration <= tier.max_concentration
    return ConcentrationWindow(tier, tier.min_concentration, tier.max_concentration, in_window)


def classify_morphology(mw, concentration) -> Morphology:
    # First matching rule wins
    if mw < 70000 and concentration < 9:
        return Morphology.BEADED
    if mw > 150000 and concentration > 10:
        return Morphology.RIBBON_LIKE
    if 100000 <= mw <= 150000:
        return Morphology.OPTIMAL_UNIFORM
    return Morphology.UNIFORM_BEAD_FREE


def predict_architecture(inputs: ProcessInputs) -> ArchitectureProperties:
    mw = inputs.molecular_weight
    conc = inputs.concentration
    mw_ratio = mw / 100000

    viscosity_factor, voltage_factor, flow_factor, distance_factor = process_factors(inputs)
    fiber_diameter = clamp(
        400 * viscosity_factor * voltage_factor * flow_factor * distance_factor, 150, 1500
    )

    # Thicker fibers pack more densely
    porosity = clamp(95 - (fiber_diameter / 100) * 2.5 + (inputs.voltage - 17.5) * 0.5, 60, 95)

    pore_size = clamp((fiber_diameter / 200) * 1.5 + (porosity / 20), 2, 15)

    tensile_strength = clamp(
        2.5 + mw_ratio * 5.2 + (conc - 10) * 0.35 - (2 if fiber_diameter > 1000 else 0), 2, 32
    )

    youngs_modulus = clamp(25 + mw_ratio * 60 + (conc - 10) * 2.5, 20, 85)

    water_absorption = clamp(950 - mw_ratio * 280 + (porosity - 75) * 8, 350, 950)

    # Higher MW is slightly more hydrophobic
    contact_angle = clamp(45 + mw_ratio * 15 - (porosity - 75) * 0.3, 35, 75)

    # Mn 8,840 Da -> ~21 %/week, Mn 12,266 Da -> ~18.5 %/week
    degradation_rate = clamp(25 - mw_ratio * 10.5 + (porosity - 75) * 0.15, 4, 25)

    # 24 h swelling fell from 97.4% to 84.2% with increasing Mn
    swelling_ratio = clamp(100 - mw_ratio * 8 - (conc - 10) * 0.5, 80, 100)

    return ArchitectureProperties(
        fiber_diameter=fiber_diameter,
        porosity=porosity,
        pore_size=pore_size,
        tensile_strength=tensile_strength,
        youngs_modulus=youngs_modulus,
        water_absorption=water_absorption,
        contact_angle=contact_angle,
        degradation_rate=degradation_rate,
        swelling_ratio=swelling_ratio,
        morphology=classify_morphology(mw, conc),
        concentration_window=concentration_window(mw, conc),
    )
