"""Chart datasets derived from the stage 1 trend formulas.

MW sweeps hold concentration at the current value and every other process
parameter at its reference state, without clamping, so the curves show the
underlying molecular weight trend.
"""
from __future__ import annotations

import numpy as np
import pandas as pd
from scipy.special import expit

from .config import DEGRADATION_WEEKS, MW_COMPARISON_GRID, TRADEOFF_GRID


def _trend(mw, concentration):
    mw_ratio = np.asarray(mw, dtype=float) / 100000
    fiber_diameter = 400 * mw_ratio * (concentration / 10)
    porosity = 95 - (fiber_diameter / 100) * 2.5
    tensile_strength = 2.5 + mw_ratio * 5.2 + (concentration - 10) * 0.35
    return mw_ratio, fiber_diameter, porosity, tensile_strength


def mw_comparison(concentration, grid=MW_COMPARISON_GRID) -> pd.DataFrame:
    mw = np.asarray(grid, dtype=float)
    mw_ratio, fiber_diameter, porosity, tensile_strength = _trend(mw, concentration)
    return pd.DataFrame({
        'mw_kda': mw / 1000,
        'fiber_diameter': fiber_diameter,
        'porosity': porosity,
        'tensile_strength': tensile_strength,
        'youngs_modulus': 25 + mw_ratio * 60 + (concentration - 10) * 2.5,
        'degradation_rate': 25 - mw_ratio * 10.5,
    })


def tradeoff(mw, concentration, grid=TRADEOFF_GRID) -> pd.DataFrame:
    """Pore size vs tensile strength across MW; flags the grid point nearest ``mw``."""
    test_mw = np.asarray(grid, dtype=float)
    _, fiber_diameter, porosity, tensile_strength = _trend(test_mw, concentration)
    pore_size = (fiber_diameter / 200) * 1.5 + porosity / 20

    # argmin returns the first index, so ties go to the lower MW
    nearest = int(np.argmin(np.abs(test_mw - mw)))
    current = np.zeros(len(test_mw), dtype=bool)
    current[nearest] = True

    return pd.DataFrame({
        'mw_kda': test_mw / 1000,
        'pore_size': pore_size,
        'tensile_strength': tensile_strength,
        'current': current,
    })


def degradation_profile(degradation_rate, weeks=DEGRADATION_WEEKS) -> pd.DataFrame:
    week = np.arange(weeks + 1, dtype=float)
    k = degradation_rate / 100 * 0.15

    mass_remaining = np.maximum(0.0, 100 * np.exp(-k * week))
    mechanical_retention = 100 * np.power(np.clip(1 - week / 20, 0.0, None), 1.5)
    cell_infiltration = np.minimum(100.0, 100 * expit(0.4 * (week - 6)))

    return pd.DataFrame({
        'week': week.astype(int),
        'mass_remaining': mass_remaining,
        'mechanical_retention': mechanical_retention,
        'cell_infiltration': cell_infiltration,
    })
