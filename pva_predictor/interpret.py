from __future__ import annotations

from typing import Dict, Optional, Tuple

import pandas as pd

from .config import APPLICATION_INFO, CELL_INFO, RATING_THRESHOLDS
from .models import ArchitectureProperties, ConcentrationWindow, ProcessInputs


def display_label(name):
    return name.replace('_', ' ').title()


def score_rating(score):
    """
    Map a 0-100 suitability score to a rating.

    Args:
        score (float): Application or cell compatibility score

    Returns:
        str: "Excellent", "Good" or "Fair"
    """
    if score >= RATING_THRESHOLDS['excellent']:
        return "Excellent"
    if score >= RATING_THRESHOLDS['good']:
        return "Good"
    return "Fair"


def radar_profile(arch: ArchitectureProperties) -> pd.DataFrame:
    """Properties normalised to 0-100 against their upper clamp bounds."""
    return pd.DataFrame({
        'property': ['Fiber Dia.', 'Porosity', 'Tensile Str.', 'Stiffness', 'Degradation'],
        'value': [
            arch.fiber_diameter / 1500 * 100,
            arch.porosity,
            arch.tensile_strength / 32 * 100,
            arch.youngs_modulus / 85 * 100,
            arch.degradation_rate / 25 * 100,
        ],
    })


def _best(scores: Dict[str, float], info) -> Tuple[str, str]:
    # max() keeps the first of equal scores
    name = max(scores, key=scores.get)
    return name, info.get(name, {}).get('label', display_label(name))


def best_application(scores: Dict[str, float]) -> Tuple[str, str]:
    return _best(scores, APPLICATION_INFO)


def best_cell(scores: Dict[str, float]) -> Tuple[str, str]:
    return _best(scores, CELL_INFO)


def drug_release_advice(mw):
    if mw < 70000:
        return "Low MW favors rapid drug delivery (antibiotics, immediate therapeutic effect)"
    if mw > 150000:
        return "High MW provides sustained release (growth factors, long-term angiogenesis)"
    return "Medium MW offers balanced release profile (wound healing, tissue regeneration)"


def concentration_warning(inputs: ProcessInputs, window: ConcentrationWindow) -> Optional[str]:
    if window.in_window:
        return None
    return (
        f"Warning: Current concentration ({inputs.concentration:g} wt%) is outside the optimal "
        f"spinnable window ({window.min_concentration:g}-{window.max_concentration:g} wt%) for MW "
        f"{inputs.molecular_weight / 1000:.0f}k Da. This may result in processing difficulties or defects."
    )


def interpret_results(prediction):
    """Collect the headline text the dashboard shows for a prediction."""
    arch = prediction.architecture
    app_name, app_label = best_application(prediction.application_scores)
    cell_name, cell_label = best_cell(prediction.cell_scores)
    return {
        'morphology': arch.morphology.label,
        'concentration_warning': concentration_warning(prediction.inputs, arch.concentration_window),
        'msc_lineage': prediction.biology.msc_lineage.lineage.label,
        'drug_release': drug_release_advice(prediction.inputs.molecular_weight),
        'best_application': app_label,
        'best_application_rating': score_rating(prediction.application_scores[app_name]),
        'best_cell': cell_label,
        'best_cell_rating': score_rating(prediction.cell_scores[cell_name]),
    }
