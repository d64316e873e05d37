"""Stage 2: scaffold architecture to biological outcomes."""
from __future__ import annotations

from .architecture import clamp
from .models import ArchitectureProperties, BiologicalOutcomes, LineagePrediction, MSCLineage


def classify_lineage(youngs_modulus) -> LineagePrediction:
    """MSC lineage commitment from substrate stiffness (MPa)."""
    if youngs_modulus < 35:
        lineage = MSCLineage.NEUROGENIC
    elif youngs_modulus < 60:
        lineage = MSCLineage.MYOGENIC_CHONDROGENIC
    else:
        lineage = MSCLineage.OSTEOGENIC
    return LineagePrediction.from_lineage(lineage)


def predict_biology(mw, arch: ArchitectureProperties) -> BiologicalOutcomes:
    fd = arch.fiber_diameter
    porosity = arch.porosity
    pore_size = arch.pore_size
    modulus = arch.youngs_modulus
    large_pores = pore_size > 6

    cell_viability = clamp(
        92 + (4 if porosity > 75 else 0) + (2 if 300 < fd < 900 else 0), 85, 98
    )

    # Doubling time, hours
    proliferation_time = clamp(
        32 - (porosity - 75) * 0.3 - (4 if pore_size > 4 else 0) + (6 if fd > 1000 else 0), 20, 48
    )

    # Cartilage markers
    gag_content = clamp(
        10 + modulus / 10 + (15 if large_pores else 0) + (8 if fd > 800 else 0), 5, 45
    )
    col2_expression = clamp(
        1.5 + modulus / 15 + (2.5 if large_pores else 0) + (1.5 if mw > 140000 else 0), 1, 8
    )
    aggrecan_expression = clamp(
        1.2 + modulus / 20 + (2 if large_pores else 0) + (1 if fd > 800 else 0), 1, 6
    )
    # Lower is better, avoids fibrocartilage
    col1_col2_ratio = clamp(
        2.0 - modulus / 50 - (0.8 if large_pores else 0) - (0.3 if mw > 140000 else 0), 0.1, 2.5
    )

    burst_release = clamp(70 - (mw / 100000) * 25 + (porosity - 75) * 0.8, 15, 75)
    sustained_duration = clamp(5 + (mw / 100000) * 12 - (porosity - 75) * 0.2, 3, 28)

    return BiologicalOutcomes(
        cell_viability=cell_viability,
        proliferation_time=proliferation_time,
        gag_content=gag_content,
        col2_expression=col2_expression,
        aggrecan_expression=aggrecan_expression,
        col1_col2_ratio=col1_col2_ratio,
        msc_lineage=classify_lineage(modulus),
        burst_release=burst_release,
        sustained_duration=sustained_duration,
    )
