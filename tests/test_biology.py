import itertools

import numpy as np
import pytest

from pva_predictor.architecture import predict_architecture
from pva_predictor.biology import classify_lineage, predict_biology
from pva_predictor.models import MSCLineage, ProcessInputs

BOUNDS = {
    'cell_viability': (85, 98),
    'proliferation_time': (20, 48),
    'gag_content': (5, 45),
    'col2_expression': (1, 8),
    'aggrecan_expression': (1, 6),
    'col1_col2_ratio': (0.1, 2.5),
    'burst_release': (15, 75),
    'sustained_duration': (3, 28),
}


def test_reference_state_outcomes():
    inputs = ProcessInputs()
    bio = predict_biology(inputs.molecular_weight, predict_architecture(inputs))

    assert bio.cell_viability == pytest.approx(98)
    assert bio.proliferation_time == pytest.approx(25)
    assert bio.gag_content == pytest.approx(33.5)
    assert bio.col2_expression == 8
    assert bio.aggrecan_expression == 6
    assert bio.col1_col2_ratio == 0.1
    assert bio.burst_release == pytest.approx(53)
    assert bio.sustained_duration == pytest.approx(15)
    assert bio.msc_lineage.lineage is MSCLineage.OSTEOGENIC


def test_soft_scaffold_outcomes():
    inputs = ProcessInputs(molecular_weight=30000, concentration=8)
    arch = predict_architecture(inputs)
    bio = predict_biology(inputs.molecular_weight, arch)

    # 25 + 0.3 * 60 - 2 * 2.5
    assert arch.youngs_modulus == pytest.approx(38)
    assert bio.msc_lineage.lineage is MSCLineage.MYOGENIC_CHONDROGENIC
    assert bio.msc_lineage.chondrogenic_score == 80


@pytest.mark.parametrize("modulus, lineage, scores", [
    (20, MSCLineage.NEUROGENIC, (85, 25, 40)),
    (34.99, MSCLineage.NEUROGENIC, (85, 25, 40)),
    (35, MSCLineage.MYOGENIC_CHONDROGENIC, (40, 45, 80)),
    (59.99, MSCLineage.MYOGENIC_CHONDROGENIC, (40, 45, 80)),
    (60, MSCLineage.OSTEOGENIC, (20, 90, 55)),
    (85, MSCLineage.OSTEOGENIC, (20, 90, 55)),
])
def test_classify_lineage_thresholds(modulus, lineage, scores):
    result = classify_lineage(modulus)
    assert result.lineage is lineage
    assert (result.neurogenic_score, result.osteogenic_score, result.chondrogenic_score) == scores


def test_dominant_lineage_score_matches_label():
    assert classify_lineage(30).neurogenic_score == 85
    assert classify_lineage(60).osteogenic_score == 90
    assert classify_lineage(45).lineage.label == "Myogenic/Chondrogenic"


def test_outcomes_within_bounds_over_domain():
    grid = itertools.product(
        np.linspace(30000, 200000, 5),
        np.linspace(5, 20, 4),
        np.linspace(10, 25, 4),
        np.linspace(0.5, 3.0, 3),
        np.linspace(10, 25, 3),
    )
    for mw, conc, voltage, flow, dist in grid:
        arch = predict_architecture(ProcessInputs(mw, conc, voltage, flow, dist))
        bio = predict_biology(mw, arch)
        for name, (low, high) in BOUNDS.items():
            value = getattr(bio, name)
            assert low <= value <= high, (name, value, mw, conc)
