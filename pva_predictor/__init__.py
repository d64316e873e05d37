from .architecture import classify_morphology, concentration_window, predict_architecture
from .biology import classify_lineage, predict_biology
from .engine import ScaffoldPredictor, predict, validate_inputs
from .models import (
    ArchitectureProperties,
    BiologicalOutcomes,
    ConcentrationWindow,
    InputDomainError,
    LineagePrediction,
    Morphology,
    MSCLineage,
    MWTier,
    Prediction,
    ProcessInputs,
)
from .scoring import APPLICATIONS, CELL_TYPES, score_applications, score_cells
from .sweeps import degradation_profile, mw_comparison, tradeoff

__version__ = "2.1.0"
