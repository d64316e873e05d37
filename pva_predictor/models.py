from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

import pandas as pd


class InputDomainError(ValueError):
    """Raised when process inputs fall outside their declared domain."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"Process inputs outside declared domain: {', '.join(self.fields)}")


@dataclass(frozen=True)
class ProcessInputs:
    molecular_weight: float = 100000
    concentration: float = 10.0
    voltage: float = 17.5
    flow_rate: float = 1.5
    distance: float = 15.0

    def as_dict(self) -> Dict[str, float]:
        return {
            'molecular_weight': self.molecular_weight,
            'concentration': self.concentration,
            'voltage': self.voltage,
            'flow_rate': self.flow_rate,
            'distance': self.distance,
        }


class Morphology(Enum):
    BEADED = "Beaded fibers (beads-on-string)"
    RIBBON_LIKE = "Thick fibers, potential ribbon-like"
    OPTIMAL_UNIFORM = "Smooth, uniform, bead-free (optimal)"
    UNIFORM_BEAD_FREE = "Uniform, bead-free fibers"

    @property
    def label(self) -> str:
        return self.value


class MWTier(Enum):
    """Spinnable concentration window (wt%) for each molecular weight tier."""

    LOW = (6.0, 14.0)
    MEDIUM = (8.0, 12.0)
    HIGH = (9.0, 10.5)

    @property
    def min_concentration(self) -> float:
        return self.value[0]

    @property
    def max_concentration(self) -> float:
        return self.value[1]


@dataclass(frozen=True)
class ConcentrationWindow:
    tier: MWTier
    min_concentration: float
    max_concentration: float
    in_window: bool


class MSCLineage(Enum):
    # label, (neurogenic, osteogenic, chondrogenic)
    NEUROGENIC = ("Neurogenic (soft substrate)", (85, 25, 40))
    MYOGENIC_CHONDROGENIC = ("Myogenic/Chondrogenic", (40, 45, 80))
    OSTEOGENIC = ("Osteogenic (stiff substrate)", (20, 90, 55))

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def scores(self) -> Tuple[int, int, int]:
        return self.value[1]


@dataclass(frozen=True)
class LineagePrediction:
    lineage: MSCLineage
    neurogenic_score: float
    osteogenic_score: float
    chondrogenic_score: float

    @classmethod
    def from_lineage(cls, lineage: MSCLineage) -> "LineagePrediction":
        neuro, osteo, chondro = lineage.scores
        return cls(lineage, neuro, osteo, chondro)


@dataclass(frozen=True)
class ArchitectureProperties:
    fiber_diameter: float
    porosity: float
    pore_size: float
    tensile_strength: float
    youngs_modulus: float
    water_absorption: float
    contact_angle: float
    degradation_rate: float
    swelling_ratio: float
    morphology: Morphology
    concentration_window: ConcentrationWindow


@dataclass(frozen=True)
class BiologicalOutcomes:
    cell_viability: float
    proliferation_time: float
    gag_content: float
    col2_expression: float
    aggrecan_expression: float
    col1_col2_ratio: float
    msc_lineage: LineagePrediction
    burst_release: float
    sustained_duration: float


@dataclass(frozen=True)
class Prediction:
    inputs: ProcessInputs
    architecture: ArchitectureProperties
    biology: BiologicalOutcomes
    application_scores: Dict[str, float]
    cell_scores: Dict[str, float]
    mw_comparison: pd.DataFrame = field(compare=False)
    tradeoff: pd.DataFrame = field(compare=False)
    degradation_profile: pd.DataFrame = field(compare=False)
