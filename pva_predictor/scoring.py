"""Stage 3: multiplicative suitability scoring.

Each score starts from a fiber-diameter base (95 when in range) and is
multiplied down by every unmet condition, then capped at 100.
"""
from __future__ import annotations

from typing import Dict

from .models import ArchitectureProperties

APPLICATIONS = (
    'skin_regeneration',
    'vascular_engineering',
    'nerve_guidance',
    'cartilage_repair',
    'bone_engineering',
    'drug_delivery',
)

CELL_TYPES = (
    'fibroblasts',
    'endothelial',
    'schwann',
    'chondrocytes',
    'osteoblasts',
    'stem_cells',
)


def _cap(score):
    return max(0.0, min(100.0, score))


def score_applications(arch: ArchitectureProperties) -> Dict[str, float]:
    fd = arch.fiber_diameter
    porosity = arch.porosity
    pore = arch.pore_size
    ts = arch.tensile_strength
    modulus = arch.youngs_modulus
    deg = arch.degradation_rate

    return {
        'skin_regeneration': _cap(
            (95 if fd < 600 else 95 - (fd - 600) / 15)
            * (1 if porosity > 80 else porosity / 80)
            * (1 if deg > 12 else 0.85)
        ),
        'vascular_engineering': _cap(
            (95 if 400 <= fd <= 1200 else 75)
            * (1 if 5 <= ts <= 12 else 0.8)
            * (1 if porosity > 70 else 0.85)
        ),
        'nerve_guidance': _cap(
            (95 if 500 <= fd <= 900 else 80)
            * (1 if porosity > 72 else 0.88)
            * (1 if 6 <= deg <= 10 else 0.85)
        ),
        'cartilage_repair': _cap(
            (95 if fd > 800 else 70)
            * (1 if pore > 6 else 0.75)
            * (1 if modulus > 60 else modulus / 60)
            * (1 if deg < 8 else 0.8)
        ),
        'bone_engineering': _cap(
            (95 if fd > 1000 else 80)
            * (1 if modulus > 70 else modulus / 70)
            * (1 if deg < 7 else 0.85)
        ),
        'drug_delivery': _cap(
            (95 if fd < 500 else 85)
            * (1 if porosity > 82 else 0.88)
            * (1 if deg > 8 else 0.9)
        ),
    }


def score_cells(arch: ArchitectureProperties) -> Dict[str, float]:
    fd = arch.fiber_diameter
    porosity = arch.porosity
    pore = arch.pore_size
    modulus = arch.youngs_modulus

    return {
        'fibroblasts': _cap(
            (95 if 200 <= fd <= 500 else 75)
            * (1 if porosity > 75 else 0.85)
            * (1 if 3 <= pore <= 6 else 0.88)
        ),
        'endothelial': _cap(
            (95 if 400 <= fd <= 1000 else 78)
            * (1 if porosity > 70 else 0.87)
            * (1 if 4 <= pore <= 8 else 0.85)
        ),
        'schwann': _cap(
            (95 if 500 <= fd <= 900 else 80)
            * (1 if porosity > 72 else 0.88)
        ),
        'chondrocytes': _cap(
            (95 if fd > 800 else 70)
            * (1 if pore > 6 else 0.75)
            * (1 if 50 <= modulus <= 80 else 0.82)
        ),
        'osteoblasts': _cap(
            (95 if fd > 1000 else 80)
            * (1 if modulus > 70 else modulus / 70)
            * (1 if pore > 7 else 0.85)
        ),
        'stem_cells': _cap(
            (95 if 400 <= fd <= 1200 else 82)
            * (1 if porosity > 70 else 0.88)
            * (1 if pore >= 5 else 0.85)
        ),
    }
