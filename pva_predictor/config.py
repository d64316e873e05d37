import logging
import os


# --- Input Domains ---
INPUT_DOMAINS = {
    'molecular_weight': {
        'min': 30000, 'max': 200000, 'step': 10000, 'default': 100000,
        'unit': 'Da', 'label': 'Molecular Weight (g/mol)',
    },
    'concentration': {
        'min': 5.0, 'max': 20.0, 'step': 0.5, 'default': 10.0,
        'unit': 'wt%', 'label': 'PVA Concentration (wt.%)',
    },
    'voltage': {
        'min': 10.0, 'max': 25.0, 'step': 0.5, 'default': 17.5,
        'unit': 'kV', 'label': 'Applied Voltage (kV)',
    },
    'flow_rate': {
        'min': 0.5, 'max': 3.0, 'step': 0.1, 'default': 1.5,
        'unit': 'mL/h', 'label': 'Flow Rate (mL/h)',
    },
    'distance': {
        'min': 10.0, 'max': 25.0, 'step': 0.5, 'default': 15.0,
        'unit': 'cm', 'label': 'Needle-Collector Distance (cm)',
    },
}

# Reference process state: every process factor equals 1 here
REFERENCE_VOLTAGE = 17.5
REFERENCE_FLOW_RATE = 1.5
REFERENCE_DISTANCE = 15.0

# --- Sweep Grids ---
MW_COMPARISON_GRID = [30000, 50000, 70000, 100000, 125000, 150000, 175000, 200000]
TRADEOFF_GRID = list(range(30000, 200001, 20000))
DEGRADATION_WEEKS = 16

RATING_THRESHOLDS = {
    'excellent': 80,
    'good': 60,
}

# Requirement notes shown next to each score card
APPLICATION_INFO = {
    'skin_regeneration': {
        'label': 'Skin Regeneration',
        'requirements': ['Optimal fiber: 200-600 nm', 'High porosity (>80%)', 'Fast degradation (2-4 weeks)'],
    },
    'vascular_engineering': {
        'label': 'Vascular Engineering',
        'requirements': ['Fiber: 400-1200 nm', 'Tensile: 5-12 MPa', 'Porosity >70%'],
    },
    'nerve_guidance': {
        'label': 'Nerve Guidance',
        'requirements': ['Fiber: 500-900 nm (aligned)', 'Porosity >72%', 'Degradation: 8-12 weeks'],
    },
    'cartilage_repair': {
        'label': 'Cartilage Repair',
        'requirements': ['Fiber: >800 nm', 'Pore size: >6 μm', 'High stiffness (>60 MPa)'],
    },
    'bone_engineering': {
        'label': 'Bone Engineering',
        'requirements': ['Fiber: >1000 nm', 'Max stiffness (>70 MPa)', 'Slow degradation (<7%/week)'],
    },
    'drug_delivery': {
        'label': 'Drug Delivery',
        'requirements': ['Fiber: <500 nm (high SA/V)', 'Very high porosity (>82%)', 'Controlled degradation'],
    },
}

CELL_INFO = {
    'fibroblasts': {
        'label': 'Fibroblasts',
        'optimal': '200-500 nm fibers, porosity >75%',
        'application': 'Wound healing, dermal regeneration',
        'notes': 'ECM: Collagen I, fibronectin',
    },
    'endothelial': {
        'label': 'Endothelial Cells',
        'optimal': '400-1000 nm fibers, porosity >70%',
        'application': 'Vascular grafts, angiogenesis',
        'notes': 'Markers: CD31, vWF, eNOS',
    },
    'schwann': {
        'label': 'Schwann Cells',
        'optimal': '500-900 nm (aligned), porosity >72%',
        'application': 'Nerve conduits, spinal cord injury',
        'notes': 'Factors: NGF, BDNF, GDNF secretion',
    },
    'chondrocytes': {
        'label': 'Chondrocytes',
        'optimal': '>800 nm fibers, pore size >6 μm',
        'application': 'Cartilage repair, osteochondral defects',
        'notes': 'ECM: Collagen II, aggrecan, GAGs',
    },
    'osteoblasts': {
        'label': 'Osteoblasts',
        'optimal': '>1000 nm fibers, stiffness >70 MPa',
        'application': 'Bone grafts, craniofacial reconstruction',
        'notes': 'Markers: ALP, osteocalcin, osteopontin',
    },
    'stem_cells': {
        'label': 'Stem Cells (MSCs)',
        'optimal': '400-1200 nm (versatile), porosity >70%',
        'application': 'Regenerative medicine, tissue repair',
        'notes': 'Lineage: stiffness-dependent',
    },
}

LOG_LEVEL_ENV = 'PVA_PREDICTOR_LOG_LEVEL'


def setup_logging(level=None):
    """Configure logging to show messages with timestamps.

    The level falls back to the PVA_PREDICTOR_LOG_LEVEL environment
    variable, then INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, 'INFO')
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
