"""Single recompute entry point for the full prediction pipeline.

Callers invoke ``predict`` after every input change. Nothing is cached:
stage 1 (architecture), stage 2 (biology), stage 3 (scoring) and the chart
datasets are all re-derived from the five process inputs on each call.
"""
from __future__ import annotations

import logging
import math
from typing import List

from .architecture import predict_architecture
from .biology import predict_biology
from .config import INPUT_DOMAINS
from .interpret import interpret_results
from .models import InputDomainError, Prediction, ProcessInputs
from .scoring import score_applications, score_cells
from .sweeps import degradation_profile, mw_comparison, tradeoff

logger = logging.getLogger(__name__)


def validate_inputs(inputs: ProcessInputs) -> List[str]:
    """Return the names of fields outside their declared domain."""
    outside = []
    for name, value in inputs.as_dict().items():
        domain = INPUT_DOMAINS[name]
        if not domain['min'] <= value <= domain['max']:
            outside.append(name)
    return outside


def predict(inputs: ProcessInputs, strict=False) -> Prediction:
    """Run every stage for ``inputs``.

    Out-of-domain values are evaluated and clamped (logged as a warning)
    unless ``strict`` is set, in which case InputDomainError is raised.
    Non-finite values always raise.
    """
    non_finite = [name for name, value in inputs.as_dict().items() if not math.isfinite(value)]
    if non_finite:
        raise InputDomainError(non_finite)

    outside = validate_inputs(inputs)
    if outside:
        if strict:
            raise InputDomainError(outside)
        logger.warning("Extrapolating outside declared domain for %s", ", ".join(outside))

    logger.debug("Recomputing prediction for %s", inputs)
    arch = predict_architecture(inputs)
    biology = predict_biology(inputs.molecular_weight, arch)

    return Prediction(
        inputs=inputs,
        architecture=arch,
        biology=biology,
        application_scores=score_applications(arch),
        cell_scores=score_cells(arch),
        mw_comparison=mw_comparison(inputs.concentration),
        tradeoff=tradeoff(inputs.molecular_weight, inputs.concentration),
        degradation_profile=degradation_profile(arch.degradation_rate),
    )


class ScaffoldPredictor:
    def __init__(self, strict=False):
        self.strict = strict

    def predict(self, molecular_weight, concentration, voltage, flow_rate, distance):
        inputs = ProcessInputs(
            molecular_weight=molecular_weight,
            concentration=concentration,
            voltage=voltage,
            flow_rate=flow_rate,
            distance=distance,
        )
        return predict(inputs, strict=self.strict)

    def interpret(self, prediction):
        return interpret_results(prediction)
