import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .beam.beam_types import BeamType, BeamProperties, ModeRoot
from .beam.boundary_conditions import as_beam_type
from .config import (
    analysis_parameters_from_config,
    beam_properties_from_config,
    beam_type_from_config,
)
from .damping.damped_response import DampedResponse, response_duration, simulate_damped_response
from .modal.mode_shape import ModeShape
from .modal.mode_shapes import compute_mode_shapes
from .modal.modal_properties import compute_all_modal_properties
from .solver.characteristic_solver import mode_roots
from .static.static_deflection import REFERENCE_LOAD, StaticDeflection, compute_static_deflection

logger = logging.getLogger(__name__)

RESPONSE_AMPLITUDE = 1.0  # m


@dataclass(frozen=True, eq=False)
class BeamResults:
    beam_type: BeamType
    roots: Tuple[ModeRoot, ...]
    natural_frequencies: Tuple[float, ...]
    mode_shapes: Tuple[ModeShape, ...]
    flexural_rigidity: float
    mass_per_length: float
    static_deflection: Optional[StaticDeflection] = None
    damping_coefficient: Optional[float] = None
    damped_response: Optional[DampedResponse] = None


def natural_frequency(bl, properties):
    L = properties.length
    omega = bl**2 * np.sqrt(properties.flexural_rigidity / (properties.mass_per_length * L**4))
    return float(omega / (2.0 * np.pi))


def analyze(beam_type, properties: BeamProperties, nb_modes: int = 3) -> BeamResults:
    """
    Natural frequencies, mode shapes, static deflection and, when a damping
    ratio is given, the damped free response of the first mode.

    Properties must be positive; validation belongs to the caller
    (see `beamvibration.config`).
    """
    beam_type = as_beam_type(beam_type)
    EI = properties.flexural_rigidity
    rho_a = properties.mass_per_length

    roots = mode_roots(beam_type, nb_modes)
    frequencies = [natural_frequency(root.bl, properties) for root in roots]
    shapes = compute_mode_shapes(beam_type, roots, properties.length)
    deflection = compute_static_deflection(beam_type, properties, load=REFERENCE_LOAD)

    damping_coefficient = None
    damped_response = None
    zeta = properties.damping_ratio
    if zeta is not None and frequencies:
        f1 = frequencies[0]
        omega_1 = 2.0 * np.pi * f1
        damping_coefficient = float(2.0 * zeta * omega_1 * rho_a)
        if 0 < zeta < 1:
            damped_response = simulate_damped_response(
                f1, zeta, response_duration(f1, zeta), amplitude=RESPONSE_AMPLITUDE
            )

    logger.info(
        "%s analysis: %d of %d modes, f = %s Hz",
        beam_type.value, len(roots), nb_modes,
        ", ".join(f"{f:.4g}" for f in frequencies),
    )

    return BeamResults(
        beam_type=beam_type,
        roots=tuple(roots),
        natural_frequencies=tuple(frequencies),
        mode_shapes=tuple(shapes),
        flexural_rigidity=EI,
        mass_per_length=rho_a,
        static_deflection=deflection,
        damping_coefficient=damping_coefficient,
        damped_response=damped_response,
    )


class BeamVibrationAnalyzer:
    def __init__(self, config):
        self.config = config

        # ---------- Extract analysis inputs ----------
        self.beam_type = beam_type_from_config(config)
        self.properties = beam_properties_from_config(config)
        params = analysis_parameters_from_config(config)
        self.nb_modes = params["nb_modes"]
        self.with_modal_properties = params["modal_properties"]

        # ---------- Initialize results storage ----------
        self.results = None
        self.modal_properties = None

    def run_analysis(self):
        self.results = analyze(self.beam_type, self.properties, self.nb_modes)
        if self.with_modal_properties:
            self.modal_properties = compute_all_modal_properties(
                self.beam_type, self.properties, self.results.roots
            )
        return self.results

    def get_results(self):
        if self.results is None:
            raise ValueError("Analysis has not been run yet. Call run_analysis() first.")
        return self.results
