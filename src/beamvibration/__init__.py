import logging

from .beam.beam_types import BeamType, BeamProperties, ModeRoot
from .beam.boundary_conditions import beam_for
from .beam.euler_bernoulli_beam import EulerBernoulliBeam
from .beam.cantilever_beam import CantileverBeam
from .beam.simply_supported_beam import SimplySupportedBeam
from .beam.clamped_clamped_beam import ClampedClampedBeam
from .beam.clamped_pinned_beam import ClampedPinnedBeam
from .solver.characteristic_solver import find_root, mode_roots, solve_characteristic_equation
from .modal.mode_shape import ModeShape
from .modal.mode_shapes import compute_mode_shape, compute_mode_shapes
from .modal.modal_properties import ModalProperties, compute_modal_properties
from .static.static_deflection import StaticDeflection, compute_static_deflection
from .damping.damped_response import (
    DampedResponse,
    Envelope,
    response_duration,
    simulate_damped_response,
)
from .config import BeamConfigurationError, load_config
from .analysis import BeamResults, BeamVibrationAnalyzer, analyze

logging.getLogger(__name__).addHandler(logging.NullHandler())


__version__ = "0.1.0"
