import logging
from dataclasses import dataclass

import numpy as np

from ..beam.boundary_conditions import beam_for

logger = logging.getLogger(__name__)

REFERENCE_LOAD = 1000.0  # N
NB_DEFLECTION_POINTS = 301


@dataclass(frozen=True, eq=False)
class StaticDeflection:
    x: np.ndarray
    y: np.ndarray
    load: float
    load_position: float
    max_deflection: float
    max_deflection_location: float


def compute_static_deflection(beam_type, properties, load=REFERENCE_LOAD, nb_points=NB_DEFLECTION_POINTS):
    """
    Deflection curve under a point load at the free end (cantilever) or at
    midspan (all other supports). Returns None for a non-positive length or
    flexural rigidity.
    """
    L = properties.length
    EI = properties.flexural_rigidity
    if EI <= 0 or L <= 0:
        logger.debug("Static deflection skipped (EI=%g, L=%g)", EI, L)
        return None

    beam = beam_for(beam_type)
    x = np.linspace(0.0, L, nb_points)
    y = beam.static_deflection(x, L, EI, load)

    i_max = int(np.argmax(np.abs(y)))
    return StaticDeflection(
        x=x,
        y=y,
        load=load,
        load_position=beam.load_position(L),
        max_deflection=float(y[i_max]),
        max_deflection_location=float(x[i_max]),
    )
