import numpy as np

from .beam_types import BeamType
from .euler_bernoulli_beam import EulerBernoulliBeam


class SimplySupportedBeam(EulerBernoulliBeam):
    beam_type = BeamType.SIMPLY_SUPPORTED
    root_guesses = (np.pi, 2.0 * np.pi, 3.0 * np.pi, 4.0 * np.pi, 5.0 * np.pi)
    midspan_denominator = 48.0

    def characteristic(self, bl):
        return np.sin(bl)

    def _eigenfunction(self, bx, bl, lib):
        return lib.sin(bx)
