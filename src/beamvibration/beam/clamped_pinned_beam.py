import numpy as np

from .beam_types import BeamType
from .euler_bernoulli_beam import EulerBernoulliBeam


class ClampedPinnedBeam(EulerBernoulliBeam):
    """
    Fixed at x = 0, pinned at x = L (fixed-pinned).

    The static deflection reuses the simply supported midspan polynomial with
    a stiffer leading coefficient. It is an approximation, not the exact
    propped-cantilever solution.
    """
    beam_type = BeamType.FIXED_PINNED
    root_guesses = (3.927, 7.069, 10.210, 13.352, 16.493)
    midspan_denominator = 96.0

    def characteristic(self, bl):
        return np.tan(bl) - np.tanh(bl)

    def _eigenfunction(self, bx, bl, lib):
        a = float(np.tanh(bl))
        return lib.sin(bx) - a * lib.sinh(bx)
