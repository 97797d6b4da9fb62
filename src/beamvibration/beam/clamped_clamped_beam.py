import numpy as np

from .beam_types import BeamType
from .euler_bernoulli_beam import EulerBernoulliBeam


class ClampedClampedBeam(EulerBernoulliBeam):
    """Both ends fixed (fixed-fixed)."""
    beam_type = BeamType.FIXED_FIXED
    root_guesses = (4.730, 7.853, 10.996, 14.137, 17.279)
    midspan_denominator = 192.0

    def characteristic(self, bl):
        return np.cos(bl) * np.cosh(bl) - 1.0

    def _eigenfunction(self, bx, bl, lib):
        # sinh(bL) - sin(bL) is left unguarded, small values blow the coefficient up
        a = float((np.cosh(bl) - np.cos(bl)) / (np.sinh(bl) - np.sin(bl)))
        return (lib.cos(bx) - lib.cosh(bx)) - a * (lib.sin(bx) - lib.sinh(bx))
