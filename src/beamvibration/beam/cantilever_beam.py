import numpy as np

from .beam_types import BeamType
from .euler_bernoulli_beam import EulerBernoulliBeam


class CantileverBeam(EulerBernoulliBeam):
    beam_type = BeamType.CANTILEVER
    root_guesses = (1.875, 4.694, 7.855, 10.996, 14.137)

    def characteristic(self, bl):
        return np.cos(bl) * np.cosh(bl) + 1.0

    def _eigenfunction(self, bx, bl, lib):
        # cos(bL) + cosh(bL) gets small only relative to sinh(bL) for high modes
        a = float((np.sin(bl) + np.sinh(bl)) / (np.cos(bl) + np.cosh(bl)))
        return (lib.sin(bx) - lib.sinh(bx)) - a * (lib.cos(bx) - lib.cosh(bx))

    def load_position(self, length):
        return length

    def static_deflection(self, x, length, flexural_rigidity, load):
        # Point load at the free end
        x = np.asarray(x, dtype=float)
        return load / (6.0 * flexural_rigidity) * (3.0 * length * x**2 - x**3)
