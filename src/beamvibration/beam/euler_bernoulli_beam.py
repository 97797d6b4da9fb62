import numpy as np
import sympy as sm


class EulerBernoulliBeam:
    """
    Boundary-condition family of a uniform Euler-Bernoulli beam.

    A subclass carries everything that depends on the supports: the
    characteristic function whose roots are the nondimensional eigenvalues bL,
    the tabulated root locations used to bracket them, the eigenfunction and
    the static deflection under the reference point load.
    """
    beam_type = None
    root_guesses = ()

    # Leading denominator of P/(k*EI) * (3L^2 x - 4x^3) for midspan loading
    midspan_denominator = None

    def characteristic(self, bl):
        raise NotImplementedError

    def _eigenfunction(self, bx, bl, lib):
        # lib is numpy for sampled shapes, sympy for symbolic ones
        raise NotImplementedError

    def mode_shape(self, x, bl, length):
        b = bl / length
        return self._eigenfunction(b * np.asarray(x, dtype=float), bl, np)

    def mode_shape_symbolic(self, s, bl, length):
        b = float(bl) / float(length)
        return self._eigenfunction(b * s, bl, sm)

    def load_position(self, length):
        return 0.5 * length

    def static_deflection(self, x, length, flexural_rigidity, load):
        x = np.asarray(x, dtype=float)
        half = 0.5 * length
        xm = np.where(x <= half, x, length - x)
        coefficient = load / (self.midspan_denominator * flexural_rigidity)
        return coefficient * (3.0 * length**2 * xm - 4.0 * xm**3)

    def __repr__(self):
        return f"{self.__class__.__name__}()"
