import logging

from ..beam.beam_types import ModeRoot
from ..beam.boundary_conditions import beam_for

logger = logging.getLogger(__name__)

BRACKET_HALF_WIDTH = 0.5
DERIVATIVE_STEP = 1e-8
FLAT_DERIVATIVE = 1e-10


def find_root(f, lower, upper, tolerance=1e-6, max_iterations=100):
    """
    Hybrid Newton-Raphson search for a root of f inside [lower, upper].

    Starts at the bracket midpoint. A Newton step that leaves the bracket is
    replaced by a bisection of the bracket about its midpoint, which also
    becomes the next iterate. Returns None when |f| is still above the
    tolerance once the iterations are spent or the derivative goes flat.
    """
    x = 0.5 * (lower + upper)

    for _ in range(max_iterations):
        fx = f(x)
        if abs(fx) < tolerance:
            return x

        dfx = (f(x + DERIVATIVE_STEP) - f(x - DERIVATIVE_STEP)) / (2.0 * DERIVATIVE_STEP)
        if abs(dfx) < FLAT_DERIVATIVE:
            break

        x_new = x - fx / dfx
        if x_new < lower or x_new > upper:
            x = 0.5 * (lower + upper)
            if f(lower) * f(x) < 0:
                upper = x
            else:
                lower = x
        else:
            x = x_new

    return x if abs(f(x)) < tolerance else None


def _solve(beam_type, nb_modes):
    beam = beam_for(beam_type)
    roots = []
    for mode, guess in enumerate(beam.root_guesses[:max(nb_modes, 0)], start=1):
        bl = find_root(
            beam.characteristic,
            guess - BRACKET_HALF_WIDTH,
            guess + BRACKET_HALF_WIDTH,
        )
        if bl is None:
            logger.debug("%s mode %d: no root near bL=%.3f, mode dropped", beam, mode, guess)
            continue
        logger.debug("%s mode %d: bL=%.10f", beam, mode, bl)
        roots.append(ModeRoot(mode=mode, bl=float(bl)))
    return roots


def solve_characteristic_equation(beam_type, nb_modes=3):
    return [root.bl for root in _solve(beam_type, nb_modes)]


def mode_roots(beam_type, nb_modes=3):
    return _solve(beam_type, nb_modes)
