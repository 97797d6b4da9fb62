from dataclasses import dataclass

import numpy as np
import sympy as sm
from scipy.integrate import trapezoid

from ..beam.boundary_conditions import beam_for


@dataclass(frozen=True)
class ModalProperties:
    mode: int
    bl: float
    modal_stiffness: float
    modal_mass: float
    mean_displacement: float

    @property
    def rayleigh_frequency(self):
        return np.sqrt(self.modal_stiffness / self.modal_mass) / (2.0 * np.pi)


def compute_modal_properties(beam_type, properties, bl, mode=1, nb_points=2001):
    """
    Generalized stiffness and mass of one mode, with the mode shape scaled to
    a unit peak on the integration grid.

    The curvature comes from differentiating the symbolic eigenfunction, the
    integrals are evaluated with the trapezoidal rule.
    """
    beam = beam_for(beam_type)
    L = properties.length

    s = sm.Symbol('s')
    phi = beam.mode_shape_symbolic(s, bl, L)
    phi_dd = phi.diff(s, 2)

    eval_phi = sm.lambdify(s, phi, 'numpy')
    eval_phi_dd = sm.lambdify(s, phi_dd, 'numpy')

    s_vals = np.linspace(0.0, L, nb_points)
    phi_vals = np.broadcast_to(eval_phi(s_vals), s_vals.shape)
    phi_dd_vals = np.broadcast_to(eval_phi_dd(s_vals), s_vals.shape)

    scale = np.max(np.abs(phi_vals))
    if scale > 0:
        phi_vals = phi_vals / scale
        phi_dd_vals = phi_dd_vals / scale

    k_modal = properties.flexural_rigidity * trapezoid(phi_dd_vals**2, s_vals)
    m_modal = properties.mass_per_length * trapezoid(phi_vals**2, s_vals)

    return ModalProperties(
        mode=mode,
        bl=bl,
        modal_stiffness=float(k_modal),
        modal_mass=float(m_modal),
        mean_displacement=float(trapezoid(phi_vals, s_vals) / L),
    )


def compute_all_modal_properties(beam_type, properties, roots, nb_points=2001):
    return [
        compute_modal_properties(beam_type, properties, root.bl, mode=root.mode, nb_points=nb_points)
        for root in roots
    ]
