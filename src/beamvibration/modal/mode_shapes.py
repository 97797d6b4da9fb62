import numpy as np

from ..beam.boundary_conditions import beam_for
from .mode_shape import ModeShape


def sample_positions(length, step=0.01):
    # Accumulated steps, so the last sample can stop short of the beam end
    positions = []
    pos = 0.0
    while pos <= length:
        positions.append(pos)
        pos += step
    return np.array(positions, dtype=float)


def normalize(w):
    peak = np.max(np.abs(w)) if w.size else 0.0
    if peak > 0:
        return w / peak
    return w


def compute_mode_shape(beam_type, bl, length, step=0.01):
    beam = beam_for(beam_type)
    x = sample_positions(length, step)
    w = normalize(beam.mode_shape(x, bl, length))
    return x, w


def compute_mode_shapes(beam_type, roots, length, step=0.01):
    shapes = []
    for root in roots:
        x, w = compute_mode_shape(beam_type, root.bl, length, step)
        shapes.append(ModeShape(mode=root.mode, x=x, w=w, bl=root.bl))
    return shapes
