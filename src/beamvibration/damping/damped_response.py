import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

MAX_DURATION = 60.0
MIN_DURATION = 5.0
NB_PERIODS = 15
NB_TIME_CONSTANTS = 3


@dataclass(frozen=True, eq=False)
class Envelope:
    time: np.ndarray
    upper: np.ndarray
    lower: np.ndarray


@dataclass(frozen=True, eq=False)
class DampedResponse:
    time: np.ndarray
    displacement: np.ndarray
    envelope: Envelope
    damping_ratio: float
    natural_frequency: float
    damped_frequency: float


def response_duration(natural_frequency, damping_ratio):
    # Long enough to show 15 cycles and 3 decay time constants, capped at a minute
    omega_n = 2.0 * np.pi * natural_frequency
    period = 1.0 / natural_frequency
    time_constant = 1.0 / (damping_ratio * omega_n)
    return min(MAX_DURATION, max(NB_PERIODS * period, NB_TIME_CONSTANTS * time_constant, MIN_DURATION))


def simulate_damped_response(natural_frequency, damping_ratio, duration, amplitude=1.0,
                             nb_samples=1001, envelope_stride=10):
    """
    Free vibration of an underdamped single mode released from rest at
    `amplitude`: x(t) = A exp(-zeta wn t) cos(wd t).

    Returns None unless 0 < damping_ratio < 1.
    """
    zeta = damping_ratio
    if zeta <= 0 or zeta >= 1:
        logger.debug("Damped response skipped, damping ratio %g outside (0, 1)", zeta)
        return None

    omega_n = 2.0 * np.pi * natural_frequency
    omega_d = omega_n * np.sqrt(1.0 - zeta**2)

    t = np.linspace(0.0, duration, nb_samples)
    decay = amplitude * np.exp(-zeta * omega_n * t)
    displacement = decay * np.cos(omega_d * t)

    t_env = t[::envelope_stride]
    upper = amplitude * np.exp(-zeta * omega_n * t_env)

    return DampedResponse(
        time=t,
        displacement=displacement,
        envelope=Envelope(time=t_env, upper=upper, lower=-upper),
        damping_ratio=zeta,
        natural_frequency=natural_frequency,
        damped_frequency=omega_d / (2.0 * np.pi),
    )
