"""
Configuration mapping for an analysis run.

A configuration has the sections ``beam_type``, ``beam_properties`` and the
optional ``analysis_parameters``; see ``load_config``. Validation happens
here, at the boundary, so the computational modules can assume positive
geometry and material values.
"""
import logging
from pathlib import Path

import orjson

from .beam.beam_types import BeamProperties
from .beam.boundary_conditions import as_beam_type

logger = logging.getLogger(__name__)

MAX_MODES = 5

PROPERTY_KEYS = ("length", "width", "depth", "youngs_modulus", "density")

DEFAULT_ANALYSIS_PARAMETERS = {
    "nb_modes": 3,
    "modal_properties": False,
}


class BeamConfigurationError(ValueError):
    pass


def load_config(path):
    config = orjson.loads(Path(path).read_bytes())
    logger.debug("Loaded configuration from %s", path)
    return config


def beam_type_from_config(config):
    try:
        value = config["beam_type"]
    except KeyError:
        raise KeyError("Config must contain a beam_type entry.") from None
    try:
        return as_beam_type(value)
    except ValueError as exc:
        raise BeamConfigurationError(str(exc)) from None


def beam_properties_from_config(config):
    try:
        values = config["beam_properties"]
    except KeyError:
        raise KeyError("Config must contain a beam_properties section.") from None

    missing = [key for key in PROPERTY_KEYS if key not in values]
    if missing:
        raise KeyError(f"Config beam_properties is missing: {', '.join(missing)}")

    kwargs = {}
    for key in PROPERTY_KEYS:
        value = float(values[key])
        if not value > 0:
            raise BeamConfigurationError(f"beam_properties.{key} must be positive, got {value}")
        kwargs[key] = value

    zeta = values.get("damping_ratio")
    if zeta is not None:
        zeta = float(zeta)
        if not 0 <= zeta < 1:
            raise BeamConfigurationError(f"beam_properties.damping_ratio must lie in [0, 1), got {zeta}")

    return BeamProperties(damping_ratio=zeta, **kwargs)


def analysis_parameters_from_config(config):
    params = dict(DEFAULT_ANALYSIS_PARAMETERS)
    params.update(config.get("analysis_parameters", {}))

    nb_modes = params["nb_modes"]
    if isinstance(nb_modes, bool) or not isinstance(nb_modes, int) or not 1 <= nb_modes <= MAX_MODES:
        raise BeamConfigurationError(
            f"analysis_parameters.nb_modes must be an integer between 1 and {MAX_MODES}, got {nb_modes!r}"
        )
    params["modal_properties"] = bool(params["modal_properties"])
    return params
