import pytest

from beamvibration import BeamProperties, BeamType


@pytest.fixture(scope="session")
def cantilever_config():
    """Hardcoded steel cantilever configuration."""
    return {
        "beam_type": "cantilever",
        "beam_properties": {
            "length": 2.0,
            "width": 0.1,
            "depth": 0.3,
            "youngs_modulus": 2.05e11,
            "density": 7830.0,
            "damping_ratio": 0.02
        },
        "analysis_parameters": {
            "nb_modes": 3,
            "modal_properties": True
        }
    }


@pytest.fixture
def steel_properties():
    """Steel beam of the reference configuration, undamped."""
    return BeamProperties(
        length=2.0,
        width=0.1,
        depth=0.3,
        youngs_modulus=2.05e11,
        density=7830.0,
    )


@pytest.fixture
def damped_properties():
    return BeamProperties(
        length=2.0,
        width=0.1,
        depth=0.3,
        youngs_modulus=2.05e11,
        density=7830.0,
        damping_ratio=0.02,
    )


@pytest.fixture(params=list(BeamType), ids=lambda t: t.value)
def beam_type(request):
    return request.param
