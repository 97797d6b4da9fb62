import copy

import orjson
import pytest

from beamvibration import BeamConfigurationError, BeamType, load_config
from beamvibration.config import (
    analysis_parameters_from_config,
    beam_properties_from_config,
    beam_type_from_config,
)
from beamvibration.utilities.run_analysis import main


def test_load_config_round_trip(tmp_path, cantilever_config):
    path = tmp_path / "cantilever.json"
    path.write_bytes(orjson.dumps(cantilever_config))

    assert load_config(path) == cantilever_config


def test_inputs_from_config(cantilever_config):
    assert beam_type_from_config(cantilever_config) is BeamType.CANTILEVER

    props = beam_properties_from_config(cantilever_config)
    assert props.length == 2.0
    assert props.damping_ratio == 0.02
    assert props.area == pytest.approx(0.03)
    assert props.second_moment == pytest.approx(2.25e-4)

    params = analysis_parameters_from_config(cantilever_config)
    assert params == {"nb_modes": 3, "modal_properties": True}


def test_analysis_parameters_default(cantilever_config):
    config = copy.deepcopy(cantilever_config)
    del config["analysis_parameters"]
    assert analysis_parameters_from_config(config) == {"nb_modes": 3, "modal_properties": False}


def test_damping_ratio_is_optional(cantilever_config):
    config = copy.deepcopy(cantilever_config)
    del config["beam_properties"]["damping_ratio"]
    assert beam_properties_from_config(config).damping_ratio is None


def test_missing_beam_type(cantilever_config):
    config = copy.deepcopy(cantilever_config)
    del config["beam_type"]
    with pytest.raises(KeyError, match="beam_type"):
        beam_type_from_config(config)


def test_unknown_beam_type(cantilever_config):
    config = copy.deepcopy(cantilever_config)
    config["beam_type"] = "free-free"
    with pytest.raises(BeamConfigurationError, match="free-free"):
        beam_type_from_config(config)


def test_missing_property(cantilever_config):
    config = copy.deepcopy(cantilever_config)
    del config["beam_properties"]["density"]
    with pytest.raises(KeyError, match="density"):
        beam_properties_from_config(config)


@pytest.mark.parametrize("key", ["length", "width", "depth", "youngs_modulus", "density"])
@pytest.mark.parametrize("value", [0.0, -1.0])
def test_non_positive_property(cantilever_config, key, value):
    config = copy.deepcopy(cantilever_config)
    config["beam_properties"][key] = value
    with pytest.raises(BeamConfigurationError, match=key):
        beam_properties_from_config(config)


@pytest.mark.parametrize("zeta", [-0.1, 1.0, 2.0])
def test_damping_ratio_out_of_range(cantilever_config, zeta):
    config = copy.deepcopy(cantilever_config)
    config["beam_properties"]["damping_ratio"] = zeta
    with pytest.raises(BeamConfigurationError, match="damping_ratio"):
        beam_properties_from_config(config)


@pytest.mark.parametrize("nb_modes", [0, 6, 2.5, True])
def test_invalid_mode_count(cantilever_config, nb_modes):
    config = copy.deepcopy(cantilever_config)
    config["analysis_parameters"]["nb_modes"] = nb_modes
    with pytest.raises(BeamConfigurationError, match="nb_modes"):
        analysis_parameters_from_config(config)


def test_run_analysis_script(tmp_path, capsys, cantilever_config):
    path = tmp_path / "cantilever.json"
    path.write_bytes(orjson.dumps(cantilever_config))

    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "Beam type: cantilever" in out
    assert "mode 1: f = " in out
    assert "Static deflection under 1000 N" in out
    assert "Modal properties:" in out


def test_run_analysis_script_usage(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err
