import pytest

from nav_coverage.config import CoverageParams, load_params
from nav_coverage.errors import ConfigError


def test_load_packaged_defaults():
    params = load_params()
    assert params.robot_width == pytest.approx(2.1)
    assert params.default_route_type == "BOUSTROPHEDON"
    assert params.cartesian_frame is True


def test_load_ros_style_params(tmp_path):
    params_file = tmp_path / "params.yaml"
    params_file.write_text(
        "coverage_server:\n"
        "  ros__parameters:\n"
        "    operation_width: 3\n"
        "    default_path_type: REEDS_SHEPP\n"
        "    cartesian_frame: false\n"
    )
    params = load_params(str(params_file))
    assert params.operation_width == 3.0
    assert isinstance(params.operation_width, float)
    assert params.default_path_type == "REEDS_SHEPP"
    assert params.cartesian_frame is False
    assert params.robot_width == pytest.approx(2.1)


def test_load_flat_params_ignores_unknown(tmp_path, caplog):
    params_file = tmp_path / "params.yaml"
    params_file.write_text("robot_width: 1.0\nunknown_key: 5\n")
    params = load_params(str(params_file))
    assert params.robot_width == 1.0
    assert not hasattr(params, "unknown_key")
    assert "unknown_key" in caplog.text


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_params(str(tmp_path / "missing.yaml"))


def test_load_empty_file(tmp_path):
    params_file = tmp_path / "params.yaml"
    params_file.write_text("")
    assert load_params(str(params_file)).as_dict() == CoverageParams().as_dict()


@pytest.mark.parametrize("overrides", [
    {"robot_width": 0.0},
    {"min_turning_radius": -1.0},
    {"operation_width": "wide"},
    {"cartesian_frame": "yes"},
    {"default_route_type": 3},
])
def test_invalid_params(overrides):
    with pytest.raises(ConfigError):
        CoverageParams(**overrides)


def test_load_empty_ros_parameters(tmp_path):
    params_file = tmp_path / "params.yaml"
    params_file.write_text("coverage_server:\n  ros__parameters:\n")
    assert load_params(str(params_file)).as_dict() == CoverageParams().as_dict()


def test_load_empty_node_section(tmp_path):
    params_file = tmp_path / "params.yaml"
    params_file.write_text("coverage_server:\n")
    assert load_params(str(params_file)).as_dict() == CoverageParams().as_dict()


@pytest.mark.parametrize("content", [
    "coverage_server: 5\n",
    "coverage_server:\n  ros__parameters: [1, 2]\n",
])
def test_load_non_mapping_node_section(tmp_path, content):
    params_file = tmp_path / "params.yaml"
    params_file.write_text(content)
    with pytest.raises(ConfigError):
        load_params(str(params_file))


def test_unknown_param_name():
    with pytest.raises(ConfigError):
        CoverageParams(not_a_param=1)
