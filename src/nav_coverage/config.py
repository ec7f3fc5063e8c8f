import logging
import os
from typing import Optional

import yaml

from nav_coverage.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PARAMS_FILE = os.path.join(os.path.dirname(__file__), "params", "coverage_server.yaml")

_DEFAULTS = {
    "robot_width": 2.1,
    "operation_width": 2.5,
    "min_turning_radius": 0.4,
    "linear_curv_change": 2.0,
    "default_headland_type": "CONSTANT",
    "default_headland_width": 2.0,
    "default_swath_type": "LENGTH",
    "default_swath_angle_type": "BRUTE_FORCE",
    "default_allow_overlap": False,
    "default_route_type": "BOUSTROPHEDON",
    "default_path_type": "DUBIN",
    "default_path_continuity_type": "CONTINUOUS",
    "default_turn_point_distance": 0.1,
    "cartesian_frame": True,
    "coordinates_frame": "map",
}

_POSITIVE = ("robot_width", "operation_width", "min_turning_radius")


class CoverageParams:
    def __init__(self, **overrides) -> None:
        unknown = sorted(set(overrides) - set(_DEFAULTS))
        if unknown:
            raise ConfigError(f"Unknown coverage parameters: {', '.join(unknown)}")
        values = dict(_DEFAULTS)
        values.update(overrides)
        for name, value in values.items():
            setattr(self, name, _coerce(name, value))

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in _DEFAULTS}

    def __repr__(self) -> str:
        return f"CoverageParams({self.as_dict()})"


def _coerce(name, value):
    expected = type(_DEFAULTS[name])
    if expected is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"Parameter '{name}' must be a number, got {value!r}")
        value = float(value)
        if name in _POSITIVE and value <= 0.0:
            raise ConfigError(f"Parameter '{name}' must be positive, got {value}")
        return value
    if not isinstance(value, expected):
        raise ConfigError(f"Parameter '{name}' must be {expected.__name__}, got {value!r}")
    return value


def load_params(path: Optional[str] = None, node_name: str = "coverage_server") -> CoverageParams:
    """
    Read coverage parameters from a YAML file.

    Both the ROS layout (node_name -> ros__parameters -> values) and a flat
    mapping of values are accepted. Without a path the packaged defaults are used.
    """
    path = path or DEFAULT_PARAMS_FILE
    try:
        with open(path, "r", encoding="utf-8") as params_file:
            data = yaml.safe_load(params_file) or dict()
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Can't read parameters from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Parameters file {path} must contain a mapping")

    if node_name in data:
        node = data[node_name] or dict()
        if not isinstance(node, dict):
            raise ConfigError(f"Parameters of '{node_name}' in {path} must be a mapping")
        data = node.get("ros__parameters") or dict()
        if not isinstance(data, dict):
            raise ConfigError(f"ros__parameters of '{node_name}' in {path} must be a mapping")

    known = dict()
    for name, value in data.items():
        if name not in _DEFAULTS:
            logger.warning(f"Ignoring unknown coverage parameter '{name}'")
            continue
        known[name] = value

    params = CoverageParams(**known)
    logger.debug(f"Loaded coverage parameters from {path}")
    return params
