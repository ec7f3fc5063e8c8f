from .errors import CoverageError, InvalidGoalError, InvalidPathStateError, InvalidModeError, ConfigError
from .types import Point, PathSectionType, PathDirection, PathState, Path, Swath, Swaths, LinearRing, Cell, Field
from .utils import (point_to_msg, point32_to_point, path_state_to_msg, yaw_from_quaternion, to_upper,
                    to_upper_inplace, to_coverage_path_msg, to_nav_path_msg, get_field_from_goal, field_to_utm,
                    get_planning_field)
from .modes import parse_mode, select_mode, resolve_goal_modes, PlannerModes
from .config import CoverageParams, load_params
