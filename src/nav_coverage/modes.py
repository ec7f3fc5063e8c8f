import logging
from enum import Enum
from typing import Optional

from nav_coverage.errors import InvalidModeError
from nav_coverage.utils import to_upper

logger = logging.getLogger(__name__)


class HeadlandType(Enum):
    CONSTANT = 1


class SwathType(Enum):
    LENGTH = 1
    NUMBER = 2
    COVERAGE = 3


class RouteType(Enum):
    BOUSTROPHEDON = 1
    SNAKE = 2
    SPIRAL = 3
    CUSTOM = 4


class PathType(Enum):
    DUBIN = 1
    REEDS_SHEPP = 2


class PathContinuityType(Enum):
    CONTINUOUS = 1
    DISCONTINUOUS = 2


class PlannerModes:
    def __init__(self, headland: HeadlandType, swath: SwathType, route: RouteType,
                 path: PathType, continuity: PathContinuityType) -> None:
        self.headland = headland
        self.swath = swath
        self.route = route
        self.path = path
        self.continuity = continuity

    def __repr__(self) -> str:
        return (f"PlannerModes(headland={self.headland.name}, swath={self.swath.name}, "
                f"route={self.route.name}, path={self.path.name}, "
                f"continuity={self.continuity.name})")


def parse_mode(name: str, enum_cls):
    key = to_upper(name.strip())
    try:
        return enum_cls[key]
    except KeyError:
        valid = ", ".join(item.name for item in enum_cls)
        raise InvalidModeError(f"Unknown {enum_cls.__name__} '{name}', expected one of: {valid}") from None


def select_mode(requested: Optional[str], default: str, enum_cls):
    if not requested:
        logger.debug(f"No {enum_cls.__name__} requested, using default {default}")
        return parse_mode(default, enum_cls)
    return parse_mode(requested, enum_cls)


def resolve_goal_modes(goal, params) -> PlannerModes:
    return PlannerModes(
        headland=select_mode(goal.headland_mode.mode, params.default_headland_type, HeadlandType),
        swath=select_mode(goal.swath_mode.mode, params.default_swath_type, SwathType),
        route=select_mode(goal.route_mode.mode, params.default_route_type, RouteType),
        path=select_mode(goal.path_mode.mode, params.default_path_type, PathType),
        continuity=select_mode(goal.path_mode.continuity_mode,
                               params.default_path_continuity_type,
                               PathContinuityType),
    )
