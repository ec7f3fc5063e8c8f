import pytest

from nav_coverage import msg
from nav_coverage.config import CoverageParams
from nav_coverage.errors import InvalidModeError
from nav_coverage.modes import (HeadlandType, PathContinuityType, PathType, RouteType, SwathType,
                                parse_mode, resolve_goal_modes, select_mode)


@pytest.mark.parametrize("name", ["snake", "Snake", "SNAKE", " snake "])
def test_parse_mode_is_case_insensitive(name):
    assert parse_mode(name, RouteType) is RouteType.SNAKE


def test_parse_mode_unknown():
    with pytest.raises(InvalidModeError) as exc:
        parse_mode("zigzag", RouteType)
    assert "BOUSTROPHEDON" in str(exc.value)


def test_select_mode_falls_back_to_default():
    assert select_mode("", "reeds_shepp", PathType) is PathType.REEDS_SHEPP
    assert select_mode(None, "DUBIN", PathType) is PathType.DUBIN
    assert select_mode("dubin", "REEDS_SHEPP", PathType) is PathType.DUBIN


def test_resolve_goal_modes_defaults():
    modes = resolve_goal_modes(msg.ComputeCoveragePathGoal(), CoverageParams())
    assert modes.headland is HeadlandType.CONSTANT
    assert modes.swath is SwathType.LENGTH
    assert modes.route is RouteType.BOUSTROPHEDON
    assert modes.path is PathType.DUBIN
    assert modes.continuity is PathContinuityType.CONTINUOUS


def test_resolve_goal_modes_from_goal():
    goal = msg.ComputeCoveragePathGoal()
    goal.route_mode.mode = "spiral"
    goal.swath_mode.mode = "coverage"
    goal.path_mode.mode = "reeds_shepp"
    goal.path_mode.continuity_mode = "discontinuous"

    modes = resolve_goal_modes(goal, CoverageParams(default_headland_type="constant"))
    assert modes.route is RouteType.SPIRAL
    assert modes.swath is SwathType.COVERAGE
    assert modes.path is PathType.REEDS_SHEPP
    assert modes.continuity is PathContinuityType.DISCONTINUOUS
    assert modes.headland is HeadlandType.CONSTANT


def test_resolve_goal_modes_bad_default():
    with pytest.raises(InvalidModeError):
        resolve_goal_modes(msg.ComputeCoveragePathGoal(), CoverageParams(default_route_type="circle"))
