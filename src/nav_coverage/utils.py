import copy
import logging
import string
from functools import singledispatch
from typing import Optional

import utm
from scipy.spatial.transform import Rotation

from nav_coverage.errors import InvalidGoalError, InvalidPathStateError
from nav_coverage.msg import (ComputeCoveragePathGoal, Header, PathComponents, Point32,
                              PoseStamped, Quaternion)
from nav_coverage.msg import Path as NavPath
from nav_coverage.msg import Point as PointMsg
from nav_coverage.msg import Swath as SwathMsg
from nav_coverage.types import (Cell, Field, LinearRing, Path, PathSectionType, PathState,
                                Point, Swaths)

logger = logging.getLogger(__name__)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def point_to_msg(point: Point) -> Point32:
    return Point32(x=point.x, y=point.y, z=point.z)


def point32_to_point(point: Point32) -> PointMsg:
    return PointMsg(x=point.x, y=point.y, z=point.z)


def yaw_to_quaternion(yaw: float) -> Quaternion:
    x, y, z, w = Rotation.from_euler("xyz", [0.0, 0.0, yaw]).as_quat()
    return Quaternion(x=float(x), y=float(y), z=float(z), w=float(w))


def yaw_from_quaternion(quaternion: Quaternion) -> float:
    q = quaternion
    _, _, yaw = Rotation.from_quat([q.x, q.y, q.z, q.w]).as_euler("xyz")
    return float(yaw)


def path_state_to_msg(state: PathState, header: Optional[Header] = None) -> PoseStamped:
    pose_stamped = PoseStamped()
    if header is not None:
        pose_stamped.header = copy.deepcopy(header)
    pose_stamped.pose.position.x = state.point.x
    pose_stamped.pose.position.y = state.point.y
    pose_stamped.pose.position.z = state.point.z
    pose_stamped.pose.orientation = yaw_to_quaternion(state.angle)
    return pose_stamped


def to_upper(text: str) -> str:
    """ASCII-only uppercase, other characters pass through untouched."""
    return text.translate(_ASCII_UPPER)


def to_upper_inplace(buffer: bytearray) -> None:
    buffer[:] = buffer.upper()


@singledispatch
def to_coverage_path_msg(data, *args):
    """
    Build a PathComponents message either from swaths or from a full path.

    to_coverage_path_msg(swaths, ordered, header) wraps raw swaths,
    to_coverage_path_msg(path, header) splits a path into swaths and turns.
    """
    raise TypeError(f"Can't build a coverage path message from {type(data).__name__}")


@to_coverage_path_msg.register(list)
@to_coverage_path_msg.register(tuple)
def _swaths_to_coverage_path_msg(swaths: Swaths, ordered: bool, header: Header) -> PathComponents:
    msg = PathComponents()
    msg.header = copy.deepcopy(header)
    msg.swaths_ordered = ordered
    msg.contains_turns = False

    for swath in swaths:
        msg.swaths.append(SwathMsg(start=point_to_msg(swath.start_point()),
                                   end=point_to_msg(swath.end_point())))

    logger.debug(f"Converted {len(msg.swaths)} swaths, ordered: {ordered}")
    return msg


@to_coverage_path_msg.register(Path)
def _path_to_coverage_path_msg(path: Path, header: Header) -> PathComponents:
    msg = PathComponents()
    msg.header = copy.deepcopy(header)
    msg.swaths_ordered = True
    # Set even when the path is empty, consumers rely on it
    msg.contains_turns = True

    run_type = None
    run = list()
    for i, state in enumerate(path):
        if state.type not in (PathSectionType.SWATH, PathSectionType.TURN):
            logger.error(f"Path state {i} has invalid section type: {state.type}")
            raise InvalidPathStateError(f"Invalid path state type at index {i}: {state.type}")

        if run and state.type != run_type:
            _flush_run(msg, run_type, run, header)
            run = list()

        run_type = state.type
        run.append(state)

    if run:
        _flush_run(msg, run_type, run, header)

    logger.debug(f"Split path of {path.size()} states into "
                 f"{len(msg.swaths)} swaths and {len(msg.turns)} turns")
    return msg


def _flush_run(msg: PathComponents, run_type: PathSectionType, run: list, header: Header) -> None:
    if run_type == PathSectionType.SWATH:
        msg.swaths.append(SwathMsg(start=point_to_msg(run[0].point),
                                   end=point_to_msg(run[-1].point)))
    else:
        turn = NavPath()
        turn.header = copy.deepcopy(header)
        turn.poses = [path_state_to_msg(state, header) for state in run]
        msg.turns.append(turn)


def to_nav_path_msg(path: Path, header: Header) -> NavPath:
    msg = NavPath()
    msg.header = copy.deepcopy(header)
    for state in path:
        msg.poses.append(path_state_to_msg(state, header))
    return msg


def get_field_from_goal(goal: ComputeCoveragePathGoal) -> Field:
    if len(goal.polygons) == 0:
        logger.error("Coverage goal does not contain any polygons")
        raise InvalidGoalError("Missing polygons in the coverage goal")

    cell = None
    for i, polygon in enumerate(goal.polygons):
        ring = LinearRing(Point(coordinate.axis1, coordinate.axis2)
                          for coordinate in polygon.coordinates)

        if ring.size() < 3:
            logger.error(f"Polygon {i} has {ring.size()} coordinates, at least 3 required")
            raise InvalidGoalError(f"Invalid polygon {i}: less than 3 coordinates")
        if not ring.is_closed():
            logger.error(f"Polygon {i} is not closed: {ring.start_point()} != {ring.end_point()}")
            raise InvalidGoalError(f"Invalid polygon {i}: first and last coordinates differ")

        if cell is None:
            cell = Cell(ring)
        else:
            cell.add_ring(ring)

    logger.debug(f"Built field with {cell.size() - 1} inner rings in frame '{goal.frame_id}'")
    return Field(cell, crs=goal.frame_id)


def field_to_utm(field: Field) -> Field:
    if not field.is_gps():
        return field

    first = field.cell.outer.start_point()
    try:
        _, _, zone_number, zone_letter = utm.from_latlon(first.y, first.x)
    except utm.OutOfRangeError as e:
        logger.error(f"Field start point {first} is not a valid GPS coordinate: {e}")
        raise InvalidGoalError(f"Invalid GPS field: {e}") from e

    def convert(ring: LinearRing) -> LinearRing:
        coords = ring.as_array()
        try:
            eastings, northings, _, _ = utm.from_latlon(coords[:, 1], coords[:, 0],
                                                        force_zone_number=zone_number,
                                                        force_zone_letter=zone_letter)
        except ValueError as e:
            logger.error(f"Field ring can't be converted to UTM: {e}")
            raise InvalidGoalError(f"Invalid GPS field: {e}") from e
        return LinearRing(Point(float(easting), float(northing), float(z))
                          for easting, northing, z in zip(eastings, northings, coords[:, 2]))

    cell = Cell(convert(field.cell.outer))
    for ring in field.cell.inners:
        cell.add_ring(convert(ring))

    logger.info(f"Converted field from {field.crs} to UTM zone {zone_number}{zone_letter}")
    return Field(cell, crs=f"UTM:{zone_number}{zone_letter}")


def get_planning_field(goal: ComputeCoveragePathGoal, params) -> Field:
    field = get_field_from_goal(goal)
    if params.cartesian_frame:
        return field
    # Coordinates are longitude/latitude whatever frame the goal names
    field.crs = "EPSG:4326"
    return field_to_utm(field)
