"""
Message schema filled in by the conversion helpers.

Field names follow the middleware definitions (std_msgs/Header,
geometry_msgs/Point, nav_msgs/Path, ...), so a transport layer can copy
them one-to-one into its own generated classes.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Time:
    sec: int = 0
    nanosec: int = 0


@dataclass
class Header:
    stamp: Time = field(default_factory=Time)
    frame_id: str = ""


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Point32:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Pose:
    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass
class PoseStamped:
    header: Header = field(default_factory=Header)
    pose: Pose = field(default_factory=Pose)


@dataclass
class Path:
    header: Header = field(default_factory=Header)
    poses: List[PoseStamped] = field(default_factory=list)


@dataclass
class Swath:
    start: Point32 = field(default_factory=Point32)
    end: Point32 = field(default_factory=Point32)


@dataclass
class PathComponents:
    header: Header = field(default_factory=Header)
    contains_turns: bool = False
    swaths_ordered: bool = False
    swaths: List[Swath] = field(default_factory=list)
    turns: List[Path] = field(default_factory=list)


@dataclass
class Coordinate:
    axis1: float = 0.0
    axis2: float = 0.0


@dataclass
class Coordinates:
    coordinates: List[Coordinate] = field(default_factory=list)


@dataclass
class HeadlandMode:
    mode: str = ""
    width: float = 0.0


@dataclass
class SwathMode:
    mode: str = ""
    use_angle: bool = False
    angle: float = 0.0


@dataclass
class RouteMode:
    mode: str = ""
    spiral_n: int = 0
    custom_order: List[int] = field(default_factory=list)


@dataclass
class PathMode:
    mode: str = ""
    continuity_mode: str = ""
    turn_point_distance: float = 0.0


@dataclass
class ComputeCoveragePathGoal:
    frame_id: str = ""
    polygons: List[Coordinates] = field(default_factory=list)
    generate_headland: bool = True
    generate_route: bool = True
    generate_path: bool = True
    headland_mode: HeadlandMode = field(default_factory=HeadlandMode)
    swath_mode: SwathMode = field(default_factory=SwathMode)
    route_mode: RouteMode = field(default_factory=RouteMode)
    path_mode: PathMode = field(default_factory=PathMode)
