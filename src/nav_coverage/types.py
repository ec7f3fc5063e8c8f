from enum import Enum
from typing import Iterable, List, Optional

import numpy as np
from shapely.geometry import LineString, Polygon


GPS_FRAMES = ("EPSG:4326", "WGS84", "GPS")


class Point:
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.z = z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)


class PathSectionType(Enum):
    SWATH = 1
    TURN = 2


class PathDirection(Enum):
    NONE = 0
    FORWARD = 1
    BACKWARD = -1


class PathState:
    def __init__(self, point: Optional[Point] = None, angle: float = 0.0,
                 type: Optional[PathSectionType] = None,
                 direction: PathDirection = PathDirection.FORWARD,
                 length: float = 0.0, velocity: float = 1.0) -> None:
        self.point = point if point is not None else Point()
        self.angle = angle
        # None means the planner never tagged the state
        self.type = type
        self.direction = direction
        self.length = length
        self.velocity = velocity

    def __repr__(self) -> str:
        return f"PathState({self.point!r}, angle={self.angle}, type={self.type})"


class Path:
    def __init__(self, states: Optional[Iterable[PathState]] = None) -> None:
        self.states = list(states) if states is not None else list()

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self):
        return iter(self.states)

    def __getitem__(self, index):
        return self.states[index]

    def size(self) -> int:
        return len(self.states)

    def add_state(self, state: PathState) -> None:
        self.states.append(state)

    def resize(self, count: int) -> None:
        if count < len(self.states):
            del self.states[count:]
        while len(self.states) < count:
            self.states.append(PathState())

    def length(self) -> float:
        return sum(state.length for state in self.states)


class Swath:
    """One coverage pass of the planner, kept as a line with a width."""

    def __init__(self, path: Optional[LineString] = None, width: float = 0.0, id: int = 0) -> None:
        self.__path = path if path is not None else LineString()
        self.__width = width
        self.__id = id

    @property
    def path(self) -> LineString:
        return self.__path

    @property
    def width(self) -> float:
        return self.__width

    @property
    def id(self) -> int:
        return self.__id

    def is_empty(self) -> bool:
        return self.__path.is_empty

    def start_point(self) -> Point:
        if self.is_empty():
            return Point()
        return self.__to_point(self.__path.coords[0])

    def end_point(self) -> Point:
        if self.is_empty():
            return Point()
        return self.__to_point(self.__path.coords[-1])

    def length(self) -> float:
        return self.__path.length

    @staticmethod
    def __to_point(coords) -> Point:
        z = coords[2] if len(coords) > 2 else 0.0
        return Point(coords[0], coords[1], z)


class Swaths(list):
    pass


class LinearRing:
    def __init__(self, points: Optional[Iterable[Point]] = None) -> None:
        self.points = list(points) if points is not None else list()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def size(self) -> int:
        return len(self.points)

    def add_point(self, point: Point) -> None:
        self.points.append(point)

    def start_point(self) -> Point:
        return self.points[0]

    def end_point(self) -> Point:
        return self.points[-1]

    def is_closed(self) -> bool:
        return len(self.points) > 0 and self.start_point() == self.end_point()

    def as_array(self) -> np.ndarray:
        return np.array([point.to_tuple() for point in self.points], dtype=float).reshape(-1, 3)


class Cell:
    def __init__(self, outer: Optional[LinearRing] = None) -> None:
        self.__rings = [outer if outer is not None else LinearRing()]

    def add_ring(self, ring: LinearRing) -> None:
        self.__rings.append(ring)

    def get_geometry(self, index: int) -> LinearRing:
        return self.__rings[index]

    def size(self) -> int:
        return len(self.__rings)

    @property
    def outer(self) -> LinearRing:
        return self.__rings[0]

    @property
    def inners(self) -> List[LinearRing]:
        return self.__rings[1:]


class Field:
    def __init__(self, cell: Optional[Cell] = None, crs: str = "") -> None:
        self.cell = cell if cell is not None else Cell()
        self.crs = crs

    def get_geometry(self, index: int) -> LinearRing:
        return self.cell.get_geometry(index)

    def size(self) -> int:
        return self.cell.size()

    def is_gps(self) -> bool:
        return self.crs.upper() in GPS_FRAMES

    def to_polygon(self) -> Polygon:
        shell = self.cell.outer.as_array()[:, :2]
        holes = [ring.as_array()[:, :2] for ring in self.cell.inners]
        return Polygon(shell, holes)

    def area(self) -> float:
        return self.to_polygon().area
