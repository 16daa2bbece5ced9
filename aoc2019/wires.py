"""Crossed wires on a grid: intersections, distances and step counts."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from os import PathLike

DEFAULT_INPUT_A = "data/input_day3a_simple.txt"
DEFAULT_INPUT_B = "data/input_day3a.txt"

_MOVE = re.compile(r"([UDLR])(\+?[0-9]+)", re.ASCII)


class Direction(enum.Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def delta(self) -> tuple[int, int]:
        return {
            Direction.UP: (0, 1),
            Direction.DOWN: (0, -1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }[self]


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    @property
    def manhattan(self) -> int:
        """Manhattan distance from the origin."""
        return abs(self.x) + abs(self.y)


ORIGIN = Point()


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    direction: Direction

    @classmethod
    def from_move(cls, start: Point, move: str) -> Segment:
        """Build the segment reached from ``start`` by a move such as ``R8``."""
        match = _MOVE.fullmatch(move)
        if match is None:
            raise ValueError(f"invalid move: {move!r}")
        direction = Direction(match.group(1))
        distance = int(match.group(2))
        dx, dy = direction.delta
        end = Point(start.x + dx * distance, start.y + dy * distance)
        return cls(start, end, direction)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies on this segment."""
        return (
            min(self.start.x, self.end.x) <= point.x <= max(self.start.x, self.end.x)
            and min(self.start.y, self.end.y) <= point.y <= max(self.start.y, self.end.y)
        )

    def length(self) -> int:
        return abs(self.end.x - self.start.x) + abs(self.end.y - self.start.y)


def parse_wire(text: str) -> list[Segment]:
    """Turn a comma-separated list of moves into consecutive segments."""
    segments = []
    point = ORIGIN
    for move in text.split(","):
        segment = Segment.from_move(point, move)
        segments.append(segment)
        point = segment.end
    return segments


def _cross(vertical: Segment, horizontal: Segment) -> Point | None:
    candidate = Point(vertical.start.x, horizontal.start.y)
    if horizontal.contains(candidate) and vertical.contains(candidate):
        return candidate
    return None


def intersection(first: Segment, second: Segment) -> Point | None:
    """The crossing point of two perpendicular segments, if any."""
    if first.direction.is_vertical and not second.direction.is_vertical:
        return _cross(first, second)
    if not first.direction.is_vertical and second.direction.is_vertical:
        return _cross(second, first)
    return None


def intersections(wire_a: Sequence[Segment], wire_b: Sequence[Segment]) -> Iterator[Point]:
    """Yield every crossing of the two wires other than the origin."""
    for first in wire_a:
        for second in wire_b:
            point = intersection(first, second)
            if point is not None and point != ORIGIN:
                yield point


def steps_to_point(segments: Sequence[Segment], target: Point) -> int | None:
    """Steps along the wire to first reach ``target``, or None if never reached."""
    steps = 0
    for segment in segments:
        if segment.contains(target):
            return steps + abs(target.x - segment.start.x) + abs(target.y - segment.start.y)
        steps += segment.length()
    return None


def closest_intersection_distance(wire_a: Sequence[Segment], wire_b: Sequence[Segment]) -> int:
    """Smallest Manhattan distance of a crossing from the origin, or 0 if none."""
    return min((point.manhattan for point in intersections(wire_a, wire_b)), default=0)


def fewest_combined_steps(wire_a: Sequence[Segment], wire_b: Sequence[Segment]) -> int:
    """Smallest combined step count to a crossing, or 0 if none."""
    return min(
        (
            steps_to_point(wire_a, point) + steps_to_point(wire_b, point)
            for point in intersections(wire_a, wire_b)
        ),
        default=0,
    )


def split_wires(text: str) -> tuple[str, str]:
    """Split puzzle input into the descriptions of its two wires."""
    first, sep, second = text.strip().partition("\n")
    if not sep:
        raise ValueError("Can't split lines")
    return first, second


def _load(path: str | PathLike[str]) -> tuple[list[Segment], list[Segment]]:
    with open(path, encoding="utf-8") as handle:
        first, second = split_wires(handle.read())
    return parse_wire(first), parse_wire(second)


def solve_day3a(path: str | PathLike[str] = DEFAULT_INPUT_A) -> int:
    """Distance of the crossing closest to the origin for the wires in ``path``."""
    return closest_intersection_distance(*_load(path))


def solve_day3b(path: str | PathLike[str] = DEFAULT_INPUT_B) -> int:
    """Fewest combined steps to a crossing for the wires in ``path``."""
    return fewest_combined_steps(*_load(path))