"""Polygon filling with an ordered edge-table scan-line algorithm."""

from __future__ import annotations

import argparse
import struct
import sys
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterable

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

Pixel = tuple[int, int]


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Point:
    """A polygon vertex in drawing coordinates."""

    x: int
    y: int


@dataclass
class _Edge:
    x: float
    dx: float
    ymax: int


_by_x = attrgetter("x")


def scanline_fill(vertices: Iterable[Point | tuple[int, int]]) -> list[Pixel]:
    """Return the pixels covering a polygon, scan line by scan line."""
    points = [v if isinstance(v, Point) else Point(*v) for v in vertices]
    count = len(points)

    max_y = 0
    for p in points:
        if p.y > max_y:
            max_y = int(p.y)

    buckets: dict[int, list[_Edge]] = {i: [] for i in range(max_y + 1)}
    for j, vertex in enumerate(points):
        bucket = buckets.get(vertex.y)
        if bucket is None:
            continue
        for neighbour in (points[j - 1], points[(j + 1) % count]):
            if neighbour.y > vertex.y:
                dx = _f32((neighbour.x - vertex.x) / (neighbour.y - vertex.y))
                bucket.insert(0, _Edge(float(vertex.x), dx, neighbour.y))

    active: list[_Edge] = []
    pixels: list[Pixel] = []
    for i in range(max_y + 1):
        for edge in active:
            edge.x = _f32(edge.x + edge.dx)
        active.sort(key=_by_x)
        active = [edge for edge in active if edge.ymax != i]
        active = sorted(active + buckets[i], key=_by_x)
        for left, right in zip(active[0::2], active[1::2]):
            x = left.x
            while x <= right.x:
                pixels.append((int(x), i))
                x = _f32(x + 1)
    return pixels


@dataclass
class PolygonCollector:
    """Gathers clicked vertices until the polygon has its planned size."""

    count: int
    window_height: int = WINDOW_HEIGHT
    vertices: list[Point] = field(default_factory=list)

    def click(self, x: int, y: int) -> Point:
        """Record a click given in window coordinates (origin top-left)."""
        point = Point(x, self.window_height - y)
        self.vertices.append(point)
        return point

    def is_complete(self) -> bool:
        """True when exactly the planned number of vertices was clicked."""
        return len(self.vertices) == self.count

    def fill(self) -> list[Pixel]:
        """Filled pixels once the polygon is complete, otherwise nothing."""
        return scanline_fill(self.vertices) if self.is_complete() else []


def main(argv: list[str] | None = None) -> int:
    """Read clicked vertices from standard input and print the filled pixels."""
    parser = argparse.ArgumentParser(prog="rasterkit-fill", description="Scan-line polygon fill.")
    parser.add_argument("-n", "--count", type=int, help="number of vertices")
    args = parser.parse_args(argv)
    try:
        if args.count is None:
            print("Number of vertices:")
            count = int(input().strip())
        else:
            count = args.count
        collector = PolygonCollector(count)
        while not collector.is_complete():
            try:
                line = input()
            except EOFError:
                break
            if not line.strip():
                continue
            x, y = (int(token) for token in line.split())
            point = collector.click(x, y)
            print(f"vertex {len(collector.vertices)}: ({point.x}, {point.y})")
    except (ValueError, EOFError):
        print("invalid input", file=sys.stderr)
        return 1
    for x, y in collector.fill():
        print(x, y)
    return 0