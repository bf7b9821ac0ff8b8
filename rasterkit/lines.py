"""Line scan conversion with the DDA, Bresenham and midpoint algorithms."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from enum import IntEnum

Pixel = tuple[int, int]


class LineAlgorithm(IntEnum):
    """Menu numbers of the available line algorithms."""

    MIDPOINT = 1
    DDA = 2
    BRESENHAM = 3


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def dda(x1: int, y1: int, x2: int, y2: int) -> list[Pixel]:
    """Rasterize a line with the digital differential analyser."""
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [(x1, y1)]
    x_inc = _f32(dx / steps)
    y_inc = _f32(dy / steps)
    x, y = _f32(x1), _f32(y1)
    points = [(_round(x), _round(y))]
    for _ in range(steps):
        x = _f32(x + x_inc)
        y = _f32(y + y_inc)
        points.append((_round(x), _round(y)))
    return points


def bresenham(x1: int, y1: int, x2: int, y2: int) -> list[Pixel]:
    """Rasterize a line with Bresenham's integer algorithm."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    points = []
    while True:
        points.append((x1, y1))
        if x1 == x2 and y1 == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy
    return points


def midpoint_line(x1: int, y1: int, x2: int, y2: int) -> list[Pixel]:
    """Rasterize a line with the midpoint decision-variable algorithm."""
    if x2 < x1:
        x1, y1, x2, y2 = x2, y2, x1, y1
    a = y1 - y2
    b = x2 - x1
    slope = float(-100 * a) if b == 0 else _f32(a / (x1 - x2))

    x, y = x1, y1
    points = [(x, y)]
    if 0 <= slope <= 1:
        d, inc_straight, inc_diag = 2 * a + b, 2 * a, 2 * (a + b)
        while x < x2:
            if d <= 0:
                x, y, d = x + 1, y + 1, d + inc_diag
            else:
                x, d = x + 1, d + inc_straight
            points.append((x, y))
    elif -1 <= slope <= 0:
        d, inc_diag, inc_straight = 2 * a - b, 2 * a - 2 * b, 2 * a
        while x < x2:
            if d > 0:
                x, y, d = x + 1, y - 1, d + inc_diag
            else:
                x, d = x + 1, d + inc_straight
            points.append((x, y))
    elif slope > 1:
        d, inc_diag, inc_straight = a + 2 * b, 2 * (a + b), 2 * b
        while y < y2:
            if d > 0:
                x, y, d = x + 1, y + 1, d + inc_diag
            else:
                y, d = y + 1, d + inc_straight
            points.append((x, y))
    else:
        d, inc_straight, inc_diag = a - 2 * b, -2 * b, 2 * (a - b)
        while y > y2:
            if d <= 0:
                x, y, d = x + 1, y - 1, d + inc_diag
            else:
                y, d = y - 1, d + inc_straight
            points.append((x, y))
    return points


_ALGORITHMS = {
    LineAlgorithm.MIDPOINT: midpoint_line,
    LineAlgorithm.DDA: dda,
    LineAlgorithm.BRESENHAM: bresenham,
}


def rasterize(algorithm: int | LineAlgorithm, x1: int, y1: int, x2: int, y2: int) -> list[Pixel]:
    """Rasterize a line with the algorithm chosen by its menu number."""
    return _ALGORITHMS[LineAlgorithm(algorithm)](x1, y1, x2, y2)


def _read_pair(prompt: str) -> list[int]:
    print(prompt)
    return [int(token) for token in input().split()[:2]]


def _prompt() -> list[int]:
    start = _read_pair("Enter the start point (x y):")
    end = _read_pair("Enter the end point (x y):")
    print("Choose the algorithm 1: midpoint 2: DDA 3: Bresenham")
    return [*start, *end, int(input().strip())]


def main(argv: list[str] | None = None) -> int:
    """Rasterize one line and print its pixels, one "x y" pair per line."""
    parser = argparse.ArgumentParser(prog="rasterkit-lines", description="Scan-convert a line.")
    parser.add_argument("values", nargs="*", type=int, metavar="N", help="x1 y1 x2 y2 algorithm")
    args = parser.parse_args(argv)
    values = args.values
    if values and len(values) != 5:
        parser.error("expected five integers: x1 y1 x2 y2 algorithm")
    try:
        if not values:
            values = _prompt()
        points = rasterize(values[4], *values[:4])
    except (ValueError, IndexError, EOFError):
        print("invalid input", file=sys.stderr)
        return 1
    for x, y in points:
        print(x, y)
    return 0