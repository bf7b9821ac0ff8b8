import io

import pytest

from rasterkit.lines import LineAlgorithm, bresenham, dda, main, midpoint_line, rasterize

LINES = [
    (0, 0, 7, 3),
    (1, 1, -3, 7),
    (5, 5, 5, -2),
    (10, 2, 0, 2),
    (2, 9, 8, 0),
    (-4, -4, 6, 6),
]


def _connected(points):
    return all(
        max(abs(bx - ax), abs(by - ay)) == 1
        for (ax, ay), (bx, by) in zip(points, points[1:])
    )


@pytest.mark.parametrize("line", LINES)
def test_bresenham_endpoints_and_length(line):
    x1, y1, x2, y2 = line
    points = bresenham(*line)
    assert points[0] == (x1, y1)
    assert points[-1] == (x2, y2)
    assert len(points) == max(abs(x2 - x1), abs(y2 - y1)) + 1
    assert _connected(points)


@pytest.mark.parametrize("line", LINES)
def test_dda_endpoints_and_length(line):
    x1, y1, x2, y2 = line
    points = dda(*line)
    assert points[0] == (x1, y1)
    assert points[-1] == (x2, y2)
    assert len(points) == max(abs(x2 - x1), abs(y2 - y1)) + 1
    assert _connected(points)


def test_dda_rounds_half_away_from_zero():
    assert dda(0, 0, 4, 2) == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]


def test_single_point_lines():
    assert dda(3, 3, 3, 3) == [(3, 3)]
    assert bresenham(3, 3, 3, 3) == [(3, 3)]
    assert midpoint_line(3, 3, 3, 3) == [(3, 3)]


def test_midpoint_horizontal_either_direction():
    expected = [(x, 4) for x in range(0, 6)]
    assert midpoint_line(0, 4, 5, 4) == expected
    assert midpoint_line(5, 4, 0, 4) == expected


def test_midpoint_vertical_upwards():
    assert midpoint_line(2, 0, 2, 3) == [(2, y) for y in range(0, 4)]


def test_midpoint_gentle_slope_reaches_end():
    points = midpoint_line(0, 0, 4, 2)
    assert points[0] == (0, 0)
    assert points[-1] == (4, 2)


@pytest.mark.parametrize("line", LINES)
def test_midpoint_starts_at_left_end_and_is_connected(line):
    x1, y1, x2, y2 = line
    points = midpoint_line(*line)
    left = (x1, y1) if x1 <= x2 else (x2, y2)
    assert points[0] == left
    assert _connected(points)
    xs = [x for x, _ in points]
    assert xs == sorted(xs)


def test_rasterize_dispatches_by_menu_number():
    assert rasterize(3, 0, 0, 7, 3) == bresenham(0, 0, 7, 3)
    assert rasterize(LineAlgorithm.DDA, 0, 0, 7, 3) == dda(0, 0, 7, 3)
    assert rasterize(1, 0, 0, 7, 3) == midpoint_line(0, 0, 7, 3)


@pytest.mark.parametrize("choice", [0, 4, -1])
def test_rasterize_rejects_unknown_algorithm(choice):
    with pytest.raises(ValueError):
        rasterize(choice, 0, 0, 1, 1)


def test_main_prints_pixels(capsys):
    assert main(["0", "0", "3", "1", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"{x} {y}" for x, y in bresenham(0, 0, 3, 1)]


def test_main_invalid_algorithm(capsys):
    assert main(["0", "0", "3", "1", "9"]) == 1
    assert "invalid input" in capsys.readouterr().err


def test_main_wrong_argument_count():
    with pytest.raises(SystemExit):
        main(["1", "2", "3"])


def test_main_prompts_when_no_arguments(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n2 2\n2\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == [f"{x} {y}" for x, y in dda(0, 0, 2, 2)]