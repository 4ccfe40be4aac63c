import pendulum
import pytest

from taskline.service.timeline_header import generate_header_cells


def _window(total_days, start=None):
    if start is None:
        start = pendulum.datetime(2024, 1, 1, tz="local")
    return {
        "min_date": start,
        "max_date": start.add(days=total_days),
        "total_days": total_days,
    }


def test_ten_day_window_has_two_week_cells():
    cells = generate_header_cells(
        _window(10), "week", today=pendulum.date(2024, 6, 1)
    )

    assert len(cells) == 2
    assert cells[0]["start_date"] == pendulum.date(2024, 1, 1)
    assert cells[0]["end_date"] == pendulum.date(2024, 1, 7)
    assert cells[0]["label"] == "Jan 1 - Jan 7"
    assert cells[1]["start_date"] == pendulum.date(2024, 1, 8)
    assert cells[1]["label"] == "Jan 8 - Jan 14"


def test_month_cells_are_thirty_day_blocks():
    cells = generate_header_cells(
        _window(45), "month", today=pendulum.date(2024, 6, 1)
    )

    assert len(cells) == 2
    assert cells[0]["label"] == "Jan 2024"
    assert cells[1]["start_date"] == pendulum.date(2024, 1, 31)
    assert cells[1]["end_date"] == pendulum.date(2024, 2, 29)
    assert cells[1]["label"] == "Jan 2024"


def test_day_cells_cover_window_inclusive():
    cells = generate_header_cells(
        _window(10), "day", today=pendulum.date(2024, 1, 3)
    )

    assert len(cells) == 11
    assert cells[0]["label"] == "Mon 1"
    assert cells[-1]["start_date"] == pendulum.date(2024, 1, 11)
    assert [c["is_current"] for c in cells].count(True) == 1
    assert cells[2]["is_current"]


def test_cells_are_contiguous():
    cells = generate_header_cells(
        _window(40), "week", today=pendulum.date(2024, 6, 1)
    )

    for previous, current in zip(cells, cells[1:]):
        assert previous["end_date"].add(days=1) == current["start_date"]


def test_current_cell_contains_today():
    cells = generate_header_cells(
        _window(21), "week", today=pendulum.date(2024, 1, 10)
    )

    assert [c["is_current"] for c in cells] == [False, True, False]


def test_unknown_granularity_raises():
    with pytest.raises(ValueError):
        generate_header_cells(_window(10), "quarter")
