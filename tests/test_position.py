import pendulum

from taskline.service.position import (
    calculate_position,
    calculate_progress_overlay,
    css_style,
    format_percent,
)

START = pendulum.datetime(2024, 1, 1, tz="local")
WINDOW = {"min_date": START, "max_date": START.add(days=100), "total_days": 100}


def test_position_is_day_offset_share_of_window():
    position = calculate_position(
        pendulum.datetime(2024, 1, 11, tz="local"),
        pendulum.datetime(2024, 1, 31, tz="local"),
        WINDOW,
    )

    assert position == {"left": 10.0, "width": 20.0}


def test_time_of_day_is_floored_away():
    position = calculate_position(
        pendulum.datetime(2024, 1, 11, 18, 0, tz="local"),
        pendulum.datetime(2024, 1, 31, 23, 0, tz="local"),
        WINDOW,
    )

    assert position == {"left": 10.0, "width": 20.0}


def test_missing_start_gives_zero_width_bar():
    end = pendulum.datetime(2024, 1, 5, tz="local")

    position = calculate_position(None, end, WINDOW)

    assert position == {"left": 0.0, "width": 0.0}


def test_missing_end_spans_one_day():
    position = calculate_position(
        pendulum.datetime(2024, 1, 21, tz="local"), None, WINDOW
    )

    assert position == {"left": 20.0, "width": 1.0}


def test_width_never_drops_below_one_percent():
    same_day = pendulum.datetime(2024, 1, 21, 9, 0, tz="local")
    inverted = calculate_position(
        pendulum.datetime(2024, 1, 21, tz="local"),
        pendulum.datetime(2024, 1, 11, tz="local"),
        WINDOW,
    )

    assert calculate_position(same_day, same_day, WINDOW)["width"] == 1.0
    assert inverted["width"] == 1.0


def test_start_before_window_is_clamped_to_zero():
    position = calculate_position(
        pendulum.datetime(2023, 12, 20, tz="local"),
        pendulum.datetime(2024, 1, 11, tz="local"),
        WINDOW,
    )

    assert position["left"] == 0.0


def test_left_is_monotonic_in_start_date():
    starts = [START.add(days=d) for d in (0, 3, 3, 17, 50, 99)]
    lefts = [calculate_position(s, s.add(days=1), WINDOW)["left"] for s in starts]

    assert lefts == sorted(lefts)


def test_progress_overlay_covers_remaining_share():
    assert calculate_progress_overlay(30) == {"left": 30.0, "width": 70.0}
    assert calculate_progress_overlay(0) == {"left": 0.0, "width": 100.0}
    assert calculate_progress_overlay(140) == {"left": 100.0, "width": 0.0}


def test_css_style_formats_percentages():
    assert format_percent(12.5) == "12.5%"
    assert format_percent(20.0) == "20%"
    assert css_style({"left": 10.0, "width": 2.5}) == {"left": "10%", "width": "2.5%"}


def test_bar_at_the_window_end_stays_inside():
    window = {
        "min_date": START,
        "max_date": START.add(days=1000),
        "total_days": 1000,
    }
    last_day = START.add(days=1000)

    position = calculate_position(last_day, last_day, window)

    assert position == {"left": 99.0, "width": 1.0}
