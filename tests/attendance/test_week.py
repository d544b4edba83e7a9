from datetime import date, timedelta

import pytest

from distribution_admin.attendance.week import can_go_next, compute_week, shift_anchor, week_start


def test_week_of_wednesday_skips_friday():
    window = compute_week(date(2025, 6, 18))

    assert window.start == date(2025, 6, 15)
    assert window.end == date(2025, 6, 21)
    assert window.visible_dates == (
        date(2025, 6, 15),
        date(2025, 6, 16),
        date(2025, 6, 17),
        date(2025, 6, 18),
        date(2025, 6, 19),
        date(2025, 6, 21),
    )
    assert window.label == "2025-06-15 - 2025-06-21"


@pytest.mark.parametrize(
    "anchor",
    [date(2025, 6, 15), date(2025, 6, 17), date(2025, 6, 20), date(2025, 6, 21)],
)
def test_every_day_of_the_week_maps_to_same_sunday(anchor):
    assert week_start(anchor) == date(2025, 6, 15)


def test_window_always_has_six_visible_dates_without_friday():
    for offset in range(14):
        window = compute_week(date(2025, 1, 1) + timedelta(days=offset))
        assert len(window.visible_dates) == 6
        assert all(d.weekday() != 4 for d in window.visible_dates)
        assert window.start.weekday() == 6


def test_contains_rejects_friday_and_other_weeks():
    window = compute_week(date(2025, 6, 18))

    assert window.contains(date(2025, 6, 19))
    assert not window.contains(date(2025, 6, 20))
    assert not window.contains(date(2025, 6, 22))


def test_shift_anchor_moves_whole_weeks():
    assert shift_anchor(date(2025, 6, 18), 1) == date(2025, 6, 25)
    assert shift_anchor(date(2025, 6, 18), -2) == date(2025, 6, 4)


def test_next_week_only_after_window_elapsed():
    window = compute_week(date(2025, 6, 18))

    assert not can_go_next(window, date(2025, 6, 18))
    assert not can_go_next(window, date(2025, 6, 21))
    assert can_go_next(window, date(2025, 6, 22))
