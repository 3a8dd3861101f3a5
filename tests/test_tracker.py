"""Tests for the habit tracker service used by the transport layer."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from tinyhabits.errors import AlreadyExists, DuplicateIdentity, InvalidArgument, NotFound
from tinyhabits.services.tracker import HabitStats, HabitSummary, HabitTracker


@pytest.fixture
def member(tracker):
    return tracker.register("member@x.com", b"hash")


def test_register_and_find(tracker):
    user = tracker.register("a@x.com", b"hash")

    assert tracker.find_user("A@X.COM") == user
    with pytest.raises(DuplicateIdentity):
        tracker.register("A@X.com", b"other")


def test_create_habit_returns_summary_with_zero_streak(tracker, member):
    summary = tracker.create_habit(member.id, "  Run  ", "blue")

    assert isinstance(summary, HabitSummary)
    assert summary.title == "Run"
    assert summary.color == "blue"
    assert summary.is_archived is False
    assert summary.streak == 0


def test_create_habit_short_title_rejected(tracker, member):
    with pytest.raises(InvalidArgument):
        tracker.create_habit(member.id, "ab")


def test_list_habits_includes_streaks(tracker, member, clock):
    run = tracker.create_habit(member.id, "Run")
    read = tracker.create_habit(member.id, "Read")
    tracker.check_in(member.id, run.id, "2024-01-11")
    tracker.check_in(member.id, run.id)

    listed = tracker.list_habits(member.id)

    assert [(h.id, h.streak) for h in listed] == [(run.id, 2), (read.id, 0)]


def test_list_habits_hides_archived(tracker, member):
    keep = tracker.create_habit(member.id, "Keep")
    drop = tracker.create_habit(member.id, "Drop")

    archived = tracker.archive_habit(member.id, drop.id)

    assert archived.is_archived is True
    assert [h.id for h in tracker.list_habits(member.id)] == [keep.id]


class TestCheckIn:
    """Date parsing and defaulting on the checkin path."""

    @pytest.mark.parametrize("on", [None, "", "   "])
    def test_omitted_date_defaults_to_today(self, tracker, member, clock, on):
        habit = tracker.create_habit(member.id, "Walk")
        assert tracker.check_in(member.id, habit.id, on).occurred_on == clock.today

    def test_iso_string_parsed(self, tracker, member):
        habit = tracker.create_habit(member.id, "Walk")
        assert tracker.check_in(member.id, habit.id, "2024-01-05").occurred_on == date(2024, 1, 5)

    @pytest.mark.parametrize("on", ["2024-02-30", "yesterday", "05/01/2024", "2024-1-5x"])
    def test_malformed_date_rejected(self, tracker, member, on):
        habit = tracker.create_habit(member.id, "Walk")
        with pytest.raises(InvalidArgument) as excinfo:
            tracker.check_in(member.id, habit.id, on)
        assert excinfo.value.field == "date"

    def test_double_checkin_conflicts(self, tracker, member):
        habit = tracker.create_habit(member.id, "Walk")
        tracker.check_in(member.id, habit.id, "2024-01-05")
        with pytest.raises(AlreadyExists):
            tracker.check_in(member.id, habit.id, "2024-01-05")

    def test_other_users_habit_not_found(self, tracker, member):
        habit = tracker.create_habit(member.id, "Walk")
        intruder = tracker.register("intruder@x.com", b"hash")
        with pytest.raises(NotFound):
            tracker.check_in(intruder.id, habit.id)


class TestCheckinsWindow:
    """Checkin listing with default and explicit bounds."""

    def test_default_window_is_last_week(self, tracker, member, clock):
        habit = tracker.create_habit(member.id, "Floss")
        for offset in (0, 3, 7, 8):
            tracker.check_in(member.id, habit.id, clock.today - timedelta(days=offset))

        assert tracker.checkins(member.id, habit.id) == ["2024-01-05", "2024-01-09", "2024-01-12"]

    def test_explicit_bounds(self, tracker, member):
        habit = tracker.create_habit(member.id, "Floss")
        for day in ("2024-01-01", "2024-01-02", "2024-01-03"):
            tracker.check_in(member.id, habit.id, day)

        assert tracker.checkins(member.id, habit.id, "2024-01-02", "2024-01-03") == [
            "2024-01-02",
            "2024-01-03",
        ]
        assert tracker.checkins(member.id, habit.id, "2024-01-03", "2024-01-01") == []

    def test_lookback_configurable(self, user_repo, habit_repo, clock):
        short = HabitTracker(user_repo, habit_repo, clock=clock, lookback_days=1)
        user = short.register("short@x.com", b"h")
        habit = short.create_habit(user.id, "Nap")
        short.check_in(user.id, habit.id, clock.today - timedelta(days=2))
        short.check_in(user.id, habit.id, clock.today - timedelta(days=1))

        assert short.checkins(user.id, habit.id) == ["2024-01-11"]


def test_habit_stats(tracker, member):
    habit = tracker.create_habit(member.id, "Write")
    for day in ("2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-11", "2024-01-12"):
        tracker.check_in(member.id, habit.id, day)

    stats = tracker.habit_stats(member.id, habit.id)

    assert stats == HabitStats(habit_id=habit.id, current_streak=2, longest_streak=4, total_checkins=6)


def test_habit_stats_unknown_habit(tracker, member):
    with pytest.raises(NotFound):
        tracker.habit_stats(member.id, 404)


class TestLookupOrder:
    """Unknown or foreign habits are reported before date errors."""

    def test_check_in_foreign_habit_bad_date(self, tracker, member):
        habit = tracker.create_habit(member.id, "Walk")
        intruder = tracker.register("intruder@x.com", b"hash")
        with pytest.raises(NotFound):
            tracker.check_in(intruder.id, habit.id, "not-a-date")

    def test_checkins_missing_habit_bad_bounds(self, tracker, member):
        with pytest.raises(NotFound):
            tracker.checkins(member.id, 404, "garbage", "2024-01-01")


def test_huge_lookback_does_not_overflow(user_repo, habit_repo, clock):
    wide = HabitTracker(user_repo, habit_repo, clock=clock, lookback_days=10**12)
    user = wide.register("wide@x.com", b"h")
    habit = wide.create_habit(user.id, "Ancient")
    wide.check_in(user.id, habit.id, "0001-01-01")

    assert wide.checkins(user.id, habit.id) == ["0001-01-01"]
