"""In-memory habit ledger with per-user and per-habit locking."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ...errors import HABIT_NOT_FOUND, AlreadyExists, NotFound
from ...forms import HabitForm, parse_calendar_date
from ...logging_config import get_logger
from ...models.habit import Checkin, Habit
from ...services import habits as streaks
from ..concurrency import IdSequence, KeyedLocks

logger = get_logger(__name__)

Clock = Callable[[], date]


class InMemoryHabitRepository:
    """Memory-resident ledger of habits and their checkins.

    A user's habit list is guarded by that user's lock and a habit's checkins
    by that habit's lock. Returned models are copies; mutating them never
    changes stored state.
    """

    def __init__(
        self,
        *,
        clock: Clock = date.today,
        user_exists: Optional[Callable[[int], object]] = None,
    ):
        """Initialize an empty ledger.

        Args:
            clock: Source of "today" for streaks and defaulted checkins.
            user_exists: Optional lookup used to reject habits for unknown
                users; any falsy result counts as unknown.
        """
        self._clock = clock
        self._user_exists = user_exists
        self._habits_by_user: dict[int, list[Habit]] = {}
        self._habits_by_id: dict[int, Habit] = {}
        self._checkins_by_habit: dict[int, dict[date, Checkin]] = {}
        self._user_locks = KeyedLocks()
        self._habit_locks = KeyedLocks()
        self._habit_ids = IdSequence()
        self._checkin_ids = IdSequence()

    def today(self) -> date:
        return self._clock()

    def _owned(self, user_id: int, habit_id: int) -> Optional[Habit]:
        habit = self._habits_by_id.get(habit_id)
        if habit is None or habit.user_id != user_id:
            return None
        return habit

    def _require(self, user_id: int, habit_id: int) -> Habit:
        habit = self._owned(user_id, habit_id)
        if habit is None:
            raise NotFound(HABIT_NOT_FOUND)
        return habit

    def list_habits(self, user_id: int, *, include_archived: bool = False) -> list[Habit]:
        """List a user's habits in creation order."""
        if user_id not in self._habits_by_user:
            return []
        with self._user_locks(user_id):
            habits = self._habits_by_user.get(user_id, [])
            return [
                habit.model_copy()
                for habit in habits
                if include_archived or not habit.is_archived
            ]

    def add_habit(self, user_id: int, title: str, color: Optional[str] = None) -> Habit:
        """Create a new habit owned by ``user_id``."""
        form = HabitForm.parse(title, color)
        if self._user_exists is not None and not self._user_exists(user_id):
            raise NotFound("User not found")

        habit = Habit(
            id=self._habit_ids.next(),
            user_id=user_id,
            title=form.title,
            color=form.color,
        )
        with self._habit_locks(habit.id):
            self._checkins_by_habit[habit.id] = {}
        with self._user_locks(user_id):
            self._habits_by_user.setdefault(user_id, []).append(habit)
            self._habits_by_id[habit.id] = habit

        logger.info(f"Habit created: {habit.title}", extra={"habit_id": habit.id, "user_id": user_id})
        return habit.model_copy()

    def find_habit(self, user_id: int, habit_id: int) -> Optional[Habit]:
        habit = self._owned(user_id, habit_id)
        return habit.model_copy() if habit else None

    def archive_habit(self, user_id: int, habit_id: int) -> Habit:
        """Exclude a habit from default listings; checkins are kept."""
        habit = self._require(user_id, habit_id)
        with self._user_locks(user_id):
            habit.is_archived = True
            archived = habit.model_copy()
        logger.info(f"Habit archived: {habit.title}", extra={"habit_id": habit_id, "user_id": user_id})
        return archived

    # Checkin operations
    def add_checkin(
        self, user_id: int, habit_id: int, occurred_on: date | str | None = None
    ) -> Checkin:
        """Record a checkin for ``occurred_on`` (defaults to today).

        Raises:
            NotFound: The habit is missing or owned by another user.
            AlreadyExists: The habit already has a checkin for that day.
        """
        habit = self._require(user_id, habit_id)
        day = parse_calendar_date(occurred_on, default=self._clock())
        with self._habit_locks(habit.id):
            days = self._checkins_by_habit.setdefault(habit.id, {})
            if day in days:
                logger.warning(
                    "Duplicate checkin rejected",
                    extra={"habit_id": habit.id, "occurred_on": day.isoformat()},
                )
                raise AlreadyExists("Checkin for that date already exists")
            checkin = Checkin(id=self._checkin_ids.next(), habit_id=habit.id, occurred_on=day)
            days[day] = checkin
        return checkin.model_copy()

    def get_checkins_range(
        self, user_id: int, habit_id: int, start: date, end: date
    ) -> list[date]:
        """Return checkin dates in ``[start, end]``, ascending."""
        habit = self._require(user_id, habit_id)
        if start > end:
            return []
        with self._habit_locks(habit.id):
            days = list(self._checkins_by_habit.get(habit.id, {}))
        return sorted(day for day in days if start <= day <= end)

    def _checkin_days(self, habit: Habit) -> set[date]:
        with self._habit_locks(habit.id):
            return set(self._checkins_by_habit.get(habit.id, {}))

    def current_streak(self, user_id: int, habit_id: int, *, today: Optional[date] = None) -> int:
        """Calculate current streak for a habit; 0 when the habit is unknown."""
        habit = self._owned(user_id, habit_id)
        if habit is None:
            return 0
        return streaks.current_streak(self._checkin_days(habit), today or self._clock())

    def longest_streak(self, user_id: int, habit_id: int) -> int:
        """Calculate longest streak for a habit; 0 when the habit is unknown."""
        habit = self._owned(user_id, habit_id)
        if habit is None:
            return 0
        return streaks.longest_streak(self._checkin_days(habit))
