"""Habit store: the single source of truth for habits."""

import json
import logging
import secrets
import sqlite3
from datetime import date
from typing import Optional, Union

from pydantic import ValidationError

from .chart import chart_series
from .dates import last_seven_day_labels, today_key
from .models import TEMPLATES, ChartSeries, Habit, HabitProgress
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


def weekly_completion_count(habit: Habit) -> int:
    """
    Count completed days for a habit.

    Counts every truthy entry ever recorded, not only the current week.
    """
    return sum(1 for done in habit.completions.values() if done)


def achieved_goal(habit: Habit) -> bool:
    """Whether the habit's completed-day count has reached its goal."""
    return weekly_completion_count(habit) >= habit.goal


class HabitStore:
    """Owns the habit list and default goal, and keeps storage in sync."""

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = "habits",
        default_goal: int = 3,
    ):
        """
        Initialize store and load persisted habits.

        Args:
            storage: Key-value storage holding the serialized habit list
            storage_key: Key the habit list is stored under
            default_goal: Weekly goal given to new habits
        """
        self.storage = storage
        self.storage_key = storage_key
        self.default_goal = default_goal
        self._issued_ids: set[str] = set()
        self.habits: list[Habit] = self.load()

    def load(self) -> list[Habit]:
        """
        Read the persisted habit list.

        Anything that isn't a valid JSON array of habit records is treated
        as no data.

        Returns:
            List of Habit objects (possibly empty)
        """
        try:
            raw = self.storage.get_item(self.storage_key)
        except sqlite3.Error as e:
            logger.warning(f"Could not read habits from storage: {e}")
            return []

        if raw is None:
            logger.info("No saved habits, starting empty")
            return []

        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise TypeError(f"expected a list, got {type(records).__name__}")
            habits = [Habit.model_validate(record) for record in records]
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Ignoring malformed saved habits: {e}")
            return []

        logger.info(f"Loaded {len(habits)} habits")
        return habits

    def save(self):
        """Write the full habit list to storage; failures are logged, not raised."""
        payload = json.dumps([habit.model_dump() for habit in self.habits])
        try:
            self.storage.set_item(self.storage_key, payload)
        except (sqlite3.Error, OSError) as e:
            logger.warning(f"Could not save habits, keeping in-memory state: {e}")

    def _new_id(self) -> str:
        """Generate an id not used by any habit in this session."""
        taken = self._issued_ids | {str(habit.id) for habit in self.habits}
        while True:
            habit_id = secrets.token_hex(8)
            if habit_id not in taken:
                self._issued_ids.add(habit_id)
                return habit_id

    def _create(self, name: str, goal: int) -> Habit:
        habit = Habit(id=self._new_id(), name=name, completions={}, streak=0, goal=goal)
        self.habits.append(habit)
        return habit

    def get_habit(self, habit_id: Union[int, float, str]) -> Optional[Habit]:
        """Get habit by id, compared as text so path ids match numeric ones."""
        for habit in self.habits:
            if str(habit.id) == str(habit_id):
                return habit
        return None

    def set_default_goal(self, goal: int):
        """Set the goal given to habits created without an explicit one."""
        self.default_goal = goal

    def add_habit(self, name: str, goal: Optional[int] = None) -> Optional[Habit]:
        """
        Append a new habit.

        Args:
            name: Display name; blank names are ignored
            goal: Weekly goal (defaults to the store's default goal)

        Returns:
            The new Habit, or None if the name was blank
        """
        name = name.strip()
        if not name:
            logger.debug("Ignoring habit with blank name")
            return None

        habit = self._create(name, self.default_goal if goal is None else goal)
        self.save()

        logger.info(f"Added habit: {habit.name} (goal {habit.goal}, id {habit.id})")
        return habit

    def toggle_completion(
        self,
        habit_id: Union[int, float, str],
        date_key: Optional[str] = None,
    ) -> Optional[Habit]:
        """
        Flip a habit's done flag for one day.

        Toggling off leaves a False entry rather than removing the key.

        Args:
            habit_id: Habit to update; unknown ids are ignored
            date_key: YYYY-MM-DD day (defaults to today)

        Returns:
            The updated Habit, or None if the id is unknown
        """
        habit = self.get_habit(habit_id)
        if not habit:
            logger.debug(f"Toggle for unknown habit {habit_id} ignored")
            return None

        if date_key is None:
            date_key = today_key()
        done = not habit.completions.get(date_key, False)
        habit.completions[date_key] = done
        self.save()

        logger.info(f"{habit.name} on {date_key}: {'done' if done else 'not done'}")
        return habit

    def apply_template(self, template_name: str, goal: Optional[int] = None) -> list[Habit]:
        """
        Create one habit per name in a template.

        Args:
            template_name: Template catalog key; unknown names add nothing
            goal: Weekly goal for every new habit (defaults to the default goal)

        Returns:
            The newly created habits
        """
        names = TEMPLATES.get(template_name, [])
        if not names:
            logger.debug(f"Unknown template '{template_name}' ignored")
            return []

        goal = self.default_goal if goal is None else goal
        created = [self._create(name, goal) for name in names]
        self.save()

        logger.info(f"Applied template '{template_name}': {len(created)} habits")
        return created

    def progress(self, today: Optional[date] = None) -> list[HabitProgress]:
        """Completion summary for every habit, in list order."""
        key = today_key(today)
        return [
            HabitProgress(
                habit=habit,
                done_days=weekly_completion_count(habit),
                achieved=achieved_goal(habit),
                done_today=bool(habit.completions.get(key)),
            )
            for habit in self.habits
        ]

    def chart_series(
        self,
        day_labels: Optional[list[str]] = None,
        year: Optional[int] = None,
    ) -> list[ChartSeries]:
        """Chart series over day_labels (defaults to the last seven days)."""
        if day_labels is None:
            day_labels = last_seven_day_labels()
        return chart_series(self.habits, day_labels, year)
