"""Data models for habits, templates and derived views."""

from dataclasses import dataclass, field
from typing import Union

from pydantic import BaseModel, Field, field_validator


class Habit(BaseModel):
    """A tracked behavior, stored as-is in persisted storage."""

    id: Union[int, float, str]  # older saves use numeric timestamps
    name: str
    completions: dict[str, bool] = Field(default_factory=dict)  # "YYYY-MM-DD" -> done
    streak: int = 0  # reserved, never computed
    goal: int

    @field_validator("completions", mode="before")
    @classmethod
    def _truthy_flags(cls, value):
        """Only truthiness counts, so null or 0 entries load as False."""
        if isinstance(value, dict):
            return {key: bool(done) for key, done in value.items()}
        return value


TEMPLATES: dict[str, list[str]] = {
    "Beginner Workout": ["Push-ups", "Squats", "Jogging"],
    "Mental Toughness": ["Cold shower", "Meditation", "Wake up early"],
    "Nutrition Focus": ["Protein intake", "No sugar", "Hydration"],
}


@dataclass
class HabitProgress:
    """Per-habit progress, computed fresh on every read."""
    habit: Habit
    done_days: int = 0
    achieved: bool = False
    done_today: bool = False


@dataclass
class ChartSeries:
    """One bar series of the weekly progress chart."""
    label: str
    data: list[int] = field(default_factory=list)
    color: str = ""
