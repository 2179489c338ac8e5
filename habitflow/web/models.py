"""HTTP API models."""

from typing import Optional, Union

from pydantic import BaseModel


class AddHabitRequest(BaseModel):
    """Body for POST /api/habits."""

    name: str
    goal: Optional[int] = None  # store default when omitted


class ToggleRequest(BaseModel):
    """Body for POST /api/habits/{habit_id}/toggle."""

    date: Optional[str] = None  # YYYY-MM-DD, today when omitted


class TemplateRequest(BaseModel):
    """Body for POST /api/templates/{template_name}/apply."""

    goal: Optional[int] = None


class DefaultGoalRequest(BaseModel):
    """Body for PUT /api/settings/default-goal."""

    goal: int


class HabitView(BaseModel):
    """A habit with its derived progress."""

    id: Union[int, float, str]
    name: str
    completions: dict[str, bool]
    streak: int
    goal: int
    done_days: int
    achieved_goal: bool
    done_today: bool


class HabitListResponse(BaseModel):
    """Response for every habit read and mutation."""

    today: str
    default_goal: int
    habits: list[HabitView]


class ChecklistEntry(BaseModel):
    index: int
    text: str
    done: bool


class ChecklistView(BaseModel):
    title: str
    items: list[ChecklistEntry]


class ChecklistsResponse(BaseModel):
    """Response for /api/checklists endpoints."""

    day: str
    workout: ChecklistView
    face: ChecklistView


class SeriesView(BaseModel):
    label: str
    data: list[int]
    color: str


class ProgressResponse(BaseModel):
    """Response for /api/progress endpoint."""

    labels: list[str]
    series: list[SeriesView]


class DashboardResponse(BaseModel):
    """Response for /api/dashboard endpoint."""

    status: str = "success"
    filename: str
    image_url: str
