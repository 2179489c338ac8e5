"""Main FastAPI application."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from .config import settings
from .dashboard.renderer import DashboardRenderer
from .habits.dates import day_name, last_seven_day_labels, today_key
from .habits.models import TEMPLATES
from .habits.storage import KeyValueStorage
from .habits.store import HabitStore
from .web.models import (
    AddHabitRequest,
    ChecklistEntry,
    ChecklistsResponse,
    ChecklistView,
    DashboardResponse,
    DefaultGoalRequest,
    HabitListResponse,
    HabitView,
    ProgressResponse,
    SeriesView,
    TemplateRequest,
    ToggleRequest,
)
from .workout.schedule import FACE_FAT_ROUTINE, Checklist, schedule_for

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Initialize FastAPI app
app = FastAPI(
    title="HabitFlow",
    description="Habit tracker with weekly goals and a daily workout plan",
    version=VERSION,
)

# Initialize components
store = HabitStore(
    KeyValueStorage(settings.storage_path),
    storage_key=settings.storage_key,
    default_goal=settings.default_goal,
)
renderer = DashboardRenderer(settings.dashboard_output_dir)

# Session-only checklist state, never persisted
checklists: dict[str, Checklist] = {}

# Mount rendered images
app.mount("/static/images", StaticFiles(directory=settings.dashboard_output_dir), name="images")


def get_base_url(request: Request) -> str:
    """Get base URL for serving images."""
    return f"{request.url.scheme}://{request.headers.get('host', 'localhost')}"


def get_checklists() -> dict[str, Checklist]:
    """
    Get today's checklists, creating them on first use.

    The workout plan is rebuilt with fresh flags when the day changes.
    """
    today = day_name()
    title = f"{today}'s Workout Plan"

    workout = checklists.get("workout")
    if workout is None or workout.title != title:
        logger.info(f"Loading workout plan for {today}")
        checklists["workout"] = Checklist(title=title, items=schedule_for(today))

    if "face" not in checklists:
        checklists["face"] = Checklist(title="Lose Face Fat Routine", items=list(FACE_FAT_ROUTINE))

    return checklists


def habit_list() -> HabitListResponse:
    """Fresh read of all habits with derived progress."""
    return HabitListResponse(
        today=today_key(),
        default_goal=store.default_goal,
        habits=[
            HabitView(
                **item.habit.model_dump(),
                done_days=item.done_days,
                achieved_goal=item.achieved,
                done_today=item.done_today,
            )
            for item in store.progress()
        ],
    )


def checklist_state() -> ChecklistsResponse:
    """Fresh read of both checklists."""
    current = get_checklists()

    def view(checklist: Checklist) -> ChecklistView:
        return ChecklistView(
            title=checklist.title,
            items=[
                ChecklistEntry(index=index, text=text, done=done)
                for index, text, done in checklist.entries()
            ],
        )

    return ChecklistsResponse(
        day=day_name(),
        workout=view(current["workout"]),
        face=view(current["face"]),
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "HabitFlow",
        "version": VERSION,
        "endpoints": {
            "habits": "/api/habits",
            "templates": "/api/templates",
            "checklists": "/api/checklists",
            "progress": "/api/progress",
            "dashboard": "/api/dashboard",
            "status": "/status",
        },
    }


@app.get("/status")
async def status():
    """Server status endpoint."""
    return {
        "status": "running",
        "version": VERSION,
        "timestamp": datetime.now().isoformat(),
        "habits": len(store.habits),
        "storage_path": settings.storage_path,
    }


@app.get("/api/habits", response_model=HabitListResponse)
async def list_habits():
    """All habits with today's state and goal progress."""
    return habit_list()


@app.post("/api/habits", response_model=HabitListResponse)
async def add_habit(body: AddHabitRequest):
    """
    Add a habit.

    Blank names are ignored and the unchanged list is returned.
    """
    store.add_habit(body.name, body.goal)
    return habit_list()


@app.post("/api/habits/{habit_id}/toggle", response_model=HabitListResponse)
async def toggle_habit(habit_id: str, body: Optional[ToggleRequest] = None):
    """Toggle a habit for a day (today by default)."""
    store.toggle_completion(habit_id, body.date if body else None)
    return habit_list()


@app.get("/api/templates")
async def list_templates():
    """Fixed template catalog."""
    return {"templates": TEMPLATES}


@app.post("/api/templates/{template_name}/apply", response_model=HabitListResponse)
async def apply_template(template_name: str, body: Optional[TemplateRequest] = None):
    """Create habits from a template; unknown templates add nothing."""
    store.apply_template(template_name, body.goal if body else None)
    return habit_list()


@app.put("/api/settings/default-goal", response_model=HabitListResponse)
async def set_default_goal(body: DefaultGoalRequest):
    """Set the goal used for new habits."""
    store.set_default_goal(body.goal)
    return habit_list()


@app.get("/api/checklists", response_model=ChecklistsResponse)
async def list_checklists():
    """Today's workout plan and the face routine."""
    return checklist_state()


@app.post("/api/checklists/{kind}/{index}/toggle", response_model=ChecklistsResponse)
async def toggle_checklist(kind: str, index: int):
    """
    Toggle a checklist item.

    kind is "workout" or "face"; anything else leaves state unchanged.
    """
    checklist = get_checklists().get(kind)
    if checklist is None:
        logger.debug(f"Toggle for unknown checklist '{kind}' ignored")
    else:
        checklist.toggle(index)
    return checklist_state()


@app.get("/api/progress", response_model=ProgressResponse)
async def progress():
    """Last seven days of completions, one series per habit."""
    labels = last_seven_day_labels()
    return ProgressResponse(
        labels=labels,
        series=[
            SeriesView(label=s.label, data=s.data, color=s.color)
            for s in store.chart_series(labels)
        ],
    )


@app.post("/api/dashboard", response_model=DashboardResponse)
async def render_dashboard(request: Request):
    """Render the dashboard image from current state."""
    logger.info("Dashboard render requested")

    labels = last_seven_day_labels()
    filename, _ = renderer.render(
        store.progress(),
        store.chart_series(labels),
        labels,
        get_checklists()["workout"],
    )

    return DashboardResponse(
        filename=filename,
        image_url=f"{get_base_url(request)}/static/images/{filename}.png",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
