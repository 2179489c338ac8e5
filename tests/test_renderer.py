from pathlib import Path

from PIL import Image

from habitflow.dashboard.renderer import DashboardRenderer
from habitflow.habits.dates import last_seven_day_labels
from habitflow.workout.schedule import Checklist, schedule_for


def test_render_writes_png(store, tmp_path):
    read = store.add_habit("Read", 1)
    store.apply_template("Beginner Workout", 3)
    store.toggle_completion(read.id)

    labels = last_seven_day_labels()
    renderer = DashboardRenderer(str(tmp_path / "images"))
    workout = Checklist(title="Monday's Workout Plan", items=schedule_for("Monday"))
    workout.toggle(0)

    filename, file_path = renderer.render(
        store.progress(), store.chart_series(labels), labels, workout
    )

    assert filename.startswith("dashboard-")
    assert Path(file_path) == tmp_path / "images" / f"{filename}.png"
    with Image.open(file_path) as image:
        assert image.size == (800, 640)


def test_render_with_no_habits_on_rest_day(store, tmp_path):
    renderer = DashboardRenderer(str(tmp_path))
    labels = last_seven_day_labels()

    _, file_path = renderer.render(
        [], [], labels, Checklist(title="Sunday's Workout Plan", items=[])
    )

    assert Path(file_path).exists()
