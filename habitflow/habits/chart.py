"""Chart-ready series for the weekly progress bar chart."""

from datetime import date
from typing import Optional

from .dates import date_key_for_label
from .models import ChartSeries, Habit

HUE_STEP = 60
SATURATION = 85
LIGHTNESS = 60


def series_color(index: int) -> str:
    """Color for the habit at this list position (first six hues are distinct)."""
    hue = (index * HUE_STEP) % 360
    return f"hsl({hue}, {SATURATION}%, {LIGHTNESS}%)"


def chart_series(
    habits: list[Habit],
    day_labels: list[str],
    year: Optional[int] = None,
) -> list[ChartSeries]:
    """
    Build one 0/1 series per habit over the given day labels.

    Labels are MM-DD and are expanded with the current year, so a window
    spanning New Year reads the wrong year for the older days.

    Args:
        habits: Habits in display order
        day_labels: MM-DD labels, oldest first
        year: Year used to expand labels (defaults to this year)

    Returns:
        List of ChartSeries, one per habit
    """
    year = year or date.today().year

    series = []
    for index, habit in enumerate(habits):
        data = [
            1 if habit.completions.get(date_key_for_label(label, year)) else 0
            for label in day_labels
        ]
        series.append(ChartSeries(label=habit.name, data=data, color=series_color(index)))

    return series
