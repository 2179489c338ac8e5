"""Dashboard image renderer."""

import logging
from datetime import datetime
from pathlib import Path

from PIL import Image, ImageColor, ImageDraw, ImageFont

from habitflow.habits.models import ChartSeries, HabitProgress
from habitflow.workout.schedule import Checklist

logger = logging.getLogger(__name__)

BACKGROUND = "black"
FOREGROUND = "white"
ACCENT = "#f97316"  # orange
MUTED = "#9ca3af"


class DashboardRenderer:
    """Renders the habit dashboard and weekly progress chart to an image."""

    def __init__(self, output_dir: str = "static/images"):
        """
        Initialize renderer.

        Args:
            output_dir: Directory to save generated images
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Try to load fonts, fall back to default
        self.fonts = self._load_fonts()

    def _load_fonts(self) -> dict:
        """Load fonts for rendering."""
        fonts = {}

        # Try to find system fonts
        font_paths = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/System/Library/Fonts/Helvetica.ttc",  # macOS
        ]

        try:
            for path in font_paths:
                if Path(path).exists():
                    fonts["header"] = ImageFont.truetype(path, 28)
                    fonts["title"] = ImageFont.truetype(path, 18)
                    fonts["normal"] = ImageFont.truetype(path, 15)
                    fonts["small"] = ImageFont.truetype(path, 12)
                    logger.info(f"Loaded fonts from {path}")
                    break
        except OSError as e:
            logger.warning(f"Could not load TrueType fonts: {e}, using default")
            fonts = {}

        # Fall back to default fonts
        if not fonts:
            default_font = ImageFont.load_default()
            fonts["header"] = default_font
            fonts["title"] = default_font
            fonts["normal"] = default_font
            fonts["small"] = default_font

        return fonts

    def render(
        self,
        progress: list[HabitProgress],
        series: list[ChartSeries],
        day_labels: list[str],
        workout: Checklist,
        width: int = 800,
        height: int = 640,
    ) -> tuple[str, str]:
        """
        Render the dashboard.

        Args:
            progress: Per-habit progress, in display order
            series: Chart series matching day_labels
            day_labels: MM-DD labels, oldest first
            workout: Today's workout checklist
            width: Image width
            height: Image height

        Returns:
            Tuple of (filename, file_path)
        """
        logger.info(f"Rendering dashboard with {len(progress)} habits")

        image = Image.new("RGB", (width, height), BACKGROUND)
        draw = ImageDraw.Draw(image)

        chart_top = height - 260

        self._draw_header(draw, workout, width)
        self._draw_habits(draw, progress, width, chart_top)
        self._draw_chart(draw, series, day_labels, width, chart_top, height)

        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        filename = f"dashboard-{timestamp}"
        file_path = self.output_dir / f"{filename}.png"

        image.save(file_path, "PNG")
        logger.info(f"Saved dashboard to {file_path}")

        return filename, str(file_path)

    def _draw_header(self, draw: ImageDraw.ImageDraw, workout: Checklist, width: int):
        """Draw app title and today's workout summary."""
        draw.text((20, 15), "HabitFlow", fill=FOREGROUND, font=self.fonts["header"])

        done = sum(1 for _, _, is_done in workout.entries() if is_done)
        if workout.items:
            plan_text = f"{workout.title}: {done}/{len(workout.items)}"
        else:
            plan_text = f"{workout.title}: rest day"

        # Right-align plan text
        bbox = draw.textbbox((0, 0), plan_text, font=self.fonts["normal"])
        text_width = bbox[2] - bbox[0]
        draw.text((width - text_width - 20, 24), plan_text, fill=ACCENT, font=self.fonts["normal"])

        draw.line([20, 60, width - 20, 60], fill=MUTED, width=2)

    def _draw_habits(self, draw: ImageDraw.ImageDraw, progress: list[HabitProgress], width: int, bottom: int):
        """Draw one row per habit until the chart area is reached."""
        y_offset = 75

        if not progress:
            draw.text((30, y_offset), "No habits yet", fill=MUTED, font=self.fonts["title"])
            return

        for item in progress:
            if y_offset > bottom - 50:
                break

            self._draw_habit_row(draw, item, y_offset, width)
            y_offset += 50

    def _draw_habit_row(self, draw: ImageDraw.ImageDraw, item: HabitProgress, y: int, width: int):
        """Draw a habit with today's checkbox and goal summary."""
        x_margin = 30
        box = 18

        # Today's checkbox
        draw.rectangle(
            [x_margin, y + 2, x_margin + box, y + 2 + box],
            fill=ACCENT if item.done_today else None,
            outline=FOREGROUND,
            width=2,
        )
        draw.text((x_margin + box + 12, y), item.habit.name, fill=FOREGROUND, font=self.fonts["title"])

        summary = f"Weekly Goal: {item.habit.goal} | Completed: {item.done_days}"
        if item.achieved:
            summary += "  ★"
        draw.text((x_margin + box + 12, y + 24), summary, fill=ACCENT, font=self.fonts["small"])

    def _draw_chart(
        self,
        draw: ImageDraw.ImageDraw,
        series: list[ChartSeries],
        day_labels: list[str],
        width: int,
        top: int,
        height: int,
    ):
        """
        Draw grouped bars: one group per day, one bar per habit.

        Each bar is full height when the habit was done that day.
        """
        draw.text((20, top), "Weekly Progress", fill=FOREGROUND, font=self.fonts["title"])

        x0, x1 = 50, width - 20
        y0, y1 = top + 40, height - 50

        # Axes
        draw.line([x0, y1, x1, y1], fill=MUTED, width=1)
        draw.line([x0, y0, x0, y1], fill=MUTED, width=1)
        draw.text((x0 - 20, y0 - 6), "1", fill=MUTED, font=self.fonts["small"])
        draw.text((x0 - 20, y1 - 6), "0", fill=MUTED, font=self.fonts["small"])

        if not day_labels:
            return

        group_width = (x1 - x0) / len(day_labels)
        bar_width = (group_width * 0.8) / max(1, len(series))

        for day_index, label in enumerate(day_labels):
            group_x = x0 + day_index * group_width + group_width * 0.1

            for series_index, s in enumerate(series):
                if not s.data[day_index]:
                    continue
                bar_x = group_x + series_index * bar_width
                draw.rectangle(
                    [int(bar_x), y0, int(bar_x + bar_width) - 1, y1 - 1],
                    fill=ImageColor.getrgb(s.color),
                )

            # Center day label under its group
            bbox = draw.textbbox((0, 0), label, font=self.fonts["small"])
            label_width = bbox[2] - bbox[0]
            label_x = x0 + day_index * group_width + (group_width - label_width) / 2
            draw.text((label_x, y1 + 6), label, fill=MUTED, font=self.fonts["small"])

        self._draw_legend(draw, series, x0, height - 22)

    def _draw_legend(self, draw: ImageDraw.ImageDraw, series: list[ChartSeries], x: int, y: int):
        """Draw colored swatches with habit names in a single row."""
        for s in series:
            draw.rectangle([x, y + 2, x + 10, y + 12], fill=ImageColor.getrgb(s.color))
            draw.text((x + 14, y), s.label, fill=FOREGROUND, font=self.fonts["small"])
            bbox = draw.textbbox((0, 0), s.label, font=self.fonts["small"])
            x += 14 + (bbox[2] - bbox[0]) + 16
