"""Blueprint export for generated workout plans.

Two renderings of the same enriched plan:

- text: one block per day, one line per exercise, notes as ``//`` comments
- PDF: the downloadable "architected blueprint" document

Example text output:
```
FORMA // ARCHITECTED BLUEPRINT

DAY 1 - PUSH
Bench Press                 4 x 8-10   rest 90s
  // Horizontal press with the highest loading potential...
```
"""

from dataclasses import dataclass
from datetime import datetime

from fpdf import FPDF

from ..models.plan import PlanDay, PlanExercise, WorkoutPlan

TITLE = "FORMA // ARCHITECTED BLUEPRINT"

# Accent line under each day heading
ACID = (212, 255, 0)
# Space kept clear above the bottom edge for the "Generated on" footer
FOOTER_SPACE = 20
# Width of the note column in mm
NOTE_WIDTH = 160


@dataclass
class BlueprintConfig:
    """Configuration for blueprint rendering."""

    rest: str = "90s"
    include_notes: bool = True
    name_width: int = 25  # characters of exercise name shown in the PDF table
    timestamp: datetime | None = None


def _latin1(text: str) -> str:
    """Core PDF fonts only cover latin-1."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class BlueprintGenerator:
    """Renders enriched plans as text or PDF."""

    def __init__(self, config: BlueprintConfig | None = None):
        self.config = config or BlueprintConfig()

    def generate_text(self, plan: WorkoutPlan) -> str:
        """Plain-text blueprint (terminal output and clipboard)."""
        lines: list[str] = [TITLE, ""]
        for day in plan.schedule:
            lines.extend(self._day_lines(day))
            lines.append("")
        return "\n".join(lines).strip()

    def _day_lines(self, day: PlanDay) -> list[str]:
        lines = [day.day_name.upper()]
        for exercise in day.exercises:
            lines.append(self._exercise_line(exercise))
            note = exercise.science_note or exercise.note
            if self.config.include_notes and note:
                lines.append(f"  // {note}")
        return lines

    def _exercise_line(self, exercise: PlanExercise) -> str:
        name = exercise.name or f"Exercise {exercise.id}"
        sets_reps = f"{exercise.sets} x {exercise.reps}"
        return f"{name:<28}{sets_reps:<11}rest {self.config.rest}"

    def _note_lines(self, pdf: FPDF, note: str) -> list[str]:
        """Wrap a note to the PDF note column."""
        pdf.set_font("Courier", "I", 8)
        return pdf.multi_cell(NOTE_WIDTH, 4, _latin1(f"// {note}"), dry_run=True, output="LINES")

    def render_pdf(self, plan: WorkoutPlan) -> bytes:
        """Render the downloadable PDF blueprint."""
        pdf = FPDF(format="A4", unit="mm")
        pdf.set_auto_page_break(auto=False)
        pdf.add_page()
        page_width = pdf.w
        page_height = pdf.h
        y = 20.0

        # Title
        pdf.set_font("Courier", "B", 18)
        pdf.set_text_color(5, 5, 5)
        pdf.set_xy(0, y - 6)
        pdf.cell(page_width, 8, TITLE, align="C")
        y += 10

        pdf.set_draw_color(200, 200, 200)
        pdf.line(20, y, page_width - 20, y)
        y += 10

        # Column headers
        pdf.set_font("Courier", "B", 10)
        pdf.set_text_color(100, 100, 100)
        pdf.text(20, y, "EXERCISE")
        pdf.text(110, y, "SETS")
        pdf.text(135, y, "REPS")
        pdf.text(165, y, "REST")
        y += 10

        for day in plan.schedule:
            if y > page_height - FOOTER_SPACE - 20:
                pdf.add_page()
                y = 20.0

            pdf.set_font("Courier", "B", 12)
            pdf.set_text_color(5, 5, 5)
            pdf.text(20, y, _latin1(day.day_name.upper()))
            y += 2
            pdf.set_draw_color(*ACID)
            pdf.set_line_width(0.5)
            pdf.line(20, y, page_width - 20, y)
            y += 8

            for exercise in day.exercises:
                note = exercise.science_note or exercise.note
                note_lines = self._note_lines(pdf, note) if self.config.include_notes and note else []
                if y + 8 + 4 * len(note_lines) > page_height - FOOTER_SPACE:
                    pdf.add_page()
                    y = 20.0

                name = exercise.name or f"Exercise {exercise.id}"
                pdf.set_font("Courier", "", 10)
                pdf.set_text_color(30, 30, 30)
                pdf.text(20, y, _latin1(name[: self.config.name_width]))
                pdf.text(110, y, str(exercise.sets))
                pdf.text(135, y, _latin1(str(exercise.reps)))
                pdf.text(165, y, self.config.rest)
                y += 5

                if note_lines:
                    pdf.set_font("Courier", "I", 8)
                    pdf.set_text_color(120, 120, 120)
                    for line in note_lines:
                        pdf.text(25, y, line)
                        y += 4
                y += 3

            y += 5

        timestamp = (self.config.timestamp or datetime.now()).strftime("%Y-%m-%d %H:%M")
        pdf.set_font("Courier", "", 8)
        pdf.set_text_color(150, 150, 150)
        pdf.set_xy(0, page_height - 12)
        pdf.cell(page_width, 4, f"Generated on {timestamp}", align="C")

        return bytes(pdf.output())
