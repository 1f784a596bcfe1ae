"""Text output — message rendering and report narratives."""

from forklift_calc.report.messages import render_message, translate
from forklift_calc.report.narrative import (
    generate_grade_narrative,
    generate_load_narrative,
    generate_tco_narrative,
)

__all__ = [
    "render_message",
    "translate",
    "generate_tco_narrative",
    "generate_load_narrative",
    "generate_grade_narrative",
]
