"""Gradeability inputs and the ramp reference tables."""

from typing import Literal

from pydantic import BaseModel, Field

GradeMachineType = Literal["stacker", "reach_truck", "three_wheel", "forklift", "ic_forklift"]
LoadState = Literal["loaded", "empty"]
Surface = Literal["dry_concrete", "wet_concrete", "asphalt", "gravel"]

# Max gradeability (%) — approximate reference values
GRADE_LIMITS_PCT: dict[GradeMachineType, dict[LoadState, float]] = {
    "stacker": {"loaded": 6, "empty": 10},
    "reach_truck": {"loaded": 8, "empty": 12},
    "three_wheel": {"loaded": 12, "empty": 15},
    "forklift": {"loaded": 14, "empty": 18},  # 4-wheel electric
    "ic_forklift": {"loaded": 20, "empty": 25},
}

SURFACE_FACTORS: dict[Surface, float] = {
    "dry_concrete": 1.0,
    "wet_concrete": 0.75,
    "asphalt": 0.85,
    "gravel": 0.50,
}


class GradeInputs(BaseModel):
    """One ramp to check against one machine."""

    machine_type: GradeMachineType = Field(default="forklift", description="Machine class")
    load_state: LoadState = Field(default="loaded", description="Travelling loaded or empty")
    surface: Surface = Field(default="dry_concrete", description="Ramp surface condition")
    ramp_rise_mm: float = Field(default=0, description="Vertical rise of the ramp (mm)")
    ramp_run_mm: float = Field(default=0, description="Horizontal run of the ramp (mm); must be > 0 to compute")
