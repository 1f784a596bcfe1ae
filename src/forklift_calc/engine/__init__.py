"""Engine — the three stateless calculators."""

from forklift_calc.engine.tco import compute_tco
from forklift_calc.engine.load_capacity import compute_load_capacity, find_upgrade
from forklift_calc.engine.gradeability import compute_gradeability

__all__ = [
    "compute_tco",
    "compute_load_capacity",
    "find_upgrade",
    "compute_gradeability",
]
