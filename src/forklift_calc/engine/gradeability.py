"""Ramp gradeability check.

  grade_%      = rise / run × 100
  limit_%      = floor(table[machine][load] × surface_factor)
  unsafe       grade > limit
  caution      grade > 0.85 × limit, or grade > 15% on anything but an IC truck
"""

from __future__ import annotations

import logging
import math

from forklift_calc.config.gradeability import GRADE_LIMITS_PCT, SURFACE_FACTORS, GradeInputs
from forklift_calc.models.results import GradeResult, Message, SafetyStatus

logger = logging.getLogger(__name__)

CAUTION_RATIO = 0.85
# Beyond this most industrial trucks ground out on the ramp transition
CLEARANCE_LIMIT_PCT = 15


def compute_gradeability(inputs: GradeInputs) -> GradeResult | None:
    """Compare a ramp against the machine's surface-adjusted grade limit.

    Returns ``None`` when the run is not positive; there is no ramp to
    assess and the caller keeps whatever it showed before.
    """
    if inputs.ramp_run_mm <= 0:
        return None

    slope = inputs.ramp_rise_mm / inputs.ramp_run_mm
    grade_pct = slope * 100
    angle_deg = math.degrees(math.atan(slope))

    base_limit = GRADE_LIMITS_PCT[inputs.machine_type][inputs.load_state]
    factor = SURFACE_FACTORS[inputs.surface]
    limit = math.floor(base_limit * factor)

    status: SafetyStatus = "safe"
    warnings: list[Message] = []

    # Tractive effort / motor power
    if grade_pct > limit:
        status = "unsafe"
        warnings.append(Message(key="gradeWarningText", params={
            "grade": round(grade_pct, 1),
            "limit": limit,
            "load": inputs.load_state,
            "type": inputs.machine_type,
        }))
    elif grade_pct > limit * CAUTION_RATIO:
        status = "caution"

    # Ground clearance — may only lower the verdict
    if grade_pct > CLEARANCE_LIMIT_PCT and inputs.machine_type != "ic_forklift":
        if status == "safe":
            status = "caution"
        warnings.append(Message(key="clearanceWarningText"))

    logger.debug(
        "Grade: %.2f%% vs limit %d%% (%s, %s, %s) → %s",
        grade_pct, limit, inputs.machine_type, inputs.load_state, inputs.surface, status,
    )

    return GradeResult(
        grade_percent=round(grade_pct, 1),
        grade_angle_deg=round(angle_deg, 1),
        base_limit_pct=base_limit,
        surface_factor=factor,
        max_grade_limit=limit,
        status=status,
        warnings=warnings,
    )
