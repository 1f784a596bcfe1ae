"""Result types — the contract between the engines and the presentation layer.

Engines return raw magnitudes only.  Currency symbols, rounding for
display and translated text are the presentation layer's job; warnings and
recommendations therefore travel as :class:`Message` (key + parameters).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A translatable message: catalogue key plus named placeholder values."""

    key: str
    params: dict[str, str | int | float] = Field(default_factory=dict)


# ═══════════════════════════════════════════════════════════════════════════
# TCO
# ═══════════════════════════════════════════════════════════════════════════

class DieselCosts(BaseModel):
    """Diesel powertrain — per-unit and fleet figures."""

    total_month_unit: float
    """Energy + maintenance for one unit per month."""
    total_month: float
    """Fleet total per month = total_month_unit × fleet_size."""
    total_year: float
    tco_10_year: float
    """(total_month_unit × 120 + capex) × fleet_size."""
    fuel_l_month: float
    energy_cost_month: float
    maint_cost_month: float


class ElectricCosts(BaseModel):
    """Battery-electric powertrain — per-unit and fleet figures plus battery economics."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    total_month_unit: float
    """Energy + maintenance + amortized battery for one unit per month."""
    total_month: float
    total_year: float
    tco_10_year: float
    """(total_month_unit × 120 + capex + replacements × replacement_cost) × fleet_size."""
    kwh_month: float
    energy_cost_month: float
    maint_cost_month: float

    # --- Battery ---
    pack_kwh: float
    usable_kwh: float
    cycles_per_month: float
    """Per unit.  0 when the unit draws no energy."""
    months_to_80: float
    """Months until the pack reaches 80% SOH; ``inf`` when it is never cycled."""
    amortized_battery_cost_month: float
    num_replacements_10_years: int


class SavingsSummary(BaseModel):
    """Electric vs. diesel — positive numbers favour electric."""

    monthly_savings_unit: float
    monthly_savings: float
    yearly_savings: float
    tco_10_year_savings: float
    capex_difference: float
    """electric_capex − diesel_capex, per unit."""
    payback_period_months: float
    """capex_difference / monthly_savings_unit, or 0 when not applicable."""


class EmissionsSummary(BaseModel):
    """Fleet emissions per month."""

    diesel_co2_kg_month: float
    diesel_nox_g_month: float
    diesel_sox_g_month: float
    diesel_pm_g_month: float
    electric_co2_kg_month: float
    co2_reduction_kg_month: float
    co2_reduction_kg_year: float


class FinancingBreakdown(BaseModel):
    """Monthly financial cost of one powertrain for the whole fleet."""

    loan_principal_unit: float
    monthly_installment: float
    monthly_insurance: float
    total_monthly: float


class FinancingSummary(BaseModel):
    diesel: FinancingBreakdown
    electric: FinancingBreakdown


class TcoResult(BaseModel):
    """Everything :func:`compute_tco` produces for one input snapshot."""

    fleet_size: int
    active_hours_month: float
    diesel: DieselCosts
    electric: ElectricCosts
    savings: SavingsSummary
    emissions: EmissionsSummary
    financing: FinancingSummary


# ═══════════════════════════════════════════════════════════════════════════
# Load capacity
# ═══════════════════════════════════════════════════════════════════════════

class ForkWarning(BaseModel):
    """Forks too short for the load depth."""

    load_length_mm: float
    fork_length_mm: int
    min_fork_length_mm: int
    """floor(0.66 × load length)."""
    message: Message


class HeightCapacityRow(BaseModel):
    lift_height_mm: int
    derating_factor: float
    capacity_kg: int
    passes: bool
    """load_weight ≤ capacity_kg at this height."""


class Recommendation(BaseModel):
    """Upgrade suggestion when the current machine cannot take the load."""

    found: bool
    capacity_kg: int | None = None
    """Suggested rated capacity, or None when nothing in the catalogue suffices."""
    machine_class: Literal["stacker", "forklift"] | None = None
    net_capacity_kg: int | None = None
    """Safe capacity of the suggested machine for this load."""
    stacker_limit_kg: int | None = None
    """Net capacity of the largest stacker, set only when even that falls short."""
    messages: list[Message] = Field(default_factory=list)


class LoadResult(BaseModel):
    """Everything :func:`compute_load_capacity` produces for one load."""

    safe_capacity_kg: int
    gross_capacity_kg: float
    """Capacity at the actual load center before the attachment weight is deducted."""
    load_center_of_goods_mm: float
    effective_load_center_mm: float
    rated_load_center_mm: int
    front_overhang_mm: int
    is_safe: bool
    fork_warning: ForkWarning | None = None
    height_table: list[HeightCapacityRow]
    recommendation: Recommendation | None = None


# ═══════════════════════════════════════════════════════════════════════════
# Gradeability
# ═══════════════════════════════════════════════════════════════════════════

SafetyStatus = Literal["safe", "caution", "unsafe"]


class GradeResult(BaseModel):
    """Everything :func:`compute_gradeability` produces for one ramp."""

    grade_percent: float
    """Rounded to one decimal."""
    grade_angle_deg: float
    """Rounded to one decimal."""
    base_limit_pct: float
    surface_factor: float
    max_grade_limit: int
    """floor(base limit × surface factor)."""
    status: SafetyStatus
    warnings: list[Message] = Field(default_factory=list)
