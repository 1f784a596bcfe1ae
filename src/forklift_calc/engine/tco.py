"""Diesel vs. battery-electric TCO for a forklift fleet.

Pure arithmetic: TcoInputs → TcoResult.  Everything is computed per unit
first and then scaled by the fleet size, so each fleet figure is exactly
``per-unit × fleet_size``.

  active_hours_month   = hours/day × days/month × utilization
  cycles_per_month     = kWh_month / usable_kWh
  months_to_80         = cycles_to_80 / cycles_per_month
  amortized_battery    = replacement_cost / months_to_80
  payback_months       = capex_difference / monthly_savings   (0 = not applicable)
"""

from __future__ import annotations

import logging
import math

import numpy as np

from forklift_calc.config.tco import TcoInputs
from forklift_calc.finance.loan import compute_financing
from forklift_calc.models.results import (
    DieselCosts,
    ElectricCosts,
    EmissionsSummary,
    FinancingSummary,
    SavingsSummary,
    TcoResult,
)

logger = logging.getLogger(__name__)

TCO_PERIOD_MONTHS = 120

# Per litre of diesel burned
DIESEL_CO2_KG_PER_L = 2.68
DIESEL_NOX_G_PER_L = 30.0
DIESEL_SOX_G_PER_L = 0.02
DIESEL_PM_G_PER_L = 2.5

MIN_PACK_KWH = 0.1


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def compute_tco(inputs: TcoInputs) -> TcoResult:
    """Compute running costs, battery economics, emissions and financing."""

    # ── Duty cycle ─────────────────────────────────────────────────────
    utilization = _clamp(inputs.utilization_pct, 0, 100) / 100
    active_hours_month = inputs.hours_per_day * inputs.days_per_month * utilization
    fleet_size = max(1, math.floor(inputs.number_of_forklifts))

    # ── Diesel (per unit) ──────────────────────────────────────────────
    fuel_l_month_unit = inputs.fuel_l_per_hour * active_hours_month
    diesel_energy_unit = fuel_l_month_unit * inputs.diesel_price_per_liter
    diesel_maint_unit = inputs.diesel_maint_per_hour * active_hours_month
    diesel_total_unit = diesel_energy_unit + diesel_maint_unit

    # ── Electric energy (per unit) ─────────────────────────────────────
    kwh_month_unit = inputs.kwh_per_hour * active_hours_month
    elec_energy_unit = kwh_month_unit * inputs.tariff_per_kwh
    elec_maint_unit = inputs.electric_maint_per_hour * active_hours_month

    # ── Battery wear ───────────────────────────────────────────────────
    # Pack size is floor-guarded so the cycle count is always defined.
    pack_kwh = max(MIN_PACK_KWH, inputs.battery_voltage * inputs.battery_ah / 1000)
    usable_kwh = max(MIN_PACK_KWH, pack_kwh * _clamp(inputs.usable_dod_pct, 1, 100) / 100)
    cycles_per_month = kwh_month_unit / usable_kwh if usable_kwh > 0 else 0.0
    months_to_80 = (
        max(1, inputs.cycles_to_80_pct) / cycles_per_month
        if cycles_per_month > 0 else math.inf
    )
    battery_life_known = math.isfinite(months_to_80) and months_to_80 > 0
    amortized_battery_unit = inputs.battery_replacement_cost / months_to_80 if battery_life_known else 0.0
    num_replacements = math.floor(TCO_PERIOD_MONTHS / months_to_80) if battery_life_known else 0

    elec_total_unit = elec_energy_unit + elec_maint_unit + amortized_battery_unit

    # ── Savings & payback ──────────────────────────────────────────────
    monthly_savings_unit = diesel_total_unit - elec_total_unit
    capex_difference = inputs.electric_capex - inputs.diesel_capex
    payback_months = (
        capex_difference / monthly_savings_unit
        if monthly_savings_unit > 0 and capex_difference > 0 else 0.0
    )

    diesel_tco = (diesel_total_unit * TCO_PERIOD_MONTHS + inputs.diesel_capex) * fleet_size
    electric_tco = (
        elec_total_unit * TCO_PERIOD_MONTHS
        + inputs.electric_capex
        + num_replacements * inputs.battery_replacement_cost
    ) * fleet_size

    # ── Emissions (fleet) ──────────────────────────────────────────────
    diesel_co2 = fuel_l_month_unit * DIESEL_CO2_KG_PER_L * fleet_size
    electric_co2 = kwh_month_unit * inputs.grid_co2_intensity_kg_per_kwh * fleet_size
    co2_reduction = diesel_co2 - electric_co2

    logger.debug(
        "TCO: fleet=%d active_h=%.1f diesel/unit=%.2f electric/unit=%.2f payback=%.1f",
        fleet_size, active_hours_month, diesel_total_unit, elec_total_unit, payback_months,
    )

    return TcoResult(
        fleet_size=fleet_size,
        active_hours_month=active_hours_month,
        diesel=DieselCosts(
            total_month_unit=diesel_total_unit,
            total_month=diesel_total_unit * fleet_size,
            total_year=diesel_total_unit * fleet_size * 12,
            tco_10_year=diesel_tco,
            fuel_l_month=fuel_l_month_unit * fleet_size,
            energy_cost_month=diesel_energy_unit * fleet_size,
            maint_cost_month=diesel_maint_unit * fleet_size,
        ),
        electric=ElectricCosts(
            total_month_unit=elec_total_unit,
            total_month=elec_total_unit * fleet_size,
            total_year=elec_total_unit * fleet_size * 12,
            tco_10_year=electric_tco,
            kwh_month=kwh_month_unit * fleet_size,
            energy_cost_month=elec_energy_unit * fleet_size,
            maint_cost_month=elec_maint_unit * fleet_size,
            pack_kwh=pack_kwh,
            usable_kwh=usable_kwh,
            cycles_per_month=cycles_per_month,
            months_to_80=months_to_80,
            amortized_battery_cost_month=amortized_battery_unit * fleet_size,
            num_replacements_10_years=num_replacements,
        ),
        savings=SavingsSummary(
            monthly_savings_unit=monthly_savings_unit,
            monthly_savings=monthly_savings_unit * fleet_size,
            yearly_savings=monthly_savings_unit * fleet_size * 12,
            tco_10_year_savings=diesel_tco - electric_tco,
            capex_difference=capex_difference,
            payback_period_months=payback_months,
        ),
        emissions=EmissionsSummary(
            diesel_co2_kg_month=diesel_co2,
            diesel_nox_g_month=fuel_l_month_unit * DIESEL_NOX_G_PER_L * fleet_size,
            diesel_sox_g_month=fuel_l_month_unit * DIESEL_SOX_G_PER_L * fleet_size,
            diesel_pm_g_month=fuel_l_month_unit * DIESEL_PM_G_PER_L * fleet_size,
            electric_co2_kg_month=electric_co2,
            co2_reduction_kg_month=co2_reduction,
            co2_reduction_kg_year=co2_reduction * 12,
        ),
        financing=FinancingSummary(
            diesel=compute_financing(inputs.diesel_capex, inputs, fleet_size),
            electric=compute_financing(inputs.electric_capex, inputs, fleet_size),
        ),
    )


def cumulative_costs(inputs: TcoInputs, result: TcoResult, months: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Fleet spend to date (diesel, electric) at each month in ``months``.

    Capex is paid at month 0.  Each replacement pack is charged when the
    battery reaches 80% SOH, so at month 120 both curves equal the 10-year TCO.
    """
    fleet = result.fleet_size
    diesel = result.diesel.total_month * months + inputs.diesel_capex * fleet

    packs = np.zeros(len(months))
    if result.electric.num_replacements_10_years:
        packs = np.minimum(
            np.floor(months / result.electric.months_to_80),
            result.electric.num_replacements_10_years,
        )
    electric = (
        result.electric.total_month * months
        + (inputs.electric_capex + packs * inputs.battery_replacement_cost) * fleet
    )
    return diesel, electric
