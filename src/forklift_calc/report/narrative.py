"""Narrative generator — plain-text summaries of calculator results.

Used for the downloadable report.  The payback sentinel (0) is printed as
"N/A" and a pack that is never cycled as "never" so neither reads as an
instant result.
"""

from __future__ import annotations

import math

from forklift_calc.config.currency import DEFAULT_CURRENCY, format_currency
from forklift_calc.models.results import GradeResult, LoadResult, TcoResult
from forklift_calc.report.messages import Language, render_message, translate


def format_payback(months: float) -> str:
    if months <= 0:
        return "N/A"
    return f"{months:.1f} months ({months / 12:.1f} years)"


def format_battery_life(months: float) -> str:
    if not math.isfinite(months):
        return "never"
    return f"{months:.1f} months"


def _banner(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def generate_tco_narrative(result: TcoResult, currency: str = DEFAULT_CURRENCY) -> str:
    """Plain-text TCO report: running costs, battery, savings, ESG, financing."""
    d, e, s, esg, fin = result.diesel, result.electric, result.savings, result.emissions, result.financing

    def money(v: float) -> str:
        return format_currency(v, currency)

    lines: list[str] = []

    lines += _banner("FLEET & DUTY CYCLE")
    lines.append(f"Units compared: {result.fleet_size}")
    lines.append(f"Active hours per unit per month: {result.active_hours_month:,.1f}")

    lines.append("")
    lines += _banner("MONTHLY RUNNING COST (FLEET)")
    lines.append(f"{'':28s}{'Diesel':>18s}{'Electric':>18s}")
    lines.append(f"{'Energy':28s}{money(d.energy_cost_month):>18s}{money(e.energy_cost_month):>18s}")
    lines.append(f"{'Maintenance':28s}{money(d.maint_cost_month):>18s}{money(e.maint_cost_month):>18s}")
    lines.append(f"{'Battery (amortized)':28s}{'-':>18s}{money(e.amortized_battery_cost_month):>18s}")
    lines.append(f"{'Total per month':28s}{money(d.total_month):>18s}{money(e.total_month):>18s}")
    lines.append(f"{'Total per year':28s}{money(d.total_year):>18s}{money(e.total_year):>18s}")
    lines.append(f"{'10-year TCO':28s}{money(d.tco_10_year):>18s}{money(e.tco_10_year):>18s}")

    lines.append("")
    lines += _banner("BATTERY")
    lines.append(f"Pack energy: {e.pack_kwh:.1f} kWh ({e.usable_kwh:.1f} kWh usable)")
    lines.append(f"Cycles per month per unit: {e.cycles_per_month:.1f}")
    lines.append(f"Time to 80% health: {format_battery_life(e.months_to_80)}")
    lines.append(f"Replacements over 10 years: {e.num_replacements_10_years}")

    lines.append("")
    lines += _banner("SAVINGS")
    lines.append(f"Monthly savings: {money(s.monthly_savings)}")
    lines.append(f"Yearly savings: {money(s.yearly_savings)}")
    lines.append(f"10-year TCO savings: {money(s.tco_10_year_savings)}")
    lines.append(f"Extra capex per unit: {money(s.capex_difference)}")
    lines.append(f"Payback period: {format_payback(s.payback_period_months)}")

    lines.append("")
    lines += _banner("EMISSIONS (FLEET, PER MONTH)")
    lines.append(f"Diesel CO2: {esg.diesel_co2_kg_month:,.1f} kg")
    lines.append(f"Diesel NOx / SOx / PM: {esg.diesel_nox_g_month:,.1f} / "
                 f"{esg.diesel_sox_g_month:,.2f} / {esg.diesel_pm_g_month:,.1f} g")
    lines.append(f"Electric CO2 (grid): {esg.electric_co2_kg_month:,.1f} kg")
    lines.append(f"CO2 reduction: {esg.co2_reduction_kg_month:,.1f} kg/month "
                 f"({esg.co2_reduction_kg_year / 1000:,.2f} t/year)")

    lines.append("")
    lines += _banner("FINANCING (FLEET, PER MONTH)")
    for label, breakdown in (("Diesel", fin.diesel), ("Electric", fin.electric)):
        lines.append(
            f"{label}: installment {money(breakdown.monthly_installment)} + "
            f"insurance {money(breakdown.monthly_insurance)} = {money(breakdown.total_monthly)}"
        )

    return "\n".join(lines)


def generate_load_narrative(result: LoadResult, language: Language = "en") -> str:
    """Plain-text load capacity verdict with warnings and recommendation."""
    lines = [
        translate("statusSafe" if result.is_safe else "statusOverload", language),
        f"Safe capacity at ground level: {result.safe_capacity_kg} kg",
        f"Load center: {result.effective_load_center_mm:.0f} mm (rated {result.rated_load_center_mm} mm)",
    ]
    if result.fork_warning:
        lines.append(render_message(result.fork_warning.message, language))
    for row in result.height_table:
        lines.append(f"  {row.lift_height_mm:>5d} mm  {row.capacity_kg:>6d} kg  {'Pass' if row.passes else 'Fail'}")
    if result.recommendation:
        lines.extend(render_message(m, language) for m in result.recommendation.messages)
    return "\n".join(lines)


def generate_grade_narrative(result: GradeResult, language: Language = "en") -> str:
    """Plain-text gradeability verdict with warnings."""
    status_key = {"safe": "statusGo", "caution": "statusCaution", "unsafe": "statusStop"}[result.status]
    lines = [
        translate(status_key, language),
        f"Grade: {result.grade_percent}% ({result.grade_angle_deg}°)",
        f"Limit: {result.max_grade_limit}% (surface factor {result.surface_factor * 100:.0f}%)",
    ]
    lines.extend(render_message(w, language) for w in result.warnings)
    return "\n".join(lines)
