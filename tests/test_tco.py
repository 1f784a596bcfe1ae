"""Tests for engine/tco.py — hand-calculated expected values.

Reference case (3 t warehouse preset, one unit):
  active hours   = 8 × 26 × 0.70            = 145.6 h/month
  diesel         = 465.92 L × 3.02 + 12 × 145.6 = 3,154.2784 /month
  electric       = 1,310.4 kWh × 0.55 + 6 × 145.6 + 568.75 = 2,163.07 /month
  pack           = 48 V × 500 Ah = 24 kWh, 19.2 kWh usable
  cycles/month   = 1,310.4 / 19.2 = 68.25 → 3,000 / 68.25 = 43.96 months to 80%
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from forklift_calc.config import TcoInputs
from forklift_calc.engine.tco import TCO_PERIOD_MONTHS, compute_tco, cumulative_costs


# ═══════════════════════════════════════════════════════════════════════════
# Reference case
# ═══════════════════════════════════════════════════════════════════════════

class TestReferenceCase:

    def test_active_hours(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs)
        assert r.active_hours_month == pytest.approx(145.6)

    def test_diesel_costs(self, tco_inputs: TcoInputs):
        d = compute_tco(tco_inputs).diesel
        assert d.fuel_l_month == pytest.approx(465.92)
        assert d.energy_cost_month == pytest.approx(465.92 * 3.02)
        assert d.maint_cost_month == pytest.approx(1747.2)
        assert d.total_month == pytest.approx(3154.2784)
        assert d.total_year == pytest.approx(3154.2784 * 12)

    def test_electric_costs(self, tco_inputs: TcoInputs):
        e = compute_tco(tco_inputs).electric
        assert e.kwh_month == pytest.approx(1310.4)
        assert e.energy_cost_month == pytest.approx(720.72)
        assert e.maint_cost_month == pytest.approx(873.6)
        assert e.total_month == pytest.approx(2163.07)

    def test_battery_economics(self, tco_inputs: TcoInputs):
        e = compute_tco(tco_inputs).electric
        assert e.pack_kwh == pytest.approx(24.0)
        assert e.usable_kwh == pytest.approx(19.2)
        assert e.cycles_per_month == pytest.approx(68.25)
        assert e.months_to_80 == pytest.approx(3000 / 68.25)
        assert e.amortized_battery_cost_month == pytest.approx(568.75)
        # 120 / 43.96 = 2.73
        assert e.num_replacements_10_years == 2

    def test_ten_year_tco(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs)
        assert r.diesel.tco_10_year == pytest.approx(3154.2784 * 120 + 90_000)
        # Replacement packs are added on top of the amortized battery cost
        assert r.electric.tco_10_year == pytest.approx(2163.07 * 120 + 130_000 + 2 * 25_000)
        assert r.savings.tco_10_year_savings == pytest.approx(r.diesel.tco_10_year - r.electric.tco_10_year)

    def test_savings_and_payback(self, tco_inputs: TcoInputs):
        s = compute_tco(tco_inputs).savings
        assert s.monthly_savings_unit == pytest.approx(991.2084)
        assert s.yearly_savings == pytest.approx(991.2084 * 12)
        assert s.capex_difference == 40_000
        assert s.payback_period_months == pytest.approx(40_000 / 991.2084)

    def test_emissions(self, tco_inputs: TcoInputs):
        esg = compute_tco(tco_inputs).emissions
        assert esg.diesel_co2_kg_month == pytest.approx(465.92 * 2.68)
        assert esg.diesel_nox_g_month == pytest.approx(465.92 * 30.0)
        assert esg.diesel_sox_g_month == pytest.approx(465.92 * 0.02)
        assert esg.diesel_pm_g_month == pytest.approx(465.92 * 2.5)
        assert esg.electric_co2_kg_month == pytest.approx(1310.4 * 0.6)
        assert esg.co2_reduction_kg_month == pytest.approx(465.92 * 2.68 - 1310.4 * 0.6)
        assert esg.co2_reduction_kg_year == pytest.approx(esg.co2_reduction_kg_month * 12)

    def test_financing(self, tco_inputs: TcoInputs):
        fin = compute_tco(tco_inputs).financing
        assert fin.diesel.loan_principal_unit == pytest.approx(72_000)
        assert fin.electric.loan_principal_unit == pytest.approx(104_000)
        assert fin.diesel.monthly_insurance == pytest.approx(125.0)
        assert fin.electric.monthly_installment > fin.diesel.monthly_installment
        assert fin.diesel.total_monthly == pytest.approx(
            fin.diesel.monthly_installment + fin.diesel.monthly_insurance
        )

    def test_horizon_is_ten_years(self):
        assert TCO_PERIOD_MONTHS == 120


# ═══════════════════════════════════════════════════════════════════════════
# Fleet scaling
# ═══════════════════════════════════════════════════════════════════════════

class TestFleetScaling:

    @pytest.mark.parametrize("entered, expected", [(1, 1), (3.7, 3), (0, 1), (-5, 1), (12, 12)])
    def test_fleet_size_floored_min_one(self, tco_inputs: TcoInputs, entered, expected):
        r = compute_tco(tco_inputs.model_copy(update={"number_of_forklifts": entered}))
        assert r.fleet_size == expected

    def test_fleet_figures_are_unit_times_fleet(self, tco_inputs: TcoInputs):
        single = compute_tco(tco_inputs)
        fleet = compute_tco(tco_inputs.model_copy(update={"number_of_forklifts": 7}))

        assert fleet.diesel.total_month == fleet.diesel.total_month_unit * 7
        assert fleet.electric.total_month == fleet.electric.total_month_unit * 7
        assert fleet.diesel.total_month_unit == single.diesel.total_month_unit
        assert fleet.savings.monthly_savings == single.savings.monthly_savings_unit * 7
        assert fleet.electric.kwh_month == pytest.approx(single.electric.kwh_month * 7)
        assert fleet.emissions.diesel_co2_kg_month == pytest.approx(single.emissions.diesel_co2_kg_month * 7)
        assert fleet.financing.electric.monthly_installment == pytest.approx(
            single.financing.electric.monthly_installment * 7
        )
        assert fleet.financing.diesel.monthly_insurance == pytest.approx(125.0 * 7)

    def test_payback_does_not_depend_on_fleet(self, tco_inputs: TcoInputs):
        single = compute_tco(tco_inputs)
        fleet = compute_tco(tco_inputs.model_copy(update={"number_of_forklifts": 10}))
        assert fleet.savings.payback_period_months == single.savings.payback_period_months

    def test_battery_cadence_is_per_unit(self, tco_inputs: TcoInputs):
        fleet = compute_tco(tco_inputs.model_copy(update={"number_of_forklifts": 4}))
        assert fleet.electric.cycles_per_month == pytest.approx(68.25)
        assert fleet.electric.num_replacements_10_years == 2


# ═══════════════════════════════════════════════════════════════════════════
# Clamping & guards
# ═══════════════════════════════════════════════════════════════════════════

class TestEdgeCases:

    def test_zero_utilization_zeroes_consumption(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs.model_copy(update={"utilization_pct": 0}))
        assert r.active_hours_month == 0
        assert r.diesel.fuel_l_month == 0
        assert r.diesel.total_month == 0
        assert r.electric.kwh_month == 0
        assert r.electric.total_month == 0
        assert r.emissions.diesel_co2_kg_month == 0
        assert r.emissions.electric_co2_kg_month == 0

    def test_negative_utilization_clamped_to_zero(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs.model_copy(update={"utilization_pct": -40}))
        assert r.active_hours_month == 0

    def test_utilization_above_100_clamped(self, tco_inputs: TcoInputs):
        over = compute_tco(tco_inputs.model_copy(update={"utilization_pct": 150}))
        full = compute_tco(tco_inputs.model_copy(update={"utilization_pct": 100}))
        assert over == full

    def test_no_energy_draw_means_no_battery_wear(self, tco_inputs: TcoInputs):
        e = compute_tco(tco_inputs.model_copy(update={"kwh_per_hour": 0})).electric
        assert e.cycles_per_month == 0
        assert math.isinf(e.months_to_80)
        assert e.amortized_battery_cost_month == 0
        assert e.num_replacements_10_years == 0

    def test_pack_size_floor_guard(self, tco_inputs: TcoInputs):
        e = compute_tco(tco_inputs.model_copy(update={"battery_voltage": 0})).electric
        assert e.pack_kwh == pytest.approx(0.1)
        assert e.usable_kwh == pytest.approx(0.1)
        assert math.isfinite(e.months_to_80)

    def test_dod_clamped_to_one_percent(self, tco_inputs: TcoInputs):
        e = compute_tco(tco_inputs.model_copy(update={"usable_dod_pct": 0})).electric
        # 24 kWh × 1%
        assert e.usable_kwh == pytest.approx(0.24)

    def test_cycles_to_80_floor_of_one(self, tco_inputs: TcoInputs):
        e = compute_tco(tco_inputs.model_copy(update={"cycles_to_80_pct": 0})).electric
        assert e.months_to_80 == pytest.approx(1 / 68.25)

    def test_payback_zero_when_electric_is_cheaper_to_buy(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs.model_copy(update={"electric_capex": 80_000}))
        assert r.savings.capex_difference == -10_000
        assert r.savings.payback_period_months == 0

    def test_payback_zero_when_electric_costs_more_to_run(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs.model_copy(update={"tariff_per_kwh": 5.0}))
        assert r.savings.monthly_savings_unit < 0
        assert r.savings.payback_period_months == 0

    def test_negative_rates_pass_through(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs.model_copy(update={"fuel_l_per_hour": -1.0}))
        assert r.diesel.fuel_l_month == pytest.approx(-145.6)
        assert r.emissions.diesel_co2_kg_month < 0

    def test_identical_inputs_identical_results(self, tco_inputs: TcoInputs):
        first = compute_tco(tco_inputs)
        second = compute_tco(tco_inputs)
        assert first == second
        assert first.model_dump() == second.model_dump()


# ═══════════════════════════════════════════════════════════════════════════
# Cumulative cost curves
# ═══════════════════════════════════════════════════════════════════════════

class TestCumulativeCosts:

    def test_curves_end_at_ten_year_tco(self, tco_inputs: TcoInputs):
        inputs = tco_inputs.model_copy(update={"number_of_forklifts": 3})
        r = compute_tco(inputs)
        months = np.arange(0, TCO_PERIOD_MONTHS + 1)
        diesel, electric = cumulative_costs(inputs, r, months)
        assert diesel[-1] == pytest.approx(r.diesel.tco_10_year)
        assert electric[-1] == pytest.approx(r.electric.tco_10_year)

    def test_capex_at_month_zero(self, tco_inputs: TcoInputs):
        r = compute_tco(tco_inputs)
        diesel, electric = cumulative_costs(tco_inputs, r, np.arange(0, 3))
        assert diesel[0] == 90_000
        assert electric[0] == 130_000

    def test_replacement_pack_charged_at_end_of_life(self, tco_inputs: TcoInputs):
        # First pack reaches 80% SOH at 43.96 months
        r = compute_tco(tco_inputs)
        months = np.array([43, 44])
        _, electric = cumulative_costs(tco_inputs, r, months)
        step = electric[1] - electric[0]
        assert step == pytest.approx(r.electric.total_month + 25_000)

    def test_never_cycled_battery_adds_no_packs(self, tco_inputs: TcoInputs):
        inputs = tco_inputs.model_copy(update={"kwh_per_hour": 0})
        r = compute_tco(inputs)
        months = np.arange(0, TCO_PERIOD_MONTHS + 1)
        _, electric = cumulative_costs(inputs, r, months)
        assert electric[-1] == pytest.approx(r.electric.tco_10_year)
