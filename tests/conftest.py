"""Shared test fixtures — the 3 t warehouse preset and typical loads / ramps."""

from __future__ import annotations

import pytest

from forklift_calc.config import GradeInputs, LoadInputs, TcoInputs


@pytest.fixture
def tco_inputs() -> TcoInputs:
    """3 t warehouse preset, 48 V / 500 Ah pack, 20% down over 60 months at 5%."""
    return TcoInputs(
        number_of_forklifts=1,
        capacity_ton=3,
        hours_per_day=8,
        days_per_month=26,
        utilization_pct=70,
        diesel_capex=90_000,
        fuel_l_per_hour=3.2,
        diesel_price_per_liter=3.02,
        diesel_maint_per_hour=12,
        electric_capex=130_000,
        kwh_per_hour=9,
        tariff_per_kwh=0.55,
        electric_maint_per_hour=6,
        battery_voltage=48,
        battery_ah=500,
        usable_dod_pct=80,
        cycles_to_80_pct=3_000,
        battery_replacement_cost=25_000,
        grid_co2_intensity_kg_per_kwh=0.6,
        downpayment_pct=20,
        loan_tenure_months=60,
        annual_interest_rate_pct=5,
        annual_insurance_per_year=1_500,
    )


@pytest.fixture
def pallet_load() -> LoadInputs:
    """3 t electric forklift, standard wheelbase, 1200 mm deep pallet."""
    return LoadInputs(
        machine_type="forklift",
        wheelbase="standard",
        rated_capacity_kg=3000,
        load_weight_kg=2000,
        load_length_mm=1200,
        load_width_mm=1000,
        load_height_mm=1200,
        fork_length_mm=1070,
    )


@pytest.fixture
def ten_percent_ramp() -> GradeInputs:
    """1 m rise over 10 m run, loaded 4-wheel electric forklift on dry concrete."""
    return GradeInputs(
        machine_type="forklift",
        load_state="loaded",
        surface="dry_concrete",
        ramp_rise_mm=1000,
        ramp_run_mm=10000,
    )
