"""TCO inputs — diesel vs. battery-electric fleet comparison.

One flat record per calculation.  Percentage fields are clamped by the
engine rather than rejected here; every other numeric field is passed
through as entered (negative "what-if" values included).
"""

from pydantic import BaseModel, Field


class TcoInputs(BaseModel):
    """Snapshot of every TCO field at the moment of calculation."""

    # --- Fleet & duty cycle ---
    number_of_forklifts: float = Field(default=1, description="Fleet size (floored, min 1)")
    capacity_ton: float = Field(default=3, description="Duty class of the units (t)")
    hours_per_day: float = Field(default=8, description="Operating hours per day")
    days_per_month: float = Field(default=26, description="Operating days per month")
    utilization_pct: float = Field(default=70, description="Share of operating hours under load (0–100)")

    # --- Diesel unit ---
    diesel_capex: float = Field(default=90_000, description="Purchase price per diesel unit")
    fuel_l_per_hour: float = Field(default=3.2, description="Fuel use (L/h)")
    diesel_price_per_liter: float = Field(default=3.02, description="Diesel price (per L)")
    diesel_maint_per_hour: float = Field(default=12, description="Diesel maintenance (per h)")

    # --- Electric unit ---
    electric_capex: float = Field(default=130_000, description="Purchase price per electric unit")
    kwh_per_hour: float = Field(default=9, description="Energy use (kWh/h)")
    tariff_per_kwh: float = Field(default=0.55, description="Electricity tariff (per kWh)")
    electric_maint_per_hour: float = Field(default=6, description="Electric maintenance (per h)")

    # --- Traction battery ---
    battery_voltage: float = Field(default=48, description="Pack nominal voltage (V)")
    battery_ah: float = Field(default=500, description="Pack capacity (Ah)")
    usable_dod_pct: float = Field(default=80, description="Usable depth of discharge (1–100)")
    cycles_to_80_pct: float = Field(default=3_000, description="Cycles until the pack reaches 80% SOH")
    battery_replacement_cost: float = Field(default=25_000, description="Cost of one replacement pack")
    grid_co2_intensity_kg_per_kwh: float = Field(default=0.6, description="Grid emission factor (kg CO2/kWh)")

    # --- Financing ---
    downpayment_pct: float = Field(default=20, description="Downpayment share of capex (0–100)")
    loan_tenure_months: float = Field(default=60, description="Loan tenure (months)")
    annual_interest_rate_pct: float = Field(default=5, description="Annual interest rate (%)")
    annual_insurance_per_year: float = Field(default=1_500, description="Insurance premium per unit per year")
