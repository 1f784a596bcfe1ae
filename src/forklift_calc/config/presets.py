"""Duty-class presets for the TCO calculator.

Each preset fills the duty cycle, capex, consumption, prices and
maintenance rates of both powertrains.  Battery, financing and fleet-size
fields are left as the user set them.
"""

from __future__ import annotations

from pydantic import BaseModel

from forklift_calc.config.tco import TcoInputs


class Preset(BaseModel):
    """A named bundle of TCO field values for one capacity class."""

    name: str
    capacity_ton: float
    hours_per_day: float
    days_per_month: float
    utilization_pct: float
    diesel_capex: float
    electric_capex: float
    fuel_l_per_hour: float
    diesel_price_per_liter: float
    diesel_maint_per_hour: float
    kwh_per_hour: float
    tariff_per_kwh: float
    electric_maint_per_hour: float


def _preset(name, ton, hours, util, diesel_capex, electric_capex, fuel, diesel_maint, kwh, tariff, elec_maint):
    return Preset(
        name=name, capacity_ton=ton, hours_per_day=hours, days_per_month=26,
        utilization_pct=util, diesel_capex=diesel_capex, electric_capex=electric_capex,
        fuel_l_per_hour=fuel, diesel_price_per_liter=3.02, diesel_maint_per_hour=diesel_maint,
        kwh_per_hour=kwh, tariff_per_kwh=tariff, electric_maint_per_hour=elec_maint,
    )


PRESETS: dict[str, Preset] = {
    "1t-warehouse": _preset("preset_1t_warehouse", 1, 8, 70, 50_000, 75_000, 1.8, 6, 4, 0.55, 3),
    "2t-warehouse": _preset("preset_2t_warehouse", 2, 8, 70, 70_000, 105_000, 2.5, 9, 6.5, 0.55, 4.5),
    "3t-warehouse": _preset("preset_3t_warehouse", 3, 8, 70, 90_000, 130_000, 3.2, 12, 9, 0.55, 6),
    "4t-yard": _preset("preset_4t_yard", 4, 9, 75, 120_000, 175_000, 4.2, 16, 12, 0.60, 8),
    "5t-yard": _preset("preset_5t_yard", 5, 10, 75, 150_000, 220_000, 5.3, 20, 15, 0.60, 10),
    "6t-yard": _preset("preset_6t_yard", 6, 10, 80, 180_000, 270_000, 6.5, 25, 18, 0.60, 13),
    "7t-yard": _preset("preset_7t_yard", 7, 10, 80, 210_000, 320_000, 7.5, 30, 21, 0.60, 16),
    "8t-yard": _preset("preset_8t_yard", 8, 12, 85, 250_000, 380_000, 9, 35, 25, 0.60, 19),
    "10t-yard": _preset("preset_10t_yard", 10, 12, 85, 320_000, 450_000, 11, 45, 30, 0.60, 25),
}

DEFAULT_PRESET_KEY = "3t-warehouse"


def apply_preset(inputs: TcoInputs, key: str) -> TcoInputs:
    """Return a copy of ``inputs`` with every preset-controlled field overwritten.

    Raises ``KeyError`` for an unknown preset key.
    """
    preset = PRESETS[key]
    return inputs.model_copy(update=preset.model_dump(exclude={"name"}))
