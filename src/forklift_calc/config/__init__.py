"""Configuration models — engine input records and fixed reference data."""

from forklift_calc.config.tco import TcoInputs
from forklift_calc.config.load import LoadInputs
from forklift_calc.config.gradeability import GradeInputs
from forklift_calc.config.presets import PRESETS, Preset, apply_preset
from forklift_calc.config.currency import CURRENCIES, REGIONAL_PRICES, format_currency

__all__ = [
    "TcoInputs",
    "LoadInputs",
    "GradeInputs",
    "Preset",
    "PRESETS",
    "apply_preset",
    "CURRENCIES",
    "REGIONAL_PRICES",
    "format_currency",
]
