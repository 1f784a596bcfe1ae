"""Scenario persistence."""

from forklift_calc.storage.scenarios import STORAGE_KEY, ScenarioStore

__all__ = ["STORAGE_KEY", "ScenarioStore"]
