"""Financing helpers shared by the TCO engine."""

from forklift_calc.finance.loan import compute_financing, monthly_installment

__all__ = ["compute_financing", "monthly_installment"]
