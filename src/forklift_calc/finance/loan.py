"""Equipment loan financing.

Key formulas:
  loan_principal = capex × (1 − downpayment_pct / 100)
  EMI = P × r × (1+r)^n / ((1+r)^n − 1)   where r = annual_rate_pct / 100 / 12
  monthly_insurance = annual_insurance / 12 × fleet_size
"""

from __future__ import annotations

from forklift_calc.config.tco import TcoInputs
from forklift_calc.models.results import FinancingBreakdown


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def monthly_installment(principal: float, annual_rate_pct: float, tenure_months: float) -> float:
    """Level monthly repayment of an amortizing loan.

    Returns 0 when there is nothing to repay (principal ≤ 0) or no
    repayment period (tenure ≤ 0).  A 0% loan is repaid in equal parts.
    """
    if principal <= 0 or tenure_months <= 0:
        return 0.0

    monthly_rate = annual_rate_pct / 100 / 12
    if monthly_rate == 0:
        return principal / tenure_months

    factor = (1 + monthly_rate) ** tenure_months
    return principal * monthly_rate * factor / (factor - 1)


def compute_financing(capex: float, inputs: TcoInputs, fleet_size: int) -> FinancingBreakdown:
    """Fleet-level monthly loan + insurance cost for one powertrain."""
    principal = capex * (1 - _clamp(inputs.downpayment_pct, 0, 100) / 100)
    installment = monthly_installment(
        principal, inputs.annual_interest_rate_pct, inputs.loan_tenure_months,
    ) * fleet_size
    insurance = inputs.annual_insurance_per_year / 12 * fleet_size

    return FinancingBreakdown(
        loan_principal_unit=principal,
        monthly_installment=installment,
        monthly_insurance=insurance,
        total_monthly=installment + insurance,
    )
