"""Savings component formulas for passwordless authentication ROI.

Each function is a pure calculation with no side effects. Inputs are not
range-checked: negative values flow straight through the arithmetic. All
monetary values are annual and in a single currency.

The module-level constants come from the cited research and are not
user-editable.
"""

from roi_estimator.kpi_library.registry import register_component
from roi_estimator.models.enums import ComponentCategory, ComponentId

MINUTES_SAVED_PER_DAY = 10
WORKING_DAYS_PER_YEAR = 250
ANNUAL_BREACH_PROBABILITY = 0.10
INSURANCE_DISCOUNT_RATE = 0.25
MIN_ANNUAL_TICKETS = 2000
TICKETS_PER_EMPLOYEE = 10
PASSWORD_TICKET_SHARE = 0.30
MINUTES_PER_TICKET = 10


def estimate_tickets(employee_count: int) -> int:
    """Annual help desk tickets, floored at a minimum-size IT desk."""
    return max(MIN_ANNUAL_TICKETS, employee_count * TICKETS_PER_EMPLOYEE)


@register_component(
    component_id=ComponentId.PRODUCTIVITY.value,
    label="Productivity Gains",
    profile_inputs=["employee_count"],
    assumption_inputs=["avg_hourly_wage"],
    citation_key="productivity",
    category=ComponentCategory.PRODUCTIVITY,
)
def calc_productivity_gains(employee_count: int, avg_hourly_wage: float) -> float:
    """Productivity = Employees x (10/60) hrs x 250 days x Avg_Wage"""
    return (
        employee_count
        * (MINUTES_SAVED_PER_DAY / 60)
        * WORKING_DAYS_PER_YEAR
        * avg_hourly_wage
    )


@register_component(
    component_id=ComponentId.BREACH_RISK.value,
    label="Breach Risk Reduction",
    profile_inputs=[],
    assumption_inputs=["breach_risk_reduction_pct", "breach_cost"],
    citation_key="breach_cost",
    category=ComponentCategory.RISK_REDUCTION,
)
def calc_breach_risk_reduction(
    breach_risk_reduction_pct: float,
    breach_cost: float,
) -> float:
    """Breach_Savings = (Reduction_% / 100) x 0.10 x Breach_Cost"""
    return (breach_risk_reduction_pct / 100) * ANNUAL_BREACH_PROBABILITY * breach_cost


@register_component(
    component_id=ComponentId.PASSWORD_RESET.value,
    label="Password Resets",
    profile_inputs=["employee_count"],
    assumption_inputs=["resets_per_year_per_employee", "cost_per_reset"],
    citation_key="password_reset",
)
def calc_password_reset_savings(
    employee_count: int,
    resets_per_year_per_employee: int,
    cost_per_reset: float,
) -> float:
    """Reset_Savings = Employees x Resets_Per_Year x Cost_Per_Reset"""
    return employee_count * resets_per_year_per_employee * cost_per_reset


@register_component(
    component_id=ComponentId.INSURANCE.value,
    label="Insurance Savings",
    profile_inputs=["annual_insurance_premium"],
    assumption_inputs=[],
    citation_key="insurance",
    category=ComponentCategory.RISK_REDUCTION,
)
def calc_insurance_savings(annual_insurance_premium: float) -> float:
    """Insurance_Savings = Premium x 0.25"""
    return annual_insurance_premium * INSURANCE_DISCOUNT_RATE


@register_component(
    component_id=ComponentId.HELP_DESK.value,
    label="IT Help Desk",
    profile_inputs=["employee_count"],
    assumption_inputs=["it_staff_hourly_rate"],
    citation_key="help_desk",
)
def calc_help_desk_savings(employee_count: int, it_staff_hourly_rate: float) -> float:
    """Help_Desk = max(2000, Employees x 10) x 0.30 x (10/60) x IT_Rate"""
    tickets = estimate_tickets(employee_count)
    return (
        tickets
        * PASSWORD_TICKET_SHARE
        * (MINUTES_PER_TICKET / 60)
        * it_staff_hourly_rate
    )
