"""Plain-text and JSON renderings of an ROI result for copy/export."""

from __future__ import annotations

import json
from typing import Any, Optional

from roi_estimator.engine.result import ComponentResult, ROIResult
from roi_estimator.kpi_library.formulas import (
    ANNUAL_BREACH_PROBABILITY,
    INSURANCE_DISCOUNT_RATE,
    MINUTES_PER_TICKET,
    MINUTES_SAVED_PER_DAY,
    PASSWORD_TICKET_SHARE,
    WORKING_DAYS_PER_YEAR,
    estimate_tickets,
)
from roi_estimator.models.enums import ComponentId
from roi_estimator.models.inputs import OrgProfile

DEFAULT_PROSPECT_NAME = "Your Organization"

# Summary line labels, in the order they appear in the breakdown
_SUMMARY_LABELS: list[tuple[ComponentId, str]] = [
    (ComponentId.PRODUCTIVITY, "Productivity Gains"),
    (ComponentId.BREACH_RISK, "Breach Risk Reduction"),
    (ComponentId.PASSWORD_RESET, "Password Reset Savings"),
    (ComponentId.INSURANCE, "Insurance Savings"),
    (ComponentId.HELP_DESK, "IT Help Desk Savings"),
]


def format_currency(value: float, symbol: str = "$") -> str:
    """Whole-unit currency with thousands separators, e.g. ``$1,571,467``."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.0f}"


def format_number(value: float) -> str:
    return f"{value:,.0f}"


def format_calculation(component: ComponentResult, currency_symbol: str = "$") -> str:
    """Worked calculation for one component with its actual inputs.

    e.g. ``500 × 0.167 hrs × 250 × $50`` for productivity.
    """
    inputs = component.inputs_used

    def money(name: str) -> str:
        return format_currency(inputs[name], currency_symbol)

    if component.id == ComponentId.PRODUCTIVITY:
        return (
            f"{format_number(inputs['employee_count'])} × "
            f"{MINUTES_SAVED_PER_DAY / 60:.3f} hrs × {WORKING_DAYS_PER_YEAR} × "
            f"{money('avg_hourly_wage')}"
        )
    if component.id == ComponentId.BREACH_RISK:
        return (
            f"{money('breach_cost')} × {ANNUAL_BREACH_PROBABILITY:.2f} × "
            f"{inputs['breach_risk_reduction_pct']:g}%"
        )
    if component.id == ComponentId.PASSWORD_RESET:
        return (
            f"{format_number(inputs['employee_count'])} × "
            f"{inputs['resets_per_year_per_employee']} × {money('cost_per_reset')}"
        )
    if component.id == ComponentId.INSURANCE:
        return f"{money('annual_insurance_premium')} × {INSURANCE_DISCOUNT_RATE:.2f}"
    if component.id == ComponentId.HELP_DESK:
        tickets = estimate_tickets(inputs["employee_count"])
        return (
            f"{format_number(tickets)} × {PASSWORD_TICKET_SHARE:.2f} × "
            f"{MINUTES_PER_TICKET / 60:.3f} × {money('it_staff_hourly_rate')}"
        )
    raise KeyError(f"No calculation trail for component '{component.id}'")


def render_text_summary(
    result: ROIResult,
    profile: OrgProfile,
    prospect_name: Optional[str] = None,
    currency_symbol: str = "$",
) -> str:
    """Render the clipboard summary block."""

    def money(value: float) -> str:
        return format_currency(value, currency_symbol)

    lines = [
        f"ROI Analysis for {prospect_name or DEFAULT_PROSPECT_NAME}",
        "-" * 48,
        f"Total Annual ROI: {money(result.total)}",
        "",
        "Breakdown:",
    ]
    for component_id, label in _SUMMARY_LABELS:
        lines.append(f"- {label}: {money(result.value_of(component_id.value))}")
    lines += [
        "",
        "Assumptions:",
        f"- Employees: {format_number(profile.employee_count)}",
        f"- Devices: {format_number(profile.device_count)}",
        f"- Insurance Premium: {money(profile.annual_insurance_premium)}",
    ]
    return "\n".join(lines)


def build_json_summary(
    result: ROIResult,
    profile: OrgProfile,
    prospect_name: Optional[str] = None,
    currency_symbol: str = "$",
) -> dict[str, Any]:
    """Summary payload with raw values alongside their formatted strings."""
    return {
        "prospect_name": prospect_name or DEFAULT_PROSPECT_NAME,
        "total": result.total,
        "total_formatted": format_currency(result.total, currency_symbol),
        "components": [
            {
                "id": c.id,
                "name": c.name,
                "value": c.value,
                "value_formatted": format_currency(c.value, currency_symbol),
                "percent_of_total": c.percent_of_total,
                "calculation": format_calculation(c, currency_symbol),
                "citation_key": c.citation_key,
            }
            for c in result.components
        ],
        "profile": profile.model_dump(),
    }


def render_json_summary(
    result: ROIResult,
    profile: OrgProfile,
    prospect_name: Optional[str] = None,
    currency_symbol: str = "$",
) -> str:
    payload = build_json_summary(result, profile, prospect_name, currency_symbol)
    return json.dumps(payload, indent=2)
