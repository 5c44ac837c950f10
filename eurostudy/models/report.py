"""
Display figures and export report for study-abroad estimates.

Both the HTTP API and the exported plan render figures produced here, so a
given estimate shows the same converted amounts everywhere. Nothing in this
module recomputes a metric; it only converts and lays out ``DerivedMetrics``.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from .cost_record import CostRecord
from .currency import CurrencyConverter
from .metrics import DerivedMetrics
from .study_config import UserConfig

MONETARY_FIELDS = [
    "monthly_living_cost",
    "yearly_living_cost",
    "start_up_fees",
    "mandatory_liquidity",
    "recommended_liquidity",
    "liquidity_gap",
    "first_year_cost",
    "subsequent_year_cost",
    "total_degree_cost",
    "yearly_work_income",
    "monthly_avg_work_income",
    "total_fixed_costs",
    "total_living_costs",
    "total_work_income",
    "net_total_cost",
    "net_monthly_out_of_pocket",
    "max_potential_monthly_income",
]

DISCLAIMER = (
    "Disclaimer: Visa financial requirements and costs are estimates based on "
    "available data.\nRegulations change frequently. Always confirm specific "
    "requirements with the official embassy."
)


def build_display_figures(
    metrics: DerivedMetrics, converter: CurrencyConverter
) -> Dict[str, Any]:
    """
    Convert every monetary metric to the display currency.

    Args:
        metrics: Derived metrics in the base currency
        converter: Converter for the display currency

    Returns:
        Dictionary with converted totals, budget lines and timeline rows
    """
    totals = {name: converter.convert(getattr(metrics, name)) for name in MONETARY_FIELDS}

    budget = metrics.monthly_budget
    monthly_budget = {
        "housing": converter.convert(budget.housing),
        "food": converter.convert(budget.food),
        "insurance": converter.convert(budget.insurance),
        "transport_and_leisure": converter.convert(budget.transport_and_leisure),
        "total": converter.convert(budget.total),
    }

    timeline = [
        {
            "year": row.year,
            "fraction": row.fraction,
            "start_up_fees": converter.convert(row.start_up_fees),
            "tuition": converter.convert(row.tuition),
            "living": converter.convert(row.living),
            "total_cost": converter.convert(row.total_cost),
            "work_income": converter.convert(row.work_income),
            "cumulative_cost": converter.convert(row.cumulative_cost),
        }
        for row in metrics.timeline
    ]

    return {
        "currency": converter.target_currency,
        "symbol": converter.symbol,
        "totals": totals,
        "monthly_budget": monthly_budget,
        "timeline": timeline,
    }


def _format_audit_log(record: CostRecord) -> List[str]:
    lines = []
    for entry in record.audit_log:
        marker = "[!]" if entry.kind == "warning" else "[i]"
        lines.append(f"  {marker} {entry.message}")
    return lines


def generate_estimate_report(
    record: CostRecord,
    config: UserConfig,
    metrics: DerivedMetrics,
    converter: CurrencyConverter,
    prepared_on: Optional[date] = None,
) -> str:
    """
    Generate a human-readable financial plan for an estimate.

    Args:
        record: Resolved cost record
        config: The student's configuration
        metrics: Derived metrics for the record and configuration
        converter: Converter for the display currency
        prepared_on: Date printed in the header (defaults to today)

    Returns:
        Formatted report string
    """
    fmt = converter.format
    has_later_years = config.duration_years > 1

    def later(amount: float) -> str:
        return fmt(amount) if has_later_years else "-"

    prepared_on = prepared_on or date.today()
    is_blocked_account = record.one_time_costs.blocked_account > 0

    liquidity_note = (
        "Includes Blocked Account + Tuition"
        if is_blocked_account
        else "Includes Proof of Funds + Tuition"
    )
    if metrics.total_work_income > 0:
        work_note = f"Work Savings: -{fmt(metrics.total_work_income)}"
    else:
        work_note = "No work offset selected"

    lines = [
        "=== EuroStudy Estimate: Comprehensive Financial Plan ===",
        f"Prepared for: {config.name or 'Student'}",
        f"Date: {prepared_on.isoformat()}",
        (
            f"Destination: {record.country_name} ({config.city_tier}), "
            f"{config.course_level}, {config.duration_years:g} years, "
            f"{config.student_origin} student"
        ),
        "",
        "REQUIRED UPFRONT (LIQUIDITY)",
        f"  Mandatory for Visa: {fmt(metrics.mandatory_liquidity)}",
        f"  {liquidity_note}",
        f"  Recommended: {fmt(metrics.recommended_liquidity)}"
        f" (gap {fmt(metrics.liquidity_gap)})",
        "",
        "NET DEGREE COST (Estimate)",
        f"  Net Cost: {fmt(metrics.net_total_cost)}",
        f"  Total Cost: {fmt(metrics.total_degree_cost)}",
        f"  {work_note}",
        (
            f"  Affordability: {metrics.affordability_tier} "
            f"({metrics.living_cost_covered_percent}% of living costs covered)"
        ),
        "",
        "Yearly Breakdown               Year 1 (Setup)   Year 2+ (Recurring)",
        f"  Start-Up Fees                {fmt(metrics.start_up_fees):>14}   {'-':>19}",
        (
            f"  Tuition Fees                 {fmt(record.tuition_yearly):>14}"
            f"   {later(record.tuition_yearly):>19}"
        ),
        (
            f"  Living Expenses              {fmt(metrics.yearly_living_cost):>14}"
            f"   {later(metrics.yearly_living_cost):>19}"
        ),
        (
            f"  TOTAL                        {fmt(metrics.first_year_cost):>14}"
            f"   {later(metrics.subsequent_year_cost):>19}"
        ),
        "",
        f"Monthly Budget for {config.city_tier}",
        f"  Housing                {fmt(metrics.monthly_budget.housing):>12}",
        f"  Food                   {fmt(metrics.monthly_budget.food):>12}",
        f"  Insurance              {fmt(metrics.monthly_budget.insurance):>12}",
        (
            f"  Transport & Misc       "
            f"{fmt(metrics.monthly_budget.transport_and_leisure):>12}"
        ),
        f"  Total Monthly Need     {fmt(metrics.monthly_budget.total):>12}",
        "",
        "Compliance Audit",
        *_format_audit_log(record),
    ]

    if record.official_data is not None:
        proof = record.official_data.funding_proof
        lines += [
            "",
            "Official Sources",
            f"  Funding proof: {proof.preferred_method}",
            f"  {proof.details}",
            f"  {proof.official_link}",
        ]

    lines += ["", DISCLAIMER, ""]
    return "\n".join(lines)
