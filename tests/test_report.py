"""
Tests for display figures and the export report.
"""

from datetime import date

import pytest

from eurostudy.models.currency import CurrencyConverter
from eurostudy.models.metrics import compute_metrics
from eurostudy.models.report import (
    DISCLAIMER,
    MONETARY_FIELDS,
    build_display_figures,
    generate_estimate_report,
)
from eurostudy.models.study_config import UserConfig


@pytest.fixture
def germany_estimate(resolver, germany_config):
    record = resolver.resolve("Germany", "Undergraduate", 3, "Non-EU")
    return record, germany_config, compute_metrics(record, germany_config)


@pytest.fixture
def inr_converter(reference_data):
    return CurrencyConverter(
        target_currency="INR",
        rate_table=reference_data.exchange_rates,
        symbol_table=reference_data.currency_symbols,
    )


class TestDisplayFigures:
    """Test conversion of metrics for display."""

    def test_euro_figures(self, germany_estimate):
        """Test base-currency figures are rounded only."""
        _, _, metrics = germany_estimate
        figures = build_display_figures(metrics, CurrencyConverter())

        assert figures["currency"] == "EUR"
        assert figures["symbol"] == "€"
        assert set(figures["totals"]) == set(MONETARY_FIELDS)
        assert figures["totals"]["mandatory_liquidity"] == 13433
        assert figures["totals"]["recommended_liquidity"] == 15425
        assert figures["monthly_budget"]["total"] == 1100
        assert len(figures["timeline"]) == 3

    def test_converted_figures(self, germany_estimate, inr_converter):
        """Test every figure goes through the shared conversion."""
        _, _, metrics = germany_estimate
        figures = build_display_figures(metrics, inr_converter)

        assert figures["symbol"] == "₹"
        assert figures["totals"]["mandatory_liquidity"] == 1215687
        assert figures["monthly_budget"]["housing"] == 45250


class TestEstimateReport:
    """Test the plain-text financial plan."""

    def test_report_sections(self, germany_estimate):
        """Test report layout and figures."""
        record, config, metrics = germany_estimate
        report = generate_estimate_report(
            record, config, metrics, CurrencyConverter(), prepared_on=date(2025, 1, 15)
        )

        assert "=== EuroStudy Estimate: Comprehensive Financial Plan ===" in report
        assert "Prepared for: Student" in report
        assert "Date: 2025-01-15" in report
        assert "Mandatory for Visa: €13,433" in report
        assert "Includes Blocked Account + Tuition" in report
        assert "Recommended: €15,425 (gap €1,992)" in report
        assert "Net Cost: €42,525" in report
        assert "No work offset selected" in report
        assert "Affordability: Full Funding Needed" in report
        assert "Monthly Budget for Mid-sized" in report
        assert "Total Monthly Need" in report
        assert "[i] Enforced official Blocked Account requirement" in report
        assert "Funding proof: Blocked Account (Sperrkonto)" in report
        assert report.rstrip().endswith(DISCLAIMER.splitlines()[-1])

    def test_report_uses_display_currency(self, germany_estimate, inr_converter):
        """Test report figures match display figures."""
        record, config, metrics = germany_estimate
        report = generate_estimate_report(record, config, metrics, inr_converter)
        figures = build_display_figures(metrics, inr_converter)

        expected = inr_converter.format(metrics.mandatory_liquidity)
        assert expected == f"₹{figures['totals']['mandatory_liquidity']:,}"
        assert f"Mandatory for Visa: {expected}" in report

    def test_report_with_work_and_warning(self, resolver, france_working_config):
        """Test work savings and warnings are shown."""
        config = france_working_config.model_copy(update={"name": "Ada"})
        record = resolver.resolve("France", "Undergraduate", 3, "EU")
        metrics = compute_metrics(record, config)

        report = generate_estimate_report(record, config, metrics, CurrencyConverter())

        assert "Prepared for: Ada" in report
        assert "Includes Proof of Funds + Tuition" in report
        assert "Work Savings: -€41,760" in report
        assert "[!] Real monthly costs (~€1,120)" in report

    def test_report_without_official_data(self, resolver):
        """Test unknown countries omit official sources."""
        config = UserConfig(country="Atlantis")
        record = resolver.resolve("Atlantis", "Undergraduate", 3, "Non-EU")
        metrics = compute_metrics(record, config)

        report = generate_estimate_report(record, config, metrics, CurrencyConverter())

        assert "Official Sources" not in report
        assert "Compliance Audit" in report

    def test_single_year_hides_recurring_column(self, resolver, germany_config):
        """Test programmes of a year or less show no later-year figures."""
        config = germany_config.model_copy(update={"duration_years": 1})
        record = resolver.resolve("Germany", "Undergraduate", 1, "Non-EU")
        metrics = compute_metrics(record, config)

        report = generate_estimate_report(record, config, metrics, CurrencyConverter())
        lines = {line.split()[0]: line for line in report.splitlines() if line.strip()}

        assert lines["TOTAL"].rstrip().endswith("-")
        assert "€13,550" not in report
        assert lines["Tuition"].rstrip().endswith("-")
        assert lines["Living"].rstrip().endswith("-")

    def test_multi_year_shows_recurring_column(self, germany_estimate):
        """Test later-year figures are shown for longer programmes."""
        record, config, metrics = germany_estimate
        report = generate_estimate_report(record, config, metrics, CurrencyConverter())

        total_line = next(l for l in report.splitlines() if l.strip().startswith("TOTAL"))
        assert total_line.rstrip().endswith("€13,550")
