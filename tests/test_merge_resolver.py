"""
Tests for the data merge resolver and its compliance audit log.
"""

import logging

import pytest

from eurostudy.models.country_catalog import BLOCKED_ACCOUNT_COUNTRIES
from eurostudy.models.merge_resolver import (
    DataMergeResolver,
    ResolverConfig,
    resolve,
)


class TestTuitionSelection:
    """Test tuition selection by student origin."""

    def test_non_eu_rate(self, resolver):
        """Test Non-EU students pay the international rate."""
        record = resolver.resolve("France", "Undergraduate", 3, "Non-EU")

        assert record.tuition_yearly == 2770
        assert record.audit_log[0].kind == "info"
        assert "international tuition rate (€2,770/yr)" in record.audit_log[0].message

    def test_eu_subsidized_rate(self, resolver):
        """Test EU students pay the subsidized rate."""
        record = resolver.resolve("France", "Undergraduate", 3, "EU")

        assert record.tuition_yearly == 170
        assert "subsidized EU tuition rate (€170/yr)" in record.audit_log[0].message

    def test_eu_rate_equal_to_non_eu(self, resolver):
        """Test an entry is still written when both rates match."""
        record = resolver.resolve("Switzerland", "Masters", 2, "EU")

        assert record.tuition_yearly == 1500
        assert record.audit_log[0].kind == "info"
        assert "same rate applies" in record.audit_log[0].message


class TestOneTimeCosts:
    """Test visa fee and blocked-account resolution."""

    def test_official_visa_fee_overrides_static(self, resolver):
        """Test official visa fee takes precedence."""
        record = resolver.resolve("Norway", "Masters", 2, "Non-EU")

        # Norway has no static profile; the default one lists 100
        assert record.one_time_costs.visa_admin == 540

    def test_static_visa_fee_without_official_data(self, resolver):
        """Test static visa fee is kept when no official data exists."""
        record = resolver.resolve("Atlantis", "Undergraduate", 3, "Non-EU")
        assert record.one_time_costs.visa_admin == 100

    def test_germany_blocked_account(self, resolver):
        """Test the official blocked account is enforced for Germany."""
        record = resolver.resolve("Germany", "Undergraduate", 3, "Non-EU")

        assert record.one_time_costs.blocked_account == 11208
        assert record.audit_log[1].message == (
            "Enforced official Blocked Account requirement (approx. €11,208) "
            "for Germany."
        )

    def test_deposit_country_uses_official_amount(self, resolver):
        """Test blocked-account countries without the Blocked Account method."""
        record = resolver.resolve("Austria", "Undergraduate", 3, "Non-EU")

        assert record.one_time_costs.blocked_account == 13000
        assert record.one_time_costs.visa_admin == 160
        assert record.audit_log[1].message == (
            "Applied mandatory deposit of €13,000 based on Austria visa rules."
        )

    def test_static_blocked_account_removed_outside_set(self, reference_data):
        """Test a static deposit is zeroed for countries outside the set."""
        profiles = dict(reference_data.cost_profiles)
        germany = profiles["Germany"]
        profiles["Italy"] = germany
        store = reference_data.model_copy(update={"cost_profiles": profiles})

        record = DataMergeResolver(store).resolve("Italy", "Undergraduate", 3, "EU")

        assert record.one_time_costs.blocked_account == 0
        assert "Annual Financial Proof" in record.audit_log[1].message

    @pytest.mark.parametrize("student_origin", ["EU", "Non-EU"])
    def test_blocked_account_only_in_set(
        self, resolver, reference_data, student_origin
    ):
        """Test blocked account is positive exactly for the blocked-account set."""
        for option in reference_data.countries:
            record = resolver.resolve(option.value, "Masters", 2, student_origin)
            if option.value in BLOCKED_ACCOUNT_COUNTRIES:
                assert record.one_time_costs.blocked_account > 0
            else:
                assert record.one_time_costs.blocked_account == 0


class TestWorkRights:
    """Test work rights resolution."""

    def test_legal_max_hours_by_origin(self, resolver):
        """Test hour caps differ by origin."""
        non_eu = resolver.resolve("Netherlands", "Masters", 2, "Non-EU")
        eu = resolver.resolve("Netherlands", "Masters", 2, "EU")

        assert non_eu.part_time_work.legal_max_hours == 16
        assert eu.part_time_work.legal_max_hours == 40
        assert non_eu.audit_log[2].message == (
            "Legal work limit: capped estimate to 16h/week based on Non-EU "
            "student visa regulations."
        )

    def test_official_work_rights_take_precedence(self, resolver):
        """Test official notes override static regulations."""
        record = resolver.resolve("France", "Undergraduate", 3, "EU")

        assert record.part_time_work.can_work is True
        assert record.part_time_work.regulations == (
            "Can work 60% of legal year (~20h/week)."
        )
        assert record.part_time_work.avg_student_wage == 12.5

    def test_static_regulations_without_official_data(self, resolver):
        """Test static regulations are used when no official data exists."""
        record = resolver.resolve("Atlantis", "Undergraduate", 3, "Non-EU")
        assert record.part_time_work.regulations == "20 hours/week typically"


class TestRealityCheck:
    """Test the living-cost reality check."""

    def test_warning_when_real_costs_exceed_minimum(self, resolver):
        """Test France raises a cost warning."""
        record = resolver.resolve("France", "Undergraduate", 3, "EU")

        warnings = record.audit_entries("warning")
        assert len(warnings) == 1
        assert record.audit_log[-1] == warnings[0]
        assert warnings[0].message == (
            "Real monthly costs (~€1,120) are significantly higher than the "
            "government visa minimum (~€615). The higher real estimate is used "
            "for all projections."
        )
        assert record.has_warnings

    def test_no_warning_within_ratio(self, resolver):
        """Test Germany stays within the ratio."""
        record = resolver.resolve("Germany", "Undergraduate", 3, "Non-EU")
        assert not record.has_warnings

    def test_custom_ratio(self, reference_data):
        """Test the ratio is configurable."""
        resolver = DataMergeResolver(
            reference_data, ResolverConfig(reality_check_ratio=2.0)
        )
        record = resolver.resolve("France", "Undergraduate", 3, "EU")
        assert not record.has_warnings

    def test_figures_round_half_away_from_zero(self, reference_data):
        """Test audit figures use the same rounding as displayed amounts."""
        france = reference_data.official_data["France"]
        official = dict(reference_data.official_data)
        # 7374 / 12 = 614.5
        official["France"] = france.model_copy(
            update={
                "funding_proof": france.funding_proof.model_copy(
                    update={"amount_euro": 7374}
                )
            }
        )
        store = reference_data.model_copy(update={"official_data": official})

        record = DataMergeResolver(store).resolve("France", "Undergraduate", 3, "EU")

        assert "(~€615)" in record.audit_entries("warning")[0].message

    def test_no_check_without_official_data(self, resolver):
        """Test unknown countries never warn."""
        record = resolver.resolve("Atlantis", "Undergraduate", 3, "Non-EU")
        assert not record.has_warnings


class TestResolve:
    """Test full resolution behaviour."""

    def test_audit_log_order(self, resolver):
        """Test entries follow the rule order."""
        record = resolver.resolve("France", "Undergraduate", 3, "Non-EU")

        assert [entry.kind for entry in record.audit_log] == [
            "info",
            "info",
            "info",
            "warning",
        ]
        assert "tuition" in record.audit_log[0].message
        assert "Annual Financial Proof" in record.audit_log[1].message
        assert "Legal work limit" in record.audit_log[2].message

    def test_unknown_country_uses_default_profile(self, resolver, caplog):
        """Test unknown countries resolve with the default profile."""
        with caplog.at_level(logging.DEBUG, logger="eurostudy.models.merge_resolver"):
            record = resolver.resolve("Atlantis", "Undergraduate", 3, "Non-EU")

        assert record.country_name == "Atlantis"
        assert record.official_data is None
        assert record.tuition_yearly == 5000
        assert record.recurring_costs.total() == 1050
        assert len(record.audit_log) == 3
        assert "using default" in caplog.text

    def test_echoes_request(self, resolver):
        """Test request fields are copied onto the record."""
        record = resolver.resolve("Spain", "Masters", 1.5, "EU")

        assert record.course_level == "Masters"
        assert record.duration_years == 1.5
        assert record.student_origin == "EU"
        assert record.exchange_rates["INR"] == 90.5

    def test_deterministic(self, resolver):
        """Test identical inputs give identical records."""
        first = resolver.resolve("Germany", "PhD", 4, "Non-EU")
        second = resolver.resolve("Germany", "PhD", 4, "Non-EU")

        assert first == second
        assert first is not second

    def test_module_level_resolve(self):
        """Test the convenience function uses the bundled catalog."""
        record = resolve("Germany", "Undergraduate", 3, "Non-EU")
        assert record.one_time_costs.blocked_account == 11208
