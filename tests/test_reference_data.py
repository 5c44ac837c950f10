"""
Tests for reference data models and the bundled catalog.
"""

import pytest
from pydantic import ValidationError

from eurostudy.models.country_catalog import (
    BLOCKED_ACCOUNT_COUNTRIES,
    OFFICIAL_COUNTRY_DATA,
    STATIC_COST_PROFILES,
    get_reference_data,
)
from eurostudy.models.reference_data import (
    OneTimeCosts,
    RecurringCosts,
    ReferenceDataStore,
)


class TestRecurringCosts:
    """Test RecurringCosts model."""

    def test_total(self):
        """Test monthly total sums every category."""
        costs = RecurringCosts(
            housing_monthly=500,
            insurance_monthly=120,
            food_monthly=250,
            transport_monthly=30,
            misc_monthly=200,
        )
        assert costs.total() == 1100

    def test_negative_amount_rejected(self):
        """Test that negative costs are rejected."""
        with pytest.raises(ValidationError):
            RecurringCosts(housing_monthly=-1)

    def test_non_finite_amount_rejected(self):
        """Test that infinite and NaN costs are rejected."""
        with pytest.raises(ValidationError):
            RecurringCosts(housing_monthly=float("inf"))
        with pytest.raises(ValidationError):
            OneTimeCosts(deposit=float("nan"))

    def test_frozen(self):
        """Test that cost models cannot be mutated."""
        costs = OneTimeCosts(visa_admin=75)
        with pytest.raises(ValidationError):
            costs.visa_admin = 100


class TestReferenceDataStore:
    """Test ReferenceDataStore lookups and validation."""

    def test_default_profile_required(self):
        """Test that a store without a default profile is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ReferenceDataStore(cost_profiles={"Germany": STATIC_COST_PROFILES["Germany"]})

        assert "default" in str(exc_info.value)

    def test_exchange_rates_must_be_positive(self):
        """Test exchange rate validation."""
        with pytest.raises(ValidationError):
            ReferenceDataStore(
                cost_profiles=STATIC_COST_PROFILES,
                exchange_rates={"EUR": 1.0, "USD": 0},
            )

    def test_get_profile_falls_back_to_default(self, reference_data):
        """Test profile lookup for an unknown country."""
        assert reference_data.get_profile("Atlantis") == STATIC_COST_PROFILES["default"]
        assert not reference_data.has_profile("Atlantis")
        assert not reference_data.has_profile("default")
        assert reference_data.has_profile("Germany")

    def test_get_official_data(self, reference_data):
        """Test official data lookup."""
        germany = reference_data.get_official_data("Germany")
        assert germany.funding_proof.amount_euro == 11208
        assert germany.visa_fee_euro == 75
        assert reference_data.get_official_data("Atlantis") is None

    def test_lookup_is_exact_match(self, reference_data):
        """Test that lookups are case sensitive."""
        assert reference_data.get_official_data("germany") is None
        assert not reference_data.is_blocked_account_country("germany")

    def test_currency_symbols(self, reference_data):
        """Test the code to symbol table."""
        symbols = reference_data.currency_symbols
        assert symbols["EUR"] == "€"
        assert symbols["INR"] == "₹"
        assert symbols["PKR"] == "Rs"

    def test_country_label(self, reference_data):
        """Test flag labels for selectable countries."""
        assert reference_data.get_country_label("Germany") == "🇩🇪 Germany"
        assert reference_data.get_country_label("Atlantis") is None


class TestBundledCatalog:
    """Test the bundled reference tables."""

    def test_shared_instance(self):
        """Test that the bundled store is created once."""
        assert get_reference_data() is get_reference_data()

    def test_catalog_sizes(self, reference_data):
        """Test catalog contents."""
        assert len(reference_data.countries) == 30
        assert len(reference_data.official_data) == 18
        assert len(reference_data.currencies) == 6
        assert "default" in reference_data.cost_profiles

    def test_official_data_keys_match_country(self):
        """Test each official dataset is keyed by its country name."""
        for key, data in OFFICIAL_COUNTRY_DATA.items():
            assert data.country == key

    def test_blocked_account_countries(self):
        """Test the blocked-account country set."""
        assert set(BLOCKED_ACCOUNT_COUNTRIES) == {
            "Germany",
            "Austria",
            "Netherlands",
            "Finland",
            "Denmark",
            "Norway",
            "Sweden",
            "Switzerland",
        }

    def test_work_caps_by_origin(self):
        """Test EU caps never fall below Non-EU caps."""
        for profile in STATIC_COST_PROFILES.values():
            work = profile.part_time_work
            assert work.max_hours_eu >= work.max_hours_non_eu
            assert work.avg_student_wage >= work.min_wage
