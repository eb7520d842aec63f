"""Unit tests for the Profession and Professional entities."""

import pytest

from fakes import make_profession, make_professional


class TestProfessionCounters:
    """Test profession demand counters."""

    def test_apply_counters(self, now):
        """Test writing both counters."""
        profession = make_profession()
        profession.apply_counters(10, 3, now)

        assert profession.registered_professionals == 10
        assert profession.active_job_offers == 3
        assert profession.last_updated == now

    def test_popularity_weights_professionals_higher(self, now):
        """Test that professionals weigh more than offers in popularity."""
        profession = make_profession()
        profession.apply_counters(10, 3, now)
        assert profession.popularity == 8

    def test_negative_counters_raise_error(self, now):
        """Test that negative counters raise ValueError."""
        with pytest.raises(ValueError):
            make_profession().apply_counters(-1, 0, now)


class TestProfessionalActivation:
    """Test professional activation and naming."""

    def test_set_active_reports_changes(self, now):
        """Test that set_active reports whether the flag changed."""
        professional = make_professional()
        assert professional.set_active(True, now) is False
        assert professional.set_active(False, now) is True
        assert professional.is_active is False
        assert professional.updated_at == now

    def test_full_name(self):
        """Test joining first and last name of a professional."""
        assert make_professional("Luis").full_name == "Luis Mora"
