"""Tests for compute_conversion_rate: pure math, no IO."""

from portal.core.analytics import compute_conversion_rate


def test_zero_visitors_returns_zero_even_with_contacts():
    assert compute_conversion_rate(contact_forms=7, total_visitors=0) == 0


def test_zero_contacts_returns_zero():
    assert compute_conversion_rate(0, 50) == 0


def test_exact_percentage():
    assert compute_conversion_rate(2, 8) == 25.0


def test_rounds_to_two_decimals():
    assert compute_conversion_rate(1, 3) == 33.33
    assert compute_conversion_rate(2, 3) == 66.67


def test_rate_can_exceed_one_hundred():
    assert compute_conversion_rate(3, 2) == 150.0
