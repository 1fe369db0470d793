"""Tests for payment processors bridged to payment methods."""
from datetime import date
from unittest.mock import Mock

import pytest

from pattern_catalog.infrastructure.narration import LatencySimulator
from pattern_catalog.structural.bridge import (
    CreditCardPayment,
    CryptocurrencyPayment,
    OnlinePayment,
    PayPalPayment,
    RecurringPayment,
    add_months,
    next_payment_date,
    run_demo,
)
from tests.helpers import said


class TestSchedules:
    """Test next payment date arithmetic."""

    @pytest.mark.parametrize(
        "schedule,today,expected",
        [
            ("daily", date(2024, 12, 31), date(2025, 1, 1)),
            ("weekly", date(2024, 2, 26), date(2024, 3, 4)),
            ("monthly", date(2024, 1, 31), date(2024, 2, 29)),
            ("monthly", date(2023, 1, 31), date(2023, 2, 28)),
            ("monthly", date(2024, 12, 15), date(2025, 1, 15)),
            ("yearly", date(2024, 2, 29), date(2025, 2, 28)),
            ("fortnightly", date(2024, 3, 10), date(2024, 4, 10)),
            ("WEEKLY", date(2024, 1, 1), date(2024, 1, 8)),
        ],
    )
    def test_next_payment_date(self, schedule, today, expected):
        assert next_payment_date(schedule, today) == expected

    def test_add_months_across_years(self):
        assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)


class TestPaymentMethods:
    """Test per-method validation limits."""

    @pytest.mark.parametrize(
        "method_class,limit",
        [(CreditCardPayment, 50000.00), (PayPalPayment, 100000.00),
         (CryptocurrencyPayment, 1000000.00)],
    )
    def test_limits(self, narrator, method_class, limit):
        method = method_class(narrator)
        assert method.validate_amount(limit) is True
        assert method.validate_amount(limit + 0.01) is False
        assert method.validate_amount(0) is False
        assert method.validate_amount(-1) is False

    def test_small_crypto_amount_warns_but_passes(self, narrator):
        method = CryptocurrencyPayment(narrator)
        assert method.validate_amount(0.5) is True
        assert said(narrator, "Warning: Amount below minimum recommended ($1.00)")

    def test_transaction_ids_increase(self, narrator):
        method = CreditCardPayment(narrator)
        assert method.next_transaction_id() == "CC-000001"
        assert method.next_transaction_id() == "CC-000002"

    def test_pay_simulates_processing_time(self, narrator):
        sleep = Mock()
        method = CreditCardPayment(narrator, LatencySimulator(enabled=True, sleep=sleep))
        assert method.pay(10.0) is True
        sleep.assert_called_once_with(0.1)


class TestPaymentProcessors:
    """Test processors working through any method."""

    def test_online_payment_receipt(self, narrator):
        processor = OnlinePayment(narrator, PayPalPayment(narrator), today=lambda: date(2024, 5, 1))
        assert processor.process_payment(299.50) is True
        assert said(narrator, "PayPal payment successful!")
        assert said(narrator, "Date: 2024-05-01")
        assert said(narrator, "Status: COMPLETED")

    def test_validation_failure_stops_payment(self, narrator):
        method = CreditCardPayment(narrator)
        method.pay = Mock()
        processor = OnlinePayment(narrator, method)

        assert processor.process_payment(75000.00) is False
        method.pay.assert_not_called()
        assert said(narrator, "Amount exceeds Credit Card limit ($50,000.00)")
        assert said(narrator, "Payment validation failed!")

    def test_switching_method_at_runtime(self, narrator):
        processor = OnlinePayment(narrator, CreditCardPayment(narrator))
        processor.set_payment_method(CryptocurrencyPayment(narrator))

        assert processor.payment_method_name == "Cryptocurrency"
        assert processor.process_payment(1500.00) is True
        assert said(narrator, "Blockchain TX Hash: 0x00000001")

    def test_recurring_payment_schedule(self, narrator):
        subscription = RecurringPayment(narrator, CreditCardPayment(narrator),
                                        today=lambda: date(2024, 1, 31))
        assert subscription.schedule == "monthly"

        assert subscription.process_payment(9.99) is True
        assert said(narrator, "Next Payment: 2024-02-29")

        subscription.setup_schedule("weekly")
        assert subscription.next_payment() == date(2024, 2, 7)

    def test_unknown_schedule_recurs_monthly(self, narrator):
        subscription = RecurringPayment(narrator, PayPalPayment(narrator),
                                        today=lambda: date(2024, 3, 10))
        subscription.setup_schedule("fortnightly")
        assert subscription.next_payment() == date(2024, 4, 10)

    def test_demo_runs(self, demo_context):
        run_demo(demo_context)
        assert said(demo_context.narrator, "Payment validation failed!")
