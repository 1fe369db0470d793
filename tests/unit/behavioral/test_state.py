"""Tests for bank account tier transitions."""
import pytest

from pattern_catalog.behavioral.state import BankAccount, run_demo
from tests.helpers import said


class TestBankAccountStates:
    """Test that the tier follows the balance rules."""

    def test_new_account_is_silver(self, narrator):
        account = BankAccount(narrator)
        assert account.tier == "Silver"
        assert account.balance == 0.0

    def test_silver_upgrades_only_above_threshold(self, narrator):
        account = BankAccount(narrator)
        account.deposit(1000)
        assert account.tier == "Silver"

        account.deposit(0.01)
        assert account.tier == "Gold"
        assert said(narrator, "Upgraded to Gold Account!")

    def test_gold_account_keeps_tier(self, narrator):
        account = BankAccount(narrator)
        account.deposit(1500)
        account.deposit(100)
        assert account.tier == "Gold"
        assert account.withdraw(1000) is True
        assert account.tier == "Gold"
        assert account.balance == pytest.approx(600)

    def test_failed_withdrawal_overdraws_without_touching_balance(self, narrator):
        account = BankAccount(narrator)
        account.deposit(400)

        assert account.withdraw(500) is False
        assert account.tier == "Overdrawn"
        assert account.balance == 400
        assert said(narrator, "Insufficient funds! Account is Overdrawn.")

    def test_overdrawn_refuses_withdrawals(self, narrator):
        account = BankAccount(narrator)
        account.withdraw(10)

        assert account.withdraw(1) is False
        assert said(narrator, "Cannot withdraw, account is overdrawn!")

    def test_overdrawn_deposit_returns_to_silver(self, narrator):
        account = BankAccount(narrator)
        account.withdraw(10)
        account.deposit(300)

        assert account.tier == "Silver"
        assert account.balance == 300
        assert said(narrator, "Account back to Silver!")

    def test_exact_balance_withdrawal_succeeds(self, narrator):
        account = BankAccount(narrator)
        account.deposit(250)
        assert account.withdraw(250) is True
        assert account.balance == 0
        assert account.tier == "Silver"

    @pytest.mark.parametrize("amount", [0, -5])
    def test_non_positive_amounts_are_rejected(self, narrator, amount):
        account = BankAccount(narrator)
        with pytest.raises(ValueError):
            account.deposit(amount)
        with pytest.raises(ValueError):
            account.withdraw(amount)

    def test_check_balance_reports_tier(self, narrator):
        account = BankAccount(narrator)
        account.deposit(50)
        assert account.check_balance() == 50
        assert said(narrator, "Silver Account balance: 50.00")

    def test_demo_runs(self, demo_context):
        run_demo(demo_context)
        assert said(demo_context.narrator, "Account back to Silver!")
