"""State - a bank account whose tier decides how deposits and withdrawals behave."""
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)

GOLD_THRESHOLD = 1000.0


class AccountState(ABC):
    """
    One account tier.

    Each operation performs the arithmetic and any tier transition together;
    :class:`BankAccount` runs it under its lock.
    """

    name = ""

    @abstractmethod
    def deposit(self, account: "BankAccount", amount: float) -> None:
        """Add ``amount`` and possibly change tier."""

    @abstractmethod
    def withdraw(self, account: "BankAccount", amount: float) -> bool:
        """Take ``amount`` out; return False if it was refused."""

    def check_balance(self, account: "BankAccount") -> float:
        account.narrator.say(f"{self.name} Account balance: {account.balance:.2f}")
        return account.balance

    def _withdraw_or_overdraw(self, account: "BankAccount", amount: float, label: str) -> bool:
        if account.balance >= amount:
            account.balance -= amount
            account.narrator.say(f"{label} {amount:.2f}, balance: {account.balance:.2f}")
            return True
        account.transition_to(OverdrawnAccount())
        account.narrator.say("Insufficient funds! Account is Overdrawn.")
        return False


class SilverAccount(AccountState):
    name = "Silver"

    def deposit(self, account: "BankAccount", amount: float) -> None:
        account.balance += amount
        account.narrator.say(f"Deposited {amount:.2f}, balance: {account.balance:.2f}")
        if account.balance > GOLD_THRESHOLD:
            account.transition_to(GoldAccount())
            account.narrator.say("Upgraded to Gold Account!")

    def withdraw(self, account: "BankAccount", amount: float) -> bool:
        return self._withdraw_or_overdraw(account, amount, "Withdrew")


class GoldAccount(AccountState):
    name = "Gold"

    def deposit(self, account: "BankAccount", amount: float) -> None:
        account.balance += amount
        account.narrator.say(f"Gold deposit: {amount:.2f}, balance: {account.balance:.2f}")

    def withdraw(self, account: "BankAccount", amount: float) -> bool:
        return self._withdraw_or_overdraw(account, amount, "Gold withdraw:")


class OverdrawnAccount(AccountState):
    name = "Overdrawn"

    def deposit(self, account: "BankAccount", amount: float) -> None:
        account.balance += amount
        account.narrator.say(f"Deposited {amount:.2f}, balance: {account.balance:.2f}")
        if account.balance > 0:
            account.transition_to(SilverAccount())
            account.narrator.say("Account back to Silver!")

    def withdraw(self, account: "BankAccount", amount: float) -> bool:
        account.narrator.say("Cannot withdraw, account is overdrawn!")
        return False


class BankAccount:
    """Context delegating every operation to its current tier."""

    def __init__(self, narrator: Narrator, balance: float = 0.0):
        self.narrator = narrator
        self.balance = balance
        self.state: AccountState = SilverAccount()
        self._lock = threading.RLock()

    @property
    def tier(self) -> str:
        return self.state.name

    def transition_to(self, state: AccountState) -> None:
        logger.debug("Account state transition", source=self.state.name, target=state.name)
        self.state = state

    def deposit(self, amount: float) -> None:
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        with self._lock:
            self.state.deposit(self, amount)

    def withdraw(self, amount: float) -> bool:
        if amount <= 0:
            raise ValueError("Withdrawal amount must be positive")
        with self._lock:
            return self.state.withdraw(self, amount)

    def check_balance(self) -> float:
        with self._lock:
            return self.state.check_balance(self)


def run_demo(context: "DemoContext") -> None:
    """Move one account through Silver, Gold, Overdrawn and back."""
    narrator = context.narrator
    narrator.banner("State Pattern - Bank Account Demo")

    account = BankAccount(narrator)
    account.deposit(500)
    account.withdraw(100)
    account.check_balance()
    account.deposit(600)
    account.check_balance()
    account.withdraw(1200)
    account.check_balance()
    account.withdraw(50)
    account.deposit(300)
    account.check_balance()
    narrator.blank()
    narrator.banner("State Demo Complete")
