"""Bridge - payment processors decoupled from the payment methods they use.

Processors (one-time online, recurring subscription) form the abstraction;
methods (credit card, PayPal, cryptocurrency) form the implementation. Any
processor works with any method and the method can be swapped at runtime.
"""
import calendar
import itertools
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import TYPE_CHECKING, Callable, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import LatencySimulator, Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)

SCHEDULES = ("daily", "weekly", "monthly", "yearly")
DEFAULT_SCHEDULE = "monthly"
RULE = "-" * 49


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def next_payment_date(schedule: str, today: date) -> date:
    """
    Date of the next payment for a schedule.

    Unknown schedules are treated as monthly.
    """
    schedule = schedule.lower()
    if schedule == "daily":
        return today + timedelta(days=1)
    if schedule == "weekly":
        return today + timedelta(weeks=1)
    if schedule == "yearly":
        return add_months(today, 12)
    return add_months(today, 1)


class PaymentMethod(ABC):
    """Implementation side of the bridge."""

    method_name = ""
    max_amount = 0.0
    processing_ms = 0
    transaction_prefix = ""

    def __init__(self, narrator: Narrator, latency: Optional[LatencySimulator] = None):
        self.narrator = narrator
        self.latency = latency or LatencySimulator()
        self._transaction_ids = itertools.count(1)

    def validate_amount(self, amount: float) -> bool:
        if amount <= 0:
            self.narrator.say("  Invalid amount")
            return False
        if amount > self.max_amount:
            self.narrator.say(
                f"  Amount exceeds {self.method_name} limit (${self.max_amount:,.2f})"
            )
            return False
        return True

    def next_transaction_id(self) -> str:
        return f"{self.transaction_prefix}-{next(self._transaction_ids):06d}"

    def pay(self, amount: float) -> bool:
        self.narrator.say(f"{self.method_name.upper()} PAYMENT")
        with self.narrator.indented():
            for step in self.processing_steps(amount):
                self.narrator.say(step)
            self.latency.pause(self.processing_ms)
            for line in self.confirmation(self.next_transaction_id()):
                self.narrator.say(line)
        logger.debug("Payment processed", method=self.method_name, amount=amount)
        return True

    @abstractmethod
    def processing_steps(self, amount: float) -> list: ...

    @abstractmethod
    def confirmation(self, transaction_id: str) -> list: ...


class CreditCardPayment(PaymentMethod):
    method_name = "Credit Card"
    max_amount = 50000.00
    processing_ms = 100
    transaction_prefix = "CC"

    def processing_steps(self, amount: float) -> list:
        return [
            "Processing credit card transaction...",
            f"Amount: ${amount:.2f}",
            "Validating card details...",
            "Checking available credit...",
            "Authorizing transaction...",
        ]

    def confirmation(self, transaction_id: str) -> list:
        return ["Credit card payment successful!", f"Transaction ID: {transaction_id}"]


class PayPalPayment(PaymentMethod):
    method_name = "PayPal"
    max_amount = 100000.00
    processing_ms = 150
    transaction_prefix = "PP"

    def processing_steps(self, amount: float) -> list:
        return [
            "Connecting to PayPal API...",
            f"Amount: ${amount:.2f}",
            "Authenticating PayPal account...",
            "Processing through PayPal gateway...",
        ]

    def confirmation(self, transaction_id: str) -> list:
        return [
            "PayPal payment successful!",
            f"PayPal Transaction ID: {transaction_id}",
            "Confirmation email sent to PayPal account",
        ]


class CryptocurrencyPayment(PaymentMethod):
    method_name = "Cryptocurrency"
    max_amount = 1000000.00
    minimum_recommended = 1.00
    processing_ms = 200
    transaction_prefix = "0x"

    def validate_amount(self, amount: float) -> bool:
        if not super().validate_amount(amount):
            return False
        if amount < self.minimum_recommended:
            self.narrator.say(
                f"  Warning: Amount below minimum recommended (${self.minimum_recommended:.2f})"
            )
        return True

    def next_transaction_id(self) -> str:
        return f"0x{next(self._transaction_ids):08X}"

    def processing_steps(self, amount: float) -> list:
        return [
            "Initiating blockchain transaction...",
            f"Amount: ${amount:.2f}",
            "Calculating network fees...",
            "Broadcasting to blockchain network...",
            "Waiting for confirmation (1/3)...",
        ]

    def confirmation(self, transaction_id: str) -> list:
        return [
            "Cryptocurrency payment successful!",
            f"Blockchain TX Hash: {transaction_id}",
            "Network: Bitcoin",
            "Confirmations: 3/3",
        ]


class PaymentProcessor(ABC):
    """Abstraction side of the bridge."""

    def __init__(self, narrator: Narrator, method: PaymentMethod,
                 today: Callable[[], date] = date.today):
        self.narrator = narrator
        self.method = method
        self._today = today

    @property
    def payment_method_name(self) -> str:
        return self.method.method_name

    def set_payment_method(self, method: PaymentMethod) -> None:
        self.method = method
        self.narrator.say(f"Payment method changed to: {method.method_name}")

    def validate_payment(self, amount: float) -> bool:
        self.narrator.say("Validating payment...")
        return self.method.validate_amount(amount)

    def process_payment(self, amount: float) -> bool:
        """
        Validate through the method, pay, then run the processor's follow-up.

        Returns:
            False if validation failed
        """
        self.print_header()
        if not self.validate_payment(amount):
            self.narrator.say("Payment validation failed!")
            return False
        self.narrator.say("Validation passed")
        self.before_payment()
        self.narrator.say(RULE)
        success = self.method.pay(amount)
        if success:
            self.narrator.say(RULE)
            self.after_payment(amount)
        return success

    @abstractmethod
    def print_header(self) -> None: ...

    def before_payment(self) -> None:
        pass

    @abstractmethod
    def after_payment(self, amount: float) -> None: ...


class OnlinePayment(PaymentProcessor):
    def print_header(self) -> None:
        self.narrator.section(f"ONE-TIME ONLINE PAYMENT | Method: {self.payment_method_name}")

    def after_payment(self, amount: float) -> None:
        self.narrator.say("Receipt Generated:")
        with self.narrator.indented():
            self.narrator.say("Payment Type: One-Time Online")
            self.narrator.say(f"Amount: ${amount:.2f}")
            self.narrator.say(f"Method: {self.payment_method_name}")
            self.narrator.say(f"Date: {self._today().isoformat()}")
            self.narrator.say("Status: COMPLETED")


class RecurringPayment(PaymentProcessor):
    def __init__(self, narrator: Narrator, method: PaymentMethod,
                 today: Callable[[], date] = date.today):
        super().__init__(narrator, method, today)
        self.schedule = DEFAULT_SCHEDULE

    def setup_schedule(self, schedule: str) -> None:
        self.schedule = schedule.lower()
        if self.schedule not in SCHEDULES:
            logger.warning("Unknown schedule, payments will recur monthly", schedule=schedule)
        self.narrator.say(f"Recurring schedule set to: {self.schedule.upper()}")

    def next_payment(self) -> date:
        return next_payment_date(self.schedule, self._today())

    def print_header(self) -> None:
        self.narrator.section(
            f"RECURRING SUBSCRIPTION PAYMENT | Method: {self.payment_method_name}"
            f" | Schedule: {self.schedule.upper()}"
        )

    def before_payment(self) -> None:
        self.narrator.say("Setting up recurring payment schedule...")

    def after_payment(self, amount: float) -> None:
        self.narrator.say("Subscription Details:")
        with self.narrator.indented():
            self.narrator.say("Type: Recurring Subscription")
            self.narrator.say(f"Amount: ${amount:.2f} per {self.schedule}")
            self.narrator.say(f"Method: {self.payment_method_name}")
            self.narrator.say(f"Start Date: {self._today().isoformat()}")
            self.narrator.say(f"Next Payment: {self.next_payment().isoformat()}")
            self.narrator.say("Status: ACTIVE")
        self.narrator.say("Subscription activated successfully!")


def run_demo(context: "DemoContext") -> None:
    """Combine processors and methods, switch methods at runtime, run subscriptions."""
    narrator = context.narrator
    latency = context.latency
    narrator.banner("Bridge Pattern - Payment Processing System")

    def credit_card():
        return CreditCardPayment(narrator, latency)

    def paypal():
        return PayPalPayment(narrator, latency)

    def crypto():
        return CryptocurrencyPayment(narrator, latency)

    narrator.say("SCENARIO 1: Different Payment Combinations")
    OnlinePayment(narrator, credit_card()).process_payment(149.99)
    OnlinePayment(narrator, paypal()).process_payment(299.50)
    OnlinePayment(narrator, crypto()).process_payment(1500.00)
    RecurringPayment(narrator, credit_card()).process_payment(9.99)
    narrator.bullets([
        "Any payment type combines with any method",
        "Without Bridge: 2 x 3 = 6 classes needed",
        "With Bridge: 2 + 3 = 5 classes needed",
    ])
    narrator.blank()

    narrator.say("SCENARIO 2: Runtime Payment Method Switching")
    payment = OnlinePayment(narrator, credit_card())
    narrator.say(f"Initial method: {payment.payment_method_name}")
    payment.process_payment(99.99)
    payment.set_payment_method(paypal())
    payment.process_payment(99.99)
    payment.set_payment_method(crypto())
    payment.process_payment(99.99)
    narrator.blank()

    narrator.say("SCENARIO 3: Recurring Payments with Schedules")
    subscription = RecurringPayment(narrator, paypal())
    subscription.setup_schedule("weekly")
    subscription.process_payment(19.99)
    subscription.setup_schedule("monthly")
    subscription.set_payment_method(crypto())
    subscription.process_payment(49.99)
    narrator.blank()

    narrator.say("SCENARIO 4: Limits and Validation")
    OnlinePayment(narrator, credit_card()).process_payment(75000.00)
    OnlinePayment(narrator, paypal()).process_payment(-5.00)
    OnlinePayment(narrator, crypto()).process_payment(0.50)
    narrator.blank()
    narrator.banner("Bridge Demo Complete")
