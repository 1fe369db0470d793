"""Strategy - a shopping cart paying through an interchangeable payment method."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)


def mask_card_number(card_number: str) -> str:
    """Mask all but the last four digits."""
    digits = card_number.replace(" ", "")
    return f"**** **** **** {digits[-4:]}"


class PaymentStrategy(ABC):
    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    @abstractmethod
    def pay(self, amount: float) -> bool:
        """Pay ``amount``; return whether the payment went through."""


class CreditCardPayment(PaymentStrategy):
    def __init__(self, narrator: Narrator, card_number: str, cvv: str):
        super().__init__(narrator)
        self.card_number = card_number
        self.cvv = cvv

    def pay(self, amount: float) -> bool:
        self.narrator.say(f"Paid ${amount:.2f} using Credit Card")
        self.narrator.say(f"Card: {mask_card_number(self.card_number)}")
        return True


class PayPalPayment(PaymentStrategy):
    def __init__(self, narrator: Narrator, email: str, password: str):
        super().__init__(narrator)
        self.email = email
        self.password = password

    def pay(self, amount: float) -> bool:
        self.narrator.say(f"Paid ${amount:.2f} using PayPal")
        self.narrator.say(f"Account: {self.email}")
        return True


class BitcoinPayment(PaymentStrategy):
    def __init__(self, narrator: Narrator, wallet_address: str):
        super().__init__(narrator)
        self.wallet_address = wallet_address

    def pay(self, amount: float) -> bool:
        self.narrator.say(f"Paid ${amount:.2f} using Bitcoin")
        self.narrator.say(f"Wallet: {self.wallet_address[:6]}...{self.wallet_address[-4:]}")
        return True


class ShoppingCart:
    """Context holding the amount due and the currently selected strategy."""

    def __init__(self, narrator: Narrator, amount: float):
        self.narrator = narrator
        self.amount = amount
        self.payment_strategy: Optional[PaymentStrategy] = None

    def set_payment_strategy(self, strategy: Optional[PaymentStrategy]) -> None:
        self.payment_strategy = strategy

    def checkout(self) -> bool:
        """
        Pay the amount due with the selected strategy.

        Returns:
            False if no payment method has been selected
        """
        if self.payment_strategy is None:
            self.narrator.say("Please select a payment method!")
            return False
        logger.debug("Checking out", strategy=type(self.payment_strategy).__name__,
                     amount=self.amount)
        return self.payment_strategy.pay(self.amount)


def run_demo(context: "DemoContext") -> None:
    """Check the same cart out with each payment strategy in turn."""
    narrator = context.narrator
    narrator.banner("Strategy Pattern - Checkout Demo")

    cart = ShoppingCart(narrator, 150.00)
    narrator.section("Checkout before choosing a payment method")
    cart.checkout()

    options = [
        ("Credit Card", CreditCardPayment(narrator, "1234567890123456", "123")),
        ("PayPal", PayPalPayment(narrator, "user@example.com", "password123")),
        ("Bitcoin", BitcoinPayment(narrator, "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")),
    ]
    for number, (label, strategy) in enumerate(options, start=1):
        narrator.section(f"Payment Option {number}: {label}")
        cart.set_payment_strategy(strategy)
        cart.checkout()
    narrator.blank()
    narrator.banner("Strategy Demo Complete")
