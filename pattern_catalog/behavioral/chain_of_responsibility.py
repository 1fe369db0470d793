"""Chain of Responsibility - support tickets escalating through handler tiers."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pattern_catalog.domain.core.exceptions import CyclicChainError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)


class Priority(str, Enum):
    """Ticket priority tiers, lowest first."""
    BASIC = "BASIC"
    MODERATE = "MODERATE"
    CRITICAL = "CRITICAL"
    EXECUTIVE = "EXECUTIVE"


class SupportTicket:
    """A customer issue travelling along the chain."""

    def __init__(self, customer: str, issue: str, priority: Priority):
        self.customer = customer
        self.issue = issue
        self.priority = priority

    def __str__(self) -> str:
        return f"[{self.priority.value}] {self.customer}: {self.issue}"


class SupportHandler(ABC):
    """
    One link of the support chain.

    Subclasses decide which tickets they accept and how they resolve them;
    the walk along the chain lives here.
    """

    def __init__(self, narrator: Narrator, name: str):
        self.narrator = narrator
        self.name = name
        self.next_handler: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        """Link ``handler`` after this one and return it for fluent chaining."""
        self.next_handler = handler
        return handler

    def handle(self, ticket: SupportTicket) -> Optional["SupportHandler"]:
        """
        Route a ticket from this handler onwards.

        Args:
            ticket: Ticket to resolve

        Returns:
            The handler that processed the ticket, or None if nobody could

        Raises:
            CyclicChainError: If the chain leads back to a visited handler
        """
        visited = set()
        handler: Optional[SupportHandler] = self
        while handler is not None:
            if id(handler) in visited:
                raise CyclicChainError(handler.name)
            visited.add(id(handler))

            if handler.can_handle(ticket):
                handler.process(ticket)
                logger.debug("Ticket handled", handler=handler.name,
                             priority=ticket.priority.value)
                return handler

            if handler.next_handler is None:
                self.narrator.say(
                    f"  {handler.name} cannot handle this and no further escalation available!"
                )
                self.narrator.say(f"  Ticket remains unresolved: {ticket}")
                logger.debug("Ticket unresolved", priority=ticket.priority.value)
                return None

            self.narrator.say(f"  {handler.name} cannot handle this. Escalating...")
            logger.debug("Escalating ticket", source=handler.name,
                         target=handler.next_handler.name)
            handler = handler.next_handler
        return None

    @abstractmethod
    def can_handle(self, ticket: SupportTicket) -> bool:
        """Whether this tier accepts the ticket."""

    @abstractmethod
    def solution(self) -> str:
        """How this tier resolves tickets."""

    def process(self, ticket: SupportTicket) -> None:
        self.narrator.say(f"  {self.name} handled: {ticket}")
        self.narrator.say(f"    Solution: {self.solution()}")


class _PriorityHandler(SupportHandler):
    """Handler accepting exactly one priority tier."""

    priority: Priority
    display_name: str
    resolution: str

    def __init__(self, narrator: Narrator):
        super().__init__(narrator, self.display_name)

    def can_handle(self, ticket: SupportTicket) -> bool:
        return ticket.priority == self.priority

    def solution(self) -> str:
        return self.resolution


class Level1Support(_PriorityHandler):
    priority = Priority.BASIC
    display_name = "Level 1 Support"
    resolution = "Provided standard troubleshooting steps"


class Level2Support(_PriorityHandler):
    priority = Priority.MODERATE
    display_name = "Level 2 Support"
    resolution = "Performed advanced diagnostics and configuration"


class Level3Support(_PriorityHandler):
    priority = Priority.CRITICAL
    display_name = "Level 3 Support"
    resolution = "Deployed emergency patch and system recovery"


class ManagerSupport(_PriorityHandler):
    priority = Priority.EXECUTIVE
    display_name = "Manager Support"
    resolution = "Personally addressed with priority escalation to engineering team"


def build_support_chain(narrator: Narrator) -> SupportHandler:
    """Build Level 1 -> Level 2 -> Level 3 -> Manager and return the entry handler."""
    level1 = Level1Support(narrator)
    level1.set_next(Level2Support(narrator)).set_next(Level3Support(narrator)).set_next(
        ManagerSupport(narrator)
    )
    return level1


def run_demo(context: "DemoContext") -> None:
    """Route tickets of every priority through the support chain."""
    narrator = context.narrator
    narrator.banner("Chain of Responsibility - Support System Demo")

    narrator.say("Building the support chain...")
    level1 = build_support_chain(narrator)
    level2 = level1.next_handler
    narrator.say("  Chain established: Level 1 -> Level 2 -> Level 3 -> Manager")
    narrator.blank()

    narrator.section("Processing support tickets...")
    tickets = [
        SupportTicket("John Doe", "Password reset request", Priority.BASIC),
        SupportTicket("Jane Smith", "Software installation issue", Priority.MODERATE),
        SupportTicket("Bob Johnson", "Server outage affecting production", Priority.CRITICAL),
        SupportTicket("Alice Williams", "VIP client complaint requiring immediate attention",
                      Priority.EXECUTIVE),
    ]
    for number, ticket in enumerate(tickets, start=1):
        narrator.say(f"Ticket {number}: {ticket}")
        level1.handle(ticket)
        narrator.blank()

    narrator.section("Demonstrating Chain Behavior")
    narrator.bullets([
        "Each handler checks if it can process the request",
        "If yes, it handles the request",
        "If no, it passes to the next handler in the chain",
        "Request travels up the chain until handled",
    ])
    narrator.blank()

    narrator.section("Demonstrating Different Entry Points")
    narrator.say("Starting from Level 2 (skipping Level 1):")
    level2.handle(SupportTicket("Charlie Brown", "Database connection timeout", Priority.MODERATE))
    narrator.blank()

    narrator.say("A basic ticket entering at Level 2 cannot travel back down:")
    level2.handle(SupportTicket("Dana White", "Forgot username", Priority.BASIC))
    narrator.blank()
    narrator.banner("Chain of Responsibility Demo Complete")
