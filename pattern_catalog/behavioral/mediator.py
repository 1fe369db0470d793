"""Mediator - chat room relaying messages between users who never meet."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple

from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)


class ChatRoom:
    """Mediator broadcasting each message to every member except its sender."""

    def __init__(self, narrator: Narrator, name: str):
        self.narrator = narrator
        self.name = name
        self._users: List["User"] = []
        self.narrator.say(f"Chat Room '{name}' created!")

    @property
    def user_count(self) -> int:
        return len(self._users)

    def add_user(self, user: "User") -> None:
        if user in self._users:
            return
        self._users.append(user)
        self.narrator.say(f"{user.name} joined '{self.name}'")
        self.narrator.say(f"Total users in room: {self.user_count}")

    def remove_user(self, user: "User") -> bool:
        """
        Remove a member.

        Returns:
            False if ``user`` was not in the room
        """
        if user not in self._users:
            self.narrator.say(f"{user.name} is not in '{self.name}'")
            return False
        self._users.remove(user)
        self.narrator.say(f"{user.name} left '{self.name}'")
        self.narrator.say(f"Total users in room: {self.user_count}")
        return True

    def send_message(self, message: str, sender: "User") -> int:
        """
        Broadcast ``message`` to everyone but ``sender``.

        Returns:
            Number of users the message was delivered to
        """
        self.narrator.say(f"[{self.name}] Broadcasting message from {sender.name}...")
        recipients = [user for user in self._users if user is not sender]
        for user in recipients:
            user.receive(message, sender)
        logger.debug("Message broadcast", room=self.name, sender=sender.name,
                     recipients=len(recipients))
        return len(recipients)


class User(ABC):
    """Chat participant; joins the room on construction."""

    label = ""

    def __init__(self, narrator: Narrator, mediator: ChatRoom, name: str):
        self.narrator = narrator
        self.mediator = mediator
        self.name = name
        self.inbox: List[Tuple[str, str]] = []
        mediator.add_user(self)

    @property
    def display_name(self) -> str:
        return f"{self.name} {self.label}".strip()

    def send(self, message: str) -> int:
        self.narrator.say(f'{self.display_name} sends: "{message}"')
        return self.mediator.send_message(message, self)

    def receive(self, message: str, sender: "User") -> None:
        self.inbox.append((sender.name, message))
        self.narrator.say(f'  {self.display_name} received from {sender.name}: "{message}"')

    @abstractmethod
    def tier(self) -> str:
        """Membership tier name."""


class BasicUser(User):
    def tier(self) -> str:
        return "basic"


class PremiumUser(User):
    label = "(Premium)"

    def tier(self) -> str:
        return "premium"


def run_demo(context: "DemoContext") -> None:
    """Run a short conversation in which one user leaves midway."""
    narrator = context.narrator
    narrator.banner("Mediator Pattern - Chat Room Demo")

    general = ChatRoom(narrator, "General")
    narrator.section("Adding users to chat room...")
    alice = BasicUser(narrator, general, "Alice")
    bob = BasicUser(narrator, general, "Bob")
    charlie = PremiumUser(narrator, general, "Charlie")
    diana = BasicUser(narrator, general, "Diana")
    narrator.blank()

    narrator.section("Users sending messages...")
    alice.send("Hi everyone!")
    bob.send("Hello Alice! How are you?")
    charlie.send("Hey team! Ready for the meeting?")
    diana.send("Good morning all!")
    narrator.blank()

    narrator.section("User leaving chat room...")
    general.remove_user(bob)
    general.remove_user(bob)
    narrator.blank()

    narrator.section("Continuing conversation...")
    alice.send("Anyone want coffee?")
    charlie.send("I'm in!")
    narrator.say(f"Bob's inbox holds {len(bob.inbox)} messages from before leaving")
    narrator.blank()

    narrator.section("Demonstrating the Mediator Pattern")
    narrator.bullets([
        "Users don't communicate directly",
        "All communication goes through ChatRoom",
        "Users don't know about each other",
        "Easy to add/remove users dynamically",
    ])
    narrator.blank()
    narrator.banner("Mediator Demo Complete")
