"""Abstract Factory - platform factories producing matching widget families."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Type

from pattern_catalog.domain.core.exceptions import UnsupportedOperationError
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


class Widget(ABC):
    platform = ""
    kind = ""

    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    def paint(self) -> str:
        rendered = f"Rendering a {self.platform}-style {self.kind}"
        self.narrator.say(rendered)
        return rendered


class Button(Widget):
    kind = "Button"


class Checkbox(Widget):
    kind = "Checkbox"


class MacButton(Button):
    platform = "Mac"


class MacCheckbox(Checkbox):
    platform = "Mac"


class WindowsButton(Button):
    platform = "Windows"


class WindowsCheckbox(Checkbox):
    platform = "Windows"


class GUIFactory(ABC):
    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton(self.narrator)

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox(self.narrator)


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton(self.narrator)

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox(self.narrator)


FACTORIES: Dict[str, Type[GUIFactory]] = {
    "mac": MacFactory,
    "windows": WindowsFactory,
}


def get_factory(platform: str, narrator: Narrator) -> GUIFactory:
    """
    Choose the widget factory for a platform name.

    Raises:
        UnsupportedOperationError: If the platform has no factory
    """
    factory_class = FACTORIES.get(platform.strip().lower())
    if factory_class is None:
        raise UnsupportedOperationError(
            "create widgets", "GUIFactory",
            f"unknown platform '{platform}' (supported: {', '.join(sorted(FACTORIES))})",
        )
    return factory_class(narrator)


def render_ui(factory: GUIFactory) -> None:
    """Client code: only ever talks to the abstract factory."""
    factory.create_button().paint()
    factory.create_checkbox().paint()


def run_demo(context: "DemoContext") -> None:
    """Render the same UI with each platform factory."""
    narrator = context.narrator
    narrator.banner("Abstract Factory Pattern - Cross-Platform GUI Demo")
    for label, platform in (("Mac GUI:", "mac"), ("Windows GUI:", "windows")):
        narrator.say(label)
        with narrator.indented():
            render_ui(get_factory(platform, narrator))
    narrator.blank()

    narrator.say("Requesting a Linux GUI:")
    try:
        get_factory("linux", narrator)
    except UnsupportedOperationError as e:
        narrator.say(f"  Rejected: {e}")
    narrator.blank()
    narrator.banner("Abstract Factory Demo Complete")
