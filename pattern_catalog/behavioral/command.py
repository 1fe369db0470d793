"""Command - a smart-home remote with per-slot commands and a shared undo stack."""
import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from pattern_catalog.domain.core.exceptions import IndexOutOfRangeError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)

DEFAULT_TV_VOLUME = 10
DEFAULT_TEMPERATURE = 72


class Light:
    """Receiver: a switchable light."""

    def __init__(self, narrator: Narrator, location: str):
        self.narrator = narrator
        self.location = location
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        self.narrator.say(f"{self.location} light is ON")

    def off(self) -> None:
        self.is_on = False
        self.narrator.say(f"{self.location} light is OFF")


class TV:
    """Receiver: a TV whose volume only changes while it is on."""

    def __init__(self, narrator: Narrator, location: str):
        self.narrator = narrator
        self.location = location
        self.is_on = False
        self.volume = DEFAULT_TV_VOLUME

    def on(self) -> None:
        self.is_on = True
        self.narrator.say(f"{self.location} TV is ON")

    def off(self) -> None:
        self.is_on = False
        self.narrator.say(f"{self.location} TV is OFF")

    def volume_up(self) -> None:
        if not self.is_on:
            self.narrator.say(f"{self.location} TV is off. Turn it on first.")
            return
        self.volume += 1
        self.narrator.say(f"{self.location} TV volume: {self.volume}")

    def volume_down(self) -> None:
        if not self.is_on:
            self.narrator.say(f"{self.location} TV is off. Turn it on first.")
            return
        if self.volume > 0:
            self.volume -= 1
            self.narrator.say(f"{self.location} TV volume: {self.volume}")

    def set_volume(self, volume: int) -> None:
        """Set the volume directly, clamped at zero."""
        self.volume = max(0, volume)
        self.narrator.say(f"{self.location} TV volume restored to {self.volume}")


class Thermostat:
    """Receiver: a thermostat in degrees Fahrenheit."""

    def __init__(self, narrator: Narrator, temperature: int = DEFAULT_TEMPERATURE):
        self.narrator = narrator
        self.temperature = temperature

    def increase_temperature(self) -> None:
        self.temperature += 1
        self.narrator.say(f"Temperature increased to {self.temperature}°F")

    def decrease_temperature(self) -> None:
        self.temperature -= 1
        self.narrator.say(f"Temperature decreased to {self.temperature}°F")


class Command(ABC):
    """An executable, undoable request bound to a receiver."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the request, capturing whatever undo needs."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the effect of the last ``execute()`` of this object."""


class NoCommand(Command):
    """Placeholder for empty slots."""

    def execute(self) -> None:
        pass

    def undo(self) -> None:
        pass


class _LightCommand(Command):
    def __init__(self, light: Light):
        self.light = light
        self._was_on = False

    def undo(self) -> None:
        if self._was_on:
            self.light.on()
        else:
            self.light.off()


class LightOnCommand(_LightCommand):
    def execute(self) -> None:
        self._was_on = self.light.is_on
        self.light.on()


class LightOffCommand(_LightCommand):
    def execute(self) -> None:
        self._was_on = self.light.is_on
        self.light.off()


class _TVPowerCommand(Command):
    def __init__(self, tv: TV):
        self.tv = tv
        self._was_on = False

    def undo(self) -> None:
        if self._was_on:
            self.tv.on()
        else:
            self.tv.off()


class TVOnCommand(_TVPowerCommand):
    def execute(self) -> None:
        self._was_on = self.tv.is_on
        self.tv.on()


class TVOffCommand(_TVPowerCommand):
    def execute(self) -> None:
        self._was_on = self.tv.is_on
        self.tv.off()


class TVVolumeUpCommand(Command):
    """Raise the volume; undo puts back the volume seen at execute time."""

    def __init__(self, tv: TV):
        self.tv = tv
        self._previous_volume = tv.volume

    def execute(self) -> None:
        self._previous_volume = self.tv.volume
        self.tv.volume_up()

    def undo(self) -> None:
        if self.tv.volume != self._previous_volume:
            self.tv.set_volume(self._previous_volume)


class ThermostatUpCommand(Command):
    def __init__(self, thermostat: Thermostat):
        self.thermostat = thermostat

    def execute(self) -> None:
        self.thermostat.increase_temperature()

    def undo(self) -> None:
        self.thermostat.decrease_temperature()


class ThermostatDownCommand(Command):
    def __init__(self, thermostat: Thermostat):
        self.thermostat = thermostat

    def execute(self) -> None:
        self.thermostat.decrease_temperature()

    def undo(self) -> None:
        self.thermostat.increase_temperature()


class RemoteControl:
    """
    Invoker with on/off command slots and one LIFO undo history.

    Each button press records a copy of the command taken right after it
    executed, so state captured by that execution survives later executions
    of the same command object.
    """

    def __init__(self, narrator: Narrator, slots: int):
        if slots < 1:
            raise ValueError("A remote control needs at least one slot")
        self.narrator = narrator
        no_command = NoCommand()
        self._on_commands: List[Command] = [no_command] * slots
        self._off_commands: List[Command] = [no_command] * slots
        self._history: List[Command] = []

    @property
    def slots(self) -> int:
        return len(self._on_commands)

    @property
    def history_size(self) -> int:
        return len(self._history)

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < self.slots:
            raise IndexOutOfRangeError("slot", slot, self.slots)

    def set_command(self, slot: int, on_command: Command, off_command: Command) -> None:
        """
        Bind commands to a slot.

        Raises:
            IndexOutOfRangeError: If ``slot`` is outside the remote
        """
        self._check_slot(slot)
        self._on_commands[slot] = on_command
        self._off_commands[slot] = off_command

    def on_button_pressed(self, slot: int) -> None:
        self._check_slot(slot)
        self._run(self._on_commands[slot])

    def off_button_pressed(self, slot: int) -> None:
        self._check_slot(slot)
        self._run(self._off_commands[slot])

    def _run(self, command: Command) -> None:
        command.execute()
        if not isinstance(command, NoCommand):
            self._history.append(copy.copy(command))
            logger.debug("Command recorded", command=type(command).__name__,
                         history=len(self._history))

    def undo_button_pressed(self) -> bool:
        """
        Undo the most recent command.

        Returns:
            False when there was nothing to undo
        """
        if not self._history:
            self.narrator.say("No command to undo")
            return False
        command = self._history.pop()
        command.undo()
        self.narrator.say("Undo executed")
        return True

    def describe(self) -> str:
        lines = ["------ Remote Control ------"]
        for slot, (on_cmd, off_cmd) in enumerate(zip(self._on_commands, self._off_commands)):
            lines.append(f"[slot {slot}] {type(on_cmd).__name__}    {type(off_cmd).__name__}")
        return "\n".join(lines)


def run_demo(context: "DemoContext") -> None:
    """Drive a four-slot remote and walk back through its undo history."""
    narrator = context.narrator
    narrator.banner("Command Pattern - Smart Home Remote Demo")

    living_room_light = Light(narrator, "Living Room")
    kitchen_light = Light(narrator, "Kitchen")
    tv = TV(narrator, "Living Room")
    thermostat = Thermostat(narrator)

    remote = RemoteControl(narrator, 5)
    remote.set_command(0, LightOnCommand(living_room_light), LightOffCommand(living_room_light))
    remote.set_command(1, LightOnCommand(kitchen_light), LightOffCommand(kitchen_light))
    remote.set_command(2, TVOnCommand(tv), TVOffCommand(tv))
    remote.set_command(3, ThermostatUpCommand(thermostat), ThermostatDownCommand(thermostat))
    remote.set_command(4, TVVolumeUpCommand(tv), NoCommand())
    narrator.say(remote.describe())
    narrator.blank()

    narrator.section("Testing Smart Home Automation")
    narrator.say("--- Increasing TV volume while the TV is off ---")
    remote.on_button_pressed(4)
    narrator.say("--- Turning on living room light ---")
    remote.on_button_pressed(0)
    narrator.say("--- Turning on kitchen light ---")
    remote.on_button_pressed(1)
    narrator.say("--- Turning on TV ---")
    remote.on_button_pressed(2)
    narrator.say("--- Increasing TV volume twice ---")
    remote.on_button_pressed(4)
    remote.on_button_pressed(4)
    narrator.say("--- Increasing temperature twice ---")
    remote.on_button_pressed(3)
    remote.on_button_pressed(3)
    narrator.blank()

    narrator.section("Walking back through the undo history")
    for label in ("temperature", "temperature", "TV volume", "TV volume", "TV power"):
        narrator.say(f"--- Undo ({label}) ---")
        remote.undo_button_pressed()

    narrator.say("--- Turning off living room light ---")
    remote.off_button_pressed(0)
    narrator.say("--- Undo (turn light back on) ---")
    remote.undo_button_pressed()
    narrator.blank()
    narrator.banner("Smart Home Demo Complete")
