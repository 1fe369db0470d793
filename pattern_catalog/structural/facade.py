"""Facade - one home-theater interface over four subsystems."""
from typing import TYPE_CHECKING, Optional

from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


class DVDPlayer:
    def __init__(self, narrator: Narrator):
        self.narrator = narrator
        self.powered = False
        self.current_movie: Optional[str] = None

    def on(self) -> None:
        self.powered = True
        self.narrator.say("DVD Player: Powering ON")

    def play(self, movie: str) -> None:
        self.current_movie = movie
        self.narrator.say(f'DVD Player: Playing "{movie}"')

    def stop(self) -> None:
        if self.current_movie is None:
            self.narrator.say("DVD Player: Nothing playing")
            return
        self.narrator.say(f'DVD Player: Stopping "{self.current_movie}"')
        self.current_movie = None

    def eject(self) -> None:
        self.narrator.say("DVD Player: Ejecting disc")

    def off(self) -> None:
        self.powered = False
        self.narrator.say("DVD Player: Powering OFF")


class Projector:
    def __init__(self, narrator: Narrator):
        self.narrator = narrator
        self.powered = False
        self.mode = "standard"

    def on(self) -> None:
        self.powered = True
        self.narrator.say("Projector: Powering ON")

    def wide_screen_mode(self) -> None:
        self.mode = "widescreen"
        self.narrator.say("Projector: Setting to Widescreen mode (16:9)")

    def standard_mode(self) -> None:
        self.mode = "standard"
        self.narrator.say("Projector: Setting to Standard mode (4:3)")

    def focus(self) -> None:
        self.narrator.say("Projector: Adjusting focus")

    def off(self) -> None:
        self.powered = False
        self.narrator.say("Projector: Powering OFF")


class SoundSystem:
    def __init__(self, narrator: Narrator):
        self.narrator = narrator
        self.powered = False
        self.volume = 0
        self.mode = "stereo"

    def on(self) -> None:
        self.powered = True
        self.narrator.say("Sound System: Powering ON")

    def set_volume(self, level: int) -> None:
        self.volume = level
        self.narrator.say(f"Sound System: Setting volume to {level}")

    def set_surround_sound(self) -> None:
        self.mode = "surround"
        self.narrator.say("Sound System: Enabling Surround Sound mode")

    def set_stereo(self) -> None:
        self.mode = "stereo"
        self.narrator.say("Sound System: Setting to Stereo mode")

    def off(self) -> None:
        self.powered = False
        self.narrator.say("Sound System: Powering OFF")


class Lights:
    def __init__(self, narrator: Narrator):
        self.narrator = narrator
        self.brightness = 100

    def on(self) -> None:
        self.brightness = 100
        self.narrator.say("Lights: ON (Brightness: 100%)")

    def dim(self, level: int) -> None:
        self.brightness = max(0, min(100, level))
        self.narrator.say(f"Lights: Dimmed to {self.brightness}%")

    def off(self) -> None:
        self.brightness = 0
        self.narrator.say("Lights: OFF")


class HomeTheaterFacade:
    """Sequences subsystem calls for the common scenarios."""

    MOVIE_LIGHT_LEVEL = 10
    MOVIE_VOLUME = 15
    MUSIC_LIGHT_LEVEL = 30
    MUSIC_VOLUME = 10

    def __init__(self, narrator: Narrator, dvd_player: DVDPlayer, projector: Projector,
                 sound_system: SoundSystem, lights: Lights):
        self.narrator = narrator
        self.dvd_player = dvd_player
        self.projector = projector
        self.sound_system = sound_system
        self.lights = lights

    def watch_movie(self, movie: str) -> None:
        self.narrator.say("Get ready to watch a movie...")
        self.lights.dim(self.MOVIE_LIGHT_LEVEL)
        self.projector.on()
        self.projector.wide_screen_mode()
        self.projector.focus()
        self.sound_system.on()
        self.sound_system.set_volume(self.MOVIE_VOLUME)
        self.sound_system.set_surround_sound()
        self.dvd_player.on()
        self.dvd_player.play(movie)
        self.narrator.say("Movie setup complete! Enjoy your movie!")

    def end_movie(self) -> None:
        self.narrator.say("Shutting down home theater...")
        self.dvd_player.stop()
        self.dvd_player.eject()
        self.dvd_player.off()
        self.sound_system.off()
        self.projector.off()
        self.lights.on()
        self.narrator.say("Movie ended. Home theater shut down complete!")

    def listen_to_music(self) -> None:
        self.narrator.say("Setting up for music...")
        self.lights.dim(self.MUSIC_LIGHT_LEVEL)
        self.sound_system.on()
        self.sound_system.set_stereo()
        self.sound_system.set_volume(self.MUSIC_VOLUME)
        self.narrator.say("Music setup complete! Enjoy!")

    def end_music(self) -> None:
        self.narrator.say("Ending music session...")
        self.sound_system.off()
        self.lights.on()
        self.narrator.say("Music ended!")

    def all_off(self) -> None:
        self.narrator.say("Shutting down all systems...")
        self.dvd_player.off()
        self.projector.off()
        self.sound_system.off()
        self.lights.off()
        self.narrator.say("All systems powered OFF!")


def run_demo(context: "DemoContext") -> None:
    """Contrast driving the subsystems by hand with going through the facade."""
    narrator = context.narrator
    narrator.banner("Facade Pattern - Home Theater System")

    dvd_player = DVDPlayer(narrator)
    projector = Projector(narrator)
    sound_system = SoundSystem(narrator)
    lights = Lights(narrator)

    narrator.section("SCENARIO 1: WITHOUT FACADE (Complex Way)")
    narrator.say(">>> Starting movie the hard way...")
    lights.dim(10)
    projector.on()
    projector.wide_screen_mode()
    projector.focus()
    sound_system.on()
    sound_system.set_volume(15)
    sound_system.set_surround_sound()
    dvd_player.on()
    dvd_player.play("The Matrix")
    narrator.say(">>> Ending movie the hard way...")
    dvd_player.stop()
    dvd_player.eject()
    dvd_player.off()
    sound_system.off()
    projector.off()
    lights.on()

    home_theater = HomeTheaterFacade(narrator, dvd_player, projector, sound_system, lights)
    narrator.section("SCENARIO 2: WITH FACADE (Simple Way)")
    home_theater.watch_movie("Inception")
    narrator.say(">>> Watching movie...")
    home_theater.end_movie()

    narrator.section("SCENARIO 3: Music Mode")
    home_theater.listen_to_music()
    narrator.say(">>> Listening to music...")
    home_theater.end_music()

    narrator.section("SCENARIO 4: Everything Off")
    home_theater.all_off()
    narrator.blank()
    narrator.banner("Facade Demo Complete")
