"""Adapter - an MP3 player that plays other formats through an adapter."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pattern_catalog.domain.core.exceptions import UnsupportedOperationError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)

NATIVE_FORMAT = "mp3"
ADAPTED_FORMATS = ("mp4", "vlc")


class MediaPlayer(ABC):
    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> bool:
        """Play ``file_name``; return whether it could be played."""


class AdvancedMediaPlayer(ABC):
    """Incompatible interface the adapter translates to."""

    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    @abstractmethod
    def play_vlc(self, file_name: str) -> None:
        pass

    @abstractmethod
    def play_mp4(self, file_name: str) -> None:
        pass


class VlcPlayer(AdvancedMediaPlayer):
    def play_vlc(self, file_name: str) -> None:
        self.narrator.say(f"Playing VLC file: {file_name}")

    def play_mp4(self, file_name: str) -> None:
        pass


class Mp4Player(AdvancedMediaPlayer):
    def play_vlc(self, file_name: str) -> None:
        pass

    def play_mp4(self, file_name: str) -> None:
        self.narrator.say(f"Playing MP4 file: {file_name}")


class MediaAdapter(MediaPlayer):
    """Presents an advanced player as a :class:`MediaPlayer` for one format."""

    def __init__(self, narrator: Narrator, audio_type: str):
        """
        Build an adapter for ``audio_type``.

        Raises:
            UnsupportedOperationError: If the format cannot be adapted
        """
        audio_type = audio_type.lower()
        if audio_type == "vlc":
            self.advanced_player: AdvancedMediaPlayer = VlcPlayer(narrator)
        elif audio_type == "mp4":
            self.advanced_player = Mp4Player(narrator)
        else:
            raise UnsupportedOperationError(
                f"adapt {audio_type}", "MediaAdapter",
                f"supported formats are {', '.join(ADAPTED_FORMATS)}",
            )
        self.audio_type = audio_type

    def play(self, audio_type: str, file_name: str) -> bool:
        if audio_type.lower() != self.audio_type:
            return False
        if self.audio_type == "vlc":
            self.advanced_player.play_vlc(file_name)
        else:
            self.advanced_player.play_mp4(file_name)
        return True


class AudioPlayer(MediaPlayer):
    """Client-facing player: MP3 natively, MP4 and VLC through the adapter."""

    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    def play(self, audio_type: str, file_name: str) -> bool:
        audio_type = audio_type.lower()
        if audio_type == NATIVE_FORMAT:
            self.narrator.say(f"Playing MP3 file: {file_name}")
            return True
        if audio_type in ADAPTED_FORMATS:
            logger.debug("Using media adapter", audio_type=audio_type)
            return MediaAdapter(self.narrator, audio_type).play(audio_type, file_name)
        self.narrator.say(f"Invalid media. {audio_type.upper()} format not supported")
        return False


def run_demo(context: "DemoContext") -> None:
    """Play native, adapted and unsupported formats, then a mixed playlist."""
    narrator = context.narrator
    narrator.banner("Adapter Pattern - Media Player Demo")
    player = AudioPlayer(narrator)

    for title, audio_type, file_name in (
        ("Testing Native MP3 Support", "mp3", "song.mp3"),
        ("Testing Adapter for MP4 Format", "mp4", "video.mp4"),
        ("Testing Adapter for VLC Format", "vlc", "movie.vlc"),
        ("Testing Unsupported Format", "avi", "clip.avi"),
    ):
        narrator.section(title)
        player.play(audio_type, file_name)

    narrator.section("Playing Multiple Files")
    playlist = ["mp3:jazz.mp3", "mp4:tutorial.mp4", "vlc:documentary.vlc",
                "mp3:rock.mp3", "mp4:presentation.mp4"]
    for track in playlist:
        audio_type, file_name = track.split(":", 1)
        player.play(audio_type, file_name)
    narrator.blank()

    narrator.say("Key Observations:")
    narrator.bullets([
        "AudioPlayer plays MP3 natively (no adapter needed)",
        "MediaAdapter enables MP4 and VLC playback",
        "Client code remains unchanged when adding new formats",
    ])
    narrator.blank()
    narrator.banner("Adapter Demo Complete")
