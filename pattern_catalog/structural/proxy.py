"""Proxy - images that load from "disk" only when first displayed."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import LatencySimulator, Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)

IMAGE_WIDTH = 1920
IMAGE_HEIGHT = 1080
IMAGE_SIZE_MB = 5
LOAD_TIME_MS = 1000
UNKNOWN_DIMENSIONS = "Unknown (not loaded)"


class Image(ABC):
    file_name: str

    @abstractmethod
    def display(self) -> bool:
        """Show the image; return whether it was shown."""

    @abstractmethod
    def get_dimensions(self) -> str: ...


class RealImage(Image):
    """The expensive subject: loads as soon as it is constructed."""

    def __init__(self, narrator: Narrator, file_name: str,
                 latency: Optional[LatencySimulator] = None):
        self.narrator = narrator
        self.file_name = file_name
        self.latency = latency or LatencySimulator()
        self.width = 0
        self.height = 0
        self.size_mb = 0
        self.load_time_ms = 0
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        self.narrator.say(f"RealImage: Loading '{self.file_name}' from disk...")
        self.latency.pause(LOAD_TIME_MS)
        self.width, self.height = IMAGE_WIDTH, IMAGE_HEIGHT
        self.size_mb = IMAGE_SIZE_MB
        self.load_time_ms = LOAD_TIME_MS
        with self.narrator.indented():
            self.narrator.say("Image loaded successfully!")
            self.narrator.say(f"Size: {self.size_mb} MB")
            self.narrator.say(f"Dimensions: {self.get_dimensions()}")
            self.narrator.say(f"Load time: {self.load_time_ms}ms")
        logger.debug("Image loaded", file_name=self.file_name)

    def display(self) -> bool:
        self.narrator.say(f"Displaying: {self.file_name} [{self.get_dimensions()}]")
        return True

    def get_dimensions(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class ImageStatistics:
    file_name: str
    access_count: int
    loaded: bool
    dimensions: str
    size_mb: Optional[int] = None
    load_time_ms: Optional[int] = None

    def lines(self):
        result = [
            f"File: {self.file_name}",
            f"Access Count: {self.access_count}",
            f"Loaded: {'Yes' if self.loaded else 'No'}",
        ]
        if self.loaded:
            result.append(f"Size: {self.size_mb} MB")
            result.append(f"Load Time: {self.load_time_ms} ms")
        return result


def allow_all(file_name: str) -> bool:
    return True


class ProxyImage(Image):
    """
    Stands in for a :class:`RealImage` until it is first displayed.

    Every display is counted and passed through ``access_check``; the real
    image is built on the first permitted display and reused afterwards.
    """

    def __init__(self, narrator: Narrator, file_name: str,
                 loader: Optional[Callable[[str], RealImage]] = None,
                 access_check: Callable[[str], bool] = allow_all,
                 latency: Optional[LatencySimulator] = None):
        self.narrator = narrator
        self.file_name = file_name
        self.access_count = 0
        self._latency = latency
        self._loader = loader or self._load_real_image
        self._access_check = access_check
        self._real_image: Optional[RealImage] = None
        self.narrator.say(f"ProxyImage: Created proxy for '{file_name}' (image NOT loaded yet)")

    def _load_real_image(self, file_name: str) -> RealImage:
        return RealImage(self.narrator, file_name, self._latency)

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> bool:
        self.access_count += 1
        self.narrator.say(f"ProxyImage: Access #{self.access_count} to '{self.file_name}'")
        if not self._access_check(self.file_name):
            self.narrator.say(f"Access denied to '{self.file_name}'")
            logger.info("Image access denied", file_name=self.file_name)
            return False

        if self._real_image is None:
            self.narrator.say("ProxyImage: First access - loading real image...")
            self._real_image = self._loader(self.file_name)
            self.narrator.say("ProxyImage: Real image cached for future use")
        else:
            self.narrator.say("ProxyImage: Using cached image (no disk access needed)")
        return self._real_image.display()

    def get_dimensions(self) -> str:
        if self._real_image is None:
            return UNKNOWN_DIMENSIONS
        return self._real_image.get_dimensions()

    def statistics(self) -> ImageStatistics:
        real = self._real_image
        return ImageStatistics(
            file_name=self.file_name,
            access_count=self.access_count,
            loaded=real is not None,
            dimensions=self.get_dimensions(),
            size_mb=real.size_mb if real else None,
            load_time_ms=real.load_time_ms if real else None,
        )


def run_demo(context: "DemoContext") -> None:
    """Compare eager and lazy loading, show caching, gate access, scale to a gallery."""
    narrator = context.narrator
    latency = context.latency
    narrator.banner("Proxy Pattern - Image Viewer System")

    narrator.section("SCENARIO 1: WITHOUT PROXY (Immediate Loading)")
    eager = [RealImage(narrator, f"photo{i}.jpg", latency) for i in range(1, 4)]
    narrator.say(f"Memory used: ~{len(eager) * IMAGE_SIZE_MB} MB (all images loaded)")
    eager[0].display()

    narrator.section("SCENARIO 2: WITH PROXY (Lazy Loading)")
    lazy = [ProxyImage(narrator, f"vacation{i}.jpg", latency=latency) for i in range(1, 4)]
    narrator.say("Memory used: ~0 MB (no images loaded yet)")
    lazy[0].display()
    loaded = sum(1 for image in lazy if image.is_loaded)
    narrator.say(f"Images loaded: {loaded} of {len(lazy)}")

    narrator.section("SCENARIO 3: Caching Benefits")
    portrait = ProxyImage(narrator, "portrait.jpg", latency=latency)
    for _ in range(3):
        portrait.display()
    narrator.say("Proxy Statistics:")
    with narrator.indented():
        for line in portrait.statistics().lines():
            narrator.say(line)

    narrator.section("SCENARIO 4: Access Control")
    private = ProxyImage(narrator, "private/secret.jpg", latency=latency,
                         access_check=lambda name: not name.startswith("private/"))
    private.display()
    narrator.say(f"Loaded after denied access: {private.is_loaded}")

    gallery_size = context.settings.gallery_size
    narrator.section(f"SCENARIO 5: Gallery of {gallery_size} Images")
    gallery = [ProxyImage(narrator, f"image{i}.jpg", latency=latency) for i in range(gallery_size)]
    narrator.say(f"Without proxy: ~{gallery_size * IMAGE_SIZE_MB} MB loaded up front")
    narrator.say(f"With proxy: ~{sum(IMAGE_SIZE_MB for image in gallery if image.is_loaded)} MB"
                 " loaded up front")
    narrator.blank()
    narrator.banner("Proxy Demo Complete")
