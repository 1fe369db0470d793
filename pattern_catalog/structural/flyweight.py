"""Flyweight - a forest of many trees sharing a few immutable tree types.

Intrinsic state (species, color, texture) lives in shared :class:`TreeType`
objects handed out by a :class:`TreeFactory`; each :class:`Tree` keeps only
its own coordinates plus a reference to its type.
"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

logger = get_logger(__name__)

BYTES_PER_UNSHARED_TREE = 170
BYTES_PER_REFERENCE = 12
FOREST_EXTENT = 1000


class _DisplayEnum(Enum):
    def __str__(self) -> str:
        return self.value


class TreeName(_DisplayEnum):
    OAK = "Oak"
    PINE = "Pine"
    BIRCH = "Birch"
    MAPLE = "Maple"
    WILLOW = "Willow"
    SPRUCE = "Spruce"


class TreeColor(_DisplayEnum):
    GREEN = "Green"
    DARK_GREEN = "Dark Green"
    LIGHT_GREEN = "Light Green"
    YELLOW_GREEN = "Yellow Green"
    BLUE_GREEN = "Blue Green"


class TreeTexture(_DisplayEnum):
    BARK = "Bark"
    SMOOTH = "Smooth"
    ROUGH = "Rough"
    CRACKED = "Cracked"
    PEELING = "Peeling"


TreeKey = Tuple[TreeName, TreeColor, TreeTexture]


@dataclass(frozen=True, eq=False)
class TreeType:
    """Shared, immutable intrinsic state. Compared by identity."""
    name: TreeName
    color: TreeColor
    texture: TreeTexture

    @property
    def key(self) -> TreeKey:
        return (self.name, self.color, self.texture)

    def describe(self) -> str:
        return f"{self.name} ({self.color}, {self.texture})"

    def draw(self, narrator: Narrator, canvas: str, x: int, y: int) -> None:
        narrator.say(f"  Drawing {self.name} tree [{self.color}, {self.texture}] "
                     f"at ({x}, {y}) on {canvas}")


class TreeFactory:
    """Cache of tree types keyed by (name, color, texture)."""

    def __init__(self, narrator: Narrator):
        self.narrator = narrator
        self._tree_types: Dict[TreeKey, TreeType] = {}

    def get_tree_type(self, name: TreeName, color: TreeColor, texture: TreeTexture) -> TreeType:
        """Return the cached type for the key, creating and caching it on first request."""
        key = (name, color, texture)
        tree_type = self._tree_types.get(key)
        if tree_type is not None:
            logger.debug("Reusing tree type", tree_type=tree_type.describe(),
                         total_types=len(self._tree_types))
            return tree_type

        tree_type = TreeType(name, color, texture)
        self._tree_types[key] = tree_type
        self.narrator.say(f"Creating TreeType: {tree_type.describe()} "
                          f"(total types: {len(self._tree_types)})")
        return tree_type

    @property
    def tree_type_count(self) -> int:
        return len(self._tree_types)

    def tree_types(self) -> List[TreeType]:
        return list(self._tree_types.values())

    def display_tree_types(self) -> None:
        self.narrator.say("Cached Tree Types:")
        self.narrator.bullets([tree_type.describe() for tree_type in self._tree_types.values()])
        self.narrator.say(f"Total unique types: {self.tree_type_count}")

    def clear_cache(self) -> None:
        """Forget cached types; types already handed out stay valid."""
        self._tree_types.clear()


@dataclass(frozen=True)
class Tree:
    """Extrinsic state: where one tree stands, plus its shared type."""
    x: int
    y: int
    tree_type: TreeType

    def draw(self, narrator: Narrator, canvas: str) -> None:
        self.tree_type.draw(narrator, canvas, self.x, self.y)


@dataclass(frozen=True)
class MemoryStatistics:
    tree_count: int
    tree_type_count: int
    bytes_without_sharing: int = field(init=False)
    bytes_with_sharing: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "bytes_without_sharing",
                           self.tree_count * BYTES_PER_UNSHARED_TREE)
        object.__setattr__(self, "bytes_with_sharing",
                           (self.tree_type_count + self.tree_count) * BYTES_PER_REFERENCE)

    @property
    def bytes_saved(self) -> int:
        return self.bytes_without_sharing - self.bytes_with_sharing

    @property
    def percent_saved(self) -> float:
        if self.bytes_without_sharing == 0:
            return 0.0
        return self.bytes_saved / self.bytes_without_sharing * 100


def format_bytes(count: int) -> str:
    """Human-readable byte count."""
    if abs(count) < 1024:
        return f"{count} bytes"
    if abs(count) < 1024 * 1024:
        return f"{count / 1024:.2f} KB"
    return f"{count / (1024 * 1024):.2f} MB"


class Forest:
    def __init__(self, narrator: Narrator, factory: TreeFactory,
                 rng: Optional[random.Random] = None):
        self.narrator = narrator
        self.factory = factory
        self._rng = rng or random.Random()
        self._trees: List[Tree] = []

    @property
    def tree_count(self) -> int:
        return len(self._trees)

    @property
    def trees(self) -> List[Tree]:
        return list(self._trees)

    def plant_tree(self, x: int, y: int, name: TreeName, color: TreeColor,
                   texture: TreeTexture) -> Tree:
        tree = Tree(x, y, self.factory.get_tree_type(name, color, texture))
        self._trees.append(tree)
        return tree

    def plant_random_trees(self, count: int) -> None:
        self.narrator.say(f"Planting {count} trees...")
        names, colors, textures = list(TreeName), list(TreeColor), list(TreeTexture)
        for _ in range(count):
            self.plant_tree(
                self._rng.randrange(FOREST_EXTENT),
                self._rng.randrange(FOREST_EXTENT),
                self._rng.choice(names),
                self._rng.choice(colors),
                self._rng.choice(textures),
            )
        self.narrator.say(f"Finished planting {count} trees!")

    def draw(self, canvas: str) -> None:
        self.narrator.say(f"Drawing Forest on {canvas}:")
        for tree in self._trees:
            tree.draw(self.narrator, canvas)

    def memory_statistics(self) -> MemoryStatistics:
        return MemoryStatistics(self.tree_count, self.factory.tree_type_count)

    def print_memory_stats(self) -> MemoryStatistics:
        stats = self.memory_statistics()
        self.narrator.say("MEMORY STATISTICS:")
        with self.narrator.indented():
            self.narrator.say(f"Total Trees: {stats.tree_count}")
            self.narrator.say(f"Unique Tree Types: {stats.tree_type_count}")
            self.narrator.say(f"WITHOUT Flyweight: ~{format_bytes(stats.bytes_without_sharing)}")
            self.narrator.say(f"WITH Flyweight:    ~{format_bytes(stats.bytes_with_sharing)}")
            self.narrator.say(f"Memory Saved: ~{format_bytes(stats.bytes_saved)}")
            self.narrator.say(f"Reduction: {stats.percent_saved:.1f}%")
        return stats


def run_demo(context: "DemoContext") -> None:
    """Plant a small forest by hand, a large random one, then verify sharing."""
    narrator = context.narrator
    narrator.banner("Flyweight Pattern - Forest Simulation")
    factory = TreeFactory(narrator)

    narrator.section("SCENARIO 1: Small Forest (Manual Planting)")
    forest = Forest(narrator, factory)
    for x, y, name, color, texture in (
        (10, 20, TreeName.OAK, TreeColor.GREEN, TreeTexture.BARK),
        (30, 40, TreeName.OAK, TreeColor.GREEN, TreeTexture.BARK),
        (50, 60, TreeName.OAK, TreeColor.GREEN, TreeTexture.BARK),
        (70, 80, TreeName.PINE, TreeColor.DARK_GREEN, TreeTexture.ROUGH),
        (90, 100, TreeName.PINE, TreeColor.DARK_GREEN, TreeTexture.ROUGH),
        (110, 120, TreeName.OAK, TreeColor.LIGHT_GREEN, TreeTexture.BARK),
        (130, 140, TreeName.BIRCH, TreeColor.LIGHT_GREEN, TreeTexture.SMOOTH),
    ):
        forest.plant_tree(x, y, name, color, texture)
    factory.display_tree_types()
    forest.draw("Canvas1")
    forest.print_memory_stats()

    forest_size = context.settings.forest_size
    narrator.section(f"SCENARIO 2: Large Forest ({forest_size:,} Random Trees)")
    factory.clear_cache()
    large_forest = Forest(narrator, factory, context.random_source())
    with narrator.indented():
        large_forest.plant_random_trees(forest_size)
    narrator.say(f"Total unique types: {factory.tree_type_count}")
    large_forest.print_memory_stats()

    narrator.section("SCENARIO 3: Verify Object Sharing")
    factory.clear_cache()
    oak1 = factory.get_tree_type(TreeName.OAK, TreeColor.GREEN, TreeTexture.BARK)
    oak2 = factory.get_tree_type(TreeName.OAK, TreeColor.GREEN, TreeTexture.BARK)
    if oak1 is oak2:
        narrator.say("SUCCESS: oak1 is oak2 (same object in memory!)")
    else:
        narrator.say("FAILURE: different objects")
    narrator.blank()
    narrator.banner("Flyweight Demo Complete")
