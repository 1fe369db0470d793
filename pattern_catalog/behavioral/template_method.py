"""Template Method - one fixed beverage recipe skeleton with pluggable steps."""
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict

from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

BOIL = "boil"
BREW = "brew"
POUR = "pour"
CONDIMENTS = "condiments"
EXTRAS = "extras"
SERVE = "serve"


class BeverageRecipe(BaseModel):
    """The steps that vary between beverages."""
    model_config = ConfigDict(frozen=True)

    name: str
    brew: str
    condiments: str
    extras: Optional[str] = None

    @property
    def wants_extras(self) -> bool:
        return self.extras is not None


TEA = BeverageRecipe(
    name="Tea", brew="Steeping the tea bag...", condiments="Adding lemon...",
    extras="Adding honey",
)
COFFEE = BeverageRecipe(
    name="Coffee", brew="Dripping coffee through filter...",
    condiments="Adding sugar and milk...",
)
HOT_CHOCOLATE = BeverageRecipe(
    name="Hot Chocolate", brew="Mixing cocoa powder with hot water...",
    condiments="Adding milk and vanilla...", extras="Adding marshmallows and whipped cream",
)


def prepare_beverage(recipe: BeverageRecipe, narrator: Narrator) -> List[str]:
    """
    Run the fixed preparation skeleton for ``recipe``.

    Boil, brew, pour, condiments, extras when the recipe has any, serve.
    The order never changes; only the brew, condiment and extra steps come
    from the recipe.

    Args:
        recipe: The varying steps
        narrator: Where each step is narrated

    Returns:
        Names of the steps performed, in order
    """
    steps = []

    narrator.say("Boiling water...")
    steps.append(BOIL)
    narrator.say(recipe.brew)
    steps.append(BREW)
    narrator.say("Pouring into cup...")
    steps.append(POUR)
    narrator.say(recipe.condiments)
    steps.append(CONDIMENTS)
    if recipe.wants_extras:
        narrator.say(recipe.extras)
        steps.append(EXTRAS)
    narrator.say("Your beverage is ready! Enjoy!")
    steps.append(SERVE)
    return steps


def run_demo(context: "DemoContext") -> None:
    """Prepare tea, coffee and hot chocolate through the same skeleton."""
    narrator = context.narrator
    narrator.banner("Template Method Pattern - Beverage Demo")
    for recipe in (TEA, COFFEE, HOT_CHOCOLATE):
        narrator.section(f"Preparing {recipe.name}")
        prepare_beverage(recipe, narrator)
        narrator.blank()
    narrator.banner("Template Method Demo Complete")
