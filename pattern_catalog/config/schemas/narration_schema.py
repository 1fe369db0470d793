"""Narration and demo behaviour configuration schemas."""
from typing import Optional

from pydantic import BaseModel, Field


class NarrationConfig(BaseModel):
    """How demos narrate and whether they pause to simulate slow work."""

    simulate_latency: bool = Field(
        False, description="Sleep where demos simulate processing time"
    )
    latency_scale: float = Field(
        1.0, ge=0.0, description="Multiplier applied to simulated delays"
    )
    color: bool = Field(True, description="Allow colored console output")


class DemoSettings(BaseModel):
    """Tunables for demos that generate data."""

    random_seed: Optional[int] = Field(
        None, description="Seed for demos that plant random data"
    )
    forest_size: int = Field(
        10000, ge=1, description="Trees planted by the large flyweight scenario"
    )
    gallery_size: int = Field(
        10, ge=1, description="Images created by the proxy gallery scenario"
    )
