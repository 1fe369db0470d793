"""Catalogue entities - demo definitions and run results."""
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternCategory(str, Enum):
    """Gang-of-Four pattern families."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class DemoStatus(str, Enum):
    """Outcome of running one demo."""
    COMPLETED = "completed"
    FAILED = "failed"


def normalize_demo_name(name: str) -> str:
    """Normalize a demo name: ``Chain_of Responsibility`` -> ``chain-of-responsibility``."""
    return "-".join(name.strip().lower().replace("_", " ").replace("-", " ").split())


class DemoDefinition(BaseModel):
    """One entry of the catalogue."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    title: str
    category: PatternCategory
    summary: str
    runner: Callable[[Any], None] = Field(exclude=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Store names in normalized form."""
        normalized = normalize_demo_name(v)
        if not normalized:
            raise ValueError("Demo name must not be empty")
        return normalized

    def describe(self) -> dict:
        """Plain mapping used by CLI formatters."""
        return {
            "name": self.name,
            "title": self.title,
            "category": self.category.value,
            "summary": self.summary,
        }


class DemoResult(BaseModel):
    """Result record for one demo run."""
    model_config = ConfigDict(frozen=True)

    name: str
    category: PatternCategory
    status: DemoStatus
    lines: int = 0
    duration_ms: float = 0.0
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """Whether the demo ran to completion."""
        return self.status == DemoStatus.COMPLETED
