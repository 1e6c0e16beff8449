"""Main application configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from patternkit.domain.decorator.dishes import BASES
from patternkit.domain.factory_method.value_objects import Mission

from .logging_schema import LoggingConfig


class SelectionConfig(BaseModel):
    """Configuration for randomized factories."""

    seed: Optional[int] = Field(None, description="Seed for random selection (None = entropy)")
    random_count: int = Field(1, ge=1, description="Products built per random command")

    @field_validator("seed", mode="before")
    @classmethod
    def empty_seed_is_none(cls, v):
        """Treat an empty string (unset environment variable) as no seed."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class DemoDefaults(BaseModel):
    """Default inputs used when a command omits them."""

    mission: Mission = Field(Mission.TUTORIAL, description="Default gameplay mission")
    dish_base: str = Field("pizza", description="Default base dish")

    @field_validator("dish_base")
    @classmethod
    def validate_dish_base(cls, v: str) -> str:
        """Normalize the base dish name and ensure it exists."""
        v = v.strip().lower()
        if v not in BASES:
            raise ValueError(f"Unknown dish base '{v}', expected one of {sorted(BASES)}")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    selection: SelectionConfig = Field(default_factory=lambda: SelectionConfig())
    defaults: DemoDefaults = Field(default_factory=lambda: DemoDefaults())
