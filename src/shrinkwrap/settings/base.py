"""Generation settings - the Binding Layer.

Settings declare how a harness drives generators (how many values, how
large, which seed) without containing any generation logic.
"""

from typing import Iterator
import logging

from pydantic import BaseModel, Field, field_validator

from shrinkwrap.logging import set_level


class GenerationSettings(BaseModel):
    """Knobs for sampling values and previewing shrinks."""

    max_size: int = Field(default=100, ge=0, description="Largest ambient size in the schedule")
    size: int | None = Field(
        default=None,
        ge=0,
        description="Fixed ambient size (overrides the ramp when set)"
    )
    count: int = Field(default=100, ge=1, description="Number of values to generate")
    seed: int | None = Field(default=None, description="Random seed for reproducibility")
    shrink_limit: int = Field(
        default=50,
        ge=1,
        description="Maximum number of shrink candidates to display"
    )
    log_level: str | None = Field(
        default=None,
        description="Logging level name for all shrinkwrap loggers (unset: keep current)"
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    def apply_logging(self) -> None:
        """Apply log_level to the shrinkwrap loggers, if it is set."""
        if self.log_level is not None:
            set_level(self.log_level)

    def sizes(self, count: int | None = None) -> Iterator[int]:
        """Yield the ambient size for each successive value.

        Sizes ramp linearly from 0 to max_size, like a harness growing its
        test cases, unless a fixed size is set.
        """
        count = self.count if count is None else count
        if self.size is not None:
            for _ in range(count):
                yield self.size
            return

        span = max(count - 1, 1)
        for i in range(count):
            yield i * self.max_size // span


class SettingsBuilder:
    """Fluent builder for creating GenerationSettings."""

    def __init__(self):
        self._values: dict[str, object] = {}

    def max_size(self, max_size: int) -> "SettingsBuilder":
        self._values["max_size"] = max_size
        return self

    def size(self, size: int) -> "SettingsBuilder":
        self._values["size"] = size
        return self

    def count(self, count: int) -> "SettingsBuilder":
        self._values["count"] = count
        return self

    def seed(self, seed: int) -> "SettingsBuilder":
        self._values["seed"] = seed
        return self

    def shrink_limit(self, limit: int) -> "SettingsBuilder":
        self._values["shrink_limit"] = limit
        return self

    def build(self) -> GenerationSettings:
        return GenerationSettings(**self._values)
