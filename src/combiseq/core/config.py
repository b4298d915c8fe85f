"""Runtime settings for combiseq.

Settings are read once from the environment when the module is imported and
exposed through the module-level ``settings`` instance.
"""

import os
from typing import Annotated, Mapping, Optional

import annotated_types as at
from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Settings", "settings"]

ENV_PREFIX = "COMBISEQ_"

# Python's default recursion limit is 1000 frames, stay well under it
DEFAULT_MAX_RECURSION_DEPTH = 500


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    MAX_RECURSION_DEPTH: Annotated[int, at.Ge(1)] = Field(
        default=DEFAULT_MAX_RECURSION_DEPTH,
        description="Deepest recursion the combinatorial enumerators accept.",
    )

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``COMBISEQ_*`` environment variables.

        Args:
            environ: Mapping to read from, ``os.environ`` when omitted.

        Returns:
            Validated settings. Unset variables keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        environ = os.environ if environ is None else environ
        values = {
            name: environ[f"{ENV_PREFIX}{name}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name}" in environ
        }
        return cls(**values)


settings = Settings.load()
