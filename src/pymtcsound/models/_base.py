"""Base model for persisted sound state.

Every state model inherits from :class:`SoundBaseModel` which provides:

* ``validate_assignment`` so handler writes are type-checked.
* ``extra="ignore"`` so state files written by newer or older
  releases still load.
* A ``model_validator(mode="before")`` that drops ``None`` values so
  the field default is used instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class SoundBaseModel(BaseModel):
    """Base for mutable, persisted state models."""

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Strip ``None`` entries so missing settings fall back to defaults."""
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}
