from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class OdbModel(BaseModel):
    """Base for response shapes.

    Unknown keys are ignored, absent keys and JSON ``null`` fall back to the
    field default, and bare numbers are accepted where a string is declared.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class StatusEnvelope(OdbModel):
    """``{"status": ..., "data": ...}`` wrapper; subclasses declare ``data``."""

    status: str = ""


class Party(OdbModel):
    code: str = ""
    name: str = ""


class FieldChange(OdbModel):
    field: str = ""
    old_value: str = ""
    new_value: str = ""


class DatedChanges(OdbModel):
    date: str = ""
    changes: list[FieldChange] = []
