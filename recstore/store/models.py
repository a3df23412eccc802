from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class ListFilter(str, Enum):
    """Which records ``RecordStore.list`` returns."""

    INCOMPLETE = "incomplete"
    ALL = "all"


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    label: str
    done: bool = False

    @field_validator("label")
    @classmethod
    def _label_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("label must not be blank")
        return v


class RecordCounts(BaseModel):
    total: int
    incomplete: int
