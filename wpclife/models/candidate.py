"""Candidate items extracted from free text.

A candidate is an unvalidated, request-scoped record produced by the language
model. The provider emits one flat JSON object per item; ``parse_candidate``
maps each object onto the variant selected by its ``type`` and rejects
malformed items one at a time, so a single bad item never discards the batch.

Optional fields are forgiving: a value of the wrong shape is treated as absent
and the dispatcher applies the documented default instead.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from wpclife.models.constants import MAX_CHORE_POINTS, MIN_CHORE_POINTS

logger = logging.getLogger(__name__)

CHORE = "chore"
REMINDER = "reminder"
EVENT = "event"
GROCERY = "grocery"
MEDICATION = "medication"

CANDIDATE_TYPES = (CHORE, REMINDER, EVENT, GROCERY, MEDICATION)


def _optional_text(v: Any) -> Optional[str]:
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (str, int, float)):
        return None
    text = str(v).strip()
    return text or None


class _CandidateBase(BaseModel):
    title: str = Field(..., min_length=1, description="Display title")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @field_validator("title", mode="before")
    @classmethod
    def _validate_title(cls, v):
        if isinstance(v, bool) or not isinstance(v, (str, int, float)):
            raise ValueError("title must be text")
        return str(v).strip()

    def to_echo(self) -> Dict[str, Any]:
        """Wire representation (camelCase, absent fields omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ChoreCandidate(_CandidateBase):
    type: Literal["chore"]
    date_time: Optional[str] = Field(None, alias="dateTime")
    points: Optional[int] = None
    assigned_to_name: Optional[str] = Field(None, alias="assignedToName")

    @field_validator("date_time", "assigned_to_name", mode="before")
    @classmethod
    def _validate_text(cls, v):
        return _optional_text(v)

    @field_validator("points", mode="before")
    @classmethod
    def _validate_points(cls, v):
        if v is None or isinstance(v, bool):
            return None
        try:
            points = int(v)
        except (TypeError, ValueError):
            return None
        if points != v and not isinstance(v, str):
            # Fractional points are not a valid suggestion.
            return None
        if points < MIN_CHORE_POINTS or points > MAX_CHORE_POINTS:
            return None
        return points


class ReminderCandidate(_CandidateBase):
    type: Literal["reminder", "event"]
    description: Optional[str] = None
    date_time: Optional[str] = Field(None, alias="dateTime")
    end_date_time: Optional[str] = Field(None, alias="endDateTime")

    @field_validator("description", "date_time", "end_date_time", mode="before")
    @classmethod
    def _validate_text(cls, v):
        return _optional_text(v)


class GroceryCandidate(_CandidateBase):
    type: Literal["grocery"]
    category: Optional[str] = None
    store: Optional[str] = None

    @field_validator("category", "store", mode="before")
    @classmethod
    def _validate_text(cls, v):
        return _optional_text(v)


class MedicationCandidate(_CandidateBase):
    type: Literal["medication"]
    dosage: Optional[str] = None
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    times: List[str] = Field(default_factory=list)

    @field_validator("dosage", "start_date", "end_date", mode="before")
    @classmethod
    def _validate_text(cls, v):
        return _optional_text(v)

    @field_validator("times", mode="before")
    @classmethod
    def _validate_times(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            return []
        out: List[str] = []
        for entry in v:
            if isinstance(entry, str) and entry.strip():
                out.append(entry.strip())
        return out


CandidateItem = Annotated[
    Union[ChoreCandidate, ReminderCandidate, GroceryCandidate, MedicationCandidate],
    Field(discriminator="type"),
]

_candidate_adapter = TypeAdapter(CandidateItem)


def parse_candidate(raw: Any) -> Optional[CandidateItem]:
    """Map one raw provider object onto its candidate variant.

    Returns None (the item is skipped) when ``type`` or ``title`` is missing,
    the type is not one of the supported kinds, or the object is malformed.
    """
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(by_alias=True)
    if not isinstance(raw, dict):
        return None

    item_type = raw.get("type")
    if not isinstance(item_type, str) or not item_type.strip():
        return None
    if raw.get("title") in (None, ""):
        return None

    item_type = item_type.strip().lower()
    if item_type not in CANDIDATE_TYPES:
        logger.debug(f"Skipping item with unsupported type '{item_type[:20]}'")
        return None

    try:
        return _candidate_adapter.validate_python({**raw, "type": item_type})
    except ValidationError as e:
        logger.debug(f"Skipping malformed {item_type} item: {e.error_count()} validation error(s)")
        return None
