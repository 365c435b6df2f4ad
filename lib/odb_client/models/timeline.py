from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import OdbModel, StatusEnvelope


class TimelineChange(OdbModel):
    """One change entry; which keys are present depends on the event type."""

    old_value: str = ""
    new_value: str = ""
    number: str = ""
    document_id: str = ""
    count_added_items: str = Field(default="", alias="countAddedItems")
    added_items: list[str] = Field(default_factory=list, alias="addedItems")
    count_removed_items: str = Field(default="", alias="countRemovedItems")
    removed_items: str = Field(default="", alias="removedItems")
    date: str = ""
    name: str = ""
    is_company: str = ""
    judgment_code: str = ""
    source: str = ""
    link: str = ""
    company_name: str = ""
    without_change_logs: str = ""
    declarant_id: str = ""
    year: str = ""
    declaration_id: str = ""
    public_type: str = ""
    subject_type: str = ""
    code_pdv: str = ""
    event_date: str = Field(default="", alias="eventDate")
    start_date: str = Field(default="", alias="startDate")
    end_date: str = Field(default="", alias="endDate")
    termless: str = ""
    sanction_list: str = Field(default="", alias="sanctionList")
    sanction_reason: str = Field(default="", alias="sanctionReason")
    pib: str = ""
    resident: str = ""


class TimelineEvent(OdbModel):
    log_id: str = ""
    id: str = ""
    code: str = ""
    type: str = ""
    created_at: datetime | None = None
    event_date: datetime | None = None
    change: list[TimelineChange] = []


class TimelineData(OdbModel):
    count: int = 0
    items: list[TimelineEvent] = []


class Timeline(StatusEnvelope):
    data: TimelineData = Field(default_factory=TimelineData)
