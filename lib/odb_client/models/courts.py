from __future__ import annotations

from pydantic import Field

from .base import OdbModel, Party, StatusEnvelope


class CourtDecision(OdbModel):
    doc_id: int = 0
    court_code: int = 0
    court_name: str = ""
    judgment_code: int = 0
    judgment_name: str = ""
    justice_code: int = 0
    justice_name: str = ""
    category_code: int = 0
    category_name: str = ""
    cause_number: str = ""
    adjudication_date: str = ""
    date_publ: str = ""
    receipt_date: str = ""
    judge: str = ""
    link: str = ""


class CourtDecisions(OdbModel):
    status: str = ""
    count: int = 0
    items: list[CourtDecision] = []


class CourtItem(OdbModel):
    doc_id: int = 0
    court_code: int = 0
    court_name: str = ""
    judgment_code: int = 0
    judgment_name: str = ""
    justice_code: int = 0
    justice_name: str = ""
    category_code: int = 0
    category_name: str = ""
    cause_number: str = ""
    adjudication_date: str = ""
    date_publ: str = ""
    receipt_date: str = ""
    judge: str = ""
    document_link: str = ""
    text: str = ""


class Institution(OdbModel):
    name: str = ""
    court_id: str = ""
    code: str = ""
    region_id: str = ""
    stage: str = ""
    type_id: str = ""


class InstitutionsData(OdbModel):
    count: str = ""
    items: list[Institution] = []


class Institutions(StatusEnvelope):
    data: InstitutionsData = Field(default_factory=InstitutionsData)


class Hearing(OdbModel):
    hearing_id: str = ""
    judge: str = ""
    forma: str = ""
    number: str = ""
    court_id: str = ""
    involved: str = ""
    description: str = ""
    date: str = ""
    judgment_code: str = ""
    code: str = ""
    accused: list[str] = []


class ScheduleData(OdbModel):
    count: int = 0
    items: list[Hearing] = []


class Schedule(StatusEnvelope):
    data: ScheduleData = Field(default_factory=ScheduleData)


class ScheduleItem(StatusEnvelope):
    data: Hearing = Field(default_factory=Hearing)


class AccusedCase(OdbModel):
    forma: str = ""
    number: str = ""
    court_id: str = ""
    description: str = ""
    judgment_code: str = ""
    accused: list[str] = []


class AccusedData(OdbModel):
    count: int = 0
    items: list[AccusedCase] = []


class Accused(StatusEnvelope):
    data: AccusedData = Field(default_factory=AccusedData)


# --- company court cases ---


class CaseCounter(OdbModel):
    count: str = ""
    live_count: str = ""


class CompanyCourts(OdbModel):
    """Case counters per form of proceedings."""

    civil: CaseCounter = Field(default_factory=CaseCounter)
    criminal: CaseCounter = Field(default_factory=CaseCounter)
    arbitrage: CaseCounter = Field(default_factory=CaseCounter)
    administrative: CaseCounter = Field(default_factory=CaseCounter)
    admin_offense: CaseCounter = Field(default_factory=CaseCounter)


class StageSummary(OdbModel):
    court_code: int = 0
    court_name: str = ""
    judge: str = ""
    consideration_for_side: str = ""
    description: str = ""


class StageSummaries(OdbModel):
    first: StageSummary = Field(default_factory=StageSummary)
    appeal: StageSummary = Field(default_factory=StageSummary)
    cassation: StageSummary = Field(default_factory=StageSummary)


class _CaseBase(OdbModel):
    number: str = ""
    date: str = ""
    date_start: str = ""
    last_schedule_date: str = ""
    live: str = ""
    description: str = ""
    schedule_count: str = ""
    cost: str = ""
    amount: str = ""
    court_name: str = ""
    plaintiffs: list[Party] = []
    defendants: list[Party] = []
    third_persons: list[Party] = []
    appeals: list[Party] = []
    cassations: list[Party] = []
    judgment_code: str = ""
    last_document_date: str = ""


class CompanyCourtsDetail(_CaseBase):
    stages: StageSummaries = Field(default_factory=StageSummaries)


class StageDecision(OdbModel):
    court_code: int = 0
    court_name: str = ""
    judgment_code: int = 0
    judgment_name: str = ""
    justice_code: int = 0
    justice_name: str = ""
    adjudication_date: str = ""
    date_publ: str = ""
    receipt_date: str = ""
    judge: str = ""
    result: str = ""
    link: str = ""


class CaseStage(OdbModel):
    court_code: int = 0
    court_name: str = ""
    judge: str = ""
    consideration: str = ""
    description: str = ""
    decisions: list[StageDecision] = []


class CaseStages(OdbModel):
    first: CaseStage = Field(default_factory=CaseStage)
    appeal: CaseStage = Field(default_factory=CaseStage)
    cassation: CaseStage = Field(default_factory=CaseStage)


class CourtCase(_CaseBase):
    last_status: str = ""
    stages: CaseStages = Field(default_factory=CaseStages)
