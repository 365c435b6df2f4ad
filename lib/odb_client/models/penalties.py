from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import OdbModel, StatusEnvelope


class EnforcementProceeding(OdbModel):
    number: str = ""
    borrower_code: str = ""
    sub_type: str = ""
    borrower_last_name: str = ""
    borrower_first_name: str = ""
    borrower_middle_name: str = ""
    borrower_birth_date: str = ""
    creditor_name: str = ""
    creditor_code: str = ""
    creditor_sub_type: str = ""
    asvp_gis_name: str = ""
    asvp_dep_id: str = ""
    begin_date: str = ""
    asvp_status: str = ""
    active: str = ""


class FullPenaltiesData(OdbModel):
    count: int = 0
    active_count: int = 0
    items: list[EnforcementProceeding] = []


class FullPenalties(StatusEnvelope):
    data: FullPenaltiesData = Field(default_factory=FullPenaltiesData)


class ProceedingDocument(OdbModel):
    id: str = ""
    name: str = ""
    print_date: str = ""
    accept_date: str = ""
    cancel_date: str = ""
    link: str = ""


class EnforcementProceedingDetail(EnforcementProceeding):
    state: str = ""
    executor_name: str = ""
    publisher: str = ""
    publisher_info: str = ""
    executor_adress: str = ""
    documents: list[ProceedingDocument] = []


class FullPenaltyDoc(StatusEnvelope):
    data: EnforcementProceedingDetail = Field(default_factory=EnforcementProceedingDetail)


class Performer(OdbModel):
    region_id: str = Field(default="", alias="regionId")
    name: str = ""
    type: str = ""
    address: str = ""
    contacts: str = ""
    managers: str = ""


class PerformersData(OdbModel):
    count: str = ""
    items: list[Performer] = []


class Performers(StatusEnvelope):
    data: PerformersData = Field(default_factory=PerformersData)


# --- unified register of debtors ---


class DebtorSummary(OdbModel):
    court_name: str = ""
    gis_name: str = ""
    number: str = ""
    category: str = ""
    id: str = ""
    department_phone: str = ""
    executor: str = ""
    executor_phone: str = ""
    executor_email: str = ""
    deduction_type: str = ""
    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""
    birth_date: datetime | None = None


class Debtor(DebtorSummary):
    code: str = ""
    name: str = ""
    address_atu_str: str = ""
    address: str = ""
    birth_place_atu_str: str = ""
    birth_place: str = ""


class DebtorListed(Debtor):
    link: str = ""


class PenaltiesData(OdbModel):
    count: int = 0
    items: list[DebtorListed] = []


class Penalties(StatusEnvelope):
    data: PenaltiesData = Field(default_factory=PenaltiesData)


class PenaltyItem(StatusEnvelope):
    data: Debtor = Field(default_factory=Debtor)


class PenaltiesByNameData(OdbModel):
    count: int = 0
    items: list[DebtorSummary] = []


class PenaltiesByName(StatusEnvelope):
    data: PenaltiesByNameData = Field(default_factory=PenaltiesByNameData)
