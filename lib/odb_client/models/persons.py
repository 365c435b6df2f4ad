from __future__ import annotations

from pydantic import Field

from .base import OdbModel, StatusEnvelope


class AlimentDebtor(OdbModel):
    full_name: str = ""
    birth_date: str = ""
    active: int = 0


class Aliments(OdbModel):
    count: int = 0
    aliments: list[AlimentDebtor] = []


class LawyerSummary(OdbModel):
    id: int = 0
    full_name: str = ""
    racalc: str = ""
    certnum: str = ""
    certat: str = ""
    certcalc: str = ""
    database_date: str = ""


class LawyersData(OdbModel):
    count: int = 0
    items: list[LawyerSummary] = []


class Lawyers(StatusEnvelope):
    data: LawyersData = Field(default_factory=LawyersData)


class LawyerDetail(LawyerSummary):
    phone: str = ""
    email: str = ""
    decision_date: str = ""
    decision_number: str = ""
    activities: str = ""
    experience: str = ""
    termination: str = ""


class Lawyer(StatusEnvelope):
    data: LawyerDetail = Field(default_factory=LawyerDetail)


class CorruptOfficial(OdbModel):
    id: str = ""
    full_name: str = ""
    decision_date: str = ""
    decision_number: str = ""
    work_place: str = ""
    position: str = ""
    codex_articles: list[str] = []
    active: int = 0


class CorruptOfficialItem(StatusEnvelope):
    data: CorruptOfficial = Field(default_factory=CorruptOfficial)


class CorruptOfficialsData(OdbModel):
    count: int = 0
    items: list[CorruptOfficial] = []


class CorruptOfficials(StatusEnvelope):
    data: CorruptOfficialsData = Field(default_factory=CorruptOfficialsData)


class LostPassport(OdbModel):
    id: str = ""
    number: str = ""
    type: str = ""
    ovd: str = ""
    theft_date: str = ""
    date: str = ""


class Passport(OdbModel):
    count: int = 0
    data: list[LostPassport] = []


class WantedPerson(OdbModel):
    id: str = ""
    full_name: str = ""
    birth_date: str = ""
    lost_date: str = ""
    sex: str = ""
    article_crim: str = ""
    lost_place: str = ""
    ovd: str = ""
    category: str = ""
    restraint: str = ""
    status_text: str = ""
    status: str = ""


class WantedData(OdbModel):
    count: int = 0
    items: list[WantedPerson] = []


class Wanted(StatusEnvelope):
    data: WantedData = Field(default_factory=WantedData)
