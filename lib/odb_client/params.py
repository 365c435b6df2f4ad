"""Typed optional query parameters for catalogue endpoints.

Every field defaults to ``None`` and unset fields are not sent. An explicit
empty string is sent as-is. List fields are expanded to ``name[1]``,
``name[2]`` ... as the service expects for category filters.
"""
from __future__ import annotations

from datetime import date
from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .query import format_value


class Region(IntEnum):
    CRIMEA = 1
    VINNYTSIA = 2
    VOLYN = 3
    DNIPROPETROVSK = 4
    DONETSK = 5
    ZHYTOMYR = 6
    ZAKARPATTIA = 7
    ZAPORIZHZHIA = 8
    IVANO_FRANKIVSK = 9
    KYIV_OBLAST = 10
    KIROVOHRAD = 11
    LUHANSK = 12
    LVIV = 13
    MYKOLAIV = 14
    ODESA = 15
    POLTAVA = 16
    RIVNE = 17
    SUMY = 18
    TERNOPIL = 19
    KHARKIV = 20
    KHERSON = 21
    KHMELNYTSKYI = 22
    CHERKASY = 23
    CHERNIVTSI = 24
    CHERNIHIV = 25
    KYIV = 26
    SEVASTOPOL = 27


class JudgmentCode(IntEnum):
    """Form of proceedings."""

    CIVIL = 1
    CRIMINAL = 2
    COMMERCIAL = 3
    ADMINISTRATIVE = 4
    ADMIN_OFFENSE = 5


class JusticeCode(IntEnum):
    """Type of procedural document."""

    VERDICT = 1
    RESOLUTION = 2
    DECISION = 3
    COURT_ORDER = 4
    RULING = 5
    SEPARATE_RULING = 6
    SEPARATE_OPINION = 10


SortOrder = Literal["ASC", "DESC"]
LowerSortOrder = Literal["asc", "desc"]


class QueryParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    def to_query(self) -> dict[str, str]:
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        query: dict[str, str] = {}
        for key, value in data.items():
            if isinstance(value, list):
                for i, item in enumerate(value, start=1):
                    query[f"{key}[{i}]"] = format_value(item)
            else:
                query[key] = format_value(value)
        return query


class OffsetPageParams(QueryParams):
    offset: int | None = None
    limit: int | None = None


class StartPageParams(QueryParams):
    start: int | None = None
    limit: int | None = None


# --- companies and sole proprietors ---


class ChangesParams(QueryParams):
    from_: date | None = Field(default=None, alias="from")


class AuditParams(OffsetPageParams):
    code: str | None = None
    pib: str | None = None


class RegistrationsParams(OffsetPageParams):
    type: Literal["company", "fop"] | None = None
    reg_date_from: date | None = None
    reg_date_to: date | None = None
    activities: str | None = None  # e.g. "69 OR 96"
    location: str | None = None  # e.g. "Дніпро OR київ"
    is_phone: bool | None = None
    is_email: bool | None = None
    sort: SortOrder | None = None


class PermitsParams(QueryParams):
    code: str | None = None
    active: bool | None = None


class SingletaxParams(QueryParams):
    code: str | None = None
    pib: str | None = None
    fophash: str | None = None


class VatParams(QueryParams):
    vat_number: str | None = Field(default=None, alias="vatNumber")
    ipn: str | None = None
    company_code: str | None = Field(default=None, alias="companyCode")


# --- courts ---


class CourtParams(OffsetPageParams):
    judgment_code: JudgmentCode | None = None
    justice_code: JusticeCode | None = None
    court_code: str | None = None
    company_code: str | None = None
    text: str | None = None
    stage: Literal["first", "appeal", "cassation"] | None = None
    text_intro: str | None = None
    text_resolution: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    number: str | None = None
    search_criteria: Literal["words_in_a_row"] | None = None


class InstitutionsParams(OffsetPageParams):
    name: str | None = None


class ScheduleParams(OffsetPageParams):
    text_involved: str | None = None
    text_description: str | None = None
    date_: date | None = Field(default=None, alias="date")
    court_id: str | None = Field(default=None, alias="courtId")
    judgment_code: JudgmentCode | None = None
    number: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    region_id: Region | None = None


class AccusedParams(OffsetPageParams):
    judgment_code: JudgmentCode | None = None
    article: str | None = None
    region_id: Region | None = None
    pib: str | None = None
    date_from: date | None = None
    date_to: date | None = None


class CompanyCourtsParams(OffsetPageParams):
    sort_field: str | None = None
    sort_type: SortOrder | None = None
    date_from: date | None = None
    date_to: date | None = None


class CourtCasesParams(QueryParams):
    # required by the service when the number matches cases of several forms
    judgment_code: JudgmentCode | None = None


# --- transport ---


class TransportsParams(StartPageParams):
    number: str | None = None
    order: LowerSortOrder | None = None


class TransportLicensesParams(OffsetPageParams):
    number: str | None = None
    code: str | None = None
    owner_hash: str | None = None


# --- persons ---


class AlimentParams(StartPageParams):
    birth_date: date | None = None


class LawyersParams(OffsetPageParams):
    name: str | None = None


# --- enforcement proceedings ---


class FullPenaltyByNumberParams(QueryParams):
    source: str | None = None  # "opendatabot" reads from the service's own copy


class FullPenaltyParams(OffsetPageParams):
    borrower_code: str | None = None
    creditor_code: str | None = None
    borrower_first_name: str | None = None
    borrower_last_name: str | None = None
    borrower_middle_name: str | None = None
    borrower_birth_date: date | None = None
    source: str | None = None


class PerformerParams(OffsetPageParams):
    name: str | None = None
    region_id: Region | None = None
    type: Literal["private", "government"] | None = None


class PenaltiesByCodeParams(OffsetPageParams):
    categories: list[str] | None = None  # "01" recovery of funds, "03" alimony ...


class PenaltiesParams(QueryParams):
    middle_name: str | None = None
    categories: list[str] | None = None


# --- realty ---


class RealtyParams(OffsetPageParams):
    timeout: int | None = None  # seconds to wait for the property register
    role: int | None = None


# --- business monitoring ---


class TimelineParams(OffsetPageParams):
    code: str | None = None
    from_id: int | None = None
    type: str | None = None  # event type, e.g. "new_court_defendant"
    pib: str | None = None
    itn: str | None = None
    date_start: date | None = None
    date_end: date | None = None
    created_date: date | None = None
    order: LowerSortOrder | None = None
    order_field: Literal["id", "created_at", "event_date"] | None = None
