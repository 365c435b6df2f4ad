from __future__ import annotations

from pydantic import Field

from .base import OdbModel, StatusEnvelope


class GeneratedKey(OdbModel):
    api_key: str = Field(default="", alias="apiKey")
    settings_token: str = ""


class GenKey(StatusEnvelope):
    data: GeneratedKey = Field(default_factory=GeneratedKey)


class Quota(OdbModel):
    name: str = ""
    used: int = 0
    limit: int = 0
    balance: int = 0


def _quota(alias: str):
    return Field(default_factory=Quota, alias=alias)


class Statistics(OdbModel):
    """Per-service request quotas of the current API key."""

    company: Quota = _quota("COMPANY")
    full_company: Quota = _quota("FULLCOMPANY")
    fop: Quota = _quota("FOP")
    fop_inn: Quota = _quota("FOPINN")
    person: Quota = _quota("PERSON")
    registrations: Quota = _quota("REGISTRATIONS")
    vat: Quota = _quota("VAT")
    schedule: Quota = _quota("SCHEDULE")
    company_record: Quota = _quota("COMPANYRECORD")
    court: Quota = _quota("COURT")
    subscription: Quota = _quota("SUBSCRIPTION")
    unsubscription: Quota = _quota("UNSUBSCRIPTION")
    history: Quota = _quota("HISTORY")
    changes: Quota = _quota("CHANGES")
    institutions: Quota = _quota("INSTITUTIONS")
    search: Quota = _quota("SEARCH")
    lists: Quota = _quota("LISTS")
    debt: Quota = _quota("DEBT")
    api_court: Quota = _quota("APICOURT")
    message: Quota = _quota("MESSAGE")
    statistics: Quota = _quota("STATISTICS")
    expiry_date: str = ""
    customer_id: str = Field(default="", alias="customerId")
    webhook: str = ""
