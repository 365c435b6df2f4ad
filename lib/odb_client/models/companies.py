from __future__ import annotations

from pydantic import Field

from .base import DatedChanges, OdbModel, StatusEnvelope


class GovernmentCompanyItem(OdbModel):
    code: str = ""


class GovernmentCompanyData(OdbModel):
    count: int = 0
    items: list[GovernmentCompanyItem] = []


class GovernmentCompany(StatusEnvelope):
    data: GovernmentCompanyData = Field(default_factory=GovernmentCompanyData)


# --- sole proprietor (FOP) record ---


class ActivityKind(OdbModel):
    name: str = ""
    code: str = ""
    is_primary: bool = False


class AuthorityRegistration(OdbModel):
    end_date: str = ""
    code: str = ""
    name: str = ""
    description: str = ""
    type: str = ""
    start_date: str = ""


class RegistrationRecord(OdbModel):
    date: str = ""
    record_number: str = ""
    record_date: str = ""


class Termination(OdbModel):
    state: int = 0
    state_text: str = ""
    date: str = ""
    record_number: str = ""
    cause: str = ""


class TerminationCancel(OdbModel):
    date: str = ""
    record_number: str = ""
    doc_date: str = ""
    court_name: str = ""
    doc_number: str = ""
    date_judge: str = ""


class TaxDebts(OdbModel):
    text: str = ""
    icon: str = ""
    total: str = ""
    local: str = ""
    government: str = ""
    database_date: str = ""
    type: str = ""


class SingletaxStatus(OdbModel):
    date_start: str = ""
    date_end: str = ""
    rate: str = ""
    group: str = ""
    active: bool = False


class Notice(OdbModel):
    text: str = ""
    icon: str = ""


class AddressParts(OdbModel):
    atu: str = ""
    atu_code: str = ""
    street: str = ""
    house_type: str = ""
    house: str = ""
    building: str = ""
    num_type: str = ""
    num: str = ""


class Address(OdbModel):
    zip: str = ""
    country: str = ""
    address: str = ""
    parts: AddressParts = Field(default_factory=AddressParts)


class TaxDepartment(OdbModel):
    tax_department_id: int = 0
    c_reg: int = Field(default=0, alias="C_REG")
    c_dst: int = Field(default=0, alias="C_DST")
    c_raj: int = Field(default=0, alias="C_RAJ")
    name_raj: str = Field(default="", alias="NAME_RAJ")
    t_sti: int = Field(default=0, alias="T_STI")
    name_sti: str = Field(default="", alias="NAME_STI")
    c_sti: int = Field(default=0, alias="C_STI")
    code: int = 0
    koatuu_code: str = ""
    region_tax_department_code: int = 0


class TaxRequisite(OdbModel):
    type: str = ""
    koatuu_obl: str = ""
    koatuu: str = ""
    location: str = ""
    recipient: str = ""
    code: int = 0
    bank: str = ""
    mfo: int = 0
    iban: str = ""
    tax_code: int = 0


class FopDpa(OdbModel):
    code: str = ""
    full_name: str = ""
    status: str = ""
    phones: list[str] = []
    email: str = ""
    registration_date: str = ""
    registration_number: str = ""
    last_date: str = ""
    birth_date: str = ""
    sex: str = ""
    activities: str = ""
    additionally_activities: list[str] = []
    activity_kinds: list[ActivityKind] = []
    registrations: list[AuthorityRegistration] = []
    registration: RegistrationRecord = Field(default_factory=RegistrationRecord)
    termination: Termination = Field(default_factory=Termination)
    termination_cancel: TerminationCancel = Field(default_factory=TerminationCancel)
    history: list[DatedChanges] = []
    pdv_code: str = ""
    pdv_status: str = ""
    tax_debts: TaxDebts = Field(default_factory=TaxDebts)
    singletax: SingletaxStatus = Field(default_factory=SingletaxStatus)
    singletax_risk: Notice = Field(default_factory=Notice)
    address: Address = Field(default_factory=Address)
    tax_departments: TaxDepartment = Field(default_factory=TaxDepartment)
    tax_requisites: list[TaxRequisite] = []


# --- legal entities ---


class Beneficiary(OdbModel):
    title: str = ""
    capital: int = 0
    location: str = ""


class CompanyData(OdbModel):
    full_name: str = ""
    short_name: str = ""
    code: str = ""
    ceo_name: str = ""
    location: str = ""
    activities: str = ""
    status: str = ""
    beneficiaries: list[Beneficiary] = []
    database_date: str = ""
    pdv_code: str = ""
    pdv_status: str = ""


class ChangeData(OdbModel):
    code: str = ""
    items: list[DatedChanges] = []


class Wagedebt(OdbModel):
    code: str = ""
    debt: str = ""
    penalties_count: str = ""
    name: str = ""
    database_date: str = ""
    active: int = 0


class AuditData(OdbModel):
    audit_id: str = ""
    code: str = ""
    date: str = ""
    type: str = ""
    pib: str = ""


class RegistrationSummary(OdbModel):
    id: str = ""
    type: str = ""  # "1" legal entity, "2" sole proprietor
    full_name: str = ""
    activity: str = ""
    registration_date: str = ""
    region_id: int = 0


class Registrations(OdbModel):
    count: int = 0
    items: list[RegistrationSummary] = []


class Registration(OdbModel):
    code: str = ""
    full_name: str = ""
    short_name: str = ""
    location: str = ""
    ceo_name: str = ""
    activity: str = ""
    status: str = ""
    email: str = ""
    phones: str = ""
    registration_date: str = ""
    capital: str = ""
    type: str = ""
    region_id: int = 0


class Inspection(OdbModel):
    id: str = ""
    code: str = ""
    name: str = ""
    address: str = ""
    region: str = ""
    status: str = ""
    risk: str = ""
    last_modify: str = ""
    date_start: str = ""
    date_end: str = ""
    regulator: str = ""
    parent_regulator: str = ""
    activity_type: str = ""
    database_date: str = ""
    violations_count: str = ""
    parts_count: str = ""


class InspectionsData(OdbModel):
    count: int = 0
    items: list[Inspection] = []


class Inspections(StatusEnvelope):
    data: InspectionsData = Field(default_factory=InspectionsData)


class InspectionItem(StatusEnvelope):
    data: Inspection = Field(default_factory=Inspection)


class PdfLink(OdbModel):
    link: str = ""


class Pdf(StatusEnvelope):
    data: PdfLink = Field(default_factory=PdfLink)


class Permit(OdbModel):
    number: str = ""
    type: str = ""
    subtype: str = ""
    start_date: str = ""
    end_date: str = ""
    renewal_date: str = ""
    pause_date: str = ""
    cancelation_date: str = ""
    active: int = 0
    address: str = ""
    registration_date: str = ""


class PermitsData(OdbModel):
    count: str = ""
    items: list[Permit] = []


class Permits(StatusEnvelope):
    data: PermitsData = Field(default_factory=PermitsData)


class SingletaxPayer(OdbModel):
    fop_hash: str = ""
    name: str = ""
    code: str = ""
    date_start: str = ""
    date_end: str = ""
    rate: str = ""
    group: str = ""
    active: bool = False


class SingletaxData(OdbModel):
    count: str = ""
    items: list[SingletaxPayer] = []


class Singletax(StatusEnvelope):
    data: SingletaxData = Field(default_factory=SingletaxData)


class VatPayer(OdbModel):
    pdv_code: str = ""
    pdv_status: str = ""
    date_anul: str = ""
    name: str = ""
    code: str = ""
    database_date: str = ""


class Vat(StatusEnvelope):
    data: VatPayer = Field(default_factory=VatPayer)
