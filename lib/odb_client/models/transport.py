from __future__ import annotations

from pydantic import Field

from .base import OdbModel, StatusEnvelope


class TransportRef(OdbModel):
    id: int = 0
    number: str = ""


class Transports(OdbModel):
    count: int = 0
    data: list[TransportRef] = []


class TransportItem(OdbModel):
    id: int = 0
    number: str = ""
    model: str = ""
    year: str = ""
    date: str = ""
    registration: str = ""
    capacity: int = 0
    owner_hash: str = ""
    color: str = ""
    kind: str = ""
    body: str = ""
    own_weight: int = 0
    reg_addr_koatuu: str = ""
    dep_code: str = ""
    dep: str = ""


class TransportLicense(OdbModel):
    id: int = 0
    number: str = ""
    license_status: str = ""
    license_issue_date: str = ""
    license_start_date: str = ""
    license_end_date: str = ""
    license_type: str = ""


class TransportLicensesData(OdbModel):
    count: int = 0
    items: list[TransportLicense] = []


class TransportLicenses(StatusEnvelope):
    data: TransportLicensesData = Field(default_factory=TransportLicensesData)


class TransportLicenseDetail(TransportLicense):
    carrier_name: str = ""
    owner_hash: str = ""
    transport_type: str = ""
    transport_status: str = ""
    transport_vendor: str = ""
    transport_model: str = ""
    transport_year: str = ""
    transport_seats: str = ""
    vin: str = ""
    code: str = ""


class TransportLicenseItem(StatusEnvelope):
    data: TransportLicenseDetail = Field(default_factory=TransportLicenseDetail)
