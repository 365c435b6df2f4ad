from .base import OdbModel, StatusEnvelope
from .companies import (
    AuditData,
    ChangeData,
    CompanyData,
    FopDpa,
    GovernmentCompany,
    InspectionItem,
    Inspections,
    Pdf,
    Permits,
    Registration,
    Registrations,
    Singletax,
    Vat,
    Wagedebt,
)
from .courts import (
    Accused,
    CompanyCourts,
    CompanyCourtsDetail,
    CourtCase,
    CourtDecisions,
    CourtItem,
    Institutions,
    Schedule,
    ScheduleItem,
)
from .koatuu import Koatuu, KoatuuRegions
from .penalties import FullPenalties, FullPenaltyDoc, Penalties, PenaltiesByName, PenaltyItem, Performers
from .persons import Aliments, CorruptOfficialItem, CorruptOfficials, Lawyer, Lawyers, Passport, Wanted
from .realty import Realty, RealtyItem, RealtyReport, RealtyResult
from .service import GenKey, Statistics
from .timeline import Timeline
from .transport import TransportItem, TransportLicenseItem, TransportLicenses, Transports

__all__ = [
    "OdbModel",
    "StatusEnvelope",
    "Accused",
    "Aliments",
    "AuditData",
    "ChangeData",
    "CompanyCourts",
    "CompanyCourtsDetail",
    "CompanyData",
    "CorruptOfficialItem",
    "CorruptOfficials",
    "CourtCase",
    "CourtDecisions",
    "CourtItem",
    "FopDpa",
    "FullPenalties",
    "FullPenaltyDoc",
    "GenKey",
    "GovernmentCompany",
    "InspectionItem",
    "Inspections",
    "Institutions",
    "Koatuu",
    "KoatuuRegions",
    "Lawyer",
    "Lawyers",
    "Passport",
    "Pdf",
    "Penalties",
    "PenaltiesByName",
    "PenaltyItem",
    "Performers",
    "Permits",
    "Realty",
    "RealtyItem",
    "RealtyReport",
    "RealtyResult",
    "Registration",
    "Registrations",
    "Schedule",
    "ScheduleItem",
    "Singletax",
    "Statistics",
    "Timeline",
    "TransportItem",
    "TransportLicenseItem",
    "TransportLicenses",
    "Transports",
    "Vat",
    "Wagedebt",
    "Wanted",
]
