from __future__ import annotations

from datetime import date
from typing import Any, Mapping, TypeVar

from . import endpoints as ep
from .config_types import ClientConfig, Option, build_config
from .decode import decode
from .models import (
    Accused,
    Aliments,
    AuditData,
    ChangeData,
    CompanyCourts,
    CompanyCourtsDetail,
    CompanyData,
    CorruptOfficialItem,
    CorruptOfficials,
    CourtCase,
    CourtDecisions,
    CourtItem,
    FopDpa,
    FullPenalties,
    FullPenaltyDoc,
    GenKey,
    GovernmentCompany,
    InspectionItem,
    Inspections,
    Institutions,
    Koatuu,
    KoatuuRegions,
    Lawyer,
    Lawyers,
    Passport,
    Pdf,
    Penalties,
    PenaltiesByName,
    PenaltyItem,
    Performers,
    Permits,
    Realty,
    RealtyItem,
    RealtyReport,
    RealtyResult,
    Registration,
    Registrations,
    Schedule,
    ScheduleItem,
    Singletax,
    Statistics,
    Timeline,
    TransportItem,
    TransportLicenseItem,
    TransportLicenses,
    Transports,
    Vat,
    Wagedebt,
    Wanted,
)
from .params import (
    AccusedParams,
    AlimentParams,
    AuditParams,
    ChangesParams,
    CompanyCourtsParams,
    CourtCasesParams,
    CourtParams,
    FullPenaltyByNumberParams,
    FullPenaltyParams,
    InstitutionsParams,
    LawyersParams,
    PenaltiesByCodeParams,
    PenaltiesParams,
    PerformerParams,
    PermitsParams,
    QueryParams,
    RealtyParams,
    RegistrationsParams,
    ScheduleParams,
    SingletaxParams,
    StartPageParams,
    TimelineParams,
    TransportLicensesParams,
    TransportsParams,
    VatParams,
)
from .query import encode_query, format_value
from .request_spec import RequestSpec
from .resolve import join_url, resolve_endpoint
from .transport import Transport

T = TypeVar("T")


class OdbClient:
    def __init__(self, *options: Option):
        self._cfg = build_config(*options)
        self._t = Transport(self._cfg)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> OdbClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def do(self, spec: RequestSpec[T]) -> T:
        """Validate, send and decode one request.

        Input problems raise ``ValidationError`` before anything is sent.
        """
        spec.check(self._cfg.api_key)
        path = resolve_endpoint(spec.template, *spec.path_args)
        url = encode_query(join_url(self._cfg.base_url, path), spec.params, self._cfg.api_key)
        raw = self._t.execute(url)
        return decode(raw, spec.result_type)

    def _get(
            self,
            template: str,
            result_type: Any,
            *,
            path: Mapping[str, Any] | None = None,
            fixed: Mapping[str, Any] | None = None,
            params: QueryParams | None = None,
            requires_api_key: bool = True,
    ):
        path = dict(path or {})
        fixed = dict(fixed or {})
        query = params.to_query() if params is not None else {}
        # explicit arguments win over the same key in the params model
        query.update({k: format_value(v) for k, v in fixed.items() if v is not None})
        spec = RequestSpec(
            template,
            result_type,
            path_args=tuple("" if v is None else str(v) for v in path.values()),
            params=query,
            required={**path, **fixed},
            requires_api_key=requires_api_key,
        )
        return self.do(spec)

    # --- companies and sole proprietors ---
    def get_government_company(self, code: str) -> GovernmentCompany:
        return self._get(ep.GOVERNMENT_COMPANIES, GovernmentCompany, fixed={"code": code})

    def get_dpa(self, code: str) -> FopDpa:
        return self._get(ep.DPA, FopDpa, path={"code": code})

    def get_company(self, code: str) -> list[CompanyData]:
        return self._get(ep.COMPANY, list[CompanyData], path={"code": code})

    def get_changes(self, code: str, params: ChangesParams | None = None) -> list[ChangeData]:
        return self._get(ep.CHANGES, list[ChangeData], path={"code": code}, params=params)

    def get_wagedebt(self, code: str) -> Wagedebt:
        return self._get(ep.WAGEDEBT, Wagedebt, path={"code": code})

    def get_audit(self, params: AuditParams | None = None) -> list[AuditData]:
        return self._get(ep.AUDIT, list[AuditData], params=params)

    def get_audit_by_id(self, id: str) -> list[AuditData]:
        return self._get(ep.AUDIT_BY_ID, list[AuditData], path={"id": id})

    def get_registrations(self, params: RegistrationsParams | None = None) -> Registrations:
        return self._get(ep.REGISTRATIONS, Registrations, params=params)

    def get_registration_by_id(self, id: str) -> Registration:
        return self._get(ep.REGISTRATION_BY_ID, Registration, path={"id": id})

    def get_inspections(self, code: str) -> Inspections:
        return self._get(ep.INSPECTIONS, Inspections, fixed={"code": code})

    def get_inspection_by_id(self, id: str) -> InspectionItem:
        return self._get(ep.INSPECTION_BY_ID, InspectionItem, path={"id": id})

    def get_pdf(self, code: str) -> Pdf:
        return self._get(ep.PDF, Pdf, path={"code": code})

    def get_permits(self, params: PermitsParams | None = None) -> Permits:
        return self._get(ep.PERMITS, Permits, params=params)

    def get_singletax(self, params: SingletaxParams | None = None) -> Singletax:
        return self._get(ep.SINGLETAX, Singletax, params=params)

    def get_vat(self, params: VatParams | None = None) -> Vat:
        return self._get(ep.VAT, Vat, params=params)

    # --- courts ---
    def get_court(self, params: CourtParams | None = None) -> CourtDecisions:
        return self._get(ep.COURT, CourtDecisions, params=params)

    def get_institutions(self, params: InstitutionsParams | None = None) -> Institutions:
        return self._get(ep.INSTITUTIONS, Institutions, params=params, requires_api_key=False)

    def get_court_by_id(self, id: str) -> CourtItem:
        return self._get(ep.COURT_BY_ID, CourtItem, path={"id": id})

    def get_schedule(self, params: ScheduleParams | None = None) -> Schedule:
        return self._get(ep.SCHEDULE, Schedule, params=params)

    def get_accused(self, params: AccusedParams | None = None) -> Accused:
        return self._get(ep.ACCUSED, Accused, params=params)

    def get_schedule_by_id(self, id: str) -> ScheduleItem:
        return self._get(ep.SCHEDULE_BY_ID, ScheduleItem, path={"id": id})

    def get_company_courts(self, code: str) -> CompanyCourts:
        return self._get(ep.COMPANY_COURTS, CompanyCourts, fixed={"code": code})

    def get_company_courts_by_type(
            self,
            courts_type: str,
            code: str,
            params: CompanyCourtsParams | None = None,
    ) -> CompanyCourtsDetail:
        return self._get(
            ep.COMPANY_COURTS_BY_TYPE,
            CompanyCourtsDetail,
            path={"courts_type": courts_type},
            fixed={"code": code},
            params=params,
        )

    def get_court_cases(self, number: str, params: CourtCasesParams | None = None) -> CourtCase:
        return self._get(ep.COURT_CASES, CourtCase, path={"number": number}, params=params)

    # --- transport ---
    def get_transports(self, params: TransportsParams | None = None) -> Transports:
        return self._get(ep.TRANSPORT, Transports, params=params)

    def get_transport_by_id(self, id: str) -> TransportItem:
        return self._get(ep.TRANSPORT_BY_ID, TransportItem, path={"id": id})

    def get_transport_licenses(self, params: TransportLicensesParams | None = None) -> TransportLicenses:
        return self._get(ep.TRANSPORT_LICENSES, TransportLicenses, params=params)

    def get_transport_license_by_id(self, id: str) -> TransportLicenseItem:
        return self._get(ep.TRANSPORT_LICENSES_BY_ID, TransportLicenseItem, path={"id": id})

    # --- API account ---
    def get_gen_key(self, salt: str, id: str) -> GenKey:
        return self._get(ep.GEN_KEY, GenKey, fixed={"salt": salt, "id": id})

    def get_statistics(self) -> Statistics:
        return self._get(ep.STATISTICS, Statistics)

    # --- persons ---
    def get_aliment(self, pib: str, params: AlimentParams | None = None) -> Aliments:
        return self._get(ep.ALIMENT, Aliments, fixed={"pib": pib}, params=params)

    def get_lawyers(self, params: LawyersParams | None = None) -> Lawyers:
        return self._get(ep.LAWYERS, Lawyers, params=params)

    def get_lawyer_by_id(self, id: str) -> Lawyer:
        return self._get(ep.LAWYER_BY_ID, Lawyer, path={"id": id})

    def get_corrupt_official_by_id(self, id: str) -> CorruptOfficialItem:
        return self._get(ep.CORRUPT_OFFICIAL_BY_ID, CorruptOfficialItem, path={"id": id})

    def get_corrupt_officials(self, pib: str, params: StartPageParams | None = None) -> CorruptOfficials:
        return self._get(ep.CORRUPT_OFFICIALS, CorruptOfficials, fixed={"pib": pib}, params=params)

    def get_passport(self, number: str) -> Passport:
        return self._get(ep.PASSPORT, Passport, fixed={"number": number})

    def get_wanted(self, pib: str, params: StartPageParams | None = None) -> Wanted:
        return self._get(ep.WANTED, Wanted, fixed={"pib": pib}, params=params)

    # --- enforcement proceedings ---
    def get_full_penalty_by_number(
            self,
            number: str,
            params: FullPenaltyByNumberParams | None = None,
    ) -> FullPenalties:
        return self._get(ep.FULL_PENALTY_BY_NUMBER, FullPenalties, path={"number": number}, params=params)

    def get_full_penalty_doc_by_number(self, number: str, secret: str) -> FullPenaltyDoc:
        return self._get(
            ep.FULL_PENALTY_DOC_BY_NUMBER,
            FullPenaltyDoc,
            path={"number": number},
            fixed={"secret": secret},
        )

    def get_full_penalty(self, params: FullPenaltyParams | None = None) -> FullPenalties:
        return self._get(ep.FULL_PENALTY, FullPenalties, params=params)

    def get_performer(self, params: PerformerParams | None = None) -> Performers:
        return self._get(ep.PERFORMER, Performers, params=params)

    def get_penalties_by_code(self, code: str, params: PenaltiesByCodeParams | None = None) -> Penalties:
        return self._get(ep.PENALTIES_BY_CODE, Penalties, path={"code": code}, params=params)

    def get_penalty_by_number(self, number: str) -> PenaltyItem:
        return self._get(ep.PENALTY_BY_NUMBER, PenaltyItem, path={"number": number})

    def get_penalties(
            self,
            first_name: str,
            last_name: str,
            birth_date: date | str,
            params: PenaltiesParams | None = None,
    ) -> PenaltiesByName:
        return self._get(
            ep.PENALTIES,
            PenaltiesByName,
            fixed={"first_name": first_name, "last_name": last_name, "birth_date": birth_date},
            params=params,
        )

    # --- KOATUU ---
    def get_koatuu_regions(self) -> KoatuuRegions:
        return self._get(ep.KOATUU_REGIONS, KoatuuRegions, requires_api_key=False)

    def get_koatuu_region_by_code(self, code: str) -> Koatuu:
        return self._get(ep.KOATUU_REGION_BY_CODE, Koatuu, path={"code": code}, requires_api_key=False)

    # --- realty ---
    def get_realty(self, code: str, params: RealtyParams | None = None) -> Realty:
        return self._get(ep.REALTY, Realty, fixed={"code": code}, params=params)

    def get_realty_by_id(self, report_result_id: str, id: str) -> RealtyItem:
        return self._get(
            ep.REALTY_BY_ID,
            RealtyItem,
            path={"report_result_id": report_result_id, "id": id},
        )

    def get_realty_result(self, result_id: str) -> RealtyResult:
        return self._get(ep.REALTY_RESULT, RealtyResult, fixed={"resultId": result_id})

    def get_realty_report_by_number(self, number: str) -> RealtyReport:
        return self._get(ep.REALTY_REPORT_BY_NUMBER, RealtyReport, path={"number": number})

    # --- business monitoring ---
    def get_timeline(self, params: TimelineParams | None = None) -> Timeline:
        return self._get(ep.TIMELINE, Timeline, params=params)
