"""URL templates relative to the API base (``https://opendatabot.com/api/v2``)."""

# companies and sole proprietors
GOVERNMENT_COMPANIES = "/government-companies"
DPA = "/dpa/{}"
COMPANY = "/company/{}"
CHANGES = "/changed/{}"
WAGEDEBT = "/wagedebt/{}"
AUDIT = "/audit"
AUDIT_BY_ID = "/audit/{}"
REGISTRATIONS = "/registrations"
REGISTRATION_BY_ID = "/registrations/{}"
INSPECTIONS = "/inspections"
INSPECTION_BY_ID = "/inspections/{}"
PDF = "/pdf/{}"
PERMITS = "/permits"
SINGLETAX = "/singletax"
VAT = "/vat"

# court register
COURT = "/court"
INSTITUTIONS = "/institutions"
COURT_BY_ID = "/court/{}"
SCHEDULE = "/schedule"
ACCUSED = "/accused"
SCHEDULE_BY_ID = "/schedule/{}"
COMPANY_COURTS = "/company-courts"
COMPANY_COURTS_BY_TYPE = "/company-courts/{}"
COURT_CASES = "/court-cases/{}"

# transport
TRANSPORT = "/transport"
TRANSPORT_BY_ID = "/transport/{}"
TRANSPORT_LICENSES = "/transport-licenses"
TRANSPORT_LICENSES_BY_ID = "/transport-licenses/{}"

# API account
GEN_KEY = "/genKey"
STATISTICS = "/statistics"

# persons
ALIMENT = "/aliment"
LAWYERS = "/lawyers"
LAWYER_BY_ID = "/lawyers/{}"
CORRUPT_OFFICIALS = "/corrupt-officials"
CORRUPT_OFFICIAL_BY_ID = "/corrupt-officials/{}"
PASSPORT = "/passport"
WANTED = "/wanted"

# enforcement proceedings
FULL_PENALTY_BY_NUMBER = "/full-penalty/{}"
FULL_PENALTY_DOC_BY_NUMBER = "/full-penalty-doc/{}"
FULL_PENALTY = "/full-penalty"
PERFORMER = "/performer"
PENALTIES_BY_CODE = "/penalties/{}"
PENALTY_BY_NUMBER = "/penalty/{}"
PENALTIES = "/penalties"

# KOATUU
KOATUU_REGIONS = "/koatuu/regions"
KOATUU_REGION_BY_CODE = "/koatuu/regions/{}"

# realty
REALTY = "/realty"
REALTY_BY_ID = "/realty/{}/{}"
REALTY_RESULT = "/realty-result"
REALTY_REPORT_BY_NUMBER = "/realty-report/{}"

# business monitoring
TIMELINE = "/timeline"
