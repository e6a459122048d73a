"""Document type -> category -> folder mapping.

This is the authoritative table that decides, for each canonical document
type, its category, the folder it is filed to and whether that folder lives
at client or project level.

Folder keys reference the starter templates in ``folder_templates``:

Client level:
- kyc: KYC documents (nested under background)
- background_docs: background documentation (nested under background)
- miscellaneous: unclassified files

Project level:
- background, terms_comparison, terms_request, credit_submission,
  post_completion, appraisals, notes, operational_model
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from filing_engine.models.catalog import DocumentTypeMapping

CLIENT_FOLDER_KEYS = frozenset({"background", "kyc", "background_docs", "miscellaneous"})
PROJECT_FOLDER_KEYS = frozenset({
    "background",
    "terms_comparison",
    "terms_request",
    "credit_submission",
    "post_completion",
    "appraisals",
    "notes",
    "operational_model",
})

DEFAULT_FOLDER = "miscellaneous"
DEFAULT_LEVEL = "client"


def _mapping(file_type: str, category: str, folder: str, level: str, description: str,
             keywords: Tuple[str, ...]) -> DocumentTypeMapping:
    return DocumentTypeMapping(
        file_type=file_type,
        category=category,
        folder=folder,
        level=level,
        description=description,
        keywords=keywords,
    )


DOCUMENT_TYPE_MAPPINGS: Tuple[DocumentTypeMapping, ...] = (
    # KYC - client level
    _mapping("Passport", "KYC", "kyc", "client",
             "Government-issued passport for identity verification",
             ("passport", "biodata", "travel document", "mrz")),
    _mapping("Driving License", "KYC", "kyc", "client",
             "Government-issued driving license",
             ("driving licence", "driving license", "driver", "dvla", "license", "licence")),
    _mapping("ID Document", "KYC", "kyc", "client",
             "Generic identity document (national ID, etc.)",
             ("proof of id", "proofofid", "poi", "id card", "national id", "identification")),
    _mapping("Proof of Address", "KYC", "kyc", "client",
             "Generic proof of address document",
             ("proof of address", "proofofaddress", "poa", "address proof")),
    _mapping("Utility Bill", "KYC", "kyc", "client",
             "Utility bill for address verification",
             ("utility bill", "gas bill", "electric bill", "electricity bill", "water bill", "council tax")),
    _mapping("Bank Statement", "KYC", "kyc", "client",
             "Bank statement for financial verification",
             ("bank statement", "bankstatement", "business statement", "personal statement",
              "account statement", "current account")),
    _mapping("Assets & Liabilities Statement", "KYC", "kyc", "client",
             "Statement of personal/company assets and liabilities",
             ("assets", "liabilities", "net worth", "a&l", "statement of affairs")),
    _mapping("Application Form", "KYC", "kyc", "client",
             "Loan or finance application form",
             ("application form", "loan application", "finance application")),
    _mapping("Track Record", "KYC", "kyc", "client",
             "Developer track record / CV showing previous projects",
             ("track record", "cv", "resume", "curriculum vitae", "development history")),
    _mapping("Company Search", "KYC", "kyc", "client",
             "Companies House search results",
             ("company search", "companies house", "company check", "ch search")),
    _mapping("Certificate of Incorporation", "KYC", "kyc", "client",
             "Company incorporation certificate",
             ("certificate of incorporation", "incorporation", "company certificate")),

    # Appraisals
    _mapping("Appraisal", "Appraisals", "appraisals", "project",
             "Development appraisal / feasibility study",
             ("appraisal", "development appraisal", "feasibility", "residual valuation")),
    _mapping("RedBook Valuation", "Appraisals", "appraisals", "project",
             "RICS Red Book valuation report",
             ("valuation", "red book", "redbook", "rics", "market value")),
    _mapping("Cashflow", "Appraisals", "appraisals", "project",
             "Cash flow projection or analysis",
             ("cashflow", "cash flow", "dcf", "discounted cash flow")),

    # Plans
    _mapping("Floor Plans", "Plans", "background", "project",
             "Architectural floor plans",
             ("floor plan", "floorplan", "floorplans", "internal layout")),
    _mapping("Elevations", "Plans", "background", "project",
             "Architectural elevation drawings",
             ("elevation", "elevations", "front elevation", "rear elevation")),
    _mapping("Sections", "Plans", "background", "project",
             "Architectural section drawings",
             ("section", "sections", "cross section")),
    _mapping("Site Plans", "Plans", "background", "project",
             "Site layout plans",
             ("site plan", "siteplan", "site layout", "plot plan")),
    _mapping("Location Plans", "Plans", "background", "project",
             "Site location / OS map plans",
             ("location plan", "ordnance survey", "os map")),

    # Inspections
    _mapping("Initial Monitoring Report", "Inspections", "credit_submission", "project",
             "Pre-funding monitoring surveyor report",
             ("initial monitoring", "imr", "pre-funding monitoring", "initial report")),
    _mapping("Interim Monitoring Report", "Inspections", "credit_submission", "project",
             "Monthly/interim progress monitoring report",
             ("interim monitoring", "monitoring report", "ims report", "progress report")),

    # Professional reports
    _mapping("Planning Documentation", "Professional Reports", "background", "project",
             "Planning permission, decision notices, consents",
             ("planning decision", "planning permission", "decision notice", "planning consent")),
    _mapping("Contract Sum Analysis", "Professional Reports", "credit_submission", "project",
             "Detailed construction cost breakdown",
             ("contract sum analysis", "csa", "cost plan", "construction budget")),
    _mapping("Comparables", "Professional Reports", "appraisals", "project",
             "Market comparable evidence",
             ("comparables", "comps", "comparable evidence", "market evidence")),
    _mapping("Building Survey", "Professional Reports", "credit_submission", "project",
             "Structural or condition survey",
             ("building survey", "structural survey", "condition report")),
    _mapping("Report on Title", "Professional Reports", "credit_submission", "project",
             "Solicitor report on property title",
             ("report on title", "title report", "certificate of title")),
    _mapping("Legal Opinion", "Professional Reports", "credit_submission", "project",
             "Legal advice letter or opinion",
             ("legal opinion", "legal advice", "counsel opinion")),
    _mapping("Environmental Report", "Professional Reports", "credit_submission", "project",
             "Phase 1/2 environmental assessment",
             ("environmental", "phase 1", "phase 2", "contamination")),
    _mapping("Local Authority Search", "Professional Reports", "credit_submission", "project",
             "Council/local authority searches",
             ("local authority search", "local search", "council search")),

    # Loan terms
    _mapping("Indicative Terms", "Loan Terms", "terms_comparison", "project",
             "Initial/indicative loan terms",
             ("indicative terms", "heads of terms", "initial terms")),
    _mapping("Credit Backed Terms", "Loan Terms", "terms_comparison", "project",
             "Credit-approved loan terms",
             ("credit backed terms", "credit approved", "approved terms")),
    _mapping("Term Sheet", "Loan Terms", "terms_comparison", "project",
             "Loan term sheet",
             ("term sheet", "termsheet")),

    # Legal documents
    _mapping("Facility Letter", "Legal Documents", "post_completion", "project",
             "Executed facility/loan agreement",
             ("facility letter", "facility agreement", "loan agreement")),
    _mapping("Personal Guarantee", "Legal Documents", "post_completion", "project",
             "Personal guarantee from directors/shareholders",
             ("personal guarantee", "pg", "guarantor")),
    _mapping("Corporate Guarantee", "Legal Documents", "post_completion", "project",
             "Corporate/company guarantee",
             ("corporate guarantee", "company guarantee")),
    _mapping("Terms & Conditions", "Legal Documents", "post_completion", "project",
             "Standard terms and conditions",
             ("terms and conditions", "t&c", "standard terms")),
    _mapping("Shareholders Agreement", "Legal Documents", "post_completion", "project",
             "Shareholders/JV agreement",
             ("shareholders agreement", "sha", "jv agreement")),
    _mapping("Share Charge", "Legal Documents", "post_completion", "project",
             "Charge over company shares",
             ("share charge", "sharecharge", "charge over shares")),
    _mapping("Debenture", "Legal Documents", "post_completion", "project",
             "Fixed and floating charge debenture",
             ("debenture", "fixed charge", "floating charge")),
    _mapping("Corporate Authorisations", "Legal Documents", "post_completion", "project",
             "Board resolutions and corporate authorizations",
             ("board resolution", "corporate resolution", "authorisation")),
    _mapping("Building Contract", "Legal Documents", "credit_submission", "project",
             "JCT or other construction contract",
             ("building contract", "construction contract", "jct")),
    _mapping("Professional Appointment", "Legal Documents", "credit_submission", "project",
             "Architect/QS/consultant appointment",
             ("professional appointment", "architect appointment")),
    _mapping("Collateral Warranty", "Legal Documents", "post_completion", "project",
             "Third party collateral warranty",
             ("collateral warranty", "third party warranty")),
    _mapping("Title Deed", "Legal Documents", "background", "project",
             "Land Registry title documents",
             ("title deed", "land registry", "registered title")),
    _mapping("Lease", "Legal Documents", "background", "project",
             "Lease or tenancy agreement",
             ("lease", "tenancy agreement", "rental agreement")),

    # Project documents
    _mapping("Accommodation Schedule", "Project Documents", "background", "project",
             "Unit/accommodation schedule",
             ("accommodation schedule", "unit schedule", "unit mix")),
    _mapping("Build Programme", "Project Documents", "credit_submission", "project",
             "Construction programme/timeline",
             ("build programme", "construction programme", "gantt")),
    _mapping("Specification", "Project Documents", "background", "project",
             "Construction specification document",
             ("specification", "spec", "construction spec")),
    _mapping("Tender", "Project Documents", "credit_submission", "project",
             "Contractor tender/bid",
             ("tender", "bid", "quotation")),
    _mapping("CGI/Renders", "Project Documents", "background", "project",
             "Marketing CGIs and renders",
             ("cgi", "render", "visualisation")),

    # Financial documents
    _mapping("Loan Statement", "Financial Documents", "post_completion", "project",
             "Loan account statement",
             ("loan statement", "facility statement")),
    _mapping("Redemption Statement", "Financial Documents", "post_completion", "project",
             "Loan redemption/payoff statement",
             ("redemption statement", "payoff statement", "settlement figure")),
    _mapping("Completion Statement", "Financial Documents", "post_completion", "project",
             "Transaction completion statement",
             ("completion statement", "closing statement")),
    _mapping("Invoice", "Financial Documents", "credit_submission", "project",
             "Contractor or professional fee invoice",
             ("invoice", "inv", "payment request")),
    _mapping("Receipt", "Financial Documents", "credit_submission", "project",
             "Payment receipt",
             ("receipt", "payment receipt", "proof of payment")),
    _mapping("Tax Return", "Financial Documents", "kyc", "client",
             "Personal or company tax return",
             ("tax return", "sa302", "tax computation", "corporation tax")),

    # Insurance
    _mapping("Insurance Policy", "Insurance", "credit_submission", "project",
             "Building, contractor, or liability insurance policy",
             ("insurance policy", "policy document")),
    _mapping("Insurance Certificate", "Insurance", "credit_submission", "project",
             "Certificate of insurance",
             ("insurance certificate", "certificate of insurance", "coi")),

    # Communications
    _mapping("Email/Correspondence", "Communications", "background_docs", "client",
             "Email threads and correspondence",
             ("email", "correspondence", "re:", "fwd:")),
    _mapping("Meeting Minutes", "Communications", "notes", "project",
             "Meeting notes and minutes",
             ("meeting minutes", "minutes", "meeting notes")),

    # Warranties
    _mapping("NHBC Warranty", "Warranties", "post_completion", "project",
             "NHBC Buildmark warranty",
             ("nhbc", "buildmark", "new home warranty")),
    _mapping("Latent Defects Insurance", "Warranties", "post_completion", "project",
             "Latent defects insurance (LDI) policy",
             ("latent defects", "ldi", "structural warranty")),

    # Photographs
    _mapping("Site Photographs", "Photographs", "background", "project",
             "Site photos and progress images",
             ("photo", "photograph", "site photo", "progress photo")),

    # Fallback
    _mapping("Other Document", "General", "miscellaneous", "client",
             "Unclassified document - needs review", ()),
)

_MAPPINGS_BY_TYPE: Mapping[str, DocumentTypeMapping] = MappingProxyType(
    {m.file_type.lower(): m for m in DOCUMENT_TYPE_MAPPINGS}
)

# Category -> folder, used when only the category is known.
CATEGORY_FOLDER_DEFAULTS: Mapping[str, Dict[str, str]] = MappingProxyType({
    "KYC": {"folder": "kyc", "level": "client"},
    "Appraisals": {"folder": "appraisals", "level": "project"},
    "Plans": {"folder": "background", "level": "project"},
    "Inspections": {"folder": "credit_submission", "level": "project"},
    "Professional Reports": {"folder": "credit_submission", "level": "project"},
    "Loan Terms": {"folder": "terms_comparison", "level": "project"},
    "Legal Documents": {"folder": "post_completion", "level": "project"},
    "Project Documents": {"folder": "background", "level": "project"},
    "Financial Documents": {"folder": "post_completion", "level": "project"},
    "Insurance": {"folder": "credit_submission", "level": "project"},
    "Communications": {"folder": "background_docs", "level": "client"},
    "Warranties": {"folder": "post_completion", "level": "project"},
    "Photographs": {"folder": "background", "level": "project"},
    "General": {"folder": "miscellaneous", "level": "client"},
    "Other": {"folder": "miscellaneous", "level": "client"},
})

_CATEGORY_DEFAULTS_LOWER: Mapping[str, Tuple[str, Dict[str, str]]] = MappingProxyType(
    {name.lower(): (name, info) for name, info in CATEGORY_FOLDER_DEFAULTS.items()}
)

# Canonical type -> checklist requirement IDs it normally satisfies.
TYPE_TO_CHECKLIST: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Passport": ("kyc-proof-of-id",),
    "Driving License": ("kyc-proof-of-id",),
    "ID Document": ("kyc-proof-of-id",),
    "Proof of Address": ("kyc-proof-of-address",),
    "Utility Bill": ("kyc-proof-of-address",),
    "Bank Statement": ("kyc-business-bank-statements", "kyc-personal-bank-statements"),
    "Assets & Liabilities Statement": ("kyc-assets-liabilities",),
    "Track Record": ("kyc-track-record-excel", "kyc-track-record-word"),
    "RedBook Valuation": ("project-valuation",),
    "Appraisal": ("project-appraisal",),
    "Floor Plans": ("project-floorplans",),
    "Elevations": ("project-elevations",),
    "Site Plans": ("project-site-plan",),
    "Location Plans": ("project-site-location-plan",),
    "Planning Documentation": ("project-planning-decision",),
    "Initial Monitoring Report": ("project-monitoring-report",),
    "Interim Monitoring Report": ("project-monitoring-report",),
    "Facility Letter": ("project-facility-letter",),
    "Personal Guarantee": ("project-personal-guarantee",),
    "Debenture": ("project-debenture",),
})


def get_type_mapping(file_type: str) -> Optional[DocumentTypeMapping]:
    """Get the complete mapping for a document type (case-insensitive)."""
    if not file_type:
        return None
    return _MAPPINGS_BY_TYPE.get(file_type.strip().lower())


def get_category_for_type(file_type: str, default: str = "Other") -> str:
    mapping = get_type_mapping(file_type)
    return mapping.category if mapping else default


def get_folder_for_category(category: str) -> Dict[str, str]:
    """Folder and level for a category; unknown categories go to miscellaneous."""
    entry = _CATEGORY_DEFAULTS_LOWER.get((category or "").strip().lower())
    if entry is None:
        return {"folder": DEFAULT_FOLDER, "level": DEFAULT_LEVEL}
    return dict(entry[1])


def find_category_default(category: str) -> Optional[Tuple[str, Dict[str, str]]]:
    """Return (canonical category name, folder info) for a known category."""
    entry = _CATEGORY_DEFAULTS_LOWER.get((category or "").strip().lower())
    if entry is None:
        return None
    return entry[0], dict(entry[1])


def get_checklist_ids_for_type(file_type: str) -> List[str]:
    return list(TYPE_TO_CHECKLIST.get(file_type, ()))


def get_types_for_category(category: str) -> List[DocumentTypeMapping]:
    wanted = (category or "").strip().lower()
    return [m for m in DOCUMENT_TYPE_MAPPINGS if m.category.lower() == wanted]


def get_all_categories() -> List[str]:
    return list(dict.fromkeys(m.category for m in DOCUMENT_TYPE_MAPPINGS))


def get_all_file_types() -> List[str]:
    return [m.file_type for m in DOCUMENT_TYPE_MAPPINGS]
