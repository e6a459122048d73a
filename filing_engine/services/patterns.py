"""Static classification catalog.

Three declarative tables drive the classifiers:

1. ``FILENAME_PATTERNS`` - first-match-wins keyword table for filenames.
   Order matters: more specific patterns come before general ones that could
   falsely substring-match.
2. ``CONTENT_DETECTION_RULES`` - weighted phrase table for extracted text.
3. ``CHECKLIST_PATTERN_ALIASES`` - filename aliases per checklist concept.
"""

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from filing_engine.models.catalog import ContentDetectionRule, DocumentTypePattern


def _pattern(
    keywords: Sequence[str],
    file_type: str,
    category: str,
    folder: str,
    exclude_if: Sequence[str] = (),
) -> DocumentTypePattern:
    return DocumentTypePattern(
        keywords=tuple(keywords),
        file_type=file_type,
        category=category,
        folder=folder,
        exclude_if=tuple(exclude_if),
    )


def _rule(keywords: Sequence[str], file_type: str, weight: float) -> ContentDetectionRule:
    return ContentDetectionRule(keywords=tuple(keywords), file_type=file_type, weight=weight)


# ---------------------------------------------------------------------------
# Filename patterns
# ---------------------------------------------------------------------------

FILENAME_PATTERNS: Tuple[DocumentTypePattern, ...] = (
    # KYC - identity (client level)
    _pattern(["passport", "biodata", "travel document", "mrz"], "Passport", "KYC", "kyc",
             exclude_if=["photo", "background", "template", "guide", "instructions"]),
    _pattern(["driver", "driving", "license", "licence", "dvla"], "Driving License", "KYC", "kyc",
             exclude_if=["software", "directions", "template", "guide", "manual", "key"]),
    _pattern(["proof of id", "proofofid", "poi", "id card", "national id", "identification",
              "id document", "iddoc"], "ID Document", "KYC", "kyc"),

    # KYC - address
    _pattern(["proof of address", "proofofaddress", "poa", "address proof"],
             "Proof of Address", "KYC", "kyc"),
    _pattern(["utility bill", "gas bill", "electric bill", "electricity bill", "water bill",
              "council tax"], "Utility Bill", "KYC", "kyc"),

    # KYC - financial
    _pattern(["bank statement", "bankstatement", "business statement", "personal statement",
              "account statement", "current account"], "Bank Statement", "KYC", "kyc"),
    _pattern(["assets", "liabilities", "net worth", "a&l", "statement of affairs"],
             "Assets & Liabilities Statement", "KYC", "kyc"),
    _pattern(["application form", "loan application", "finance application"],
             "Application Form", "KYC", "kyc"),
    _pattern(["track record", "trackrecord", "cv ", "resume", "curriculum vitae", "developer cv"],
             "Track Record", "KYC", "kyc"),
    _pattern(["company search", "companies house", "ch search"], "Company Search", "KYC", "kyc"),
    _pattern(["certificate of incorporation", "incorporation", "company certificate"],
             "Certificate of Incorporation", "KYC", "kyc"),
    _pattern(["tax return", "sa302", "tax computation", "corporation tax"],
             "Tax Return", "Financial Documents", "kyc"),

    # Appraisals (project level)
    _pattern(["valuation", "red book", "redbook", "rics", "market value"],
             "RedBook Valuation", "Appraisals", "appraisals",
             exclude_if=["methodology", "guide", "template", "manual", "training", "instructions"]),
    _pattern(["appraisal", "development appraisal", "feasibility", "residual"],
             "Appraisal", "Appraisals", "appraisals"),
    _pattern(["cashflow", "cash flow", "dcf"], "Cashflow", "Appraisals", "appraisals"),
    _pattern(["comparables", "comps", "comparable evidence", "market evidence"],
             "Comparables", "Professional Reports", "appraisals"),

    # Plans
    _pattern(["floor plan", "floorplan", "floorplans"], "Floor Plans", "Plans", "background",
             exclude_if=["discussion", "notes", "meeting", "template", "guide", "review"]),
    _pattern(["elevation", "elevations"], "Elevations", "Plans", "background"),
    _pattern(["section", "sections", "cross section"], "Sections", "Plans", "background"),
    _pattern(["site plan", "siteplan", "site layout"], "Site Plans", "Plans", "background"),
    _pattern(["location plan", "ordnance survey", "os map"], "Location Plans", "Plans", "background"),

    # Inspections
    _pattern(["initial monitoring", "imr", "pre-funding monitoring", "initial report"],
             "Initial Monitoring Report", "Inspections", "credit_submission"),
    _pattern(["interim monitoring", "monitoring report", "ims report", "progress report",
              "monthly monitoring", "qs report"],
             "Interim Monitoring Report", "Inspections", "credit_submission"),

    # Professional reports
    _pattern(["planning decision", "planning permission", "decision notice", "planning notice",
              "planning approval", "planning consent"],
             "Planning Documentation", "Professional Reports", "background"),
    _pattern(["contract sum analysis", "csa", "cost plan", "construction budget", "build cost"],
             "Contract Sum Analysis", "Professional Reports", "credit_submission"),
    _pattern(["building survey", "structural survey", "condition report", "survey report"],
             "Building Survey", "Professional Reports", "credit_submission"),
    _pattern(["report on title", "title report", "certificate of title", "rot"],
             "Report on Title", "Professional Reports", "credit_submission"),
    _pattern(["legal opinion", "legal advice", "counsel opinion"],
             "Legal Opinion", "Professional Reports", "credit_submission"),
    _pattern(["environmental", "phase 1", "phase 2", "contamination", "environmental search"],
             "Environmental Report", "Professional Reports", "credit_submission"),
    _pattern(["local authority search", "local search", "council search", "la search"],
             "Local Authority Search", "Professional Reports", "credit_submission"),

    # Loan terms
    _pattern(["indicative terms", "heads of terms", "hot", "initial terms"],
             "Indicative Terms", "Loan Terms", "terms_comparison"),
    _pattern(["credit backed terms", "credit approved", "approved terms", "cbt"],
             "Credit Backed Terms", "Loan Terms", "terms_comparison"),
    _pattern(["term sheet", "termsheet"], "Term Sheet", "Loan Terms", "terms_comparison"),

    # Legal documents
    _pattern(["facility letter", "facility agreement", "loan agreement"],
             "Facility Letter", "Legal Documents", "post_completion"),
    _pattern(["personal guarantee", "pg "], "Personal Guarantee", "Legal Documents", "post_completion"),
    _pattern(["corporate guarantee", "company guarantee"],
             "Corporate Guarantee", "Legal Documents", "post_completion"),
    # "sha " is broad enough to catch share charges; keep Share Charge first.
    _pattern(["share charge", "sharecharge"], "Share Charge", "Legal Documents", "post_completion"),
    _pattern(["shareholders agreement", "sha ", "jv agreement"],
             "Shareholders Agreement", "Legal Documents", "post_completion"),
    _pattern(["debenture", "fixed charge", "floating charge"], "Debenture", "Legal Documents", "post_completion"),
    _pattern(["board resolution", "corporate resolution", "authorization", "authorisation"],
             "Corporate Authorisations", "Legal Documents", "post_completion"),
    _pattern(["building contract", "construction contract", "jct"],
             "Building Contract", "Legal Documents", "credit_submission"),
    _pattern(["professional appointment", "architect appointment", "consultant appointment"],
             "Professional Appointment", "Legal Documents", "credit_submission"),
    _pattern(["collateral warranty", "third party warranty"],
             "Collateral Warranty", "Legal Documents", "post_completion"),
    _pattern(["title deed", "land registry", "registered title"], "Title Deed", "Legal Documents", "background"),
    _pattern(["lease", "tenancy agreement", "rental agreement"], "Lease", "Legal Documents", "background"),

    # Project documents
    _pattern(["accommodation schedule", "unit schedule", "unit mix"],
             "Accommodation Schedule", "Project Documents", "background"),
    _pattern(["build programme", "construction programme", "gantt", "project timeline"],
             "Build Programme", "Project Documents", "credit_submission"),
    _pattern(["specification", "spec", "construction spec"], "Specification", "Project Documents", "background"),
    _pattern(["tender", "bid", "contractor tender", "quotation"], "Tender", "Project Documents", "credit_submission"),
    _pattern(["cgi", "render", "renders", "visualisation", "visualization"],
             "CGI/Renders", "Project Documents", "background"),

    # Financial documents
    _pattern(["loan statement", "facility statement"], "Loan Statement", "Financial Documents", "post_completion"),
    _pattern(["redemption statement", "payoff statement", "settlement figure"],
             "Redemption Statement", "Financial Documents", "post_completion"),
    _pattern(["completion statement", "closing statement"],
             "Completion Statement", "Financial Documents", "post_completion"),
    _pattern(["invoice", "inv "], "Invoice", "Financial Documents", "credit_submission",
             exclude_if=["template", "guide", "blank", "sample", "example"]),
    _pattern(["receipt", "payment receipt"], "Receipt", "Financial Documents", "credit_submission"),

    # Insurance
    _pattern(["insurance policy", "policy document"], "Insurance Policy", "Insurance", "credit_submission"),
    _pattern(["insurance certificate", "certificate of insurance", "coi"],
             "Insurance Certificate", "Insurance", "credit_submission"),

    # Communications
    _pattern(["email", "correspondence", "re:", "fwd:"],
             "Email/Correspondence", "Communications", "background_docs"),
    _pattern(["meeting minutes", "minutes", "meeting notes"], "Meeting Minutes", "Communications", "notes"),

    # Warranties
    _pattern(["nhbc", "buildmark", "new home warranty"], "NHBC Warranty", "Warranties", "post_completion"),
    _pattern(["latent defects", "ldi", "structural warranty", "defects insurance"],
             "Latent Defects Insurance", "Warranties", "post_completion"),

    # Photographs
    _pattern(["photo", "photograph", "site photo", "progress photo"],
             "Site Photographs", "Photographs", "background"),
)


# ---------------------------------------------------------------------------
# Content detection rules
# ---------------------------------------------------------------------------

CONTENT_DETECTION_RULES: Tuple[ContentDetectionRule, ...] = (
    # Identity
    _rule(["passport", "biodata", "mrz", "travel document"], "Passport", 10),
    _rule(["driving licence", "driving license", "dvla", "driver license"], "Driving License", 10),
    _rule(["national id", "id card", "identity card"], "ID Document", 8),
    # Address
    _rule(["council tax", "utility bill", "gas bill", "electricity bill", "water bill"], "Utility Bill", 10),
    _rule(["proof of address"], "Proof of Address", 8),
    # Financial
    _rule(["bank statement", "account statement", "transaction history", "balance summary",
           "current account"], "Bank Statement", 10),
    _rule(["assets and liabilities", "net worth", "asset schedule"], "Assets & Liabilities Statement", 10),
    _rule(["track record", "development history", "project portfolio", "curriculum vitae",
           "completed projects"], "Track Record", 10),
    # Valuations and appraisals
    _rule(["rics", "red book", "valuation report", "property valuation", "market value assessment"],
          "RedBook Valuation", 12),
    _rule(["development appraisal", "feasibility", "residual valuation", "gross development value",
           "profit on cost"], "Appraisal", 11),
    # Plans
    _rule(["floor plan", "floorplan", "internal layout", "room layout"], "Floor Plans", 10),
    _rule(["elevation drawing", "elevation", "front elevation", "rear elevation", "external appearance"],
          "Elevations", 10),
    _rule(["site plan", "plot layout", "building footprint"], "Site Plans", 10),
    _rule(["location plan", "ordnance survey", "os map"], "Location Plans", 10),
    # Planning
    _rule(["planning decision", "planning permission", "decision notice", "approval granted",
           "planning consent"], "Planning Documentation", 12),
    # Monitoring
    _rule(["monitoring report", "ims report", "construction progress", "build progress",
           "site inspection"], "Interim Monitoring Report", 11),
    # Terms and legal
    _rule(["term sheet", "indicative terms", "loan terms", "proposed terms"], "Term Sheet", 10),
    _rule(["facility letter", "facility agreement", "loan agreement", "credit facility"], "Facility Letter", 10),
    _rule(["personal guarantee", "guarantor unconditionally"], "Personal Guarantee", 10),
    _rule(["debenture", "fixed charge", "floating charge"], "Debenture", 10),
    _rule(["share charge", "charge over shares"], "Share Charge", 10),
)


# ---------------------------------------------------------------------------
# Checklist aliases
# ---------------------------------------------------------------------------

CHECKLIST_PATTERN_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "proof of address": ("poa", "proof of address", "proofofaddress", "address proof", "utility",
                         "utility bill", "bank statement"),
    "proof of id": ("poi", "proof of id", "proofofid", "id proof", "passport", "drivers license",
                    "driving license", "id doc", "identification", "biodata", "id card", "national id"),
    "bank statement": ("bank statement", "bankstatement", "bank", "statement", "bs"),
    "assets & liabilities": ("assets", "liabilities", "a&l", "al statement", "assets and liabilities",
                             "net worth"),
    "track record": ("track record", "trackrecord", "cv", "resume", "experience", "portfolio"),
    "appraisal": ("appraisal", "feasibility", "development appraisal", "da"),
    "valuation": ("valuation", "val", "red book", "redbook", "rics"),
    "floorplan": ("floorplan", "floor plan", "floorplans", "floor plans", "fp"),
    "elevation": ("elevation", "elevations", "elev"),
    "site plan": ("site plan", "siteplan", "sp", "site layout"),
    "planning": ("planning", "planning decision", "planning permission", "pp"),
    "monitoring": ("monitoring", "ims", "monitoring report", "ms report"),
    "personal guarantee": ("pg", "personal guarantee", "guarantee"),
    "facility": ("facility", "facility letter", "fa", "loan agreement"),
    "debenture": ("debenture", "deb"),
    "share charge": ("share charge", "sharecharge", "sc"),
})
