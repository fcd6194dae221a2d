"""Merge per-document extraction output into one ApplicantProfile.

For every profile field, FIELD_PRECEDENCE lists the (document, path) sources
in authority order; the first non-empty value wins. Values the applicant
confirmed by hand only fill fields no document supplied, and never count as
verified. Documents whose extraction did not succeed are ignored entirely.

Nothing here raises: malformed values are skipped and the field stays unknown.
"""

import logging
import re
from datetime import date
from typing import Any

from dateutil import parser
from dateutil.relativedelta import relativedelta

from models.schemas.applicant_profile import (
    ApplicantProfile,
    EducationInfo,
    ExperienceInfo,
    JobOfferInfo,
    LanguageInfo,
    MoneyInfo,
)
from models.schemas.extraction import DocumentType, RawExtraction
from services.scoring.levels import parse_education_level

logger = logging.getLogger(__name__)

D = DocumentType

FIELD_PRECEDENCE: dict[str, list[tuple[DocumentType, str]]] = {
    "education.level": [(D.DEGREE, "degree.level"), (D.DEGREE, "degree.fullTitle"), (D.RESUME, "education.level")],
    "education.field": [(D.DEGREE, "degree.field"), (D.RESUME, "education.field")],
    "education.institution": [(D.DEGREE, "institution.name"), (D.RESUME, "education.institution")],
    "experience.total_years": [(D.EMPLOYMENT_LETTER, "employment.totalYears"), (D.RESUME, "experience.totalYears")],
    "experience.current_role": [
        (D.EMPLOYMENT_LETTER, "employee.designation"),
        (D.RESUME, "experience.currentRole"),
        (D.SALARY_PROOF, "employee.designation"),
    ],
    "experience.current_company": [
        (D.EMPLOYMENT_LETTER, "employer.name"),
        (D.RESUME, "experience.currentCompany"),
        (D.SALARY_PROOF, "employer.name"),
    ],
    "salary.amount": [
        (D.JOB_OFFER, "compensation.baseSalary"),
        (D.SALARY_PROOF, "salary.annualized"),
        (D.SALARY_PROOF, "salary.gross"),
        (D.RESUME, "salary.current"),
    ],
    "funds.amount": [(D.FINANCIAL_PROOF, "balance.amount"), (D.FINANCIAL_PROOF, "totalFunds")],
    "age": [(D.PASSPORT, "holder.dateOfBirth"), (D.RESUME, "personalInfo.age")],
    "nationality": [(D.PASSPORT, "holder.nationality"), (D.RESUME, "personalInfo.nationality")],
}

# Per-document location of the currency and pay frequency next to an amount
_CURRENCY_PATHS: dict[DocumentType, str] = {
    D.JOB_OFFER: "compensation.currency",
    D.SALARY_PROOF: "salary.currency",
    D.RESUME: "salary.currency",
    D.FINANCIAL_PROOF: "balance.currency",
}
_FREQUENCY_PATHS: dict[DocumentType, str] = {
    D.JOB_OFFER: "compensation.frequency",
    D.SALARY_PROOF: "salary.frequency",
}

_SALARY_VERIFIERS = {D.SALARY_PROOF, D.JOB_OFFER}

# Relative weight of each document in the data quality percentage
_QUALITY_WEIGHTS: dict[DocumentType, int] = {
    D.RESUME: 30,
    D.DEGREE: 20,
    D.JOB_OFFER: 25,
    D.SALARY_PROOF: 15,
    D.LANGUAGE_CERTIFICATE: 10,
}

_YEAR_FIRST_RE = re.compile(r"\d{4}\b")

_NUMBER_RE = re.compile(r"-?\d[\d,]*(?:\.\d+)?")
_CERT_RE = re.compile(r"(IELTS|TOEFL|CELPIP|CLB|PTE|Goethe|TestDaF|DELF|DALF|TEF|TCF)\D*(\d+(?:\.\d+)?)?", re.IGNORECASE)


def _dig(data: Any, path: str) -> Any:
    for part in path.split("."):
        if not isinstance(data, dict):
            return None
        data = data.get(part)
    return data


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip()) and value.strip().lower() not in ("null", "none", "n/a")
    return True


def _to_float(value: Any) -> float | None:
    """Coerce extractor output such as 50000, '50,000', 'EUR 4,200.50'."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        match = _NUMBER_RE.search(value)
        if match:
            try:
                return float(match.group(0).replace(",", ""))
            except ValueError:
                return None
    return None


def _clean(value: Any) -> str | None:
    if not _present(value):
        return None
    return str(value).strip()


def _annualize(amount: float, frequency: Any) -> float:
    if isinstance(frequency, str) and frequency.strip().lower().startswith("month"):
        return amount * 12
    return amount


def _age_from_dob(value: Any, as_of: date) -> int | None:
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        # Passports print day before month unless the year leads (ISO style)
        born = parser.parse(text, dayfirst=not _YEAR_FIRST_RE.match(text)).date()
    except (ValueError, OverflowError):
        logger.debug("Unparseable date of birth: %r", text)
        return None
    years = relativedelta(as_of, born).years
    return years if 0 <= years <= 120 else None


class _Sources:
    """Successful documents only, with first-wins lookup."""

    def __init__(self, raw: RawExtraction):
        self.docs = {
            doc_type: doc.data
            for doc_type, doc in raw.documents.items()
            if doc.extraction_success is True and isinstance(doc.data, dict)
        }
        ignored = [d.value for d, doc in raw.documents.items() if doc.extraction_success is not True]
        if ignored:
            logger.debug("Ignoring unsuccessful extractions: %s", ", ".join(ignored))

    def has(self, doc_type: DocumentType) -> bool:
        return doc_type in self.docs

    def get(self, doc_type: DocumentType, path: str) -> Any:
        return _dig(self.docs.get(doc_type), path)

    def first(self, field_name: str) -> tuple[Any, DocumentType | None]:
        for doc_type, path in FIELD_PRECEDENCE[field_name]:
            value = self.get(doc_type, path)
            if _present(value):
                return value, doc_type
        return None, None


def _education(src: _Sources, confirmed) -> EducationInfo | None:
    level, level_doc = src.first("education.level")
    field_name, _ = src.first("education.field")
    institution, _ = src.first("education.institution")
    level = _clean(level)
    if level is None and confirmed is not None:
        level = _clean(confirmed.education_level)
    if field_name is None and confirmed is not None:
        field_name = confirmed.education_field
    if level is None and field_name is None and institution is None:
        return None
    canonical = parse_education_level(level) if level else None
    return EducationInfo(
        level=canonical or level,
        field=_clean(field_name),
        institution=_clean(institution),
        verified=level_doc == D.DEGREE,
    )


def _experience(src: _Sources, confirmed) -> ExperienceInfo | None:
    years_raw, years_doc = src.first("experience.total_years")
    years = _to_float(years_raw)
    if years is not None and years < 0:
        years, years_doc = None, None
    role, _ = src.first("experience.current_role")
    company, _ = src.first("experience.current_company")
    if confirmed is not None:
        if years is None and confirmed.years_experience is not None and confirmed.years_experience >= 0:
            years = confirmed.years_experience
        if role is None:
            role = confirmed.current_role
    if years is None and not _present(role) and not _present(company):
        return None
    return ExperienceInfo(
        total_years=years,
        current_role=_clean(role),
        current_company=_clean(company),
        verified=years is not None and years_doc == D.EMPLOYMENT_LETTER,
    )


def _money(src: _Sources, field_name: str, verifiers: set[DocumentType], confirmed_amount, confirmed_currency):
    for doc_type, path in FIELD_PRECEDENCE[field_name]:
        amount = _to_float(src.get(doc_type, path))
        if amount is None or amount < 0:
            continue
        frequency_path = _FREQUENCY_PATHS.get(doc_type)
        if frequency_path and not path.endswith("annualized"):
            amount = _annualize(amount, src.get(doc_type, frequency_path))
        currency_path = _CURRENCY_PATHS.get(doc_type)
        currency = _clean(src.get(doc_type, currency_path)) if currency_path else None
        return MoneyInfo(
            amount=amount,
            currency=currency.upper() if currency else None,
            verified=doc_type in verifiers,
        )
    if confirmed_amount is not None and confirmed_amount >= 0:
        return MoneyInfo(amount=confirmed_amount, currency=confirmed_currency, verified=False)
    return None


def _parse_certification(text: Any) -> tuple[str | None, float | None]:
    if not isinstance(text, str):
        return None, None
    match = _CERT_RE.search(text)
    if not match:
        return None, None
    score = float(match.group(2)) if match.group(2) else None
    return match.group(1).upper(), score


def _languages(src: _Sources, confirmed) -> tuple[LanguageInfo, ...]:
    entries: list[LanguageInfo] = []
    seen: set[str] = set()

    if src.has(D.LANGUAGE_CERTIFICATE):
        name = _clean(src.get(D.LANGUAGE_CERTIFICATE, "language")) or ""
        entries.append(LanguageInfo(
            language=name,
            proficiency=_clean(src.get(D.LANGUAGE_CERTIFICATE, "cefrLevel")),
            test_type=_clean(src.get(D.LANGUAGE_CERTIFICATE, "testType")),
            score=_to_float(src.get(D.LANGUAGE_CERTIFICATE, "scores.overall")),
            verified=True,
        ))
        seen.add(name.casefold())

    resume_languages = src.get(D.RESUME, "languages")
    if isinstance(resume_languages, list):
        for item in resume_languages:
            if not isinstance(item, dict):
                continue
            name = _clean(item.get("language")) or ""
            if name.casefold() in seen:
                continue
            test_type, score = _parse_certification(item.get("certification"))
            entries.append(LanguageInfo(
                language=name,
                proficiency=_clean(item.get("proficiency")),
                test_type=test_type,
                score=score,
            ))
            seen.add(name.casefold())

    if confirmed is not None:
        for item in confirmed.languages:
            if item.language.casefold() in seen:
                continue
            entries.append(LanguageInfo(language=item.language, proficiency=item.proficiency))
            seen.add(item.language.casefold())
    return tuple(entries)


def _job_offer(src: _Sources) -> JobOfferInfo | None:
    if not src.has(D.JOB_OFFER):
        return None
    amount = _to_float(src.get(D.JOB_OFFER, "compensation.baseSalary"))
    if amount is not None:
        amount = _annualize(amount, src.get(D.JOB_OFFER, "compensation.frequency"))
    currency = _clean(src.get(D.JOB_OFFER, "compensation.currency"))
    sponsorship = src.get(D.JOB_OFFER, "sponsorship.visaSponsorshipOffered")
    return JobOfferInfo(
        company=_clean(src.get(D.JOB_OFFER, "employer.companyName")),
        position=_clean(src.get(D.JOB_OFFER, "position.title")),
        country=_clean(src.get(D.JOB_OFFER, "employer.country")),
        salary=amount,
        currency=currency.upper() if currency else None,
        sponsorship=sponsorship if isinstance(sponsorship, bool) else None,
        verified=True,
    )


def _skills(src: _Sources, confirmed) -> tuple[str, ...]:
    found: list[str] = []
    for group in ("technical", "soft", "tools"):
        values = src.get(D.RESUME, f"skills.{group}")
        if isinstance(values, list):
            found.extend(v for v in values if isinstance(v, str))
    if confirmed is not None:
        found.extend(confirmed.skills)

    seen: set[str] = set()
    unique = []
    for skill in found:
        key = skill.strip().casefold()
        if key and key not in seen:
            seen.add(key)
            unique.append(skill.strip())
    return tuple(unique)


def _age(src: _Sources, confirmed, as_of: date) -> int | None:
    for doc_type, path in FIELD_PRECEDENCE["age"]:
        value = src.get(doc_type, path)
        if not _present(value):
            continue
        if path.endswith("dateOfBirth"):
            age = _age_from_dob(value, as_of)
        else:
            number = _to_float(value)
            age = int(number) if number is not None and 0 <= number <= 120 else None
        if age is not None:
            return age
    if confirmed is not None and confirmed.age is not None and 0 <= confirmed.age <= 120:
        return confirmed.age
    return None


def data_quality(raw: RawExtraction) -> int | None:
    """Share of supplied key documents that extracted successfully, 0-100."""
    total = 0
    earned = 0
    for doc_type, weight in _QUALITY_WEIGHTS.items():
        doc = raw.documents.get(doc_type)
        if doc is None:
            continue
        total += weight
        if doc.extraction_success is True:
            earned += weight
    if total == 0:
        return None
    return int(earned / total * 100 + 0.5)


def normalize(raw: RawExtraction, as_of: date | None = None) -> ApplicantProfile:
    """Build the applicant profile; never raises for malformed extractor data."""
    as_of = as_of or date.today()
    src = _Sources(raw)
    confirmed = raw.confirmed

    has_offer = True if src.has(D.JOB_OFFER) else None
    if has_offer is None and confirmed is not None:
        has_offer = confirmed.has_job_offer

    shortage = confirmed.shortage_occupation if confirmed is not None else None
    nationality, _ = src.first("nationality")

    profile = ApplicantProfile(
        education=_education(src, confirmed),
        experience=_experience(src, confirmed),
        salary=_money(
            src, "salary.amount", _SALARY_VERIFIERS,
            confirmed.salary_amount if confirmed else None,
            confirmed.salary_currency if confirmed else None,
        ),
        funds=_money(
            src, "funds.amount", {D.FINANCIAL_PROOF},
            confirmed.funds_amount if confirmed else None,
            confirmed.funds_currency if confirmed else None,
        ),
        languages=_languages(src, confirmed),
        has_job_offer=has_offer,
        job_offer=_job_offer(src),
        age=_age(src, confirmed, as_of),
        shortage_occupation=shortage,
        skills=_skills(src, confirmed),
        nationality=_clean(nationality),
        data_quality=data_quality(raw),
    )
    logger.info(
        "Normalized profile from %d document(s): education=%s experience=%s languages=%d",
        len(src.docs),
        profile.education.level if profile.education else None,
        profile.experience.total_years if profile.experience else None,
        len(profile.languages),
    )
    return profile
