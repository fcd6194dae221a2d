"""How much of a profile is backed by documents, independent of eligibility."""

from models.schemas.applicant_profile import ApplicantProfile

BASE_CONFIDENCE = 50
MAX_CONFIDENCE = 95

# (points, predicate) applied in order
_SIGNALS = [
    (10, lambda p: p.education is not None and p.education.verified),
    (10, lambda p: p.salary is not None and p.salary.verified),
    (10, lambda p: p.job_offer is not None and p.job_offer.verified),
    (5, lambda p: any(lang.verified for lang in p.languages)),
    (5, lambda p: p.experience is not None and (p.experience.total_years or 0) > 0),
    (5, lambda p: len(p.skills) >= 4),
]


def confidence(profile: ApplicantProfile) -> int:
    """Return an integer in [50, 95].

    Document-derived ``data_quality`` raises the value when it is higher
    than the signal count.
    """
    value = BASE_CONFIDENCE + sum(points for points, check in _SIGNALS if check(profile))
    if profile.data_quality is not None:
        value = max(value, profile.data_quality)
    return max(BASE_CONFIDENCE, min(MAX_CONFIDENCE, value))
