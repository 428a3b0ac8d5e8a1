#!/usr/bin/env python3
"""
Match Criteria - Per-criterion scoring for freelancer-to-job matching.

Each function returns (points, max_points, details). A criterion the job does
not require returns (0.0, 0.0, []) so it adds nothing to either total, which
keeps the final percentage relative to the required criteria only.

Detail policy: languages emit one detail per required language; every other
evaluated criterion emits exactly one detail, 'match' when anything overlaps
and 'miss' otherwise.
"""

from typing import List, Tuple
import logging

from freelancer_scoring.matcher.models import Freelancer, Job, MatchDetail, Proficiency

logger = logging.getLogger(__name__)

CriterionOutcome = Tuple[float, float, List[MatchDetail]]

_NOT_REQUIRED: CriterionOutcome = (0.0, 0.0, [])


def _rank(label) -> int:
    rank = Proficiency.rank(label)
    if label and rank == 0:
        logger.warning(f"Unknown proficiency label {label!r}; ranking as 0")
    return rank


def score_languages(freelancer: Freelancer, job: Job, weight: float) -> CriterionOutcome:
    """Each required language is worth weight / N when proficiency is sufficient."""
    required = job.required_languages
    if not required:
        return _NOT_REQUIRED

    per_language = weight / len(required)
    points = 0.0
    details = []

    for req in required:
        match = next((fl for fl in freelancer.languages if fl.language == req.language), None)
        if match is None:
            details.append(MatchDetail('miss', f"Missing {req.language}", 'languages'))
            continue

        if _rank(match.proficiency) >= _rank(req.min_proficiency):
            points += per_language
            text = f"{req.language} ({match.proficiency})" if match.proficiency else req.language
            details.append(MatchDetail('match', text, 'languages'))
        else:
            details.append(MatchDetail(
                'partial',
                f"{req.language} (needs {req.min_proficiency}, has {match.proficiency})",
                'languages'
            ))

    return points, weight, details


def _score_overlap(
    required: List[str],
    offered: List[str],
    weight: float,
    criterion: str,
    label: str
) -> CriterionOutcome:
    if not required:
        return _NOT_REQUIRED

    offered_set = set(offered)
    matching = [item for item in required if item in offered_set]
    points = weight * len(matching) / len(required)

    if matching:
        detail = MatchDetail('match', f"{label}: {', '.join(matching)}", criterion)
    else:
        detail = MatchDetail('miss', f"Missing {label.lower()}", criterion)
    return points, weight, [detail]


def score_service_types(freelancer: Freelancer, job: Job, weight: float) -> CriterionOutcome:
    return _score_overlap(
        job.required_service_types, freelancer.service_types, weight, 'service_types', 'Services'
    )


def score_specializations(freelancer: Freelancer, job: Job, weight: float) -> CriterionOutcome:
    return _score_overlap(
        job.required_specializations, freelancer.specializations, weight,
        'specializations', 'Specializations'
    )


def score_experience(freelancer: Freelancer, job: Job, weight: float) -> CriterionOutcome:
    """All-or-nothing: full weight when the freelancer meets the minimum years."""
    if not job.min_experience_years or job.min_experience_years <= 0:
        return _NOT_REQUIRED

    years = freelancer.experience_years or 0
    if years >= job.min_experience_years:
        return weight, weight, [MatchDetail('match', f"{years:g} years experience", 'experience')]
    return 0.0, weight, [MatchDetail(
        'miss', f"Only {years:g} years (needs {job.min_experience_years:g})", 'experience'
    )]


def skill_matches(required: str, offered: str) -> bool:
    """Case-insensitive substring match in either direction; blanks never match."""
    req = required.strip().lower()
    off = offered.strip().lower()
    if not req or not off:
        return False
    return req in off or off in req


def score_skills(freelancer: Freelancer, job: Job, weight: float) -> CriterionOutcome:
    required = job.required_skills
    if not required:
        return _NOT_REQUIRED

    matching = [
        skill for skill in required
        if any(skill_matches(skill, offered) for offered in freelancer.skills)
    ]
    points = weight * len(matching) / len(required)

    if matching:
        detail = MatchDetail('match', f"Skills: {', '.join(matching)}", 'skills')
    else:
        detail = MatchDetail('miss', "Missing skills", 'skills')
    return points, weight, [detail]
