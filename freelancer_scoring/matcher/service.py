#!/usr/bin/env python3
"""
Match Scoring Service - Score and rank freelancers against a job.

Criteria are evaluated in a fixed order (languages, service types,
specializations, experience, skills). Each required criterion adds its weight
to max_points; the final score is round(total / max * 100), or 0 when the job
requires nothing.
"""

from typing import List, Any, Iterable, Optional
import logging

from freelancer_scoring.config_loader import MatchingConfig
from freelancer_scoring.matcher import criteria
from freelancer_scoring.matcher.models import Freelancer, Job, MatchResult, RankedFreelancer
from freelancer_scoring.utils import round_half_up

logger = logging.getLogger(__name__)


def _as_freelancer(obj: Any) -> Freelancer:
    return obj if isinstance(obj, Freelancer) else Freelancer.model_validate(obj)


def _as_job(obj: Any) -> Job:
    return obj if isinstance(obj, Job) else Job.model_validate(obj)


def score_match(
    freelancer: Any,
    job: Any,
    config: Optional[MatchingConfig] = None
) -> MatchResult:
    """
    Score how well a freelancer fits a job's stated requirements.

    Args:
        freelancer: Freelancer model or dict
        job: Job model or dict
        config: MatchingConfig with criterion weights

    Returns:
        MatchResult with integer score 0-100 and ordered details
    """
    cfg = config or MatchingConfig()
    weights = cfg.weights
    freelancer = _as_freelancer(freelancer)
    job = _as_job(job)

    evaluations = [
        (criteria.score_languages, weights.languages),
        (criteria.score_service_types, weights.service_types),
        (criteria.score_specializations, weights.specializations),
        (criteria.score_experience, weights.experience),
        (criteria.score_skills, weights.skills),
    ]

    total_points = 0.0
    max_points = 0.0
    details = []
    for evaluate, weight in evaluations:
        points, max_for_criterion, criterion_details = evaluate(freelancer, job, weight)
        total_points += points
        max_points += max_for_criterion
        details.extend(criterion_details)

    score = int(round_half_up(total_points / max_points * 100, 0)) if max_points > 0 else 0

    logger.debug(
        "Match %s -> %s: %.2f/%.2f = %d",
        freelancer.id or freelancer.full_name, job.id or job.title,
        total_points, max_points, score
    )
    return MatchResult(score=score, details=details, total_points=total_points, max_points=max_points)


def rank_freelancers_for_job(
    freelancers: Iterable[Any],
    job: Any,
    config: Optional[MatchingConfig] = None,
    min_score: Optional[int] = None,
    limit: Optional[int] = None
) -> List[RankedFreelancer]:
    """
    Score every freelancer against a job, best match first.

    Ties break on freelancer id ascending; freelancers without an id follow
    those with one and keep their input order.

    Args:
        freelancers: Freelancer models or dicts
        job: Job model or dict
        config: MatchingConfig (weights, default min_score and limit)
        min_score: Drop matches scoring below this; overrides config.min_score
        limit: Keep at most this many; overrides config.limit
    """
    cfg = config or MatchingConfig()
    job = _as_job(job)
    cutoff = cfg.min_score if min_score is None else min_score
    keep = cfg.limit if limit is None else limit

    ranked = [
        RankedFreelancer(freelancer=f, match=score_match(f, job, cfg))
        for f in (_as_freelancer(f) for f in freelancers)
    ]
    ranked.sort(key=lambda r: (-r.match.score, r.freelancer.id is None, r.freelancer.id or ""))

    if cutoff:
        ranked = [r for r in ranked if r.match.score >= cutoff]
    if keep is not None:
        ranked = ranked[:keep]

    logger.info(f"Ranked {len(ranked)} freelancer(s) for job {job.id or job.title!r}")
    return ranked
