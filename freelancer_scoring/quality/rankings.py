#!/usr/bin/env python3
"""
Quality Rankings - Top/low performer lists and dashboard overview totals.
"""

from typing import List, Iterable, Optional
import logging

from freelancer_scoring.config_loader import RankingConfig
from freelancer_scoring.quality.models import (
    FreelancerQualitySummary, QualityOverview, QualityReport,
    PENDING_STATUSES, QUALIFYING_STATUSES, ReportStatus
)
from freelancer_scoring.utils import mean

logger = logging.getLogger(__name__)


def _ranked(
    summaries: Iterable[FreelancerQualitySummary],
    config: Optional[RankingConfig],
    descending: bool
) -> List[FreelancerQualitySummary]:
    cfg = config or RankingConfig()
    eligible = [
        s for s in summaries
        if s.combined_score and s.total_reviews >= cfg.min_reviews
    ]
    sign = -1 if descending else 1
    eligible.sort(key=lambda s: (sign * s.combined_score, s.freelancer_id or ""))
    return eligible[:cfg.limit]


def top_performers(
    summaries: Iterable[FreelancerQualitySummary],
    config: Optional[RankingConfig] = None
) -> List[FreelancerQualitySummary]:
    """Highest combined scores first, among freelancers with enough reviews."""
    return _ranked(summaries, config, descending=True)


def low_performers(
    summaries: Iterable[FreelancerQualitySummary],
    config: Optional[RankingConfig] = None
) -> List[FreelancerQualitySummary]:
    """Lowest combined scores first, among freelancers with enough reviews."""
    return _ranked(summaries, config, descending=False)


def summarize_overview(
    reports: Iterable[QualityReport],
    summaries: Iterable[FreelancerQualitySummary]
) -> QualityOverview:
    """Report status counts plus score means across freelancers."""
    reports = list(reports)
    summaries = list(summaries)

    overview = QualityOverview(
        total_reports=len(reports),
        finalized_reports=sum(1 for r in reports if r.status in QUALIFYING_STATUSES),
        pending_reviews=sum(1 for r in reports if r.status in PENDING_STATUSES),
        disputed_reports=sum(1 for r in reports if r.status == ReportStatus.TRANSLATOR_DISPUTED.value),
        avg_combined_score=mean(s.combined_score for s in summaries if s.combined_score is not None),
        avg_lqa=mean(s.avg_lqa for s in summaries if s.avg_lqa is not None),
        avg_qs=mean(s.avg_qs for s in summaries if s.avg_qs is not None),
        probation_count=sum(1 for s in summaries if s.is_probation),
        freelancer_count=len(summaries),
    )

    logger.debug(
        "Overview: reports=%d pending=%d disputed=%d probation=%d",
        overview.total_reports, overview.pending_reviews,
        overview.disputed_reports, overview.probation_count
    )
    return overview
