#!/usr/bin/env python3
"""
Quality Aggregation - Per-freelancer score aggregation and report filtering.

Only finalized and translator_accepted reports count toward scores.
"""

from datetime import datetime
from typing import List, Dict, Any, Iterable, Optional
import logging

from dateutil.relativedelta import relativedelta

from freelancer_scoring.config_loader import resolve_quality_settings
from freelancer_scoring.exceptions import InvalidTimeRangeError
from freelancer_scoring.quality.models import (
    FreelancerQualitySummary, QualityReport, QualityReportFilter
)
from freelancer_scoring.quality.scoring import compute_combined_score, is_probation
from freelancer_scoring.utils import as_naive_utc, mean, utc_now

logger = logging.getLogger(__name__)

TIME_RANGES = {
    '1month': relativedelta(months=1),
    '3months': relativedelta(months=3),
    '6months': relativedelta(months=6),
    '1year': relativedelta(years=1),
    'all': None,
}

_FACETS = ('translation_type', 'client_account', 'source_language', 'target_language', 'freelancer_id')


def qualifying_reports(reports: Iterable[QualityReport]) -> List[QualityReport]:
    """Reports whose status counts toward aggregate scoring."""
    return [r for r in reports if r.is_qualifying]


def aggregate_freelancer_scores(
    reports: Iterable[QualityReport],
    settings: Any = None,
    freelancer_id: Optional[str] = None
) -> FreelancerQualitySummary:
    """
    Aggregate one freelancer's reports into LQA/QS averages and a combined score.

    Args:
        reports: The freelancer's reports (any status; non-qualifying ones are dropped)
        settings: Quality settings (raw or resolved)
        freelancer_id: Id recorded on the summary

    Returns:
        FreelancerQualitySummary; combined_score is None and is_probation False
        when no qualifying report carries a score
    """
    cfg = resolve_quality_settings(settings)
    counted = qualifying_reports(reports)

    lqa_scores = [r.lqa_score for r in counted if r.lqa_score is not None]
    qs_scores = [r.qs_score for r in counted if r.qs_score is not None]

    avg_lqa = mean(lqa_scores)
    avg_qs = mean(qs_scores)
    combined = compute_combined_score(avg_lqa, avg_qs, cfg)

    summary = FreelancerQualitySummary(
        freelancer_id=freelancer_id,
        avg_lqa=avg_lqa,
        avg_qs=avg_qs,
        combined_score=combined,
        total_reviews=len(counted),
        is_probation=is_probation(combined, cfg),
        lqa_count=len(lqa_scores),
        qs_count=len(qs_scores),
    )

    logger.debug(
        "Freelancer %s: reviews=%d avg_lqa=%s avg_qs=%s combined=%s probation=%s",
        freelancer_id, summary.total_reviews, avg_lqa, avg_qs, combined, summary.is_probation
    )
    return summary


def aggregate_by_freelancer(
    reports: Iterable[QualityReport],
    settings: Any = None
) -> Dict[str, FreelancerQualitySummary]:
    """Group reports by freelancer_id and aggregate each group.

    Reports without a freelancer_id are skipped.
    """
    cfg = resolve_quality_settings(settings)

    grouped: Dict[str, List[QualityReport]] = {}
    skipped = 0
    for report in reports:
        if not report.freelancer_id:
            skipped += 1
            continue
        grouped.setdefault(report.freelancer_id, []).append(report)

    if skipped:
        logger.warning(f"Skipped {skipped} report(s) without freelancer_id")

    return {
        fid: aggregate_freelancer_scores(group, cfg, freelancer_id=fid)
        for fid, group in grouped.items()
    }


def time_range_cutoff(time_range: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """
    Earliest report date included by an analytics time range.

    Returns None for 'all'.

    Raises:
        InvalidTimeRangeError: for an unknown time range name
    """
    if time_range not in TIME_RANGES:
        raise InvalidTimeRangeError(
            f"Unknown time range '{time_range}', expected one of {sorted(TIME_RANGES)}"
        )
    delta = TIME_RANGES[time_range]
    if delta is None:
        return None
    return as_naive_utc(now or utc_now()) - delta


def filter_reports(
    reports: Iterable[QualityReport],
    report_filter: Optional[QualityReportFilter] = None
) -> List[QualityReport]:
    """Apply facet and date filters. Undated reports never pass a `since` filter."""
    if report_filter is None:
        return list(reports)

    wanted = {
        facet: getattr(report_filter, facet)
        for facet in _FACETS
        if getattr(report_filter, facet)
    }
    since = as_naive_utc(report_filter.since) if report_filter.since else None

    result = []
    for report in reports:
        if any(getattr(report, facet) != value for facet, value in wanted.items()):
            continue
        if since is not None:
            report_date = report.effective_date
            if report_date is None or as_naive_utc(report_date) < since:
                continue
        result.append(report)
    return result
