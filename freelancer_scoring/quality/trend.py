#!/usr/bin/env python3
"""
Quality Trend - Monthly LQA/QS/combined series for the most recent months.
"""

from datetime import datetime
from typing import List, Any, Iterable, Optional
import logging

from freelancer_scoring.config_loader import TrendConfig, resolve_quality_settings
from freelancer_scoring.quality.models import MonthlyTrendPoint, QualityReport
from freelancer_scoring.quality.scoring import compute_combined_score
from freelancer_scoring.utils import as_naive_utc, mean, month_windows, round_half_up, utc_now

logger = logging.getLogger(__name__)


def _rounded(value: Optional[float]) -> Optional[float]:
    return round_half_up(value, 1) if value is not None else None


def aggregate_monthly_trend(
    reports: Iterable[QualityReport],
    settings: Any = None,
    month_count: int = 6,
    now: Optional[datetime] = None,
    trend_config: Optional[TrendConfig] = None
) -> List[MonthlyTrendPoint]:
    """
    Bucket qualifying reports into calendar months, oldest to newest.

    Reports are placed by created_date (report_date when created_date is
    missing); undated reports are ignored. qs_display is the QS mean on the
    fixed display scale and is never fed into the combined score, which uses
    the settings' qs_multiplier.

    Args:
        reports: Reports of any status
        settings: Quality settings (raw or resolved)
        month_count: Number of months, including the current one
        now: Reference time; defaults to the current UTC time
        trend_config: Display scale configuration

    Returns:
        One MonthlyTrendPoint per month; empty months have None scores and count 0
    """
    cfg = resolve_quality_settings(settings)
    trend_cfg = trend_config or TrendConfig()
    reference = now or utc_now()

    dated = []
    for report in reports:
        if not report.is_qualifying:
            continue
        report_date = report.created_date or report.report_date
        if report_date is None:
            continue
        dated.append((as_naive_utc(report_date), report))

    points = []
    for start, end in month_windows(reference, month_count):
        bucket = [r for d, r in dated if start <= d <= end]

        avg_lqa = mean(r.lqa_score for r in bucket if r.lqa_score is not None)
        avg_qs = mean(r.qs_score for r in bucket if r.qs_score is not None)
        combined = compute_combined_score(avg_lqa, avg_qs, cfg)

        points.append(MonthlyTrendPoint(
            month=start.strftime('%b'),
            period=start.strftime('%Y-%m'),
            avg_lqa=_rounded(avg_lqa),
            avg_qs=_rounded(avg_qs),
            qs_display=_rounded(avg_qs * trend_cfg.qs_display_scale) if avg_qs is not None else None,
            combined_score=_rounded(combined),
            count=len(bucket),
        ))

    logger.debug("Trend over %d months from %d dated reports", month_count, len(dated))
    return points
