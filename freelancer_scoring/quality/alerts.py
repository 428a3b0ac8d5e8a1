#!/usr/bin/env python3
"""
Quality Alerts - Detect freelancers that need a quality warning.

Two checks, both over qualifying reports only:
- low_combined_score: enough reviews and a combined score below the
  probation threshold
- consecutive_low_lqa: the most recent LQA scores are all below the low-LQA
  threshold

Alerts are records only; sending them is the caller's concern.
"""

from datetime import datetime
from typing import List, Any, Iterable, Optional
import logging

from freelancer_scoring.config_loader import AlertConfig, resolve_quality_settings
from freelancer_scoring.quality.aggregation import aggregate_freelancer_scores, qualifying_reports
from freelancer_scoring.quality.models import QualityAlert, QualityReport
from freelancer_scoring.utils import as_naive_utc

logger = logging.getLogger(__name__)

_OLDEST = datetime.min


def _recent_lqa_scores(reports: List[QualityReport], window: int) -> List[float]:
    scored = [r for r in reports if r.lqa_score is not None]
    scored.sort(
        key=lambda r: as_naive_utc(r.created_date) if r.created_date else _OLDEST,
        reverse=True,
    )
    return [r.lqa_score for r in scored[:window]]


def evaluate_alerts(
    freelancer_id: Optional[str],
    reports: Iterable[QualityReport],
    settings: Any = None,
    alert_config: Optional[AlertConfig] = None
) -> List[QualityAlert]:
    """
    Evaluate quality alerts for a single freelancer.

    Args:
        freelancer_id: Freelancer the reports belong to
        reports: The freelancer's reports (any status)
        settings: Quality settings (raw or resolved)
        alert_config: Alert thresholds

    Returns:
        List of QualityAlert, empty when nothing is wrong
    """
    cfg = resolve_quality_settings(settings)
    alert_cfg = alert_config or AlertConfig()
    counted = qualifying_reports(reports)
    alerts: List[QualityAlert] = []

    summary = aggregate_freelancer_scores(counted, cfg, freelancer_id=freelancer_id)
    if summary.total_reviews >= alert_cfg.min_reviews and summary.is_probation:
        alerts.append(QualityAlert(
            alert_type='low_combined_score',
            severity='high',
            freelancer_id=freelancer_id,
            message=(
                f"Combined score {summary.combined_score:.1f} is below the probation "
                f"threshold {cfg.probation_threshold:g} over {summary.total_reviews} assessments"
            ),
            score=summary.combined_score,
        ))

    recent = _recent_lqa_scores(counted, alert_cfg.window)
    if len(recent) >= alert_cfg.window and all(s < alert_cfg.low_lqa_threshold for s in recent):
        alerts.append(QualityAlert(
            alert_type='consecutive_low_lqa',
            severity='high',
            freelancer_id=freelancer_id,
            message=(
                f"Last {alert_cfg.window} LQA scores are all below "
                f"{alert_cfg.low_lqa_threshold:g}: {', '.join(f'{s:g}' for s in recent)}"
            ),
            scores=recent,
        ))

    if alerts:
        logger.info(f"Freelancer {freelancer_id}: {len(alerts)} quality alert(s)")
    return alerts
