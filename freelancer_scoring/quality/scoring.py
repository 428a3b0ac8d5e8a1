#!/usr/bin/env python3
"""
Quality Scoring - Combined score, error-based LQA score and probation check.

Formulas:
- combined = (avg_lqa * lqa_weight + avg_qs * qs_multiplier) / (lqa_weight + 1)
  when both averages exist; avg_lqa alone, or avg_qs * qs_multiplier alone,
  when only one does; None when neither does.
- lqa = max(0, 100 - penalty_per_1000_words), rounded half-up to 0.1,
  where penalty = sum(count * severity_weight).
"""

from typing import Iterable, Mapping, Optional, Any
import logging

from freelancer_scoring.config_loader import (
    EffectiveQualitySettings, resolve_quality_settings
)
from freelancer_scoring.quality.models import ErrorEntry, QualityReport, ReportType
from freelancer_scoring.utils import round_half_up

logger = logging.getLogger(__name__)


def compute_combined_score(
    avg_lqa: Optional[float],
    avg_qs: Optional[float],
    settings: Any = None
) -> Optional[float]:
    """
    Blend an LQA average (0-100) and a QS average (1-5) into one 0-100 score.

    Args:
        avg_lqa: Mean LQA score, or None
        avg_qs: Mean QS score, or None
        settings: Quality settings (raw or resolved)

    Returns:
        Combined score, or None when neither average is available
    """
    cfg = resolve_quality_settings(settings)

    if avg_lqa is not None and avg_qs is not None:
        return (avg_lqa * cfg.lqa_weight + avg_qs * cfg.qs_multiplier) / (cfg.lqa_weight + 1)
    if avg_lqa is not None:
        return avg_lqa
    if avg_qs is not None:
        return avg_qs * cfg.qs_multiplier
    return None


def compute_lqa_from_errors(
    words_reviewed: Optional[int],
    errors: Iterable[Any],
    error_weights: Optional[Mapping[str, float]] = None
) -> Optional[float]:
    """
    Derive an LQA score from an error log, normalized per 1000 reviewed words.

    Unknown severities weigh 1 and a missing count counts as 0.

    Returns:
        Score in [0, 100] rounded half-up to one decimal, or None if no words
        were reviewed
    """
    if not words_reviewed:
        return None

    if error_weights is None:
        error_weights = resolve_quality_settings().error_weights

    total_penalty = 0.0
    for error in errors:
        if isinstance(error, Mapping):
            error = ErrorEntry.model_validate(error)
        weight = error_weights.get(error.severity)
        if weight is None:
            logger.warning(f"Unknown severity {error.severity!r}; weighting as 1")
            weight = 1.0
        total_penalty += (error.count or 0) * weight

    penalty_per_1000 = (total_penalty / words_reviewed) * 1000
    score = max(0.0, 100.0 - penalty_per_1000)

    logger.debug(
        "LQA from errors: penalty=%.2f words=%d per1000=%.2f score=%.1f",
        total_penalty, words_reviewed, penalty_per_1000, score
    )
    return round_half_up(score, 1)


def report_lqa_score(
    report: QualityReport,
    settings: Any = None
) -> Optional[float]:
    """Stored LQA score of a report, or the score derived from its error log."""
    if report.lqa_score is not None:
        return report.lqa_score
    if report.report_type != ReportType.LQA.value:
        return None
    cfg = resolve_quality_settings(settings)
    return compute_lqa_from_errors(report.lqa_words_reviewed, report.lqa_errors, cfg.error_weights)


def is_probation(
    combined_score: Optional[float],
    settings: Any = None
) -> bool:
    """True when a combined score falls strictly below the probation threshold."""
    if combined_score is None:
        return False
    cfg: EffectiveQualitySettings = resolve_quality_settings(settings)
    return combined_score < cfg.probation_threshold
