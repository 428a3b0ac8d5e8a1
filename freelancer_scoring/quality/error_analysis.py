#!/usr/bin/env python3
"""
Error Analysis - Aggregate LQA error logs by error type and severity.
"""

from typing import Any, Dict, Iterable
import logging

from freelancer_scoring.config_loader import resolve_quality_settings
from freelancer_scoring.quality.models import (
    ErrorAnalysis, ErrorTypeSummary, QualityReport, Severity
)

logger = logging.getLogger(__name__)


def summarize_errors(
    reports: Iterable[QualityReport],
    settings: Any = None
) -> ErrorAnalysis:
    """
    Count errors per type and per severity across all reports.

    A missing count counts as a single error. Types are ordered by total
    descending; ties follow the settings' error taxonomy, then name.
    """
    cfg = resolve_quality_settings(settings)
    by_type: Dict[str, ErrorTypeSummary] = {}
    by_severity: Dict[str, int] = {s.value: 0 for s in Severity}
    total = 0

    for report in reports:
        for error in report.lqa_errors:
            count = error.count or 1
            summary = by_type.get(error.error_type)
            if summary is None:
                summary = ErrorTypeSummary(
                    error_type=error.error_type,
                    by_severity={s.value: 0 for s in Severity},
                )
                by_type[error.error_type] = summary
            summary.total += count
            summary.by_severity[error.severity] = summary.by_severity.get(error.severity, 0) + count
            summary.weighted_penalty += count * cfg.weight_for(error.severity)
            by_severity[error.severity] = by_severity.get(error.severity, 0) + count
            total += count

    unknown_types = [t for t in by_type if t not in cfg.error_types]
    if unknown_types:
        logger.info(f"Error types outside the taxonomy: {unknown_types}")

    taxonomy_rank = {name: i for i, name in enumerate(cfg.error_types)}
    ordered = sorted(
        by_type.values(),
        key=lambda s: (-s.total, taxonomy_rank.get(s.error_type, len(taxonomy_rank)), s.error_type)
    )

    return ErrorAnalysis(by_type=ordered, by_severity=by_severity, total_errors=total)
