#!/usr/bin/env python3
"""
Quality Module - LQA/QS score aggregation.

Public API:
- compute_combined_score / compute_lqa_from_errors / is_probation: scoring formulas
- aggregate_freelancer_scores / aggregate_by_freelancer: per-freelancer summaries
- aggregate_monthly_trend: monthly series for charts
- summarize_errors: error log analysis
- evaluate_alerts: probation and consecutive-low-LQA alerts
- top_performers / low_performers / summarize_overview: dashboard rankings

Modules:
- models.py: Report records and result dataclasses
- scoring.py: Combined score, error-based LQA and probation formulas
- aggregation.py: Filtering and per-freelancer aggregation
- trend.py: Monthly trend buckets
- error_analysis.py: Error totals by type and severity
- alerts.py: Quality alert evaluation
- rankings.py: Performer lists and overview totals
"""

from freelancer_scoring.quality.models import (
    Severity, ReportType, ReportStatus, ErrorEntry, QualityReport,
    QualityReportFilter, FreelancerQualitySummary, MonthlyTrendPoint,
    ErrorAnalysis, ErrorTypeSummary, QualityAlert, QualityOverview
)
from freelancer_scoring.quality.scoring import (
    compute_combined_score, compute_lqa_from_errors, report_lqa_score, is_probation
)
from freelancer_scoring.quality.aggregation import (
    aggregate_freelancer_scores, aggregate_by_freelancer, filter_reports,
    qualifying_reports, time_range_cutoff
)
from freelancer_scoring.quality.trend import aggregate_monthly_trend
from freelancer_scoring.quality.error_analysis import summarize_errors
from freelancer_scoring.quality.alerts import evaluate_alerts
from freelancer_scoring.quality.rankings import top_performers, low_performers, summarize_overview

__all__ = [
    'Severity', 'ReportType', 'ReportStatus', 'ErrorEntry', 'QualityReport',
    'QualityReportFilter', 'FreelancerQualitySummary', 'MonthlyTrendPoint',
    'ErrorAnalysis', 'ErrorTypeSummary', 'QualityAlert', 'QualityOverview',
    'compute_combined_score', 'compute_lqa_from_errors', 'report_lqa_score', 'is_probation',
    'aggregate_freelancer_scores', 'aggregate_by_freelancer', 'filter_reports',
    'qualifying_reports', 'time_range_cutoff',
    'aggregate_monthly_trend', 'summarize_errors', 'evaluate_alerts',
    'top_performers', 'low_performers', 'summarize_overview',
]
