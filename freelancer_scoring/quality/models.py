#!/usr/bin/env python3
"""
Quality Models - Report records consumed by the quality engine and the
result structures it produces.

Inbound records are pydantic models so dicts fetched from the data store are
validated at the boundary. Results are plain dataclasses.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from freelancer_scoring.utils import id_as_str, none_as_empty


class Severity(str, enum.Enum):
    CRITICAL = "Critical"
    MAJOR = "Major"
    MINOR = "Minor"
    PREFERENTIAL = "Preferential"


class ReportType(str, enum.Enum):
    LQA = "LQA"
    QS = "QS"
    RANDOM_QA = "Random_QA"


class ReportStatus(str, enum.Enum):
    DRAFT = "draft"
    PENDING_TRANSLATOR_REVIEW = "pending_translator_review"
    PENDING_FINAL_REVIEW = "pending_final_review"
    TRANSLATOR_DISPUTED = "translator_disputed"
    TRANSLATOR_ACCEPTED = "translator_accepted"
    FINALIZED = "finalized"


# Only these statuses count toward aggregate scoring
QUALIFYING_STATUSES = frozenset({ReportStatus.FINALIZED.value, ReportStatus.TRANSLATOR_ACCEPTED.value})
PENDING_STATUSES = frozenset({
    ReportStatus.PENDING_TRANSLATOR_REVIEW.value,
    ReportStatus.PENDING_FINAL_REVIEW.value,
})


class ErrorEntry(BaseModel):
    """One line of an LQA error log."""
    model_config = ConfigDict(extra="ignore")

    error_type: str = ""
    # Free string: unknown severities are weighted 1 rather than rejected
    severity: str = Severity.MINOR.value
    # Missing count adds nothing to the LQA penalty and counts once in error analysis
    count: Optional[int] = Field(None, gt=0)
    examples: str = ""

    @field_validator("error_type", "examples", mode="before")
    @classmethod
    def null_text_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("severity", mode="before")
    @classmethod
    def null_severity_as_minor(cls, value):
        return Severity.MINOR.value if value is None else value


class QualityReport(BaseModel):
    """A quality report as stored upstream (read-only)."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    freelancer_id: Optional[str] = None
    report_type: str = ReportType.QS.value
    status: str = ReportStatus.DRAFT.value

    lqa_score: Optional[float] = Field(None, ge=0, le=100)
    qs_score: Optional[float] = Field(None, ge=1, le=5)
    lqa_words_reviewed: Optional[int] = Field(None, ge=0)
    lqa_errors: List[ErrorEntry] = Field(default_factory=list)

    created_date: Optional[datetime] = None
    report_date: Optional[datetime] = None

    translation_type: Optional[str] = None
    client_account: Optional[str] = None
    source_language: Optional[str] = None
    target_language: Optional[str] = None
    project_name: Optional[str] = None

    @field_validator("id", "freelancer_id", mode="before")
    @classmethod
    def coerce_ids(cls, value):
        return id_as_str(value)

    @field_validator("lqa_errors", mode="before")
    @classmethod
    def null_errors_as_empty(cls, value):
        return none_as_empty(value)

    @field_validator("report_type", "status", mode="before")
    @classmethod
    def null_as_default(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("qs_score")
    @classmethod
    def half_point_qs(cls, value):
        if value is not None and (value * 2) != int(value * 2):
            raise ValueError(f"qs_score must be in half-point steps, got {value}")
        return value

    @property
    def is_qualifying(self) -> bool:
        return self.status in QUALIFYING_STATUSES

    @property
    def effective_date(self) -> Optional[datetime]:
        return self.report_date or self.created_date


class QualityReportFilter(BaseModel):
    """Facet filter over reports; unset facets match everything."""
    translation_type: Optional[str] = None
    client_account: Optional[str] = None
    source_language: Optional[str] = None
    target_language: Optional[str] = None
    freelancer_id: Optional[str] = None
    since: Optional[datetime] = None


@dataclass
class FreelancerQualitySummary:
    """Aggregate quality scores for one freelancer over qualifying reports."""
    freelancer_id: Optional[str] = None
    avg_lqa: Optional[float] = None
    avg_qs: Optional[float] = None
    combined_score: Optional[float] = None
    total_reviews: int = 0
    is_probation: bool = False
    lqa_count: int = 0
    qs_count: int = 0


@dataclass
class MonthlyTrendPoint:
    """One calendar month of the quality trend."""
    month: str
    period: str
    avg_lqa: Optional[float] = None
    avg_qs: Optional[float] = None
    qs_display: Optional[float] = None
    combined_score: Optional[float] = None
    count: int = 0


@dataclass
class ErrorTypeSummary:
    """Error totals for a single error type."""
    error_type: str
    total: int = 0
    by_severity: Dict[str, int] = field(default_factory=dict)
    weighted_penalty: float = 0.0


@dataclass
class ErrorAnalysis:
    """Error log totals across a set of reports."""
    by_type: List[ErrorTypeSummary] = field(default_factory=list)
    by_severity: Dict[str, int] = field(default_factory=dict)
    total_errors: int = 0


@dataclass
class QualityAlert:
    """An alert raised for a freelancer; delivery is handled elsewhere."""
    alert_type: str
    severity: str
    freelancer_id: Optional[str]
    message: str
    score: Optional[float] = None
    scores: List[float] = field(default_factory=list)


@dataclass
class QualityOverview:
    """Dashboard-level totals across all freelancers."""
    total_reports: int = 0
    finalized_reports: int = 0
    pending_reviews: int = 0
    disputed_reports: int = 0
    avg_combined_score: Optional[float] = None
    avg_lqa: Optional[float] = None
    avg_qs: Optional[float] = None
    probation_count: int = 0
    freelancer_count: int = 0
