"""
Boundary helpers turning raw data-store records into validated models.
"""

import logging
from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from freelancer_scoring.exceptions import InputValidationError
from freelancer_scoring.matcher.models import Freelancer, Job
from freelancer_scoring.quality.models import QualityReport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_many(model: Type[ModelT], records: Iterable[Dict[str, Any]], kind: str) -> List[ModelT]:
    parsed = []
    for index, record in enumerate(records):
        try:
            parsed.append(model.model_validate(record))
        except ValidationError as e:
            logger.error(f"Rejected {kind} #{index}: {e.error_count()} validation error(s)")
            raise InputValidationError(kind, index, str(e)) from e
    return parsed


def parse_reports(records: Iterable[Dict[str, Any]]) -> List[QualityReport]:
    return _parse_many(QualityReport, records, "quality report")


def parse_freelancers(records: Iterable[Dict[str, Any]]) -> List[Freelancer]:
    return _parse_many(Freelancer, records, "freelancer")


def parse_job(record: Dict[str, Any]) -> Job:
    return _parse_many(Job, [record], "job")[0]
