#!/usr/bin/env python3
"""
Matcher Models - Freelancer and job records plus match results.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from freelancer_scoring.utils import id_as_str, none_as_empty


class Proficiency(enum.IntEnum):
    """Language proficiency, ordered; higher always satisfies lower."""
    INTERMEDIATE = 1
    PROFESSIONAL = 2
    FLUENT = 3
    NATIVE = 4

    @classmethod
    def rank(cls, label: Optional[str]) -> int:
        """Rank of a proficiency label; unknown or missing labels rank 0."""
        if not label:
            return 0
        member = cls.__members__.get(label.strip().upper())
        return int(member) if member is not None else 0


class LanguageSkill(BaseModel):
    model_config = ConfigDict(extra="ignore")

    language: str
    proficiency: Optional[str] = None


class LanguageRequirement(BaseModel):
    model_config = ConfigDict(extra="ignore")

    language: str
    min_proficiency: Optional[str] = None


class Freelancer(BaseModel):
    """Freelancer profile fields used for matching."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    full_name: str = ""
    languages: List[LanguageSkill] = Field(default_factory=list)
    service_types: List[str] = Field(default_factory=list)
    specializations: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    experience_years: Optional[float] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return id_as_str(value)

    @field_validator("languages", "service_types", "specializations", "skills", mode="before")
    @classmethod
    def null_lists_as_empty(cls, value):
        return none_as_empty(value)

    @field_validator("full_name", mode="before")
    @classmethod
    def null_name_as_empty(cls, value):
        return "" if value is None else value


class Job(BaseModel):
    """Job requirement set. Empty lists and missing values mean 'not required'."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    title: str = ""
    required_languages: List[LanguageRequirement] = Field(default_factory=list)
    required_service_types: List[str] = Field(default_factory=list)
    required_specializations: List[str] = Field(default_factory=list)
    required_skills: List[str] = Field(default_factory=list)
    min_experience_years: Optional[float] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return id_as_str(value)

    @field_validator(
        "required_languages", "required_service_types", "required_specializations", "required_skills",
        mode="before"
    )
    @classmethod
    def null_lists_as_empty(cls, value):
        return none_as_empty(value)

    @field_validator("title", mode="before")
    @classmethod
    def null_title_as_empty(cls, value):
        return "" if value is None else value


MatchDetailType = Literal["match", "partial", "miss"]


@dataclass
class MatchDetail:
    """One explanation line of a match score."""
    type: MatchDetailType
    text: str
    criterion: str = ""


@dataclass
class MatchResult:
    """Match score (0-100) with the explanation details in evaluation order."""
    score: int = 0
    details: List[MatchDetail] = field(default_factory=list)
    total_points: float = 0.0
    max_points: float = 0.0


@dataclass
class RankedFreelancer:
    freelancer: Freelancer
    match: MatchResult
