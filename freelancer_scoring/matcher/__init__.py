"""Matcher Module - Freelancer-to-job match scoring and ranking."""
from freelancer_scoring.matcher.models import (
    Proficiency, LanguageSkill, LanguageRequirement, Freelancer, Job,
    MatchDetail, MatchResult, RankedFreelancer
)
from freelancer_scoring.matcher.service import score_match, rank_freelancers_for_job

__all__ = [
    'score_match', 'rank_freelancers_for_job',
    'Proficiency', 'LanguageSkill', 'LanguageRequirement', 'Freelancer', 'Job',
    'MatchDetail', 'MatchResult', 'RankedFreelancer'
]
