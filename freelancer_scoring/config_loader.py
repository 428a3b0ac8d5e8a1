import yaml
import os
import logging
from types import MappingProxyType
from typing import List, Optional, Dict, Any, Tuple, Mapping
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from freelancer_scoring.exceptions import InvalidSettingsError

logger = logging.getLogger(__name__)

# Immutable defaults; settings overrides are merged on top in resolve_quality_settings()
DEFAULT_SEVERITY_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "Critical": 10.0,
    "Major": 5.0,
    "Minor": 2.0,
    "Preferential": 0.5,
})

DEFAULT_ERROR_TYPES: Tuple[str, ...] = (
    "Accuracy", "Fluency", "Terminology", "Style", "Locale", "Verity",
    "Grammar", "Punctuation", "Spelling", "Consistency", "Formatting",
    "Omission", "Addition", "Mistranslation",
)

DEFAULT_LQA_WEIGHT = 4.0
DEFAULT_QS_MULTIPLIER = 20.0
DEFAULT_PROBATION_THRESHOLD = 70.0


class QualitySettings(BaseModel):
    """
    Quality settings record as stored upstream.

    Every field is optional; missing values fall back to the defaults when
    the record is resolved into an EffectiveQualitySettings.
    """
    model_config = ConfigDict(extra="ignore")

    lqa_weight: Optional[float] = None
    qs_multiplier: Optional[float] = None
    probation_threshold: Optional[float] = None
    lqa_error_types: Optional[List[str]] = None
    lqa_error_weights: Optional[Dict[str, float]] = None  # partial override map


class EffectiveQualitySettings(BaseModel):
    """Resolved quality settings passed into every quality scoring call."""
    model_config = ConfigDict(frozen=True)

    lqa_weight: float = Field(DEFAULT_LQA_WEIGHT, ge=0)
    qs_multiplier: float = Field(DEFAULT_QS_MULTIPLIER, gt=0)
    probation_threshold: float = Field(DEFAULT_PROBATION_THRESHOLD, ge=0, le=100)
    error_types: Tuple[str, ...] = DEFAULT_ERROR_TYPES
    error_weights: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_SEVERITY_WEIGHTS))

    def weight_for(self, severity: str) -> float:
        """Penalty weight for a severity; unknown severities weigh 1."""
        return self.error_weights.get(severity, 1.0)


def resolve_quality_settings(
    settings: Optional[Any] = None
) -> EffectiveQualitySettings:
    """
    Resolve a raw settings record into effective settings.

    Accepts None, a dict as fetched from the data store, a QualitySettings or
    an already-resolved EffectiveQualitySettings.

    Raises:
        InvalidSettingsError: if a value is out of range (e.g. negative
            lqa_weight, non-positive qs_multiplier, negative error weight).
    """
    if isinstance(settings, EffectiveQualitySettings):
        return settings

    try:
        if settings is None:
            raw = QualitySettings()
        elif isinstance(settings, QualitySettings):
            raw = settings
        else:
            raw = QualitySettings.model_validate(settings)

        weights = dict(DEFAULT_SEVERITY_WEIGHTS)
        if raw.lqa_error_weights:
            weights.update(raw.lqa_error_weights)
        negative = {k: v for k, v in weights.items() if v < 0}
        if negative:
            raise InvalidSettingsError(f"Error weights must be >= 0, got {negative}")

        values: Dict[str, Any] = {"error_weights": weights}
        if raw.lqa_weight is not None:
            values["lqa_weight"] = raw.lqa_weight
        if raw.qs_multiplier is not None:
            values["qs_multiplier"] = raw.qs_multiplier
        if raw.probation_threshold is not None:
            values["probation_threshold"] = raw.probation_threshold
        if raw.lqa_error_types:
            values["error_types"] = tuple(raw.lqa_error_types)

        return EffectiveQualitySettings(**values)
    except ValidationError as e:
        logger.error(f"Rejected quality settings: {e}")
        raise InvalidSettingsError(str(e)) from e


class AlertConfig(BaseModel):
    """Thresholds for quality alert evaluation."""
    min_reviews: int = Field(3, ge=1)  # qualifying reports needed before a low-score alert
    low_lqa_threshold: float = 70.0
    window: int = Field(3, ge=1)  # consecutive LQA reports checked


class RankingConfig(BaseModel):
    """Top/low performer list settings."""
    min_reviews: int = Field(3, ge=0)
    limit: int = Field(5, ge=1)


class TrendConfig(BaseModel):
    """Monthly trend settings."""
    month_count: int = Field(6, ge=1)
    # Display-only scale for the QS series; independent of qs_multiplier
    qs_display_scale: float = 20.0


class CriterionWeights(BaseModel):
    """Points each match criterion contributes when the job requires it."""
    languages: float = Field(40.0, ge=0)
    service_types: float = Field(20.0, ge=0)
    specializations: float = Field(20.0, ge=0)
    experience: float = Field(10.0, ge=0)
    skills: float = Field(10.0, ge=0)


class MatchingConfig(BaseModel):
    """
    Configuration for freelancer-to-job match scoring.
    """
    weights: CriterionWeights = Field(default_factory=CriterionWeights)
    min_score: int = Field(0, ge=0, le=100)  # ranking cutoff
    limit: Optional[int] = None  # None = return all ranked freelancers


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class AppConfig(BaseModel):
    quality: QualitySettings = Field(default_factory=QualitySettings)
    alerts: AlertConfig = Field(default_factory=AlertConfig)
    rankings: RankingConfig = Field(default_factory=RankingConfig)
    trend: TrendConfig = Field(default_factory=TrendConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path, try the config next to the package
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found, using defaults")

    # Allow env var overrides for the quality knobs
    for env_name, key in (
        ("QUALITY_LQA_WEIGHT", "lqa_weight"),
        ("QUALITY_QS_MULTIPLIER", "qs_multiplier"),
        ("QUALITY_PROBATION_THRESHOLD", "probation_threshold"),
    ):
        value = os.environ.get(env_name)
        if value:
            if data.get('quality') is None:
                data['quality'] = {}
            data['quality'][key] = float(value)

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        if data.get('logging') is None:
            data['logging'] = {}
        data['logging']['level'] = env_log_level

    return AppConfig(**data)
