"""
Similarity types: weights, thresholds, configuration and results.

Weights and thresholds are frozen dataclasses; per-call overrides are merged
onto the defaults with dataclasses.replace, so no configuration object is
ever mutated.
"""

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

LocationMatchLevel = Literal["city", "state", "country", "region", "none"]
AcceptanceTier = Literal["excellent", "good", "moderate", "low", "very-low"]

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class SimilarityWeights:
    """
    Weights for the composite score.

    - Industry (30%): organization overlap is the primary signal
    - Skills (25%): direct relevance, Jaccard handles overlap frequency
    - Education (20%): same-school connections accept 2-3x more often
    - Location (15%): practical collaboration factor
    - Companies (10%): shared employers indicate trust networks
    """
    industry: float = 0.30
    skills: float = 0.25
    education: float = 0.20
    location: float = 0.15
    companies: float = 0.10


@dataclass(frozen=True)
class LocationThresholds:
    same_city: float = 1.0
    same_state: float = 0.7
    same_country: float = 0.4
    same_region: float = 0.2
    different_regions: float = 0.0


@dataclass(frozen=True)
class EducationThresholds:
    same_school: float = 1.0
    same_field: float = 0.5
    no_overlap: float = 0.0


@dataclass(frozen=True)
class IndustryThresholds:
    exact_match: float = 1.0
    related_industries: float = 0.6
    no_overlap: float = 0.0


DEFAULT_SIMILARITY_WEIGHTS = SimilarityWeights()
DEFAULT_LOCATION_THRESHOLDS = LocationThresholds()
DEFAULT_EDUCATION_THRESHOLDS = EducationThresholds()
DEFAULT_INDUSTRY_THRESHOLDS = IndustryThresholds()


@dataclass(frozen=True)
class SimilarityConfig:
    """
    Optional configuration for a similarity calculation.

    Override mappings are partial: only the named fields replace defaults.

    Example:
        SimilarityConfig(weights={"skills": 1.0, "industry": 0, "education": 0,
                                  "location": 0, "companies": 0})
    """
    weights: Optional[Mapping[str, float]] = None
    location_thresholds: Optional[Mapping[str, float]] = None
    education_thresholds: Optional[Mapping[str, float]] = None
    industry_thresholds: Optional[Mapping[str, float]] = None
    case_sensitive_skills: bool = False
    case_sensitive_companies: bool = False

    def resolved_weights(self) -> SimilarityWeights:
        return replace(DEFAULT_SIMILARITY_WEIGHTS, **dict(self.weights or {}))

    def resolved_location_thresholds(self) -> LocationThresholds:
        return replace(DEFAULT_LOCATION_THRESHOLDS, **dict(self.location_thresholds or {}))

    def resolved_education_thresholds(self) -> EducationThresholds:
        return replace(DEFAULT_EDUCATION_THRESHOLDS, **dict(self.education_thresholds or {}))

    def resolved_industry_thresholds(self) -> IndustryThresholds:
        return replace(DEFAULT_INDUSTRY_THRESHOLDS, **dict(self.industry_thresholds or {}))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weights": dict(self.weights or {}),
            "location_thresholds": dict(self.location_thresholds or {}),
            "education_thresholds": dict(self.education_thresholds or {}),
            "industry_thresholds": dict(self.industry_thresholds or {}),
            "case_sensitive_skills": self.case_sensitive_skills,
            "case_sensitive_companies": self.case_sensitive_companies,
        }


DEFAULT_SIMILARITY_CONFIG = SimilarityConfig()


@dataclass(frozen=True)
class ParsedLocation:
    """Hierarchical location; every component defaults to "Unknown"."""
    city: str = UNKNOWN
    state: str = UNKNOWN
    country: str = UNKNOWN
    region: str = UNKNOWN


@dataclass(frozen=True)
class SimilarityBreakdown:
    """Five sub-scores in [0, 1] and their weighted, clamped composite."""
    industry: float = 0.0
    skills: float = 0.0
    education: float = 0.0
    location: float = 0.0
    companies: float = 0.0
    overall: float = 0.0

    def dimensions(self) -> Dict[str, float]:
        """Sub-scores keyed by dimension name (composite excluded)."""
        return {
            "industry": self.industry,
            "skills": self.skills,
            "education": self.education,
            "location": self.location,
            "companies": self.companies,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"overall": self.overall, "breakdown": self.dimensions()}


@dataclass(frozen=True)
class SetComparison:
    profile1_count: int = 0
    profile2_count: int = 0
    intersection_count: int = 0
    union_count: int = 0


@dataclass(frozen=True)
class SimilarityDetails:
    """Metadata explaining how a breakdown was produced."""
    calculated_at: datetime
    config: SimilarityConfig
    skills_compared: SetComparison
    companies_compared: SetComparison
    matched_schools: Tuple[str, ...] = ()
    matched_fields: Tuple[str, ...] = ()
    exact_industries: Tuple[str, ...] = ()
    related_industries: Tuple[Tuple[str, str], ...] = ()
    location1: ParsedLocation = field(default_factory=ParsedLocation)
    location2: ParsedLocation = field(default_factory=ParsedLocation)
    location_match: LocationMatchLevel = "none"


@dataclass(frozen=True)
class DetailedSimilarity:
    breakdown: SimilarityBreakdown
    details: SimilarityDetails

    @property
    def overall(self) -> float:
        return self.breakdown.overall

    def to_dict(self) -> Dict[str, Any]:
        details = asdict(self.details)
        details["calculated_at"] = self.details.calculated_at.isoformat()
        details["config"] = self.details.config.to_dict()
        return {**self.breakdown.to_dict(), "metadata": details}


@dataclass(frozen=True)
class AcceptanceEstimate:
    """Calibrated acceptance-rate estimate for a similarity or path score."""
    similarity_score: float
    acceptance_rate: float
    lower_bound: float
    upper_bound: float
    quality: AcceptanceTier
    comparable_to: str
    research_basis: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

