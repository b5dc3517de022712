# app/schemas.py

from typing import Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

# Scores are documented as 0-100 integers but are never range-checked here;
# out-of-domain values must reach the view untouched.
Score = Union[int, float]


class AnalysisRequest(BaseModel):
    text: str = Field(min_length=1)


class _ServiceModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class KeywordDensity(_ServiceModel):
    word: str
    count: int
    percentage: float


class AnalysisResult(_ServiceModel):
    """
    Analysis returned by the service, consumed verbatim.

    JSON keys are camelCase (aiLikelihood, keywordDensity, ...); attributes are
    snake_case. Sequences are tuples so a received result cannot be mutated,
    and their order is the service's ranking order.
    """
    ai_likelihood: Score = Field(alias="aiLikelihood")
    readability_score: Score = Field(alias="readabilityScore")
    sentiment: str
    keyword_density: Tuple[KeywordDensity, ...] = Field(alias="keywordDensity")
    seo_suggestions: Tuple[str, ...] = Field(alias="seoSuggestions")
    detailed_analysis: str = Field(alias="detailedAnalysis")
