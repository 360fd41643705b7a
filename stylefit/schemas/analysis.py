from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


BodyType = Literal["hourglass", "inverted-triangle", "pear", "apple", "rectangle", "unknown"]
ArmType = Literal["muscular", "slender", "proportional"]
Provenance = Literal["web", "image", "simulated"]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ArmAnalysis(_Record):
    arm_type: ArmType = Field(alias="armType")
    recommendations: List[str] = Field(default_factory=list)


class ProductRecord(_Record):
    title: Optional[str] = None
    price: Optional[str] = None
    description: Optional[str] = None
    review_texts: List[str] = Field(default_factory=list, alias="reviewTexts")
    provenance: Provenance
    error: Optional[str] = None


class ReviewSummary(_Record):
    # "N/A" only on a failed analysis
    average_rating: float | str = Field(alias="averageRating")
    total_reviews: int = Field(alias="totalReviews")
    sentiment: Literal["positive", "mixed", "unknown"]
    sample_reviews: Optional[List[str]] = Field(None, alias="sampleReviews")


class SizeRecommendation(_Record):
    size: str
    fit_note: str = Field(alias="fitNote")
    confidence: int


class ArmFitSummary(_Record):
    arm_type: ArmType = Field(alias="armType")
    sleeve_compatibility: int = Field(alias="sleeveCompatibility")
    recommendations: List[str]


class AnalysisResult(_Record):
    suitability_score: int = Field(alias="suitabilityScore", ge=0, le=100)
    pros: List[str]
    cons: List[str]
    review_summary: ReviewSummary = Field(alias="reviewSummary")
    size_recommendation: SizeRecommendation = Field(alias="sizeRecommendation")
    arm_fit_summary: Optional[ArmFitSummary] = Field(None, alias="armFitSummary")
    product_record: Optional[ProductRecord] = Field(None, alias="productRecord")
    error: Optional[str] = None


class RecommendationSet(_Record):
    body_type: BodyType = Field(alias="bodyType")
    tops: List[str]
    bottoms: List[str]
    tip: str
    arm_type: Optional[ArmType] = Field(None, alias="armType")
    arm_tips: Optional[List[str]] = Field(None, alias="armTips")


class AnalyzeUrlRequest(BaseModel):
    url: str


class ConvertRequest(BaseModel):
    value: str
    from_unit: Literal["inches", "cm", "lbs", "kg"]
    to_unit: Literal["inches", "cm", "lbs", "kg"]


class ConvertResponse(BaseModel):
    value: str
