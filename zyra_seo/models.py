"""Dataclasses for SEO generation inputs, outputs, and the Brand DNA profile."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from .errors import InvalidInputError


PRICE_POINTS = ("budget", "mid-range", "premium", "luxury")

IMAGE_STYLES = ("professional", "casual", "luxury", "minimal", "vibrant")

SEARCH_INTENTS = ("commercial", "informational", "navigational", "transactional")

VARIANT_TYPES = ("seo-focused", "conversion-focused", "emotional-focused")

VARIANT_LABELS = ("A", "B", "C")

EDIT_TYPES = ("tone", "length", "structure", "keywords", "cta", "other")

# BrandDNA fields kept within 0..100
PERCENT_FIELDS = ("formality_score", "benefit_focus_ratio", "creativity_level", "confidence_score")


@dataclass
class ImageAnalysisResult:
    colors: list[str] = field(default_factory=list)
    style: str = "professional"  # one of IMAGE_STYLES
    product_type: str = ""
    detected_features: list[str] = field(default_factory=list)
    target_demographic: str = ""
    use_case: str = ""


@dataclass
class SERPPatternData:
    top_ranking_title_patterns: list[str] = field(default_factory=list)
    common_keywords: list[str] = field(default_factory=list)
    average_title_length: int = 60
    average_meta_length: int = 155
    search_intent: str = "commercial"  # one of SEARCH_INTENTS
    feature_snippet_format: str | None = None


@dataclass
class MarketingFramework:
    id: str
    name: str
    description: str
    tone: str = ""
    writing_style: str = ""
    key_characteristics: list[str] = field(default_factory=list)
    best_for: list[str] = field(default_factory=list)
    psychological_triggers: list[str] = field(default_factory=list)
    title_format: str = ""
    cta_style: str = ""


@dataclass
class EditPattern:
    original_text: str
    edited_text: str
    edit_type: str  # one of EDIT_TYPES
    timestamp: str
    learned_from: str


@dataclass
class BrandDNATrainingInput:
    sample_texts: list[str] = field(default_factory=list)
    product_descriptions: list[str] = field(default_factory=list)
    email_campaigns: list[str] = field(default_factory=list)
    social_posts: list[str] = field(default_factory=list)
    website_copy: list[str] = field(default_factory=list)
    additional_guidelines: str = ""

    def all_texts(self) -> list[str]:
        return [
            *self.sample_texts,
            *self.product_descriptions,
            *self.email_campaigns,
            *self.social_posts,
            *self.website_copy,
        ]


@dataclass
class BrandDNA:
    user_id: str

    # Writing style
    writing_style: str = "professional"
    avg_sentence_length: int = 15
    avg_paragraph_length: int = 50
    complexity_level: str = "moderate"

    # Tone & voice
    tone_density: str = "balanced"
    personality_traits: list[str] = field(default_factory=list)
    emotional_range: str = "moderate"
    formality_score: int = 60

    # Language patterns
    key_phrases: list[str] = field(default_factory=list)
    power_words: list[str] = field(default_factory=list)
    avoided_words: list[str] = field(default_factory=list)
    vocabulary_level: str = "intermediate"
    jargon_frequency: str = "moderate"

    # Structure
    cta_style: str = "action-oriented"
    cta_frequency: str = "moderate"
    headline_style: str = "statement-based"
    listing_style: str = "paragraphs"

    # Formatting
    emoji_frequency: str = "rare"
    punctuation_style: str = "standard"
    capitalization_style: str = "standard"

    # Content strategy
    benefit_focus_ratio: int = 60
    social_proof_usage: str = "occasional"
    urgency_tactics: str = "subtle"
    storytelling_frequency: str = "moderate"

    # SEO preferences
    keyword_density: str = "moderate"
    seo_vs_conversion: str = "balanced"

    # Values & messaging
    core_values: list[str] = field(default_factory=list)
    brand_personality: str = ""
    unique_selling_points: list[str] = field(default_factory=list)
    target_audience_insights: list[str] = field(default_factory=list)

    # Generation preferences
    preferred_model: str = ""
    creativity_level: int = 70

    # Learning data
    sample_texts: list[str] = field(default_factory=list)
    edit_patterns: list[EditPattern] = field(default_factory=list)
    last_updated: str = ""
    confidence_score: int = 50

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "BrandDNA":
        """Rebuild a profile from to_dict() output, ignoring unknown keys.

        Percentage fields are clamped to 0..100; a non-numeric one raises
        InvalidInputError.
        """
        if not data.get("user_id"):
            raise InvalidInputError("Brand DNA requires a user_id.")
        known = _pick(cls, data)
        for name in PERCENT_FIELDS:
            if name not in known:
                continue
            value = known[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(f"{name} must be a number, got {value!r}")
            known[name] = int(max(0, min(100, round(value))))
        known["edit_patterns"] = [
            EditPattern(**_pick(EditPattern, p)) for p in data.get("edit_patterns") or []
        ]
        return cls(**known)


@dataclass
class SEOGenerationInput:
    product_name: str
    category: str = ""
    key_features: str = ""
    target_audience: str = ""
    price_point: str | None = None  # one of PRICE_POINTS
    current_title: str = ""
    current_description: str = ""
    keywords: list[str] = field(default_factory=list)
    marketing_framework: MarketingFramework | None = None
    brand_dna: BrandDNA | None = None
    tone_override: str = ""
    shopify_html_formatting: bool = False
    competitor_urls: list[str] = field(default_factory=list)
    image_analysis: ImageAnalysisResult | None = None
    serp: SERPPatternData | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "SEOGenerationInput":
        """Load an input from plain JSON data (e.g. a CLI input file)."""
        known = _pick(cls, data)

        price_point = known.get("price_point")
        if price_point is not None and price_point not in PRICE_POINTS:
            raise InvalidInputError(
                f"price_point must be one of {', '.join(PRICE_POINTS)}, got {price_point!r}"
            )

        if data.get("marketing_framework"):
            known["marketing_framework"] = MarketingFramework(
                **_pick(MarketingFramework, data["marketing_framework"])
            )
        if data.get("brand_dna"):
            known["brand_dna"] = BrandDNA.from_dict(data["brand_dna"])
        if data.get("image_analysis"):
            image = ImageAnalysisResult(**_pick(ImageAnalysisResult, data["image_analysis"]))
            if image.style not in IMAGE_STYLES:
                raise InvalidInputError(f"Unknown image style {image.style!r}")
            known["image_analysis"] = image
        if data.get("serp"):
            serp = SERPPatternData(**_pick(SERPPatternData, data["serp"]))
            if serp.search_intent not in SEARCH_INTENTS:
                raise InvalidInputError(f"Unknown search intent {serp.search_intent!r}")
            known["serp"] = serp

        return cls(**known)


@dataclass
class SEOContent:
    """The nine fields of the generation contract after validation/repair."""

    seo_title: str
    seo_description: str
    meta_title: str
    meta_description: str
    keywords: list[str]
    shopify_tags: list[str]
    search_intent: str
    suggested_keywords: list[str]
    competitor_gaps: list[str]
    repaired_fields: list[str] = field(default_factory=list)


@dataclass
class UnifiedSEOOutput:
    seo_title: str
    seo_description: str
    meta_title: str
    meta_description: str
    keywords: list[str]

    seo_score: float
    readability_score: float
    conversion_score: float
    brand_voice_match_score: float

    search_intent: str
    suggested_keywords: list[str]
    competitor_gaps: list[str]

    shopify_title: str
    shopify_description: str
    shopify_tags: list[str]

    framework_used: str
    generated_at: str
    ai_model: str
    confidence: int
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PerformancePrediction:
    click_through_rate: float
    conversion_lift: float
    seo_ranking: float


@dataclass
class SEOVariant:
    variant: str  # one of VARIANT_LABELS
    type: str  # one of VARIANT_TYPES
    output: UnifiedSEOOutput
    expected_performance: PerformancePrediction

    def to_dict(self) -> dict:
        return asdict(self)


def _pick(cls, data: dict) -> dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}
