"""Brand DNA: learn a brand's writing style from samples and from user edits."""

import logging
from dataclasses import replace
from datetime import datetime, timezone

from . import text_heuristics as th
from .client import CompletionOptions, GenerativeClient
from .config import ANALYSIS_MAX_TOKENS, ANALYSIS_MODEL, ANALYSIS_TEMPERATURE, DEFAULT_MODEL
from .errors import GenerationError, InvalidInputError
from .models import BrandDNA, BrandDNATrainingInput, EditPattern
from .prompts import BRAND_ANALYST_SYSTEM_PROMPT, build_brand_analysis_prompt
from .scoring import CTA_PHRASES
from .validator import parse_json_response

logger = logging.getLogger(__name__)

WRITING_STYLES = ("formal", "casual", "professional", "playful", "luxury", "technical")
TONE_DENSITIES = ("minimal", "balanced", "rich", "intense")
EMOTIONAL_RANGES = ("reserved", "moderate", "expressive", "intense")
JARGON_FREQUENCIES = ("none", "rare", "moderate", "heavy")
CTA_FREQUENCIES = ("rare", "moderate", "frequent")
EMOJI_FREQUENCIES = ("never", "rare", "moderate", "frequent")
SOCIAL_PROOF_USAGES = ("never", "occasional", "frequent")
URGENCY_LEVELS = ("none", "subtle", "moderate", "aggressive")
STORYTELLING_FREQUENCIES = ("rare", "moderate", "frequent")
KEYWORD_DENSITIES = ("light", "moderate", "heavy")

CONFIDENCE_STEP_PER_EDIT = 2


def _choice(analysis: dict, key: str, allowed: tuple[str, ...], default: str) -> str:
    value = analysis.get(key)
    if isinstance(value, str) and value.lower() in allowed:
        return value.lower()
    return default


def _number(analysis: dict, key: str, default: int, low: int = 0, high: int = 100) -> int:
    value = analysis.get(key)
    # bool is an int subclass; 0 counts as missing
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
        return default
    return int(max(low, min(high, round(value))))


def _text(analysis: dict, key: str, default: str) -> str:
    value = analysis.get(key)
    return value.strip() if isinstance(value, str) and value.strip() else default


def _strings(analysis: dict, key: str) -> list[str]:
    value = analysis.get(key)
    if not isinstance(value, list):
        return []
    return [v.strip() for v in value if isinstance(v, str) and v.strip()]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def calculate_confidence_score(sample_count: int, key_phrases: list[str], power_words: list[str]) -> int:
    score = 50
    score += min(30, sample_count * 5)
    if len(key_phrases) >= 5:
        score += 10
    if len(power_words) >= 5:
        score += 10
    return min(100, score)


async def analyze_brand_dna(
    training_input: BrandDNATrainingInput,
    user_id: str,
    client: GenerativeClient,
) -> BrandDNA:
    """
    Build a BrandDNA profile from brand writing samples.

    One generative call extracts the stylistic fields; the structural ones
    (paragraph length, vocabulary, punctuation, listing style, ...) come from
    local heuristics over the same samples. Fields the model omits get
    defaults. Nothing is persisted here.

    Raises:
        InvalidInputError: no sample text was supplied.
        GenerationError: the model call failed or returned unusable JSON.
    """
    texts = [t for t in training_input.all_texts() if t and t.strip()]
    if not texts:
        raise InvalidInputError("At least one sample text is required for brand DNA analysis")

    logger.info(f"Analyzing brand DNA for user {user_id} from {len(texts)} samples")

    prompt = build_brand_analysis_prompt(texts, training_input.additional_guidelines)
    options = CompletionOptions(
        model=ANALYSIS_MODEL,
        temperature=ANALYSIS_TEMPERATURE,
        max_tokens=ANALYSIS_MAX_TOKENS,
    )
    try:
        raw = await client.complete(BRAND_ANALYST_SYSTEM_PROMPT, prompt, options)
        analysis = parse_json_response(raw)
    except Exception as e:
        raise GenerationError(f"Failed to analyze brand DNA: {e}") from e

    avg_sentence_length = _number(analysis, "avgSentenceLength", 15, high=200)
    formality_score = _number(analysis, "formalityScore", 60)
    keyword_density = _choice(analysis, "keywordDensity", KEYWORD_DENSITIES, "moderate")
    benefit_focus_ratio = _number(analysis, "benefitFocusRatio", 60)
    key_phrases = _strings(analysis, "keyPhrases")
    power_words = _strings(analysis, "powerWords")

    return BrandDNA(
        user_id=user_id,
        writing_style=_choice(analysis, "writingStyle", WRITING_STYLES, "professional"),
        avg_sentence_length=avg_sentence_length,
        avg_paragraph_length=th.average_paragraph_length(texts),
        complexity_level=th.complexity_level(avg_sentence_length, formality_score),
        tone_density=_choice(analysis, "toneDensity", TONE_DENSITIES, "balanced"),
        personality_traits=_strings(analysis, "personalityTraits"),
        emotional_range=_choice(analysis, "emotionalRange", EMOTIONAL_RANGES, "moderate"),
        formality_score=formality_score,
        key_phrases=key_phrases,
        power_words=power_words,
        avoided_words=_strings(analysis, "avoidedWords"),
        vocabulary_level=th.vocabulary_level(texts),
        jargon_frequency=_choice(analysis, "jargonFrequency", JARGON_FREQUENCIES, "moderate"),
        cta_style=_text(analysis, "ctaStyle", "action-oriented"),
        cta_frequency=_choice(analysis, "ctaFrequency", CTA_FREQUENCIES, "moderate"),
        headline_style=th.headline_style(texts),
        listing_style=th.listing_style(texts),
        emoji_frequency=_choice(analysis, "emojiFrequency", EMOJI_FREQUENCIES, "rare"),
        punctuation_style=th.punctuation_style(texts),
        capitalization_style=th.capitalization_style(texts),
        benefit_focus_ratio=benefit_focus_ratio,
        social_proof_usage=_choice(analysis, "socialProofUsage", SOCIAL_PROOF_USAGES, "occasional"),
        urgency_tactics=_choice(analysis, "urgencyTactics", URGENCY_LEVELS, "subtle"),
        storytelling_frequency=_choice(
            analysis, "storytellingFrequency", STORYTELLING_FREQUENCIES, "moderate"
        ),
        keyword_density=keyword_density,
        seo_vs_conversion=th.seo_vs_conversion(keyword_density, benefit_focus_ratio),
        core_values=_strings(analysis, "coreValues"),
        brand_personality=_text(analysis, "brandPersonality", ""),
        unique_selling_points=_strings(analysis, "uniqueSellingPoints"),
        target_audience_insights=th.audience_insights(texts),
        preferred_model=DEFAULT_MODEL,
        # formal brands get more conservative sampling
        creativity_level=40 if formality_score > 70 else 70,
        sample_texts=texts,
        edit_patterns=[],
        last_updated=_now(),
        confidence_score=calculate_confidence_score(len(texts), key_phrases, power_words),
    )


def detect_edit_type(original: str, edited: str) -> str:
    if abs(len(original) - len(edited)) > 50:
        return "length"
    if "!" in edited and "!" not in original:
        return "tone"

    original_lower, edited_lower = original.lower(), edited.lower()
    if any(p in edited_lower and p not in original_lower for p in CTA_PHRASES):
        return "cta"

    if len(edited.split()) != len(original.split()):
        return "structure"
    return "other"


def describe_edit(original: str, edited: str) -> str:
    if len(edited) > len(original):
        return "User prefers more detailed content"
    if len(edited) < len(original):
        return "User prefers concise content"
    return "User adjusted phrasing"


def learn_from_edit(brand_dna: BrandDNA, original_text: str, edited_text: str) -> BrandDNA:
    """
    Record one user edit and return the updated profile.

    The input profile is left untouched. The returned profile's edit log is
    the old log plus one entry, and its confidence grows by a fixed step,
    capped at 100. Callers editing the same user concurrently must serialize.
    """
    pattern = EditPattern(
        original_text=original_text,
        edited_text=edited_text,
        edit_type=detect_edit_type(original_text, edited_text),
        timestamp=_now(),
        learned_from=describe_edit(original_text, edited_text),
    )
    logger.debug(f"Learned {pattern.edit_type} edit for user {brand_dna.user_id}")

    return replace(
        brand_dna,
        edit_patterns=[*brand_dna.edit_patterns, pattern],
        confidence_score=min(100, brand_dna.confidence_score + CONFIDENCE_STEP_PER_EDIT),
        last_updated=pattern.timestamp,
    )
