"""Orchestration: input -> prompts -> model -> repair -> scores -> Shopify HTML."""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from .client import CompletionOptions, GenerativeClient
from .config import DEFAULT_MODEL, DEFAULT_TEMPERATURE, GENERATION_MAX_TOKENS, SHOPIFY_TITLE_LIMIT
from .errors import GenerationError, InvalidInputError
from .models import (
    VARIANT_LABELS,
    VARIANT_TYPES,
    BrandDNA,
    SEOGenerationInput,
    SEOVariant,
    UnifiedSEOOutput,
)
from .prompts import build_system_prompt, build_user_prompt
from .scoring import (
    DEFAULT_BRAND_VOICE_SCORE,
    calculate_brand_voice_match,
    calculate_confidence,
    calculate_conversion_score,
    calculate_readability_score,
    calculate_seo_score,
    predict_performance,
)
from .shopify import format_shopify_html
from .validator import parse_json_response, validate_post_formatting, validate_seo_output

logger = logging.getLogger(__name__)


@dataclass
class GenerationOptions:
    auto_select_framework: bool = False
    auto_fetch_serp: bool = False
    apply_brand_dna: bool = True


def _completion_options(brand_dna: BrandDNA | None) -> CompletionOptions:
    model = (brand_dna.preferred_model if brand_dna else "") or DEFAULT_MODEL
    temperature = DEFAULT_TEMPERATURE
    if brand_dna and brand_dna.creativity_level:
        temperature = brand_dna.creativity_level / 100
    return CompletionOptions(model=model, temperature=temperature, max_tokens=GENERATION_MAX_TOKENS)


def _pending_context_warnings(seo_input: SEOGenerationInput, options: GenerationOptions) -> list[str]:
    """Auto-fetch/auto-select are the caller's job; note when they were asked for but not done."""
    warnings = []
    if options.auto_fetch_serp and not seo_input.serp:
        warnings.append("SERP auto-fetch requested but no SERP data was supplied; generating without it")
    if options.auto_select_framework and not seo_input.marketing_framework:
        warnings.append(
            "Framework auto-selection requested but no framework was supplied; using the standard voice"
        )
    for warning in warnings:
        logger.warning(warning)
    return warnings


async def generate_unified_seo(
    seo_input: SEOGenerationInput,
    client: GenerativeClient,
    options: GenerationOptions | None = None,
) -> UnifiedSEOOutput:
    """
    Generate scored SEO content for one product.

    Steps:
        1. Note skipped SERP/framework resolution
        2. Build system + user prompts
        3. One model call (model/temperature from Brand DNA when present)
        4. Parse and repair the JSON reply
        5. Score SEO, readability, conversion and brand-voice match
        6. Optional Shopify HTML formatting + post-formatting check

    Args:
        seo_input: Product facts and optional context, already resolved by the caller
        client: Generative backend
        options: Orchestration switches

    Returns:
        UnifiedSEOOutput; never a partial result

    Raises:
        InvalidInputError: product name missing
        GenerationError: any failure after input checks, with the cause message kept
    """
    options = options or GenerationOptions()
    if not seo_input.product_name or not seo_input.product_name.strip():
        raise InvalidInputError("product_name is required for SEO generation")

    brand_dna = seo_input.brand_dna if options.apply_brand_dna else None
    framework = seo_input.marketing_framework

    logger.info(f"Generating SEO content for '{seo_input.product_name}'")

    try:
        warnings = _pending_context_warnings(seo_input, options)

        user_prompt = build_user_prompt(seo_input)
        system_prompt = build_system_prompt(framework, brand_dna)
        completion = _completion_options(brand_dna)

        raw_text = await client.complete(system_prompt, user_prompt, completion)
        raw = parse_json_response(raw_text)

        content = validate_seo_output(raw, seo_input.product_name, seo_input.category)

        seo_score = calculate_seo_score(content, seo_input)
        readability = calculate_readability_score(content)
        conversion = calculate_conversion_score(content)
        brand_voice = (
            calculate_brand_voice_match(content, brand_dna) if brand_dna else DEFAULT_BRAND_VOICE_SCORE
        )

        output = UnifiedSEOOutput(
            seo_title=content.seo_title,
            seo_description=content.seo_description,
            meta_title=content.meta_title,
            meta_description=content.meta_description,
            keywords=content.keywords,
            seo_score=seo_score,
            readability_score=readability,
            conversion_score=conversion,
            brand_voice_match_score=brand_voice,
            search_intent=content.search_intent,
            suggested_keywords=content.suggested_keywords,
            competitor_gaps=content.competitor_gaps,
            shopify_title=content.seo_title[:SHOPIFY_TITLE_LIMIT],
            shopify_description=content.seo_description,
            shopify_tags=content.shopify_tags,
            framework_used=framework.name if framework else "Standard",
            generated_at=datetime.now(timezone.utc).isoformat(),
            ai_model=completion.model,
            confidence=calculate_confidence(seo_score, readability, conversion),
            warnings=warnings,
        )

        if seo_input.shopify_html_formatting:
            output.seo_description = format_shopify_html(output.seo_description)
            output.shopify_description = output.seo_description
            problems = validate_post_formatting(output, seo_input.product_name)
            output.warnings.extend(f"Post-formatting: {p}" for p in problems)
    except Exception as e:
        logger.error(f"Error generating unified SEO for '{seo_input.product_name}': {e}")
        raise GenerationError(f"Failed to generate SEO content: {e}") from e

    logger.info(
        f"Generated SEO content for '{seo_input.product_name}' "
        f"(seo={output.seo_score}, conversion={output.conversion_score}, confidence={output.confidence})"
    )
    return output


async def generate_seo_variants(
    seo_input: SEOGenerationInput,
    client: GenerativeClient,
    variant_count: int = 3,
    concurrent: bool = False,
) -> list[SEOVariant]:
    """
    Generate up to three A/B variants: seo-focused, conversion-focused, emotional-focused.

    Each variant is an independent generate_unified_seo call with the tone
    override set to its type. With concurrent=True the calls run through
    asyncio.gather; the returned order is the same either way.
    """
    count = max(0, min(variant_count, len(VARIANT_TYPES)))
    variant_types = VARIANT_TYPES[:count]
    inputs = [replace(seo_input, tone_override=t) for t in variant_types]

    if concurrent:
        outputs = await asyncio.gather(*(generate_unified_seo(i, client) for i in inputs))
    else:
        outputs = [await generate_unified_seo(i, client) for i in inputs]

    return [
        SEOVariant(
            variant=label,
            type=variant_type,
            output=output,
            expected_performance=predict_performance(output.seo_score, variant_type),
        )
        for label, variant_type, output in zip(VARIANT_LABELS, variant_types, outputs)
    ]


def generate_unified_seo_sync(
    seo_input: SEOGenerationInput,
    client: GenerativeClient,
    options: GenerationOptions | None = None,
) -> UnifiedSEOOutput:
    """Synchronous wrapper for generate_unified_seo."""
    return asyncio.run(generate_unified_seo(seo_input, client, options))


def generate_seo_variants_sync(
    seo_input: SEOGenerationInput,
    client: GenerativeClient,
    variant_count: int = 3,
) -> list[SEOVariant]:
    """Synchronous wrapper for generate_seo_variants."""
    return asyncio.run(generate_seo_variants(seo_input, client, variant_count))
