"""Parse and repair the model's JSON so later stages always see every field."""

import json
import logging
import re
from typing import Any

from .errors import GenerationError
from .models import SEARCH_INTENTS, SEOContent, UnifiedSEOOutput

logger = logging.getLogger(__name__)


def parse_json_response(text: str) -> dict:
    """
    Extract and decode the JSON object in a model reply.

    Tolerates prose or code fences around the object. Anything that does not
    decode to a JSON object raises GenerationError.
    """
    if not text or not text.strip():
        raise GenerationError("Empty response from model")

    # greedy: first "{" to last "}", so braces in trailing prose break the parse
    json_match = re.search(r"\{.*\}", text, re.DOTALL)
    candidate = json_match.group() if json_match else text

    try:
        result = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse model response: {text[:200]!r}")
        raise GenerationError("Invalid JSON response from model") from e

    if not isinstance(result, dict):
        raise GenerationError("Invalid JSON response from model")
    return result


def _text(raw: dict, key: str) -> str | None:
    value = raw.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _string_list(raw: dict, key: str) -> list[str] | None:
    value = raw.get(key)
    if not isinstance(value, list):
        return None
    items = [v.strip() for v in value if isinstance(v, str) and v.strip()]
    return items or None


def validate_seo_output(
    raw: dict[str, Any],
    product_name: str = "",
    category: str = "",
) -> SEOContent:
    """
    Repair a decoded model response field by field.

    A field that is missing, empty or of the wrong type gets a deterministic
    fallback (derived from the product name/category where one makes sense).
    The names of repaired fields are kept on SEOContent.repaired_fields.
    """
    repaired: list[str] = []
    name = product_name or "product"

    def pick(value, fallback, field_name: str):
        if value is None:
            repaired.append(field_name)
            return fallback
        return value

    seo_title = pick(_text(raw, "seoTitle"), product_name or "Premium Product", "seoTitle")
    seo_description = pick(
        _text(raw, "seoDescription"),
        f"Discover our premium <strong>{name}</strong>. "
        "Shop now with free shipping and guaranteed quality.",
        "seoDescription",
    )
    meta_title = pick(_text(raw, "metaTitle"), seo_title, "metaTitle")
    meta_description = pick(
        _text(raw, "metaDescription"),
        f"Shop {product_name or 'premium products'} online. "
        "High quality, competitive prices, fast shipping.",
        "metaDescription",
    )

    keywords = _string_list(raw, "keywords")
    if keywords is None:
        repaired.append("keywords")
        keywords = []
        if product_name:
            keywords = [
                product_name.lower(),
                *([category.lower()] if category else []),
                "buy online",
                "premium quality",
                "free shipping",
            ][:7]

    shopify_tags = _string_list(raw, "shopifyTags")
    if shopify_tags is None:
        repaired.append("shopifyTags")
        shopify_tags = [category, "bestseller", "new arrival", "featured"] if category else []

    search_intent = raw.get("searchIntent")
    if search_intent not in SEARCH_INTENTS:
        repaired.append("searchIntent")
        search_intent = "commercial"

    suggested_keywords = pick(_string_list(raw, "suggestedKeywords"), [], "suggestedKeywords")
    competitor_gaps = pick(_string_list(raw, "competitorGaps"), [], "competitorGaps")

    if repaired:
        logger.debug(f"Repaired fields in model output: {', '.join(repaired)}")

    return SEOContent(
        seo_title=seo_title,
        seo_description=seo_description,
        meta_title=meta_title,
        meta_description=meta_description,
        keywords=keywords,
        shopify_tags=shopify_tags,
        search_intent=search_intent,
        suggested_keywords=suggested_keywords,
        competitor_gaps=competitor_gaps,
        repaired_fields=repaired,
    )


def validate_post_formatting(output: UnifiedSEOOutput, product_name: str = "") -> list[str]:
    """
    Check that HTML formatting did not erase required content.

    Returns the problems found (empty list when the output is intact). Never
    raises: a degraded description is still returned to the caller.
    """
    problems: list[str] = []

    if not output.seo_title.strip():
        problems.append("seo_title is empty after formatting")

    if not output.seo_description.strip():
        problems.append("seo_description is empty after formatting")
    elif product_name:
        marker = f"<strong>{product_name}</strong>".lower()
        if marker not in output.seo_description.lower():
            problems.append("seo_description lost the bold product name")

    if "undefined" in output.shopify_description:
        problems.append("shopify_description contains a placeholder value")

    if not output.keywords:
        problems.append("keywords list is empty")

    for problem in problems:
        logger.warning(f"Post-formatting validation: {problem}")

    return problems
