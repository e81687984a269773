"""
Shared fixtures: a recording stub for the generative backend and canned payloads.
"""
import json

import pytest

from zyra_seo.models import BrandDNA, SEOGenerationInput


class FakeClient:
    """Returns canned replies in order (the last one repeats) and records every call."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    async def complete(self, system_prompt, user_prompt, options):
        self.calls.append(
            {"system_prompt": system_prompt, "user_prompt": user_prompt, "options": options}
        )
        reply = self.replies[min(len(self.calls), len(self.replies)) - 1]
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply)
        return reply


def aero_description():
    opening = (
        "Meet the <strong>Aero Running Shoes</strong>, built for runners "
        "who want lightweight comfort on every mile."
    )
    filler = "The breathable mesh upper keeps your feet cool and dry during every long run."
    closing = "Shop now and feel the difference today."
    return " ".join([opening] + [filler] * 17 + [closing])


def aero_payload():
    return {
        "seoTitle": "Aero Running Shoes for Lightweight Breathable Daily Runs",
        "seoDescription": aero_description(),
        "metaTitle": "Aero Running Shoes | Lightweight Breathable Sneakers",
        "metaDescription": (
            "Lightweight, breathable Aero running shoes built for daily miles. "
            "Cushioned comfort, cool mesh and grip you can trust. Shop the new pair."
        ),
        "keywords": [
            "running shoes",
            "lightweight sneakers",
            "breathable running shoes",
            "daily trainers",
            "road running shoes",
            "mesh sneakers",
        ],
        "shopifyTags": ["running", "footwear", "lightweight", "breathable"],
        "searchIntent": "commercial",
        "suggestedKeywords": ["best running shoes", "running shoes for men"],
        "competitorGaps": ["no breathability data", "weak size guidance", "few use cases"],
    }


@pytest.fixture
def aero_input():
    return SEOGenerationInput(
        product_name="Aero Running Shoes",
        category="Footwear",
        key_features="lightweight, breathable",
        keywords=["running shoes", "lightweight sneakers"],
    )


@pytest.fixture
def brand_dna():
    return BrandDNA(
        user_id="user_123",
        writing_style="casual",
        avg_sentence_length=14,
        key_phrases=["every mile", "feel the difference"],
        power_words=["lightweight", "breathable"],
        emoji_frequency="never",
        preferred_model="test-model",
        creativity_level=40,
        confidence_score=70,
    )
