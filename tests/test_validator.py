"""
Output validation and repair tests
"""
import pytest

from conftest import aero_payload
from zyra_seo.errors import GenerationError
from zyra_seo.models import UnifiedSEOOutput
from zyra_seo.validator import parse_json_response, validate_post_formatting, validate_seo_output


class TestParseJsonResponse:
    """Test parse_json_response"""

    def test_plain_object(self):
        assert parse_json_response('{"seoTitle": "x"}') == {"seoTitle": "x"}

    def test_object_inside_code_fence(self):
        text = 'Here you go:\n```json\n{"keywords": ["a", "b"]}\n```'
        assert parse_json_response(text) == {"keywords": ["a", "b"]}

    def test_invalid_json_is_hard_failure(self):
        with pytest.raises(GenerationError, match="Invalid JSON response"):
            parse_json_response("{not json at all")

    def test_non_object_is_hard_failure(self):
        with pytest.raises(GenerationError):
            parse_json_response("[1, 2, 3]")

    def test_empty_reply(self):
        with pytest.raises(GenerationError, match="Empty response"):
            parse_json_response("   ")

    def test_braces_in_trailing_prose_break_the_parse(self):
        text = '```json\n{"seoTitle": "x"}\n```\nUse {brackets} sparingly.'
        with pytest.raises(GenerationError, match="Invalid JSON response"):
            parse_json_response(text)


class TestValidateSEOOutput:
    """Test validate_seo_output field repair"""

    def test_complete_payload_untouched(self):
        payload = aero_payload()
        content = validate_seo_output(payload, "Aero Running Shoes", "Footwear")

        assert content.seo_title == payload["seoTitle"]
        assert content.keywords == payload["keywords"]
        assert content.search_intent == "commercial"
        assert content.repaired_fields == []

    def test_missing_meta_title_falls_back_to_seo_title(self):
        payload = aero_payload()
        del payload["metaTitle"]
        content = validate_seo_output(payload, "Aero Running Shoes")

        assert content.meta_title == payload["seoTitle"]
        assert content.repaired_fields == ["metaTitle"]

    def test_wrong_types_are_replaced(self):
        payload = aero_payload()
        payload["seoTitle"] = 42
        payload["competitorGaps"] = "not a list"
        payload["searchIntent"] = "buy-it"
        content = validate_seo_output(payload, "Aero Running Shoes")

        assert content.seo_title == "Aero Running Shoes"
        assert content.competitor_gaps == []
        assert content.search_intent == "commercial"
        assert set(content.repaired_fields) == {"seoTitle", "competitorGaps", "searchIntent"}

    def test_non_string_list_items_dropped(self):
        payload = aero_payload()
        payload["keywords"] = ["running shoes", None, 7, "  ", "sneakers"]
        content = validate_seo_output(payload, "Aero Running Shoes")
        assert content.keywords == ["running shoes", "sneakers"]

    def test_empty_response_gets_context_defaults(self):
        content = validate_seo_output({}, "Aero Running Shoes", "Footwear")

        assert content.seo_title == "Aero Running Shoes"
        assert "<strong>Aero Running Shoes</strong>" in content.seo_description
        assert content.meta_title == "Aero Running Shoes"
        assert content.meta_description.startswith("Shop Aero Running Shoes online.")
        assert content.keywords == [
            "aero running shoes",
            "footwear",
            "buy online",
            "premium quality",
            "free shipping",
        ]
        assert content.shopify_tags == ["Footwear", "bestseller", "new arrival", "featured"]
        assert content.suggested_keywords == []

    def test_no_category_means_no_default_tags(self):
        content = validate_seo_output({}, "Aero Running Shoes")
        assert content.shopify_tags == []
        assert "footwear" not in content.keywords


def make_output(**overrides):
    data = dict(
        seo_title="Aero Running Shoes for Daily Runs",
        seo_description="<p>Meet the <strong>Aero Running Shoes</strong>.</p>",
        meta_title="Aero",
        meta_description="Meta",
        keywords=["running shoes"],
        seo_score=90,
        readability_score=70,
        conversion_score=80,
        brand_voice_match_score=85,
        search_intent="commercial",
        suggested_keywords=[],
        competitor_gaps=[],
        shopify_title="Aero Running Shoes for Daily Runs",
        shopify_description="<p>Meet the <strong>Aero Running Shoes</strong>.</p>",
        shopify_tags=[],
        framework_used="Standard",
        generated_at="2026-01-01T00:00:00+00:00",
        ai_model="test-model",
        confidence=80,
    )
    data.update(overrides)
    return UnifiedSEOOutput(**data)


class TestValidatePostFormatting:
    """Test validate_post_formatting"""

    def test_intact_output(self):
        assert validate_post_formatting(make_output(), "Aero Running Shoes") == []

    def test_lost_product_emphasis(self):
        output = make_output(seo_description="<p>Meet the Aero Running Shoes.</p>")
        problems = validate_post_formatting(output, "Aero Running Shoes")
        assert problems == ["seo_description lost the bold product name"]

    def test_empty_description_and_keywords(self, caplog):
        output = make_output(seo_description="  ", keywords=[])
        problems = validate_post_formatting(output, "Aero Running Shoes")

        assert "seo_description is empty after formatting" in problems
        assert "keywords list is empty" in problems
        assert "Post-formatting validation" in caplog.text

    def test_placeholder_in_shopify_description(self):
        output = make_output(shopify_description="<p>undefined</p>")
        assert validate_post_formatting(output) == [
            "shopify_description contains a placeholder value"
        ]
