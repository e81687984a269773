"""
Quality scoring tests
"""
import pytest

from zyra_seo.models import BrandDNA, SEOContent, SEOGenerationInput
from zyra_seo.scoring import (
    DEFAULT_BRAND_VOICE_SCORE,
    calculate_brand_voice_match,
    calculate_confidence,
    calculate_conversion_score,
    calculate_seo_score,
    predict_performance,
)


def make_content(**overrides):
    data = dict(
        seo_title="running shoes" + " a" * 22,  # 57 chars
        seo_description=" ".join(["word"] * 300),
        meta_title="Meta title",
        meta_description="m" * 155,
        keywords=["k1", "k2", "k3", "k4", "k5", "k6"],
        shopify_tags=[],
        search_intent="commercial",
        suggested_keywords=[],
        competitor_gaps=[],
    )
    data.update(overrides)
    return SEOContent(**data)


@pytest.fixture
def seo_input():
    return SEOGenerationInput(product_name="Aero Running Shoes", keywords=["Running Shoes"])


class TestSEOScore:
    """Test calculate_seo_score"""

    def test_ideal_content_clamps_to_100(self, seo_input):
        content = make_content()
        assert len(content.seo_title) == 57
        assert calculate_seo_score(content, seo_input) == 100

    def test_title_out_of_range(self, seo_input):
        content = make_content(seo_title="running shoes")
        # -10 title, +5 meta, +5 words
        assert calculate_seo_score(content, seo_input) == 100

    def test_penalties_stack(self, seo_input):
        content = make_content(
            seo_title="Short title",
            meta_description="too short",
            seo_description="only a few words here",
            keywords=["one"],
        )
        # -10 title, -10 meta, -15 keyword, -10 words, -10 keywords
        assert calculate_seo_score(content, seo_input) == 45

    def test_missing_keyword_in_title(self, seo_input):
        content = make_content(
            seo_title="x" * 40,
            meta_description="m" * 130,
            seo_description=" ".join(["word"] * 200),
        )
        assert calculate_seo_score(content, seo_input) == 85

    def test_keyword_match_is_case_insensitive(self, seo_input):
        content = make_content(
            seo_title="RUNNING SHOES for every road and every trail",
            meta_description="m" * 130,
            seo_description=" ".join(["word"] * 200),
        )
        assert calculate_seo_score(content, seo_input) == 100

    def test_no_target_keywords_means_no_keyword_penalty(self):
        content = make_content(
            seo_title="x" * 40,
            meta_description="m" * 130,
            seo_description=" ".join(["word"] * 200),
        )
        assert calculate_seo_score(content, SEOGenerationInput(product_name="X")) == 100


class TestConversionScore:
    """Test calculate_conversion_score"""

    def test_base(self):
        assert calculate_conversion_score(make_content(seo_description="A shoe.")) == 70

    def test_cta(self):
        assert calculate_conversion_score(make_content(seo_description="Explore it.")) == 80

    def test_benefit_words_capped(self):
        text = "save free guarantee quality premium best perfect"
        assert calculate_conversion_score(make_content(seo_description=text)) == 85

    def test_everything(self):
        text = "Shop now! Best quality, free shipping, limited stock."
        # cta +10, benefits best/quality/free +9, urgency +5
        assert calculate_conversion_score(make_content(seo_description=text)) == 94


class TestBrandVoiceMatch:
    """Test calculate_brand_voice_match"""

    def test_key_phrases_and_sentence_length(self):
        brand = BrandDNA(user_id="u", key_phrases=["run free", "every mile"], avg_sentence_length=4)
        content = make_content(seo_description="We run free. Every mile counts.")
        # 2 phrases +4; avg 3 words/sentence vs 4 -> no penalty
        assert calculate_brand_voice_match(content, brand) == 84

    def test_key_phrase_bonus_capped(self):
        phrases = ["a", "b", "c", "d", "e", "f"]
        brand = BrandDNA(user_id="u", key_phrases=phrases, avg_sentence_length=6)
        content = make_content(seo_description="a b c d e f.")
        assert calculate_brand_voice_match(content, brand) == 90

    def test_emoji_forbidden(self):
        brand = BrandDNA(user_id="u", emoji_frequency="never", avg_sentence_length=3)
        content = make_content(seo_description="Run fast now \U0001F680.")
        assert calculate_brand_voice_match(content, brand) == 65

    def test_emoji_expected(self):
        brand = BrandDNA(user_id="u", emoji_frequency="frequent", avg_sentence_length=2)
        content = make_content(seo_description="Run fast.")
        assert calculate_brand_voice_match(content, brand) == 70

    def test_sentence_length_penalty_capped(self):
        brand = BrandDNA(user_id="u", avg_sentence_length=40)
        content = make_content(seo_description="Run fast.")
        assert calculate_brand_voice_match(content, brand) == 70

    def test_sentence_length_partial_penalty(self):
        brand = BrandDNA(user_id="u", avg_sentence_length=10)
        content = make_content(seo_description="Run fast. Go far.")
        # avg 2 words, gap 8 -> -8
        assert calculate_brand_voice_match(content, brand) == 72

    def test_default_score_constant(self):
        assert DEFAULT_BRAND_VOICE_SCORE == 85


class TestConfidenceAndPrediction:
    """Test calculate_confidence and predict_performance"""

    def test_confidence_is_rounded_mean(self):
        assert calculate_confidence(100, 60.4, 85) == 82

    def test_prediction_table(self):
        seo = predict_performance(90, "seo-focused")
        assert (seo.click_through_rate, seo.conversion_lift, seo.seo_ranking) == (2.8, 5, 90)

        conversion = predict_performance(90, "conversion-focused")
        assert (conversion.click_through_rate, conversion.conversion_lift, conversion.seo_ranking) == (3.5, 15, 85)

        emotional = predict_performance(90, "emotional-focused")
        assert (emotional.click_through_rate, emotional.conversion_lift, emotional.seo_ranking) == (4.2, 25, 80)

    def test_unknown_variant_gets_base_prediction(self):
        base = predict_performance(90, "mystery")
        assert (base.click_through_rate, base.conversion_lift, base.seo_ranking) == (2.5, 0, 50)
