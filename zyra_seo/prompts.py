"""Prompt assembly for SEO generation and Brand DNA analysis."""

from .errors import InvalidInputError
from .models import BrandDNA, MarketingFramework, SEOGenerationInput

VARIANT_EMPHASIS = {
    "seo-focused": "Prioritize search visibility: front-load keywords and cover every target keyword naturally.",
    "conversion-focused": "Prioritize conversion: lead with concrete benefits, objections handled, strong CTA.",
    "emotional-focused": "Prioritize emotional connection: tell a short story and speak to desires and pain points.",
}

SYSTEM_PERSONA = (
    "You are Zyra AI - an expert SEO and conversion optimization specialist.\n\n"
    "Your mission: Generate world-class, conversion-optimized SEO content that:\n"
    "- Ranks highly in search engines\n"
    "- Converts visitors into customers\n"
    "- Sounds authentically human (never robotic)\n"
    "- Follows proven marketing psychology\n"
    "- Matches the brand's unique voice\n\n"
    "CORE PRINCIPLES:\n"
    "1. Quality over quantity - every word must earn its place\n"
    "2. Benefits before features - what's in it for the customer?\n"
    "3. Natural keyword integration - never force or stuff keywords\n"
    "4. Emotional connection - speak to desires and pain points\n"
    "5. Clear, scannable format - make it easy to read\n"
    "6. Action-oriented - guide the reader to next steps\n"
)

GOLDEN_SEO_FORMULA = """**GOLDEN SEO FORMULA - GENERATE ALL OF THE FOLLOWING:**

1. **SEO Title** (8-12 words): Keyword-rich, click-worthy title optimized for search engines
   - Must be exactly 8-12 words
   - Front-load primary keyword
   - Include power words
   - Create curiosity or urgency

2. **Full Product Description** (150-300 words): Structured, persuasive description with:
   - **IMPORTANT: Bold the product name using <strong>Product Name</strong> tags in the opening sentence**
   - Compelling opening that highlights main benefit (include bold product name here)
   - Feature list with benefits (not just features)
   - Use case scenarios and transformations
   - Natural keyword integration (avoid keyword stuffing)
   - Clear call to action
   - Scannable format with short paragraphs

3. **Meta Title** (50-60 characters): Optimized for search result previews
   - Exactly 50-60 characters
   - Include brand differentiator
   - Action-oriented language

4. **Meta Description** (130-150 characters): Compelling preview text for search results
   - Exactly 130-150 characters
   - Focus on unique value proposition
   - Include primary keyword naturally
   - End with soft CTA

5. **SEO Keywords** (5-10 keywords): Most relevant, high-value keywords
   - Mix of short-tail and long-tail
   - Include buyer intent keywords

6. **Shopify Tags** (10-15 tags): Practical tags for Shopify categorization
   - Product type, use case, features
   - Season, occasion if relevant

7. **Search Intent**: Primary intent (commercial, informational, navigational, or transactional)

8. **Suggested Keywords** (5-7): Additional high-value keywords to consider for future optimization

9. **Competitor Gaps** (3-5): Opportunities competitors are missing

**QUALITY REQUIREMENTS:**
- Natural, conversational tone (no robotic AI language)
- Benefit-focused (not just feature lists)
- Scannable format
- SEO-optimized but human-readable
- Action-oriented CTAs
- No keyword stuffing
"""

RESPONSE_SHAPE = """Respond with JSON in this exact format:
{
  "seoTitle": "your seo title (8-12 words)",
  "seoDescription": "your full product description with <strong>Product Name</strong> bolded in opening (150-300 words)",
  "metaTitle": "your meta title (50-60 chars)",
  "metaDescription": "your meta description (130-150 chars)",
  "keywords": ["keyword1", "keyword2", "keyword3", "keyword4", "keyword5"],
  "shopifyTags": ["tag1", "tag2", "tag3", "tag4", "tag5"],
  "searchIntent": "commercial",
  "suggestedKeywords": ["keyword6", "keyword7", "keyword8"],
  "competitorGaps": ["gap1", "gap2", "gap3"]
}"""


def build_user_prompt(seo_input: SEOGenerationInput) -> str:
    """
    Build the generation prompt from product facts and optional context.

    Sections appear in a fixed order and only when their data is present:
    product facts, current content, target keywords, SERP insights, visual
    analysis, then the fixed output contract.
    """
    if not seo_input.product_name or not seo_input.product_name.strip():
        raise InvalidInputError("product_name is required for SEO generation")

    sections = []

    facts = [
        "Generate comprehensive, high-quality SEO content for this product:\n",
        "**PRODUCT INFORMATION**",
        f"Product Name: {seo_input.product_name}",
        f"Category: {seo_input.category or 'General'}",
        f"Key Features: {seo_input.key_features or 'Premium quality product'}",
        f"Target Audience: {seo_input.target_audience or 'General consumers'}",
        f"Price Point: {seo_input.price_point or 'mid-range'}",
    ]
    if seo_input.tone_override:
        facts.append(f"Tone / Emphasis: {seo_input.tone_override}")
        if seo_input.tone_override in VARIANT_EMPHASIS:
            facts.append(VARIANT_EMPHASIS[seo_input.tone_override])
    sections.append("\n".join(facts))

    if seo_input.current_title or seo_input.current_description:
        current = ["**CURRENT CONTENT (for improvement)**"]
        if seo_input.current_title:
            current.append(f"Current Title: {seo_input.current_title}")
        if seo_input.current_description:
            current.append(f"Current Description: {seo_input.current_description}")
        sections.append("\n".join(current))

    if seo_input.keywords:
        sections.append("**TARGET KEYWORDS**\n" + ", ".join(seo_input.keywords))

    if seo_input.serp:
        serp = seo_input.serp
        serp_lines = [
            "**SERP INSIGHTS**",
            f"Top-ranking titles follow these patterns: {', '.join(serp.top_ranking_title_patterns)}",
            f"Common keywords in top results: {', '.join(serp.common_keywords)}",
            f"Search Intent: {serp.search_intent}",
            f"Optimal title length: ~{serp.average_title_length} characters",
            f"Optimal meta description length: ~{serp.average_meta_length} characters",
        ]
        if serp.feature_snippet_format:
            serp_lines.append(f"Featured snippet format: {serp.feature_snippet_format}")
        sections.append("\n".join(serp_lines))

    if seo_input.image_analysis:
        image = seo_input.image_analysis
        visual = [
            "**VISUAL ANALYSIS**",
            f"Product Style: {image.style}",
            f"Detected Features: {', '.join(image.detected_features)}",
            f"Target Demographic: {image.target_demographic}",
            f"Use Case: {image.use_case}",
        ]
        if image.colors:
            visual.append(f"Colors: {', '.join(image.colors)}")
        sections.append("\n".join(visual))

    sections.append(GOLDEN_SEO_FORMULA)
    sections.append(
        "**CRITICAL: The product name must appear as "
        f"<strong>{seo_input.product_name}</strong> in the opening sentence of the description.**"
    )
    sections.append(RESPONSE_SHAPE)

    return "\n\n".join(sections)


def _brand_voice_lines(brand_dna: BrandDNA) -> list[str]:
    params = [
        ("Writing Style", brand_dna.writing_style),
        ("Typical Sentence Length", f"{brand_dna.avg_sentence_length} words"),
        ("Typical Paragraph Length", f"{brand_dna.avg_paragraph_length} words"),
        ("Complexity", brand_dna.complexity_level),
        ("Tone Density", brand_dna.tone_density),
        ("Personality Traits", ", ".join(brand_dna.personality_traits)),
        ("Emotional Range", brand_dna.emotional_range),
        ("Formality (0-100)", brand_dna.formality_score),
        ("Key Phrases", ", ".join(brand_dna.key_phrases)),
        ("Power Words", ", ".join(brand_dna.power_words)),
        ("Never Use", ", ".join(brand_dna.avoided_words)),
        ("Vocabulary Level", brand_dna.vocabulary_level),
        ("Jargon", brand_dna.jargon_frequency),
        ("CTA Style", brand_dna.cta_style),
        ("CTA Frequency", brand_dna.cta_frequency),
        ("Headline Style", brand_dna.headline_style),
        ("Listing Style", brand_dna.listing_style),
        ("Emoji Usage", brand_dna.emoji_frequency),
        ("Punctuation", brand_dna.punctuation_style),
        ("Capitalization", brand_dna.capitalization_style),
        ("Benefit Focus (0-100)", brand_dna.benefit_focus_ratio),
        ("Social Proof", brand_dna.social_proof_usage),
        ("Urgency Tactics", brand_dna.urgency_tactics),
        ("Storytelling", brand_dna.storytelling_frequency),
        ("Keyword Density", brand_dna.keyword_density),
        ("SEO vs Conversion", brand_dna.seo_vs_conversion),
        ("Core Values", ", ".join(brand_dna.core_values)),
        ("Brand Personality", brand_dna.brand_personality),
        ("Unique Selling Points", ", ".join(brand_dna.unique_selling_points)),
        ("Audience Insights", ", ".join(brand_dna.target_audience_insights)),
    ]
    return [f"- {label}: {value}" for label, value in params if value not in ("", None)]


def build_system_prompt(
    framework: MarketingFramework | None = None,
    brand_dna: BrandDNA | None = None,
) -> str:
    prompt = SYSTEM_PERSONA

    if framework:
        lines = [f"\n**MARKETING FRAMEWORK: {framework.name}**", framework.description]
        if framework.tone:
            lines.append(f"Tone: {framework.tone}")
        if framework.writing_style:
            lines.append(f"Writing Style: {framework.writing_style}")
        if framework.psychological_triggers:
            lines.append(f"Psychological Triggers: {', '.join(framework.psychological_triggers)}")
        if framework.cta_style:
            lines.append(f"CTA Style: {framework.cta_style}")
        lines.append(
            "\nApply this framework's tone, structure, and psychological triggers throughout all content.\n"
        )
        prompt += "\n".join(lines)

    if brand_dna:
        prompt += (
            "\n**BRAND VOICE DNA:**\n"
            + "\n".join(_brand_voice_lines(brand_dna))
            + "\n\nMatch this exact brand voice throughout the content. "
            "This is how the brand naturally communicates.\n"
        )

    return prompt


BRAND_ANALYST_SYSTEM_PROMPT = (
    "You are an expert brand voice analyst. Analyze writing samples to extract "
    "deep brand DNA insights. Respond with JSON only."
)


def build_brand_analysis_prompt(texts: list[str], additional_guidelines: str = "") -> str:
    samples = "\n\n---\n\n".join(f"Sample {i + 1}:\n{text}" for i, text in enumerate(texts))
    guidelines = f"\n**Additional Guidelines:**\n{additional_guidelines}\n" if additional_guidelines else ""

    return (
        "Analyze the following brand content samples and create a comprehensive Brand DNA profile.\n\n"
        f"**Sample Texts:**\n{samples}\n"
        f"{guidelines}\n"
        "**Analyze and extract:**\n\n"
        "1. writingStyle: formal, casual, professional, playful, luxury, or technical\n"
        "2. avgSentenceLength: words in a typical sentence\n"
        "3. toneDensity: minimal, balanced, rich, or intense\n"
        "4. personalityTraits: 5-7 key personality characteristics\n"
        "5. emotionalRange: reserved, moderate, expressive, or intense\n"
        "6. formalityScore: 0-100 (0 = very casual, 100 = very formal)\n"
        "7. keyPhrases: 10-15 frequently used phrases unique to this brand\n"
        "8. powerWords: 10-15 impactful words this brand uses often\n"
        "9. avoidedWords: words/phrases this brand seems to avoid\n"
        "10. jargonFrequency: none, rare, moderate, or heavy\n"
        "11. ctaStyle: how the brand asks for action, with example CTAs\n"
        "12. ctaFrequency: rare, moderate, or frequent\n"
        "13. emojiFrequency: never, rare, moderate, or frequent\n"
        "14. benefitFocusRatio: % of benefits vs features (0-100)\n"
        "15. socialProofUsage: never, occasional, or frequent\n"
        "16. urgencyTactics: none, subtle, moderate, or aggressive\n"
        "17. storytellingFrequency: rare, moderate, or frequent\n"
        "18. keywordDensity: light, moderate, or heavy\n"
        "19. coreValues: 3-5 brand values evident in the writing\n"
        "20. brandPersonality: 2-3 sentence description\n"
        "21. uniqueSellingPoints: what makes this brand different\n\n"
        "Respond with JSON in this format:\n"
        "{\n"
        '  "writingStyle": "professional",\n'
        '  "avgSentenceLength": 15,\n'
        '  "toneDensity": "balanced",\n'
        '  "personalityTraits": ["confident", "helpful", "innovative"],\n'
        '  "emotionalRange": "moderate",\n'
        '  "formalityScore": 65,\n'
        '  "keyPhrases": ["phrase1", "phrase2"],\n'
        '  "powerWords": ["word1", "word2"],\n'
        '  "avoidedWords": ["word1", "word2"],\n'
        '  "jargonFrequency": "rare",\n'
        '  "ctaStyle": "Direct and action-oriented: Shop Now, Get Started",\n'
        '  "ctaFrequency": "moderate",\n'
        '  "emojiFrequency": "rare",\n'
        '  "benefitFocusRatio": 70,\n'
        '  "socialProofUsage": "frequent",\n'
        '  "urgencyTactics": "subtle",\n'
        '  "storytellingFrequency": "moderate",\n'
        '  "keywordDensity": "moderate",\n'
        '  "coreValues": ["quality", "innovation"],\n'
        '  "brandPersonality": "description",\n'
        '  "uniqueSellingPoints": ["usp1", "usp2"]\n'
        "}"
    )
