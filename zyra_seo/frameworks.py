"""Marketing framework catalog: tone and structure presets for generation."""

from .models import MarketingFramework

MARKETING_FRAMEWORKS: tuple[MarketingFramework, ...] = (
    MarketingFramework(
        id="luxury-premium",
        name="Luxury/High-end",
        description="Sophisticated, exclusive tone inspired by luxury brands like Hermès and Apple",
        tone="Refined, exclusive, understated elegance",
        writing_style="Minimalist yet powerful, every word carefully chosen",
        key_characteristics=["Understated sophistication", "Exclusivity messaging", "Craftsmanship emphasis"],
        best_for=["Premium products", "Luxury fashion", "High-end electronics", "Designer furniture", "Fine jewelry"],
        psychological_triggers=["Exclusivity", "Status", "Heritage", "Craftsmanship", "Scarcity"],
        title_format='Minimal, elegant, material/craft focused. E.g., "Handcrafted Italian Leather Wallet"',
        cta_style='Subtle and refined: "Discover", "Explore the collection"',
    ),
    MarketingFramework(
        id="gen-z-viral",
        name="Gen Z Viral",
        description="TikTok energy - casual, authentic, meme-aware, scroll-stopping",
        tone="Conversational, playful, authentic",
        writing_style="Short sentences. Lots of energy. Internet-native language.",
        key_characteristics=["Authenticity", "Humor", "Social proof in numbers"],
        best_for=["Fashion", "Streetwear", "Beauty", "Accessories", "Gadgets"],
        psychological_triggers=["FOMO", "Belonging", "Trend participation"],
        title_format='Casual, punchy, can include slang. E.g., "The Hoodie That Ate TikTok"',
        cta_style='Casual invites: "Cop it", "Get yours", "Shop the drop"',
    ),
    MarketingFramework(
        id="eco-friendly",
        name="Eco-Friendly Green",
        description="Sustainability-focused, environmentally conscious, ethical branding",
        tone="Earnest, informative, hopeful, mission-driven",
        writing_style="Clear, honest, educational without being preachy",
        key_characteristics=["Impact metrics", "Material transparency", "Certifications"],
        best_for=["Sustainable products", "Organic food", "Eco home goods", "Natural beauty"],
        psychological_triggers=["Purpose", "Responsibility", "Community"],
        title_format='Clear + sustainable attribute. E.g., "100% Recycled Ocean Plastic Phone Case"',
        cta_style='Impact-focused: "Make a difference", "Join the movement"',
    ),
    MarketingFramework(
        id="minimalist-premium",
        name="Minimalist Premium",
        description="IKEA + MUJI style - functional, clean, accessible quality",
        tone="Clean, functional, quietly confident",
        writing_style="Simple sentences. Clear benefits. No fluff.",
        key_characteristics=["Functional clarity", "Honest specs", "Accessible quality"],
        best_for=["Home goods", "Furniture", "Storage", "Kitchenware", "Office supplies"],
        psychological_triggers=["Simplicity", "Order", "Practicality"],
        title_format='Descriptive + functional. E.g., "Stackable Storage Bins, Set of 3"',
        cta_style='Direct actions: "Add to cart", "Select size"',
    ),
    MarketingFramework(
        id="aggressive-sales",
        name="Aggressive Sales",
        description="Urgency + scarcity - direct response marketing style",
        tone="Urgent, bold, benefit-heavy, action-oriented",
        writing_style="Power words, urgency, clear benefits, immediate action",
        key_characteristics=["Price anchoring", "Countdowns", "Guarantees"],
        best_for=["Flash sales", "Clearance", "Electronics deals", "Impulse buys"],
        psychological_triggers=["Urgency", "Scarcity", "Loss aversion", "Social proof"],
        title_format='Benefit + urgency. E.g., "Save 70% - Last Chance Premium Headphones"',
        cta_style='Action commands: "Claim your discount now", "Grab yours before they\'re gone"',
    ),
    MarketingFramework(
        id="technical-professional",
        name="Technical Professional",
        description="Engineering-heavy, spec-focused, detail-oriented",
        tone="Authoritative, precise, specification-rich",
        writing_style="Detailed, accurate, jargon-appropriate for audience",
        key_characteristics=["Exact specifications", "Compliance details", "Compatibility lists"],
        best_for=["Industrial equipment", "B2B products", "Professional tools", "Computer hardware"],
        psychological_triggers=["Authority", "Reliability", "Precision"],
        title_format='Model number + key specs. E.g., "XPS-9000 Workstation - 32GB RAM, RTX 4080"',
        cta_style='Professional language: "Request quote", "View specifications"',
    ),
    MarketingFramework(
        id="emotional-transformation",
        name="Emotional Transformation",
        description="Storytelling-focused, before/after, life-changing narrative",
        tone="Empathetic, inspiring, transformation-focused",
        writing_style="Story-driven, emotional connection, relatable struggles",
        key_characteristics=["Before/after framing", "Relatable struggles", "Testimonials"],
        best_for=["Wellness", "Fitness", "Self-improvement", "Health", "Personal care"],
        psychological_triggers=["Aspiration", "Hope", "Identity"],
        title_format='Transformation-focused. E.g., "The Yoga Mat That Changed Everything"',
        cta_style='Transformation language: "Start your journey", "Transform today"',
    ),
)

_FALLBACK_ID = "minimalist-premium"

# (terms matched in the lowercased field, framework id), first hit wins
_AUDIENCE_RULES = ((("gen z", "teen", "youth"), "gen-z-viral"),)
_CATEGORY_RULES = (
    (("eco", "sustainable", "organic"), "eco-friendly"),
    (("professional", "b2b", "industrial"), "technical-professional"),
    (("wellness", "fitness", "health"), "emotional-transformation"),
    (("home", "furniture", "storage"), "minimalist-premium"),
)


def get_framework_by_id(framework_id: str) -> MarketingFramework | None:
    return next((f for f in MARKETING_FRAMEWORKS if f.id == framework_id), None)


def get_frameworks_for_category(category: str) -> list[MarketingFramework]:
    if not category or not category.strip():
        return []
    category_lower = category.strip().lower()
    return [
        f
        for f in MARKETING_FRAMEWORKS
        if any(
            use.lower() in category_lower or category_lower in use.lower()
            for use in f.best_for
        )
    ]


def recommend_framework(
    category: str = "",
    price_point: str | None = None,
    target_audience: str = "",
) -> MarketingFramework:
    """Pick a framework from product attributes; minimalist-premium when nothing matches."""
    if price_point in ("premium", "luxury"):
        return get_framework_by_id("luxury-premium")

    audience = (target_audience or "").lower()
    for terms, framework_id in _AUDIENCE_RULES:
        if any(t in audience for t in terms):
            return get_framework_by_id(framework_id)

    category_lower = (category or "").lower()
    for terms, framework_id in _CATEGORY_RULES:
        if any(t in category_lower for t in terms):
            return get_framework_by_id(framework_id)

    return get_framework_by_id(_FALLBACK_ID)
