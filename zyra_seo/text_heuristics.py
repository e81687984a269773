"""Deterministic text heuristics used by scoring and Brand DNA analysis.

Everything here is pure: no I/O, no randomness, same input -> same output.
"""

import re

_VOWEL_GROUP = re.compile(r"[aeiouy]+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\n+")


def estimate_syllables(word: str) -> int:
    """
    Rough syllable count for one word.

    >>> estimate_syllables("cat")
    1
    >>> estimate_syllables("beautiful")
    3
    """
    word = word.lower().strip()
    if len(word) <= 3:
        return 1

    count = len(_VOWEL_GROUP.findall(word)) or 1
    # silent e
    if word.endswith("e"):
        count -= 1
    return max(1, count)


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def word_count(text: str) -> int:
    return len(text.split())


def average_sentence_length(text: str) -> float:
    """Words per sentence, 0.0 when the text has no sentences."""
    sentences = split_sentences(text)
    if not sentences:
        return 0.0
    return word_count(text) / len(sentences)


def readability_score(text: str) -> float:
    """
    Simplified Flesch Reading Ease clamped to [0, 100].

    Returns exactly 50 when the text has no sentences or no words.
    """
    if not text:
        return 50

    sentences = split_sentences(text)
    words = text.split()
    if not sentences or not words:
        return 50

    syllables = sum(estimate_syllables(w) for w in words)
    avg_words_per_sentence = len(words) / len(sentences)
    avg_syllables_per_word = syllables / len(words)

    score = 206.835 - (1.015 * avg_words_per_sentence) - (84.6 * avg_syllables_per_word)
    return max(0, min(100, score))


def lexical_richness(texts: list[str]) -> float:
    """Unique words / total words over all texts joined together."""
    words = " ".join(texts).lower().split()
    if not words:
        return 0.0
    return len(set(words)) / len(words)


def vocabulary_level(texts: list[str]) -> str:
    richness = lexical_richness(texts)
    if richness < 0.3:
        return "basic"
    if richness < 0.5:
        return "intermediate"
    if richness < 0.7:
        return "advanced"
    return "expert"


def punctuation_style(texts: list[str]) -> str:
    """Bucket the share of expressive marks (!?…) among sentence-ending marks."""
    all_text = " ".join(texts)
    expressive = len(re.findall(r"[!?…]", all_text))
    sentence_marks = len(re.findall(r"[.!?]", all_text))

    if sentence_marks == 0:
        return "standard"

    ratio = expressive / sentence_marks
    if ratio < 0.1:
        return "minimal"
    if ratio < 0.3:
        return "standard"
    return "expressive"


def capitalization_style(texts: list[str]) -> str:
    all_text = " ".join(texts)
    if re.search(r"\b[A-Z]{3,}\b", all_text):
        return "creative"
    title_case_pairs = re.findall(r"\b[A-Z][a-z]+\s[A-Z][a-z]+", all_text)
    if len(title_case_pairs) > 5:
        return "title-case"
    return "standard"


def listing_style(texts: list[str]) -> str:
    all_text = "\n".join(texts)
    has_bullets = bool(re.search(r"[•\-*]", all_text))
    has_numbers = bool(re.search(r"\d+\.", all_text))

    if has_bullets and has_numbers:
        return "mixed"
    if has_bullets:
        return "bullets"
    if has_numbers:
        return "numbers"
    return "paragraphs"


def headline_style(texts: list[str]) -> str:
    has_questions = any("?" in t for t in texts)
    has_numbers = any(re.search(r"\d", t) for t in texts)

    if has_numbers and has_questions:
        return "varied"
    if has_numbers:
        return "data-driven"
    if has_questions:
        return "curiosity-driven"
    return "statement-based"


def average_paragraph_length(texts: list[str]) -> int:
    """Mean words per blank-line-separated paragraph, 50 when there are none."""
    total_words = 0
    total_paragraphs = 0
    for text in texts:
        paragraphs = [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]
        total_paragraphs += len(paragraphs)
        total_words += sum(word_count(p) for p in paragraphs)

    if total_paragraphs == 0:
        return 50
    return round(total_words / total_paragraphs)


def complexity_level(avg_sentence_length: float, formality_score: float) -> str:
    score = (avg_sentence_length + formality_score) / 2
    if score < 30:
        return "simple"
    if score < 60:
        return "moderate"
    if score < 80:
        return "complex"
    return "expert"


def seo_vs_conversion(keyword_density: str, benefit_focus_ratio: float) -> str:
    if keyword_density == "heavy":
        return "seo-focused"
    if benefit_focus_ratio > 70:
        return "conversion-focused"
    return "balanced"


# Naive keyword matching; the generative analysis covers the nuanced cases.
_AUDIENCE_SIGNALS = (
    (("professional", "business"), "B2B / Professional audience"),
    (("affordable", "budget"), "Price-conscious consumers"),
    (("premium", "luxury"), "High-end market"),
)


def audience_insights(texts: list[str]) -> list[str]:
    all_text = " ".join(texts).lower()
    return [
        insight
        for terms, insight in _AUDIENCE_SIGNALS
        if any(term in all_text for term in terms)
    ]
