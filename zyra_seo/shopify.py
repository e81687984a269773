"""Markdown-ish emphasis, lists and line breaks -> Shopify description HTML."""

import re


def format_shopify_html(description: str) -> str:
    """
    Rewrite generated text into the HTML subset Shopify descriptions accept.

    The passes run in a fixed order: bold, italic, paragraphs, list items,
    <ul> wrapping, blank-line collapsing, then <br> for leftover newlines.
    Already-converted HTML passes through without gaining extra tags.
    """
    if not description:
        return ""

    formatted = description

    formatted = re.sub(r"\*\*(.*?)\*\*", r"<strong>\1</strong>", formatted)
    formatted = re.sub(r"__(.*?)__", r"<strong>\1</strong>", formatted)

    formatted = re.sub(r"\*(.*?)\*", r"<em>\1</em>", formatted)
    formatted = re.sub(r"_(.*?)_", r"<em>\1</em>", formatted)

    paragraphs = [p for p in formatted.split("\n\n") if p.strip()]
    if len(paragraphs) > 1:
        formatted = "\n".join(f"<p>{p.strip()}</p>" for p in paragraphs)

    formatted = re.sub(r"^[\-*]\s+(.+)$", r"<li>\1</li>", formatted, flags=re.MULTILINE)
    formatted = re.sub(
        r"(<li>.*?</li>\s*)+",
        lambda m: f"<ul>\n{m.group(0)}</ul>\n",
        formatted,
        flags=re.DOTALL,
    )

    formatted = re.sub(r"\n{3,}", "\n\n", formatted).strip()

    # newlines not touching a tag become explicit breaks
    formatted = re.sub(r"(?<!>)\n(?!<)", "<br>\n", formatted)

    return formatted
