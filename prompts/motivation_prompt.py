"""Motivational Quote Prompt."""

from langchain_core.prompts import PromptTemplate

MOTIVATION_PROMPT = PromptTemplate.from_template(
    """Generate a short, powerful motivational quote for fitness and health.
Make it inspiring, original, and action-oriented.
Keep it under 20 words.
Include one relevant emoji at the end.
Don't use quotation marks.
Return only the quote text."""
)
