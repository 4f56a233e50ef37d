"""Prompt rendering for trend analysis requests."""

from __future__ import annotations

from core import TrendRequest


NOT_SPECIFIED = "not specified"

_TREND_ANALYST_PROMPT = """Act as an expert social media trend analyst. Your task is to simulate web scraping and data aggregation across {platforms} to identify trending topics.
Analyze the trends based on these parameters:
- Platforms: {platforms}
- Topic/Subject: "{topic}"
- Time Frame: Month: {month}, Day: {day}
- Output Format: {output_format}

Your goal is to populate a JSON object based on the provided schema.
- Identify relevant trending topics.
- For each topic, extract key details: main keywords, main hashtags, and popular audio.
- For each keyword, compute a 'viral_percentage' (a number between 0 and 100) indicating its potential to make content go viral. Base this on historical data and current trend signals.
- Provide verification resources (links to articles, stats, or relevant posts) that justify why each topic was included.
- If data for any platform or topic is unavailable, keep that platform in the output and populate its 'error' field with a clear message.
- Sort all lists (trending_topics, keywords, hashtags, popular_audio) in descending order of popularity or impact.
- Your response must be ONLY the JSON object. Do not include any other text, explanations, or markdown."""


def build_trend_prompt(request: TrendRequest) -> str:
    """Render the single instruction block sent to the model."""
    return _TREND_ANALYST_PROMPT.format(
        platforms=", ".join(request.platforms),
        topic=request.topic,
        month=request.month or NOT_SPECIFIED,
        day=request.day or NOT_SPECIFIED,
        output_format=request.output_format.value,
    )
