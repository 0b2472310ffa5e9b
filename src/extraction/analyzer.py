"""Claude-powered meeting analysis: summary, decisions, and todos as JSON text."""

from __future__ import annotations

import logging

from anthropic import Anthropic
from anthropic.types import TextBlock

from src.config import settings
from src.extraction.models import Extraction
from src.extraction.response_parser import extract_meeting_result

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a meeting minutes assistant. You read meeting transcripts and "
    "reply with JSON only, using exactly the key structure you are given."
)

OUTPUT_SHAPE = '{ "summary":[], "decisions":[], "todos":[{"assignee":"","due_date":"","task":""}] }'


def is_configured() -> bool:
    """Return True if an Anthropic API key is available."""
    return bool(settings.anthropic_api_key.strip())


def build_analysis_prompt(title: str, meeting_date: str, transcript: str) -> str:
    """Build the user prompt asking for summary, decisions, and todos."""
    return "\n".join(
        [
            "Below is a meeting transcript. Based on it, always return the "
            "following three items as JSON.",
            "1) summary: at most 5 short points covering the most important "
            "issues and conclusions.",
            "2) decisions: only what was explicitly agreed, approved, or decided "
            "in the meeting. Do not guess.",
            "3) todos: short imperative sentences starting with a verb, with the "
            "assignee and the due date (YYYY-MM-DD) when mentioned.",
            "Use only this key structure:",
            OUTPUT_SHAPE,
            "",
            "--- transcript start ---",
            transcript or "",
            "--- transcript end ---",
            "",
            f"Meeting title: {title or ''}",
            f"Meeting date: {meeting_date or ''}",
        ]
    )


def request_analysis(title: str, meeting_date: str, transcript: str) -> str:
    """Send the transcript to Claude and return the raw text answer.

    Raises:
        anthropic.APIStatusError: The API rejected the request or is overloaded.
        ValueError: The answer was empty or its first content block was not text.
    """
    client = Anthropic(api_key=settings.anthropic_api_key)
    response = client.messages.create(
        model=settings.llm_model,
        max_tokens=settings.llm_max_tokens,
        system=SYSTEM_PROMPT,
        messages=[
            {
                "role": "user",
                "content": build_analysis_prompt(title, meeting_date, transcript),
            }
        ],
    )

    if not response.content:
        raise ValueError("Claude returned no content blocks")
    block = response.content[0]
    if not isinstance(block, TextBlock):
        raise ValueError(f"Expected TextBlock from Claude, got {type(block).__name__}")
    return block.text


def analyze_transcript(title: str, meeting_date: str, transcript: str) -> Extraction:
    """Run the analysis call and extract a structured result from the answer."""
    answer = request_analysis(title, meeting_date, transcript)
    extraction = extract_meeting_result(answer)
    if extraction.parsed is None:
        logger.warning("Could not parse analysis answer for %r (%d chars)", title, len(answer))
    else:
        logger.info(
            "Analysed %r: %d summary points, %d decisions, %d todos",
            title,
            len(extraction.parsed.summary),
            len(extraction.parsed.decisions),
            len(extraction.parsed.todos),
        )
    return extraction
