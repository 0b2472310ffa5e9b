"""Analysis endpoints: send a transcript to Claude and return an editable result."""

from __future__ import annotations

import logging

from anthropic import APIStatusError
from fastapi import APIRouter, HTTPException
from postgrest.exceptions import APIError

from src.api.deps import CurrentUser
from src.api.models import AnalyzeRequest, AnalyzeResponse, AnalyzeStatus, ParsedResultModel
from src.extraction.analyzer import analyze_transcript, is_configured
from src.extraction.assignees import resolve_assignees
from src.storage.client import get_supabase_client
from src.storage.profiles import list_profiles

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/analyze", response_model=AnalyzeStatus)
async def analyze_status() -> AnalyzeStatus:
    """Report whether the language-model key is configured on the server."""
    return AnalyzeStatus(ok=True, has_key=is_configured())


@router.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest, user_id: CurrentUser) -> AnalyzeResponse:
    """Extract summary, decisions, and todos from a transcript.

    The result is not stored; the client reviews it and submits it to
    POST /api/meetings. When the answer cannot be parsed, ``parsed`` is null
    and ``raw_text`` carries the model's answer.
    """
    if not is_configured():
        raise HTTPException(
            status_code=500,
            detail="Anthropic API key is not configured on the server.",
        )

    try:
        extraction = analyze_transcript(request.title, request.meeting_date, request.transcript)
    except APIStatusError as exc:
        # Claude API overloaded (529) or other upstream error: return 503 so the
        # browser receives a proper JSON response with CORS headers intact.
        raise HTTPException(status_code=503, detail=f"LLM unavailable: {exc.message}") from exc
    except ValueError as exc:
        logger.warning("Unusable analysis answer: %s", exc)
        raise HTTPException(status_code=503, detail=f"LLM unavailable: {exc}") from exc

    if extraction.parsed is None:
        return AnalyzeResponse(parsed=None, raw_text=extraction.raw_text)

    result = extraction.parsed
    if request.resolve_assignees and result.todos:
        try:
            profiles = list_profiles(get_supabase_client())
        except APIError as exc:
            logger.warning("Profile lookup failed; assignees left unresolved: %s", exc.message)
        else:
            result = resolve_assignees(result, profiles)

    return AnalyzeResponse(
        parsed=ParsedResultModel.from_result(result),
        raw_text=extraction.raw_text,
    )
