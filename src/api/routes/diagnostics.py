"""Opt-in diagnostics endpoint, mounted only when DEBUG_DIAGNOSTICS is enabled."""

from __future__ import annotations

from fastapi import APIRouter

from src.config import settings
from src.extraction.analyzer import is_configured

router = APIRouter()


@router.get("/api/debug/diagnostics")
async def diagnostics() -> dict[str, object]:
    """Report which external collaborators are configured. Never returns secrets."""
    return {
        "llm_model": settings.llm_model,
        "anthropic_configured": is_configured(),
        "supabase_url": settings.supabase_url or None,
        "supabase_key_configured": bool(settings.supabase_key),
        "service_role_configured": bool(settings.supabase_service_role_key),
    }
