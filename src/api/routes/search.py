"""Search endpoint: keyword search across meetings, decisions, and todos."""

from __future__ import annotations

from fastapi import APIRouter

from src.api.deps import CurrentUser
from src.api.models import SearchHit, SearchRequest, SearchResponse
from src.storage.client import get_supabase_client
from src.storage.search import search

router = APIRouter()


def _run(keyword: str) -> SearchResponse:
    if not keyword.strip():
        return SearchResponse(hits=[])
    hits = search(get_supabase_client(), keyword)
    return SearchResponse(hits=[SearchHit.model_validate(h) for h in hits])


@router.get("/api/search", response_model=SearchResponse)
async def search_get(user_id: CurrentUser, q: str = "") -> SearchResponse:
    return _run(q)


@router.post("/api/search", response_model=SearchResponse)
async def search_post(user_id: CurrentUser, request: SearchRequest | None = None) -> SearchResponse:
    return _run(request.q if request else "")
