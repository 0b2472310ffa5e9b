"""Auth endpoints: thin pass-through to Supabase Auth email/password sign-in."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from supabase import AuthError

from src.api.models import AuthResponse, Credentials
from src.storage.client import get_supabase_client

router = APIRouter()


@router.post("/api/auth/login", response_model=AuthResponse)
async def login(credentials: Credentials) -> AuthResponse:
    """Sign in with email and password and return the session tokens."""
    client = get_supabase_client()
    try:
        result = client.auth.sign_in_with_password(
            {"email": credentials.email, "password": credentials.password}
        )
    except AuthError as exc:
        raise HTTPException(status_code=401, detail=exc.message) from exc

    session = result.session
    return AuthResponse(
        user_id=result.user.id if result.user else None,
        access_token=session.access_token if session else None,
        refresh_token=session.refresh_token if session else None,
    )


@router.post("/api/auth/signup", response_model=AuthResponse, status_code=201)
async def signup(credentials: Credentials) -> AuthResponse:
    """Register a new user.

    With email confirmation enabled no session is returned and
    ``confirmation_required`` is true.
    """
    client = get_supabase_client()
    try:
        result = client.auth.sign_up({"email": credentials.email, "password": credentials.password})
    except AuthError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc

    session = result.session
    return AuthResponse(
        user_id=result.user.id if result.user else None,
        access_token=session.access_token if session else None,
        refresh_token=session.refresh_token if session else None,
        confirmation_required=session is None,
    )
