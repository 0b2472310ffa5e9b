"""Shared FastAPI dependencies: Supabase Auth bearer-token verification."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import AuthError

from src.storage.client import get_supabase_client

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> str:
    """Resolve the bearer token to a Supabase user id, or fail with 401."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Authentication required")

    client = get_supabase_client()
    try:
        response = client.auth.get_user(credentials.credentials)
    except AuthError as exc:
        logger.info("Rejected bearer token: %s", exc.message)
        raise HTTPException(status_code=401, detail="Authentication required") from exc

    user = response.user if response else None
    if user is None or not user.id:
        raise HTTPException(status_code=401, detail="Authentication required")
    return str(user.id)


CurrentUser = Annotated[str, Depends(get_current_user_id)]
