import logging

from fastapi import HTTPException, Request

from config import SUPABASE_AUTH_COOKIE
from db.supabase import get_supabase
from utils.constant import ERROR_MESSAGES

logger = logging.getLogger(__name__)


def extract_access_token(request: Request):
    auth_header = request.headers.get("Authorization")
    if auth_header:
        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
        return None
    return request.cookies.get(SUPABASE_AUTH_COOKIE)


def verify_auth_token(request: Request):
    """Resolve the Supabase user behind the request and stash it on request.state.

    The token comes from an `Authorization: Bearer` header or, for browser
    calls, from the auth cookie. Invalid tokens raise AuthApiError, which the
    app turns into a 401.
    """
    token = extract_access_token(request)
    if not token:
        raise HTTPException(status_code=401, detail=ERROR_MESSAGES["unauthorized"])

    user_response = get_supabase().auth.get_user(token)
    if not user_response or not user_response.user:
        raise HTTPException(status_code=401, detail=ERROR_MESSAGES["unauthorized"])

    user = user_response.user
    request.state.user = {"id": user.id, "email": user.email}
    request.state.access_token = token
    logger.debug("🔑 Authenticated user %s", user.id)
