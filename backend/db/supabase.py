from functools import lru_cache

from fastapi import Request
from supabase import Client, create_client

from config import SUPABASE_KEY, SUPABASE_URL


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """Shared client used for auth lookups (token -> user)."""
    return create_client(SUPABASE_URL, SUPABASE_KEY)


def create_user_client(access_token: str) -> Client:
    # Queries run as the signed-in user so row-level security applies.
    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    client.postgrest.auth(access_token)
    return client


def get_db(request: Request) -> Client:
    """Per-request, RLS-scoped client. Requires `verify_auth_token` to have run."""
    return create_user_client(request.state.access_token)
