import logging
from datetime import datetime, timezone

from schemas.coach_schemas import CreateSessionSchema, UpdateSessionSchema

logger = logging.getLogger(__name__)

SESSIONS_TABLE = "sessions"
SUMMARY_MESSAGE_COUNT = 5
SUMMARY_SNIPPET_LENGTH = 100


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def list_sessions(db, user_id: str):
    response = (
        db.table(SESSIONS_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .execute()
    )
    return response.data or []


def create_session(db, user_id: str, payload: CreateSessionSchema):
    now = _now_iso()
    row = {
        **payload.model_dump(),
        "user_id": user_id,
        "created_at": now,
        "updated_at": now,
    }
    response = db.table(SESSIONS_TABLE).insert(row).execute()
    logger.info("💬 Session created for user %s (coach: %s)", user_id, payload.coach_id)
    return response.data[0] if response.data else None


def patch_session(db, user_id: str, session_id: str, payload: UpdateSessionSchema):
    updates = {
        "messages": [m.model_dump() for m in payload.messages],
        "updated_at": _now_iso(),
    }
    response = (
        db.table(SESSIONS_TABLE)
        .update(updates)
        .eq("id", session_id)
        .eq("user_id", user_id)
        .execute()
    )
    return response.data[0] if response.data else None


def summarize_messages(messages) -> str:
    """Short digest of the user's side of the last few messages."""
    recent = (messages or [])[-SUMMARY_MESSAGE_COUNT:]
    snippets = [
        (m.get("content") or "")[:SUMMARY_SNIPPET_LENGTH]
        for m in recent
        if m.get("role") == "user"
    ]
    return " / ".join(snippets)


def get_project_history(db, project_id: str) -> dict:
    response = (
        db.table(SESSIONS_TABLE)
        .select("*")
        .contains("project_ids", [project_id])
        .order("created_at", desc=True)
        .limit(1)
        .execute()
    )
    sessions = response.data or []
    last_session = sessions[0] if sessions else None

    summary = None
    if last_session and last_session.get("messages"):
        summary = summarize_messages(last_session["messages"])

    return {
        "hasHistory": last_session is not None,
        "lastSession": last_session,
        "summary": summary,
    }
