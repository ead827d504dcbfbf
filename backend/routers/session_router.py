from fastapi import APIRouter, Depends, HTTPException, Request

from db.supabase import get_db
from middlewares.auth import verify_auth_token
from schemas.coach_schemas import (
    CreateSessionSchema,
    SessionHistoryRequestSchema,
    UpdateSessionSchema,
)
from services.session_service import (
    create_session,
    get_project_history,
    list_sessions,
    patch_session,
)
from utils.constant import ERROR_MESSAGES

router = APIRouter(
    tags=["Sessions"],
    dependencies=[Depends(verify_auth_token)]
)


@router.get("/user-sessions")
def get_user_sessions(request: Request, db=Depends(get_db)):
    user_id = request.state.user["id"]
    sessions = list_sessions(db, user_id)
    return {"success": True, "sessions": sessions}


@router.post("/user-sessions")
def post_user_session(request: Request, payload: CreateSessionSchema, db=Depends(get_db)):
    user_id = request.state.user["id"]
    session = create_session(db, user_id, payload)
    return {"success": True, "session": session}


@router.post("/sessions/history")
def post_session_history(payload: SessionHistoryRequestSchema, db=Depends(get_db)):
    return get_project_history(db, payload.project_id)


@router.put("/sessions/{session_id}")
def put_session(session_id: str, request: Request, payload: UpdateSessionSchema, db=Depends(get_db)):
    user_id = request.state.user["id"]
    session = patch_session(db, user_id, session_id, payload)
    if session is None:
        raise HTTPException(status_code=404, detail=ERROR_MESSAGES["not_found"])
    return {"success": True, "session": session}
