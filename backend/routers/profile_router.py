from fastapi import APIRouter, Depends, Request

from db.supabase import get_db
from middlewares.auth import verify_auth_token
from schemas.coach_schemas import UserProfileSchema
from services.profile_service import get_profile, save_profile

router = APIRouter(
    tags=["Profile"],
    dependencies=[Depends(verify_auth_token)]
)


@router.get("/user-profile")
def get_user_profile(request: Request, db=Depends(get_db)):
    user_id = request.state.user["id"]
    profile = get_profile(db, user_id)
    return {"success": True, "profile": profile}


@router.post("/user-profile")
def post_user_profile(request: Request, payload: UserProfileSchema, db=Depends(get_db)):
    user_id = request.state.user["id"]
    profile = save_profile(db, user_id, payload)
    return {"success": True, "profile": profile}
