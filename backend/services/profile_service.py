import logging
from datetime import datetime, timezone

from schemas.coach_schemas import UserProfileSchema
from utils.profile import profile_to_row

logger = logging.getLogger(__name__)

PROFILE_TABLE = "users_profile"


def get_profile(db, user_id: str):
    response = db.table(PROFILE_TABLE).select("*").eq("id", user_id).limit(1).execute()
    return response.data[0] if response.data else None


def save_profile(db, user_id: str, profile: UserProfileSchema):
    """Upsert the profile; the completeness score is always recomputed here."""
    row = profile_to_row(profile)
    row["id"] = user_id
    row["updated_at"] = datetime.now(timezone.utc).isoformat()

    response = db.table(PROFILE_TABLE).upsert(row).execute()
    logger.info("👤 Profile saved for %s (completeness: %s%%)", user_id, row["profile_completeness"])
    return response.data[0] if response.data else None
