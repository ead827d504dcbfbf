import json
import logging
from datetime import datetime, timezone

from openai import OpenAIError
from starlette.concurrency import run_in_threadpool

from exceptions import LLMServiceError
from schemas.coach_schemas import (
    ProjectAIUpdateSchema,
    ProjectCreateSchema,
    ProjectUpdateSchema,
    StakeholderCreateSchema,
    StakeholderUpdateSchema,
)
from services.llm_service import classify_llm_error, create_chat_completion, parse_json_content
from services.prompt_service import build_project_update_prompt
from utils.constant import ERROR_MESSAGES, PROJECT_EDITABLE_FIELDS

logger = logging.getLogger(__name__)

PROJECTS_TABLE = "project_cards"
STAKEHOLDERS_TABLE = "project_stakeholders"
SESSIONS_TABLE = "sessions"
AI_UPDATES_LOG_TABLE = "ai_updates_log"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _first(response):
    return response.data[0] if response.data else None


def list_projects(db, user_id: str):
    response = (
        db.table(PROJECTS_TABLE)
        .select("*, project_stakeholders(*)")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .execute()
    )
    return response.data or []


def create_project(db, user_id: str, payload: ProjectCreateSchema):
    row = {"user_id": user_id, **payload.model_dump()}
    response = db.table(PROJECTS_TABLE).insert(row).execute()
    logger.info("📁 Project created for user %s", user_id)
    return _first(response)


def get_project(db, user_id: str, project_id: str, with_relations: bool = True):
    columns = "*, project_stakeholders(*), project_documents(*)" if with_relations else "*"
    response = (
        db.table(PROJECTS_TABLE)
        .select(columns)
        .eq("id", project_id)
        .eq("user_id", user_id)
        .limit(1)
        .execute()
    )
    return _first(response)


def update_project(db, user_id: str, project_id: str, payload: ProjectUpdateSchema):
    updates = payload.model_dump(exclude_unset=True)
    updates["updated_at"] = _now_iso()
    response = (
        db.table(PROJECTS_TABLE)
        .update(updates)
        .eq("id", project_id)
        .eq("user_id", user_id)
        .execute()
    )
    return _first(response)


def delete_project(db, user_id: str, project_id: str):
    db.table(PROJECTS_TABLE).delete().eq("id", project_id).eq("user_id", user_id).execute()
    logger.info("🗑️ Project %s deleted", project_id)


def count_project_sessions(db, project_id: str) -> int:
    """Count sessions linked to the project and cache the number on the card."""
    response = (
        db.table(SESSIONS_TABLE)
        .select("id")
        .contains("project_ids", [project_id])
        .execute()
    )
    count = len(response.data or [])
    db.table(PROJECTS_TABLE).update({"session_count": count}).eq("id", project_id).execute()
    return count


async def apply_ai_update(db, user_id: str, project_id: str, payload: ProjectAIUpdateSchema):
    """Let the model pull project changes out of a conversation and apply them.

    Returns the applied field -> value mapping, or None when the project does
    not exist. Only editable project columns are touched, and every change is
    written to the AI update log.
    """
    project = await run_in_threadpool(get_project, db, user_id, project_id, with_relations=False)
    if project is None:
        return None
    if project.get("ai_auto_update") is False:
        logger.info("⏸️ AI auto-update disabled for project %s", project_id)
        return {}

    prompt = build_project_update_prompt(
        json.dumps(project, ensure_ascii=False, indent=2, default=str),
        payload.conversation,
    )
    try:
        content = await create_chat_completion(
            [{"role": "system", "content": prompt}],
            response_format={"type": "json_object"},
        )
        suggested = parse_json_content(content)
    except OpenAIError as e:
        logger.error("💥 AI update failed for project %s: %s", project_id, e)
        raise classify_llm_error(e) from e
    except ValueError as e:
        logger.error("💥 AI update returned invalid JSON for project %s: %s", project_id, e)
        raise LLMServiceError(500, ERROR_MESSAGES["ai_update_failed"]) from e

    updates = {k: v for k, v in suggested.items() if k in PROJECT_EDITABLE_FIELDS}
    if not updates:
        return {}

    await run_in_threadpool(_record_ai_updates, db, user_id, project_id, project, updates, payload.session_id)
    logger.info("🤖 AI updated project %s fields: %s", project_id, ", ".join(updates))
    return updates


def _record_ai_updates(db, user_id, project_id, project, updates, session_id):
    # Log before touching the card: a failed log leaves the project unchanged.
    log_rows = [
        {
            "project_id": project_id,
            "field_name": field,
            "old_value": json.dumps(project.get(field), ensure_ascii=False, default=str),
            "new_value": json.dumps(value, ensure_ascii=False, default=str),
            "session_id": session_id,
        }
        for field, value in updates.items()
    ]
    db.table(AI_UPDATES_LOG_TABLE).insert(log_rows).execute()
    (
        db.table(PROJECTS_TABLE)
        .update({**updates, "updated_at": _now_iso()})
        .eq("id", project_id)
        .eq("user_id", user_id)
        .execute()
    )


def create_stakeholder(db, payload: StakeholderCreateSchema):
    response = db.table(STAKEHOLDERS_TABLE).insert(payload.model_dump()).execute()
    return _first(response)


def update_stakeholder(db, stakeholder_id: str, payload: StakeholderUpdateSchema):
    updates = payload.model_dump(exclude_unset=True)
    updates["updated_at"] = _now_iso()
    response = db.table(STAKEHOLDERS_TABLE).update(updates).eq("id", stakeholder_id).execute()
    return _first(response)


def delete_stakeholder(db, stakeholder_id: str):
    db.table(STAKEHOLDERS_TABLE).delete().eq("id", stakeholder_id).execute()
