from fastapi import APIRouter, Depends, HTTPException, Request

from db.supabase import get_db
from middlewares.auth import verify_auth_token
from schemas.coach_schemas import (
    ProjectAIUpdateSchema,
    ProjectCreateSchema,
    ProjectUpdateSchema,
    StakeholderCreateSchema,
    StakeholderUpdateSchema,
)
from services.project_service import (
    apply_ai_update,
    count_project_sessions,
    create_project,
    create_stakeholder,
    delete_project,
    delete_stakeholder,
    get_project,
    list_projects,
    update_project,
    update_stakeholder,
)
from utils.constant import ERROR_MESSAGES

router = APIRouter(
    tags=["Projects"],
    dependencies=[Depends(verify_auth_token)]
)


def _or_404(record):
    if record is None:
        raise HTTPException(status_code=404, detail=ERROR_MESSAGES["not_found"])
    return record


@router.get("/projects")
def get_projects(request: Request, db=Depends(get_db)):
    user_id = request.state.user["id"]
    projects = list_projects(db, user_id)
    return {"success": True, "projects": projects}


@router.post("/projects")
def post_project(request: Request, payload: ProjectCreateSchema, db=Depends(get_db)):
    user_id = request.state.user["id"]
    project = create_project(db, user_id, payload)
    return {"success": True, "project": project}


@router.get("/projects/{project_id}")
def get_project_detail(project_id: str, request: Request, db=Depends(get_db)):
    user_id = request.state.user["id"]
    project = _or_404(get_project(db, user_id, project_id))
    return {"success": True, "project": project}


@router.put("/projects/{project_id}")
def put_project(project_id: str, request: Request, payload: ProjectUpdateSchema, db=Depends(get_db)):
    user_id = request.state.user["id"]
    project = _or_404(update_project(db, user_id, project_id, payload))
    return {"success": True, "project": project}


@router.delete("/projects/{project_id}")
def remove_project(project_id: str, request: Request, db=Depends(get_db)):
    user_id = request.state.user["id"]
    delete_project(db, user_id, project_id)
    return {"success": True}


@router.post("/projects/{project_id}/ai-update")
async def post_ai_update(project_id: str, request: Request, payload: ProjectAIUpdateSchema, db=Depends(get_db)):
    user_id = request.state.user["id"]
    updates = _or_404(await apply_ai_update(db, user_id, project_id, payload))
    return {"success": True, "updates": updates}


@router.get("/projects/{project_id}/session-count")
def get_session_count(project_id: str, db=Depends(get_db)):
    count = count_project_sessions(db, project_id)
    return {"count": count}


@router.post("/stakeholders")
def post_stakeholder(payload: StakeholderCreateSchema, db=Depends(get_db)):
    stakeholder = create_stakeholder(db, payload)
    return {"success": True, "stakeholder": stakeholder}


@router.put("/stakeholders/{stakeholder_id}")
def put_stakeholder(stakeholder_id: str, payload: StakeholderUpdateSchema, db=Depends(get_db)):
    stakeholder = _or_404(update_stakeholder(db, stakeholder_id, payload))
    return {"success": True, "stakeholder": stakeholder}


@router.delete("/stakeholders/{stakeholder_id}")
def remove_stakeholder(stakeholder_id: str, db=Depends(get_db)):
    delete_stakeholder(db, stakeholder_id)
    return {"success": True}
