from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelSchema(BaseModel):
    """Accepts both camelCase (browser) and snake_case (store) keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class UserProfileSchema(CamelSchema):
    name: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    organization_culture: List[str] = Field(default_factory=list)
    custom_organization_culture: List[str] = Field(default_factory=list)
    daily_tasks: List[str] = Field(default_factory=list)
    main_challenges: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    personal_values: List[str] = Field(default_factory=list)
    custom_personal_values: List[str] = Field(default_factory=list)
    selected_job_categories: List[str] = Field(default_factory=list)
    job_category_details: Dict[str, str] = Field(default_factory=dict)
    join_date: Optional[str] = None
    job_description: Optional[str] = None
    # Recomputed on save; any client-sent value is ignored.
    profile_completeness: Optional[int] = None

    @field_validator(
        "name", "company", "position", "department", "industry", "company_size",
        "join_date", "job_description", mode="before",
    )
    @classmethod
    def strip_blank(cls, value):
        return _blank_to_none(value)

    @field_validator(
        "organization_culture", "custom_organization_culture", "daily_tasks",
        "main_challenges", "goals", "personal_values", "custom_personal_values",
        "selected_job_categories", mode="before",
    )
    @classmethod
    def none_to_list(cls, value):
        return [] if value is None else value


class IndustryInsightSchema(BaseModel):
    cultural_traits: List[str] = Field(default_factory=list)
    common_challenges: List[str] = Field(default_factory=list)
    success_patterns: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------- chat

class ChatMessageSchema(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequestSchema(CamelSchema):
    messages: List[ChatMessageSchema] = Field(min_length=1)
    mode: Optional[str] = None
    user_profile: Optional[UserProfileSchema] = None


# ---------------------------------------------------------------- interview

class InterviewQuestionSchema(BaseModel):
    id: str
    category: str
    question: str
    context: Optional[str] = None
    priority: str = "medium"


class InterviewAnswerSchema(CamelSchema):
    question_id: str
    answer: str


class InterviewGenerateSchema(CamelSchema):
    user_profile: UserProfileSchema
    industry: str = Field(min_length=1)
    challenges: Optional[List[str]] = None
    goals: Optional[List[str]] = None


class InterviewAnalyzeSchema(CamelSchema):
    user_profile: UserProfileSchema
    questions: List[InterviewQuestionSchema]
    answers: List[InterviewAnswerSchema]


# ---------------------------------------------------------------- projects

class ProjectCreateSchema(BaseModel):
    project_name: str = Field(min_length=1)
    objectives: Optional[str] = None
    project_period: Optional[str] = None
    project_purpose: Optional[str] = None
    project_goals: Optional[str] = None
    user_role: Optional[str] = None
    user_personal_goals: Optional[str] = None
    kpis: Optional[Any] = None
    important_decisions: Optional[Any] = None
    ai_auto_update: bool = True


class ProjectUpdateSchema(BaseModel):
    project_name: Optional[str] = None
    objectives: Optional[str] = None
    project_period: Optional[str] = None
    project_purpose: Optional[str] = None
    project_goals: Optional[str] = None
    user_role: Optional[str] = None
    user_personal_goals: Optional[str] = None
    kpis: Optional[Any] = None
    important_decisions: Optional[Any] = None
    ai_auto_update: Optional[bool] = None


class ProjectAIUpdateSchema(CamelSchema):
    conversation: str = Field(min_length=1)
    session_id: Optional[str] = None


class StakeholderCreateSchema(BaseModel):
    project_id: str
    name: str = Field(min_length=1)
    relationship_type: Optional[str] = None
    involvement_level: Literal["high", "medium", "low"] = "medium"
    attitude: Optional[int] = None
    expectations: Optional[str] = None
    priority_level: Literal["high", "medium", "low"] = "medium"


class StakeholderUpdateSchema(BaseModel):
    name: Optional[str] = None
    relationship_type: Optional[str] = None
    involvement_level: Optional[Literal["high", "medium", "low"]] = None
    attitude: Optional[int] = None
    expectations: Optional[str] = None
    priority_level: Optional[Literal["high", "medium", "low"]] = None


# ---------------------------------------------------------------- sessions

class SessionMessageSchema(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str
    timestamp: Optional[str] = None


class CreateSessionSchema(BaseModel):
    coach_id: str = "tanaka"
    messages: List[SessionMessageSchema] = Field(default_factory=list)
    project_ids: List[str] = Field(default_factory=list)


class UpdateSessionSchema(BaseModel):
    messages: List[SessionMessageSchema]


class SessionHistoryRequestSchema(BaseModel):
    project_id: str
