from schemas.coach_schemas import UserProfileSchema

BASIC_FIELDS = ["name", "company", "position", "department", "industry", "company_size"]

# (field, points per entry)
LIST_FIELD_WEIGHTS = [
    ("organization_culture", 2),
    ("custom_organization_culture", 3),
    ("daily_tasks", 2),
    ("main_challenges", 3),
    ("goals", 3),
    ("personal_values", 2),
    ("custom_personal_values", 3),
    ("selected_job_categories", 3),
    ("job_category_details", 2),
]

# Columns stored in users_profile; everything else only feeds the score.
PROFILE_COLUMNS = [
    "name",
    "company",
    "position",
    "department",
    "industry",
    "company_size",
    "organization_culture",
    "main_challenges",
    "goals",
    "personal_values",
    "profile_completeness",
]


def calculate_profile_completeness(profile: UserProfileSchema) -> int:
    """0-100 score: 10 per filled basic field plus weighted list entries."""
    score = sum(10 for field in BASIC_FIELDS if getattr(profile, field))
    for field, weight in LIST_FIELD_WEIGHTS:
        score += len(getattr(profile, field)) * weight
    if profile.join_date:
        score += 5
    if profile.job_description:
        score += 5
    return min(100, score)


def profile_to_row(profile: UserProfileSchema) -> dict:
    data = profile.model_dump()
    data["profile_completeness"] = calculate_profile_completeness(profile)
    return {column: data[column] for column in PROFILE_COLUMNS}
