import logging

from openai import OpenAIError

from schemas.coach_schemas import ChatRequestSchema
from services.llm_service import classify_llm_error, create_chat_completion
from services.prompt_service import build_system_prompt, get_industry_insights
from utils.constant import DEFAULT_COACH_ID

logger = logging.getLogger(__name__)


async def get_coach_reply(payload: ChatRequestSchema) -> str:
    coach_id = payload.mode or DEFAULT_COACH_ID
    profile = payload.user_profile
    insights = get_industry_insights(profile.industry) if profile else None

    logger.info(
        "🤖 Coach chat - coach: %s, messages: %d, profile: %s, industry: %s",
        coach_id,
        len(payload.messages),
        profile.name if profile and profile.name else "No profile",
        profile.industry if profile and profile.industry else "Not specified",
    )

    system_prompt = build_system_prompt(coach_id, profile, insights)
    logger.info("💡 System prompt generated: %d characters", len(system_prompt))

    messages = [{"role": "system", "content": system_prompt}]
    messages.extend({"role": m.role, "content": m.content} for m in payload.messages)

    try:
        return await create_chat_completion(messages, max_tokens=1000, temperature=0.7)
    except OpenAIError as e:
        logger.error("💥 Coach chat failed: %s", e)
        raise classify_llm_error(e) from e
