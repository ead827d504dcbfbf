import asyncio
import logging
from datetime import datetime, timezone
from typing import List

from openai import APITimeoutError, OpenAIError

import config
from exceptions import LLMServiceError
from schemas.coach_schemas import (
    InterviewAnalyzeSchema,
    InterviewAnswerSchema,
    InterviewGenerateSchema,
    InterviewQuestionSchema,
)
from services.fallback_service import (
    build_fallback_analysis,
    default_analysis_insights,
    select_fallback_questions,
)
from services.llm_service import create_chat_completion, parse_json_content, provider_status
from services.prompt_service import build_analysis_prompt, build_interview_prompt
from utils.constant import (
    ERROR_MESSAGES,
    INTERVIEW_ANALYST_SYSTEM_PROMPT,
    INTERVIEW_GENERATOR_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)

MAX_GENERATED_QUESTIONS = 4
MAX_MAIN_INSIGHTS = 10


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_generated_questions(content: str) -> List[dict]:
    """Keep complete questions only, renumbered generated_01, generated_02, ..."""
    data = parse_json_content(content)
    questions = data.get("questions") or []
    if not isinstance(questions, list):
        return []

    complete = [
        q for q in questions
        if isinstance(q, dict) and q.get("question") and q.get("category") and q.get("context")
    ]
    return [
        {
            "id": f"generated_{index:02d}",
            "category": q["category"],
            "question": q["question"],
            "context": q["context"],
            "priority": q.get("priority") or "medium",
        }
        for index, q in enumerate(complete[:MAX_GENERATED_QUESTIONS], start=1)
    ]


async def generate_interview_questions(payload: InterviewGenerateSchema) -> dict:
    """Ask the model for follow-up interview questions.

    Never fails on the model's account: a timeout, provider error or unusable
    reply returns the static fallback questions for the industry instead.
    """
    logger.info(
        "🎤 Interview question generation - industry: %s, user: %s",
        payload.industry, payload.user_profile.name,
    )
    prompt = build_interview_prompt(
        payload.user_profile, payload.industry, payload.challenges, payload.goals,
    )
    messages = [
        {"role": "system", "content": INTERVIEW_GENERATOR_SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]

    try:
        content = await create_chat_completion(
            messages,
            max_tokens=800,
            temperature=0.5,
            timeout=config.LLM_TIMEOUT_SECONDS,
        )
        questions = parse_generated_questions(content)
        if not questions:
            raise ValueError("No valid questions generated")

        logger.info("✅ Generated %d interview questions", len(questions))
        return {"questions": questions, "total": len(questions), "generatedBy": "ai"}

    except (asyncio.TimeoutError, APITimeoutError):
        logger.warning("⏰ Interview generation timed out after %ss - using fallback", config.LLM_TIMEOUT_SECONDS)
        reason = "timeout"
    except (OpenAIError, ValueError) as e:
        logger.error("💥 Interview generation failed: %s", e)
        reason = "ai_error"

    fallback = select_fallback_questions(payload.industry)
    return {
        "questions": fallback,
        "total": len(fallback),
        "fallback": True,
        "reason": reason,
    }


def build_qa_pairs(
    questions: List[InterviewQuestionSchema],
    answers: List[InterviewAnswerSchema],
) -> List[dict]:
    """Pair each question with its answer; unanswered questions are dropped."""
    answers_by_id = {}
    for answer in answers:
        answers_by_id.setdefault(answer.question_id, answer.answer)

    pairs = []
    for question in questions:
        if question.id not in answers_by_id:
            continue
        pairs.append({
            "category": question.category,
            "question": question.question,
            "answer": answers_by_id[question.id],
            "context": question.context,
        })
    return pairs


def _take_list(parsed: dict, key: str, limit: int) -> list:
    value = parsed.get(key)
    return value[:limit] if isinstance(value, list) else []


async def analyze_interview(payload: InterviewAnalyzeSchema) -> dict:
    profile = payload.user_profile
    qa_pairs = build_qa_pairs(payload.questions, payload.answers)
    logger.info("📊 Interview analysis started - answers: %d", len(payload.answers))

    messages = [
        {"role": "system", "content": INTERVIEW_ANALYST_SYSTEM_PROMPT},
        {"role": "user", "content": build_analysis_prompt(profile, qa_pairs)},
    ]

    try:
        content = await create_chat_completion(messages, max_tokens=2000, temperature=0.7)
    except Exception as e:
        logger.error("💥 Interview analysis failed: %s", e)
        if provider_status(e) == 429:
            raise LLMServiceError(429, ERROR_MESSAGES["ai_busy"], 429) from e
        return {
            "insights": default_analysis_insights(),
            "analysisCompletedAt": _now_iso(),
            "fallback": True,
            "error": "AI分析に失敗したため、基本的な分析結果を提供しています",
        }

    try:
        parsed = parse_json_content(content)
    except ValueError:
        logger.error("💥 Could not parse analysis JSON: %s", content)
        return {
            "insights": build_fallback_analysis(profile, qa_pairs),
            "analysisCompletedAt": _now_iso(),
            "qaCount": len(qa_pairs),
            "fallback": True,
        }

    detailed = {
        "insights": _take_list(parsed, "insights", 8),
        "strengths": _take_list(parsed, "strengths", 5),
        "priorityChallenges": _take_list(parsed, "priorityChallenges", 5),
        "coachingFocus": _take_list(parsed, "coachingFocus", 5),
        "actionableAdvice": _take_list(parsed, "actionableAdvice", 5),
    }
    main_insights = (
        detailed["insights"]
        + [f"重点テーマ: {focus}" for focus in detailed["coachingFocus"]]
        + [f"推奨アクション: {advice}" for advice in detailed["actionableAdvice"]]
    )[:MAX_MAIN_INSIGHTS]

    logger.info("✅ Analysis complete - insights: %d", len(main_insights))
    return {
        "insights": main_insights,
        "detailedAnalysis": detailed,
        "analysisCompletedAt": _now_iso(),
        "qaCount": len(qa_pairs),
    }
