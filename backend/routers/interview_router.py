import logging

from fastapi import APIRouter, Depends

from middlewares.rate_limit import rate_limit
from schemas.coach_schemas import InterviewAnalyzeSchema, InterviewGenerateSchema
from services.fallback_service import emergency_questions
from services.interview_service import analyze_interview, generate_interview_questions

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Interview"])


@router.post("/interview/generate", dependencies=[Depends(rate_limit("interview_generate"))])
async def post_generate_questions(payload: InterviewGenerateSchema):
    try:
        return await generate_interview_questions(payload)
    except Exception:
        # Last line of defence: the interview screen always gets something to ask.
        logger.exception("💥 Interview generation crashed - serving emergency questions")
        questions = emergency_questions()
        return {
            "questions": questions,
            "total": len(questions),
            "fallback": True,
            "error": "システムエラーが発生したため、基本質問を使用しています",
        }


@router.post("/interview/analyze", dependencies=[Depends(rate_limit("interview_analyze"))])
async def post_analyze_interview(payload: InterviewAnalyzeSchema):
    return await analyze_interview(payload)
