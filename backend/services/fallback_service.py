"""Canned interview questions and analysis insights used when the model is unavailable."""

from typing import List, Optional

from schemas.coach_schemas import UserProfileSchema
from utils.constant import (
    DEFAULT_ANALYSIS_INSIGHTS,
    EMERGENCY_QUESTIONS,
    INDUSTRY_FALLBACK_INSIGHTS,
    INDUSTRY_FALLBACK_QUESTIONS,
    UNIVERSAL_FALLBACK_QUESTIONS,
)

MAX_FALLBACK_QUESTIONS = 4
MAX_FALLBACK_INSIGHTS = 8


def select_fallback_questions(industry: Optional[str]) -> List[dict]:
    """Two industry questions plus two universal ones, or universal questions only."""
    industry_specific = INDUSTRY_FALLBACK_QUESTIONS.get(industry, [])
    if industry_specific:
        selected = industry_specific[:2] + UNIVERSAL_FALLBACK_QUESTIONS[:2]
    else:
        selected = UNIVERSAL_FALLBACK_QUESTIONS[:MAX_FALLBACK_QUESTIONS]
    return [dict(question) for question in selected[:MAX_FALLBACK_QUESTIONS]]


def emergency_questions() -> List[dict]:
    return [dict(question) for question in EMERGENCY_QUESTIONS]


def default_analysis_insights() -> List[str]:
    return list(DEFAULT_ANALYSIS_INSIGHTS)


def build_fallback_analysis(profile: UserProfileSchema, qa_pairs: List[dict]) -> List[str]:
    insights = [f"{len(qa_pairs)}項目について詳細な情報を収集しました"]

    insights.extend(INDUSTRY_FALLBACK_INSIGHTS.get(profile.industry, []))

    position = profile.position or ""
    if "部長" in position or "課長" in position:
        insights.append("管理職としてのリーダーシップ課題に焦点を当てたサポートが提供できます")

    if "年功序列が強い" in profile.organization_culture:
        insights.append("年功序列組織での若手・中堅層の活躍推進について具体的なアドバイスが可能です")
    if "トップダウン" in profile.organization_culture:
        insights.append("トップダウン組織での効果的な提案・実行戦略についてサポートできます")

    insights.append("今後のコーチングセッションでは、より具体的で実行可能なアドバイスを提供します")
    return insights[:MAX_FALLBACK_INSIGHTS]
