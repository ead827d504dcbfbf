"""
System-prompt assembly for the coaching endpoints.

Everything here is plain string building with no I/O, so the same inputs
always produce the same prompt.
"""

from typing import List, Optional

from schemas.coach_schemas import IndustryInsightSchema, UserProfileSchema
from utils.constant import (
    COACH_PROMPTS,
    COMPANY_SIZE_LABELS,
    DEFAULT_COACH_ID,
    INDUSTRY_KNOWLEDGE_BASE,
    INDUSTRY_LABELS,
)

NOT_SET = "未設定"


def get_industry_label(industry: Optional[str]) -> str:
    return INDUSTRY_LABELS.get(industry, INDUSTRY_LABELS["other"])


def get_company_size_label(size: str) -> str:
    return COMPANY_SIZE_LABELS.get(size, size)


def get_industry_insights(industry: Optional[str]) -> Optional[IndustryInsightSchema]:
    record = INDUSTRY_KNOWLEDGE_BASE.get(industry) if industry else None
    if record is None:
        return None
    return IndustryInsightSchema(**record)


def _client_ref(profile: Optional[UserProfileSchema]) -> str:
    if profile and profile.name:
        return f"{profile.name}さん"
    return "お客様"


def _join(items: List[str]) -> str:
    return "、".join(items)


def _numbered(title: str, items: List[str]) -> str:
    if not items:
        return ""
    lines = [f"\n\n＜{title}＞"]
    lines.extend(f"\n{index}. {item}" for index, item in enumerate(items, start=1))
    return "".join(lines)


def _client_section(profile: Optional[UserProfileSchema]) -> str:
    if profile is None:
        return ""

    lines = []
    if profile.name:
        lines.append(f"お名前: {profile.name}さん")
    if profile.company:
        lines.append(f"会社: {profile.company}")
    if profile.position:
        lines.append(f"役職: {profile.position}")
    if profile.department:
        lines.append(f"部署: {profile.department}")
    if profile.industry in INDUSTRY_KNOWLEDGE_BASE:
        lines.append(f"業界: {get_industry_label(profile.industry)}")
    if profile.company_size:
        lines.append(f"規模: {get_company_size_label(profile.company_size)}")
    if profile.organization_culture:
        lines.append(f"組織文化: {_join(profile.organization_culture)}")
    if profile.main_challenges:
        lines.append(f"現在の課題: {_join(profile.main_challenges)}")
    if profile.goals:
        lines.append(f"目標: {_join(profile.goals)}")

    if not lines:
        return ""
    return "\n\n【クライアント情報】" + "".join(f"\n{line}" for line in lines)


def _insight_section(profile: Optional[UserProfileSchema], insights: Optional[IndustryInsightSchema]) -> str:
    if insights is None:
        return ""

    client = _client_ref(profile)
    section = "\n\n【業界専門知識】"
    if profile and profile.industry:
        section += f"\n{client}の業界（{get_industry_label(profile.industry)}）の特徴を踏まえてアドバイスしてください："
    else:
        section += f"\n{client}の業界の特徴を踏まえてアドバイスしてください："

    section += _numbered("組織文化の傾向", insights.cultural_traits)
    section += _numbered("この業界でよくある課題", insights.common_challenges)
    section += _numbered("実績のある解決手法・成功パターン", insights.success_patterns)
    section += f"\n\nこれらの業界知見を参考に、{client}の具体的な状況に応じた実践的で実行可能なアドバイスを提供してください。"
    return section


def _coaching_policy(profile: Optional[UserProfileSchema]) -> str:
    client = _client_ref(profile)
    return (
        "\n\n【コーチング方針】"
        f"\n・{client}の背景を考慮し、親しみやすくパーソナライズされた対応を心がけてください"
        "\n・抽象的なアドバイスではなく、具体的で実行可能なアクションプランを提示してください"
        "\n・業界特有の課題については、実績のある解決手法を積極的に活用してください"
        "\n・相手の立場や気持ちに共感しながら、前向きで建設的な提案を行ってください"
    )


def build_system_prompt(
    coach_id: Optional[str],
    profile: Optional[UserProfileSchema] = None,
    insights: Optional[IndustryInsightSchema] = None,
) -> str:
    """Persona + client information + industry knowledge + coaching policy.

    Unknown coach ids fall back to the default persona. Sections whose source
    data is missing are left out entirely.
    """
    prompt = COACH_PROMPTS.get(coach_id, COACH_PROMPTS[DEFAULT_COACH_ID])
    prompt += _client_section(profile)
    prompt += _insight_section(profile, insights)
    prompt += _coaching_policy(profile)
    return prompt


def build_interview_prompt(
    profile: UserProfileSchema,
    industry: str,
    challenges: Optional[List[str]],
    goals: Optional[List[str]],
) -> str:
    industry_label = INDUSTRY_LABELS.get(industry, industry)
    return f"""
業界: {industry_label}
役職: {profile.position or NOT_SET}
課題: {_join(challenges) if challenges else NOT_SET}
目標: {_join(goals) if goals else NOT_SET}

上記クライアント向けの効果的な追加ヒアリング質問を3個生成してください。
業界特性を踏まえ、実践的で具体的な回答を引き出せる質問にしてください。

JSON形式で回答:
{{
  "questions": [
    {{"id": "q1", "category": "challenges", "question": "質問内容", "context": "簡潔な説明", "priority": "high"}}
  ]
}}
"""


def build_analysis_prompt(profile: UserProfileSchema, qa_pairs: List[dict]) -> str:
    qa_block = "\n".join(
        f"\n質問{index} [{qa['category']}]: {qa['question']}\n回答: {qa['answer']}\n"
        for index, qa in enumerate(qa_pairs, start=1)
    )
    culture = _join(profile.organization_culture) if profile.organization_culture else NOT_SET
    return f"""
あなたは経験豊富なビジネスコーチ・組織コンサルタントです。以下のクライアントのヒアリング結果を分析し、効果的なコーチングのためのインサイトを抽出してください。

【クライアント基本情報】
名前: {profile.name or NOT_SET}
会社: {profile.company or NOT_SET}
役職: {profile.position or NOT_SET}
業界: {get_industry_label(profile.industry) if profile.industry else NOT_SET}
会社規模: {get_company_size_label(profile.company_size) if profile.company_size else NOT_SET}
組織文化: {culture}

【ヒアリング結果】
{qa_block}

【分析の観点】
1. クライアントの強み・リソースの特定
2. 優先すべき課題の特定と根本原因の推測
3. 業界・組織特性を踏まえた課題の背景分析
4. 実現可能な改善アプローチの方向性
5. コーチングで重点的に取り組むべきテーマ

以下のJSON形式で回答してください：
{{
  "insights": [
    "インサイト1: 具体的で実用的な分析結果",
    "インサイト2: 具体的で実用的な分析結果"
  ],
  "strengths": ["強み1", "強み2"],
  "priorityChallenges": ["優先課題1", "優先課題2"],
  "coachingFocus": ["コーチング重点テーマ1", "コーチング重点テーマ2"],
  "actionableAdvice": ["実行可能なアドバイス1", "実行可能なアドバイス2"]
}}
"""


def build_project_update_prompt(project_json: str, conversation: str) -> str:
    return f"""
以下の会話からプロジェクトに関する新しい情報を抽出してください。
抽出する情報：
- ゴールの変更や追加
- 新しいステークホルダー
- 重要な意思決定
- KPIの更新
- プロジェクトの進捗

現在のプロジェクト情報：
{project_json}

会話内容：
{conversation}

JSON形式で、更新が必要なフィールドとその新しい値を返してください。
更新が不要な場合は空のオブジェクトを返してください。
"""
