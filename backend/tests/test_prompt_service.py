"""Tests for system-prompt assembly."""

from schemas.coach_schemas import UserProfileSchema
from services.prompt_service import (
    build_analysis_prompt,
    build_interview_prompt,
    build_system_prompt,
    get_industry_insights,
    get_industry_label,
)
from utils.constant import COACH_PROMPTS, INDUSTRY_KNOWLEDGE_BASE


class TestIndustryLookup:

    def test_known_industry_returns_all_three_lists(self):
        insights = get_industry_insights("it")

        assert insights.cultural_traits == INDUSTRY_KNOWLEDGE_BASE["it"]["cultural_traits"]
        assert insights.common_challenges
        assert insights.success_patterns

    def test_unknown_or_missing_industry(self):
        assert get_industry_insights("aerospace") is None
        assert get_industry_insights(None) is None
        assert get_industry_label("aerospace") == "その他"


class TestBuildSystemPrompt:

    def test_same_inputs_same_prompt(self):
        profile = UserProfileSchema(name="鈴木", industry="retail", goals=["売上拡大"])
        insights = get_industry_insights("retail")

        assert build_system_prompt("sato", profile, insights) == build_system_prompt("sato", profile, insights)

    def test_it_profile_with_scope_creep(self):
        profile = UserProfileSchema(industry="it", main_challenges=["scope creep"])

        prompt = build_system_prompt("tanaka", profile, get_industry_insights("it"))

        assert prompt.startswith(COACH_PROMPTS["tanaka"])
        assert "業界: IT・情報通信業" in prompt
        assert "現在の課題: scope creep" in prompt
        assert "【業界専門知識】" in prompt
        for challenge in INDUSTRY_KNOWLEDGE_BASE["it"]["common_challenges"]:
            assert challenge in prompt

    def test_sections_appear_in_order(self):
        profile = UserProfileSchema(name="佐藤", industry="manufacturer")

        prompt = build_system_prompt("yamada", profile, get_industry_insights("manufacturer"))

        client_at = prompt.index("【クライアント情報】")
        knowledge_at = prompt.index("【業界専門知識】")
        policy_at = prompt.index("【コーチング方針】")
        assert client_at < knowledge_at < policy_at
        assert "佐藤さん" in prompt

    def test_unknown_coach_uses_default_persona(self):
        prompt = build_system_prompt("nobody")

        assert prompt.startswith(COACH_PROMPTS["tanaka"])

    def test_missing_coach_id_uses_default_persona(self):
        assert build_system_prompt(None).startswith(COACH_PROMPTS["tanaka"])

    def test_no_profile_keeps_persona_and_policy_only(self):
        prompt = build_system_prompt("suzuki")

        assert prompt.startswith(COACH_PROMPTS["suzuki"])
        assert "【クライアント情報】" not in prompt
        assert "【業界専門知識】" not in prompt
        assert "【コーチング方針】" in prompt
        assert "お客様" in prompt

    def test_empty_profile_has_no_client_section(self):
        prompt = build_system_prompt("tanaka", UserProfileSchema())

        assert "【クライアント情報】" not in prompt

    def test_unknown_industry_is_left_out(self):
        profile = UserProfileSchema(company="Acme", industry="aerospace")

        prompt = build_system_prompt("tanaka", profile, get_industry_insights("aerospace"))

        assert "会社: Acme" in prompt
        assert "業界:" not in prompt
        assert "【業界専門知識】" not in prompt

    def test_company_size_uses_label(self):
        profile = UserProfileSchema(company_size="51-200")

        prompt = build_system_prompt("tanaka", profile)

        assert "規模: 51-200名（中小企業）" in prompt


class TestInterviewPrompts:

    def test_interview_prompt_marks_missing_values(self):
        prompt = build_interview_prompt(UserProfileSchema(), "it", None, ["昇進"])

        assert "業界: IT・情報通信業" in prompt
        assert "役職: 未設定" in prompt
        assert "課題: 未設定" in prompt
        assert "目標: 昇進" in prompt

    def test_analysis_prompt_numbers_answers(self):
        qa_pairs = [
            {"category": "challenges", "question": "課題は？", "answer": "人手不足", "context": None},
            {"category": "goals", "question": "目標は？", "answer": "離職率半減", "context": None},
        ]

        prompt = build_analysis_prompt(UserProfileSchema(name="高橋"), qa_pairs)

        assert "質問1 [challenges]: 課題は？" in prompt
        assert "回答: 離職率半減" in prompt
        assert "名前: 高橋" in prompt
