"""TradeAdvisor 与 LLMService 单元测试。"""

import pytest

from skillswap.services.llm_service import (
    GeminiService,
    LLMService,
    LLMServiceError,
    OpenAIService,
    create_llm_service,
)
from skillswap.services.trade_advisor import (
    EMPTY_SUGGESTION,
    FALLBACK_SUGGESTION,
    TradeAdvisor,
)


class TestTradeAdvisor:
    """测试 TradeAdvisor.suggest()。"""

    def test_returns_llm_text(self, mock_llm, yogi, linguist):
        advisor = TradeAdvisor(llm_service=mock_llm)

        suggestion = advisor.suggest(yogi, linguist)

        assert suggestion == mock_llm.response
        assert mock_llm.call_count == 1

    def test_prompt_names_both_neighbours_and_overlap(self, mock_llm, yogi, linguist):
        TradeAdvisor(llm_service=mock_llm).suggest(yogi, linguist)

        prompt = mock_llm.last_prompt
        assert "Neighbor A (Asha)" in prompt
        assert "Neighbor B (Diego)" in prompt
        assert "Neighbor B teaches Spanish to Neighbor A." in prompt
        assert "under 100 words" in prompt

    def test_overlaps_use_exact_skills(self, yogi, linguist):
        """测试 prompt 中的交集使用精确匹配（"Beginner Yoga" != "Yoga"）。"""
        mine, theirs = TradeAdvisor.overlaps(yogi, linguist)

        assert mine == []
        assert theirs == ["Spanish"]

    def test_failure_returns_fallback(self, mock_llm, yogi, linguist):
        """测试 LLM 失败时返回固定回退文本，不抛异常、不重试。"""
        mock_llm.should_fail = True

        suggestion = TradeAdvisor(llm_service=mock_llm).suggest(yogi, linguist)

        assert suggestion == FALLBACK_SUGGESTION
        assert suggestion == "Error generating suggestion. Try proposing a simple 1-for-1 hour trade!"
        assert mock_llm.call_count == 1

    @pytest.mark.parametrize("empty", ["", "   ", None])
    def test_empty_response(self, mock_llm, yogi, linguist, empty):
        mock_llm.response = empty

        assert TradeAdvisor(llm_service=mock_llm).suggest(yogi, linguist) == EMPTY_SUGGESTION

    def test_uses_llm_service_facade_by_default(self, mock_llm, yogi, linguist):
        LLMService.set_instance(mock_llm)
        try:
            assert TradeAdvisor().suggest(yogi, linguist) == mock_llm.response
        finally:
            LLMService.reset()


class TestLLMServices:
    """测试 LLM 服务的显式凭证配置。"""

    def test_gemini_without_key_raises(self):
        with pytest.raises(LLMServiceError):
            GeminiService(api_key=None).call("hi")

    def test_openai_without_key_raises(self):
        with pytest.raises(LLMServiceError):
            OpenAIService(api_key="").call("hi")

    def test_missing_key_falls_back_in_advisor(self, yogi, linguist):
        advisor = TradeAdvisor(llm_service=GeminiService(api_key=None))

        assert advisor.suggest(yogi, linguist) == FALLBACK_SUGGESTION

    def test_create_llm_service_by_provider(self):
        assert isinstance(create_llm_service("gemini"), GeminiService)
        assert isinstance(create_llm_service("openai"), OpenAIService)

    def test_unknown_provider(self):
        with pytest.raises(LLMServiceError):
            create_llm_service("parrot")
