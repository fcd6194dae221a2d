from unittest.mock import AsyncMock, patch

import pytest

from config import settings
from models.schemas.advice import VisaAdvice
from services import advisor, gemini_client
from services.prompt_builder import build_advice_prompt
from services.scoring.engine import score

SAMPLE_ADVICE = {
    "summary": "Strong candidate for the Blue Card.",
    "strengths": ["Verified master's degree"],
    "weaknesses": ["No German certificate"],
    "suggestions": ["Take a Goethe B1 exam"],
}


@pytest.fixture
def evaluation(strong_profile):
    return score("Germany", "EU Blue Card", strong_profile)


@pytest.mark.asyncio
@patch("services.gemini_client.generate_json", new_callable=AsyncMock)
async def test_advise_returns_advice(mock_generate, strong_profile, evaluation):
    mock_generate.return_value = SAMPLE_ADVICE
    with patch.object(settings, "advisor_enabled", True):
        advice = await advisor.advise(strong_profile, evaluation)
    assert isinstance(advice, VisaAdvice)
    assert advice.suggestions == ["Take a Goethe B1 exam"]
    mock_generate.assert_awaited_once()


@pytest.mark.asyncio
@patch("services.gemini_client.generate_json", new_callable=AsyncMock)
async def test_advise_does_not_change_result(mock_generate, strong_profile, evaluation):
    mock_generate.return_value = SAMPLE_ADVICE
    before = evaluation.model_dump_json()
    with patch.object(settings, "advisor_enabled", True):
        await advisor.advise(strong_profile, evaluation)
    assert evaluation.model_dump_json() == before


@pytest.mark.asyncio
@patch("services.gemini_client.generate_json", new_callable=AsyncMock)
async def test_advise_none_when_llm_fails(mock_generate, strong_profile, evaluation):
    mock_generate.return_value = None
    with patch.object(settings, "advisor_enabled", True):
        assert await advisor.advise(strong_profile, evaluation) is None


@pytest.mark.asyncio
@patch("services.gemini_client.generate_json", new_callable=AsyncMock)
async def test_advise_none_on_bad_shape(mock_generate, strong_profile, evaluation):
    mock_generate.return_value = {"strengths": "not a list"}
    with patch.object(settings, "advisor_enabled", True):
        assert await advisor.advise(strong_profile, evaluation) is None


@pytest.mark.asyncio
@patch("services.gemini_client.generate_json", new_callable=AsyncMock)
async def test_advise_disabled(mock_generate, strong_profile, evaluation):
    with patch.object(settings, "advisor_enabled", False):
        assert await advisor.advise(strong_profile, evaluation) is None
    mock_generate.assert_not_called()


@pytest.mark.asyncio
async def test_generate_json_without_key():
    with patch.object(settings, "gemini_api_key", ""):
        assert gemini_client.get_client() is None
        assert await gemini_client.generate_json("prompt") is None


def test_is_configured():
    with patch.object(settings, "gemini_api_key", ""):
        assert advisor.is_configured() is False
    with patch.object(settings, "gemini_api_key", "key"), patch.object(settings, "advisor_enabled", True):
        assert advisor.is_configured() is True


def test_strip_code_fences():
    assert gemini_client.strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert gemini_client.strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


def test_advice_prompt_contains_evaluation(strong_profile, evaluation):
    prompt = build_advice_prompt(strong_profile, evaluation)
    assert "EU Blue Card" in prompt
    assert "Germany" in prompt
    assert f"{evaluation.normalized_score}/100" in prompt
    assert "Do NOT produce a new score" in prompt
    assert "Software Engineer" in prompt
