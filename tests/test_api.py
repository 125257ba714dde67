"""Skill Validator HTTP API 單元測試。

使用 httpx AsyncClient + ASGITransport 直接呼叫 FastAPI 應用程序。
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import allure
import pytest
from httpx import ASGITransport, AsyncClient

from skill_validator.config import ValidatorConfig
from skill_validator.providers import SkillValidatorProvider
from skill_validator_app.main import app

# --- 測試用常數 ---
CALL_URL = '/api/call'
SKILLS_URL = '/api/skills'
HEALTH_URL = '/health'


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url='http://test')


@allure.feature('Skill Validator HTTP API')
@allure.story('POST /api/call 應轉交 Provider 並回傳 promptfoo 格式')
class TestCallEndpoint:
    """測試呼叫端點 — 對應 Rule: HTTP 端點應回傳 Provider 結果"""

    @pytest.mark.asyncio
    async def test_call_returns_skill_response(self, skills_root: Path, make_prompt: Callable[..., str]) -> None:
        """已知 Skill 的請求回傳對應的固定回應。"""
        provider = SkillValidatorProvider(config=ValidatorConfig(working_root=skills_root))

        with patch('skill_validator_app.main.provider', provider):
            async with _client() as client:
                response = await client.post(
                    CALL_URL,
                    json={'prompt': make_prompt('test-driven-development', 'legacy code'), 'context': {'vars': {}}},
                )

        assert response.status_code == 200
        body = response.json()
        assert body['output'].startswith('When working with legacy code')
        assert body['tokenUsage'] == {'total': 100, 'prompt': 50, 'completion': 50}

    @pytest.mark.asyncio
    async def test_call_error_is_textual(self, skills_root: Path) -> None:
        """驗證失敗仍回傳 200，錯誤放在 output。"""
        provider = SkillValidatorProvider(config=ValidatorConfig(working_root=skills_root))

        with patch('skill_validator_app.main.provider', provider):
            async with _client() as client:
                response = await client.post(CALL_URL, json={'prompt': 'no skill here'})

        assert response.status_code == 200
        assert response.json() == {
            'output': 'Error: No skill file found in prompt',
            'tokenUsage': {'total': 0, 'prompt': 0, 'completion': 0},
        }

    @pytest.mark.asyncio
    async def test_call_requires_prompt(self) -> None:
        """缺少 prompt 欄位時回傳 422。"""
        async with _client() as client:
            response = await client.post(CALL_URL, json={'context': None})

        assert response.status_code == 422


@allure.feature('Skill Validator HTTP API')
@allure.story('查詢端點')
class TestInfoEndpoints:
    """測試查詢端點。"""

    @pytest.mark.asyncio
    async def test_list_skills(self) -> None:
        """列出內建規則表。"""
        with patch('skill_validator_app.main.provider', SkillValidatorProvider()):
            async with _client() as client:
                response = await client.get(SKILLS_URL)

        assert response.status_code == 200
        assert response.json() == {
            'provider_id': 'skill-validator',
            'skills': ['test-driven-development', 'jira-cli'],
        }

    @pytest.mark.asyncio
    async def test_health(self) -> None:
        """健康檢查。"""
        async with _client() as client:
            response = await client.get(HEALTH_URL)

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'
