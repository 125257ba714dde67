"""FastAPI 應用程序入口。

提供 promptfoo ``http`` provider 可呼叫的端點，將請求轉交 SkillValidatorProvider。
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from skill_validator.config import ValidatorConfig
from skill_validator.providers import PROVIDER_ID, SkillValidatorProvider

# 在建立配置之前加載 .env（SKILL_VALIDATOR_ROOT 等）
load_dotenv()

logger = logging.getLogger(__name__)

# --- 全局單例 ---
provider: SkillValidatorProvider | None = None


def _get_provider() -> SkillValidatorProvider:
    """取得 Provider 單例，尚未建立時建立之。"""
    global provider

    if provider is None:
        provider = SkillValidatorProvider(config=ValidatorConfig())
    return provider


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """應用程序生命週期管理。"""
    logger.info('應用程序啟動')

    # 啟動時建立一次規則註冊表
    _get_provider()

    yield

    logger.info('應用程序關閉')


app = FastAPI(title='Skill Validator API', lifespan=lifespan)


# --- 請求模型 ---
class CallRequest(BaseModel):
    """Provider 呼叫請求本體。"""

    prompt: str
    context: Any = None


# --- 端點 ---
@app.post('/api/call')
async def call(request: CallRequest) -> JSONResponse:
    """執行一次 Provider 呼叫。

    驗證失敗時仍回傳 200，錯誤以 "Error:" 開頭的 output 表示。

    Returns:
        promptfoo 格式的回應（output 與 tokenUsage）
    """
    result = await _get_provider().call_api(request.prompt, request.context)
    return JSONResponse(result.to_dict())


@app.get('/api/skills')
async def list_skills() -> JSONResponse:
    """列出已註冊規則表的 Skill。"""
    current = _get_provider()
    return JSONResponse({'provider_id': current.id(), 'skills': current.registry.list_skills()})


@app.get('/health')
async def health() -> JSONResponse:
    """健康檢查端點。"""
    return JSONResponse({'status': 'healthy', 'provider_id': PROVIDER_ID})
