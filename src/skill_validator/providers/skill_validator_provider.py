"""Skill Validator Provider 實作。

離線、可重現的 Provider：驗證 prompt 所參照的 Skill 文件確實被載入，
並依 Skill 與使用者請求回傳固定回應，供 CI 環境在無 API 金鑰時執行評估。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from skill_validator.config import ValidatorConfig
from skill_validator.exceptions import SkillValidationError
from skill_validator.loader import load_skill_document
from skill_validator.prompt import parse_prompt
from skill_validator.providers.base import ProviderResponse, TokenUsage
from skill_validator.rules.registry import RuleRegistry
from skill_validator.rules.setup import create_default_registry

logger = logging.getLogger(__name__)

PROVIDER_ID = 'skill-validator'


class SkillValidatorProvider:
    """Skill 驗證 Provider。

    每次呼叫皆獨立處理，不保留任何狀態；規則註冊表於建構時建立後只讀取。
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        config: ValidatorConfig | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        """初始化 Provider。

        Args:
            options: promptfoo 傳入的 provider 選項（只讀取其中的 config 區塊）
            config: 驗證器配置（優先於 options）
            registry: 自訂規則註冊表（主要用於測試注入）
        """
        options = options or {}
        self._config = config or ValidatorConfig.from_options(options.get('config'))
        self._registry = registry or create_default_registry()

    def id(self) -> str:
        """回傳 provider 識別字串。"""
        return PROVIDER_ID

    @property
    def registry(self) -> RuleRegistry:
        """使用中的規則註冊表。"""
        return self._registry

    async def call_api(self, prompt: str, context: Any = None) -> ProviderResponse:
        """處理一次 prompt 呼叫。

        Args:
            prompt: 評估框架組出的 prompt
            context: 呼叫端附加資訊（忽略）

        Returns:
            回應結果；驗證失敗時 output 以 "Error:" 開頭且用量為 0
        """
        return self.call_api_sync(prompt, context)

    def call_api_sync(self, prompt: str, context: Any = None) -> ProviderResponse:
        """call_api 的同步版本，供沒有 event loop 的呼叫端使用。"""
        try:
            output = self._generate_response(prompt)
        except SkillValidationError as e:
            logger.info('回傳驗證錯誤', extra={'error': e.message})
            return ProviderResponse(output=e.message, token_usage=TokenUsage())

        return ProviderResponse(output=output, token_usage=self._success_usage())

    def _generate_response(self, prompt: str) -> str:
        """解析 prompt、載入文件並選出回應。

        Raises:
            SkillValidationError: 找不到參照、文件不存在或內容過短
        """
        extraction = parse_prompt(prompt, self._config.get_working_root())
        document = load_skill_document(
            extraction.skill_path,
            min_length=self._config.min_content_length,
        )

        match = self._registry.select(document.skill_name, extraction.user_request)
        logger.info(
            '已產生 Skill 回應',
            extra={
                'skill_name': document.skill_name,
                'rule': match.rule_name,
                'content_length': document.length,
            },
        )
        return match.response

    def _success_usage(self) -> TokenUsage:
        """成功回應時的固定用量。"""
        return TokenUsage(
            total=self._config.total_tokens,
            prompt=self._config.prompt_tokens,
            completion=self._config.completion_tokens,
        )
