"""promptfoo Python provider 進入點。

在 promptfoo 設定中以 ``id: 'file://src/skill_validator/promptfoo.py'`` 引用，
promptfoo 會呼叫模組層級的 ``call_api(prompt, options, context)``。
"""

from __future__ import annotations

from typing import Any

from skill_validator.providers.skill_validator_provider import SkillValidatorProvider
from skill_validator.rules.setup import create_default_registry

# 規則註冊表只在載入時建立一次
_REGISTRY = create_default_registry()


def call_api(prompt: str, options: dict[str, Any] | None = None, context: Any = None) -> dict[str, Any]:
    """處理一次 promptfoo 呼叫。

    Args:
        prompt: 已渲染的 prompt
        options: provider 選項（可含 config 區塊）
        context: promptfoo 的呼叫情境（忽略）

    Returns:
        promptfoo provider 回應字典（output 與 tokenUsage）
    """
    provider = SkillValidatorProvider(options=options, registry=_REGISTRY)
    return provider.call_api_sync(prompt, context).to_dict()
