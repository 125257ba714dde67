"""Provider 基礎介面定義。

定義 Provider Protocol 與回應相關資料結構。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class TokenUsage:
    """Token 使用量資訊（佔位數值，不代表實際計量）。"""

    total: int = 0
    prompt: int = 0
    completion: int = 0

    def to_dict(self) -> dict[str, int]:
        """轉換為 promptfoo 的 tokenUsage 格式。"""
        return {
            'total': self.total,
            'prompt': self.prompt,
            'completion': self.completion,
        }


@dataclass(frozen=True)
class ProviderResponse:
    """Provider 回傳的結果。

    Attributes:
        output: 回應文字（錯誤時以 "Error:" 開頭）
        token_usage: 使用量資訊，錯誤時全部為 0
    """

    output: str
    token_usage: TokenUsage = field(default_factory=TokenUsage)

    @property
    def is_error(self) -> bool:
        """是否為錯誤回應。"""
        return self.output.startswith('Error:')

    def to_dict(self) -> dict[str, Any]:
        """轉換為 promptfoo provider 回應格式。"""
        return {
            'output': self.output,
            'tokenUsage': self.token_usage.to_dict(),
        }


@runtime_checkable
class Provider(Protocol):
    """評估用 Provider 介面。

    與 promptfoo 自訂 provider 的 id / callApi 慣例對應。
    """

    def id(self) -> str:
        """回傳 provider 識別字串。"""
        ...

    async def call_api(self, prompt: str, context: Any = None) -> ProviderResponse:
        """處理一次 prompt 呼叫。

        Args:
            prompt: 評估框架組出的 prompt
            context: 呼叫端的附加資訊（不透明，可忽略）

        Returns:
            回應結果
        """
        ...
