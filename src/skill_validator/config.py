"""Skill Validator 統一配置模組。

提供驗證器的配置資料結構，支援工作根目錄、最小內容長度與固定用量設定。
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# 預設值
DEFAULT_MIN_CONTENT_LENGTH = 100
DEFAULT_PROMPT_TOKENS = 50
DEFAULT_COMPLETION_TOKENS = 50
WORKING_ROOT_ENV = 'SKILL_VALIDATOR_ROOT'


@dataclass
class ValidatorConfig:
    """驗證器配置。

    Attributes:
        working_root: 解析 file:// 參照時的根目錄（可選，未指定時從環境變數或 cwd 取得）
        min_content_length: Skill 文件被視為「已載入」的最小字元數
        prompt_tokens: 成功回應時回報的 prompt token 數（固定佔位值）
        completion_tokens: 成功回應時回報的 completion token 數（固定佔位值）
    """

    working_root: Path | None = None
    min_content_length: int = DEFAULT_MIN_CONTENT_LENGTH
    prompt_tokens: int = DEFAULT_PROMPT_TOKENS
    completion_tokens: int = DEFAULT_COMPLETION_TOKENS

    def get_working_root(self) -> Path:
        """取得工作根目錄，優先使用明確指定的值，其次環境變數，最後為 cwd。

        每次呼叫都重新判斷，不快取。

        Returns:
            工作根目錄路徑
        """
        if self.working_root is not None:
            return Path(self.working_root)
        env_root = os.environ.get(WORKING_ROOT_ENV)
        if env_root:
            return Path(env_root)
        return Path.cwd()

    @property
    def total_tokens(self) -> int:
        """成功回應時回報的總 token 數。"""
        return self.prompt_tokens + self.completion_tokens

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> ValidatorConfig:
        """從 promptfoo provider 的 config 區塊建立配置。

        可設定的鍵：working_root、min_content_length、prompt_tokens、completion_tokens，未知的鍵會被忽略。

        Args:
            options: provider 設定字典（可為 None）

        Returns:
            ValidatorConfig 實例
        """
        if not options:
            return cls()

        working_root = options.get('working_root')
        return cls(
            working_root=Path(working_root) if working_root else None,
            min_content_length=int(options.get('min_content_length', DEFAULT_MIN_CONTENT_LENGTH)),
            prompt_tokens=int(options.get('prompt_tokens', DEFAULT_PROMPT_TOKENS)),
            completion_tokens=int(options.get('completion_tokens', DEFAULT_COMPLETION_TOKENS)),
        )
