"""Skill 驗證例外模組。

定義驗證流程中可能發生的例外。例外訊息即為回傳給評估框架的錯誤文字，
由 Provider 層統一轉換為錯誤回應，不會往外拋出。
"""

from __future__ import annotations

from pathlib import Path


class SkillValidationError(Exception):
    """Skill 驗證基礎例外。"""

    message = 'Error: Skill validation failed'

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NoSkillReferenceError(SkillValidationError):
    """Prompt 中找不到 file://...md 參照。"""

    message = 'Error: No skill file found in prompt'


class DocumentNotFoundError(SkillValidationError):
    """解析後的 Skill 文件路徑不存在。"""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Error: Skill file not found at {path}')


class DocumentTooShortError(SkillValidationError):
    """Skill 文件內容為空或低於最小長度。"""

    message = 'Error: Skill content is too short or empty'

    def __init__(self, length: int = 0) -> None:
        self.length = length
        super().__init__()
