"""Prompt 解析模組。

從評估框架組出的 prompt 中取出 Skill 文件參照與使用者請求。

Prompt 的標記格式由外部評估框架定義：
- ``file://<路徑>.md``：Skill 文件參照，相對於工作根目錄，只採用第一個
- ``User request: <文字>``：從第一個標記開始直到字串結尾（可跨行）
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from skill_validator.exceptions import NoSkillReferenceError

# file:// 後接非空白字元，並以 .md 結尾
SKILL_FILE_PATTERN = re.compile(r'file://([^\s]+\.md)')

# 標記之後的所有內容（含換行）
USER_REQUEST_PATTERN = re.compile(r'User request: (.+)$', re.DOTALL)


@dataclass(frozen=True)
class PromptExtraction:
    """Prompt 解析結果。

    Attributes:
        skill_path: 解析後的 Skill 文件絕對路徑
        user_request: 使用者請求（無標記時為空字串）
    """

    skill_path: Path
    user_request: str


def extract_skill_reference(prompt: str) -> str | None:
    """取出第一個 file://...md 參照的路徑部分。

    Args:
        prompt: 原始 prompt

    Returns:
        相對路徑字串，找不到時回傳 None
    """
    match = SKILL_FILE_PATTERN.search(prompt)
    if match is None:
        return None
    return match.group(1)


def extract_user_request(prompt: str) -> str:
    """取出 "User request: " 標記之後的文字。

    Args:
        prompt: 原始 prompt

    Returns:
        去除前後空白的請求文字，無標記時回傳空字串
    """
    match = USER_REQUEST_PATTERN.search(prompt)
    if match is None:
        return ''
    return match.group(1).strip()


def resolve_skill_path(reference: str, working_root: Path) -> Path:
    """將參照路徑接到工作根目錄之下。

    開頭的 ``/`` 不會跳出根目錄，``..`` 以字面方式正規化，不解析 symlink。

    Args:
        reference: file:// 之後的路徑
        working_root: 工作根目錄

    Returns:
        正規化後的路徑
    """
    joined = os.path.join(str(working_root), reference.lstrip('/'))
    return Path(os.path.normpath(joined))


def parse_prompt(prompt: str, working_root: Path) -> PromptExtraction:
    """解析 prompt，取得 Skill 文件路徑與使用者請求。

    Args:
        prompt: 原始 prompt
        working_root: 解析相對路徑用的根目錄

    Returns:
        解析結果

    Raises:
        NoSkillReferenceError: prompt 中沒有 file://...md 參照
    """
    reference = extract_skill_reference(prompt)
    if reference is None:
        raise NoSkillReferenceError()

    return PromptExtraction(
        skill_path=resolve_skill_path(reference, working_root),
        user_request=extract_user_request(prompt),
    )
