"""Skill 文件載入模組。

讀取並驗證 Skill 文件，每次呼叫都重新檢查檔案，不做快取。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from skill_validator.config import DEFAULT_MIN_CONTENT_LENGTH
from skill_validator.exceptions import DocumentNotFoundError, DocumentTooShortError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillDocument:
    """已載入的 Skill 文件。

    Attributes:
        path: 文件路徑
        content: 文件完整內容（未經轉換）
    """

    path: Path
    content: str

    @property
    def length(self) -> int:
        """內容字元數。"""
        return len(self.content)

    @property
    def skill_name(self) -> str:
        """Skill 識別名稱，即文件所在目錄的名稱。"""
        return self.path.parent.name


def load_skill_document(
    path: Path,
    min_length: int = DEFAULT_MIN_CONTENT_LENGTH,
) -> SkillDocument:
    """載入 Skill 文件並驗證內容長度。

    Args:
        path: 文件路徑
        min_length: 最小字元數

    Returns:
        已載入的文件

    Raises:
        DocumentNotFoundError: 檔案不存在
        DocumentTooShortError: 內容為空或低於最小長度
    """
    if not path.exists():
        logger.warning('Skill 文件不存在', extra={'path': str(path)})
        raise DocumentNotFoundError(path)

    # 保留原始換行（\r\n 計為 2 字元），無效位元組以 U+FFFD 取代
    content = path.read_bytes().decode('utf-8', errors='replace')

    if len(content) < min_length:
        logger.warning(
            'Skill 文件內容過短',
            extra={'path': str(path), 'length': len(content), 'min_length': min_length},
        )
        raise DocumentTooShortError(len(content))

    return SkillDocument(path=path, content=content)
