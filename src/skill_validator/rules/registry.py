"""Rule Registry 模組。

管理 Skill 識別名稱到規則表的對應，並以單一比對函數產生回應。
啟動時建立並封存，之後只允許讀取。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from skill_validator.rules.base import RuleMatch, RuleTable

logger = logging.getLogger(__name__)

# 未知 Skill 時的通用回應
GENERIC_RESPONSE = 'Skill content loaded successfully. Ready to apply skill guidance.'


@dataclass
class RuleRegistry:
    """規則表註冊表。"""

    _tables: dict[str, RuleTable] = field(default_factory=lambda: {})
    _sealed: bool = False

    def register(self, table: RuleTable) -> None:
        """註冊規則表。

        Args:
            table: 要註冊的規則表

        Raises:
            RuntimeError: 註冊表已封存
            ValueError: Skill 名稱已存在
        """
        if self._sealed:
            msg = f"註冊表已封存，無法註冊 '{table.skill_name}'"
            raise RuntimeError(msg)

        if table.skill_name in self._tables:
            msg = f"規則表 '{table.skill_name}' 已存在，不允許重複註冊"
            raise ValueError(msg)

        self._tables[table.skill_name] = table
        logger.info('規則表已註冊', extra={'skill_name': table.skill_name})

    def seal(self) -> None:
        """封存註冊表，之後不再接受註冊。"""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        """是否已封存。"""
        return self._sealed

    def list_skills(self) -> list[str]:
        """列出所有已註冊的 Skill 名稱。"""
        return list(self._tables.keys())

    def get(self, skill_name: str) -> RuleTable | None:
        """依名稱取得規則表，不存在時回傳 None。"""
        return self._tables.get(skill_name)

    def select(self, skill_name: str, request: str) -> RuleMatch:
        """依 Skill 名稱與請求選出回應。

        未知的 Skill 一律回傳通用回應。

        Args:
            skill_name: Skill 識別名稱
            request: 使用者請求

        Returns:
            比對結果
        """
        table = self._tables.get(skill_name)
        if table is None:
            logger.debug('未知的 Skill，使用通用回應', extra={'skill_name': skill_name})
            return RuleMatch(('generic',), GENERIC_RESPONSE)

        match = table.select(request)
        logger.debug(
            '規則命中',
            extra={'skill_name': skill_name, 'rule': match.rule_name},
        )
        return match

    def respond(self, skill_name: str, request: str) -> str:
        """依 Skill 名稱與請求產生回應文字。"""
        return self.select(skill_name, request).response
