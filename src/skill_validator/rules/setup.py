"""規則註冊工廠模組。

提供建立預設規則註冊表的工廠函數。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from skill_validator.rules.base import RuleTable
from skill_validator.rules.registry import RuleRegistry
from skill_validator.rules.tables import BUILTIN_TABLES

logger = logging.getLogger(__name__)


def create_default_registry(extra_tables: Iterable[RuleTable] | None = None) -> RuleRegistry:
    """建立預設的規則註冊表，包含所有內建規則表，建立後即封存。

    Args:
        extra_tables: 額外要註冊的規則表（可選）

    Returns:
        已封存的 RuleRegistry

    Raises:
        ValueError: 額外規則表與內建規則表名稱重複
    """
    registry = RuleRegistry()

    for table in BUILTIN_TABLES:
        registry.register(table)

    for table in extra_tables or ():
        registry.register(table)

    registry.seal()
    logger.info('預設規則註冊表已建立', extra={'skills': registry.list_skills()})
    return registry
